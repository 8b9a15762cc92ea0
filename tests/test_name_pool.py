import pytest

from core.exceptions import FormatError
from parser.name_pool import parse_name_pool


def test_parses_species_lines():
    pool = parse_name_pool([
        "Hyena: Shenzi, Banzai, Ed",
        "",
        "  LION :  Scar ,Mufasa  ",
    ])
    assert pool == {"hyena": ["Shenzi", "Banzai", "Ed"], "lion": ["Scar", "Mufasa"]}


def test_empty_names_are_dropped():
    assert parse_name_pool(["bear: Yogi, , Smokey,"]) == {"bear": ["Yogi", "Smokey"]}


def test_species_without_names():
    assert parse_name_pool(["tiger:"]) == {"tiger": []}


def test_later_line_replaces_species():
    assert parse_name_pool(["bear: Yogi", "Bear: Baloo"]) == {"bear": ["Baloo"]}


def test_line_without_colon_fails():
    with pytest.raises(FormatError):
        parse_name_pool(["hyena Shenzi, Banzai"])
