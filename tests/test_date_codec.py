import pytest

from core.exceptions import FormatError
from parser.date_codec import IsoDate, format_iso_date, parse_iso_date


def test_parse_iso_date():
    assert parse_iso_date("2024-04-02") == IsoDate(2024, 4, 2)


def test_parse_accepts_variable_width_components():
    assert parse_iso_date("2024-4-2") == IsoDate(2024, 4, 2)


def test_format_zero_pads():
    assert format_iso_date(IsoDate(19, 3, 5)) == "0019-03-05"


@pytest.mark.parametrize("text", ["2019-12-15", "0001-01-01", "2024-02-29"])
def test_format_parse_is_identity_for_padded_text(text):
    assert format_iso_date(parse_iso_date(text)) == text


def test_normalizes_unpadded_text():
    assert format_iso_date(parse_iso_date("2024-4-2")) == "2024-04-02"


def test_str_uses_iso_format():
    assert str(IsoDate(2024, 4, 2)) == "2024-04-02"


@pytest.mark.parametrize("text", ["2024/04/02", "2024-04", "April 2, 2024", "2024-0a-02", "", "2024-04-02 "])
def test_parse_rejects_malformed_dates(text):
    with pytest.raises(FormatError):
        parse_iso_date(text)


@pytest.mark.parametrize("text", ["٢٠٢٤-04-02", "2024-０４-02", "2024-04-০২"])
def test_parse_rejects_non_ascii_digits(text):
    with pytest.raises(FormatError):
        parse_iso_date(text)
