import pytest

from core.exceptions import FormatError
from zoo.birth_date import estimate_birth_date


@pytest.mark.parametrize("season,expected", [
    ("spring", "2019-03-15"),
    ("summer", "2019-06-15"),
    ("fall", "2019-09-15"),
    ("autumn", "2019-09-15"),
    ("winter", "2019-12-15"),
    ("Winter", "2019-12-15"),
])
def test_known_seasons(season, expected):
    assert estimate_birth_date(5, season, "2024-04-02") == expected


def test_unknown_season_reuses_arrival_month_and_day():
    assert estimate_birth_date(5, "martian", "2024-04-02") == "2019-04-02"


def test_zero_age():
    assert estimate_birth_date(0, "unknown", "2024-4-2") == "2024-04-02"


def test_malformed_arrival_date():
    with pytest.raises(FormatError):
        estimate_birth_date(5, "winter", "April 2, 2024")
