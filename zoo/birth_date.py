"""Birth-date estimation from age, birth season and arrival date."""
from __future__ import annotations

from typing import Dict, Tuple

from parser.date_codec import IsoDate, format_iso_date, parse_iso_date
from parser.text_utils import to_lower

# Mid-month day used for each season.
SEASON_TO_MONTH_DAY: Dict[str, Tuple[int, int]] = {
    "spring": (3, 15),
    "summer": (6, 15),
    "fall": (9, 15),
    "autumn": (9, 15),
    "winter": (12, 15),
}


def estimate_birth_date(age: int, season: str, arrival_date: str) -> str:
    """
    Estimate a birth date as ``YYYY-MM-DD``.

    The year is the arrival year minus the age. A known season fixes the
    month and day; an unknown one reuses the arrival month and day.

    Raises:
        FormatError: If the arrival date is not a valid ISO date
    """
    arrival = parse_iso_date(arrival_date)
    month, day = SEASON_TO_MONTH_DAY.get(to_lower(season), (arrival.month, arrival.day))
    return format_iso_date(IsoDate(year=arrival.year - age, month=month, day=day))
