"""Parsing and formatting of YYYY-MM-DD calendar dates."""
from __future__ import annotations

import re
from dataclasses import dataclass

from core.exceptions import FormatError

_ISO_DATE_PATTERN = re.compile(r"([0-9]+)-([0-9]+)-([0-9]+)")


@dataclass(frozen=True)
class IsoDate:
    """A calendar date broken into year, month and day numbers."""
    year: int
    month: int
    day: int

    def __str__(self) -> str:
        return format_iso_date(self)


def parse_iso_date(text: str) -> IsoDate:
    """
    Parse text shaped like ``2024-04-02``.

    Components may have any digit width (``2024-4-2`` is accepted).

    Raises:
        FormatError: If the separators are missing or a component is not numeric
    """
    match = _ISO_DATE_PATTERN.fullmatch(text)
    if match is None:
        raise FormatError(f"Invalid ISO date: {text}")
    year, month, day = (int(group) for group in match.groups())
    return IsoDate(year=year, month=month, day=day)


def format_iso_date(date: IsoDate) -> str:
    """Render a date as zero-padded ``YYYY-MM-DD``."""
    return f"{date.year:04d}-{date.month:02d}-{date.day:02d}"
