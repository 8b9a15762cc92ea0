"""
Arrival Parser Package for the Zoo Intake Application.

This package turns the two text inputs of an intake run into structured data:
the free-text arrivals log and the species name pool. It also holds the small
text and date helpers every parser shares.

Main Components:
    ArrivalRowParser: Splits one arrival sentence into raw fields
    ArrivalRow: Raw fields of one arrival, before any derived facts exist
    parse_name_pool: Reads ``<species>: <name>, <name>`` lines
    IsoDate: Calendar date value with YYYY-MM-DD parsing and formatting
    text_utils: ASCII trimming, lowercasing, splitting and tokenizing

Design Philosophy:
    - Literal, position-based rules that match the hand-written log format
    - Fail fast: a malformed line raises FormatError instead of being skipped
    - Locale-independent text handling
"""

from __future__ import annotations

from .arrival_parser import ArrivalRow, ArrivalRowParser, parse_arrival_row
from .date_codec import IsoDate, format_iso_date, parse_iso_date
from .name_pool import NamePool, parse_name_pool

__all__ = [
    # Arrival rows
    "ArrivalRow",
    "ArrivalRowParser",
    "parse_arrival_row",

    # Dates
    "IsoDate",
    "parse_iso_date",
    "format_iso_date",

    # Name pool
    "NamePool",
    "parse_name_pool",
]
