"""
Arrival Row Parser for the Zoo Intake Application.

This module turns one free-text arrival sentence into a structured row of raw
fields. The arrivals log is written by people, not machines, so the grammar is
a positional, keyword-driven heuristic rather than a formal one:

    2024-04-02, 5 years old male hyena, born in winter, brown color, 90 pounds, from Nairobi, Kenya

Classes:
    ArrivalRow: Raw fields extracted from one arrival sentence
    ArrivalRowParser: Parser applying the field-splitting rules

Field Rules:
    0. Arrival date text, passed through uninterpreted
    1. ``<age> years old <sex> <species>``: first token is the age, last token
       the species, second-to-last the sex
    2. Birth season: the word after ``born in``, else the whole segment
    3. Color: everything before `` color``, else the whole segment
    4. Weight: the leading integer of the text before the first space
       (``90lbs`` reads as 90)
    5+. Origin: remaining segments rejoined, leading ``from`` removed

The splitting rules are matched literally (for example only `` color`` with a
leading space ends the color) so that logs which parsed before keep parsing the
same way.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from loguru import logger

from core.exceptions import FormatError
from .text_utils import split, tokenize, to_lower, trim

FIELD_DELIMITER = ", "
MIN_FIELD_COUNT = 6
MIN_DESCRIPTION_TOKENS = 5  # <age> years old <sex> <species>

UNKNOWN_SEASON = "unknown"

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass
class ArrivalRow:
    """
    Raw facts pulled from one line of the arrivals log.

    Attributes:
        arrival_date: Arrival date text, validated later when the birth date is estimated
        age: Age in whole years
        sex: Lowercased sex token
        species: Lowercased species token, not yet checked against the closed set
        birth_season: Season token, or ``"unknown"``
        color: Color description
        weight: Weight in pounds
        origin: Free-text place of origin
    """
    arrival_date: str
    age: int
    sex: str
    species: str
    birth_season: str
    color: str
    weight: int
    origin: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'arrival_date': self.arrival_date,
            'age': self.age,
            'sex': self.sex,
            'species': self.species,
            'birth_season': self.birth_season,
            'color': self.color,
            'weight': self.weight,
            'origin': self.origin,
        }


class ArrivalRowParser:
    """
    Parser for free-text arrival sentences.

    The parser is stateless; one instance can parse any number of lines.

    Usage:
        parser = ArrivalRowParser()
        row = parser.parse("2024-04-02, 5 years old male hyena, born in winter, "
                           "brown color, 90 pounds, from Nairobi, Kenya")
        row.species  # "hyena"
    """

    def parse(self, line: str) -> ArrivalRow:
        """
        Parse one trimmed, non-empty arrival line.

        Args:
            line: Arrival sentence

        Returns:
            ArrivalRow: Structured raw fields

        Raises:
            FormatError: If the line has fewer than six comma-separated parts,
                the age/sex/species segment is short, or an integer is malformed
        """
        parts = split(line, FIELD_DELIMITER)
        if len(parts) < MIN_FIELD_COUNT:
            raise FormatError(f"Malformed arrival entry: {line}")

        age, sex, species = self._parse_description(parts[1])

        row = ArrivalRow(
            arrival_date=trim(parts[0]),
            age=age,
            sex=sex,
            species=species,
            birth_season=self._parse_season(parts[2]),
            color=self._parse_color(parts[3]),
            weight=self._parse_weight(parts[4], line),
            origin=self._parse_origin(parts[MIN_FIELD_COUNT - 1:]),
        )
        logger.debug(f"Parsed arrival row: {row}")
        return row

    def _parse_description(self, section: str) -> Tuple[int, str, str]:
        """Read ``<age> years old <sex> <species>``; extra middle tokens are ignored."""
        tokens = tokenize(section)
        if len(tokens) < MIN_DESCRIPTION_TOKENS:
            raise FormatError(f"Unable to parse age/sex/species segment: {section}")
        age = _parse_int(tokens[0], "age", section)
        return age, to_lower(tokens[-2]), to_lower(tokens[-1])

    def _parse_season(self, section: str) -> str:
        lowered = to_lower(section)
        marker = lowered.find("born in")
        if marker != -1:
            following = tokenize(lowered[marker + len("born in"):])
            season = following[0] if following else ""
        else:
            season = trim(section)
        return season or UNKNOWN_SEASON

    def _parse_color(self, section: str) -> str:
        color_pos = to_lower(section).find(" color")
        if color_pos != -1:
            return trim(section[:color_pos])
        return trim(section)

    def _parse_weight(self, section: str, line: str) -> int:
        space_pos = section.find(" ")
        token = section[:space_pos] if space_pos != -1 else section
        match = _INTEGER_PATTERN.match(token)
        if match is None:
            raise FormatError(f"Invalid weight '{token}' in: {line}")
        return int(match.group())

    def _parse_origin(self, sections: List[str]) -> str:
        origin = FIELD_DELIMITER.join(sections)
        if to_lower(origin).startswith("from "):
            origin = origin[len("from "):]
        return trim(origin)


def _parse_int(token: str, field: str, context: str) -> int:
    if not _INTEGER_PATTERN.fullmatch(token):
        raise FormatError(f"Invalid {field} '{token}' in: {context}")
    return int(token)


_default_parser = ArrivalRowParser()


def parse_arrival_row(line: str) -> ArrivalRow:
    """Parse a line with the shared module-level parser."""
    return _default_parser.parse(line)
