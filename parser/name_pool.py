"""Parsing of the species name-pool document."""
from __future__ import annotations

from typing import Dict, Iterable, List

from core.exceptions import FormatError
from .text_utils import split, to_lower, trim

NamePool = Dict[str, List[str]]


def parse_name_pool(lines: Iterable[str]) -> NamePool:
    """
    Build the species -> names mapping from ``<species>: <name1>, <name2>`` lines.

    Blank lines are skipped. Species keys are lowercased; names are trimmed
    and empty names dropped. A repeated species line replaces the earlier list.

    Raises:
        FormatError: If a non-blank line has no ``:``
    """
    pool: NamePool = {}
    for raw_line in lines:
        line = trim(raw_line)
        if not line:
            continue

        species, colon, values = line.partition(":")
        if not colon:
            raise FormatError(f"Expected ':' in name line: {line}")

        names = [trim(token) for token in split(trim(values), ",")]
        pool[to_lower(trim(species))] = [name for name in names if name]
    return pool
