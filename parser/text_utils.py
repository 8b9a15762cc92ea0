"""Text utility functions for the arrival and name-pool parsers.

Whitespace and case handling here is ASCII-only so results never depend on
the interpreter's Unicode tables or the host locale.
"""

import string
from typing import List

ASCII_WHITESPACE = " \t\n\r\f\v"

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_WHITESPACE_TO_SPACE = str.maketrans({ch: " " for ch in ASCII_WHITESPACE})


def trim(text: str) -> str:
    """Remove leading and trailing ASCII whitespace."""
    return text.strip(ASCII_WHITESPACE)


def to_lower(text: str) -> str:
    """Lowercase ASCII letters, leaving every other character unchanged."""
    return text.translate(_ASCII_LOWER)


def split(text: str, delimiter: str) -> List[str]:
    """
    Split text on every non-overlapping occurrence of delimiter.

    Args:
        text: Input text
        delimiter: Exact, non-empty separator string

    Returns:
        List of segments. Interior empty segments are kept; one trailing
        empty segment (text ending with the delimiter) is dropped, so an
        empty input yields an empty list.
    """
    parts = text.split(delimiter)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def tokenize(text: str) -> List[str]:
    """Split text on runs of ASCII whitespace."""
    return [token for token in text.translate(_WHITESPACE_TO_SPACE).split(" ") if token]
