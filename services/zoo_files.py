"""File access for the name pool, the arrivals log and the report sink."""
from __future__ import annotations

from pathlib import Path
from typing import List

from loguru import logger

from core.exceptions import ResourceError
from parser.name_pool import NamePool, parse_name_pool


def _read_lines(path: Path, description: str) -> List[str]:
    """Split on ``\\n`` only; other control characters stay inside the line."""
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceError(f"Unable to open {description}: {path}") from e

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def load_name_pool(path: str) -> NamePool:
    """Read the name-pool file into a species -> names mapping.

    Raises:
        ResourceError: If the file cannot be read
        FormatError: If a line is malformed
    """
    pool = parse_name_pool(_read_lines(Path(path), "name file"))
    logger.info(f"Loaded name pool for {len(pool)} species from {path}")
    return pool


def read_arrival_lines(path: str) -> List[str]:
    """Return the raw lines of the arrivals log in file order."""
    lines = _read_lines(Path(path), "arrivals file")
    logger.debug(f"Read {len(lines)} lines from {path}")
    return lines


class ReportWriter:
    """Writes the rendered report text to a file, once per run."""

    def __init__(self, file_path: str) -> None:
        self.file_path = Path(file_path)

    def write(self, text: str) -> Path:
        """
        Raises:
            ResourceError: If the report file cannot be created
        """
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.file_path, 'w', encoding='utf-8') as f:
                f.write(text)
        except OSError as e:
            raise ResourceError(f"Unable to open report for writing: {self.file_path}") from e
        return self.file_path
