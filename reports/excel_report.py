"""Excel export of the population, one row per animal in report order."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from loguru import logger

from core.exceptions import ResourceError
from zoo.animal import Animal
from .population_report import PopulationReport

SHEET_TITLE = "Population"

HEADER = [
    "Habitat", "ID", "Name", "Species", "Age", "Sex", "Color",
    "Weight (lb)", "Origin", "Arrival Date", "Birth Date", "Social Group",
]


class ExcelPopulationExporter:
    def __init__(self, file_path: str) -> None:
        self.file_path = Path(file_path).absolute()

    def _rows(self, animals: Iterable[Animal]) -> List[list]:
        rows = []
        for habitat, members in PopulationReport(animals).sections():
            for animal in members:
                rows.append([
                    habitat,
                    animal.unique_id,
                    animal.name,
                    animal.species.value,
                    animal.age,
                    animal.sex,
                    animal.color,
                    animal.weight,
                    animal.origin,
                    animal.arrival_date,
                    animal.birth_date,
                    animal.social_group_label,
                ])
        return rows

    def build(self, animals: Iterable[Animal]):
        """Fill an in-memory workbook without touching the file system.

        Raises:
            ResourceError: If a value cannot be stored in a cell, such as
                text carrying control characters
        """
        from openpyxl import Workbook  # type: ignore
        from openpyxl.utils.exceptions import IllegalCharacterError  # type: ignore

        wb = Workbook()
        ws = wb.active
        ws.title = SHEET_TITLE
        ws.append(HEADER)
        try:
            for row in self._rows(animals):
                ws.append(row)
        except (IllegalCharacterError, ValueError) as e:
            raise ResourceError(f"Unable to write workbook {self.file_path}: {e}") from e
        return wb

    def save(self, wb) -> Path:
        """Write a built workbook, replacing any existing file.

        Raises:
            ResourceError: If the workbook cannot be written
        """
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            wb.save(self.file_path)
        except (OSError, ValueError) as e:
            raise ResourceError(f"Unable to write workbook {self.file_path}: {e}") from e

        logger.info(f"[excel] Exported {wb.active.max_row - 1} animals to {self.file_path}")
        return self.file_path

    def export(self, animals: Iterable[Animal]) -> Path:
        """Build and save the workbook in one step."""
        return self.save(self.build(animals))
