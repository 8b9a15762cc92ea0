"""
Population Report Builder

Groups finished animals by habitat and renders the plain-text population
report. Habitats are always printed in the fixed order Hyena, Lion, Tiger,
Bear, including habitats that received no animals.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from zoo.animal import Animal
from zoo.species import HABITAT_ORDER


class PopulationReport:
    """Accumulates animals by habitat in arrival order and renders the report."""

    def __init__(self, animals: Iterable[Animal] = ()) -> None:
        self._by_habitat: Dict[str, List[Animal]] = {habitat: [] for habitat in HABITAT_ORDER}
        for animal in animals:
            self.add(animal)

    def add(self, animal: Animal) -> None:
        self._by_habitat.setdefault(animal.habitat_name, []).append(animal)

    def sections(self) -> List[Tuple[str, List[Animal]]]:
        """Return ``(habitat, animals)`` pairs in display order."""
        return [(habitat, list(self._by_habitat[habitat])) for habitat in HABITAT_ORDER]

    def counts(self) -> Dict[str, int]:
        return {habitat: len(animals) for habitat, animals in self.sections()}

    def render(self) -> str:
        lines: List[str] = []
        for habitat, animals in self.sections():
            lines.append(f"{habitat} ({len(animals)})")
            for animal in animals:
                lines.append(f"  - {animal.report_line()} | {animal.social_group_label}")
            lines.append("")
        return "\n".join(lines) + "\n"


def build_population_report(animals: Iterable[Animal]) -> str:
    """Render the population report for animals given in arrival order."""
    return PopulationReport(animals).render()
