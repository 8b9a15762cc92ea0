"""
Zoo Intake for the Zoo Intake Application.

This module provides the ZooIntake facade that turns arrival sentences into
finished Animal records. It coordinates the row parser, the sequential
allocators and the birth-date estimator, and owns the per-run state they
advance.

Classes:
    IntakeState: Mutable run context (ID counters, name pool, species counts)
    ZooIntake: Facade processing arrival lines in order

Processing Pipeline (per line):
    1. Trim; blank lines are skipped
    2. Parse the sentence into an ArrivalRow
    3. Allocate the unique ID (rejects unsupported species before anything else)
    4. Take the next name from the pool
    5. Estimate the birth date (validates the arrival date)
    6. Pick the social group from the species occurrence index
    7. Build the Animal and advance the species occurrence count

Any error aborts the run: there is no skip-and-continue mode.
"""
from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from loguru import logger

from core.error_handler import log_execution_time
from parser.arrival_parser import ArrivalRowParser
from parser.name_pool import NamePool
from parser.text_utils import trim
from .allocators import next_group, next_id, next_name
from .animal import Animal
from .birth_date import estimate_birth_date
from .species import resolve_species


@dataclass
class IntakeState:
    """
    State advanced while processing one arrivals log.

    Attributes:
        name_pool: Species -> unused names, consumed front to back
        id_counters: Prefix -> number of IDs already issued
        species_counts: Species -> number of animals already processed
    """
    name_pool: NamePool = field(default_factory=dict)
    id_counters: Dict[str, int] = field(default_factory=dict)
    species_counts: Dict[str, int] = field(default_factory=dict)


class ZooIntake:
    """
    Facade turning arrival lines into Animal records.

    Not safe for concurrent use: lines must be processed by a single caller
    in file order.

    Usage:
        intake = ZooIntake({"hyena": ["Kiba"]})
        animals = intake.process_lines(lines)
    """

    def __init__(self, name_pool: Optional[NamePool] = None,
                 row_parser: Optional[ArrivalRowParser] = None) -> None:
        """
        Args:
            name_pool: Loaded name pool; copied so the caller's mapping is untouched
            row_parser: Arrival parser (a default one is created if None)
        """
        self.state = IntakeState(name_pool=copy.deepcopy(name_pool or {}))
        self.row_parser = row_parser or ArrivalRowParser()

        self.stats = {
            'lines_read': 0,
            'blank_lines': 0,
            'animals_created': 0,
        }

    def process_line(self, line: str) -> Optional[Animal]:
        """
        Turn one arrival line into an Animal.

        Returns:
            The new Animal, or None for a blank line

        Raises:
            FormatError: Malformed sentence or arrival date
            UnsupportedSpeciesError: Species outside the closed set
        """
        self.stats['lines_read'] += 1
        text = trim(line)
        if not text:
            self.stats['blank_lines'] += 1
            return None

        row = self.row_parser.parse(text)
        unique_id = next_id(row.species, self.state.id_counters)
        species = resolve_species(row.species)
        name = next_name(self.state.name_pool, row.species)
        birth_date = estimate_birth_date(row.age, row.birth_season, row.arrival_date)
        occurrence = self.state.species_counts.get(row.species, 0)
        group = next_group(row.species, occurrence)

        animal = Animal(
            name=name,
            species=species,
            unique_id=unique_id,
            age=row.age,
            sex=row.sex,
            color=row.color,
            weight=row.weight,
            origin=row.origin,
            arrival_date=row.arrival_date,
            birth_date=birth_date,
            group=group,
        )

        self.state.species_counts[row.species] = occurrence + 1
        self.stats['animals_created'] += 1
        logger.debug(f"[intake] {animal.unique_id} {animal.name} -> {animal.habitat_name}")
        return animal

    @log_execution_time()
    def process_lines(self, lines: Iterable[str]) -> List[Animal]:
        """Process lines in order, skipping blanks; the first error propagates."""
        animals = []
        for line in lines:
            animal = self.process_line(line)
            if animal is not None:
                animals.append(animal)
        logger.info(f"Processed {len(animals)} arrivals")
        return animals

    def get_stats(self) -> Dict[str, Any]:
        stats = self.stats.copy()
        stats['species_counts'] = dict(self.state.species_counts)
        return stats
