"""
Zoo domain package: species taxonomy, animal records and the intake pipeline.

Main Components:
    Species / SpeciesProfile: Closed taxonomy with per-species display text
    Animal: Immutable record of one animal
    next_id / next_name / next_group: Sequential allocators over explicit state
    estimate_birth_date: Birth date from age, season and arrival date
    ZooIntake: Facade turning arrival lines into Animal records
"""

from __future__ import annotations

from .species import (
    HABITAT_ORDER,
    SPECIES_PROFILES,
    Species,
    SpeciesProfile,
    resolve_species,
    species_prefix,
)
from .animal import Animal
from .allocators import next_group, next_id, next_name
from .birth_date import estimate_birth_date
from .intake import IntakeState, ZooIntake

__all__ = [
    "HABITAT_ORDER",
    "SPECIES_PROFILES",
    "Species",
    "SpeciesProfile",
    "resolve_species",
    "species_prefix",
    "Animal",
    "next_id",
    "next_name",
    "next_group",
    "estimate_birth_date",
    "IntakeState",
    "ZooIntake",
]
