"""Immutable animal record produced by the intake pipeline."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .species import Species, profile_for

REPORT_FIELD_SEPARATOR = "; "


@dataclass(frozen=True)
class Animal:
    """
    One zoo animal with its parsed and derived facts.

    The species tag decides the habitat name and the social-group label, so
    an ``Animal`` can only be built with a ``Species`` member.

    Attributes:
        name: Name taken from the species name pool
        species: Species tag
        unique_id: Species prefix plus per-species counter, e.g. ``Hy01``
        age: Age in years at arrival
        sex: Lowercased sex
        color: Color description
        weight: Weight in pounds
        origin: Place of origin
        arrival_date: Arrival date as written in the log
        birth_date: Estimated birth date, ``YYYY-MM-DD``
        group: Social group name, e.g. ``Motto Clan``
    """
    name: str
    species: Species
    unique_id: str
    age: int
    sex: str
    color: str
    weight: int
    origin: str
    arrival_date: str
    birth_date: str
    group: str

    def __post_init__(self):
        if not isinstance(self.species, Species):
            raise TypeError(f"species must be a Species member, got {self.species!r}")

    @property
    def habitat_name(self) -> str:
        return profile_for(self.species).habitat_name

    @property
    def social_group_label(self) -> str:
        """Group label with the species' collective noun, e.g. ``Clan: Motto Clan``."""
        return f"{profile_for(self.species).group_noun}: {self.group}"

    def report_line(self) -> str:
        """Format the animal's line of the population report."""
        return REPORT_FIELD_SEPARATOR.join([
            self.unique_id,
            self.name,
            f"birth date {self.birth_date}",
            f"{self.color} color",
            self.sex,
            f"{self.weight} pounds",
            f"from {self.origin}",
            f"arrived {self.arrival_date}",
        ])

    def to_dict(self) -> Dict[str, Any]:
        return {
            'unique_id': self.unique_id,
            'name': self.name,
            'species': self.species.value,
            'age': self.age,
            'sex': self.sex,
            'color': self.color,
            'weight': self.weight,
            'origin': self.origin,
            'arrival_date': self.arrival_date,
            'birth_date': self.birth_date,
            'group': self.group,
            'habitat': self.habitat_name,
        }
