"""
Closed species taxonomy for the zoo.

Every animal kind differs from the others only in static text: the ID prefix,
the habitat it is shown under, the collective noun for its social group, and
the candidate group names. That data lives in one lookup table keyed by the
``Species`` tag instead of in per-species classes.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from core.exceptions import UnsupportedSpeciesError
from parser.text_utils import to_lower


class Species(str, Enum):
    """Supported animal kinds. Values are the lowercase names used in the logs."""
    HYENA = "hyena"
    LION = "lion"
    TIGER = "tiger"
    BEAR = "bear"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SpeciesProfile:
    """Static per-species text.

    Attributes:
        prefix: Two-letter unique ID prefix
        habitat_name: Report section the species is listed under
        group_noun: Collective noun used in the social-group label
        social_groups: Candidate group names, assigned round-robin
    """
    prefix: str
    habitat_name: str
    group_noun: str
    social_groups: Tuple[str, ...]


# Insertion order is the habitat display order of the population report.
SPECIES_PROFILES: Dict[Species, SpeciesProfile] = {
    Species.HYENA: SpeciesProfile(
        prefix="Hy",
        habitat_name="Hyena Habitat",
        group_noun="Clan",
        social_groups=("Motto Clan", "Serengeti Clan", "Savannah Clan", "Spotted Clan"),
    ),
    Species.LION: SpeciesProfile(
        prefix="Li",
        habitat_name="Lion Habitat",
        group_noun="Pride",
        social_groups=("Golden Pride", "Savanna Pride", "Sunset Pride", "River Pride"),
    ),
    Species.TIGER: SpeciesProfile(
        prefix="Ti",
        habitat_name="Tiger Habitat",
        group_noun="Ambush",
        social_groups=("Ember Ambush", "Jungle Ambush", "River Ambush", "Shadow Ambush"),
    ),
    Species.BEAR: SpeciesProfile(
        prefix="Be",
        habitat_name="Bear Habitat",
        group_noun="Sleuth",
        social_groups=("Highland Sleuth", "Forest Sleuth", "Mountain Sleuth", "Valley Sleuth"),
    ),
}

HABITAT_ORDER: Tuple[str, ...] = tuple(profile.habitat_name for profile in SPECIES_PROFILES.values())


def resolve_species(name: str) -> Species:
    """
    Map a species name (any ASCII case) to its ``Species`` tag.

    Raises:
        UnsupportedSpeciesError: If the name is outside the closed set
    """
    try:
        return Species(to_lower(name))
    except ValueError:
        raise UnsupportedSpeciesError(f"Unsupported species: {name}") from None


def species_prefix(name: str) -> str:
    """Return the two-letter unique ID prefix, e.g. ``"Hy"`` for hyena."""
    return SPECIES_PROFILES[resolve_species(name)].prefix


def profile_for(species: Species) -> SpeciesProfile:
    return SPECIES_PROFILES[species]
