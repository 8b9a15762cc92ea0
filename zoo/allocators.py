"""
Sequential allocators for the facts an arrival sentence does not state.

Each allocator receives the mutable state it advances (ID counters, the name
pool, the species occurrence index) from the caller, so a run owns all of its
state and two runs in one process never share counters.
"""
from __future__ import annotations

from typing import Dict, List, MutableMapping, Tuple

from .species import SPECIES_PROFILES, species_prefix

UNKNOWN_GROUP = "Unknown"

_SOCIAL_GROUPS: Dict[str, Tuple[str, ...]] = {
    species.value: profile.social_groups for species, profile in SPECIES_PROFILES.items()
}


def next_id(species: str, counters: MutableMapping[str, int]) -> str:
    """
    Assign the next unique ID for a species.

    Args:
        species: Species name, validated against the closed set
        counters: Running count per two-letter prefix, updated in place

    Returns:
        Prefix plus zero-padded counter, e.g. ``Hy01``

    Raises:
        UnsupportedSpeciesError: If the species is not supported
    """
    prefix = species_prefix(species)
    counters[prefix] = counters.get(prefix, 0) + 1
    return f"{prefix}{counters[prefix]:02d}"


def next_name(pool: MutableMapping[str, List[str]], species_key: str) -> str:
    """Take the first unused name for a species, or ``Unnamed <species>`` once the pool is empty."""
    names = pool.get(species_key)
    if names:
        return names.pop(0)
    return f"Unnamed {species_key}"


def next_group(species_key: str, occurrence_index: int) -> str:
    """Pick a social group round-robin from the species' fixed candidates."""
    options = _SOCIAL_GROUPS.get(species_key)
    if not options:
        return UNKNOWN_GROUP
    return options[occurrence_index % len(options)]
