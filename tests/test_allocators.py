import pytest

from core.exceptions import UnsupportedSpeciesError
from zoo.allocators import next_group, next_id, next_name
from zoo.species import species_prefix


class TestIdentityAllocator:
    """Tests for unique ID assignment."""

    @pytest.mark.parametrize("species,prefix", [
        ("hyena", "Hy"), ("lion", "Li"), ("tiger", "Ti"), ("bear", "Be"), ("Hyena", "Hy"),
    ])
    def test_species_prefix(self, species, prefix):
        assert species_prefix(species) == prefix

    def test_species_prefix_rejects_unknown_species(self):
        with pytest.raises(UnsupportedSpeciesError):
            species_prefix("giraffe")

    def test_counters_are_per_species(self):
        # Arrange
        counters = {}

        # Act
        ids = [next_id("hyena", counters) for _ in range(3)]
        lion_id = next_id("lion", counters)

        # Assert
        assert ids == ["Hy01", "Hy02", "Hy03"]
        assert lion_id == "Li01"
        assert counters == {"Hy": 3, "Li": 1}

    def test_counter_grows_past_two_digits(self):
        counters = {"Be": 99}
        assert next_id("bear", counters) == "Be100"

    def test_unsupported_species_leaves_counters_untouched(self):
        counters = {}
        with pytest.raises(UnsupportedSpeciesError):
            next_id("giraffe", counters)
        assert counters == {}


class TestNameAllocator:
    """Tests for name pool consumption."""

    def test_takes_names_front_to_back(self):
        pool = {"tiger": ["Raja"]}
        assert next_name(pool, "tiger") == "Raja"
        assert pool == {"tiger": []}

    def test_exhausted_pool_falls_back(self):
        pool = {"tiger": []}
        assert next_name(pool, "tiger") == "Unnamed tiger"

    def test_missing_species_falls_back(self):
        assert next_name({}, "bear") == "Unnamed bear"

    def test_pool_order(self):
        pool = {"hyena": ["Shenzi", "Banzai"]}
        assert [next_name(pool, "hyena") for _ in range(3)] == ["Shenzi", "Banzai", "Unnamed hyena"]


class TestSocialGroupAllocator:
    """Tests for round-robin social groups."""

    def test_lion_groups_wrap_around(self):
        groups = [next_group("lion", index) for index in range(5)]
        assert groups == ["Golden Pride", "Savanna Pride", "Sunset Pride", "River Pride", "Golden Pride"]

    def test_first_group_per_species(self):
        assert next_group("hyena", 0) == "Motto Clan"
        assert next_group("tiger", 0) == "Ember Ambush"
        assert next_group("bear", 0) == "Highland Sleuth"

    def test_unknown_species(self):
        assert next_group("giraffe", 0) == "Unknown"
