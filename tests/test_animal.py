import dataclasses

import pytest

from core.exceptions import UnsupportedSpeciesError
from zoo.animal import Animal
from zoo.species import HABITAT_ORDER, Species, resolve_species


def make_animal(species=Species.HYENA, group="Motto Clan", **overrides):
    fields = dict(
        name="Kiba",
        species=species,
        unique_id="Hy01",
        age=5,
        sex="male",
        color="brown",
        weight=90,
        origin="Nairobi, Kenya",
        arrival_date="2024-04-02",
        birth_date="2019-12-15",
        group=group,
    )
    fields.update(overrides)
    return Animal(**fields)


class TestSpecies:
    """Tests for the species taxonomy."""

    def test_resolve_species_is_case_insensitive(self):
        assert resolve_species("Tiger") is Species.TIGER

    def test_resolve_species_rejects_unknown(self):
        with pytest.raises(UnsupportedSpeciesError):
            resolve_species("giraffe")

    def test_habitat_order(self):
        assert HABITAT_ORDER == ("Hyena Habitat", "Lion Habitat", "Tiger Habitat", "Bear Habitat")

    def test_species_compares_to_lowercase_name(self):
        assert Species.BEAR == "bear"


class TestAnimal:
    """Tests for the Animal record."""

    def test_report_line(self):
        animal = make_animal()
        assert animal.report_line() == (
            "Hy01; Kiba; birth date 2019-12-15; brown color; male; 90 pounds; "
            "from Nairobi, Kenya; arrived 2024-04-02"
        )

    @pytest.mark.parametrize("species,habitat,label", [
        (Species.HYENA, "Hyena Habitat", "Clan: G"),
        (Species.LION, "Lion Habitat", "Pride: G"),
        (Species.TIGER, "Tiger Habitat", "Ambush: G"),
        (Species.BEAR, "Bear Habitat", "Sleuth: G"),
    ])
    def test_species_drives_habitat_and_label(self, species, habitat, label):
        animal = make_animal(species=species, group="G")
        assert animal.habitat_name == habitat
        assert animal.social_group_label == label

    def test_is_immutable(self):
        animal = make_animal()
        with pytest.raises(dataclasses.FrozenInstanceError):
            animal.name = "Other"

    def test_requires_species_member(self):
        with pytest.raises(TypeError):
            make_animal(species="giraffe")

    def test_to_dict(self):
        data = make_animal().to_dict()
        assert data["species"] == "hyena"
        assert data["habitat"] == "Hyena Habitat"
        assert data["unique_id"] == "Hy01"
