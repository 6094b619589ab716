"""Tests for the breeding rule and the breed action."""

import copy

import numpy as np
import pytest

from ZooOPS_V1.core.errors import IneligibleOperation, IneligiblePairing
from ZooOPS_V1.domain import Diet, Sex
from ZooOPS_V1.rules.breeding import NEWBORN_SUFFIX, breed, hybrid_species

from conftest import ScriptedRng, add_animal, check_consistency, make_animal


class TestBreedRule:
    def test_newborn_fields(self) -> None:
        a = make_animal(1, species="Lion", sex=Sex.MALE, diet=Diet.CARNIVORE, price=400, weight=300, enclosure_id=3)
        b = make_animal(2, species="Tigre", sex=Sex.FEMALE, diet=Diet.CARNIVORE, price=351, weight=350, enclosure_id=3)

        baby = breed(a, b, ScriptedRng([0]), new_id=9)

        assert baby.id == 9
        assert baby.species == "Ligre"
        assert baby.name == "Ligre" + NEWBORN_SUFFIX
        assert baby.age_days == 0
        assert baby.days_since_purchase == 0
        assert baby.weight == (300 + 350) / 4
        assert baby.price == (400 + 351) // 2
        assert baby.diet == a.diet and baby.climate == a.climate
        assert baby.enclosure_id == 3
        assert baby.parents == ("Lion", "Tigre")
        assert baby.born_in_zoo is True
        assert baby.sick is False
        assert baby.sex == Sex.MALE

    def test_sex_is_male_or_female(self) -> None:
        a = make_animal(1, sex=Sex.MALE, enclosure_id=1)
        b = make_animal(2, sex=Sex.FEMALE, enclosure_id=1)
        rng = np.random.default_rng(0)
        sexes = {breed(a, b, rng, new_id=i).sex for i in range(3, 60)}
        assert sexes <= {Sex.MALE, Sex.FEMALE}
        assert len(sexes) == 2

    def test_hybrid_species_uses_halves(self) -> None:
        a = make_animal(1, species="Zèbre")
        b = make_animal(2, species="Girafe")
        assert hybrid_species(a, b) == "Zè" + "afe"

    @pytest.mark.parametrize(
        "a_kwargs, b_kwargs",
        [
            ({"enclosure_id": 1}, {"enclosure_id": 2}),
            ({"enclosure_id": None}, {"enclosure_id": None}),
            ({"enclosure_id": 1, "sex": Sex.FEMALE}, {"enclosure_id": 1, "sex": Sex.FEMALE}),
            ({"enclosure_id": 1, "age_days": 5}, {"enclosure_id": 1}),
            ({"enclosure_id": 1}, {"enclosure_id": 1, "age_days": 2}),
        ],
    )
    def test_ineligible_pairs(self, a_kwargs, b_kwargs) -> None:
        a = make_animal(1, **{"sex": Sex.MALE, **a_kwargs})
        b = make_animal(2, **{"sex": Sex.FEMALE, **b_kwargs})
        before = (copy.deepcopy(a), copy.deepcopy(b))
        with pytest.raises(IneligiblePairing):
            breed(a, b, ScriptedRng(), new_id=3)
        assert (a, b) == before

    def test_ineligible_pairing_is_ineligible_operation(self) -> None:
        assert issubclass(IneligiblePairing, IneligibleOperation)


class TestBreedAction:
    def test_breed_registers_and_places_newborn(self, zoo) -> None:
        dad = add_animal(zoo, sex=Sex.MALE)
        mom = add_animal(zoo, sex=Sex.FEMALE)

        baby = zoo.breed(dad.id, mom.id)

        assert zoo.state.animals[baby.id] is baby
        assert zoo.state.enclosures[1].residents == [dad.id, mom.id, baby.id]
        assert zoo.state.total_animals == 3
        check_consistency(zoo.state)

    def test_breed_refused_when_enclosure_full(self, zoo) -> None:
        for i in range(4):
            add_animal(zoo, sex=Sex.MALE if i % 2 == 0 else Sex.FEMALE)
        dad = add_animal(zoo, sex=Sex.MALE)
        mom_id = zoo.state.enclosures[1].residents[1]
        next_id = zoo.state.animal_ids.peek()

        with pytest.raises(IneligibleOperation):
            zoo.breed(dad.id, mom_id)

        assert zoo.state.total_animals == 5
        assert zoo.state.animal_ids.peek() == next_id

    def test_breed_same_sex_mutates_nothing(self, zoo) -> None:
        a = add_animal(zoo, sex=Sex.MALE)
        b = add_animal(zoo, sex=Sex.MALE)
        with pytest.raises(IneligiblePairing):
            zoo.breed(a.id, b.id)
        assert zoo.state.total_animals == 2
        assert zoo.state.enclosures[1].residents == [a.id, b.id]

    def test_breed_with_itself_refused(self, zoo) -> None:
        a = add_animal(zoo)
        with pytest.raises(IneligiblePairing):
            zoo.breed(a.id, a.id)
