"""Pytest configuration and fixtures."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable, List, Optional

import pytest

# Ensure project root is on path when running tests
_project_root = Path(__file__).resolve().parents[1]
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from ZooOPS_V1.core.game import Zoo, create_zoo
from ZooOPS_V1.domain import Animal, Climate, Diet, Enclosure, Sex
from ZooOPS_V1.domain.zoo import ZooState


class ScriptedRng:
    """Deterministic stand-in for numpy's Generator.

    `integers(low, high)` pops the next scripted value when one is queued,
    otherwise returns `high - 1` ("always the highest roll": no death, no
    sickness, no special visitor, +max popularity drift, female newborns).
    `choice` returns the first `size` indices, i.e. catalog order.
    """

    def __init__(self, values: Optional[Iterable[int]] = None, low_mode: bool = False):
        self.queue: List[int] = list(values or [])
        self.low_mode = low_mode
        self.calls: List[tuple] = []

    def push(self, *values: int) -> None:
        self.queue.extend(values)

    def integers(self, low, high=None):
        if high is None:
            low, high = 0, low
        self.calls.append((low, high))
        if self.queue:
            value = self.queue.pop(0)
            assert low <= value < high, f"scripted value {value} outside [{low}, {high})"
            return value
        return low if self.low_mode else high - 1

    def choice(self, n, size=None, replace=True):
        return list(range(size if size is not None else 1))


@pytest.fixture
def rng() -> ScriptedRng:
    return ScriptedRng()


@pytest.fixture
def zoo(rng) -> Zoo:
    """Fresh zoo driven by the scripted rng (market in catalog order)."""
    return create_zoo("Test Zoo", rng=rng)


def make_animal(
    animal_id: int = 1,
    species: str = "Cerf",
    sex: Sex = Sex.MALE,
    age_days: int = 10,
    diet: Diet = Diet.HERBIVORE,
    climate: Climate = Climate.TEMPERATE,
    price: int = 150,
    weight: float = 200.0,
    enclosure_id=None,
) -> Animal:
    return Animal(
        id=animal_id,
        species=species,
        name=species,
        age_days=age_days,
        weight=weight,
        climate=climate,
        price=price,
        diet=diet,
        sex=sex,
        enclosure_id=enclosure_id,
    )


@pytest.fixture
def herbivore_enclosure() -> Enclosure:
    return Enclosure(id=1, capacity=2, diet=Diet.HERBIVORE, climate=Climate.TEMPERATE, daily_cost=4)


def add_animal(zoo: Zoo, enclosure_id: int = 1, **kwargs) -> Animal:
    """Register an animal directly in the zoo and place it in an enclosure."""
    from ZooOPS_V1.rules.placement import place

    animal = make_animal(animal_id=zoo.state.animal_ids.next(), **kwargs)
    place(animal, zoo.state.enclosures[enclosure_id])
    zoo.state.animals[animal.id] = animal
    return animal


def check_consistency(state: ZooState) -> None:
    """Registry and enclosures agree: capacity, unique residents, back-references, diet and climate."""
    placed = set()
    for enc in state.enclosures.values():
        assert len(enc.residents) <= enc.capacity, f"enclosure {enc.id} over capacity"
        assert len(set(enc.residents)) == len(enc.residents), f"duplicate resident in enclosure {enc.id}"
        for animal_id in enc.residents:
            animal = state.animals.get(animal_id)
            assert animal is not None, f"resident #{animal_id} missing from registry"
            assert animal.enclosure_id == enc.id, f"#{animal_id} points to enclosure {animal.enclosure_id}"
            assert animal.diet == enc.diet and animal.climate == enc.climate
            placed.add(animal_id)
    for animal in state.animals.values():
        if animal.enclosure_id is not None:
            assert animal.id in placed, f"#{animal.id} not listed in its enclosure"
