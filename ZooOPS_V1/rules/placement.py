# ZooOPS_V1/rules/placement.py
from typing import Dict

from ZooOPS_V1.core.errors import IneligibleOperation
from ZooOPS_V1.domain.animal import Animal
from ZooOPS_V1.domain.enclosure import Enclosure


def can_place(animal: Animal, enclosure: Enclosure) -> bool:
    """Vrai si l'enclos a une place libre et accepte le régime et le climat de l'animal.

    Exemple
    -------
    >>> from ZooOPS_V1.domain.types import Climate, Diet, Sex
    >>> enc = Enclosure(id=1, capacity=1, diet=Diet.HERBIVORE, climate=Climate.TEMPERATE, daily_cost=2)
    >>> deer = Animal(id=1, species="Cerf", name="Cerf", age_days=10, weight=200,
    ...               climate=Climate.TEMPERATE, price=150, diet=Diet.HERBIVORE, sex=Sex.MALE)
    >>> can_place(deer, enc)
    True
    """
    return (
        enclosure.has_space()
        and animal.diet == enclosure.diet
        and animal.climate == enclosure.climate
    )


def place(animal: Animal, enclosure: Enclosure) -> None:
    """Installe l'animal dans l'enclos (référence + liste des résidents).

    Raises:
        IneligibleOperation: enclos plein ou incompatible ; rien n'est modifié.
    """
    if not can_place(animal, enclosure):
        raise IneligibleOperation(
            f"L'enclos {enclosure.id} ne peut pas accueillir {animal.name} "
            "(plein, régime ou climat incompatible)."
        )
    enclosure.residents.append(animal.id)
    animal.enclosure_id = enclosure.id


def detach(animal: Animal, enclosures: Dict[int, Enclosure]) -> None:
    """Retire l'animal de son enclos (inverse de `place`).

    Le retrait du registre du zoo (vente, décès) reste à la charge de l'appelant.
    """
    enclosure = enclosures.get(animal.enclosure_id) if animal.enclosure_id is not None else None
    if enclosure is not None and animal.id in enclosure.residents:
        enclosure.residents.remove(animal.id)
    animal.enclosure_id = None
