# ZooOPS_V1/rules/breeding.py
import logging

from ZooOPS_V1.core.errors import IneligiblePairing
from ZooOPS_V1.domain.animal import MIN_BREEDING_AGE, Animal
from ZooOPS_V1.domain.types import Sex

logger = logging.getLogger(__name__)

NEWBORN_SUFFIX = "_Nouveau-né"
SEXES = (Sex.MALE, Sex.FEMALE)


def check_pairing(a: Animal, b: Animal) -> None:
    """Vérifie qu'un couple peut se reproduire.

    Raises:
        IneligiblePairing: animaux identiques, pas dans le même enclos,
            de même sexe, ou l'un des deux âgé de 5 jours ou moins.
    """
    if a.id == b.id:
        raise IneligiblePairing("Un animal ne peut pas se reproduire avec lui-même.")
    if a.enclosure_id is None or a.enclosure_id != b.enclosure_id:
        raise IneligiblePairing("Les animaux doivent être dans le même enclos.")
    if a.sex == b.sex:
        raise IneligiblePairing("Les animaux doivent être de sexe opposé.")
    if not (a.can_breed and b.can_breed):
        raise IneligiblePairing(
            f"Les animaux doivent avoir plus de {MIN_BREEDING_AGE} jours."
        )


def hybrid_species(a: Animal, b: Animal) -> str:
    """Première moitié de l'espèce de `a` + seconde moitié de celle de `b`.

    Exemple
    -------
    >>> from ZooOPS_V1.domain.types import Climate, Diet
    >>> lion = Animal(1, "Lion", "Lion", 10, 300, Climate.TROPICAL, 400, Diet.CARNIVORE, Sex.MALE)
    >>> tigre = Animal(2, "Tigre", "Tigre", 9, 350, Climate.TROPICAL, 350, Diet.CARNIVORE, Sex.FEMALE)
    >>> hybrid_species(lion, tigre)
    'Ligre'
    """
    return a.species[: len(a.species) // 2] + b.species[len(b.species) // 2:]


def breed(a: Animal, b: Animal, rng, new_id: int) -> Animal:
    """Crée le petit de `a` et `b`.

    Le nouveau-né hérite du régime, du climat et de l'enclos de `a`. La place
    libre dans cet enclos doit avoir été vérifiée par l'appelant, qui se
    charge aussi de l'ajouter aux résidents et au registre.

    Args:
        a, b: Parents (ordre significatif pour l'espèce et l'héritage).
        rng: Générateur aléatoire (`numpy.random.Generator` ou équivalent).
        new_id: Identifiant réservé pour le nouveau-né.
    """
    check_pairing(a, b)

    species = hybrid_species(a, b)
    newborn = Animal(
        id=new_id,
        species=species,
        name=species + NEWBORN_SUFFIX,
        age_days=0,
        weight=(a.weight + b.weight) / 4,
        climate=a.climate,
        price=(a.price + b.price) // 2,
        diet=a.diet,
        sex=SEXES[int(rng.integers(0, 2))],
        enclosure_id=a.enclosure_id,
        days_since_purchase=0,
        born_in_zoo=True,
        parents=(a.name, b.name),
    )
    logger.debug("Naissance %s (#%d) de %s x %s", newborn.name, new_id, a.name, b.name)
    return newborn
