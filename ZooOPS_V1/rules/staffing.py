# ZooOPS_V1/rules/staffing.py

from typing import Dict

from ZooOPS_V1.core.errors import IneligibleOperation
from ZooOPS_V1.domain.enclosure import Enclosure
from ZooOPS_V1.domain.staff import ROLE_MAX_ASSIGNMENTS, Role, Worker

# Rôles recrutables (le directeur est unique et présent dès l'ouverture)
HIREABLE_ROLES = frozenset({Role.VETERINARIAN, Role.CLEANER, Role.FEEDER})


def animals_under_care(worker: Worker, enclosures: Dict[int, Enclosure]) -> int:
    """Nombre d'animaux dans les enclos affectés au salarié."""
    return sum(
        enclosures[enc_id].animal_count for enc_id in worker.assigned if enc_id in enclosures
    )


def check_hire(role: Role) -> None:
    if role not in HIREABLE_ROLES:
        raise IneligibleOperation("Le zoo a déjà un directeur ; ce poste ne se recrute pas.")


def check_assignment(worker: Worker, enclosure: Enclosure, enclosures: Dict[int, Enclosure]) -> None:
    """Contrôle l'affectation d'un salarié à un enclos.

    Règles (table `ROLE_MAX_ASSIGNMENTS`) :
    - pas de double affectation au même enclos ;
    - agent d'entretien : 1 enclos, soigneur : 2, directeur : aucun ;
    - vétérinaire : nombre d'enclos libre mais animaux suivis <= `max_animals`.

    Raises:
        IneligibleOperation: affectation refusée (rien n'est modifié).
    """
    if enclosure.id in worker.assigned:
        raise IneligibleOperation(f"{worker.name} est déjà affecté à l'enclos {enclosure.id}.")

    cap = ROLE_MAX_ASSIGNMENTS[worker.role]
    if cap is not None and len(worker.assigned) >= cap:
        if cap == 0:
            raise IneligibleOperation(f"Un {worker.label.lower()} ne peut pas être affecté à un enclos.")
        raise IneligibleOperation(
            f"{worker.name} a atteint son maximum de {cap} enclos ({worker.label})."
        )

    if worker.role == Role.VETERINARIAN:
        total = animals_under_care(worker, enclosures) + enclosure.animal_count
        if total > worker.max_animals:
            raise IneligibleOperation(
                f"{worker.name} suivrait {total} animaux (maximum {worker.max_animals})."
            )


def check_fire(worker: Worker, workers: Dict[int, Worker]) -> None:
    if len(workers) <= 1:
        raise IneligibleOperation("Impossible de licencier le dernier salarié.")
    if worker.role == Role.DIRECTOR:
        raise IneligibleOperation("Le directeur ne peut pas être licencié.")
