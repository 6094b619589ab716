"""Gestion du personnel / staff."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Set


class Role(str, Enum):
    DIRECTOR = "DIRECTOR"
    VETERINARIAN = "VETERINARIAN"
    CLEANER = "CLEANER"
    FEEDER = "FEEDER"


ROLE_LABELS: Dict[Role, str] = {
    Role.DIRECTOR: "Directeur",
    Role.VETERINARIAN: "Vétérinaire",
    Role.CLEANER: "Agent d'entretien",
    Role.FEEDER: "Soigneur",
}

# Salaire journalier fixe par rôle
ROLE_SALARY: Dict[Role, int] = {
    Role.DIRECTOR: 60,
    Role.VETERINARIAN: 50,
    Role.CLEANER: 30,
    Role.FEEDER: 40,
}

# Nombre max d'enclos affectés (None = pas de limite en nombre)
ROLE_MAX_ASSIGNMENTS: Dict[Role, Optional[int]] = {
    Role.DIRECTOR: 0,
    Role.VETERINARIAN: None,
    Role.CLEANER: 1,
    Role.FEEDER: 2,
}

# Animaux soignables par un vétérinaire (0 pour les autres rôles)
ROLE_MAX_ANIMALS: Dict[Role, int] = {
    Role.DIRECTOR: 0,
    Role.VETERINARIAN: 20,
    Role.CLEANER: 0,
    Role.FEEDER: 0,
}


@dataclass
class Worker:
    id: int
    name: str
    role: Role
    salary: int
    assigned: Set[int] = field(default_factory=set)
    days_assigned: int = 0  # durée d'affectation restante
    days_worked: int = 0
    max_animals: int = 0  # vétérinaires uniquement

    @property
    def label(self) -> str:
        return ROLE_LABELS[self.role]

    def work_one_day(self) -> None:
        """Compte une journée travaillée et consomme la durée d'affectation.

        Sans durée restante, le salarié perd toutes ses affectations.
        """
        self.days_worked += 1
        if self.days_assigned > 0:
            self.days_assigned -= 1
        if self.days_assigned == 0:
            self.assigned.clear()


def make_worker(worker_id: int, name: str, role: Role, salaries: Optional[Dict[Role, int]] = None,
                vet_capacity: Optional[int] = None) -> Worker:
    """Crée un salarié avec le salaire et la capacité de soins de son rôle."""
    salary_table = salaries or ROLE_SALARY
    max_animals = ROLE_MAX_ANIMALS[role]
    if role == Role.VETERINARIAN and vet_capacity is not None:
        max_animals = vet_capacity
    return Worker(
        id=worker_id,
        name=name,
        role=role,
        salary=salary_table[role],
        max_animals=max_animals,
    )
