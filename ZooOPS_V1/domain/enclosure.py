from dataclasses import dataclass, field
from typing import List

from ZooOPS_V1.domain.types import Climate, Diet


@dataclass
class Enclosure:
    """Enclos : capacité, régime accepté, climat et coût d'entretien journalier.

    `residents` ne contient que les identifiants des animaux (ordre d'arrivée),
    le registre du zoo reste la seule source de vérité sur les animaux.
    """

    id: int
    capacity: int
    diet: Diet
    climate: Climate
    daily_cost: int
    residents: List[int] = field(default_factory=list)

    @property
    def animal_count(self) -> int:
        return len(self.residents)

    def has_space(self) -> bool:
        """Vrai s'il reste au moins une place."""
        return len(self.residents) < self.capacity
