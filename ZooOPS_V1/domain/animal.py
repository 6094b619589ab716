from dataclasses import dataclass
from typing import Optional, Tuple

from ZooOPS_V1.domain.types import Climate, Diet, Sex

# Âge (jours) au-delà duquel un animal peut se reproduire
MIN_BREEDING_AGE = 5


@dataclass
class Animal:
    """Animal du zoo.

    `id` est attribué par la séquence du zoo et ne change plus.
    `enclosure_id` vaut None tant que l'animal n'est pas placé.
    """

    id: int
    species: str
    name: str
    age_days: int
    weight: float
    climate: Climate
    price: int
    diet: Diet
    sex: Sex
    enclosure_id: Optional[int] = None
    days_since_purchase: int = 0
    born_in_zoo: bool = False
    parents: Tuple[str, str] = ("None", "None")
    sick: bool = False

    @property
    def food_need(self) -> int:
        """Unités de nourriture consommées par jour."""
        return 1 if self.diet == Diet.HERBIVORE else 2

    @property
    def can_breed(self) -> bool:
        return self.age_days > MIN_BREEDING_AGE

    def grow_one_day(self) -> None:
        self.age_days += 1
        self.days_since_purchase += 1
