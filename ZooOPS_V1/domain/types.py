# ZooOPS_V1/domain/types.py
from enum import Enum
from typing import List

from pydantic import BaseModel


class Diet(str, Enum):
    HERBIVORE = "HERBIVORE"
    CARNIVORE = "CARNIVORE"


class Climate(str, Enum):
    TROPICAL = "TROPICAL"
    TEMPERATE = "TEMPERATE"
    ARCTIC = "ARCTIC"


class Sex(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"


class SpecialVisitor(str, Enum):
    NONE = "NONE"
    CELEBRITY = "CELEBRITY"
    PHOTOGRAPHER = "PHOTOGRAPHER"


# Libellés d'affichage (valeurs alignées avec l'ancienne interface)
DIET_LABELS = {Diet.HERBIVORE: "Herbivore", Diet.CARNIVORE: "Carnivore"}
CLIMATE_LABELS = {
    Climate.TROPICAL: "Tropical",
    Climate.TEMPERATE: "Tempéré",
    Climate.ARCTIC: "Arctique",
}
SEX_LABELS = {Sex.MALE: "M", Sex.FEMALE: "F"}


# ---------- DaySummary ----------


class DaySummary(BaseModel):
    """Bilan d'une journée simulée (résultat de `advance_day`)."""

    day: int
    cash_start: float
    cash_end: float
    visitors: int
    revenue: float
    payroll: float
    upkeep: float
    loan_payments: float
    food_needed: int
    food_consumed: int
    starved: bool
    deaths_by_age: List[str] = []
    deaths_by_starvation: List[str] = []
    newly_sick: int = 0
    healed: int = 0
    special_visitor: SpecialVisitor = SpecialVisitor.NONE
    special_visitor_count: int = 0
    popularity: float
    loans_paid_off: List[int] = []
    lost: bool = False

    @property
    def net(self) -> float:
        return round(self.cash_end - self.cash_start, 2)
