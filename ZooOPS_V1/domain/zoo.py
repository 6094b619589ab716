from dataclasses import dataclass, field
from typing import Dict, List

from ZooOPS_V1.core.accounting import Ledger
from ZooOPS_V1.data.game_params import GameSettings
from ZooOPS_V1.domain.animal import Animal
from ZooOPS_V1.domain.enclosure import Enclosure
from ZooOPS_V1.domain.loan import Loan
from ZooOPS_V1.domain.market import MarketOffer
from ZooOPS_V1.domain.staff import Worker
from ZooOPS_V1.domain.types import SpecialVisitor


@dataclass
class IdSequence:
    """Générateur d'identifiants croissants (propre à chaque zoo)."""

    last: int = 0

    def next(self) -> int:
        self.last += 1
        return self.last

    def peek(self) -> int:
        return self.last + 1


@dataclass
class ZooState:
    """Agrégat du zoo : compteurs, collections et séquences d'identifiants.

    Le registre `animals` (indexé par id, ordre d'insertion conservé) est la
    seule source de vérité ; les enclos ne stockent que des identifiants.
    """

    name: str
    settings: GameSettings = field(default_factory=GameSettings)
    cash: float = 0.0
    food: int = 0
    popularity: float = 0.0
    day: int = 1
    visitors: int = 0
    special_visitor: SpecialVisitor = SpecialVisitor.NONE
    special_visitor_count: int = 0
    bought_today: int = 0

    animals: Dict[int, Animal] = field(default_factory=dict)
    enclosures: Dict[int, Enclosure] = field(default_factory=dict)
    workers: Dict[int, Worker] = field(default_factory=dict)
    loans: Dict[int, Loan] = field(default_factory=dict)
    market: List[MarketOffer] = field(default_factory=list)

    animal_ids: IdSequence = field(default_factory=IdSequence)
    enclosure_ids: IdSequence = field(default_factory=IdSequence)
    worker_ids: IdSequence = field(default_factory=IdSequence)
    loan_ids: IdSequence = field(default_factory=IdSequence)

    ledger: Ledger = field(default_factory=Ledger)

    @property
    def total_animals(self) -> int:
        return len(self.animals)

    @property
    def sick_count(self) -> int:
        return sum(1 for a in self.animals.values() if a.sick)

    @property
    def daily_payroll(self) -> int:
        return sum(w.salary for w in self.workers.values())

    @property
    def daily_upkeep(self) -> int:
        return sum(e.daily_cost for e in self.enclosures.values())

    @property
    def total_debt(self) -> float:
        return round(sum(loan.remaining_debt for loan in self.loans.values()), 2)

    def food_demand(self) -> int:
        return sum(a.food_need for a in self.animals.values())

