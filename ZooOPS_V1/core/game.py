import logging
from typing import List, Optional

import numpy as np

from ZooOPS_V1.core.errors import (
    IneligibleOperation,
    InsufficientFunds,
    UnknownEntity,
    ValidationError,
)
from ZooOPS_V1.core.market import refresh_market
from ZooOPS_V1.core.turn import advance_day, remove_animal
from ZooOPS_V1.data.game_params import GameSettings
from ZooOPS_V1.domain.animal import Animal
from ZooOPS_V1.domain.enclosure import Enclosure
from ZooOPS_V1.domain.loan import Loan
from ZooOPS_V1.domain.staff import Role, Worker, make_worker
from ZooOPS_V1.domain.types import Climate, DaySummary, Diet
from ZooOPS_V1.domain.zoo import ZooState
from ZooOPS_V1.rules import breeding, staffing
from ZooOPS_V1.rules.placement import can_place, place

logger = logging.getLogger(__name__)

# Équipe d'ouverture : (nom, rôle, enclos affectés)
OPENING_STAFF = [
    ("K.Z", Role.DIRECTOR, []),
    ("Trinity", Role.CLEANER, [1]),
    ("Morpheus", Role.VETERINARIAN, []),
    ("Difference", Role.FEEDER, [1]),
]
# Enclos d'ouverture : capacité 5, herbivores, climat tempéré, entretien 10/jour
OPENING_ENCLOSURE = (5, Diet.HERBIVORE, Climate.TEMPERATE, 10)


class Zoo:
    def __init__(self, state: ZooState, rng=None):
        """Façade du zoo : toutes les actions du joueur passent par ici.

        Chaque action retourne son résultat ou lève une `ZooError` avant
        toute modification de l'état.

        Args:
            state: Agrégat du zoo (seul propriétaire des collections).
            rng: Source d'aléa injectée (`numpy.random.Generator` par défaut).
        """
        self.state = state
        self.rng = rng if rng is not None else np.random.default_rng()

    # ---------- Accès ----------

    @property
    def settings(self) -> GameSettings:
        return self.state.settings

    def get_animal(self, animal_id: int) -> Animal:
        try:
            return self.state.animals[animal_id]
        except KeyError:
            raise UnknownEntity(f"Animal #{animal_id} introuvable.") from None

    def get_enclosure(self, enclosure_id: int) -> Enclosure:
        try:
            return self.state.enclosures[enclosure_id]
        except KeyError:
            raise UnknownEntity(f"Enclos #{enclosure_id} introuvable.") from None

    def get_worker(self, worker_id: int) -> Worker:
        try:
            return self.state.workers[worker_id]
        except KeyError:
            raise UnknownEntity(f"Salarié #{worker_id} introuvable.") from None

    def _spend(self, amount: float, label: str, account: str) -> None:
        if amount > 0 and amount > self.state.cash:
            raise InsufficientFunds(
                f"Fonds insuffisants pour {label.lower()} : {amount:,.0f} $ requis, "
                f"{self.state.cash:,.0f} $ disponibles."
            )
        self.state.cash -= amount
        if amount:
            self.state.ledger.post(self.state.day, label, -amount, account)

    @staticmethod
    def _check_range(value: int, lo: int, hi: int, what: str) -> None:
        if not lo <= value <= hi:
            raise ValidationError(f"{what} doit être compris entre {lo} et {hi}.")

    @staticmethod
    def _parse(enum_cls, value, what: str):
        try:
            return enum_cls(value)
        except ValueError:
            raise ValidationError(f"{what} inconnu : {value!r}.") from None

    # ---------- Animaux ----------

    def valid_enclosures_for(self, animal: Animal) -> List[Enclosure]:
        """Enclos pouvant accueillir l'animal (ou l'offre) donné."""
        return [enc for enc in self.state.enclosures.values() if can_place(animal, enc)]

    def purchase(self, market_index: int, enclosure_id: int) -> Animal:
        """Achète l'offre `market_index` (base 0) et la place dans l'enclos donné."""
        state = self.state
        if state.day > self.settings.purchase_throttle_day and state.bought_today >= 1:
            raise IneligibleOperation(
                f"Après le jour {self.settings.purchase_throttle_day}, un seul achat par jour."
            )
        if not 0 <= market_index < len(state.market):
            raise UnknownEntity(f"Offre n°{market_index + 1} introuvable sur le marché.")
        offer = state.market[market_index]
        enclosure = self.get_enclosure(enclosure_id)
        if offer.price > state.cash:
            raise InsufficientFunds(f"Fonds insuffisants pour acheter {offer.species}.")
        animal = offer.to_animal(state.animal_ids.peek())
        if not can_place(animal, enclosure):
            raise IneligibleOperation(
                f"L'enclos {enclosure.id} ne peut pas accueillir {animal.name}."
            )

        animal.id = state.animal_ids.next()
        place(animal, enclosure)
        state.animals[animal.id] = animal
        self._spend(offer.price, f"Achat {animal.species}", "animaux")
        state.bought_today += 1
        state.market.pop(market_index)
        logger.info("Achat de %s (#%d) placé en enclos %d", animal.name, animal.id, enclosure.id)
        return animal

    def sell(self, animal_id: int) -> int:
        """Revend un animal à moitié prix ; retourne le montant encaissé."""
        animal = self.get_animal(animal_id)
        refund = animal.price // self.settings.sale_refund_divisor
        remove_animal(self.state, animal)
        self.state.cash += refund
        if refund:
            self.state.ledger.post(self.state.day, f"Vente {animal.name}", refund, "animaux")
        logger.info("Vente de %s (#%d) pour %d $", animal.name, animal.id, refund)
        return refund

    def rename(self, animal_id: int, new_name: str) -> Animal:
        animal = self.get_animal(animal_id)
        if not new_name or not new_name.strip():
            raise ValidationError("Le nom ne peut pas être vide.")
        animal.name = new_name.strip()
        return animal

    def refresh_market(self) -> None:
        """Renouvelle le marché contre des frais fixes."""
        self._spend(self.settings.market_refresh_fee, "Renouvellement du marché", "marche")
        refresh_market(self.state, self.rng)

    def breed(self, animal_id_a: int, animal_id_b: int) -> Animal:
        """Fait se reproduire deux animaux du même enclos ; retourne le petit."""
        a = self.get_animal(animal_id_a)
        b = self.get_animal(animal_id_b)
        breeding.check_pairing(a, b)
        enclosure = self.get_enclosure(a.enclosure_id)
        if not can_place(a, enclosure):
            raise IneligibleOperation(f"Pas de place pour un petit dans l'enclos {enclosure.id}.")

        newborn = breeding.breed(a, b, self.rng, self.state.animal_ids.next())
        enclosure.residents.append(newborn.id)
        self.state.animals[newborn.id] = newborn
        logger.info("Naissance de %s (#%d) dans l'enclos %d", newborn.name, newborn.id, enclosure.id)
        return newborn

    # ---------- Enclos ----------

    def build_enclosure(self, capacity: int, diet: Diet, climate: Climate) -> int:
        """Construit un enclos ; coût et entretien proportionnels à la capacité."""
        self._check_range(capacity, 1, self.settings.max_enclosure_capacity, "La capacité")
        diet = self._parse(Diet, diet, "Régime")
        climate = self._parse(Climate, climate, "Climat")
        cost = capacity * self.settings.enclosure_build_cost_per_slot
        self._spend(cost, f"Construction enclos ({capacity} places)", "construction")
        enclosure = Enclosure(
            id=self.state.enclosure_ids.next(),
            capacity=capacity,
            diet=diet,
            climate=climate,
            daily_cost=capacity * self.settings.enclosure_upkeep_per_slot,
        )
        self.state.enclosures[enclosure.id] = enclosure
        logger.info("Enclos %d construit (%d places)", enclosure.id, capacity)
        return enclosure.id

    # ---------- Personnel ----------

    def hire(self, name: str, role: Role) -> int:
        if not name or not name.strip():
            raise ValidationError("Le nom du salarié ne peut pas être vide.")
        role = self._parse(Role, role, "Poste")
        staffing.check_hire(role)
        worker = make_worker(
            self.state.worker_ids.next(),
            name.strip(),
            role,
            salaries=self.settings.salaries,
            vet_capacity=self.settings.vet_capacity,
        )
        self.state.workers[worker.id] = worker
        logger.info("Embauche de %s (%s)", worker.name, worker.label)
        return worker.id

    def fire(self, worker_id: int) -> Worker:
        worker = self.get_worker(worker_id)
        staffing.check_fire(worker, self.state.workers)
        del self.state.workers[worker_id]
        logger.info("Licenciement de %s", worker.name)
        return worker

    def assign(self, worker_id: int, enclosure_id: int, duration_days: int) -> Worker:
        """Affecte un salarié à un enclos pour `duration_days` jours."""
        worker = self.get_worker(worker_id)
        enclosure = self.get_enclosure(enclosure_id)
        self._check_range(duration_days, 1, self.settings.max_assignment_days, "La durée")
        staffing.check_assignment(worker, enclosure, self.state.enclosures)
        worker.assigned.add(enclosure.id)
        worker.days_assigned = duration_days
        return worker

    # ---------- Achats / finances ----------

    def buy_food(self, units: int) -> int:
        self._check_range(units, 0, self.settings.max_food_order, "La quantité")
        self._spend(units * self.settings.food_unit_price, f"Nourriture ({units} u.)", "nourriture")
        self.state.food += units
        return self.state.food

    def advertise(self, amount: int) -> float:
        """Publicité : +5 de popularité par tranche complète de 200 $."""
        self._check_range(amount, 0, self.settings.max_ad_spend, "Le budget")
        self._spend(amount, "Campagne de publicité", "publicite")
        self.state.popularity += (amount // self.settings.ad_block) * self.settings.ad_popularity_gain
        return self.state.popularity

    def borrow(self, amount: int, term_days: int) -> int:
        self._check_range(amount, 1, self.settings.max_loan_amount, "Le montant")
        self._check_range(term_days, 1, self.settings.max_loan_days, "La durée")
        loan = Loan(
            id=self.state.loan_ids.next(),
            principal=float(amount),
            days=term_days,
            daily_rate=self.settings.loan_daily_rate,
        )
        self.state.loans[loan.id] = loan
        self.state.cash += amount
        self.state.ledger.post(self.state.day, f"Crédit #{loan.id}", amount, "emprunts")
        logger.info("Crédit #%d : %d $ sur %d jours", loan.id, amount, term_days)
        return loan.id

    # ---------- Tour ----------

    def advance_day(self) -> DaySummary:
        return advance_day(self.state, self.rng)

    @property
    def is_lost(self) -> bool:
        return self.state.cash < 0

    @property
    def is_won(self) -> bool:
        return self.state.day > self.settings.max_days and not self.is_lost


def create_zoo(name: str, rng=None, settings: Optional[GameSettings] = None, seed: Optional[int] = None) -> Zoo:
    """Ouvre un zoo avec l'équipe, l'enclos et le marché de départ.

    Args:
        name: Nom du zoo (non vide).
        rng: Source d'aléa ; à défaut `np.random.default_rng(seed)`.
        settings: Réglages de partie (défauts du jeu sinon).
        seed: Graine utilisée si `rng` n'est pas fourni.
    """
    if not name or not name.strip():
        raise ValidationError("Le nom du zoo ne peut pas être vide.")
    settings = settings or GameSettings()
    state = ZooState(
        name=name.strip(),
        settings=settings,
        cash=settings.start_cash,
        food=settings.start_food,
        popularity=settings.start_popularity,
    )

    capacity, diet, climate, daily_cost = OPENING_ENCLOSURE
    enc_id = state.enclosure_ids.next()
    state.enclosures[enc_id] = Enclosure(
        id=enc_id, capacity=capacity, diet=diet, climate=climate, daily_cost=daily_cost
    )
    for worker_name, role, enclosures in OPENING_STAFF:
        worker = make_worker(
            state.worker_ids.next(),
            worker_name,
            role,
            salaries=settings.salaries,
            vet_capacity=settings.vet_capacity,
        )
        worker.assigned.update(enclosures)
        state.workers[worker.id] = worker

    zoo = Zoo(state, rng if rng is not None else np.random.default_rng(seed))
    refresh_market(state, zoo.rng)
    logger.info("Zoo '%s' ouvert avec %.0f $", state.name, state.cash)
    return zoo
