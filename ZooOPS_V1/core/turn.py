"""
Passage d'un jour : la transition d'état quotidienne du zoo.

Ordre des étapes (l'ordre influe sur le résultat et doit être conservé) :
 1) Jour +1, compteur d'achats remis à zéro, marché renouvelé, visiteur spécial effacé
 2) Vieillissement des animaux et mortalité liée à l'âge
 3) Journée de travail du personnel (fin d'affectation => enclos retirés)
 4) Maladies (10 %)
 5) Soins des vétérinaires affectés
 6) Nourrissage, ou famine (30 % de mortalité par animal) si le stock ne suffit pas
 7) Dérive de popularité (±10 %), moins le nombre de malades, plancher à 0
 8) Visiteurs du jour = partie entière de la popularité
 9) Visiteur spécial (célébrité / photographe)
10) Billetterie = visiteurs x nombre d'animaux
11) Salaires et entretien des enclos
12) Échéances des crédits, purge des crédits soldés
"""

import logging
from typing import List, Tuple

from ZooOPS_V1.core.market import refresh_market
from ZooOPS_V1.domain.animal import Animal
from ZooOPS_V1.domain.staff import Role
from ZooOPS_V1.domain.types import DaySummary, SpecialVisitor
from ZooOPS_V1.domain.zoo import ZooState
from ZooOPS_V1.rules.placement import detach

logger = logging.getLogger(__name__)

# Tirage 0..99 -> (visiteur, nombre min, nombre max, popularité par visiteur)
SPECIAL_VISITORS: List[Tuple[range, SpecialVisitor, int, int, int]] = [
    (range(20, 30), SpecialVisitor.CELEBRITY, 1, 2, 10),
    (range(30, 50), SpecialVisitor.PHOTOGRAPHER, 1, 3, 5),
]


def _roll(rng) -> int:
    """Tirage entier uniforme dans [0, 99]."""
    return int(rng.integers(0, 100))


def remove_animal(state: ZooState, animal: Animal) -> None:
    """Retire un animal de son enclos puis du registre (décès ou vente)."""
    detach(animal, state.enclosures)
    del state.animals[animal.id]


def _age_animals(state: ZooState, rng) -> List[str]:
    """Étape 2 : vieillissement puis mortalité (âge > 30 : décès si tirage < âge)."""
    dead: List[str] = []
    for animal in list(state.animals.values()):
        animal.grow_one_day()
        if animal.age_days > state.settings.old_age_days and _roll(rng) < animal.age_days:
            remove_animal(state, animal)
            dead.append(animal.name)
            logger.info("%s (#%d) est mort de vieillesse à %d jours", animal.name, animal.id, animal.age_days)
    return dead


def _staff_day(state: ZooState) -> None:
    """Étape 3."""
    for worker in state.workers.values():
        had_assignments = bool(worker.assigned)
        worker.work_one_day()
        if had_assignments and not worker.assigned:
            logger.debug("Fin d'affectation pour %s", worker.name)


def _spread_sickness(state: ZooState, rng) -> int:
    """Étape 4 : chaque animal sain tombe malade avec une probabilité fixe."""
    newly_sick = 0
    for animal in state.animals.values():
        if not animal.sick and _roll(rng) < state.settings.sickness_pct:
            animal.sick = True
            newly_sick += 1
    return newly_sick


def _treat_animals(state: ZooState) -> int:
    """Étape 5 : chaque vétérinaire en affectation soigne jusqu'à `max_animals`
    malades de ses enclos, dans l'ordre du registre."""
    healed = 0
    for worker in state.workers.values():
        if worker.role != Role.VETERINARIAN or worker.days_assigned <= 0:
            continue
        treated = 0
        for animal in state.animals.values():
            if treated >= worker.max_animals:
                break
            if animal.sick and animal.enclosure_id in worker.assigned:
                animal.sick = False
                treated += 1
        healed += treated
    return healed


def _feed_animals(state: ZooState, rng) -> Tuple[int, int, List[str]]:
    """Étape 6 : retourne (besoin, consommé, morts de faim).

    Pas de consommation partielle : si le stock ne couvre pas le besoin, il
    reste intact et chaque animal meurt de faim avec une probabilité fixe.
    """
    needed = state.food_demand()
    if state.food >= needed:
        state.food -= needed
        return needed, needed, []

    starved: List[str] = []
    for animal in list(state.animals.values()):
        if _roll(rng) < state.settings.starvation_pct:
            remove_animal(state, animal)
            starved.append(animal.name)
            logger.info("%s (#%d) est mort de faim", animal.name, animal.id)
    return needed, 0, starved


def _drift_popularity(state: ZooState, rng) -> None:
    """Étape 7."""
    drift = state.settings.popularity_drift_pct
    state.popularity *= 1.0 + int(rng.integers(-drift, drift + 1)) / 100.0
    state.popularity -= state.sick_count
    if state.popularity < 0:
        state.popularity = 0.0


def _special_visitor(state: ZooState, rng) -> None:
    """Étape 9 : un seul tirage ; la popularité gagnée profite aux jours suivants."""
    roll = _roll(rng)
    for rolls, kind, lo, hi, gain in SPECIAL_VISITORS:
        if roll in rolls:
            count = int(rng.integers(lo, hi + 1))
            state.special_visitor = kind
            state.special_visitor_count = count
            state.popularity += count * gain
            logger.info("Visiteur spécial : %d x %s", count, kind.value)
            return
    state.special_visitor = SpecialVisitor.NONE
    state.special_visitor_count = 0


def _repay_loans(state: ZooState) -> Tuple[float, List[int]]:
    """Étape 12 : prélève les échéances, puis purge les crédits soldés."""
    paid = 0.0
    paid_off: List[int] = []
    for loan in state.loans.values():
        if loan.days_left > 0:
            paid += loan.pay_one_day()
            if loan.days_left == 0:
                paid_off.append(loan.id)
                logger.info("Crédit #%d remboursé", loan.id)
    state.loans = {k: loan for k, loan in state.loans.items() if loan.days_left > 0}
    return paid, paid_off


def advance_day(state: ZooState, rng) -> DaySummary:
    """Fait avancer le zoo d'un jour et retourne le bilan de la journée.

    Args:
        state: Zoo à faire évoluer (modifié en place).
        rng: Générateur aléatoire (`numpy.random.Generator` ou équivalent
            exposant `integers` et `choice`).

    Returns:
        DaySummary du jour écoulé. `lost` vaut True si la trésorerie est
        négative après la journée ; c'est à la boucle de jeu d'en tirer les
        conséquences.
    """
    cash_start = state.cash

    # 1) Nouveau jour
    state.day += 1
    state.bought_today = 0
    refresh_market(state, rng)
    state.special_visitor = SpecialVisitor.NONE
    state.special_visitor_count = 0

    # 2) Âge
    deaths_by_age = _age_animals(state, rng)

    # 3) Personnel
    _staff_day(state)

    # 4) + 5) Santé
    newly_sick = _spread_sickness(state, rng)
    healed = _treat_animals(state)

    # 6) Nourriture
    food_needed, food_consumed, deaths_by_starvation = _feed_animals(state, rng)

    # 7) + 8) Popularité et fréquentation
    _drift_popularity(state, rng)
    state.visitors = int(state.popularity)

    # 9) Visiteur spécial
    _special_visitor(state, rng)

    # 10) Billetterie
    revenue = state.visitors * state.total_animals
    state.cash += revenue
    if revenue:
        state.ledger.post(state.day, "Billetterie", revenue, "ventes")

    # 11) Charges fixes
    payroll = state.daily_payroll
    upkeep = state.daily_upkeep
    state.cash -= payroll + upkeep
    if payroll:
        state.ledger.post(state.day, "Salaires", -payroll, "salaires")
    if upkeep:
        state.ledger.post(state.day, "Entretien des enclos", -upkeep, "entretien")

    # 12) Crédits
    loan_payments, paid_off = _repay_loans(state)
    state.cash -= loan_payments
    if loan_payments:
        state.ledger.post(state.day, "Échéances de crédits", -loan_payments, "remboursements")

    summary = DaySummary(
        day=state.day,
        cash_start=round(cash_start, 2),
        cash_end=round(state.cash, 2),
        visitors=state.visitors,
        revenue=revenue,
        payroll=payroll,
        upkeep=upkeep,
        loan_payments=round(loan_payments, 2),
        food_needed=food_needed,
        food_consumed=food_consumed,
        starved=food_consumed < food_needed,
        deaths_by_age=deaths_by_age,
        deaths_by_starvation=deaths_by_starvation,
        newly_sick=newly_sick,
        healed=healed,
        special_visitor=state.special_visitor,
        special_visitor_count=state.special_visitor_count,
        popularity=round(state.popularity, 2),
        loans_paid_off=paid_off,
        lost=state.cash < 0,
    )
    logger.debug("Jour %d terminé : %s", state.day, summary)
    return summary
