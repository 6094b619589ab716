"""Tests for the daily state transition."""

import numpy as np
import pytest

from ZooOPS_V1.domain import Climate, Diet, Role, SpecialVisitor

from conftest import ScriptedRng, add_animal, check_consistency

# Directeur, agent d'entretien, vétérinaire, soigneur
DAILY_FIXED_COSTS = 60 + 30 + 50 + 40 + 10


def _vet_id(zoo) -> int:
    return next(w.id for w in zoo.state.workers.values() if w.role == Role.VETERINARIAN)


def _script_empty_zoo_day(rng, drift: int, visitor_roll: int, *counts: int) -> None:
    """Queue the rolls of a day with no animals: market sexes, drift, visitor."""
    rng.push(*([1] * 10), drift, visitor_roll, *counts)


def test_first_day_with_one_purchase(zoo) -> None:
    animal = zoo.purchase(0, 1)
    assert animal.species == "Cerf"

    summary = zoo.advance_day()

    assert summary.day == 2
    assert summary.visitors == 55
    assert summary.revenue == 55
    assert summary.payroll == 180
    assert summary.upkeep == 10
    assert summary.food_consumed == 1
    assert zoo.state.cash == pytest.approx(1203)
    assert zoo.state.food == 99
    assert zoo.state.total_animals == 1
    assert summary.lost is False


def test_empty_zoo_only_pays_fixed_costs(zoo) -> None:
    summary = zoo.advance_day()
    assert summary.revenue == 0
    assert zoo.state.cash == pytest.approx(1488 - DAILY_FIXED_COSTS)
    assert summary.net == pytest.approx(-DAILY_FIXED_COSTS)


def test_ledger_matches_cash_movements(zoo) -> None:
    zoo.purchase(0, 1)
    zoo.advance_day()
    ledger = zoo.state.ledger
    assert ledger.balance_by_account(day=1) == {"animaux": -150}
    assert ledger.balance_by_account(day=2) == {"ventes": 55, "salaires": -180, "entretien": -10}
    assert ledger.cash_flow(2) == pytest.approx(-135)


def test_counters_reset_and_market_regenerated(zoo) -> None:
    zoo.state.bought_today = 3
    zoo.state.market = []
    zoo.state.special_visitor = SpecialVisitor.CELEBRITY
    zoo.state.special_visitor_count = 2

    zoo.advance_day()

    assert zoo.state.bought_today == 0
    assert len(zoo.state.market) == 10
    assert zoo.state.special_visitor == SpecialVisitor.NONE
    assert zoo.state.special_visitor_count == 0


class TestAgeing:
    def test_animals_age_one_day(self, zoo) -> None:
        animal = add_animal(zoo, age_days=10)
        zoo.advance_day()
        assert animal.age_days == 11
        assert animal.days_since_purchase == 1

    def test_no_age_death_up_to_thirty(self, zoo) -> None:
        zoo.rng = ScriptedRng(low_mode=True)
        add_animal(zoo, age_days=29)
        summary = zoo.advance_day()
        assert summary.deaths_by_age == []
        assert zoo.state.total_animals == 1

    @pytest.mark.parametrize("seed", range(5))
    def test_age_death_certain_from_hundred(self, zoo, seed) -> None:
        zoo.rng = np.random.default_rng(seed)
        animal = add_animal(zoo, age_days=99)
        summary = zoo.advance_day()
        assert summary.deaths_by_age == [animal.name]
        assert zoo.state.total_animals == 0
        assert zoo.state.enclosures[1].residents == []

    def test_old_animal_survives_high_roll(self, zoo) -> None:
        add_animal(zoo, age_days=40)
        assert zoo.advance_day().deaths_by_age == []


class TestStaffDay:
    def test_assignment_expires(self, zoo) -> None:
        cleaner = zoo.state.workers[zoo.hire("Tank", Role.CLEANER)]
        zoo.assign(cleaner.id, 1, 2)

        zoo.advance_day()
        assert cleaner.days_assigned == 1
        assert cleaner.assigned == {1}

        zoo.advance_day()
        assert cleaner.days_assigned == 0
        assert cleaner.assigned == set()
        assert cleaner.days_worked == 2

    def test_opening_assignments_without_duration_are_cleared(self, zoo) -> None:
        zoo.advance_day()
        assert all(not w.assigned for w in zoo.state.workers.values())


class TestHealth:
    def test_low_rolls_make_animals_sick(self, zoo) -> None:
        zoo.rng = ScriptedRng(low_mode=True)
        zoo.state.food = 100
        add_animal(zoo)
        add_animal(zoo)
        summary = zoo.advance_day()
        assert summary.newly_sick == 2
        assert zoo.state.sick_count == 2

    def test_assigned_vet_heals(self, zoo) -> None:
        animal = add_animal(zoo)
        animal.sick = True
        zoo.assign(_vet_id(zoo), 1, 3)

        summary = zoo.advance_day()

        assert summary.healed == 1
        assert animal.sick is False

    def test_vet_heals_at_most_capacity(self, zoo) -> None:
        sick = [add_animal(zoo) for _ in range(3)]
        for animal in sick:
            animal.sick = True
        vet = zoo.state.workers[_vet_id(zoo)]
        vet.assigned = {1}
        vet.days_assigned = 3
        vet.max_animals = 2

        summary = zoo.advance_day()

        assert summary.healed == 2
        assert [a.sick for a in sick] == [False, False, True]

    def test_unassigned_vet_does_nothing(self, zoo) -> None:
        animal = add_animal(zoo)
        animal.sick = True
        assert zoo.advance_day().healed == 0
        assert animal.sick is True


class TestFeeding:
    def test_carnivores_eat_two_units(self, zoo) -> None:
        enc_id = zoo.build_enclosure(5, Diet.CARNIVORE, Climate.TEMPERATE)
        add_animal(zoo, enclosure_id=enc_id, diet=Diet.CARNIVORE)
        add_animal(zoo, enclosure_id=enc_id, diet=Diet.CARNIVORE)
        summary = zoo.advance_day()
        assert summary.food_needed == 4
        assert zoo.state.food == 96

    def test_shortage_leaves_stock_untouched(self, zoo) -> None:
        zoo.state.food = 1
        add_animal(zoo)
        add_animal(zoo)

        summary = zoo.advance_day()

        assert summary.starved is True
        assert summary.food_consumed == 0
        assert zoo.state.food == 1
        # tirages hauts : personne ne meurt
        assert summary.deaths_by_starvation == []
        assert zoo.state.total_animals == 2

    def test_starvation_kills_on_low_rolls(self, zoo) -> None:
        zoo.rng = ScriptedRng(low_mode=True)
        zoo.state.food = 0
        for _ in range(3):
            add_animal(zoo)

        summary = zoo.advance_day()

        assert len(summary.deaths_by_starvation) == 3
        assert zoo.state.total_animals == 0
        assert zoo.state.food == 0
        check_consistency(zoo.state)

    @pytest.mark.parametrize("seed", range(5))
    def test_starvation_never_exceeds_population(self, zoo, seed) -> None:
        zoo.rng = np.random.default_rng(seed)
        zoo.state.food = 0
        for _ in range(5):
            add_animal(zoo)
        summary = zoo.advance_day()
        dead = len(summary.deaths_by_age) + len(summary.deaths_by_starvation)
        assert zoo.state.total_animals == 5 - dead >= 0
        check_consistency(zoo.state)


class TestPopularity:
    def test_sick_animals_lower_popularity_floor_zero(self, zoo) -> None:
        zoo.state.popularity = 0.5
        for _ in range(3):
            add_animal(zoo).sick = True
        summary = zoo.advance_day()
        assert summary.popularity == 0
        assert summary.visitors == 0
        assert summary.revenue == 0

    def test_celebrity_visit(self, zoo, rng) -> None:
        _script_empty_zoo_day(rng, 0, 25, 2)
        summary = zoo.advance_day()
        assert summary.visitors == 50
        assert summary.special_visitor == SpecialVisitor.CELEBRITY
        assert summary.special_visitor_count == 2
        assert zoo.state.popularity == pytest.approx(70)

    def test_photographer_visit(self, zoo, rng) -> None:
        _script_empty_zoo_day(rng, 0, 40, 3)
        summary = zoo.advance_day()
        assert summary.special_visitor == SpecialVisitor.PHOTOGRAPHER
        assert summary.special_visitor_count == 3
        assert zoo.state.popularity == pytest.approx(65)

    @pytest.mark.parametrize("roll", [0, 19, 50, 99])
    def test_no_special_visitor_outside_ranges(self, zoo, rng, roll) -> None:
        _script_empty_zoo_day(rng, -10, roll)
        summary = zoo.advance_day()
        assert summary.special_visitor == SpecialVisitor.NONE
        assert zoo.state.popularity == pytest.approx(45)


class TestLoans:
    def test_loan_repaid_over_term(self, zoo) -> None:
        loan_id = zoo.borrow(1000, 2)
        assert zoo.state.loans[loan_id].daily_repayment == pytest.approx(505)

        first = zoo.advance_day()
        assert first.loan_payments == pytest.approx(505)
        assert first.loans_paid_off == []
        assert zoo.state.cash == pytest.approx(1488 + 1000 - DAILY_FIXED_COSTS - 505)

        second = zoo.advance_day()
        assert second.loans_paid_off == [loan_id]
        assert zoo.state.loans == {}
        assert zoo.state.cash == pytest.approx(1488 + 1000 - 2 * (DAILY_FIXED_COSTS + 505))

    def test_ten_day_loan_purged_after_ten_days(self, zoo) -> None:
        zoo.state.cash = 1_000_000
        zoo.borrow(1000, 10)
        for _ in range(9):
            zoo.advance_day()
            assert len(zoo.state.loans) == 1
        zoo.advance_day()
        assert zoo.state.loans == {}
        assert zoo.state.total_debt == 0


def test_negative_cash_flags_loss(zoo) -> None:
    zoo.state.cash = 100
    summary = zoo.advance_day()
    assert summary.lost is True
    assert zoo.is_lost
    assert not zoo.is_won
