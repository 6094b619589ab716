from ZooOPS_V1.core.accounting import ACCOUNTS, Ledger
from ZooOPS_V1.domain.staff import Role
from ZooOPS_V1.domain.types import (
    CLIMATE_LABELS,
    DIET_LABELS,
    SEX_LABELS,
    DaySummary,
    SpecialVisitor,
)
from ZooOPS_V1.domain.zoo import ZooState

SPECIAL_LABELS = {
    SpecialVisitor.CELEBRITY: "Célébrité",
    SpecialVisitor.PHOTOGRAPHER: "Photographe",
}


def bold(text: str) -> str:
    return f"\033[1m{text}\033[0m"


def green(text: str) -> str:
    return f"\033[92m{text}\033[0m"


def red(text: str) -> str:
    return f"\033[91m{text}\033[0m"


def format_to_dollar(x: float) -> str:
    """Format a float as a dollar amount (no decimals, thin spaces)."""
    return f"{x:,.0f} $".replace(",", " ")


def _signed(x: float) -> str:
    text = f"{x:+,.2f} $".replace(",", " ")
    return green(text) if x >= 0 else red(text)


def print_status(state: ZooState) -> None:
    print("\n" + "=" * 40)
    print(bold(f"🦁 {state.name} | Jour {state.day}/{state.settings.max_days}"))
    print("=" * 40)
    print(f"💰 Trésorerie : {format_to_dollar(state.cash)}")
    print(f"🥩 Nourriture : {state.food} u. (besoin/jour : {state.food_demand()})")
    print(f"⭐ Popularité : {state.popularity:.1f}")
    print(f"👥 Visiteurs (veille) : {state.visitors}")
    print(f"🐾 Animaux : {state.total_animals}")
    if state.special_visitor != SpecialVisitor.NONE:
        label = SPECIAL_LABELS[state.special_visitor]
        print(f"📸 Visiteur spécial : {label} x{state.special_visitor_count}")
    if state.loans:
        print(f"🏦 Dette restante : {format_to_dollar(state.total_debt)}")


def print_market(state: ZooState) -> None:
    if not state.market:
        print("Le marché est vide.")
        return
    print("\n🛒 Marché :")
    for i, offer in enumerate(state.market, start=1):
        t = offer.template
        print(
            f"{i:2d}. {t.species:<13s} {format_to_dollar(t.price):>7s}  "
            f"{SEX_LABELS[offer.sex]}  {CLIMATE_LABELS[t.climate]:<9s} {DIET_LABELS[t.diet]}"
        )


def print_animals(state: ZooState) -> None:
    if not state.animals:
        print("Aucun animal.")
        return
    print("\n🐾 Animaux :")
    for a in state.animals.values():
        line = (
            f"#{a.id:<3d} {a.name} ({a.species}), {a.age_days} j, {SEX_LABELS[a.sex]}, "
            f"{a.weight:g} kg, {CLIMATE_LABELS[a.climate]}, enclos {a.enclosure_id or '-'}, "
            f"acheté il y a {a.days_since_purchase} j"
        )
        if a.sick:
            line += red(", malade")
        if a.born_in_zoo:
            line += f", né au zoo ({a.parents[0]} x {a.parents[1]})"
        print(line)


def print_enclosures(state: ZooState) -> None:
    if not state.enclosures:
        print("Aucun enclos.")
        return
    print("\n🏞  Enclos :")
    for enc in state.enclosures.values():
        print(
            f"#{enc.id:<3d} {enc.animal_count}/{enc.capacity} animaux, "
            f"{DIET_LABELS[enc.diet]}, {CLIMATE_LABELS[enc.climate]}, "
            f"entretien {format_to_dollar(enc.daily_cost)}/j"
        )


def print_workers(state: ZooState) -> None:
    print("\n👷 Personnel :")
    for w in state.workers.values():
        encs = ", ".join(str(e) for e in sorted(w.assigned)) or "aucun"
        line = (
            f"#{w.id:<3d} {w.name} ({w.label}), {format_to_dollar(w.salary)}/j, "
            f"{w.days_worked} j travaillés, enclos : {encs}"
        )
        if w.role == Role.VETERINARIAN:
            line += f", max {w.max_animals} animaux"
        if w.days_assigned:
            line += f" ({w.days_assigned} j restants)"
        print(line)


def print_loans(state: ZooState) -> None:
    if not state.loans:
        print("Aucun crédit en cours.")
        return
    print("\n🏦 Crédits :")
    for loan in state.loans.values():
        print(
            f"#{loan.id}: {format_to_dollar(loan.principal)}, taux {loan.daily_rate * 100:.1f} %/j, "
            f"{loan.days_left} j restants, échéance {loan.daily_repayment:,.2f} $, "
            f"reste dû {loan.remaining_debt:,.2f} $"
        )


def print_day_summary(summary: DaySummary) -> None:
    print("\n" + "-" * 40)
    print(bold(f"📅 Bilan du jour {summary.day}"))
    for name in summary.deaths_by_age:
        print(red(f"✝ {name} est mort de vieillesse."))
    if summary.starved:
        print(red(f"⚠️ Nourriture insuffisante ({summary.food_needed} u. nécessaires)."))
    for name in summary.deaths_by_starvation:
        print(red(f"✝ {name} est mort de faim."))
    if summary.newly_sick or summary.healed:
        print(f"🤒 Nouveaux malades : {summary.newly_sick}, soignés : {summary.healed}")
    if summary.special_visitor != SpecialVisitor.NONE:
        label = SPECIAL_LABELS[summary.special_visitor]
        print(f"📸 {summary.special_visitor_count} x {label} !")
    print(f"👥 Visiteurs : {summary.visitors} → billetterie {_signed(summary.revenue)}")
    print(f"👷 Salaires : {_signed(-summary.payroll)}  🏞 Entretien : {_signed(-summary.upkeep)}")
    if summary.loan_payments:
        print(f"🏦 Échéances : {_signed(-summary.loan_payments)}")
    for loan_id in summary.loans_paid_off:
        print(green(f"✔ Crédit #{loan_id} remboursé."))
    print(f"💰 Trésorerie : {format_to_dollar(summary.cash_start)} → {format_to_dollar(summary.cash_end)}")
    print("-" * 40)


def print_ledger(ledger: Ledger, day: int) -> None:
    """Journal de caisse du jour, ventilé par compte."""
    balances = ledger.balance_by_account(day)
    if not balances:
        return
    print(bold(f"📒 Journal de caisse, jour {day}"))
    for account, amount in balances.items():
        print(f"  {ACCOUNTS[account]:<28s} {_signed(amount)}")
    print(f"  {'Flux net':<28s} {_signed(ledger.cash_flow(day))}")
