# ZooOPS_V1/ui/console.py
"""Boucle de jeu en console : menus, saisies et affichage autour de la façade `Zoo`."""

from ZooOPS_V1.core.errors import ZooError
from ZooOPS_V1.core.game import Zoo
from ZooOPS_V1.domain.staff import Role
from ZooOPS_V1.domain.types import Climate, Diet
from ZooOPS_V1.ui.affichage import (
    bold,
    format_to_dollar,
    green,
    print_animals,
    print_day_summary,
    print_enclosures,
    print_ledger,
    print_loans,
    print_market,
    print_status,
    print_workers,
    red,
)
from ZooOPS_V1.utils import get_input, get_text

CLIMATES = {1: Climate.TROPICAL, 2: Climate.TEMPERATE, 3: Climate.ARCTIC}
DIETS = {1: Diet.HERBIVORE, 2: Diet.CARNIVORE}
HIRE_ROLES = {1: Role.VETERINARIAN, 2: Role.CLEANER, 3: Role.FEEDER}


def _choice(prompt: str, lo: int, hi: int) -> int:
    return get_input(
        input_message=prompt,
        fn_validation=lambda x: lo <= x <= hi,
        error_message=f"⚠️ Saisis un entier entre {lo} et {hi}.",
    )


def _attempt(action, success_message=None) -> None:
    """Exécute une action du zoo et affiche la raison d'un éventuel refus."""
    try:
        result = action()
    except ZooError as exc:
        print(red(f"⛔ {exc}"))
        return
    if success_message:
        print(green(success_message(result) if callable(success_message) else success_message))


def menu_animals(zoo: Zoo) -> None:
    state = zoo.state
    while True:
        print("\nAnimaux : 1) Acheter  2) Vendre  3) Liste  4) Renommer  "
              f"5) Renouveler le marché ({format_to_dollar(zoo.settings.market_refresh_fee)})  6) Retour")
        choice = _choice("Action : ", 1, 6)
        if choice == 1:
            print_market(state)
            if not state.market:
                continue
            idx = _choice("Offre (0 = annuler) : ", 0, len(state.market))
            if idx == 0:
                continue
            offer_animal = state.market[idx - 1].to_animal(0)
            valid = zoo.valid_enclosures_for(offer_animal)
            if not valid:
                print(red("Aucun enclos compatible avec de la place."))
                continue
            print("Enclos possibles : " + ", ".join(str(e.id) for e in valid))
            enc_id = _choice("Enclos : ", 1, max(state.enclosures))
            _attempt(lambda: zoo.purchase(idx - 1, enc_id), lambda a: f"✔ {a.name} acheté (#{a.id}).")
        elif choice == 2:
            print_animals(state)
            if state.animals:
                animal_id = _choice("Animal # (0 = annuler) : ", 0, max(state.animals))
                if animal_id:
                    _attempt(lambda: zoo.sell(animal_id), lambda r: f"✔ Vendu pour {format_to_dollar(r)}.")
        elif choice == 3:
            print_animals(state)
        elif choice == 4:
            print_animals(state)
            if state.animals:
                animal_id = _choice("Animal # (0 = annuler) : ", 0, max(state.animals))
                if animal_id:
                    new_name = input("Nouveau nom : ")
                    _attempt(lambda: zoo.rename(animal_id, new_name), "✔ Animal renommé.")
        elif choice == 5:
            _attempt(zoo.refresh_market, "✔ Marché renouvelé.")
        else:
            return


def menu_purchases(zoo: Zoo) -> None:
    while True:
        print("\nAchats : 1) Nourriture  2) Publicité  3) Emprunter  4) Crédits  5) Retour")
        choice = _choice("Action : ", 1, 5)
        if choice == 1:
            units = _choice(f"Unités ({zoo.settings.food_unit_price} $/u.) : ", 0, zoo.settings.max_food_order)
            _attempt(lambda: zoo.buy_food(units), lambda stock: f"✔ Stock : {stock} u.")
        elif choice == 2:
            amount = _choice(f"Budget ({zoo.settings.ad_block} $ = +{zoo.settings.ad_popularity_gain}) : ",
                             0, zoo.settings.max_ad_spend)
            _attempt(lambda: zoo.advertise(amount), lambda pop: f"✔ Popularité : {pop:.1f}")
        elif choice == 3:
            amount = _choice("Montant : ", 1, zoo.settings.max_loan_amount)
            days = _choice(f"Durée (1-{zoo.settings.max_loan_days} jours) : ", 1, zoo.settings.max_loan_days)
            _attempt(lambda: zoo.borrow(amount, days), lambda loan_id: f"✔ Crédit #{loan_id} accordé.")
        elif choice == 4:
            print_loans(zoo.state)
        else:
            return


def menu_enclosures(zoo: Zoo) -> None:
    while True:
        print("\nEnclos : 1) Construire  2) Liste  3) Retour")
        choice = _choice("Action : ", 1, 3)
        if choice == 1:
            capacity = _choice("Capacité : ", 1, zoo.settings.max_enclosure_capacity)
            diet = DIETS[_choice("Régime (1: Herbivores, 2: Carnivores) : ", 1, 2)]
            climate = CLIMATES[_choice("Climat (1: Tropical, 2: Tempéré, 3: Arctique) : ", 1, 3)]
            _attempt(lambda: zoo.build_enclosure(capacity, diet, climate), lambda i: f"✔ Enclos #{i} construit.")
        elif choice == 2:
            print_enclosures(zoo.state)
        else:
            return


def menu_workers(zoo: Zoo) -> None:
    state = zoo.state
    while True:
        print("\nPersonnel : 1) Embaucher  2) Liste  3) Licencier  4) Affecter  5) Retour")
        choice = _choice("Action : ", 1, 5)
        if choice == 1:
            name = get_text("Nom : ")
            role = HIRE_ROLES[_choice("Poste (1: Vétérinaire, 2: Agent d'entretien, 3: Soigneur) : ", 1, 3)]
            _attempt(lambda: zoo.hire(name, role), lambda i: f"✔ {name} embauché (#{i}).")
        elif choice == 2:
            print_workers(state)
        elif choice == 3:
            print_workers(state)
            worker_id = _choice("Salarié # (0 = annuler) : ", 0, max(state.workers))
            if worker_id:
                _attempt(lambda: zoo.fire(worker_id), lambda w: f"✔ {w.name} licencié.")
        elif choice == 4:
            print_workers(state)
            worker_id = _choice("Salarié # (0 = annuler) : ", 0, max(state.workers))
            if not worker_id:
                continue
            print_enclosures(state)
            enc_id = _choice("Enclos # : ", 1, max(state.enclosures))
            days = _choice("Durée (jours) : ", 1, zoo.settings.max_assignment_days)
            _attempt(lambda: zoo.assign(worker_id, enc_id, days), "✔ Affectation enregistrée.")
        else:
            return


def menu_breeding(zoo: Zoo) -> None:
    state = zoo.state
    if len(state.animals) < 2:
        print("Il faut au moins deux animaux.")
        return
    print_animals(state)
    first = _choice("Premier animal # (0 = annuler) : ", 0, max(state.animals))
    if not first:
        return
    second = _choice("Second animal # (0 = annuler) : ", 0, max(state.animals))
    if not second:
        return
    _attempt(lambda: zoo.breed(first, second), lambda baby: f"✔ Naissance : {baby.name} (#{baby.id}) !")


MAIN_MENU = {
    1: menu_animals,
    2: menu_purchases,
    3: menu_enclosures,
    4: menu_workers,
    5: menu_breeding,
}


def play(zoo: Zoo) -> bool:
    """Boucle principale ; retourne True si la partie est gagnée."""
    while zoo.state.day <= zoo.settings.max_days:
        print_status(zoo.state)
        print("\n1) Animaux  2) Achats  3) Enclos  4) Personnel  5) Reproduction  6) Jour suivant")
        choice = _choice("Action : ", 1, 6)
        if choice in MAIN_MENU:
            MAIN_MENU[choice](zoo)
            continue
        summary = zoo.advance_day()
        print_day_summary(summary)
        print_ledger(zoo.state.ledger, summary.day)
        if zoo.is_lost:
            print(red(bold("💸 Faillite ! La trésorerie est négative. Partie perdue.")))
            return False
    print(green(bold(f"🏆 {zoo.state.name} a tenu {zoo.settings.max_days} jours. Victoire !")))
    return True
