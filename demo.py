"""
Démo sans saisie : un zoo joue une partie complète avec une stratégie simple
(achat d'herbivores tempérés, nourriture en réserve, vétérinaire affecté).
"""

import logging

from ZooOPS_V1.core.errors import ZooError
from ZooOPS_V1.core.game import create_zoo
from ZooOPS_V1.domain.staff import Role
from ZooOPS_V1.settings import init_logging
from ZooOPS_V1.ui.affichage import print_day_summary, print_ledger, print_status


def run(seed: int = 42):
    init_logging(logging.INFO)
    zoo = create_zoo("Demo Zoo", seed=seed)
    vet_id = next(w.id for w in zoo.state.workers.values() if w.role == Role.VETERINARIAN)

    while zoo.state.day <= zoo.settings.max_days:
        state = zoo.state
        for index, offer in enumerate(state.market):
            animal = offer.to_animal(0)
            enclosures = zoo.valid_enclosures_for(animal)
            if enclosures and offer.price <= state.cash - 300:
                try:
                    zoo.purchase(index, enclosures[0].id)
                except ZooError as exc:
                    logging.getLogger(__name__).info("Achat refusé : %s", exc)
                break

        if state.food < 2 * state.food_demand():
            zoo.buy_food(min(50, int(state.cash // 4)))
        worker = state.workers[vet_id]
        if worker.days_assigned == 0:
            try:
                zoo.assign(vet_id, 1, 5)
            except ZooError as exc:
                logging.getLogger(__name__).info("Affectation refusée : %s", exc)

        summary = zoo.advance_day()
        print_day_summary(summary)
        print_ledger(zoo.state.ledger, summary.day)
        if zoo.is_lost:
            print("💸 Faillite.")
            break

    print_status(zoo.state)


if __name__ == "__main__":
    run()
