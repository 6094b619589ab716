import argparse
import logging

from ZooOPS_V1.core.game import create_zoo
from ZooOPS_V1.data.game_params import load_settings
from ZooOPS_V1.settings import init_logging
from ZooOPS_V1.ui.console import play
from ZooOPS_V1.utils import get_text


def run():
    parser = argparse.ArgumentParser(description="ZooOPS : simulation de gestion de zoo")
    parser.add_argument("--seed", type=int, default=None, help="graine aléatoire (partie reproductible)")
    parser.add_argument("--settings", default=None, help="fichier JSON de réglages")
    parser.add_argument("--verbose", action="store_true", help="journal détaillé")
    args = parser.parse_args()

    init_logging(logging.DEBUG if args.verbose else logging.WARNING)
    settings = load_settings(args.settings)

    name = get_text("Nom de votre zoo : ", "⚠️ Le nom ne peut pas être vide.")
    zoo = create_zoo(name, settings=settings, seed=args.seed)
    play(zoo)


if __name__ == "__main__":
    run()
