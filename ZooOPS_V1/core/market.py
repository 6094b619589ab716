"""
Marché aux animaux.

À chaque renouvellement, on tire sans remise min(taille_marché, |catalogue|)
fiches du catalogue maître ; chaque offre reçoit un sexe aléatoire. La
nouvelle liste remplace intégralement la précédente.
"""

import logging
from typing import List, Optional, Sequence

from ZooOPS_V1.domain.market import CATALOG_ANIMALS, AnimalTemplate, MarketOffer
from ZooOPS_V1.domain.types import Sex
from ZooOPS_V1.domain.zoo import ZooState

logger = logging.getLogger(__name__)

SEXES = (Sex.MALE, Sex.FEMALE)


def draw_offers(
    rng, size: int, catalog: Optional[Sequence[AnimalTemplate]] = None
) -> List[MarketOffer]:
    """Tire `size` fiches distinctes du catalogue (borné à sa taille)."""
    catalog = CATALOG_ANIMALS if catalog is None else catalog
    n = min(size, len(catalog))
    if n <= 0:
        return []
    indices = rng.choice(len(catalog), size=n, replace=False)
    return [
        MarketOffer(template=catalog[int(i)], sex=SEXES[int(rng.integers(0, 2))])
        for i in indices
    ]


def refresh_market(
    state: ZooState, rng, catalog: Optional[Sequence[AnimalTemplate]] = None
) -> None:
    """Renouvelle entièrement les offres du marché (sans frais)."""
    state.market = draw_offers(rng, state.settings.market_size, catalog)
    logger.debug(
        "Marché renouvelé (jour %d) : %s",
        state.day,
        ", ".join(offer.species for offer in state.market),
    )
