# Paramètres de jeu (admin/scénario)

from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, Field

from ZooOPS_V1.domain.staff import ROLE_MAX_ANIMALS, ROLE_SALARY, Role
from ZooOPS_V1.utils import load_and_validate

# --- Ouverture ---
START_CASH = 1488.0
START_FOOD = 100
START_POPULARITY = 50.0
MAX_DAYS = 20

# --- Marché ---
MARKET_SIZE = 10
MARKET_REFRESH_FEE = 50
PURCHASE_THROTTLE_DAY = 10  # au-delà : 1 achat par jour
SALE_REFUND_DIVISOR = 2  # revente à moitié prix

# --- Achats ---
FOOD_UNIT_PRICE = 2
MAX_FOOD_ORDER = 10_000
AD_BLOCK = 200  # 200 $ = +5 popularité
AD_POPULARITY_GAIN = 5
MAX_AD_SPEND = 10_000

# --- Enclos ---
ENCLOSURE_BUILD_COST_PER_SLOT = 50
ENCLOSURE_UPKEEP_PER_SLOT = 2
MAX_ENCLOSURE_CAPACITY = 100

# --- Crédits ---
LOAN_DAILY_RATE = 0.005  # 0,5 %/jour
MAX_LOAN_AMOUNT = 1_000_000
MAX_LOAN_DAYS = 20
MAX_ASSIGNMENT_DAYS = 365

# --- Aléas journaliers (en %) ---
OLD_AGE_DAYS = 30
SICKNESS_PCT = 10
STARVATION_PCT = 30
POPULARITY_DRIFT_PCT = 10


class GameSettings(BaseModel):
    """Réglages d'une partie, surchargeables depuis un fichier JSON."""

    start_cash: float = START_CASH
    start_food: int = Field(default=START_FOOD, ge=0)
    start_popularity: float = Field(default=START_POPULARITY, ge=0)
    max_days: int = Field(default=MAX_DAYS, ge=1)

    market_size: int = Field(default=MARKET_SIZE, ge=0)
    market_refresh_fee: int = Field(default=MARKET_REFRESH_FEE, ge=0)
    purchase_throttle_day: int = Field(default=PURCHASE_THROTTLE_DAY, ge=0)
    sale_refund_divisor: int = Field(default=SALE_REFUND_DIVISOR, ge=1)

    food_unit_price: int = Field(default=FOOD_UNIT_PRICE, ge=0)
    max_food_order: int = Field(default=MAX_FOOD_ORDER, ge=0)
    ad_block: int = Field(default=AD_BLOCK, gt=0)
    ad_popularity_gain: int = Field(default=AD_POPULARITY_GAIN, ge=0)
    max_ad_spend: int = Field(default=MAX_AD_SPEND, ge=0)

    enclosure_build_cost_per_slot: int = Field(default=ENCLOSURE_BUILD_COST_PER_SLOT, ge=0)
    enclosure_upkeep_per_slot: int = Field(default=ENCLOSURE_UPKEEP_PER_SLOT, ge=0)
    max_enclosure_capacity: int = Field(default=MAX_ENCLOSURE_CAPACITY, ge=1)

    loan_daily_rate: float = Field(default=LOAN_DAILY_RATE, ge=0)
    max_loan_amount: int = Field(default=MAX_LOAN_AMOUNT, ge=1)
    max_loan_days: int = Field(default=MAX_LOAN_DAYS, ge=1)
    max_assignment_days: int = Field(default=MAX_ASSIGNMENT_DAYS, ge=1)

    old_age_days: int = Field(default=OLD_AGE_DAYS, ge=0)
    sickness_pct: int = Field(default=SICKNESS_PCT, ge=0, le=100)
    starvation_pct: int = Field(default=STARVATION_PCT, ge=0, le=100)
    popularity_drift_pct: int = Field(default=POPULARITY_DRIFT_PCT, ge=0, le=100)

    salaries: Dict[Role, int] = Field(default_factory=lambda: dict(ROLE_SALARY))
    vet_capacity: int = Field(default=ROLE_MAX_ANIMALS[Role.VETERINARIAN], ge=0)


def load_settings(json_path: Optional[Path | str] = None) -> GameSettings:
    """Charge les réglages depuis un JSON (clés partielles acceptées).

    Sans chemin, retourne les réglages par défaut.
    """
    if json_path is None:
        return GameSettings()
    return load_and_validate(Path(json_path), GameSettings)
