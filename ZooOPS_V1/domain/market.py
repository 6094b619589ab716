"""
Domain market primitives: species catalog and market offers.

Le catalogue maître (10 espèces) est lu depuis `data/animal_catalog.json`
et validé par Pydantic au chargement du module.
"""

from pathlib import Path
from typing import List

from pydantic import BaseModel, Field, RootModel

from ZooOPS_V1.domain.animal import Animal
from ZooOPS_V1.domain.types import Climate, Diet, Sex
from ZooOPS_V1.utils import load_and_validate


class AnimalTemplate(BaseModel):
    """Fiche espèce du catalogue (le sexe est tiré à chaque instanciation)."""

    species: str = Field(min_length=1)
    age_days: int = Field(ge=0)
    weight: float = Field(gt=0)
    climate: Climate
    price: int = Field(gt=0)
    diet: Diet


class AnimalCatalog(RootModel[List[AnimalTemplate]]):
    pass


class MarketOffer(BaseModel):
    """Animal proposé à la vente : pas encore d'identifiant dans le zoo."""

    template: AnimalTemplate
    sex: Sex

    @property
    def species(self) -> str:
        return self.template.species

    @property
    def price(self) -> int:
        return self.template.price

    def to_animal(self, animal_id: int) -> Animal:
        """Instancie l'offre en animal du zoo (non placé)."""
        t = self.template
        return Animal(
            id=animal_id,
            species=t.species,
            name=t.species,
            age_days=t.age_days,
            weight=t.weight,
            climate=t.climate,
            price=t.price,
            diet=t.diet,
            sex=self.sex,
        )


data_path = Path(__file__).parent.parent / "data" / "animal_catalog.json"
CATALOG_ANIMALS: List[AnimalTemplate] = load_and_validate(data_path, AnimalCatalog).root
