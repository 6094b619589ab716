"""
Actions refusées par le moteur.

Chaque action du zoo lève une `ZooError` *avant* toute mutation ; le message
de l'exception est la raison lisible à afficher au joueur.
"""


class ZooError(Exception):
    """Action refusée (jamais fatale pour la partie)."""


class ValidationError(ZooError):
    """Saisie hors bornes ou mal formée."""


class UnknownEntity(ValidationError):
    """Identifiant d'animal, d'enclos, de salarié ou d'offre inexistant."""


class IneligibleOperation(ZooError):
    """Règle métier non respectée (placement, affectation, licenciement...)."""


class IneligiblePairing(IneligibleOperation):
    """Couple non éligible à la reproduction."""


class InsufficientFunds(ZooError):
    """Trésorerie insuffisante pour l'action demandée."""
