"""
ZooOPS package

Simulation de gestion d'un zoo sur une suite bornée de jours : animaux,
enclos, personnel, crédits et trésorerie.  Le moteur (core), les objets
métier (domain), les règles (rules), les données (data) et l'interface
console (ui) sont séparés en sous-paquets.
"""

__all__ = ["core", "domain", "data", "rules", "ui"]
