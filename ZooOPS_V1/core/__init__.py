"""
Core package for ZooOPS.

Moteur de la simulation : façade `Zoo` (game), passage de jour (turn),
marché aux animaux (market), journal de caisse (accounting) et erreurs.
Les modules s'importent directement, ex. `from ZooOPS_V1.core.game import create_zoo`.
"""
