"""
Règles métier : placement en enclos, reproduction, affectation du personnel.
"""
