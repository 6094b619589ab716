"""
Point d'entrée data : réglages de partie et catalogue des espèces.
"""

from .game_params import GameSettings, load_settings

__all__ = ["GameSettings", "load_settings"]
