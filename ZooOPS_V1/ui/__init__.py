"""
Interface console : seule couche qui lit l'entrée standard et affiche.
"""
