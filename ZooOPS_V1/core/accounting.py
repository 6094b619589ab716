"""
Journal de trésorerie du zoo : chaque mouvement de caisse est enregistré
par jour et par compte.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

# Comptes (plan simplifié, montants signés : + encaissement, - décaissement)
ACCOUNTS = {
    "ventes": "Billetterie (visiteurs)",
    "animaux": "Achats / ventes d'animaux",
    "salaires": "Charges de personnel",
    "entretien": "Entretien des enclos",
    "construction": "Construction d'enclos",
    "nourriture": "Achats de nourriture",
    "publicite": "Publicité",
    "marche": "Renouvellement du marché",
    "emprunts": "Emprunts reçus",
    "remboursements": "Remboursements d'emprunts",
}


@dataclass
class Entry:
    """Une écriture de caisse.

    Attributes:
        day: Jour de jeu auquel l'écriture se rattache.
        label: Libellé lisible décrivant l'opération.
        amount: Montant signé (positif = encaissement).
        account: Clé de compte dans `ACCOUNTS`.
    """

    day: int
    label: str
    amount: float
    account: str


@dataclass
class Ledger:
    """Livre de caisse"""

    entries: List[Entry] = field(default_factory=list)

    def post(self, day: int, label: str, amount: float, account: str) -> None:
        """Ajoute une écriture au journal.

        Raises:
            ValueError: Si le compte est inconnu ou le montant nul.
        """
        if account not in ACCOUNTS:
            raise ValueError(f"Compte inconnu '{account}' pour '{label}'")
        if round(amount, 2) == 0.0:
            raise ValueError(f"Écriture de montant nul '{label}'")
        self.entries.append(Entry(day=day, label=label, amount=round(amount, 2), account=account))

    def balance_by_account(self, day: Optional[int] = None) -> Dict[str, float]:
        """Soldes par compte, sur tout l'historique ou pour un seul jour."""
        balances: Dict[str, float] = {}
        for entry in self.entries:
            if day is not None and entry.day != day:
                continue
            balances[entry.account] = round(balances.get(entry.account, 0.0) + entry.amount, 2)
        return balances

    def cash_flow(self, day: int) -> float:
        """Variation nette de trésorerie sur une journée."""
        return round(sum(e.amount for e in self.entries if e.day == day), 2)
