"""Crédits contractés par le zoo (remboursement journalier constant)."""

from pydantic import BaseModel, Field, model_validator


class Loan(BaseModel):
    """Crédit à intérêt simple, remboursé en échéances journalières égales.

    daily_repayment = (principal + principal * daily_rate * days) / days

    Exemple
    -------
    >>> loan = Loan(id=1, principal=1000, days=10, daily_rate=0.005)
    >>> loan.daily_repayment
    105.0
    """

    id: int
    principal: float = Field(gt=0)
    days: int = Field(gt=0, description="Durée du crédit (jours)")
    daily_rate: float = Field(default=0.005, ge=0)
    days_left: int = -1

    @model_validator(mode="after")
    def _init_days_left(self) -> "Loan":
        if self.days_left < 0:
            self.days_left = self.days
        if self.days_left > self.days:
            raise ValueError("days_left ne peut pas dépasser la durée du crédit")
        return self

    @property
    def total_interest(self) -> float:
        return self.principal * self.daily_rate * self.days

    @property
    def daily_repayment(self) -> float:
        return (self.principal + self.total_interest) / self.days

    @property
    def remaining_debt(self) -> float:
        return self.daily_repayment * self.days_left

    def pay_one_day(self) -> float:
        """Prélève une échéance si le crédit est actif et retourne le montant payé."""
        if self.days_left <= 0:
            return 0.0
        self.days_left -= 1
        return self.daily_repayment
