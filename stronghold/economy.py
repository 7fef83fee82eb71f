"""Treasury, taxation and the kingdom's bank."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .army import Army
    from .society import Merchant, Peasant, Population

MAX_TAX_RATE = 0.5


def _clamp_rate(rate: float) -> float:
    return max(0.0, min(MAX_TAX_RATE, rate))


@dataclass
class Economy:
    """Treasury in gold, with a tax rate and inflation as fractions."""

    treasury: float
    tax_rate: float = 0.15
    inflation: float = 0.02

    def collect_taxes(
        self, population: Population, peasants: Peasant, merchants: Merchant
    ) -> None:
        """Tax peasants lightly and merchants heavily; inflation creeps up."""
        self.tax_rate = _clamp_rate(self.tax_rate)
        peasant_tax = peasants.population * self.tax_rate * 0.5
        merchant_tax = merchants.population * self.tax_rate * 2.0
        self.treasury += peasant_tax + merchant_tax
        self.inflation += 0.005

    def pay_army(self, army: Army) -> None:
        """Pay the trained soldiers from the treasury if it can afford them."""
        salary_needed = army.trained_soldiers * 3
        if self.treasury >= salary_needed:
            self.treasury -= salary_needed
            army.pay(salary_needed)
        else:
            army.pay(0)

    def adjust_treasury(self, amount: int) -> None:
        self.treasury += amount

    def adjust_tax_rate(self, new_rate: float) -> None:
        self.tax_rate = _clamp_rate(new_rate)

    def apply_inflation(self) -> None:
        self.treasury *= 1.0 - self.inflation

    def report(self) -> str:
        return "\n".join(
            [
                "=== Economy Status ===",
                f"Treasury: {self.treasury:g} gold",
                f"Tax Rate: {self.tax_rate * 100:g}%",
                f"Inflation: {self.inflation * 100:g}%",
            ]
        )


@dataclass
class Bank:
    """A lender that allows one loan at a time and breeds corruption."""

    interest_rate: float = 0.1
    corruption_level: float = 0.0
    loan_debt: float = 0.0

    def take_loan(self, economy: Economy, amount: float) -> bool:
        """Borrow gold; refused when the amount is not positive or a loan is open."""
        if amount <= 0 or self.loan_debt != 0:
            return False
        economy.adjust_tax_rate(economy.tax_rate + 0.02)
        economy.apply_inflation()
        self.loan_debt = amount * 1.2
        economy.adjust_treasury(int(amount))
        self.corruption_level += 5.0
        return True

    def repay_loan(self, economy: Economy, amount: float) -> None:
        """Pay towards the debt; clearing it lifts the loan's tax surcharge."""
        if amount >= self.loan_debt:
            economy.adjust_tax_rate(economy.tax_rate - 0.02)
            self.loan_debt = 0.0
        else:
            self.loan_debt -= amount
            self.corruption_level -= 2.0
        self.corruption_level = max(0.0, self.corruption_level)

    def conduct_audit(self, economy: Economy) -> bool:
        """Halve corruption at a cost of 500 gold once it exceeds 30%."""
        if self.corruption_level > 30.0:
            economy.adjust_treasury(-500)
            self.corruption_level *= 0.5
            return True
        return False

    def report(self) -> str:
        return "\n".join(
            [
                "=== Bank System ===",
                f"Active Loan: {self.loan_debt:g} gold",
                f"Interest Rate: {self.interest_rate * 100:g}%",
                f"Corruption Level: {self.corruption_level:g}%",
            ]
        )