"""The standing army: recruits, trained soldiers, morale and pay."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .resources import Resources


def _tdiv(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _clamp(value: int, low: int = 0, high: int = 100) -> int:
    return max(low, min(high, value))


@dataclass
class Army:
    """A kingdom's army; morale and corruption are percentages."""

    recruits: int
    food_stock: int
    salary_fund: int
    trained_soldiers: int = 15
    morale: int = 70
    corruption: int = 0

    @property
    def total(self) -> int:
        return self.recruits + self.trained_soldiers

    def recruit(self, count: int) -> None:
        """Enlist new recruits; each levy costs a little morale."""
        self.recruits += count
        self.morale = max(0, self.morale - 2)

    def train(self, days: int) -> None:
        """Turn recruits into trained soldiers over the given number of days."""
        new_trained = min(_tdiv(self.recruits * days, 20), self.recruits)
        self.trained_soldiers += new_trained
        self.recruits -= new_trained
        self.morale = min(100, self.morale + _tdiv(days, 2))

    def auto_feed(self, resources: Resources) -> None:
        """Feed one ration to every soldier from the kingdom's stores."""
        if resources.consume_food(self.total):
            self.morale += 5
        else:
            self.morale -= 10
        self.morale = _clamp(self.morale)

    def feed(self, resources: Resources, amount: int) -> bool:
        """Feed the army a chosen amount of food; False if the stores fall short."""
        fed = resources.consume_food(amount)
        if fed:
            required = self.total
            if amount >= required * 2:
                self.morale += 10
            elif amount >= required:
                self.morale += 5
            else:
                self.morale -= 5
        else:
            self.morale -= 15
        self.morale = _clamp(self.morale)
        return fed

    def pay(self, gold: int) -> None:
        """Add gold to the salary fund and pay the trained soldiers if it suffices."""
        self.salary_fund += gold
        required = self.trained_soldiers * 3
        if self.salary_fund > required:
            self.salary_fund -= required
            self.morale += 10
            self.corruption -= 5
        else:
            self.morale -= 13
            self.corruption += 10
        self.morale = _clamp(self.morale)
        self.corruption = _clamp(self.corruption)

    def update_morale(self, stable_leadership: bool) -> None:
        if stable_leadership:
            self.morale += 5
            self.corruption -= 5
        else:
            self.morale -= 8
            self.corruption += 7
        self.morale = _clamp(self.morale)
        self.corruption = _clamp(self.corruption)

    def report(self) -> str:
        return "\n".join(
            [
                f"Recruits: {self.recruits}",
                f"Trained Soldiers: {self.trained_soldiers}",
                f"Total Soldiers: {self.total}",
                f"Morale: {self.morale}%",
                f"Corruption: {self.corruption}%",
                f"Food Stock: {self.food_stock}",
                f"Salary Fund: {self.salary_fund} gold",
            ]
        )