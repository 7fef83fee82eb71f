"""Stockpiles of food, wood, stone and iron."""

from __future__ import annotations

from dataclasses import dataclass

SPOIL_RATE = 0.05


@dataclass
class Resources:
    """The raw materials held by a kingdom."""

    food: int = 0
    wood: int = 0
    stone: int = 0
    iron: int = 0

    def consume_food(self, amount: int) -> bool:
        """Use food; a shortfall empties the store and returns False."""
        if self.food >= amount:
            self.food -= amount
            return True
        self.food = 0
        return False

    def consume_wood(self, amount: int) -> bool:
        """Use wood; a shortfall empties the store and returns False."""
        if self.wood >= amount:
            self.wood -= amount
            return True
        self.wood = 0
        return False

    def consume_stone(self, amount: int) -> bool:
        """Use stone if enough is held; otherwise leave it untouched."""
        if self.stone >= amount:
            self.stone -= amount
            return True
        return False

    def consume_iron(self, amount: int) -> bool:
        """Use iron if enough is held; otherwise leave it untouched."""
        if self.iron >= amount:
            self.iron -= amount
            return True
        return False

    def gather_food(self, amount: int) -> None:
        self.food += amount

    def gather_wood(self, amount: int) -> None:
        self.wood += amount

    def gather_stone(self, amount: int) -> None:
        self.stone += amount

    def gather_iron(self, amount: int) -> None:
        self.iron += amount

    def spoil_food(self) -> None:
        """Lose a twentieth of the food store to rot."""
        self.food -= int(self.food * SPOIL_RATE)
        if self.food < 0:
            self.food = 0

    def report(self) -> str:
        return "\n".join(
            [
                "=== Resources ===",
                f"Food: {self.food} units",
                f"Wood: {self.wood} logs",
                f"Stone: {self.stone} blocks",
                f"Iron: {self.iron} ingots",
            ]
        )