"""Social classes, the population at large and the ruler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from .resources import Resources


def _tdiv(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _clamp(value: float, low: float = 0, high: float = 100) -> float:
    return max(low, min(high, value))


@dataclass
class SocialClass:
    """A class of subjects with a head count and a happiness percentage."""

    population: int
    happiness: float = 70.0
    name: ClassVar[str] = "Commoner"

    def report(self) -> str:
        return "\n".join(
            [
                f"Type: {self.name}",
                f"Population: {self.population}",
                f"Happiness: {self.happiness:g}%",
            ]
        )


class Peasant(SocialClass):
    name = "Peasant"

    def update(self) -> None:
        """Crowding makes peasants unhappy; small villages grow content."""
        if self.population >= 150:
            self.happiness -= 4
        else:
            self.happiness += 2
        self.happiness = _clamp(self.happiness)


class Merchant(SocialClass):
    name = "Merchant"

    def update(self) -> None:
        self.happiness = min(100, self.happiness + 2)


class Noble(SocialClass):
    name = "Noble"

    def update(self) -> None:
        self.happiness = min(100, self.happiness + 1)


@dataclass
class Population:
    """The kingdom's head count with its monthly births, illness and deaths."""

    total: int
    ill: int = 0
    births: int = 0
    deaths: int = 0
    shelter: int = 0

    def update(self, resources: Resources) -> None:
        """Advance one month against the current food supply."""
        food_supply = resources.food
        if food_supply < self.total:
            shortage = self.total - food_supply
            self.ill = _tdiv(shortage, 10)
            self.deaths = _tdiv(shortage, 20)
            self.total -= self.deaths
        else:
            self.deaths = 0
            self.ill = 0

        if self.shelter < _tdiv(self.total, 2):
            self.births = _tdiv(self.shelter, 20)
        else:
            self.births = _tdiv(self.shelter, 10)

        self.total = max(0, self.total + self.births)

    def is_stable(self) -> bool:
        return self.ill < _tdiv(self.total, 10) and self.deaths < _tdiv(self.total, 25)

    def report(self) -> str:
        return "\n".join(
            [
                f"=== Total Population ==={self.total}",
                f"Births: {self.births}, Ill: {self.ill}, Deaths: {self.deaths}",
            ]
        )


@dataclass
class Leadership:
    """The ruler and whether the realm is politically stable."""

    ruler_name: str
    stable: bool = True

    def report(self) -> str:
        return "\n".join(
            [
                "=== Leadership Status ===",
                f"Ruler: {self.ruler_name}",
                f"Stability: {'Stable' if self.stable else 'Unstable'}",
            ]
        )