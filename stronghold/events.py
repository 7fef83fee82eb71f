"""Random disasters that strike the kingdom at intervals."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .army import Army
    from .economy import Economy
    from .resources import Resources
    from .society import Merchant, Noble, Peasant, Population


def _tdiv(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _clamp(value, low=0, high=100):
    return max(low, min(high, value))


class EventType(IntEnum):
    NONE = 0
    FAMINE = 1
    PLAGUE = 2
    FLOOD = 3
    TORNADO = 4
    ECONOMIC_CRISIS = 5
    CORRUPTION = 6
    REVOLT = 7


# Upper bounds (exclusive) on a roll of 0..99 for each event.
_EVENT_TABLE = (
    (15, EventType.FAMINE),
    (30, EventType.PLAGUE),
    (45, EventType.FLOOD),
    (60, EventType.TORNADO),
    (75, EventType.ECONOMIC_CRISIS),
    (90, EventType.CORRUPTION),
)


@dataclass
class KingdomEvent:
    """Schedules and applies kingdom-wide events."""

    interval_minutes: int
    last_trigger: float = field(default_factory=time.time)
    last_event: EventType = EventType.NONE

    def should_trigger(self, now: float | None = None) -> bool:
        """True once the interval has passed since the last event."""
        if now is None:
            now = time.time()
        return now - self.last_trigger >= self.interval_minutes * 60

    def random_event(self, rng: random.Random | None = None) -> EventType:
        roll = (rng or random).randrange(100)
        for bound, event in _EVENT_TABLE:
            if roll < bound:
                return event
        return EventType.REVOLT

    def apply_effects(
        self,
        event_type: EventType,
        population: Population,
        army: Army,
        economy: Economy,
        resources: Resources,
        peasants: Peasant,
        merchants: Merchant,
        nobles: Noble,
    ) -> list[str]:
        """Apply an event to the kingdom and return the announcement lines."""
        messages: list[str] = []

        if event_type is EventType.FAMINE:
            messages += ["Famine Alert!", "Storages halved!"]
            resources.gather_food(-_tdiv(resources.food, 2))
            peasants.happiness -= 20
        elif event_type is EventType.PLAGUE:
            messages.append("Plague OUTBREAK!")
            casualties = _tdiv(population.total, 5)
            population.total = max(0, population.total - casualties)
            population.deaths = casualties
            army.morale -= 25
        elif event_type is EventType.FLOOD:
            messages.append("A Massive Flood Arrived!")
            resources.gather_wood(-_tdiv(resources.wood, 2))
            resources.gather_food(-_tdiv(resources.food, 3))
            merchants.happiness -= 15
        elif event_type is EventType.TORNADO:
            messages.append("Kingdom is hit by a Huge Tornado!")
            resources.gather_wood(-_tdiv(resources.wood, 2))
            resources.gather_stone(-_tdiv(resources.stone, 3))
            army.recruit(-_tdiv(army.recruits, 4))
            nobles.happiness -= 10
        elif event_type is EventType.ECONOMIC_CRISIS:
            messages.append("Economic Collapse!")
            economy.adjust_tax_rate(min(economy.tax_rate + 0.15, 0.5))
            economy.adjust_treasury(-int(economy.treasury / 3))
            merchants.happiness -= 25
        elif event_type is EventType.CORRUPTION:
            messages.append("Corruption Scandal!")
            army.corruption = min(army.corruption + 25, 100)
            economy.adjust_treasury(-1000)
            nobles.happiness -= 15
        elif event_type is EventType.REVOLT:
            messages.append("PEASANTS REVOLT!")
            rebels = _tdiv(peasants.population, 3)
            peasants.population = max(0, peasants.population - rebels)
            army.recruit(-_tdiv(army.recruits, 2))
            resources.gather_food(-_tdiv(resources.food, 2))
            resources.gather_iron(-_tdiv(resources.iron, 3))

        army.morale = _clamp(army.morale)
        army.corruption = _clamp(army.corruption)
        for group in (peasants, merchants, nobles):
            group.happiness = _clamp(group.happiness)
        resources.food = max(0, resources.food)
        resources.wood = max(0, resources.wood)
        resources.stone = max(0, resources.stone)
        resources.iron = max(0, resources.iron)
        return messages