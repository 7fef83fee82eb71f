"""A single kingdom's state and its monthly turn."""

from __future__ import annotations

from dataclasses import dataclass, field

from .army import Army
from .economy import Bank, Economy
from .events import KingdomEvent
from .resources import Resources
from .society import Leadership, Merchant, Noble, Peasant, Population

INITIAL_PEASANTS = 800
INITIAL_MERCHANTS = 150
INITIAL_NOBLES = 50
INITIAL_POPULATION = INITIAL_PEASANTS + INITIAL_MERCHANTS + INITIAL_NOBLES
INITIAL_ARMY_RECRUITS = 100
INITIAL_FOOD = 1000
INITIAL_WOOD = 500
INITIAL_STONE = 300
INITIAL_IRON = 200
INITIAL_TREASURY = 10000.0
EVENT_INTERVAL_MINUTES = 5


@dataclass
class Kingdom:
    """Everything a ruler manages: people, army, money and stores."""

    population: Population
    army: Army
    economy: Economy
    resources: Resources
    leadership: Leadership
    peasants: Peasant
    merchants: Merchant
    nobles: Noble
    bank: Bank = field(default_factory=Bank)
    events: KingdomEvent = field(
        default_factory=lambda: KingdomEvent(EVENT_INTERVAL_MINUTES)
    )

    @classmethod
    def new_game(cls, ruler_name: str) -> Kingdom:
        """A fresh kingdom with the standard starting resources."""
        return cls(
            population=Population(INITIAL_POPULATION),
            army=Army(INITIAL_ARMY_RECRUITS, INITIAL_FOOD, int(INITIAL_TREASURY)),
            economy=Economy(INITIAL_TREASURY),
            resources=Resources(INITIAL_FOOD, INITIAL_WOOD, INITIAL_STONE, INITIAL_IRON),
            leadership=Leadership(ruler_name),
            peasants=Peasant(INITIAL_PEASANTS),
            merchants=Merchant(INITIAL_MERCHANTS),
            nobles=Noble(INITIAL_NOBLES),
        )

    def _reports(self) -> list[str]:
        return [
            self.population.report(),
            self.army.report(),
            self.economy.report(),
            self.resources.report(),
            self.leadership.report(),
        ]

    def status_report(self) -> str:
        return "\n".join(["=== Kingdom Status ===", *self._reports()])


def process_month(kingdom: Kingdom) -> str:
    """Advance the kingdom by one month and return the monthly report."""
    kingdom.population.update(kingdom.resources)
    kingdom.peasants.update()
    kingdom.merchants.update()
    kingdom.nobles.update()
    kingdom.economy.collect_taxes(kingdom.population, kingdom.peasants, kingdom.merchants)
    kingdom.economy.pay_army(kingdom.army)
    kingdom.economy.apply_inflation()
    kingdom.army.update_morale(kingdom.leadership.stable)
    kingdom.resources.spoil_food()
    return "\n".join(
        ["=== PROCESSING MONTH ===", "=== MONTHLY REPORT ===", *kingdom._reports()]
    )