"""Battles between armies and their aftermath."""

from __future__ import annotations

import random
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .army import Army
    from .economy import Economy
    from .society import Leadership

BATTLE_LOG_FILE = "battles.txt"


class Outcome(Enum):
    ATTACKER_WINS = "ATTACKER_WINS"
    DEFENDER_WINS = "DEFENDER_WINS"
    STALEMATE = "STALEMATE"


class ConflictResolver:
    """Decides battles and keeps a log of them."""

    def __init__(
        self, log_path: str | Path = BATTLE_LOG_FILE, rng: random.Random | None = None
    ) -> None:
        self.log_path = Path(log_path)
        self._rng = rng or random.Random()

    def _power(self, army: Army, stable: bool, bonus: float) -> int:
        power = int(army.trained_soldiers * (army.morale / 100.0))
        if stable:
            power = int(power * bonus)
        half = power // 2
        luck = self._rng.randrange(half) if half > 0 else 0
        return power + luck + power // 10

    def resolve(
        self,
        attacker_army: Army,
        defender_army: Army,
        attacker_lead: Leadership,
        defender_lead: Leadership,
    ) -> Outcome:
        """Compare the two sides' strength and log the result."""
        attacker = self._power(attacker_army, attacker_lead.stable, 1.2)
        defender = self._power(defender_army, defender_lead.stable, 1.3)

        if attacker > defender * 1.5:
            outcome = Outcome.ATTACKER_WINS
        elif defender > attacker * 1.5:
            outcome = Outcome.DEFENDER_WINS
        else:
            outcome = Outcome.STALEMATE

        with self.log_path.open("a") as log:
            log.write(f"Attacker:{attacker}|Defender:{defender}|Outcome:{outcome.value}\n")
        return outcome

    def history(self) -> list[str]:
        if not self.log_path.exists():
            return []
        return self.log_path.read_text().splitlines()


def apply_battle_effects(
    outcome: Outcome, winner: Army, loser: Army, economy: Economy
) -> None:
    """Apply casualties, morale and spoils after a battle."""
    if outcome is Outcome.ATTACKER_WINS:
        loser.trained_soldiers = int(loser.trained_soldiers * 0.5)
        winner.morale = min(100, winner.morale + 10)
        economy.adjust_treasury(loser.trained_soldiers * 3)
    elif outcome is Outcome.DEFENDER_WINS:
        winner.trained_soldiers = int(winner.trained_soldiers * 0.6)
        loser.morale = max(0, loser.morale - 15)
    else:
        winner.trained_soldiers = int(winner.trained_soldiers * 0.8)
        loser.trained_soldiers = int(loser.trained_soldiers * 0.8)
        economy.adjust_treasury(-(winner.trained_soldiers + loser.trained_soldiers))

    winner.corruption = min(100, winner.corruption + 5)
    loser.corruption = min(100, loser.corruption + 8)