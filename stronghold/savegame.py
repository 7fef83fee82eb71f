"""Saving and loading a kingdom as a plain text file of values."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Iterator

from .events import EventType

if TYPE_CHECKING:
    from .kingdom import Kingdom

SINGLEPLAYER_SAVE = "stronghold_save.txt"
MULTIPLAYER_SAVE = "multi_save.txt"


class SaveKind(Enum):
    SINGLE_PLAYER = "single"
    MULTIPLAYER = "multi"


def _fields(kingdom: Kingdom) -> list[str]:
    econ, army, pop = kingdom.economy, kingdom.army, kingdom.population
    res, events = kingdom.resources, kingdom.events
    return [
        f"{econ.treasury:g}",
        f"{econ.tax_rate:g}",
        f"{econ.inflation:g}",
        str(army.recruits),
        str(army.morale),
        str(army.corruption),
        str(army.trained_soldiers),
        str(army.food_stock),
        str(army.salary_fund),
        str(pop.total),
        str(pop.ill),
        str(pop.births),
        str(pop.deaths),
        str(pop.shelter),
        str(res.food),
        str(res.wood),
        str(res.stone),
        str(res.iron),
        "1" if kingdom.leadership.stable else "0",
        str(kingdom.peasants.population),
        f"{kingdom.peasants.happiness:g}",
        str(kingdom.merchants.population),
        f"{kingdom.merchants.happiness:g}",
        str(kingdom.nobles.population),
        f"{kingdom.nobles.happiness:g}",
        str(events.interval_minutes),
        str(int(events.last_trigger)),
        str(int(events.last_event)),
    ]


def save_kingdom(kingdom: Kingdom, path: str | Path) -> None:
    """Write the kingdom's state, one value per line."""
    Path(path).write_text("".join(value + "\n" for value in _fields(kingdom)))


def _next(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("save file is truncated") from None


def _int(tokens: Iterator[str]) -> int:
    return int(_next(tokens))


def _float(tokens: Iterator[str]) -> float:
    return float(_next(tokens))


def _bool(tokens: Iterator[str]) -> bool:
    token = _next(tokens)
    if token not in ("0", "1"):
        raise ValueError(f"expected 0 or 1, got {token!r}")
    return token == "1"


def load_kingdom(kingdom: Kingdom, path: str | Path) -> Kingdom:
    """Read a saved state into the kingdom; the ruler's name is kept."""
    tokens = iter(Path(path).read_text().split())

    treasury, tax_rate, inflation = _float(tokens), _float(tokens), _float(tokens)
    army_values = [_int(tokens) for _ in range(6)]
    pop_values = [_int(tokens) for _ in range(5)]
    res_values = [_int(tokens) for _ in range(4)]
    stable = _bool(tokens)
    classes = [(_int(tokens), _float(tokens)) for _ in range(3)]
    interval, last_trigger = _int(tokens), _int(tokens)
    last_event = EventType(_int(tokens))

    econ = kingdom.economy
    econ.treasury, econ.tax_rate, econ.inflation = treasury, tax_rate, inflation

    army = kingdom.army
    (
        army.recruits,
        army.morale,
        army.corruption,
        army.trained_soldiers,
        army.food_stock,
        army.salary_fund,
    ) = army_values

    pop = kingdom.population
    pop.total, pop.ill, pop.births, pop.deaths, pop.shelter = pop_values

    res = kingdom.resources
    res.food, res.wood, res.stone, res.iron = res_values

    kingdom.leadership.stable = stable

    for group, (count, happiness) in zip(
        (kingdom.peasants, kingdom.merchants, kingdom.nobles), classes
    ):
        group.population = count
        group.happiness = happiness

    events = kingdom.events
    events.interval_minutes = interval
    events.last_trigger = float(last_trigger)
    events.last_event = last_event
    return kingdom


def find_save(directory: str | Path = ".") -> tuple[SaveKind, Path] | None:
    """The save to resume from, single player taking precedence."""
    base = Path(directory)
    single = base / SINGLEPLAYER_SAVE
    if single.is_file():
        return SaveKind.SINGLE_PLAYER, single
    multi = base / MULTIPLAYER_SAVE
    if multi.is_file():
        return SaveKind.MULTIPLAYER, multi
    return None