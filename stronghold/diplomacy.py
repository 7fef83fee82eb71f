"""Treaties and trade offers between players, kept in plain text files."""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path

ALLIANCE_FILE = "alliances.txt"
TRADE_FILE = "trades.txt"
PENDING = "PENDING"
ACCEPTED = "ACCEPTED"


def _player(player_id: int) -> str:
    return f"Player{player_id + 1}"


def _read_lines(path: Path) -> list[str]:
    return path.read_text().splitlines() if path.exists() else []


def _write_lines(path: Path, lines: list[str]) -> None:
    path.write_text("".join(line + "\n" for line in lines))


class TreatyType(IntEnum):
    NON_AGGRESSION = 0
    DEFENSE_PACT = 1
    FULL_ALLIANCE = 2

    @property
    def label(self) -> str:
        return ("Non-Aggression", "Defense Pact", "Full Alliance")[self]


class AllianceManager:
    """Records treaties as lines of the form ``PlayerA|PlayerB|Type``."""

    def __init__(self, path: str | Path = ALLIANCE_FILE) -> None:
        self.path = Path(path)

    @staticmethod
    def _involves_pair(line: str, a: int, b: int) -> bool:
        return (
            f"{_player(a)}|{_player(b)}" in line or f"{_player(b)}|{_player(a)}" in line
        )

    def propose(self, proposer_id: int, target_id: int, treaty_type: TreatyType | int) -> None:
        treaty = TreatyType(treaty_type)
        with self.path.open("a") as file:
            file.write(f"{_player(proposer_id)}|{_player(target_id)}|{treaty.label}\n")

    def break_treaty(self, breaker_id: int, target_id: int) -> bool:
        """Remove every treaty between the two players; False if there was none."""
        lines = _read_lines(self.path)
        kept = [line for line in lines if not self._involves_pair(line, breaker_id, target_id)]
        _write_lines(self.path, kept)
        return len(kept) != len(lines)

    def alliances(self, player_id: int) -> list[tuple[str, str]]:
        """The (counterpart, treaty type) pairs on lines naming the player."""
        result = []
        for line in _read_lines(self.path):
            if _player(player_id) in line:
                _, counterpart, kind = line.split("|", 2)
                result.append((counterpart, kind))
        return result

    def has_treaty(self, player1: int, player2: int) -> bool:
        return any(
            self._involves_pair(line, player1, player2) for line in _read_lines(self.path)
        )


class ResourceType(IntEnum):
    FOOD = 0
    WOOD = 1
    STONE = 2
    IRON = 3
    GOLD = 4

    @property
    def label(self) -> str:
        return self.name.title()


class TradeSystem:
    """Trade offers stored one per line, each PENDING until accepted."""

    def __init__(self, path: str | Path = TRADE_FILE) -> None:
        self.path = Path(path)

    def propose(
        self,
        sender_id: int,
        receiver_id: int,
        offer_type: ResourceType | int,
        offer_qty: int,
        request_type: ResourceType | int,
        request_qty: int,
    ) -> None:
        offer = ResourceType(offer_type)
        request = ResourceType(request_type)
        with self.path.open("a") as file:
            file.write(
                f"{_player(sender_id)}|{_player(receiver_id)}|{offer.label}|{offer_qty}"
                f"|{request.label}|{request_qty}|{PENDING}\n"
            )

    def history(self, player_id: int) -> list[str]:
        """Every trade line that names the player."""
        return [line for line in _read_lines(self.path) if _player(player_id) in line]

    def accept(self, trade_id: int) -> bool:
        """Accept the pending trade on the given line of the trade file."""
        lines = _read_lines(self.path)
        if not 0 <= trade_id < len(lines) or PENDING not in lines[trade_id]:
            return False
        lines[trade_id] = lines[trade_id].replace(PENDING, ACCEPTED, 1)
        _write_lines(self.path, lines)
        return True