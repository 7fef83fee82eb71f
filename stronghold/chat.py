"""Player-to-player messages, held in session and logged to a file."""

from __future__ import annotations

from pathlib import Path

CHAT_FILE = "chat_history.txt"
MAX_PLAYERS = 4


class ChatNetwork:
    """Delivers messages between players and keeps a chat log."""

    def __init__(self, path: str | Path = CHAT_FILE, max_players: int = MAX_PLAYERS) -> None:
        self.path = Path(path)
        self.max_players = max_players
        self._inboxes = [""] * max_players

    def _valid(self, player_id: int) -> bool:
        return 0 <= player_id < self.max_players

    def send(self, sender_id: int, receiver_id: int, message: str) -> bool:
        """Deliver a message; False when the receiver is not a player."""
        if not self._valid(receiver_id):
            return False
        line = f"[Player{sender_id + 1} -> Player{receiver_id + 1}] : {message}"
        self._inboxes[receiver_id] += line + "\n"
        with self.path.open("a") as file:
            file.write(line + "\n")
        return True

    def messages(self, player_id: int) -> str:
        """Messages received this session, one per line."""
        return self._inboxes[player_id] if self._valid(player_id) else ""

    def history(self, player_id: int) -> list[str]:
        """Logged messages addressed to the player."""
        if not self.path.exists():
            return []
        marker = f" -> Player{player_id + 1}] :"
        return [line for line in self.path.read_text().splitlines() if marker in line]

    def clear_session(self) -> None:
        self._inboxes = [""] * self.max_players