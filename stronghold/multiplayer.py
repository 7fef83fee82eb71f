"""A four-player game sharing one map."""

from __future__ import annotations

import random
from pathlib import Path

from .army import Army
from .battle import BATTLE_LOG_FILE, ConflictResolver
from .chat import CHAT_FILE, ChatNetwork
from .diplomacy import ALLIANCE_FILE, TRADE_FILE, AllianceManager, TradeSystem
from .economy import Bank, Economy
from .events import KingdomEvent
from .kingdom import Kingdom, process_month
from .mapgrid import MapGrid
from .resources import Resources
from .savegame import MULTIPLAYER_SAVE, load_kingdom, save_kingdom
from .society import Leadership, Merchant, Noble, Peasant, Population

MAX_PLAYERS = 4
START_POPULATION = 1000
MAP_FILE = "map_state.txt"
PLAYER_EVENT_INTERVAL = 60


def _new_player(start_population: int) -> Kingdom:
    return Kingdom(
        population=Population(start_population),
        army=Army(100, 1000, 0),
        economy=Economy(10000.0),
        resources=Resources(1000, 500, 300, 200),
        leadership=Leadership("Player"),
        peasants=Peasant(start_population // 2),
        merchants=Merchant(start_population // 10),
        nobles=Noble(start_population // 20),
        bank=Bank(),
        events=KingdomEvent(PLAYER_EVENT_INTERVAL),
    )


def _player_file(index: int) -> str:
    return f"player{index + 1}_save.txt"


class MultiplayerState:
    """Players, the shared map, whose turn it is, and the shared records."""

    def __init__(
        self, directory: str | Path = ".", rng: random.Random | None = None
    ) -> None:
        self.directory = Path(directory)
        self._rng = rng or random.Random()
        self.players = [_new_player(START_POPULATION) for _ in range(MAX_PLAYERS)]
        self.positions = [(0, 0)] * MAX_PLAYERS
        self.current_turn = 0
        self.game_map = MapGrid(self._rng)
        self.alliances = AllianceManager(self.directory / ALLIANCE_FILE)
        self.trades = TradeSystem(self.directory / TRADE_FILE)
        self.chat = ChatNetwork(self.directory / CHAT_FILE, MAX_PLAYERS)
        self.battles = ConflictResolver(self.directory / BATTLE_LOG_FILE, self._rng)

    @property
    def state_path(self) -> Path:
        return self.directory / MULTIPLAYER_SAVE

    @property
    def map_path(self) -> Path:
        return self.directory / MAP_FILE

    @property
    def current_player(self) -> Kingdom:
        return self.players[self.current_turn]

    def initialize(self) -> None:
        """Name the players and lay out a fresh map."""
        for index, player in enumerate(self.players):
            player.leadership = Leadership(f"Player{index + 1}")
        self.game_map.initialize()

    def save(self) -> None:
        """Write every player, the current turn and the map."""
        for index, player in enumerate(self.players):
            save_kingdom(player, self.directory / _player_file(index))
        self.state_path.write_text(f"{self.current_turn}\n")
        self.game_map.save(self.map_path)

    def load(self) -> bool:
        """Restore a saved game; False when no complete save is present."""
        if not self.state_path.is_file():
            return False
        try:
            for index, player in enumerate(self.players):
                load_kingdom(player, self.directory / _player_file(index))
        except FileNotFoundError:
            return False
        tokens = self.state_path.read_text().split()
        if not tokens:
            raise ValueError("multiplayer save holds no turn")
        turn = int(tokens[0])
        if not 0 <= turn < MAX_PLAYERS:
            raise ValueError(f"turn {turn} is not a player")
        self.current_turn = turn
        self.game_map.load(self.map_path)
        return True

    def end_turn(self) -> None:
        self.current_turn = (self.current_turn + 1) % MAX_PLAYERS

    def process_turn(self) -> str:
        """Run the current player's month, then pass the turn on."""
        report = process_month(self.current_player)
        self.end_turn()
        return report

    def player_status(self, player_id: int) -> str:
        if not 0 <= player_id < MAX_PLAYERS:
            raise ValueError(f"no player {player_id + 1}")
        player = self.players[player_id]
        x, y = self.positions[player_id]
        return "\n".join(
            [
                f"=== Player {player_id + 1} Status ===",
                f"Position: ({x}, {y})",
                player.economy.report(),
                player.army.report(),
                player.resources.report(),
                self.game_map.render(),
            ]
        )