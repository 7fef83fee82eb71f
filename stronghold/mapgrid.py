"""The shared ten-by-ten map of terrain and territorial control."""

from __future__ import annotations

import random
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .army import Army
    from .resources import Resources

GRID_SIZE = 10
UNCLAIMED = -1
TERRAIN_TYPES = "FMPR"
KEEP = "K"
MIN_SOLDIERS_TO_CLAIM = 50

# Starting corner of each player: (row, column) -> player id.
HOME_TILES = {
    (0, 0): 0,
    (GRID_SIZE - 1, GRID_SIZE - 1): 1,
    (0, GRID_SIZE - 1): 2,
    (GRID_SIZE - 1, 0): 3,
}


def _terrain_bonus(tile: str, resources: Resources) -> None:
    if tile == "F":
        resources.gather_wood(10)
    elif tile == "M":
        resources.gather_stone(5)
    elif tile == "R":
        resources.gather_food(15)
    elif tile == "P":
        resources.gather_food(5)


class MapGrid:
    """Terrain letters and the player controlling each tile (-1 when unclaimed)."""

    size = GRID_SIZE

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self.terrain: list[list[str]] = []
        self.controllers: list[list[int]] = []
        self.initialize()

    def initialize(self) -> None:
        """Scatter random terrain and place each player on a plains corner."""
        self.terrain = [
            [self._rng.choice(TERRAIN_TYPES) for _ in range(GRID_SIZE)]
            for _ in range(GRID_SIZE)
        ]
        self.controllers = [[UNCLAIMED] * GRID_SIZE for _ in range(GRID_SIZE)]
        for (x, y), player in HOME_TILES.items():
            self.terrain[x][y] = "P"
            self.controllers[x][y] = player

    @staticmethod
    def _check(x: int, y: int) -> None:
        if not (0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE):
            raise ValueError(f"tile ({x}, {y}) is off the map")

    def render(self) -> str:
        lines = ["=== KINGDOM MAP ==="]
        for terrain_row, control_row in zip(self.terrain, self.controllers):
            cells = [
                f"P{owner + 1} " if owner != UNCLAIMED else f"{tile}  "
                for tile, owner in zip(terrain_row, control_row)
            ]
            lines.append("".join(cells))
        return "\n".join(lines)

    def move_army(
        self, player_id: int, old_x: int, old_y: int, new_x: int, new_y: int
    ) -> bool:
        """Whether an army may step from the old tile to the new one."""
        self._check(old_x, old_y)
        self._check(new_x, new_y)
        return abs(old_x - new_x) <= 1 and abs(old_y - new_y) <= 1

    def update_control(self, player_id: int, x: int, y: int, army: Army) -> bool:
        """Claim a tile and raise a keep on it when the army is strong enough."""
        self._check(x, y)
        if army.trained_soldiers > MIN_SOLDIERS_TO_CLAIM:
            self.controllers[x][y] = player_id
            self.terrain[x][y] = KEEP
            return True
        return False

    def process_terrain_bonuses(self, resources: Resources, player_id: int) -> None:
        """Grant the yield of every tile the player controls."""
        for terrain_row, control_row in zip(self.terrain, self.controllers):
            for tile, owner in zip(terrain_row, control_row):
                if owner == player_id:
                    _terrain_bonus(tile, resources)

    def save(self, path: str | Path) -> None:
        rows = (
            "".join(f"{tile} {owner} " for tile, owner in zip(t_row, c_row))
            for t_row, c_row in zip(self.terrain, self.controllers)
        )
        Path(path).write_text("".join(row + "\n" for row in rows))

    def load(self, path: str | Path) -> None:
        tokens = Path(path).read_text().split()
        expected = GRID_SIZE * GRID_SIZE * 2
        if len(tokens) < expected:
            raise ValueError(f"map file holds {len(tokens)} tokens, need {expected}")
        cells = iter(zip(tokens[0:expected:2], tokens[1:expected:2]))
        terrain: list[list[str]] = []
        controllers: list[list[int]] = []
        for _ in range(GRID_SIZE):
            t_row: list[str] = []
            c_row: list[int] = []
            for _ in range(GRID_SIZE):
                tile, owner = next(cells)
                t_row.append(tile)
                c_row.append(int(owner))
            terrain.append(t_row)
            controllers.append(c_row)
        self.terrain = terrain
        self.controllers = controllers