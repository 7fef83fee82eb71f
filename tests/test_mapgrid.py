import random

import pytest

from stronghold.army import Army
from stronghold.mapgrid import GRID_SIZE, HOME_TILES, UNCLAIMED, MapGrid
from stronghold.resources import Resources


@pytest.fixture
def grid():
    return MapGrid(random.Random(7))


def test_home_corners_are_plains_held_by_players(grid):
    for (x, y), player in HOME_TILES.items():
        assert grid.terrain[x][y] == "P"
        assert grid.controllers[x][y] == player


def test_other_tiles_unclaimed_with_known_terrain(grid):
    for x in range(GRID_SIZE):
        for y in range(GRID_SIZE):
            assert grid.terrain[x][y] in "FMPR"
            if (x, y) not in HOME_TILES:
                assert grid.controllers[x][y] == UNCLAIMED


def test_render_shape(grid):
    lines = grid.render().split("\n")
    assert lines[0] == "=== KINGDOM MAP ==="
    assert len(lines) == GRID_SIZE + 1
    assert lines[1].startswith("P1 ")
    assert lines[1].endswith("P3 ")
    assert lines[-1].startswith("P4 ")


def test_move_army_adjacency(grid):
    assert grid.move_army(0, 0, 0, 1, 1) is True
    assert grid.move_army(0, 0, 0, 0, 0) is True
    assert grid.move_army(0, 0, 0, 2, 0) is False


def test_move_army_off_map(grid):
    with pytest.raises(ValueError):
        grid.move_army(0, 0, 0, -1, 0)


def test_update_control_needs_strong_army(grid):
    weak = Army(0, 0, 0, trained_soldiers=50)
    strong = Army(0, 0, 0, trained_soldiers=51)
    before = grid.controllers[4][4]
    assert grid.update_control(1, 4, 4, weak) is False
    assert grid.controllers[4][4] == before
    assert grid.update_control(1, 4, 4, strong) is True
    assert grid.controllers[4][4] == 1
    assert grid.terrain[4][4] == "K"


def test_terrain_bonuses(grid):
    res = Resources()
    grid.process_terrain_bonuses(res, 0)
    assert res.food == 5
    grid.terrain[0][0] = "F"
    grid.process_terrain_bonuses(res, 0)
    assert res.wood == 10
    grid.terrain[0][0] = "K"
    grid.process_terrain_bonuses(res, 0)
    assert (res.food, res.wood, res.stone) == (5, 10, 0)


def test_save_load_round_trip(grid, tmp_path):
    path = tmp_path / "map_state.txt"
    grid.controllers[5][5] = 2
    grid.terrain[5][5] = "K"
    grid.save(path)
    other = MapGrid(random.Random(99))
    other.load(path)
    assert other.terrain == grid.terrain
    assert other.controllers == grid.controllers


def test_load_short_file(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("F -1 M 0\n")
    with pytest.raises(ValueError):
        MapGrid().load(path)