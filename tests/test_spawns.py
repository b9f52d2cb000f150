import random

import pytest

from entities.pickup import PICKUP_KINDS_PER_LEVEL, PickupKind
from maze.generator import generate
from maze.maze_core import MazeGrid, is_junction
from maze.spawns import compute_agent_count, draw_free_cell, place_entities
from utils.exceptions import PlacementError


@pytest.mark.parametrize("seed", range(5))
def test_entities_land_on_distinct_open_cells(seed):
    rng = random.Random(seed)
    grid = generate(21, 21, 0, 0, open_fraction=0.4, rng=rng)
    placement = place_entities(grid, 12, PICKUP_KINDS_PER_LEVEL, rng)

    cells = [placement.player, placement.exit] + placement.agents
    cells += [(x, y) for x, y, _ in placement.pickups]
    assert len(cells) == len(set(cells)) == 2 + 12 + 3
    for x, y in cells:
        assert grid.is_open(x, y)
    assert is_junction(*placement.player)
    assert is_junction(*placement.exit)
    assert placement.player != placement.exit
    assert placement.occupied() == set(cells)


def test_one_pickup_of_each_kind():
    rng = random.Random(8)
    grid = generate(11, 11, 0, 0, rng=rng)
    placement = place_entities(grid, 0, PICKUP_KINDS_PER_LEVEL, rng)

    assert sorted(kind.name for _, _, kind in placement.pickups) == [
        "FREEZE_AGENTS", "HEALTH", "INVINCIBILITY",
    ]


def test_fixed_player_cell_is_kept():
    rng = random.Random(2)
    grid = generate(11, 11, 4, 6, rng=rng)
    placement = place_entities(grid, 3, PICKUP_KINDS_PER_LEVEL, rng, player=(4, 6))
    assert placement.player == (4, 6)


def test_blocked_player_cell_rejected():
    grid = MazeGrid.from_rows(["#..", "...", "..."])
    with pytest.raises(PlacementError):
        place_entities(grid, 0, (), random.Random(0), player=(0, 0))


def test_agent_count_capped_by_open_area():
    grid = MazeGrid.from_rows(["...", "...", "..."])
    placement = place_entities(grid, 100, PICKUP_KINDS_PER_LEVEL, random.Random(1))

    # 9 open cells - player - exit - 3 pickups
    assert len(placement.agents) == 4
    assert len(placement.occupied()) == 9


def test_missing_exit_cell_is_fatal():
    grid = MazeGrid.from_rows(["..#", "###", "###"])
    with pytest.raises(PlacementError):
        place_entities(grid, 0, (), random.Random(0))


def test_missing_pickup_cell_is_fatal():
    grid = MazeGrid.from_rows([".#.", "###", "###"])
    with pytest.raises(PlacementError):
        place_entities(grid, 5, (PickupKind.HEALTH,), random.Random(0))


def test_draw_falls_back_to_scan_when_attempts_run_out():
    grid = MazeGrid.from_rows(["###", "#.#", "###"])
    assert draw_free_cell(grid, random.Random(0), set(), max_attempts=0) == (1, 1)


def test_draw_respects_exclusions():
    grid = MazeGrid.from_rows(["...", "###", "###"])
    rng = random.Random(4)
    for _ in range(50):
        assert draw_free_cell(grid, rng, {(0, 0), (2, 0)}) == (1, 0)


def test_agent_count_formula():
    assert compute_agent_count(35, 35, 0.02) == 24
    assert compute_agent_count(25, 25, 0.0) == 0
