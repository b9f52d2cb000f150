"""
Maze generation - randomized depth-first carving plus an "open up" pass
"""

import logging
import math
import random

import numpy as np

from maze.maze_core import MazeGrid, is_junction
from utils.constants import CARDINAL_DIRS, CARVE_STEP, MIN_MAZE_SIZE
from utils.exceptions import InvalidMazeSizeError

logger = logging.getLogger(__name__)


def validate_dimensions(width, height, start_x, start_y):
    """
    Check maze dimensions and carving start

    Raises:
        InvalidMazeSizeError: if a side is even or below the minimum, or the
            start is not a junction cell inside the grid
    """
    for name, value in (("width", width), ("height", height)):
        if value < MIN_MAZE_SIZE or value % 2 == 0:
            raise InvalidMazeSizeError(
                f"{name} must be odd and >= {MIN_MAZE_SIZE}, got {value}"
            )
    if not (0 <= start_x < width and 0 <= start_y < height):
        raise InvalidMazeSizeError(f"start ({start_x}, {start_y}) is outside the grid")
    if not is_junction(start_x, start_y):
        raise InvalidMazeSizeError(f"start ({start_x}, {start_y}) is not a junction cell")


# ========== GENERATOR: DFS BACKTRACKER ==========

def iter_dfs_backtracker(grid, start_x, start_y, rng):
    """
    Depth-First Search with backtracking - step generator

    Carves grid in place. Yields one state dict per carve or backtrack so
    a caller can animate the process; draining the generator produces the
    finished spanning tree over all junction cells.
    """
    visited = np.zeros((grid.height, grid.width), dtype=np.bool_)
    visited[start_y, start_x] = True
    grid.open_cell(start_x, start_y)
    stack = [(start_x, start_y)]

    yield {"grid": grid, "current": (start_x, start_y), "carved": None, "done": False}

    while stack:
        cx, cy = stack[-1]
        neighbors = []

        for dx, dy in CARDINAL_DIRS:
            nx, ny = cx + dx * CARVE_STEP, cy + dy * CARVE_STEP
            if grid.in_bounds(nx, ny) and not visited[ny, nx]:
                neighbors.append((nx, ny, dx, dy))

        if neighbors:
            nx, ny, dx, dy = rng.choice(neighbors)
            # Open the wall cell between the two junctions, then the junction itself
            grid.open_cell(cx + dx, cy + dy)
            grid.open_cell(nx, ny)
            visited[ny, nx] = True
            stack.append((nx, ny))

            yield {"grid": grid, "current": (nx, ny), "carved": ((cx, cy), (nx, ny)), "done": False}
        else:
            stack.pop()
            yield {"grid": grid, "current": (cx, cy), "carved": None, "done": False}

    yield {"grid": grid, "current": (start_x, start_y), "carved": None, "done": True}


def carve_dfs_backtracker(grid, start_x, start_y, rng):
    """Run the backtracker to completion"""
    for _ in iter_dfs_backtracker(grid, start_x, start_y, rng):
        pass
    return grid


# ========== POST-PASS: OPEN UP ==========

def open_random_cells(grid, open_fraction, rng):
    """
    Mark a random share of all cells passable, whatever their state

    Opening a cell never disconnects anything, so this keeps the carved
    maze connected while adding loops and shortcuts.

    Returns:
        Number of cells picked
    """
    if open_fraction <= 0:
        return 0

    cells = [(x, y) for y in range(grid.height) for x in range(grid.width)]
    count = min(math.floor(len(cells) * open_fraction), len(cells))
    rng.shuffle(cells)

    for x, y in cells[:count]:
        grid.open_cell(x, y)
    return count


def generate(width, height, start_x, start_y, open_fraction=0.0, rng=None):
    """
    Generate a connected maze

    Args:
        width, height: Odd dimensions >= 3
        start_x, start_y: Junction cell the carving starts from
        open_fraction: Share of all cells opened after carving
        rng: random.Random instance

    Returns:
        MazeGrid where every passable cell is reachable from the start
    """
    validate_dimensions(width, height, start_x, start_y)
    if rng is None:
        rng = random.Random()

    grid = MazeGrid(width, height)
    carve_dfs_backtracker(grid, start_x, start_y, rng)
    opened = open_random_cells(grid, open_fraction, rng)

    logger.debug(
        "Generated %dx%d maze from (%d, %d): %d extra cells opened, %d passable",
        width, height, start_x, start_y, opened, grid.count_open(),
    )
    return grid
