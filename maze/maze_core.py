"""
Core maze functions - grid storage, cell roles, and connectivity

The grid is a cell map: every cell is either blocked or passable.
Cells whose x and y are both even are junction cells (the nodes the
carver walks between); every other cell is a wall cell that can only
connect two junctions.
"""

import numpy as np
from numba import njit

from utils.exceptions import InvalidMazeSizeError

WALL_CHAR = "#"
OPEN_CHAR = "."


def is_junction(x, y):
    """Check if (x, y) is a junction cell (both coordinates even)"""
    return x % 2 == 0 and y % 2 == 0


def is_wall_cell(x, y):
    """Check if (x, y) is a wall (connector) cell between junctions"""
    return not is_junction(x, y)


class MazeGrid:
    """
    Maze grid with cell-based representation
    blocked[y, x] is True where the cell is a wall
    """
    def __init__(self, width, height, blocked=None):
        self.width = width
        self.height = height
        if blocked is None:
            # Initialize all cells blocked
            self.blocked = np.ones((height, width), dtype=np.bool_)
        else:
            self.blocked = np.array(blocked, dtype=np.bool_)
            if self.blocked.shape != (height, width):
                raise InvalidMazeSizeError(
                    f"grid shape {self.blocked.shape} does not match {width}x{height}"
                )

    @classmethod
    def from_rows(cls, rows):
        """
        Build a grid from text rows, '#' for blocked and anything else open

        Args:
            rows: List of equal-length strings, top row first

        Returns:
            MazeGrid object
        """
        if not rows:
            raise InvalidMazeSizeError("layout has no rows")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise InvalidMazeSizeError("layout rows differ in length")
        blocked = [[ch == WALL_CHAR for ch in row] for row in rows]
        return cls(width, len(rows), blocked)

    def to_rows(self):
        """Render the grid back to '#'/'.' text rows"""
        return [
            "".join(WALL_CHAR if cell else OPEN_CHAR for cell in row)
            for row in self.blocked
        ]

    def in_bounds(self, x, y):
        """Check if coordinates are within grid bounds"""
        return 0 <= x < self.width and 0 <= y < self.height

    def is_blocked(self, x, y):
        """Check if a cell is a wall; anything off the grid counts as wall"""
        if not self.in_bounds(x, y):
            return True
        return bool(self.blocked[y, x])

    def is_open(self, x, y):
        return not self.is_blocked(x, y)

    def open_cell(self, x, y):
        self.blocked[y, x] = False

    def junction_cells(self):
        """All junction cells in row-major order"""
        return [(x, y) for y in range(0, self.height, 2) for x in range(0, self.width, 2)]

    def passable_cells(self):
        """All passable cells in row-major order"""
        return [(int(x), int(y)) for y, x in np.argwhere(~self.blocked)]

    def passable_junction_cells(self):
        return [(x, y) for x, y in self.junction_cells() if not self.blocked[y, x]]

    def count_open(self):
        return int(np.count_nonzero(~self.blocked))

    def reachable_mask(self, x, y):
        """Boolean mask of every cell reachable from (x, y)"""
        return flood_fill(self.blocked, x, y)

    def is_fully_connected(self, x, y):
        """Check that every passable cell can be reached from (x, y)"""
        if self.is_blocked(x, y):
            return False
        reached = self.reachable_mask(x, y)
        return bool(np.array_equal(reached, ~self.blocked))

    def __repr__(self):
        return f"MazeGrid(size={self.width}x{self.height}, open={self.count_open()})"


# ========== CONNECTIVITY ==========

@njit(cache=True)
def flood_fill(blocked, start_x, start_y):
    """
    Breadth-first flood fill over passable cells (4-neighbourhood)

    Args:
        blocked: 2D bool array indexed [y, x]
        start_x, start_y: Seed cell

    Returns:
        2D bool array, True for every cell reached from the seed
    """
    rows, cols = blocked.shape
    reached = np.zeros((rows, cols), dtype=np.bool_)
    if start_x < 0 or start_x >= cols or start_y < 0 or start_y >= rows:
        return reached
    if blocked[start_y, start_x]:
        return reached

    queue_x = np.empty(rows * cols, dtype=np.int64)
    queue_y = np.empty(rows * cols, dtype=np.int64)
    head = 0
    tail = 0
    queue_x[tail] = start_x
    queue_y[tail] = start_y
    tail += 1
    reached[start_y, start_x] = True

    while head < tail:
        x = queue_x[head]
        y = queue_y[head]
        head += 1
        for k in range(4):
            nx = x
            ny = y
            if k == 0:
                ny = y - 1
            elif k == 1:
                ny = y + 1
            elif k == 2:
                nx = x - 1
            else:
                nx = x + 1
            if nx < 0 or nx >= cols or ny < 0 or ny >= rows:
                continue
            if blocked[ny, nx] or reached[ny, nx]:
                continue
            reached[ny, nx] = True
            queue_x[tail] = nx
            queue_y[tail] = ny
            tail += 1

    return reached
