"""
Entity placement - player, exit, agents and pickups on distinct open cells

Every draw is rejection sampling against a growing exclusion set, capped
at MAX_PLACEMENT_ATTEMPTS. When the cap is hit the remaining free cells
are enumerated instead; if there are none the level cannot be built and
PlacementError is raised.
"""

import logging

from utils.constants import MAX_PLACEMENT_ATTEMPTS
from utils.exceptions import PlacementError

logger = logging.getLogger(__name__)


class Placement:
    """
    Result of placing entities on a grid

    player, exit: (x, y)
    agents: list of (x, y)
    pickups: list of (x, y, kind)
    """
    def __init__(self, player, exit, agents, pickups):
        self.player = player
        self.exit = exit
        self.agents = agents
        self.pickups = pickups

    def occupied(self):
        """Every cell claimed by an entity"""
        cells = {self.player, self.exit}
        cells.update(self.agents)
        cells.update((x, y) for x, y, _ in self.pickups)
        return cells

    def __repr__(self):
        return (f"Placement(player={self.player}, exit={self.exit}, "
                f"agents={len(self.agents)}, pickups={len(self.pickups)})")


def compute_agent_count(width, height, agent_fraction):
    """Agents requested for a maze of this area"""
    return int(width * height * agent_fraction)


def draw_free_cell(grid, rng, excluded, junction_only=False, label="entity",
                   max_attempts=MAX_PLACEMENT_ATTEMPTS):
    """
    Pick a uniformly random open cell not in excluded

    Args:
        grid: MazeGrid
        rng: random.Random instance
        excluded: Set of (x, y) cells that are already taken
        junction_only: Restrict the draw to junction cells
        label: Entity name for log and error messages
        max_attempts: Rejection-sampling cap before falling back to a scan

    Raises:
        PlacementError: if no open cell outside excluded exists
    """
    step = 2 if junction_only else 1
    for _ in range(max_attempts):
        x = rng.randrange(0, grid.width, step)
        y = rng.randrange(0, grid.height, step)
        if not grid.is_blocked(x, y) and (x, y) not in excluded:
            return (x, y)

    pool = grid.passable_junction_cells() if junction_only else grid.passable_cells()
    candidates = [cell for cell in pool if cell not in excluded]
    if not candidates:
        raise PlacementError(
            f"no free {'junction ' if junction_only else ''}cell left for {label} "
            f"on a {grid.width}x{grid.height} grid"
        )
    logger.warning(
        "Placement of %s needed a full scan after %d attempts (%d candidates left)",
        label, max_attempts, len(candidates),
    )
    return rng.choice(candidates)


def place_entities(grid, agent_count, pickup_kinds, rng, player=None):
    """
    Place player, exit, agents and pickups on distinct open cells

    Args:
        grid: MazeGrid
        agent_count: Requested agents; lowered if the open area cannot
            hold them next to the pickups
        pickup_kinds: Sequence of PickupKind, one pickup per entry
        rng: random.Random instance
        player: Optional fixed player cell (must be open)

    Returns:
        Placement object
    """
    if player is None:
        player = draw_free_cell(grid, rng, set(), junction_only=True, label="player")
    elif grid.is_blocked(*player):
        raise PlacementError(f"player cell {player} is blocked")

    exit_pos = draw_free_cell(grid, rng, {player}, junction_only=True, label="exit")
    excluded = {player, exit_pos}

    free_cells = grid.count_open() - len(excluded)
    max_agents = max(0, free_cells - len(pickup_kinds))
    if agent_count > max_agents:
        logger.warning("Requested %d agents but only room for %d", agent_count, max_agents)
        agent_count = max_agents

    agents = []
    for i in range(agent_count):
        cell = draw_free_cell(grid, rng, excluded, label=f"agent {i}")
        excluded.add(cell)
        agents.append(cell)

    pickups = []
    for kind in pickup_kinds:
        cell = draw_free_cell(grid, rng, excluded, label=f"{kind.name.lower()} pickup")
        excluded.add(cell)
        pickups.append((cell[0], cell[1], kind))

    placement = Placement(player, exit_pos, agents, pickups)
    logger.debug("Placed entities: %r", placement)
    return placement


def check_placement(grid, placement):
    """
    Verify a hand-made placement before it is installed

    Player, exit and pickups must sit on distinct open cells; agents must be
    on open cells clear of the player, the exit and every pickup. Agents may
    share a cell with each other, as they do during play.

    Raises:
        PlacementError: describing the first violation found
    """
    def require_open(cell, label):
        if grid.is_blocked(*cell):
            raise PlacementError(f"{label} at {cell} is on a wall or off the grid")

    require_open(placement.player, "player")
    require_open(placement.exit, "exit")
    if placement.exit == placement.player:
        raise PlacementError(f"exit and player share cell {placement.player}")

    taken = {placement.player, placement.exit}
    for x, y, kind in placement.pickups:
        label = f"{kind.name.lower()} pickup"
        require_open((x, y), label)
        if (x, y) in taken:
            raise PlacementError(f"{label} at {(x, y)} overlaps another entity")
        taken.add((x, y))

    for cell in placement.agents:
        require_open(cell, "agent")
        if cell in taken:
            raise PlacementError(f"agent at {cell} overlaps the player, the exit or a pickup")
