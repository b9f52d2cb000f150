"""
World - the simulation state of one game

Holds the maze, the player, the agents, the pickups, timed effects and
level progression. Drivers call the mutating operations from a single
thread; after every completed operation the registered observers are
notified with the world itself.
"""

import logging
import random

from entities.agent import AgentManager
from entities.pickup import PICKUP_KINDS_PER_LEVEL, PickupKind, PickupManager
from entities.player import Direction, Player
from game.game_state import GameState
from game.level_manager import build_level
from game.observer import ObserverRegistry
from maze.difficulty import (
    Difficulty,
    get_difficulty_config,
    parse_difficulty,
    scaled_agent_interval_ms,
)
from maze.maze_core import MazeGrid
from maze.spawns import Placement, check_placement
from utils.constants import FREEZE_DURATION_MS, INVINCIBILITY_DURATION_MS, MAX_HEALTH
from utils.helpers import compass_direction

logger = logging.getLogger(__name__)


class World:
    """
    Aggregate root of the simulation

    States: ACTIVE, PAUSED, GAME_OVER. GAME_OVER is only left through
    restart() or new_game().
    """
    def __init__(self, difficulty=Difficulty.EASY, rng=None, seed=None, level=1,
                 max_health=MAX_HEALTH, pickup_kinds=PICKUP_KINDS_PER_LEVEL):
        """
        Args:
            difficulty: Difficulty enum value or its name
            rng: random.Random used for generation, placement and agent moves
            seed: Seed for a fresh random.Random when rng is not given
            level: Starting level (1-based)
            max_health: Health cap and starting health
            pickup_kinds: Pickups placed on every level
        """
        self.rng = rng if rng is not None else random.Random(seed)
        self.difficulty = parse_difficulty(difficulty)
        self.level = max(level, 1)
        self.pickup_kinds = tuple(pickup_kinds)

        self.grid = None
        self.exit_pos = None
        self.player = Player(0, 0, max_health, max_health)
        self.agent_manager = AgentManager()
        self.pickup_manager = PickupManager()

        self.paused = False
        self.game_over = False
        self.invincible_remaining_ms = 0
        self.agents_frozen_remaining_ms = 0

        self._observers = ObserverRegistry()

        self.restart(self.difficulty, reset_health=True)

    # ========== ACCESSORS ==========

    @property
    def width(self):
        return self.grid.width

    @property
    def height(self):
        return self.grid.height

    def is_wall(self, x, y):
        """Check if a cell is blocked; off-grid cells count as walls"""
        return self.grid.is_blocked(x, y)

    @property
    def player_pos(self):
        return self.player.position

    @property
    def agents(self):
        """Agent positions"""
        return self.agent_manager.positions()

    @property
    def pickups(self):
        """Pickups still in the level"""
        return list(self.pickup_manager.pickups)

    @property
    def health(self):
        return self.player.health

    @property
    def max_health(self):
        return self.player.max_health

    @property
    def is_invincible(self):
        return self.invincible_remaining_ms > 0

    @property
    def agents_frozen(self):
        return self.agents_frozen_remaining_ms > 0

    @property
    def agent_interval_ms(self):
        """Agent tick interval for the current level and difficulty"""
        return scaled_agent_interval_ms(get_difficulty_config(self.difficulty), self.level)

    @property
    def state(self):
        if self.game_over:
            return GameState.GAME_OVER
        if self.paused:
            return GameState.PAUSED
        return GameState.ACTIVE

    def is_agent_at(self, x, y):
        return self.agent_manager.is_agent_at(x, y)

    def pickup_at(self, x, y):
        return self.pickup_manager.get_pickup_at(x, y)

    def direction_to_exit(self):
        """Compass hint from the player to the exit, e.g. 'SouthWest'"""
        return compass_direction(self.player_pos, self.exit_pos)

    # ========== OBSERVERS ==========

    def register_observer(self, observer):
        """
        Register a WorldObserver or a callable taking the world

        The new observer is sent the current state right away.

        Returns:
            Handle to pass to unregister_observer
        """
        self._observers.register(observer)
        self._observers.notify_one(observer, self)
        return observer

    def unregister_observer(self, observer):
        self._observers.unregister(observer)

    def _notify(self):
        self._observers.notify(self)

    # ========== LIFECYCLE ==========

    def restart(self, difficulty=None, reset_health=True):
        """
        Rebuild the level from scratch

        Generates a new maze for the current level, places all entities,
        clears timed effects and the paused/game-over flags. Health is reset
        to max when reset_health is set or when the player has none left.
        Nothing is changed if building the level fails.

        Args:
            difficulty: New difficulty, or None to keep the current one
            reset_health: Restore full health

        Raises:
            PlacementError: if the level cannot be populated
        """
        self._observers.ensure_not_notifying("restart")
        if difficulty is not None:
            difficulty = parse_difficulty(difficulty)
        else:
            difficulty = self.difficulty

        level = build_level(difficulty, self.level, self.rng, self.pickup_kinds)

        self.difficulty = difficulty
        placement = level.placement
        self._install(level.grid, placement.player, placement.exit,
                      placement.agents, placement.pickups)
        # A rebuilt level never starts with a dead player
        if reset_health or self.player.health <= 0:
            self.player.reset_health()

        logger.info(
            "Started level %d on %s: %dx%d maze, %d agents, health %d/%d",
            self.level, self.difficulty.name, self.width, self.height,
            len(self.agent_manager), self.health, self.max_health,
        )
        self._notify()

    def new_game(self, difficulty=None):
        """Start over from level 1 with full health"""
        self._observers.ensure_not_notifying("new_game")
        self.level = 1
        self.restart(difficulty, reset_health=True)

    def load_layout(self, rows, player, exit_pos, agents=(), pickups=(), health=None):
        """
        Install a hand-made level, keeping level number and difficulty

        Args:
            rows: Text rows, '#' for walls
            player, exit_pos: (x, y) cells
            agents: Iterable of (x, y)
            pickups: Iterable of (x, y, PickupKind)
            health: Starting health, or None to keep the current value

        Raises:
            PlacementError: if the layout puts an entity on a wall, off the
                grid or on a cell it may not share
        """
        self._observers.ensure_not_notifying("load_layout")
        grid = MazeGrid.from_rows(rows)
        placement = Placement(
            tuple(player), tuple(exit_pos),
            [tuple(cell) for cell in agents],
            [(x, y, kind) for x, y, kind in pickups],
        )
        check_placement(grid, placement)

        self._install(grid, placement.player, placement.exit, placement.agents, placement.pickups)
        if health is not None:
            self.player.health = max(0, min(health, self.max_health))
        self.game_over = self.player.health <= 0
        self._notify()

    def _install(self, grid, player, exit_pos, agents, pickups):
        self.grid = grid
        self.exit_pos = exit_pos
        self.player.move_to(*player)

        self.agent_manager.clear()
        for x, y in agents:
            self.agent_manager.add_agent(x, y)

        self.pickup_manager.clear()
        for x, y, kind in pickups:
            self.pickup_manager.add_pickup(x, y, kind)

        self.invincible_remaining_ms = 0
        self.agents_frozen_remaining_ms = 0
        self.game_over = False
        self.paused = False

    # ========== PLAYER ==========

    def move_player(self, direction):
        """
        Move the player one cell, then resolve pickups, the exit and agents

        No-op while paused or game over. Reaching the exit advances the
        level without touching health; the rebuild notifies observers.
        """
        self._observers.ensure_not_notifying("move_player")
        if self.game_over or self.paused:
            return

        if direction is Direction.NONE:
            self._notify()
            return

        tx, ty = self.player.target_of(direction)
        if self.grid.is_blocked(tx, ty):
            self._notify()
            return

        self.player.move_to(tx, ty)

        pickup = self.pickup_manager.collect_pickup(tx, ty)
        if pickup is not None:
            self._apply_pickup(pickup)

        if self.player_pos == self.exit_pos:
            self._advance_level()
            return

        if self.agent_manager.is_agent_at(tx, ty) and not self.is_invincible:
            self._damage_player()

        self._notify()

    def _apply_pickup(self, pickup):
        if pickup.kind is PickupKind.HEALTH:
            self.player.heal(1)
        elif pickup.kind is PickupKind.INVINCIBILITY:
            self.invincible_remaining_ms = INVINCIBILITY_DURATION_MS
        elif pickup.kind is PickupKind.FREEZE_AGENTS:
            self.agents_frozen_remaining_ms = FREEZE_DURATION_MS
        logger.debug("Collected %s pickup at %s", pickup.get_name(), pickup.position)

    def _advance_level(self):
        self.level += 1
        logger.info("Exit reached, advancing to level %d", self.level)
        self.restart(self.difficulty, reset_health=False)

    def _damage_player(self):
        if self.player.health <= 0:
            return
        if self.player.take_damage(1):
            self.game_over = True
            logger.info("Game over on level %d", self.level)

    # ========== AGENTS ==========

    def move_agents(self):
        """
        Step every agent toward the player

        No-op while paused, game over or frozen. Every agent moves even
        after one of them ends the game; each agent landing on a vulnerable
        player deals one damage while health is left. Observers are
        notified once per tick.
        """
        self._observers.ensure_not_notifying("move_agents")
        if self.paused or self.game_over or self.agents_frozen:
            return

        px, py = self.player_pos
        for agent in self.agent_manager:
            agent.step_toward(px, py, self.grid.is_blocked, self.rng)
            if agent.position == (px, py) and not self.is_invincible:
                self._damage_player()

        self._notify()

    # ========== EFFECTS ==========

    def decay_effects(self, delta_ms):
        """
        Count active timed effects down by delta_ms

        Timers stop at 0, which also ends the effect. Observers are
        notified only when a timer changed.
        """
        self._observers.ensure_not_notifying("decay_effects")
        if delta_ms < 0:
            raise ValueError(f"delta_ms must not be negative, got {delta_ms}")
        if self.game_over:
            return

        before = (self.invincible_remaining_ms, self.agents_frozen_remaining_ms)
        if self.invincible_remaining_ms > 0:
            self.invincible_remaining_ms = max(0, self.invincible_remaining_ms - delta_ms)
        if self.agents_frozen_remaining_ms > 0:
            self.agents_frozen_remaining_ms = max(0, self.agents_frozen_remaining_ms - delta_ms)

        if (self.invincible_remaining_ms, self.agents_frozen_remaining_ms) != before:
            self._notify()

    # ========== PAUSE ==========

    def set_paused(self, paused):
        """Set the paused flag; ignored once the game is over"""
        self._observers.ensure_not_notifying("set_paused")
        if self.game_over:
            return
        self.paused = bool(paused)
        self._notify()

    def toggle_pause(self):
        """Flip the paused flag and return the new value"""
        self.set_paused(not self.paused)
        return self.paused

    def __repr__(self):
        return (f"World(level={self.level}, difficulty={self.difficulty.name}, "
                f"state={self.state.name}, health={self.health}/{self.max_health})")
