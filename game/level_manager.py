"""
Level building - scales the difficulty, generates the maze and places entities
"""

import logging

from entities.pickup import PICKUP_KINDS_PER_LEVEL
from maze.difficulty import (
    get_difficulty_config,
    scaled_agent_fraction,
    scaled_agent_interval_ms,
    scaled_obstacle_fraction,
    scaled_size,
)
from maze.generator import generate
from maze.spawns import compute_agent_count, place_entities

logger = logging.getLogger(__name__)


class Level:
    """
    Represents a single generated level
    """
    def __init__(self, difficulty, level_number, rng, pickup_kinds=PICKUP_KINDS_PER_LEVEL):
        """
        Args:
            difficulty: Difficulty enum value
            level_number: Level (1-based)
            rng: random.Random instance
            pickup_kinds: Pickups to place, one per entry
        """
        self.difficulty = difficulty
        self.config = get_difficulty_config(difficulty)
        self.level_number = max(level_number, 1)
        self.rng = rng
        self.pickup_kinds = tuple(pickup_kinds)

        # Scaled parameters
        self.open_fraction = scaled_obstacle_fraction(self.config, self.level_number)
        self.agent_fraction = scaled_agent_fraction(self.config, self.level_number)
        self.agent_interval_ms = scaled_agent_interval_ms(self.config, self.level_number)

        # Maze data
        self.width = None
        self.height = None
        self.grid = None
        self.placement = None

    def generate(self):
        """
        Generate the maze and place every entity

        The carving starts from a random junction cell, which becomes the
        player's starting cell.

        Returns:
            self
        """
        self.width = scaled_size(self.config, self.level_number, self.rng)
        self.height = scaled_size(self.config, self.level_number, self.rng)

        start = (
            self.rng.randrange(0, self.width, 2),
            self.rng.randrange(0, self.height, 2),
        )
        self.grid = generate(
            self.width, self.height, start[0], start[1],
            open_fraction=self.open_fraction, rng=self.rng,
        )

        agent_count = compute_agent_count(self.width, self.height, self.agent_fraction)
        self.placement = place_entities(
            self.grid, agent_count, self.pickup_kinds, self.rng, player=start,
        )

        logger.debug("Generated %r", self)
        return self

    def __repr__(self):
        return (f"Level(difficulty={self.difficulty.name}, level={self.level_number}, "
                f"size={self.width}x{self.height})")


def build_level(difficulty, level_number, rng, pickup_kinds=PICKUP_KINDS_PER_LEVEL):
    """Create and generate a level in one call"""
    return Level(difficulty, level_number, rng, pickup_kinds).generate()
