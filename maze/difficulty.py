"""
Difficulty configurations for the maze simulation
Defines 3 difficulty presets and how each one scales with the level number
"""

from collections import namedtuple
from enum import Enum

from utils.constants import (
    DIFFICULTY_NAMES,
    LEVEL_AGENT_FRACTION_INCREMENT,
    LEVEL_AGENT_INTERVAL_DECREMENT_MS,
    LEVEL_OBSTACLE_FRACTION_DECREMENT,
    LEVEL_SIZE_INCREMENT,
    MAX_AGENT_FRACTION,
    MIN_AGENT_INTERVAL_MS,
    MIN_OBSTACLE_FRACTION,
)
from utils.helpers import make_odd


class Difficulty(Enum):
    """Named difficulty presets"""
    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"


_DifficultyFields = namedtuple(
    "_DifficultyFields",
    [
        "base_size",
        "size_variance",
        "base_obstacle_fraction",
        "base_agent_fraction",
        "base_agent_interval_ms",
    ],
)


class DifficultyConfig(_DifficultyFields):
    """
    Immutable configuration for a single difficulty preset

    base_size: Side length of the level 1 maze
    size_variance: Random extra steps of 2 cells added to the side
    base_obstacle_fraction: Share of all cells opened after carving at level 1
    base_agent_fraction: Agents per cell of maze area at level 1
    base_agent_interval_ms: Agent tick interval at level 1
    """
    __slots__ = ()


# ========== DIFFICULTY LEVEL DEFINITIONS ==========

LEVEL_EASY = DifficultyConfig(
    base_size=25,
    size_variance=2,
    base_obstacle_fraction=0.6,
    base_agent_fraction=0.0,
    base_agent_interval_ms=1500,
)

LEVEL_MEDIUM = DifficultyConfig(
    base_size=35,
    size_variance=3,
    base_obstacle_fraction=0.5,
    base_agent_fraction=0.02,
    base_agent_interval_ms=1000,
)

LEVEL_HARD = DifficultyConfig(
    base_size=45,
    size_variance=4,
    base_obstacle_fraction=0.4,
    base_agent_fraction=0.03,
    base_agent_interval_ms=750,
)

# Difficulty preset mapping
DIFFICULTY_CONFIGS = {
    Difficulty.EASY: LEVEL_EASY,
    Difficulty.MEDIUM: LEVEL_MEDIUM,
    Difficulty.HARD: LEVEL_HARD,
}


def get_difficulty_config(difficulty):
    """
    Get configuration for a difficulty preset

    Args:
        difficulty: Difficulty enum value

    Returns:
        DifficultyConfig object
    """
    return DIFFICULTY_CONFIGS[difficulty]


def parse_difficulty(name):
    """
    Look up a difficulty by name, case-insensitively

    Raises:
        ValueError: for names that are not a preset
    """
    if isinstance(name, Difficulty):
        return name
    key = str(name).strip().upper()
    if key not in DIFFICULTY_NAMES:
        raise ValueError(f"unknown difficulty {name!r}, expected one of {DIFFICULTY_NAMES}")
    return Difficulty(key)


def get_difficulty_name(difficulty):
    """Get human-readable name for a difficulty"""
    return difficulty.value.capitalize()


# ========== LEVEL SCALING ==========

def _levels_past_first(level):
    return max(level, 1) - 1


def scaled_size(config, level, rng):
    """
    Side length of the maze for a level

    Grows by LEVEL_SIZE_INCREMENT per level plus 0..size_variance random
    steps of 2; always odd and never below base_size.
    """
    size = config.base_size + _levels_past_first(level) * LEVEL_SIZE_INCREMENT
    size += rng.randint(0, config.size_variance) * 2
    return make_odd(size)


def scaled_obstacle_fraction(config, level):
    """Share of cells opened after carving; shrinks per level down to a floor"""
    scaled = config.base_obstacle_fraction - _levels_past_first(level) * LEVEL_OBSTACLE_FRACTION_DECREMENT
    return max(scaled, MIN_OBSTACLE_FRACTION)


def scaled_agent_fraction(config, level):
    """Agents per cell of maze area; grows per level up to a ceiling"""
    scaled = config.base_agent_fraction + _levels_past_first(level) * LEVEL_AGENT_FRACTION_INCREMENT
    return min(scaled, MAX_AGENT_FRACTION)


def scaled_agent_interval_ms(config, level):
    """Milliseconds between agent ticks; shrinks per level down to a floor"""
    scaled = config.base_agent_interval_ms - _levels_past_first(level) * LEVEL_AGENT_INTERVAL_DECREMENT_MS
    return max(scaled, MIN_AGENT_INTERVAL_MS)


def get_difficulty_description(difficulty, level=1):
    """Get detailed description of a difficulty at a level"""
    config = get_difficulty_config(difficulty)
    name = get_difficulty_name(difficulty)
    low = make_odd(config.base_size + _levels_past_first(level) * LEVEL_SIZE_INCREMENT)
    high = make_odd(low + config.size_variance * 2)

    desc = f"{name} (level {max(level, 1)})\n"
    desc += f"Maze: {low}-{high} cells per side\n"
    desc += f"Opened cells: {scaled_obstacle_fraction(config, level):.1%}\n"
    desc += f"Agents: {scaled_agent_fraction(config, level):.1%} of area\n"
    desc += f"Agent tick: {scaled_agent_interval_ms(config, level)} ms\n"
    return desc
