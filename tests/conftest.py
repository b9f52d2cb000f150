import random

import pytest

from game.world import World
from maze.difficulty import Difficulty


class FirstChoice:
    """rng stand-in whose choice() always returns the first option"""

    def choice(self, seq):
        return seq[0]


class LastChoice:
    def choice(self, seq):
        return seq[-1]


@pytest.fixture
def first_choice_rng():
    return FirstChoice()


@pytest.fixture
def last_choice_rng():
    return LastChoice()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def easy_world():
    return World(Difficulty.EASY, seed=42)


@pytest.fixture
def medium_world():
    return World(Difficulty.MEDIUM, seed=7)


@pytest.fixture
def layout_world(easy_world):
    """Factory installing a hand-made layout on a fresh Easy world"""

    def _load(rows, player, exit_pos, agents=(), pickups=(), health=None):
        easy_world.load_layout(rows, player, exit_pos, agents=agents, pickups=pickups, health=health)
        return easy_world

    return _load


@pytest.fixture
def recorder():
    """Observer callable that keeps a log of (health, player_pos, level) snapshots"""

    class Recorder:
        def __init__(self):
            self.calls = []

        def __call__(self, world):
            self.calls.append((world.health, world.player_pos, world.level))

    return Recorder()
