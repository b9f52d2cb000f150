"""
Player entity with position and health
"""

from enum import Enum

from utils import constants
from utils.constants import MAX_HEALTH
from utils.helpers import clamp


class Direction(Enum):
    """Player move input; NONE is a valid no-op"""
    NONE = (0, 0)
    UP = constants.UP
    DOWN = constants.DOWN
    LEFT = constants.LEFT
    RIGHT = constants.RIGHT

    @property
    def dx(self):
        return self.value[0]

    @property
    def dy(self):
        return self.value[1]


class Player:
    """
    Player entity
    """
    def __init__(self, x, y, health=MAX_HEALTH, max_health=MAX_HEALTH):
        self.x = x
        self.y = y
        self.max_health = max_health
        self.health = clamp(health, 0, max_health)

    @property
    def position(self):
        return (self.x, self.y)

    def target_of(self, direction):
        """Cell the player would enter moving in direction"""
        return self.x + direction.dx, self.y + direction.dy

    def move_to(self, x, y):
        self.x = x
        self.y = y

    def take_damage(self, amount=1):
        """
        Apply damage, never dropping below 0

        Returns:
            True if player died
        """
        self.health = max(0, self.health - amount)
        return self.health <= 0

    def heal(self, amount=1):
        """Restore health up to max_health"""
        self.health = min(self.health + amount, self.max_health)

    def reset_health(self):
        self.health = self.max_health

    def __repr__(self):
        return f"Player(pos=({self.x},{self.y}), health={self.health}/{self.max_health})"
