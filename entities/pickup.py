"""
Pickup entities
The player collects pickups by stepping onto their cell
"""

from enum import Enum


class PickupKind(Enum):
    """Pickup types"""
    HEALTH = "health"
    INVINCIBILITY = "invincibility"
    FREEZE_AGENTS = "freeze_agents"


# One of each kind is placed per level, in this order
PICKUP_KINDS_PER_LEVEL = (
    PickupKind.HEALTH,
    PickupKind.INVINCIBILITY,
    PickupKind.FREEZE_AGENTS,
)


class Pickup:
    """
    A one-time item lying on a passable cell
    """
    def __init__(self, x, y, kind):
        """
        Args:
            x, y: Grid position
            kind: PickupKind
        """
        self.x = x
        self.y = y
        self.kind = kind

    @property
    def position(self):
        return (self.x, self.y)

    def get_name(self):
        """Get human-readable name"""
        names = {
            PickupKind.HEALTH: 'Health',
            PickupKind.INVINCIBILITY: 'Invincibility',
            PickupKind.FREEZE_AGENTS: 'Freeze Agents',
        }
        return names.get(self.kind, 'Unknown')

    def is_at_position(self, x, y):
        return self.x == x and self.y == y

    def __eq__(self, other):
        if not isinstance(other, Pickup):
            return NotImplemented
        return (self.x, self.y, self.kind) == (other.x, other.y, other.kind)

    def __hash__(self):
        return hash((self.x, self.y, self.kind))

    def __repr__(self):
        return f"Pickup(pos=({self.x},{self.y}), kind={self.kind.name})"


class PickupManager:
    """
    Manages the pickups still lying in the level
    """
    def __init__(self):
        self.pickups = []

    def add_pickup(self, x, y, kind):
        """Add a pickup to the level"""
        pickup = Pickup(x, y, kind)
        self.pickups.append(pickup)
        return pickup

    def get_pickup_at(self, x, y):
        for pickup in self.pickups:
            if pickup.is_at_position(x, y):
                return pickup
        return None

    def is_pickup_at(self, x, y):
        return self.get_pickup_at(x, y) is not None

    def collect_pickup(self, x, y):
        """
        Remove and return the pickup at a position

        Returns:
            Pickup object if one was there, None otherwise
        """
        pickup = self.get_pickup_at(x, y)
        if pickup is not None:
            self.pickups.remove(pickup)
        return pickup

    def positions(self):
        return [pickup.position for pickup in self.pickups]

    def clear(self):
        """Remove all pickups"""
        self.pickups.clear()

    def __len__(self):
        return len(self.pickups)

    def __repr__(self):
        return f"PickupManager(pickups={len(self.pickups)})"
