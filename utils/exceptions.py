class MazeError(Exception):
    """Base exception for the maze simulation core."""


class InvalidMazeSizeError(MazeError, ValueError):
    """Raised when maze dimensions or the carving start cell are unusable."""


class PlacementError(MazeError):
    """Raised when no valid cell is left for an entity; the level cannot be built."""


class ObserverReentryError(MazeError):
    """Raised when an observer mutates the world from inside a notification."""
