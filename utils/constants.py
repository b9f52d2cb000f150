"""
Global constants for the maze simulation core
"""

# Direction vectors (dx, dy) used by maze carving and agent steps
UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)

CARDINAL_DIRS = [UP, DOWN, LEFT, RIGHT]

# Junction cells sit on even coordinates, so carving jumps two cells at a time
CARVE_STEP = 2

# Smallest maze that still has two junction cells per axis
MIN_MAZE_SIZE = 3

# Player settings
MAX_HEALTH = 5

# Timed effects (milliseconds)
INVINCIBILITY_DURATION_MS = 2500
FREEZE_DURATION_MS = 4000

# Driver cadence for effect decay (wall clock, milliseconds)
EFFECT_DECAY_INTERVAL_MS = 50

# Difficulty scaling per level
LEVEL_SIZE_INCREMENT = 2
LEVEL_OBSTACLE_FRACTION_DECREMENT = 0.005
LEVEL_AGENT_FRACTION_INCREMENT = 0.003
LEVEL_AGENT_INTERVAL_DECREMENT_MS = 20

MIN_OBSTACLE_FRACTION = 0.20
MAX_AGENT_FRACTION = 0.20
MIN_AGENT_INTERVAL_MS = 150

# Placement
MAX_PLACEMENT_ATTEMPTS = 1000

# Difficulty names
DIFFICULTY_NAMES = [
    "EASY",
    "MEDIUM",
    "HARD",
]
