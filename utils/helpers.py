"""
Helper utility functions for the maze simulation core
"""


def clamp(value, min_value, max_value):
    """Clamp a value between min and max"""
    return max(min_value, min(value, max_value))


def make_odd(value):
    """Round an integer up to the next odd value"""
    return value if value % 2 == 1 else value + 1


def sign(value):
    """Return -1, 0 or 1 depending on the sign of value"""
    return (value > 0) - (value < 0)


def compass_direction(from_pos, to_pos):
    """
    Describe where to_pos lies relative to from_pos

    Returns:
        "North"/"South" followed by "West"/"East", e.g. "NorthEast",
        or an empty string when both positions are equal
    """
    dx = to_pos[0] - from_pos[0]
    dy = to_pos[1] - from_pos[1]

    direction = ""
    if dy < 0:
        direction += "North"
    elif dy > 0:
        direction += "South"

    if dx < 0:
        direction += "West"
    elif dx > 0:
        direction += "East"

    return direction
