"""
Game constants for the snake engine.
"""

from typing import Dict, Tuple

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

OPPOSITES: Dict[str, str] = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# (row, col) deltas; row 0 is the top of the board
DIRECTION_DELTAS: Dict[str, Tuple[int, int]] = {
    UP:    (-1, 0),
    DOWN:  (1, 0),
    LEFT:  (0, -1),
    RIGHT: (0, 1),
}

# Cell values
EMPTY = "EMPTY"
SNAKE = "SNAKE"
FOOD = "FOOD"
CELL_VALUES = {EMPTY, SNAKE, FOOD}

# Game settings
INITIAL_DIRECTION = UP
INITIAL_SNAKE_LENGTH = 2
MAX_QUEUED_DIRECTIONS = 2


def opposite(direction: str) -> str:
    """Return the inverse of a direction (UP <-> DOWN, LEFT <-> RIGHT)."""
    if direction not in OPPOSITES:
        raise ValueError(f"Invalid direction: {direction!r}")
    return OPPOSITES[direction]
