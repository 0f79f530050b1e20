"""
Domain entities for the snake game engine.

This module contains the core game entities that are independent of
presentation and input concerns (rendering, keyboards, timers).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, OPPOSITES, opposite,
    EMPTY, SNAKE, FOOD,
    MAX_QUEUED_DIRECTIONS,
)
from .position import Position
from .board import Board
from .snake import Snake
from .game_state import GameState
from .snake_game import SnakeGame

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'OPPOSITES', 'opposite',
    'EMPTY', 'SNAKE', 'FOOD',
    'MAX_QUEUED_DIRECTIONS',
    'Position',
    'Board',
    'Snake',
    'GameState',
    'SnakeGame',
]
