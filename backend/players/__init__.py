"""
Player implementations for the snake game.

This module contains the player abstractions that feed direction changes
into the engine: autopilots for headless runs and keyboard bindings for
the terminal front-end.
"""

from .base import Player
from .random_player import RandomPlayer, GreedyPlayer
from .keyboard import direction_for_key, is_quit_key
from .variant_registry import get_player_class, list_variants, AVAILABLE_VARIANTS

__all__ = [
    'Player',
    'RandomPlayer',
    'GreedyPlayer',
    'direction_for_key',
    'is_quit_key',
    'get_player_class',
    'list_variants',
    'AVAILABLE_VARIANTS',
]
