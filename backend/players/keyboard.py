"""
Keyboard bindings - map physical keys to logical directions.

Keys arrive either as curses key codes (ints) or as single characters.
"""

import curses
from typing import Optional, Union

from domain.constants import UP, DOWN, LEFT, RIGHT

KEY_BINDINGS = {
    ord('w'): UP,
    ord('W'): UP,
    ord('s'): DOWN,
    ord('S'): DOWN,
    ord('a'): LEFT,
    ord('A'): LEFT,
    ord('d'): RIGHT,
    ord('D'): RIGHT,
    curses.KEY_UP: UP,
    curses.KEY_DOWN: DOWN,
    curses.KEY_LEFT: LEFT,
    curses.KEY_RIGHT: RIGHT,
}

QUIT_KEYS = {ord('q'), ord('Q')}


def _key_code(key: Union[int, str]) -> int:
    if isinstance(key, str):
        return ord(key) if len(key) == 1 else -1
    return key


def direction_for_key(key: Union[int, str]) -> Optional[str]:
    """Return the direction bound to a key, or None if the key is unbound."""
    return KEY_BINDINGS.get(_key_code(key))


def is_quit_key(key: Union[int, str]) -> bool:
    return _key_code(key) in QUIT_KEYS
