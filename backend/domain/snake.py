"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Iterator

from .position import Position


class Snake:
    """
    Represents the snake's body as an ordering over board cells.

    Attributes:
        positions: deque of Position from head at index 0 to tail at the end
    """

    def __init__(self, positions: Iterable[Position]):
        self.positions = deque(Position(*p) for p in positions)

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Position:
        """Return the tail position (last element)."""
        return self.positions[-1]

    def add_head(self, pos: Position) -> None:
        self.positions.appendleft(pos)

    def remove_tail(self) -> Position:
        return self.positions.pop()

    def __len__(self):
        return len(self.positions)

    def __iter__(self) -> Iterator[Position]:
        return iter(self.positions)
