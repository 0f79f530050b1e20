"""
Position value type for board coordinates.
"""

from typing import NamedTuple

from .constants import DIRECTION_DELTAS


class Position(NamedTuple):
    """An immutable (row, col) cell coordinate, 0-indexed from the top left."""

    row: int
    col: int

    def translate(self, direction: str) -> "Position":
        """Return the neighbouring position one step in the given direction."""
        d_row, d_col = DIRECTION_DELTAS[direction]
        return Position(self.row + d_row, self.col + d_col)

    def __repr__(self):
        return f"({self.row}, {self.col})"
