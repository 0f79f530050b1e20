"""
Board entity - per-cell occupancy of the playing field.
"""

from typing import Iterator, List

from .constants import EMPTY, CELL_VALUES
from .position import Position


class Board:
    """
    A fixed-size rows x cols grid of cell values (EMPTY, SNAKE, FOOD).

    Reads and writes are O(1). Positions outside the grid are a caller
    error and raise IndexError instead of wrapping around.
    """

    def __init__(self, rows: int, cols: int):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Board dimensions must be positive, got {rows}x{cols}.")
        self.rows = rows
        self.cols = cols
        self._cells: List[List[str]] = [[EMPTY for _ in range(cols)] for _ in range(rows)]

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.row < self.rows and 0 <= pos.col < self.cols

    def _check(self, pos: Position) -> None:
        if not self.in_bounds(pos):
            raise IndexError(f"Position {pos} is outside the {self.rows}x{self.cols} board.")

    def value_at(self, pos: Position) -> str:
        self._check(pos)
        return self._cells[pos.row][pos.col]

    def set_value(self, pos: Position, value: str) -> None:
        self._check(pos)
        if value not in CELL_VALUES:
            raise ValueError(f"Invalid cell value: {value!r}")
        self._cells[pos.row][pos.col] = value

    def positions_of(self, value: str) -> Iterator[Position]:
        """Yield every position holding the given value, in row-major order."""
        for r, row in enumerate(self._cells):
            for c, cell in enumerate(row):
                if cell == value:
                    yield Position(r, c)

    def empty_positions(self) -> List[Position]:
        return list(self.positions_of(EMPTY))

    def __repr__(self):
        return f"<Board {self.rows}x{self.cols}>"
