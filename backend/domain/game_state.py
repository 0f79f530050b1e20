"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import Any, Dict, List, Optional, Tuple

from .position import Position


class GameState:
    """
    A read-only snapshot of the game at a specific tick.

    Attributes:
        round_number: number of ticks applied so far (0-based)
        rows, cols: board dimensions
        snake_positions: list of (row, col) from head to tail
        direction: the direction the head is facing
        food: list of (row, col) positions holding food (zero or one)
        score: food eaten so far
        game_over: whether the game has ended
        death_reason: 'wall' or 'self' once the game is over
    """

    def __init__(
        self,
        round_number: int,
        rows: int,
        cols: int,
        snake_positions: List[Tuple[int, int]],
        direction: str,
        food: List[Tuple[int, int]],
        score: int,
        game_over: bool = False,
        death_reason: Optional[str] = None
    ):
        self.round_number = round_number
        self.rows = rows
        self.cols = cols
        self.snake_positions = [Position(*p) for p in snake_positions]
        self.direction = direction
        self.food = [Position(*p) for p in food]
        self.score = score
        self.game_over = game_over
        self.death_reason = death_reason

    @property
    def head(self) -> Position:
        return self.snake_positions[0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        S = snake body
        H = snake head (X once the snake is dead)
        Row 0 is printed at the top with column labels at the bottom.
        """
        board = [['.' for _ in range(self.cols)] for _ in range(self.rows)]

        for r, c in self.food:
            board[r][c] = 'F'

        for idx, (r, c) in enumerate(self.snake_positions):
            if idx == 0:
                board[r][c] = 'X' if self.game_over else 'H'
            else:
                board[r][c] = 'S'

        result = []
        for r in range(self.rows):
            result.append(f"{r:2d} {' '.join(board[r])}")

        # Column labels only keep the last digit so the grid stays aligned
        result.append("   " + " ".join(str(c % 10) for c in range(self.cols)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a JSON-serializable dict. Positions become [row, col] lists.
        """
        return {
            "round_number": self.round_number,
            "rows": self.rows,
            "cols": self.cols,
            "snake_positions": [list(p) for p in self.snake_positions],
            "direction": self.direction,
            "food": [list(p) for p in self.food],
            "score": self.score,
            "game_over": self.game_over,
            "death_reason": self.death_reason,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameState":
        return cls(
            round_number=data["round_number"],
            rows=data["rows"],
            cols=data["cols"],
            snake_positions=[tuple(p) for p in data["snake_positions"]],
            direction=data["direction"],
            food=[tuple(p) for p in data.get("food", [])],
            score=data.get("score", 0),
            game_over=data.get("game_over", False),
            death_reason=data.get("death_reason"),
        )

    def __eq__(self, other):
        if not isinstance(other, GameState):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return (
            f"<GameState round={self.round_number}, head={self.head}, "
            f"direction={self.direction}, score={self.score}, game_over={self.game_over}>"
        )
