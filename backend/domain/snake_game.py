"""
SnakeGame - the authoritative single-player game engine.

The engine owns the Board (single source of truth for occupancy) and the
Snake (ordering of the occupied cells from head to tail). Both are only ever
mutated together inside advance().
"""

import logging
import random
from collections import deque
from typing import Deque, Iterable, Iterator, Optional, Tuple

from .board import Board
from .constants import (
    EMPTY, SNAKE, FOOD,
    VALID_MOVES,
    INITIAL_DIRECTION,
    MAX_QUEUED_DIRECTIONS,
    opposite,
)
from .game_state import GameState
from .position import Position
from .snake import Snake

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    Manages:
      - Board (rows, cols)
      - Snake body and current direction
      - Pending direction changes (at most two, one adopted per tick)
      - Food
      - Score and game over
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        snake_positions: Optional[Iterable[Tuple[int, int]]] = None,
        direction: str = INITIAL_DIRECTION,
        food: Optional[Tuple[int, int]] = None,
        seed: Optional[int] = None
    ):
        if direction not in VALID_MOVES:
            raise ValueError(f"Invalid direction: {direction!r}")

        self.board = Board(rows, cols)
        self.rows = rows
        self.cols = cols
        self._rng = random.Random(seed)
        self._direction = direction
        self._pending: Deque[str] = deque()
        self._score = 0
        self._game_over = False
        self.death_reason: Optional[str] = None
        self.round_number = 0

        if snake_positions is None:
            snake_positions = self._centered_snake()
        self._snake = Snake([])
        for pos in self._validate_layout(snake_positions):
            self.board.set_value(pos, SNAKE)
            self._snake.positions.append(pos)

        if food is None:
            self._place_food()
        else:
            food = Position(*food)
            if not self.board.in_bounds(food) or self.board.value_at(food) != EMPTY:
                raise ValueError(f"Food must be placed on an empty cell, got {food}.")
            self.board.set_value(food, FOOD)

    def _centered_snake(self):
        if self.rows < 2:
            raise ValueError(f"Board needs at least 2 rows for the starting snake, got {self.rows}.")
        head = Position(self.rows // 2, self.cols // 2)
        # Facing UP, so the tail trails below the head
        return [head, Position(head.row + 1, head.col)]

    def _validate_layout(self, positions: Iterable[Tuple[int, int]]):
        body = [Position(*p) for p in positions]
        if not body:
            raise ValueError("Snake must have at least one segment.")
        if len(set(body)) != len(body):
            raise ValueError(f"Snake segments must be distinct: {body}")
        for pos in body:
            if not self.board.in_bounds(pos):
                raise ValueError(f"Snake segment {pos} is outside the {self.rows}x{self.cols} board.")
        for a, b in zip(body, body[1:]):
            if abs(a.row - b.row) + abs(a.col - b.col) != 1:
                raise ValueError(f"Snake segments {a} and {b} are not adjacent.")
        return body

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def direction(self) -> str:
        return self._direction

    @property
    def score(self) -> int:
        return self._score

    @property
    def game_over(self) -> bool:
        return self._game_over

    def is_over(self) -> bool:
        return self._game_over

    @property
    def snake_length(self) -> int:
        return len(self._snake)

    @property
    def pending_directions(self) -> Tuple[str, ...]:
        return tuple(self._pending)

    def head_position(self) -> Position:
        return self._snake.head

    def tail_position(self) -> Position:
        return self._snake.tail

    def value_at(self, pos: Tuple[int, int]) -> str:
        return self.board.value_at(Position(*pos))

    def snake_positions(self) -> Iterator[Position]:
        """Iterate over the body from head to tail, as of the call."""
        return iter(tuple(self._snake))

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            round_number=self.round_number,
            rows=self.rows,
            cols=self.cols,
            snake_positions=list(self._snake),
            direction=self._direction,
            food=list(self.board.positions_of(FOOD)),
            score=self._score,
            game_over=self._game_over,
            death_reason=self.death_reason
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def _last_direction(self) -> str:
        if self._pending:
            return self._pending[-1]
        return self._direction

    def set_direction(self, new_direction: str) -> bool:
        """
        Queue a direction change for an upcoming tick.

        The change is dropped when the queue is full or when it would reverse
        the most recently queued (or current) direction. Returns whether the
        change was queued.
        """
        if new_direction not in VALID_MOVES:
            raise ValueError(f"Invalid direction: {new_direction!r}")
        if self._game_over:
            return False
        if len(self._pending) >= MAX_QUEUED_DIRECTIONS:
            return False

        last = self._last_direction()
        if new_direction == opposite(last):
            return False

        self._pending.append(new_direction)
        return True

    def advance(self):
        """
        Execute one tick:
          1) If game is over, do nothing
          2) Adopt at most one queued direction
          3) Compute the new head
          4) Wall collision ends the game
          5) Self collision ends the game (the tail cell is free this tick)
          6) Food: grow, score and place new food
          7) Otherwise move: vacate the tail, occupy the new head
        """
        if self._game_over:
            return

        if self._pending:
            self._direction = self._pending.popleft()

        new_head = self._snake.head.translate(self._direction)

        if not self.board.in_bounds(new_head):
            self._end_game("wall")
            return

        target = self.board.value_at(new_head)
        moving_off_tail = new_head == self._snake.tail and len(self._snake) > 1
        if target == SNAKE and not moving_off_tail:
            self._end_game("self")
            return

        if target == FOOD:
            self._add_head(new_head)
            self._score += 1
            self._place_food()
        else:
            self._remove_tail()
            self._add_head(new_head)

        self.round_number += 1

    def _add_head(self, pos: Position):
        self.board.set_value(pos, SNAKE)
        self._snake.add_head(pos)

    def _remove_tail(self):
        tail = self._snake.remove_tail()
        self.board.set_value(tail, EMPTY)

    def _place_food(self) -> Optional[Position]:
        """
        Put food on a uniformly random empty cell. Returns None when the
        board is full and nothing was placed.
        """
        empty = self.board.empty_positions()
        if not empty:
            logger.info("Board is full, no food placed.")
            return None
        pos = self._rng.choice(empty)
        self.board.set_value(pos, FOOD)
        logger.debug(f"Placed food at {pos}")
        return pos

    def _end_game(self, reason: str):
        self._game_over = True
        self.death_reason = reason
        logger.info(
            f"Game Over: {reason} collision after {self.round_number} rounds, score {self._score}."
        )

    def print_board(self) -> str:
        return self.get_current_state().print_board()

    def __repr__(self):
        return (
            f"<SnakeGame {self.rows}x{self.cols} round={self.round_number}, "
            f"length={len(self._snake)}, score={self._score}, game_over={self._game_over}>"
        )
