"""
Autopilot players - pick safe moves without human input.
"""

import random
from typing import List, Optional

from domain.constants import VALID_MOVES, opposite
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids walls and self-collisions.
    """

    description = "Random safe move each tick"

    def __init__(self, name: Optional[str] = None, seed: Optional[int] = None):
        super().__init__(name)
        self.rng = random.Random(seed)

    def safe_moves(self, game_state: GameState) -> List[str]:
        snake_positions = game_state.snake_positions
        head = snake_positions[0]

        # Filter out moves that:
        # 1. Reverse into the neck (the engine drops these anyway)
        # 2. Hit walls
        # 3. Hit own body (except tail, which will move)
        valid_moves: List[str] = []
        for move in sorted(VALID_MOVES):
            if move == opposite(game_state.direction):
                continue

            new_row, new_col = head.translate(move)
            if (new_row < 0 or new_row >= game_state.rows or
                    new_col < 0 or new_col >= game_state.cols):
                continue

            if (new_row, new_col) in snake_positions[:-1]:
                continue

            valid_moves.append(move)

        return valid_moves

    def get_move(self, game_state: GameState) -> str:
        valid_moves = self.safe_moves(game_state)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            return game_state.direction

        return self.rng.choice(valid_moves)


class GreedyPlayer(RandomPlayer):
    """
    Heads for the food along the shortest Manhattan distance, among safe moves.
    Falls back to a random safe move when there is no food on the board.
    """

    description = "Shortest safe step towards the food"

    def get_move(self, game_state: GameState) -> str:
        valid_moves = self.safe_moves(game_state)
        if not valid_moves:
            return game_state.direction
        if not game_state.food:
            return self.rng.choice(valid_moves)

        food_row, food_col = game_state.food[0]
        head = game_state.head

        def distance(move: str) -> int:
            row, col = head.translate(move)
            return abs(row - food_row) + abs(col - food_col)

        return min(valid_moves, key=distance)
