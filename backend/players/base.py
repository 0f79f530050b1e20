"""
Base player interface for the game engine.
"""

from typing import Optional

from domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    A player looks at the current game state between ticks and returns the
    direction it wants the snake to take next, or None to keep going.
    """

    description = ""

    def __init__(self, name: Optional[str] = None):
        self.name = name or self.__class__.__name__

    def get_move(self, game_state: GameState) -> Optional[str]:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT", or None for no change
        """
        raise NotImplementedError
