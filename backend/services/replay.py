"""
Replay recording for snake games.

A replay is a JSON document with game metadata and one GameState snapshot
per tick, written locally as snake_game_<game_id>.json.
"""

import json
import logging
import os
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from domain.game_state import GameState
from domain.snake_game import SnakeGame

logger = logging.getLogger(__name__)


def _utcnow_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class ReplayRecorder:
    """
    Collects snapshots of a running SnakeGame.

    The initial state is captured on construction; call record() after each
    advance() to capture the tick.
    """

    def __init__(self, game: SnakeGame, game_id: Optional[str] = None, player_name: Optional[str] = None):
        self.game = game
        self.game_id = game_id or str(uuid.uuid4())
        self.player_name = player_name
        self.start_time = _utcnow_iso()
        self.history: List[GameState] = []
        self.record()

    def record(self) -> GameState:
        state = self.game.get_current_state()
        # advance() is a no-op after game over; do not store duplicate frames
        if self.history and self.history[-1] == state:
            return state
        self.history.append(state)
        return state

    def to_replay_data(self) -> Dict[str, Any]:
        metadata = {
            "game_id": self.game_id,
            "start_time": self.start_time,
            "end_time": _utcnow_iso(),
            "player": self.player_name,
            "rows": self.game.rows,
            "cols": self.game.cols,
            "final_score": self.game.score,
            "death_reason": self.game.death_reason,
            "actual_rounds": self.game.round_number,
        }
        return {
            "metadata": metadata,
            "rounds": [state.to_dict() for state in self.history],
        }


def replay_filename(game_id: str) -> str:
    return f"snake_game_{game_id}.json"


def save_replay(replay_data: Dict[str, Any], directory: str) -> str:
    """
    Write replay data to <directory>/snake_game_<game_id>.json.

    Returns:
        The path written.
    """
    game_id = replay_data["metadata"]["game_id"]
    os.makedirs(directory, exist_ok=True)
    path = os.path.join(directory, replay_filename(game_id))
    with open(path, "w", encoding="utf-8") as f:
        json.dump(replay_data, f, indent=2)
    logger.info(f"Saved replay for game {game_id} to {path}")
    return path


def load_replay(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def replay_states(replay_data: Dict[str, Any]) -> List[GameState]:
    """Convert the rounds of a replay back into GameState snapshots."""
    return [GameState.from_dict(r) for r in replay_data.get("rounds", [])]
