"""
Runtime configuration for the snake game.

Values come from the environment (optionally a .env file next to the
working directory) and fall back to the defaults below.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

DEFAULT_ROWS = 15
DEFAULT_COLS = 15
DEFAULT_TICK_MS = 500
DEFAULT_REVEAL_MS = 50
DEFAULT_COUNTDOWN = 3
DEFAULT_REPLAY_DIR = "completed_games"
DEFAULT_LOG_LEVEL = "INFO"


def _int_env(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class GameConfig:
    """Board size, timings and output locations for a session."""
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    tick_ms: int = DEFAULT_TICK_MS
    reveal_ms: int = DEFAULT_REVEAL_MS
    countdown: int = DEFAULT_COUNTDOWN
    replay_dir: str = DEFAULT_REPLAY_DIR
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"Board dimensions must be positive, got {self.rows}x{self.cols}")
        if self.tick_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {self.tick_ms}")
        if self.reveal_ms < 0 or self.countdown < 0:
            raise ValueError("Reveal delay and countdown cannot be negative")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "GameConfig":
        """
        Build a config from environment variables.

        When no mapping is given, .env is loaded first and os.environ is read.
        """
        if env is None:
            load_dotenv()
            env = os.environ

        return cls(
            rows=_int_env(env, "SNAKE_ROWS", DEFAULT_ROWS),
            cols=_int_env(env, "SNAKE_COLS", DEFAULT_COLS),
            tick_ms=_int_env(env, "SNAKE_TICK_MS", DEFAULT_TICK_MS),
            reveal_ms=_int_env(env, "SNAKE_REVEAL_MS", DEFAULT_REVEAL_MS),
            countdown=_int_env(env, "SNAKE_COUNTDOWN", DEFAULT_COUNTDOWN),
            replay_dir=env.get("SNAKE_REPLAY_DIR", DEFAULT_REPLAY_DIR).strip() or DEFAULT_REPLAY_DIR,
            log_level=env.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL,
        )
