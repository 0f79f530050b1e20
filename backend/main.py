import argparse
import json
import logging
from dataclasses import replace
from typing import Any, Dict, Optional

from config import GameConfig
from domain.snake_game import SnakeGame
from players import Player, get_player_class, AVAILABLE_VARIANTS
from services.replay import ReplayRecorder, save_replay

logger = logging.getLogger(__name__)


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(
    player: Player,
    config: GameConfig,
    max_ticks: Optional[int] = None,
    seed: Optional[int] = None,
    replay_dir: Optional[str] = None,
    gif_path: Optional[str] = None
) -> Dict[str, Any]:
    """
    Runs a single headless snake game driven by an autopilot player.

    Each tick the player sees a snapshot, its move is queued with
    set_direction(), and the engine advances once.

    Args:
        player: The player choosing directions.
        config: Board size and timings.
        max_ticks: Optional cap on the number of ticks.
        seed: Optional seed for food placement.
        replay_dir: When given, the replay JSON is written there.
        gif_path: When given, the replay is also rendered to this GIF.

    Returns:
        A dictionary summarizing the game (game_id, score, rounds, death_reason, replay_path).
    """
    game = SnakeGame(config.rows, config.cols, seed=seed)
    recorder = ReplayRecorder(game, player_name=player.name)
    logger.info(f"Game ID: {recorder.game_id} ({config.rows}x{config.cols}, player {player.name})")

    ticks = 0
    while not game.game_over:
        if max_ticks is not None and ticks >= max_ticks:
            logger.info(f"Reached max ticks ({max_ticks}).")
            break

        move = player.get_move(game.get_current_state())
        if move is not None:
            game.set_direction(move)
        game.advance()
        recorder.record()
        ticks += 1

    replay_data = recorder.to_replay_data()
    replay_path = None
    if replay_dir:
        replay_path = save_replay(replay_data, replay_dir)

    if gif_path:
        # Pillow is only needed when rendering
        from services.frame_renderer import render_replay
        render_replay(replay_data, gif_path, frame_ms=config.tick_ms, reveal_ms=config.reveal_ms)

    return {
        "game_id": recorder.game_id,
        "score": game.score,
        "rounds": game.round_number,
        "game_over": game.game_over,
        "death_reason": game.death_reason,
        "replay_path": replay_path,
    }


# -------------------------------
# Main Entry Point
# -------------------------------
def main(argv=None):
    config = GameConfig.from_env()

    parser = argparse.ArgumentParser(
        description="Run a headless snake game with an autopilot player."
    )
    parser.add_argument("--player", type=str, default="random", choices=AVAILABLE_VARIANTS,
                        help="Autopilot variant driving the snake")
    parser.add_argument("--rows", type=int, default=config.rows,
                        help="Number of board rows")
    parser.add_argument("--cols", type=int, default=config.cols,
                        help="Number of board columns")
    parser.add_argument("--max-ticks", type=int, default=None,
                        help="Stop after this many ticks even if the snake is alive")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement and the autopilot")
    parser.add_argument("--replay-dir", type=str, default=config.replay_dir,
                        help="Directory for the replay JSON (empty string to skip)")
    parser.add_argument("--gif", type=str, default=None,
                        help="Optional path of an animated GIF to render")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    config = replace(config, rows=args.rows, cols=args.cols)

    player = get_player_class(args.player)(seed=args.seed)
    result = run_simulation(
        player,
        config,
        max_ticks=args.max_ticks,
        seed=args.seed,
        replay_dir=args.replay_dir or None,
        gif_path=args.gif
    )

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))
    return result


if __name__ == "__main__":
    main()
