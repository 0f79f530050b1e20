#!/usr/bin/env python3
"""Render local snake replays to animated GIFs.

- Reads replay JSON files (snake_game_<game_id>.json) from a directory.
- Renders each with services.frame_renderer.render_replay.
- Writes GIFs with matching basenames to an output directory.

Usage:

    python backend/cli/render_replay.py --root completed_games --output-dir completed_games_gifs

Limit the number processed or overwrite existing GIFs:

    python backend/cli/render_replay.py --limit 5 --overwrite
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List

# Ensure backend modules are importable
BACKEND_ROOT = Path(__file__).resolve().parent.parent
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from config import GameConfig  # noqa: E402
from services.frame_renderer import BoardRenderer, render_replay  # noqa: E402
from services.replay import load_replay  # noqa: E402


logger = logging.getLogger(__name__)


def iter_replay_files(root: Path) -> List[Path]:
    """Return a sorted list of local replay JSON files."""
    return sorted(root.glob("snake_game_*.json"))


def extract_game_id(json_path: Path) -> str:
    """Extract game_id from filename like snake_game_<game_id>.json."""
    stem = json_path.stem
    if stem.startswith("snake_game_"):
        return stem[len("snake_game_"):]
    return stem


def process_replay(
    json_path: Path,
    output_dir: Path,
    renderer: BoardRenderer,
    config: GameConfig,
    overwrite: bool = False,
) -> str:
    """Render a GIF for a single replay JSON.

    Returns a status string: "ok", "skipped", or "failed".
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / f"{json_path.stem}.gif"

    if output_path.exists() and not overwrite:
        logger.info("Skipping %s (GIF already exists)", json_path.name)
        return "skipped"

    try:
        replay_data = load_replay(str(json_path))
        logger.info("Rendering %s (game_id=%s)", json_path.name, extract_game_id(json_path))
        render_replay(
            replay_data,
            str(output_path),
            frame_ms=config.tick_ms,
            reveal_ms=config.reveal_ms,
            renderer=renderer,
        )
        return "ok"
    except Exception as exc:  # pylint: disable=broad-except
        logger.exception("Failed to render %s: %s", json_path, exc)
        return "failed"


def main(argv=None) -> dict:
    config = GameConfig.from_env()

    parser = argparse.ArgumentParser(
        description="Render snake replay JSON files to animated GIFs",
    )
    parser.add_argument(
        "--root",
        type=str,
        default=config.replay_dir,
        help="Directory containing snake_game_*.json (default: SNAKE_REPLAY_DIR)",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Directory to write GIF files (default: same as --root)",
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        default=32,
        help="Pixel size of one board cell",
    )
    parser.add_argument(
        "--limit",
        type=int,
        help="Optional maximum number of replays to process",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Regenerate GIFs even if an output file already exists",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    root = Path(args.root).resolve()
    output_dir = Path(args.output_dir).resolve() if args.output_dir else root

    if not root.exists() or not root.is_dir():
        raise SystemExit(f"Root directory does not exist or is not a directory: {root}")

    replay_files = iter_replay_files(root)
    if args.limit is not None:
        replay_files = replay_files[: args.limit]

    counts = {"ok": 0, "skipped": 0, "failed": 0}

    if not replay_files:
        logger.info("No replay JSON files found under %s", root)
        return counts

    logger.info("Found %d replay files to process", len(replay_files))

    renderer = BoardRenderer(cell_size=args.cell_size)

    for idx, json_path in enumerate(replay_files, start=1):
        logger.info("[%d/%d] Processing %s", idx, len(replay_files), json_path.name)
        status = process_replay(json_path, output_dir, renderer, config, overwrite=args.overwrite)
        counts[status] += 1

    logger.info(
        "Done. ok=%d, skipped=%d, failed=%d",
        counts["ok"],
        counts["skipped"],
        counts["failed"],
    )
    return counts


if __name__ == "__main__":
    main()
