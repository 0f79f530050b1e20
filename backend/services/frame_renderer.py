"""
Frame rendering service for snake games.

Renders GameState snapshots to images using PIL (Pillow):
- Grid board with food, snake body and a head whose eyes face the
  current direction
- Score bar above the board
- Post-game "dead snake" reveal, drawn segment by segment from the head
- Animated GIF export of a whole replay
"""

import logging
import os
from typing import Any, Dict, Iterator, List, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from domain.constants import UP, DOWN, LEFT
from domain.game_state import GameState
from services.replay import replay_states

logger = logging.getLogger(__name__)

CELL_SIZE = 32  # Size of each grid cell in pixels
HEADER_HEIGHT = 40
DEFAULT_FRAME_MS = 500
DEFAULT_REVEAL_MS = 50
FINAL_HOLD_MS = 1000


class ColorScheme:
    """Board palette"""

    BACKGROUND = "#1B1B2F"
    GRID_LINE = "#2A2A45"
    HEADER = "#11111F"
    SCORE_TEXT = "#FFFFFF"

    SNAKE_BODY = "#4F7022"
    SNAKE_HEAD = "#6FA030"
    DEAD_BODY = "#6B6B6B"
    DEAD_HEAD = "#9A3B3B"
    FOOD = "#EA2014"
    EYE = "#FFFFFF"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def darken_color(hex_color: str, amount: float = 0.3) -> Tuple[int, int, int]:
    """Darken a hex color by a given amount"""
    r, g, b = hex_to_rgb(hex_color)
    r = max(0, int(r * (1 - amount)))
    g = max(0, int(g * (1 - amount)))
    b = max(0, int(b * (1 - amount)))
    return (r, g, b)


class BoardRenderer:
    """Render snake game states to Pillow images"""

    def __init__(self, cell_size: int = CELL_SIZE, header_height: int = HEADER_HEIGHT):
        if cell_size < 4:
            raise ValueError(f"cell_size must be at least 4 pixels, got {cell_size}")
        self.cell_size = cell_size
        self.header_height = header_height
        self.font = ImageFont.load_default()

    def image_size(self, state: GameState) -> Tuple[int, int]:
        return (state.cols * self.cell_size, state.rows * self.cell_size + self.header_height)

    def cell_origin(self, row: int, col: int) -> Tuple[int, int]:
        """Top-left pixel of a board cell"""
        return (col * self.cell_size, self.header_height + row * self.cell_size)

    def render_frame(self, state: GameState, dead_segments: int = 0) -> Image.Image:
        """
        Render a single frame.

        Args:
            state: The snapshot to draw
            dead_segments: How many segments, counted from the head, to draw
                with the dead snake palette
        """
        img = Image.new('RGB', self.image_size(state), hex_to_rgb(ColorScheme.BACKGROUND))
        draw = ImageDraw.Draw(img)

        self._draw_header(draw, img.width, state.score)
        self._draw_grid(draw, state)

        for row, col in state.food:
            self._draw_cell(draw, row, col, hex_to_rgb(ColorScheme.FOOD), padding=self.cell_size // 6)

        # Body first so the head is drawn on top
        for idx in range(len(state.snake_positions) - 1, 0, -1):
            row, col = state.snake_positions[idx]
            color = ColorScheme.DEAD_BODY if idx < dead_segments else ColorScheme.SNAKE_BODY
            self._draw_cell(draw, row, col, hex_to_rgb(color))

        if state.snake_positions:
            head_row, head_col = state.snake_positions[0]
            dead_head = dead_segments > 0
            color = ColorScheme.DEAD_HEAD if dead_head else ColorScheme.SNAKE_HEAD
            self._draw_cell(draw, head_row, head_col, hex_to_rgb(color), padding=0)
            if not dead_head:
                self._draw_eyes(draw, head_row, head_col, state.direction)

        return img

    def render_dead_snake_frames(self, state: GameState) -> Iterator[Image.Image]:
        """Yield one frame per segment, revealing the dead snake head first."""
        for count in range(1, len(state.snake_positions) + 1):
            yield self.render_frame(state, dead_segments=count)

    def _draw_header(self, draw: ImageDraw.ImageDraw, width: int, score: int):
        draw.rectangle([0, 0, width, self.header_height], fill=hex_to_rgb(ColorScheme.HEADER))
        text = f"SCORE {score}"
        bbox = draw.textbbox((0, 0), text, font=self.font)
        text_width = bbox[2] - bbox[0]
        text_height = bbox[3] - bbox[1]
        draw.text(
            (width // 2 - text_width // 2, self.header_height // 2 - text_height // 2),
            text,
            fill=hex_to_rgb(ColorScheme.SCORE_TEXT),
            font=self.font
        )

    def _draw_grid(self, draw: ImageDraw.ImageDraw, state: GameState):
        board_width = state.cols * self.cell_size
        board_bottom = self.header_height + state.rows * self.cell_size
        line_color = hex_to_rgb(ColorScheme.GRID_LINE)

        for i in range(state.cols + 1):
            x = i * self.cell_size
            draw.line([x, self.header_height, x, board_bottom], fill=line_color, width=1)

        for i in range(state.rows + 1):
            y = self.header_height + i * self.cell_size
            draw.line([0, y, board_width, y], fill=line_color, width=1)

    def _draw_cell(
        self,
        draw: ImageDraw.ImageDraw,
        row: int,
        col: int,
        color: Tuple[int, int, int],
        padding: int = 1
    ):
        """Draw a single filled cell (snake segment or food)"""
        x, y = self.cell_origin(row, col)
        size = self.cell_size
        draw.rectangle(
            [x + padding, y + padding, x + size - 1 - padding, y + size - 1 - padding],
            fill=color
        )

    def _draw_eyes(self, draw: ImageDraw.ImageDraw, row: int, col: int, direction: str):
        """Two eyes on the side of the head facing the direction of travel"""
        x, y = self.cell_origin(row, col)
        size = self.cell_size
        eye = max(2, size // 5)
        near = size // 5
        far = size - size // 5 - eye

        if direction == UP:
            corners = [(x + near, y + near), (x + far, y + near)]
        elif direction == DOWN:
            corners = [(x + near, y + far), (x + far, y + far)]
        elif direction == LEFT:
            corners = [(x + near, y + near), (x + near, y + far)]
        else:
            corners = [(x + far, y + near), (x + far, y + far)]

        for ex, ey in corners:
            draw.ellipse([ex, ey, ex + eye, ey + eye], fill=hex_to_rgb(ColorScheme.EYE))


def save_gif(frames: List[Image.Image], output_path: str, durations) -> str:
    """
    Write frames to an animated GIF.

    Args:
        frames: Images to write, in order
        output_path: Destination file
        durations: Milliseconds per frame, either one int or a list per frame
    """
    if not frames:
        raise ValueError("Cannot write a GIF without frames")

    output_dir = os.path.dirname(output_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    frames[0].save(
        output_path,
        save_all=True,
        append_images=frames[1:],
        duration=durations,
        loop=0
    )
    return output_path


def render_replay(
    replay_data: Dict[str, Any],
    output_path: str,
    frame_ms: int = DEFAULT_FRAME_MS,
    reveal_ms: int = DEFAULT_REVEAL_MS,
    renderer: Optional[BoardRenderer] = None
) -> str:
    """
    Render a replay to an animated GIF.

    Every recorded tick becomes a frame. When the last tick ended the game,
    the dead snake reveal is appended and held on its final frame.

    Returns:
        Path to the generated GIF
    """
    renderer = renderer or BoardRenderer()
    states = replay_states(replay_data)
    if not states:
        raise ValueError("Replay has no rounds to render")

    game_id = replay_data.get("metadata", {}).get("game_id")
    logger.info(f"Rendering {len(states)} frames for game {game_id}")

    frames: List[Image.Image] = []
    durations: List[int] = []
    for i, state in enumerate(states):
        if i % 50 == 0:
            logger.debug(f"Rendering frame {i + 1}/{len(states)}")
        frames.append(renderer.render_frame(state))
        durations.append(frame_ms)

    final_state = states[-1]
    if final_state.game_over:
        for frame in renderer.render_dead_snake_frames(final_state):
            frames.append(frame)
            durations.append(reveal_ms)
        durations[-1] = FINAL_HOLD_MS

    save_gif(frames, output_path, durations)
    logger.info(f"GIF created successfully at {output_path}")
    return output_path
