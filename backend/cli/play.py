#!/usr/bin/env python3
"""
Terminal snake game - W/A/S/D or arrow keys to steer, Q to quit.

The curses loop is the timing driver: it polls the keyboard until the next
tick is due, queues direction changes on the engine, and calls advance()
once per tick. Input and ticks share this single thread.
"""

import curses
import logging
import os
import sys
import time
from typing import List

# Add backend directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import GameConfig  # noqa: E402
from domain.constants import UP, DOWN, LEFT, RIGHT  # noqa: E402
from domain.game_state import GameState  # noqa: E402
from domain.snake_game import SnakeGame  # noqa: E402
from players.keyboard import direction_for_key, is_quit_key  # noqa: E402

HEAD_GLYPHS = {UP: '^', DOWN: 'v', LEFT: '<', RIGHT: '>'}
BODY_GLYPH = 'o'
FOOD_GLYPH = '@'
EMPTY_GLYPH = '.'
DEAD_HEAD_GLYPH = 'X'
DEAD_BODY_GLYPH = 'x'

START_PROMPT = "PRESS ANY KEY TO START"
GAME_OVER_PAUSE_MS = 1000

# Color pair ids
SNAKE_PAIR, FOOD_PAIR, TEXT_PAIR, DEAD_PAIR = 1, 2, 3, 4


def board_lines(state: GameState, dead_segments: int = 0) -> List[str]:
    """
    Render a snapshot to one string per board row, cells separated by a space.

    The first dead_segments segments, counted from the head, use the dead glyphs.
    """
    grid = [[EMPTY_GLYPH for _ in range(state.cols)] for _ in range(state.rows)]

    for row, col in state.food:
        grid[row][col] = FOOD_GLYPH

    for idx, (row, col) in enumerate(state.snake_positions):
        dead = idx < dead_segments
        if idx == 0:
            grid[row][col] = DEAD_HEAD_GLYPH if dead else HEAD_GLYPHS[state.direction]
        else:
            grid[row][col] = DEAD_BODY_GLYPH if dead else BODY_GLYPH

    return [" ".join(row) for row in grid]


def _glyph_pair(glyph: str) -> int:
    if glyph == FOOD_GLYPH:
        return FOOD_PAIR
    if glyph in (DEAD_HEAD_GLYPH, DEAD_BODY_GLYPH):
        return DEAD_PAIR
    if glyph == EMPTY_GLYPH:
        return 0
    return SNAKE_PAIR


class TerminalView:
    """Draws game snapshots and overlay text on a curses window"""

    def __init__(self, stdscr, rows: int, cols: int):
        self.stdscr = stdscr
        self.rows = rows
        self.cols = cols
        self.offset_y = 2
        self.offset_x = 2

    def fits(self) -> bool:
        sh, sw = self.stdscr.getmaxyx()
        return sh >= self.rows + 4 and sw >= self.min_width()

    def min_width(self) -> int:
        return max(self.cols * 2, len(START_PROMPT)) + 4

    def draw(self, state: GameState, dead_segments: int = 0, overlay: str = ""):
        self.stdscr.erase()

        score_text = f" SCORE {state.score} "
        self.stdscr.addstr(0, self.offset_x, score_text, curses.color_pair(TEXT_PAIR) | curses.A_BOLD)

        for r, line in enumerate(board_lines(state, dead_segments)):
            for c, glyph in enumerate(line.split(" ")):
                self.stdscr.addstr(
                    r + self.offset_y, c * 2 + self.offset_x, glyph, curses.color_pair(_glyph_pair(glyph))
                )

        if overlay:
            y = self.offset_y + self.rows // 2
            x = max(0, self.offset_x + self.cols - len(overlay) // 2)
            self.stdscr.addstr(y, x, overlay, curses.color_pair(TEXT_PAIR) | curses.A_BOLD | curses.A_REVERSE)

        hint = " Q:Quit  WASD/arrows:Move "
        self.stdscr.addstr(self.offset_y + self.rows + 1, self.offset_x, hint)
        self.stdscr.refresh()


def wait_for_start(stdscr, view: TerminalView, game: SnakeGame) -> bool:
    """Show the start overlay and block for a key. Returns False on quit."""
    view.draw(game.get_current_state(), overlay=START_PROMPT)
    stdscr.timeout(-1)
    key = stdscr.getch()
    return not is_quit_key(key)


def show_countdown(stdscr, view: TerminalView, game: SnakeGame, config: GameConfig):
    state = game.get_current_state()
    for i in range(config.countdown, 0, -1):
        view.draw(state, overlay=str(i))
        curses.napms(config.tick_ms)
    # Keys pressed during the countdown are discarded
    curses.flushinp()


def game_loop(stdscr, view: TerminalView, game: SnakeGame, config: GameConfig) -> bool:
    """
    Run ticks until the game ends. Returns False if the player quit.
    """
    tick_seconds = config.tick_ms / 1000.0
    next_tick = time.monotonic() + tick_seconds
    view.draw(game.get_current_state())

    while not game.game_over:
        remaining_ms = int(max(0.0, next_tick - time.monotonic()) * 1000)
        stdscr.timeout(remaining_ms)
        key = stdscr.getch()

        if key != -1:
            if is_quit_key(key):
                return False
            direction = direction_for_key(key)
            if direction is not None:
                game.set_direction(direction)
            if time.monotonic() < next_tick:
                continue

        game.advance()
        view.draw(game.get_current_state())
        next_tick += tick_seconds

    return True


def show_game_over(stdscr, view: TerminalView, game: SnakeGame, config: GameConfig):
    """Reveal the dead snake segment by segment from the head, then pause."""
    state = game.get_current_state()
    for count in range(1, len(state.snake_positions) + 1):
        view.draw(state, dead_segments=count)
        curses.napms(config.reveal_ms)
    curses.napms(GAME_OVER_PAUSE_MS)
    curses.flushinp()


def run_session(stdscr, config: GameConfig) -> int:
    """
    Play games until the player quits. Returns the best score of the session.
    """
    curses.curs_set(0)
    stdscr.keypad(True)

    curses.start_color()
    curses.init_pair(SNAKE_PAIR, curses.COLOR_GREEN, curses.COLOR_BLACK)
    curses.init_pair(FOOD_PAIR, curses.COLOR_RED, curses.COLOR_BLACK)
    curses.init_pair(TEXT_PAIR, curses.COLOR_YELLOW, curses.COLOR_BLACK)
    curses.init_pair(DEAD_PAIR, curses.COLOR_WHITE, curses.COLOR_BLACK)

    view = TerminalView(stdscr, config.rows, config.cols)
    if not view.fits():
        stdscr.addstr(0, 0, f"Terminal too small! Need at least {view.min_width()}x{config.rows + 4}")
        stdscr.refresh()
        stdscr.timeout(-1)
        stdscr.getch()
        return 0

    best = 0
    game = SnakeGame(config.rows, config.cols)
    while wait_for_start(stdscr, view, game):
        show_countdown(stdscr, view, game, config)
        finished = game_loop(stdscr, view, game, config)
        best = max(best, game.score)
        if not finished:
            break
        show_game_over(stdscr, view, game, config)
        # No in-place reset: every game gets a fresh engine
        game = SnakeGame(config.rows, config.cols)

    return best


def main():
    config = GameConfig.from_env()
    # curses owns the terminal, so only warnings and above are logged
    logging.basicConfig(level=logging.WARNING, format="%(asctime)s [%(levelname)s] %(message)s")
    try:
        best = curses.wrapper(run_session, config)
        print(f"Thanks for playing Snake! Best score: {best}")
    except KeyboardInterrupt:
        print("\nGame interrupted. Goodbye!")


if __name__ == "__main__":
    main()
