"""
Tests for the SnakeGame engine.

Covers movement, growth, wall and self collisions, the direction-change
queue, food placement and the board/body consistency invariants.
"""

import os
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import (
    SnakeGame,
    GameState,
    Position,
    UP, DOWN, LEFT, RIGHT,
    EMPTY, SNAKE, FOOD,
)
from players import RandomPlayer, GreedyPlayer


def make_game(snake, direction, food=(4, 4), rows=5, cols=5, seed=0):
    return SnakeGame(rows, cols, snake_positions=snake, direction=direction, food=food, seed=seed)


def assert_consistent(game):
    """Board SNAKE cells and the body sequence describe the same cells."""
    body = list(game.snake_positions())
    assert set(game.board.positions_of(SNAKE)) == set(body)
    assert len(set(body)) == len(body)


class TestInitialization:
    """Tests for a freshly constructed game."""

    def test_default_snake_is_centered_facing_up(self):
        game = SnakeGame(5, 5, seed=1)
        assert list(game.snake_positions()) == [Position(2, 2), Position(3, 2)]
        assert game.head_position() == Position(2, 2)
        assert game.tail_position() == Position(3, 2)
        assert game.direction == UP
        assert game.score == 0
        assert game.game_over is False
        assert game.is_over() is False
        assert game.round_number == 0

    def test_one_food_on_an_empty_cell(self):
        game = SnakeGame(15, 15, seed=3)
        food = list(game.board.positions_of(FOOD))
        assert len(food) == 1
        assert food[0] not in set(game.snake_positions())

    def test_seed_makes_food_placement_repeatable(self):
        first = SnakeGame(10, 10, seed=42)
        second = SnakeGame(10, 10, seed=42)
        assert list(first.board.positions_of(FOOD)) == list(second.board.positions_of(FOOD))

    def test_board_marks_initial_snake(self):
        game = SnakeGame(6, 6, seed=0)
        assert_consistent(game)

    def test_explicit_layout(self):
        game = make_game([(1, 1), (1, 2), (1, 3)], LEFT, food=(3, 3))
        assert game.value_at((1, 1)) == SNAKE
        assert game.value_at((3, 3)) == FOOD
        assert game.direction == LEFT
        assert game.snake_length == 3

    def test_too_few_rows_rejected(self):
        with pytest.raises(ValueError):
            SnakeGame(1, 5)

    @pytest.mark.parametrize("snake", [
        [],
        [(1, 1), (1, 1)],
        [(1, 1), (1, 3)],
        [(0, 0), (-1, 0)],
        [(4, 4), (4, 5)],
    ])
    def test_invalid_snake_layout_rejected(self, snake):
        with pytest.raises(ValueError):
            make_game(snake, LEFT)

    def test_food_on_snake_rejected(self):
        with pytest.raises(ValueError):
            make_game([(1, 1), (1, 2)], LEFT, food=(1, 2))

    def test_invalid_initial_direction_rejected(self):
        with pytest.raises(ValueError):
            make_game([(1, 1), (1, 2)], "SIDEWAYS")


class TestMovement:
    """Tests for plain moves onto empty cells."""

    def test_move_left_on_five_by_five(self):
        """Head steps to (2,1), the tail cell frees up, the old head stays body."""
        game = make_game([(2, 2), (2, 3)], LEFT)

        game.advance()

        assert game.head_position() == Position(2, 1)
        assert list(game.snake_positions()) == [Position(2, 1), Position(2, 2)]
        assert game.value_at((2, 1)) == SNAKE
        assert game.value_at((2, 2)) == SNAKE
        assert game.value_at((2, 3)) == EMPTY
        assert game.score == 0
        assert game.game_over is False
        assert game.round_number == 1

    def test_three_segment_move(self):
        game = make_game([(1, 1), (1, 2), (1, 3)], LEFT)

        game.advance()

        assert list(game.snake_positions()) == [Position(1, 0), Position(1, 1), Position(1, 2)]
        assert game.value_at((1, 3)) == EMPTY
        assert game.snake_length == 3
        assert_consistent(game)

    def test_moving_into_vacating_tail_is_allowed(self):
        """The tail leaves its cell this tick, so the head may take it."""
        game = make_game([(1, 1), (1, 2), (2, 2), (2, 1)], DOWN)

        game.advance()

        assert game.game_over is False
        assert list(game.snake_positions()) == [
            Position(2, 1), Position(1, 1), Position(1, 2), Position(2, 2)
        ]
        assert_consistent(game)


class TestCollisions:
    """Tests for wall and self collisions."""

    def test_wall_collision_ends_game_without_touching_board(self):
        game = make_game([(0, 2), (1, 2)], UP)
        before = game.get_current_state()

        game.advance()

        after = game.get_current_state()
        assert game.game_over is True
        assert game.death_reason == "wall"
        assert after.snake_positions == before.snake_positions
        assert after.food == before.food
        assert list(game.board.positions_of(SNAKE)) == [Position(0, 2), Position(1, 2)]
        assert game.round_number == 0

    @pytest.mark.parametrize("snake,direction", [
        ([(2, 0), (2, 1)], LEFT),
        ([(4, 2), (3, 2)], DOWN),
        ([(2, 4), (2, 3)], RIGHT),
    ])
    def test_every_wall_is_solid(self, snake, direction):
        game = make_game(snake, direction, food=(0, 0))
        game.advance()
        assert game.game_over is True
        assert game.death_reason == "wall"

    def test_self_collision_ends_game(self):
        game = make_game([(2, 2), (2, 3), (1, 3), (1, 2), (1, 1)], UP)
        before = game.get_current_state()

        game.advance()

        assert game.game_over is True
        assert game.death_reason == "self"
        assert game.get_current_state().snake_positions == before.snake_positions
        assert_consistent(game)

    def test_advance_after_game_over_is_a_no_op(self):
        game = make_game([(0, 2), (1, 2)], UP)
        game.advance()
        snapshot = game.get_current_state()

        game.advance()
        game.advance()

        assert game.get_current_state() == snapshot

    def test_set_direction_after_game_over_is_ignored(self):
        game = make_game([(0, 2), (1, 2)], UP)
        game.advance()
        assert game.set_direction(LEFT) is False
        assert game.pending_directions == ()


class TestEating:
    """Tests for growth and food placement."""

    def test_eating_grows_and_scores(self):
        game = make_game([(2, 2), (2, 3)], LEFT, food=(2, 1))
        empty_before = set(game.board.empty_positions())

        game.advance()

        assert game.score == 1
        assert game.snake_length == 3
        assert list(game.snake_positions()) == [Position(2, 1), Position(2, 2), Position(2, 3)]
        food = list(game.board.positions_of(FOOD))
        assert len(food) == 1
        assert food[0] in empty_before
        assert_consistent(game)

    def test_food_lands_on_the_only_empty_cell(self):
        game = make_game([(0, 0), (1, 0)], RIGHT, food=(0, 1), rows=2, cols=2)

        game.advance()

        assert list(game.board.positions_of(FOOD)) == [Position(1, 1)]

    def test_full_board_places_no_food(self):
        game = make_game([(0, 0), (1, 0), (1, 1)], RIGHT, food=(0, 1), rows=2, cols=2)

        game.advance()

        assert game.score == 1
        assert game.snake_length == 4
        assert list(game.board.positions_of(FOOD)) == []
        assert game.board.empty_positions() == []
        assert game.game_over is False


class TestDirectionQueue:
    """Tests for set_direction and the two-slot direction queue."""

    def test_reversal_is_rejected(self):
        game = make_game([(2, 2), (2, 1)], RIGHT)

        assert game.set_direction(LEFT) is False
        game.advance()

        assert game.direction == RIGHT
        assert game.head_position() == Position(2, 3)

    def test_repeat_of_current_direction_is_queued(self):
        game = make_game([(2, 2), (2, 1)], RIGHT)
        assert game.set_direction(RIGHT) is True
        assert game.pending_directions == (RIGHT,)

    def test_repeated_direction_takes_a_queue_slot(self):
        """UP, LEFT fill the queue, so DOWN is dropped and the next tick goes up."""
        game = make_game([(2, 2), (3, 2)], UP)

        accepted = [game.set_direction(d) for d in (UP, LEFT, DOWN)]
        game.advance()

        assert accepted == [True, True, False]
        assert game.direction == UP
        assert game.head_position() == Position(1, 2)
        assert game.pending_directions == (LEFT,)

        game.advance()
        assert game.head_position() == Position(1, 1)

    def test_two_turns_apply_on_consecutive_ticks(self):
        """A quick double key-press turns once per tick."""
        game = make_game([(2, 2), (2, 1)], RIGHT)

        assert game.set_direction(UP) is True
        assert game.set_direction(LEFT) is True
        assert game.pending_directions == (UP, LEFT)

        game.advance()
        assert game.direction == UP
        assert game.head_position() == Position(1, 2)

        game.advance()
        assert game.direction == LEFT
        assert game.head_position() == Position(1, 1)
        assert game.pending_directions == ()

    def test_queue_capacity_is_two(self):
        game = make_game([(2, 2), (2, 1)], RIGHT)
        game.set_direction(UP)
        game.set_direction(LEFT)
        assert game.set_direction(DOWN) is False
        assert game.pending_directions == (UP, LEFT)

    def test_reversal_of_queued_direction_is_rejected(self):
        game = make_game([(2, 2), (2, 1)], RIGHT)
        assert game.set_direction(UP) is True
        assert game.set_direction(DOWN) is False
        assert game.pending_directions == (UP,)

    def test_current_direction_reversal_checked_against_last_queued(self):
        """LEFT is allowed once UP is queued, because it no longer reverses."""
        game = make_game([(2, 2), (2, 1)], RIGHT)
        game.set_direction(UP)
        assert game.set_direction(LEFT) is True

    def test_unknown_direction_raises(self):
        game = make_game([(2, 2), (2, 1)], RIGHT)
        with pytest.raises(ValueError):
            game.set_direction("FORWARD")


class TestSnapshots:
    """Tests for GameState snapshots taken from the engine."""

    def test_snapshot_contents(self):
        game = make_game([(2, 2), (2, 3)], LEFT, food=(0, 0))
        state = game.get_current_state()

        assert isinstance(state, GameState)
        assert state.rows == 5 and state.cols == 5
        assert state.snake_positions == [Position(2, 2), Position(2, 3)]
        assert state.head == Position(2, 2)
        assert state.direction == LEFT
        assert state.food == [Position(0, 0)]
        assert state.score == 0
        assert state.game_over is False

    def test_snake_positions_survive_a_tick_mid_iteration(self):
        """Advancing while a renderer walks the body must not break the walk."""
        game = make_game([(2, 2), (2, 3), (2, 4)], LEFT)
        seen = []
        for pos in game.snake_positions():
            seen.append(pos)
            game.advance()

        assert seen == [Position(2, 2), Position(2, 3), Position(2, 4)]
        assert game.head_position() == Position(2, 0)
        assert game.death_reason == "wall"

    def test_snapshot_is_detached_from_engine(self):
        game = make_game([(2, 2), (2, 3)], LEFT)
        state = game.get_current_state()
        game.advance()
        assert state.snake_positions == [Position(2, 2), Position(2, 3)]

    def test_print_board_markers(self):
        game = make_game([(2, 2), (2, 3)], LEFT, food=(0, 0))
        board_str = game.print_board()
        lines = board_str.split("\n")

        assert lines[0].split()[1] == "F"
        assert lines[2].split()[3] == "H"
        assert lines[2].split()[4] == "S"
        assert len(lines) == 6

    def test_print_board_marks_dead_head(self):
        game = make_game([(0, 2), (1, 2)], UP)
        game.advance()
        assert "X" in game.print_board()

    def test_to_dict_round_trips(self):
        game = make_game([(2, 2), (2, 3)], LEFT)
        game.advance()
        state = game.get_current_state()
        assert GameState.from_dict(state.to_dict()) == state


class TestInvariants:
    """Board and body agree on every tick of full autopilot games."""

    @pytest.mark.parametrize("seed", range(10))
    @pytest.mark.parametrize("player_class", [RandomPlayer, GreedyPlayer])
    def test_board_matches_body_through_a_game(self, seed, player_class):
        game = SnakeGame(6, 6, seed=seed)
        player = player_class(seed=seed)

        for _ in range(400):
            if game.game_over:
                break
            length_before = game.snake_length
            score_before = game.score

            game.set_direction(player.get_move(game.get_current_state()))
            game.advance()

            assert_consistent(game)
            food = list(game.board.positions_of(FOOD))
            assert len(food) <= 1
            if not game.game_over:
                assert len(food) == 1 or not game.board.empty_positions()
                assert game.score - score_before in (0, 1)
                assert game.snake_length - length_before == game.score - score_before

        snapshot = game.get_current_state()
        game.advance()
        if snapshot.game_over:
            assert game.get_current_state() == snapshot
