"""
Tests for GameSimulation - the tick state machine.
"""

import os
import random
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import (  # noqa: E402
    Cell,
    Direction,
    FoodSpawner,
    GameSimulation,
    GameSnapshot,
    GameStatus,
    Grid,
)

START = [(16, 10), (15, 10), (14, 10), (13, 10)]


class CountingSpawner(FoodSpawner):
    """FoodSpawner that records how often it is asked for food."""

    def __init__(self, grid, seed=0):
        super().__init__(grid, seed=seed)
        self.calls = 0

    def spawn(self, excluded):
        self.calls += 1
        return super().spawn(excluded)


@pytest.fixture
def grid():
    return Grid(32, 20)


class TestInitialState:
    """Tests for the starting layout."""

    def test_starting_layout(self, grid):
        """Snake starts centred, length 4, heading right."""
        sim = GameSimulation(grid=grid, spawner=FoodSpawner(grid, seed=3))
        assert sim.body.cells() == START
        assert sim.direction is Direction.RIGHT
        assert sim.score == 0
        assert sim.status is GameStatus.RUNNING
        assert sim.food is not None
        assert not sim.body.occupies(sim.food)

    def test_initial_length_must_fit(self):
        with pytest.raises(ValueError):
            GameSimulation(grid=Grid(4, 4), initial_length=4)

    def test_from_layout_rejects_food_on_snake(self, grid):
        with pytest.raises(ValueError):
            GameSimulation.from_layout(START, food=(14, 10), grid=grid)

    def test_from_layout_rejects_out_of_bounds(self, grid):
        with pytest.raises(ValueError):
            GameSimulation.from_layout([(32, 0), (31, 0), (30, 0), (29, 0)], food=(0, 0), grid=grid)

    def test_from_layout_rejects_short_snake(self, grid):
        """A layout shorter than the starting length is refused."""
        with pytest.raises(ValueError):
            GameSimulation.from_layout([(5, 5)], food=(0, 0), grid=grid)
        with pytest.raises(ValueError):
            GameSimulation.from_layout([(5, 5), (4, 5), (3, 5)], food=(0, 0), grid=grid)

    def test_from_layout_minimum_follows_narrow_grid(self):
        """On a grid too narrow for 4 cells the minimum is what fits."""
        sim = GameSimulation.from_layout([(2, 0), (1, 0), (0, 0)], food=(3, 0), grid=Grid(4, 1))
        assert len(sim.body) == 3


class TestAdvance:
    """Tests for GameSimulation.advance()."""

    def test_move_keeps_length(self, grid):
        sim = GameSimulation.from_layout(START, food=(0, 0), grid=grid)
        assert sim.advance() is True
        assert sim.body.cells() == [(17, 10), (16, 10), (15, 10), (14, 10)]
        assert sim.score == 0
        assert sim.tick == 1

    def test_eat_food_end_to_end(self, grid):
        """After 4 ticks the head reaches the food, grows and scores."""
        spawner = CountingSpawner(grid, seed=11)
        sim = GameSimulation.from_layout(START, food=(20, 10), grid=grid, spawner=spawner)
        calls_before = spawner.calls

        for _ in range(3):
            sim.advance()
            assert len(sim.body) == 4
        sim.advance()

        assert sim.body.head() == (20, 10)
        assert len(sim.body) == 5
        assert sim.score == 1
        assert spawner.calls == calls_before + 1
        assert sim.food is not None
        assert not sim.body.occupies(sim.food)

    def test_wall_collision_end_to_end(self, grid):
        """GameOver arrives exactly on the tick the head would pass x=COLS-1."""
        sim = GameSimulation.from_layout(
            [(28, 10), (27, 10), (26, 10), (25, 10)], food=(0, 0), grid=grid
        )
        for _ in range(3):
            assert sim.advance() is True
            assert not sim.game_over
        assert sim.body.head() == (31, 10)

        assert sim.advance() is False
        assert sim.game_over
        assert sim.death_reason == "wall"
        assert sim.body.head() == (31, 10)

    @pytest.mark.parametrize("positions, direction", [
        ([(0, 5), (1, 5), (2, 5), (3, 5)], Direction.LEFT),
        ([(5, 0), (5, 1), (5, 2), (5, 3)], Direction.UP),
        ([(5, 19), (5, 18), (5, 17), (5, 16)], Direction.DOWN),
    ])
    def test_every_wall_ends_game(self, grid, positions, direction):
        sim = GameSimulation.from_layout(positions, food=(20, 10), grid=grid, direction=direction)
        sim.advance()
        assert sim.game_over
        assert sim.death_reason == "wall"

    def test_self_collision(self, grid):
        """Running into a body segment other than the tail ends the game."""
        body = [(5, 5), (5, 6), (4, 6), (4, 5), (3, 5)]
        sim = GameSimulation.from_layout(body, food=(20, 10), grid=grid, direction=Direction.LEFT)
        assert sim.advance() is False
        assert sim.game_over
        assert sim.death_reason == "self"
        assert sim.body.cells() == body

    def test_moving_into_tail_is_allowed(self, grid):
        """The tail vacates on the same tick, so chasing it is legal."""
        body = [(5, 5), (5, 6), (4, 6), (4, 5)]
        sim = GameSimulation.from_layout(body, food=(20, 10), grid=grid, direction=Direction.LEFT)
        assert sim.advance() is True
        assert not sim.game_over
        assert sim.body.cells() == [(4, 5), (5, 5), (5, 6), (4, 6)]

    def test_advance_is_noop_when_game_over(self, grid):
        sim = GameSimulation.from_layout([(31, 0), (30, 0), (29, 0), (28, 0)], food=(0, 5), grid=grid)
        sim.advance()
        before = sim.snapshot()
        assert sim.advance() is False
        assert sim.snapshot() == before

    def test_filling_the_board_ends_game(self):
        """Eating the last free cell leaves nowhere for food."""
        grid = Grid(4, 1)
        sim = GameSimulation.from_layout(
            [(2, 0), (1, 0), (0, 0)], food=(3, 0), grid=grid, spawner=FoodSpawner(grid, seed=0)
        )
        assert sim.advance() is True
        assert sim.score == 1
        assert sim.food is None
        assert sim.game_over
        assert sim.death_reason == "board_full"


class TestDirectionChanges:
    """Tests for GameSimulation.set_direction()."""

    @pytest.mark.parametrize("direction", list(Direction))
    def test_reversal_always_rejected(self, grid, direction):
        sim = GameSimulation(grid=grid, spawner=FoodSpawner(grid, seed=0))
        sim.direction = direction
        assert sim.set_direction(direction.opposite) is False
        assert sim.direction is direction

    def test_turn_accepted(self, grid):
        sim = GameSimulation(grid=grid, spawner=FoodSpawner(grid, seed=0))
        assert sim.set_direction(Direction.UP) is True
        sim.advance()
        assert sim.body.head() == (16, 9)

    def test_ignored_when_game_over(self, grid):
        sim = GameSimulation.from_layout([(31, 0), (30, 0), (29, 0), (28, 0)], food=(0, 5), grid=grid)
        sim.advance()
        assert sim.set_direction(Direction.DOWN) is False
        assert sim.direction is Direction.RIGHT


class TestRestart:
    """Tests for GameSimulation.restart()."""

    def test_restart_while_running_is_noop(self, grid):
        sim = GameSimulation.from_layout(START, food=(20, 10), grid=grid)
        sim.advance()
        assert sim.restart() is False
        assert sim.body.head() == (17, 10)

    def test_restart_after_game_over_resets(self, grid):
        sim = GameSimulation.from_layout(
            [(30, 3), (29, 3), (28, 3), (27, 3), (26, 3)], food=(31, 3), grid=grid,
            spawner=FoodSpawner(grid, seed=5),
        )
        sim.advance()
        sim.set_direction(Direction.DOWN)
        while not sim.game_over:
            sim.advance()
        assert sim.score >= 1

        assert sim.restart() is True
        assert sim.status is GameStatus.RUNNING
        assert sim.body.cells() == START
        assert sim.score == 0
        assert sim.direction is Direction.RIGHT
        assert sim.death_reason is None
        assert sim.tick == 0
        assert grid.is_in_bounds(sim.food)
        assert not sim.body.occupies(sim.food)

    def test_object_is_reused(self, grid):
        sim = GameSimulation.from_layout([(31, 0), (30, 0), (29, 0), (28, 0)], food=(0, 5), grid=grid)
        sim.advance()
        same = sim
        sim.restart()
        assert sim is same


class TestInvariants:
    """Randomised play checking the per-tick invariants."""

    def test_random_play(self, grid):
        rng = random.Random(1234)
        sim = GameSimulation(grid=grid, spawner=FoodSpawner(grid, seed=99))
        for _ in range(2000):
            if sim.game_over:
                sim.restart()
                continue
            sim.set_direction(rng.choice(list(Direction)))
            length, score = len(sim.body), sim.score
            food = sim.food
            moved = sim.advance()
            if not moved:
                assert sim.game_over
                assert len(sim.body) == length
                continue
            ate = sim.body.head() == food
            assert len(sim.body) == length + (1 if ate else 0)
            assert sim.score == score + (1 if ate else 0)
            cells = sim.body.cells()
            assert len(set(cells)) == len(cells)
            if sim.food is not None:
                assert not sim.body.occupies(sim.food)


class TestSnapshot:
    """Tests for GameSimulation.snapshot() and GameSnapshot."""

    def test_snapshot_contents(self, grid):
        sim = GameSimulation.from_layout(START, food=(20, 10), grid=grid)
        snap = sim.snapshot()
        assert isinstance(snap, GameSnapshot)
        assert snap.snake == tuple(Cell(*c) for c in START)
        assert snap.food == (20, 10)
        assert snap.score == 0
        assert snap.status is GameStatus.RUNNING
        assert snap.direction is Direction.RIGHT
        assert (snap.cols, snap.rows) == (32, 20)
        assert not snap.game_over

    def test_snapshot_is_detached(self, grid):
        """Later ticks do not change an earlier snapshot."""
        sim = GameSimulation.from_layout(START, food=(20, 10), grid=grid)
        snap = sim.snapshot()
        sim.advance()
        assert snap.snake[0] == (16, 10)

    def test_print_board(self):
        grid = Grid(6, 3)
        sim = GameSimulation.from_layout([(3, 1), (2, 1), (1, 1), (0, 1)], food=(5, 0), grid=grid)
        board = sim.snapshot().print_board().split("\n")
        assert board[0] == " 0 . . . . . A"
        assert board[1] == " 1 T T T H . ."
        assert board[2] == " 2 . . . . . ."
        assert board[3] == "   0 1 2 3 4 5"
