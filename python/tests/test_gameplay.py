"""Gameplay tests for the move rule and the game controller."""

from __future__ import annotations

import random
from collections import Counter

import pytest

from picture_puzzle import is_solved, move_tile
from picture_puzzle.backend.engine.gameclock import SecondTicker
from picture_puzzle.backend.engine.gameplay import GamePlay
from picture_puzzle.backend.engine.gamestate import GameState, Phase
from picture_puzzle.backend.models.board import EMPTY, Board, Direction

E = EMPTY


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def _game(cells: list, clock: FakeClock | None = None) -> GamePlay:
    size = int(len(cells) ** 0.5)
    ticker = SecondTicker(clock=clock or FakeClock())
    return GamePlay.from_board(Board.from_flat(size, cells), ticker=ticker)


# -- pure move rule -----------------------------------------------------------


CENTRE_EMPTY = [0, 1, 2, 3, E, 5, 6, 7, 4]


@pytest.mark.parametrize("index", [1, 3, 5, 7])
def test_neighbours_of_centre_move(index: int) -> None:
    board = Board.from_flat(3, CENTRE_EMPTY)
    moved = move_tile(board, index)
    assert moved is not board
    assert moved.cells[4] == board.cells[index]
    assert moved.cells[index] is E


@pytest.mark.parametrize("index", [0, 2, 6, 8])
def test_diagonals_of_centre_do_not_move(index: int) -> None:
    board = Board.from_flat(3, CENTRE_EMPTY)
    assert move_tile(board, index) is board


def test_illegal_move_leaves_board_identical() -> None:
    board = Board.from_flat(3, [1, 0, 2, 3, 4, 5, 6, 7, E])
    moved = move_tile(board, 0)
    assert moved == board
    assert moved.cells == (1, 0, 2, 3, 4, 5, 6, 7, E)


@pytest.mark.parametrize("index", [-1, 9, 42])
def test_out_of_range_index_is_ignored(index: int) -> None:
    board = Board.from_flat(3, [1, 0, 2, 3, 4, 5, 6, 7, E])
    assert move_tile(board, index) is board


def test_clicking_the_empty_cell_does_nothing() -> None:
    board = Board.from_flat(3, [1, 0, 2, 3, 4, 5, 6, 7, E])
    assert move_tile(board, 8) is board


def test_moving_a_tile_back_restores_board() -> None:
    board = Board.from_flat(3, [1, 0, 2, 3, 4, 5, 6, 7, E])
    empty = board.empty_index

    there = move_tile(board, 5)
    assert there != board
    # The tile now sits where the empty cell was; slide it back.
    back = move_tile(there, empty)
    assert back == board


def test_solved_board_is_frozen() -> None:
    board = Board.solved(3)
    for index in range(9):
        assert move_tile(board, index) is board


def test_win_detection() -> None:
    assert is_solved(Board.from_flat(3, [0, 1, 2, 3, 4, 5, 6, 7, E]))
    assert not is_solved(Board.from_flat(3, [0, 1, 2, 3, 4, 5, 6, E, 7]))


@pytest.mark.parametrize("size", [3, 4])
def test_random_play_keeps_every_tile(size: int) -> None:
    rng = random.Random(size)
    board = Board.from_flat(size, [1, 0, *range(2, size * size - 1), E])
    expected = Counter([*range(size * size - 1), E])
    for _ in range(500):
        board = move_tile(board, rng.randrange(size * size))
        assert Counter(board.cells) == expected


# -- controller ---------------------------------------------------------------


def test_new_game_starts_playing() -> None:
    game = GamePlay(3, rng=random.Random(5))
    assert game.state.phase is Phase.PLAYING
    assert game.state.elapsed_seconds == 0
    assert game.state.moves == 0
    assert not game.state.board.is_solved()


def test_legal_moves_are_counted() -> None:
    game = _game([1, 0, 2, 3, 4, 5, 6, 7, E])
    assert not game.move_tile(0)
    assert game.state.moves == 0
    assert game.move_tile(5)
    assert game.state.moves == 1


def test_winning_move_stops_timer_and_celebrates_once() -> None:
    clock = FakeClock()
    game = _game([0, 1, 2, 3, 4, 5, 6, E, 7], clock)
    wins: list[GameState] = []
    game.add_win_listener(wins.append)

    clock.now += 2.0
    assert game.poll_clock() == 2

    assert game.move_tile(8)
    assert game.is_won
    assert game.state.phase is Phase.WON
    assert game.seconds_until_tick() is None
    assert wins == [game.state]

    # Frozen: no more moves, no more time, no second celebration.
    for index in range(9):
        assert not game.move_tile(index)
    clock.now += 10.0
    assert game.poll_clock() == 0
    game.tick()
    assert game.state.elapsed_seconds == 2
    assert game.state.board.is_solved()
    assert len(wins) == 1


def test_ticks_accumulate_while_playing() -> None:
    clock = FakeClock()
    game = _game([1, 0, 2, 3, 4, 5, 6, 7, E], clock)
    clock.now += 0.5
    assert game.poll_clock() == 0
    clock.now += 3.0
    assert game.poll_clock() == 3
    game.tick()
    assert game.state.elapsed_seconds == 4


def test_restart_resets_everything() -> None:
    clock = FakeClock()
    game = GamePlay(3, rng=random.Random(11), ticker=SecondTicker(clock=clock))
    clock.now += 5.0
    game.poll_clock()
    first = game.state.board
    empty = first.empty_index
    neighbour = next(i for i in range(9) if first.is_adjacent(i, empty))
    game.move_tile(neighbour)

    game.restart()

    assert game.state.phase is Phase.PLAYING
    assert game.state.elapsed_seconds == 0
    assert game.state.moves == 0
    assert game.seconds_until_tick() == pytest.approx(1.0)
    assert not game.state.board.is_solved()


def test_restart_after_win_plays_again() -> None:
    clock = FakeClock()
    game = _game([0, 1, 2, 3, 4, 5, 6, E, 7], clock)
    wins: list[GameState] = []
    game.add_win_listener(wins.append)
    game.move_tile(8)

    game.restart()

    assert game.state.phase is Phase.PLAYING
    clock.now += 1.0
    assert game.poll_clock() == 1
    assert game.state.elapsed_seconds == 1
    assert len(wins) == 1


def test_from_solved_board_is_already_won() -> None:
    clock = FakeClock()
    game = _game([0, 1, 2, 3, 4, 5, 6, 7, E], clock)
    assert game.is_won
    clock.now += 3.0
    assert game.poll_clock() == 0


# -- keyboard directions ------------------------------------------------------


def test_direction_names_where_the_tile_goes() -> None:
    game = _game([0, 1, 2, 3, 4, 5, 6, E, 7])
    # Nothing below the empty cell in the last row.
    assert not game.move(Direction.UP)
    # Tile 6 on the left slides right.
    assert game.move(Direction.RIGHT)
    assert game.state.board.cells == (0, 1, 2, 3, 4, 5, E, 6, 7)


def test_direction_move_can_win() -> None:
    game = _game([0, 1, 2, 3, 4, 5, 6, E, 7])
    assert game.move(Direction.LEFT)
    assert game.is_won


def test_direction_down_pulls_tile_from_above() -> None:
    game = _game([0, 1, 2, 3, 4, 5, 6, E, 7])
    assert game.move(Direction.DOWN)
    assert game.state.board.cells == (0, 1, 2, 3, E, 5, 6, 4, 7)
