"""
Public core API.

Three pure operations over :class:`Board` values; no timer, no phase, no
side effects.  Interactive sessions should use
:class:`~picture_puzzle.backend.engine.gameplay.GamePlay`, which builds on
the same rules.
"""

from __future__ import annotations

from picture_puzzle.backend.engine.gamegenerator import GameGenerator, RandomSource
from picture_puzzle.backend.engine.gameplay import GamePlay
from picture_puzzle.backend.models.board import Board


def generate(grid_size: int, rng: RandomSource | None = None) -> Board:
    """Return a shuffled board that is guaranteed to be solvable."""
    return GameGenerator.generate(grid_size, rng)


def move_tile(board: Board, index: int) -> Board:
    """Slide the tile at *index* into the empty cell if they are adjacent.

    Returns *board* itself when the move is illegal or the board is solved.
    """
    return GamePlay.slide(board, index)


def is_solved(board: Board) -> bool:
    return board.is_solved()


def is_solvable(board: Board) -> bool:
    return GameGenerator.is_solvable(board)
