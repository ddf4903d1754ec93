"""Generates solvable picture puzzle boards."""

from __future__ import annotations

import logging
import random
from bisect import bisect_left, insort
from typing import Iterable, Protocol

from picture_puzzle.backend.models.board import EMPTY, Board, Cell

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything with an inclusive ``randint``; ``random.Random`` qualifies."""

    def randint(self, a: int, b: int) -> int: ...


_default_rng = random.Random()


class GameGenerator:
    """Creates solvable puzzles by rejection-sampling uniform shuffles."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (tiles in order, empty bottom-right)."""
        return Board.solved(size)

    @staticmethod
    def shuffle(tiles: list[int], rng: RandomSource) -> None:
        """Fisher–Yates shuffle of *tiles* in place."""
        for i in range(len(tiles) - 1, 0, -1):
            j = rng.randint(0, i)
            tiles[i], tiles[j] = tiles[j], tiles[i]

    @staticmethod
    def generate(size: int, rng: RandomSource | None = None) -> Board:
        """Return a random *solvable*, not yet solved board of the given size."""
        if size < 2:
            raise ValueError(f"Grid size must be at least 2, got {size}.")
        rng = rng if rng is not None else _default_rng
        ordered = list(range(size * size - 1))

        attempts = 0
        while True:
            attempts += 1
            tiles = ordered[:]
            GameGenerator.shuffle(tiles, rng)
            board = Board(size=size, cells=(*tiles, EMPTY))

            if not GameGenerator.is_solvable(board):
                logger.debug("attempt %d: unsolvable shuffle rejected", attempts)
                continue
            # Ensure the board is not already solved
            if board.is_solved():
                logger.debug("attempt %d: solved shuffle rejected", attempts)
                continue

            logger.debug("generated %d×%d board in %d attempt(s)", size, size, attempts)
            return board

    # -- solvability ----------------------------------------------------------

    @staticmethod
    def count_inversions(cells: Iterable[Cell]) -> int:
        """Count out-of-order tile pairs, ignoring the empty cell."""
        inv = 0
        seen: list[int] = []
        for v in cells:
            if v is EMPTY:
                continue
            inv += len(seen) - bisect_left(seen, v)
            insort(seen, v)
        return inv

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state.

        Odd grids are solvable iff the inversion count is even.  Even grids
        are solvable iff exactly one of "empty row, counted from the bottom
        starting at 1, is even" and "inversion count is even" holds.
        """
        n = board.size
        inv_even = GameGenerator.count_inversions(board.cells) % 2 == 0
        if n % 2 == 1:
            return inv_even
        empty_row_from_bottom = n - board.empty_index // n
        return (empty_row_from_bottom % 2 == 0) != inv_even
