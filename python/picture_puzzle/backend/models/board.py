"""Board model for the picture puzzle."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import StrEnum
from typing import Iterable, Optional

# The cell with no tile in it.
EMPTY = None

Cell = Optional[int]


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Board:
    """Represents the picture puzzle board.

    Cells are stored flat in row-major order.  Each cell holds the index the
    tile occupies in the solved picture, or ``EMPTY``.
    """

    size: int
    cells: tuple[Cell, ...]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: Iterable[Cell]) -> Board:
        """Create a board from a flat row-major cell list.

        Example::

            Board.from_flat(3, [0, 1, 2, 3, 4, 5, 6, EMPTY, 7])
        """
        cells = tuple(flat)
        if size < 2:
            raise ValueError(f"Grid size must be at least 2, got {size}.")
        if len(cells) != size * size:
            raise ValueError(
                f"Expected {size * size} cells for a {size}×{size} board, "
                f"got {len(cells)}."
            )
        expected = Counter([*range(size * size - 1), EMPTY])
        if Counter(cells) != expected:
            raise ValueError(
                f"A {size}×{size} board must hold tiles 0..{size * size - 2} "
                f"and one empty cell exactly once each, got {list(cells)}."
            )
        return cls(size=size, cells=cells)

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal-state board (tiles in order, empty bottom-right)."""
        return cls.from_flat(size, [*range(size * size - 1), EMPTY])

    # -- geometry -------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.cells)

    def row_col(self, index: int) -> tuple[int, int]:
        return divmod(index, self.size)

    def index_of(self, row: int, col: int) -> int:
        return row * self.size + col

    @property
    def empty_index(self) -> int:
        return self.cells.index(EMPTY)

    def is_adjacent(self, a: int, b: int) -> bool:
        """True if *a* and *b* are orthogonal neighbours on this board."""
        ra, ca = self.row_col(a)
        rb, cb = self.row_col(b)
        return (ra == rb and abs(ca - cb) == 1) or (
            ca == cb and abs(ra - rb) == 1
        )

    def rows(self) -> list[tuple[Cell, ...]]:
        n = self.size
        return [self.cells[r * n : (r + 1) * n] for r in range(n)]

    # -- queries --------------------------------------------------------------

    def is_solved(self) -> bool:
        """Check if every tile sits on its own index and the last cell is empty."""
        last = len(self.cells) - 1
        for i in range(last):
            if self.cells[i] != i:
                return False
        return self.cells[last] is EMPTY

    def is_tile_correct(self, index: int) -> bool:
        """Check if the cell at *index* holds its goal content."""
        val = self.cells[index]
        if val is EMPTY:
            return index == len(self.cells) - 1
        return val == index

    # -- mutation -------------------------------------------------------------

    def swapped(self, a: int, b: int) -> Board:
        """Return a new board with cells *a* and *b* exchanged."""
        cells = list(self.cells)
        cells[a], cells[b] = cells[b], cells[a]
        return Board(size=self.size, cells=tuple(cells))
