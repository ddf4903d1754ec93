"""Core gameplay logic — processes moves, ticks the timer, detects the win."""

from __future__ import annotations

import logging
from typing import Callable

from picture_puzzle.backend.engine.gameclock import SecondTicker
from picture_puzzle.backend.engine.gamegenerator import GameGenerator, RandomSource
from picture_puzzle.backend.engine.gamestate import GameState, Phase
from picture_puzzle.backend.models.board import Board, Direction

logger = logging.getLogger(__name__)

WinListener = Callable[[GameState], None]


class GamePlay:
    """Orchestrates a single game session.

    The board, timer and phase are only ever changed through
    :meth:`move_tile`, :meth:`tick` and :meth:`restart`.
    """

    def __init__(
        self,
        size: int,
        rng: RandomSource | None = None,
        ticker: SecondTicker | None = None,
    ) -> None:
        self.size = size
        self._rng = rng
        self._ticker = ticker if ticker is not None else SecondTicker()
        self._win_listeners: list[WinListener] = []
        self.state = GameState(GameGenerator.generate(size, rng))
        self._ticker.start()
        logger.info("new %d×%d game", size, size)

    @classmethod
    def from_board(
        cls,
        board: Board,
        rng: RandomSource | None = None,
        ticker: SecondTicker | None = None,
    ) -> "GamePlay":
        """Create a game session from an existing board."""
        obj = object.__new__(cls)
        obj.size = board.size
        obj._rng = rng
        obj._ticker = ticker if ticker is not None else SecondTicker()
        obj._win_listeners = []
        obj.state = GameState(board)
        if obj.state.phase is Phase.PLAYING:
            obj._ticker.start()
        return obj

    # -- listeners ------------------------------------------------------------

    def add_win_listener(self, listener: WinListener) -> None:
        """Call *listener* once each time the puzzle goes from playing to won."""
        self._win_listeners.append(listener)

    # -- rules ----------------------------------------------------------------

    @staticmethod
    def slide(board: Board, index: int) -> Board:
        """Return *board* with the tile at *index* slid into the empty cell.

        A solved board, or a tile that is not next to the empty cell, leaves
        the board unchanged.
        """
        if board.is_solved():
            return board
        if not 0 <= index < len(board):
            return board
        empty = board.empty_index
        if not board.is_adjacent(index, empty):
            return board
        return board.swapped(index, empty)

    # -- movement -------------------------------------------------------------

    def move_tile(self, index: int) -> bool:
        """Move the tile at board *index* into the adjacent empty cell.

        Returns True if the move was applied.
        """
        if self.state.phase is not Phase.PLAYING:
            return False

        board = self.state.board
        moved = self.slide(board, index)
        if moved is board:
            return False

        self.state.board = moved
        self.state.increment_moves()
        if moved.is_solved():
            self._win()
        return True

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent empty cell.

        E.g. ``Direction.UP`` moves the tile **below** the empty cell upward.
        Returns True if the move was valid.
        """
        board = self.state.board
        er, ec = board.row_col(board.empty_index)

        offsets = {
            Direction.UP: (1, 0),
            Direction.DOWN: (-1, 0),
            Direction.LEFT: (0, 1),
            Direction.RIGHT: (0, -1),
        }
        dr, dc = offsets[direction]
        tr, tc = er + dr, ec + dc

        if not (0 <= tr < board.size and 0 <= tc < board.size):
            return False
        return self.move_tile(board.index_of(tr, tc))

    def _win(self) -> None:
        # Phase change and timer stop happen together, before any listener runs.
        self.state.phase = Phase.WON
        self._ticker.cancel()
        logger.info(
            "solved %d×%d in %d moves, %ds",
            self.size,
            self.size,
            self.state.moves,
            self.state.elapsed_seconds,
        )
        for listener in self._win_listeners:
            listener(self.state)

    # -- timer ----------------------------------------------------------------

    def tick(self) -> None:
        self.state.tick()

    def poll_clock(self) -> int:
        """Apply every tick that fell due since the last poll."""
        due = self._ticker.poll()
        for _ in range(due):
            self.tick()
        return due

    def seconds_until_tick(self) -> float | None:
        return self._ticker.time_until_next()

    # -- lifecycle ------------------------------------------------------------

    def restart(self) -> None:
        """Throw the board away and start over with a fresh shuffle."""
        self._ticker.cancel()
        self.state = GameState(GameGenerator.generate(self.size, self._rng))
        self._ticker.start()
        logger.info("restarted %d×%d game", self.size, self.size)

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.is_won
