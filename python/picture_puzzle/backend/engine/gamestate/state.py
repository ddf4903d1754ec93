"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from enum import StrEnum

from picture_puzzle.backend.models.board import Board


class Phase(StrEnum):
    PLAYING = "playing"
    WON = "won"


class GameState:
    """Holds the current board, move counter, elapsed seconds, and phase."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0
        self.elapsed_seconds: int = 0
        self.phase: Phase = Phase.WON if board.is_solved() else Phase.PLAYING

    # -- time tracking --------------------------------------------------------

    def tick(self) -> None:
        """Count one elapsed second; ignored once the puzzle is won."""
        if self.phase is Phase.PLAYING:
            self.elapsed_seconds += 1

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()

    @property
    def is_won(self) -> bool:
        return self.phase is Phase.WON
