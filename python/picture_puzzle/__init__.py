"""Sliding-tile picture puzzle."""

from picture_puzzle.api import generate, is_solvable, is_solved, move_tile
from picture_puzzle.backend.models.board import EMPTY, Board, Direction

__version__ = "0.1.0"

__all__ = [
    "EMPTY",
    "Board",
    "Direction",
    "generate",
    "is_solvable",
    "is_solved",
    "move_tile",
]
