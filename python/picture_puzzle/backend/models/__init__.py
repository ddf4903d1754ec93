from picture_puzzle.backend.models.board import EMPTY, Board, Direction

__all__ = ["EMPTY", "Board", "Direction"]
