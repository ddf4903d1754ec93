"""Helpers shared by every frontend for turning board cells into picture pieces.

A tile's value is the board index it occupies when the puzzle is solved, so
its piece of the source picture is found at that index's row and column.
"""

from __future__ import annotations

import colorsys
import operator

from picture_puzzle.backend.models.board import Board


def validate_index(board: Board, index: object) -> int:
    """Return *index* if it names a cell of *board*, else raise ``ValueError``."""
    try:
        idx = operator.index(index)
    except TypeError:
        raise ValueError(f"Cell index must be an integer, got {index!r}.") from None
    if not 0 <= idx < len(board):
        raise ValueError(
            f"Cell index {idx} is outside a {board.size}×{board.size} board "
            f"(0..{len(board) - 1})."
        )
    return idx


def crop_origin(tile: int, size: int) -> tuple[int, int]:
    """Return the (row, col) of *tile*'s piece in the source picture."""
    return divmod(tile, size)


def background_position(tile: int, size: int) -> str:
    """Percentage offset of *tile*'s piece, CSS ``background-position`` style."""
    row, col = crop_origin(tile, size)
    percent = 100 / (size - 1)
    return f"{col * percent:g}% {row * percent:g}%"


def crop_rect(tile: int, size: int, tile_px: int) -> tuple[int, int, int, int]:
    """Return ``(x, y, w, h)`` of *tile*'s piece in a picture ``size * tile_px`` wide."""
    row, col = crop_origin(tile, size)
    return col * tile_px, row * tile_px, tile_px, tile_px


def picture_colour(x: float, y: float) -> tuple[int, int, int]:
    """Colour of the built-in fallback picture at normalised point (x, y).

    The picture is a diagonal hue sweep that darkens toward the bottom, so
    every piece looks different and the solved layout reads left to right,
    top to bottom.
    """
    hue = (0.08 + 0.55 * (x + y) / 2) % 1.0
    light = 0.68 - 0.28 * y
    r, g, b = colorsys.hls_to_rgb(hue, light, 0.65)
    return int(r * 255), int(g * 255), int(b * 255)


def tile_colour(tile: int, size: int) -> tuple[int, int, int]:
    """Fallback-picture colour at the centre of *tile*'s piece."""
    row, col = crop_origin(tile, size)
    return picture_colour((col + 0.5) / size, (row + 0.5) / size)


def format_time(seconds: int) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"
