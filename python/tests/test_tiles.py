"""Render-layer helper tests for index validation and crop geometry."""

from __future__ import annotations

import pytest

from picture_puzzle.backend.models.board import Board
from picture_puzzle.frontend.tiles import (
    background_position,
    crop_origin,
    crop_rect,
    format_time,
    tile_colour,
    validate_index,
)


@pytest.mark.parametrize("index", [0, 4, 8])
def test_validate_index_accepts_cells(index: int) -> None:
    assert validate_index(Board.solved(3), index) == index


@pytest.mark.parametrize("index", [-1, 9, 100, "3", 2.5, None])
def test_validate_index_fails_fast(index: object) -> None:
    with pytest.raises(ValueError):
        validate_index(Board.solved(3), index)


def test_crop_origin_is_solved_position() -> None:
    assert crop_origin(0, 3) == (0, 0)
    assert crop_origin(5, 3) == (1, 2)
    assert crop_origin(14, 4) == (3, 2)


@pytest.mark.parametrize(
    "tile, size, expected",
    [
        (0, 3, "0% 0%"),
        (4, 3, "50% 50%"),
        (7, 3, "50% 100%"),
        (3, 4, "100% 0%"),
        (14, 4, "66.6667% 100%"),
    ],
)
def test_background_position(tile: int, size: int, expected: str) -> None:
    assert background_position(tile, size) == expected


def test_crop_rect_in_pixels() -> None:
    assert crop_rect(0, 4, 100) == (0, 0, 100, 100)
    assert crop_rect(6, 4, 100) == (200, 100, 100, 100)


def test_every_tile_has_its_own_colour() -> None:
    colours = {tile_colour(t, 4) for t in range(15)}
    assert len(colours) == 15
    for colour in colours:
        assert all(0 <= channel <= 255 for channel in colour)


@pytest.mark.parametrize(
    "seconds, expected",
    [(0, "00:00"), (9, "00:09"), (75, "01:15"), (3600, "60:00")],
)
def test_format_time(seconds: int, expected: str) -> None:
    assert format_time(seconds) == expected
