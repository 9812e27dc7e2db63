"""Tests for tile grid coordinate math."""

import pytest
from pydantic import ValidationError

from spritefactory.models import InvalidGridError, Rect, TileGrid, index_of, rect_of


def test_index_of_row_major():
    assert index_of((0, 0), 128, 64, 32, 32) == 0
    assert index_of((31.9, 0), 128, 64, 32, 32) == 0
    assert index_of((32, 0), 128, 64, 32, 32) == 1
    assert index_of((100, 40), 128, 64, 32, 32) == 7


@pytest.mark.parametrize("tile_size", [(0, 32), (32, 0), (0, 0)])
def test_index_of_zero_tile_size_returns_none(tile_size):
    tw, th = tile_size
    assert index_of((10, 10), 128, 64, tw, th) is None


@pytest.mark.parametrize(
    "position",
    [(-0.5, 10), (10, -1), (128, 10), (10, 64), (500, 500), (-32, -32)],
)
def test_index_of_outside_image_returns_none(position):
    assert index_of(position, 128, 64, 32, 32) is None


def test_index_of_does_not_recheck_partial_tiles():
    # 100px wide image holds 3 whole 32px columns; x=99 sits in the partial 4th.
    assert index_of((99, 0), 100, 64, 32, 32) == 3


def test_rect_of():
    assert rect_of(0, 128, 32, 32) == Rect(x=0, y=0, width=32, height=32)
    assert rect_of(5, 128, 32, 16) == Rect(x=32, y=16, width=32, height=16)


@pytest.mark.parametrize("tile_width", [0, 129])
def test_rect_of_without_columns_raises(tile_width):
    with pytest.raises(InvalidGridError):
        rect_of(0, 128, tile_width, 32)


@pytest.mark.parametrize(
    ("width", "height", "tw", "th"),
    [(128, 64, 32, 32), (100, 70, 16, 8), (48, 48, 48, 48), (96, 32, 8, 32)],
)
def test_rect_top_left_maps_back_to_index(width, height, tw, th):
    grid = TileGrid(image_width=width, image_height=height, tile_width=tw, tile_height=th)
    for i in range(grid.tile_count):
        assert grid.index_of(*grid.rect_of(i).top_left) == i


def test_grid_dimensions():
    grid = TileGrid(image_width=100, image_height=70, tile_width=32, tile_height=32)
    assert grid.columns == 3
    assert grid.rows == 2
    assert grid.tile_count == 6
    assert grid.is_configured
    assert grid.is_valid_index(5)
    assert not grid.is_valid_index(6)
    assert not grid.is_valid_index(-1)


def test_grid_unconfigured_with_zero_tiles():
    grid = TileGrid(image_width=100, image_height=70, tile_width=0, tile_height=32)
    assert grid.columns == 0
    assert not grid.is_configured
    assert grid.index_of(10, 10) is None


def test_tile_at_skips_partial_edge_tiles():
    grid = TileGrid(image_width=100, image_height=70, tile_width=32, tile_height=32)
    assert grid.tile_at(40, 40) == 4
    assert grid.tile_at(99, 0) is None
    assert grid.tile_at(0, 69) is None


def test_grid_rejects_non_positive_image():
    with pytest.raises(ValidationError):
        TileGrid(image_width=0, image_height=64)


def test_grid_lines():
    grid = TileGrid(image_width=64, image_height=32, tile_width=32, tile_height=16)
    ys, xs = grid.grid_lines()
    assert ys == [0, 16, 32]
    assert xs == [0, 32, 64]


def test_grid_lines_hidden_for_tiny_tiles():
    grid = TileGrid(image_width=64, image_height=32, tile_width=1, tile_height=16)
    assert grid.grid_lines() == ([], [])


def test_rect_helpers():
    r = Rect(x=32, y=16, width=32, height=16)
    assert r.contains(32, 16)
    assert not r.contains(64, 16)
    assert r.as_box() == (32, 16, 64, 32)
    assert Rect.empty().is_empty
