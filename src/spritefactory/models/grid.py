"""Tile grid coordinate math.

Tiles are addressed by a single integer in row-major order. The column count
is always derived from the image width, so changing the tile size is
reflected immediately without any cached state.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field

Position = tuple[float, float]


class InvalidGridError(ValueError):
    """Raised when the grid geometry cannot express the requested mapping."""


class Rect(BaseModel):
    """Axis-aligned rectangle in image pixels."""

    model_config = ConfigDict(frozen=True)

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @classmethod
    def empty(cls) -> Rect:
        return cls()

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def top_left(self) -> Position:
        return (float(self.x), float(self.y))

    def contains(self, x: float, y: float) -> bool:
        return self.x <= x < self.right and self.y <= y < self.bottom

    def as_box(self) -> tuple[int, int, int, int]:
        """Return ``(left, upper, right, lower)`` as Pillow expects for crops."""
        return (self.x, self.y, self.right, self.bottom)


def index_of(
    position: Position,
    image_width: int,
    image_height: int,
    tile_width: int,
    tile_height: int,
) -> int | None:
    """Map an image-space position to a tile index.

    Returns ``None`` for zero tile sizes or positions outside
    ``[0, image_width) x [0, image_height)``. The result is not re-checked
    against ``columns * rows``.
    """
    if tile_width == 0 or tile_height == 0:
        return None

    x, y = position
    if not (0 <= x < image_width and 0 <= y < image_height):
        return None

    cx = math.floor(x / tile_width)
    cy = math.floor(y / tile_height)
    columns = image_width // tile_width
    return cy * columns + cx


def rect_of(index: int, image_width: int, tile_width: int, tile_height: int) -> Rect:
    """Map a tile index back to its source rectangle.

    Raises
    ------
    InvalidGridError
        If the grid has no whole column (zero tile width, or tiles wider
        than the image).
    """
    columns = image_width // tile_width if tile_width > 0 else 0
    if columns == 0:
        msg = f"cannot locate tile {index}: image width {image_width} holds no {tile_width}px column"
        raise InvalidGridError(msg)

    cy = index // columns
    cx = index - cy * columns
    return Rect(x=cx * tile_width, y=cy * tile_height, width=tile_width, height=tile_height)


class TileGrid(BaseModel):
    """Partition of an image into equal-sized tiles.

    Stateless: rebuild it whenever the image or tile dimensions change.
    """

    model_config = ConfigDict(frozen=True)

    image_width: int = Field(gt=0)
    image_height: int = Field(gt=0)
    tile_width: int = Field(default=32, ge=0)
    tile_height: int = Field(default=32, ge=0)

    @property
    def columns(self) -> int:
        return self.image_width // self.tile_width if self.tile_width else 0

    @property
    def rows(self) -> int:
        return self.image_height // self.tile_height if self.tile_height else 0

    @property
    def tile_count(self) -> int:
        return self.columns * self.rows

    @property
    def is_configured(self) -> bool:
        return self.tile_count > 0

    @property
    def bounds(self) -> Rect:
        return Rect(width=self.image_width, height=self.image_height)

    def index_of(self, x: float, y: float) -> int | None:
        return index_of(
            (x, y), self.image_width, self.image_height, self.tile_width, self.tile_height,
        )

    def rect_of(self, index: int) -> Rect:
        return rect_of(index, self.image_width, self.tile_width, self.tile_height)

    def is_valid_index(self, index: int) -> bool:
        return 0 <= index < self.tile_count

    def tile_at(self, x: float, y: float) -> int | None:
        """Like :meth:`index_of`, but only for positions inside a whole tile.

        Partial tiles at the right or bottom edge would otherwise alias onto
        the next row.
        """
        index = self.index_of(x, y)
        if index is None:
            return None
        if x // self.tile_width >= self.columns or y // self.tile_height >= self.rows:
            return None
        return index

    def grid_lines(self) -> tuple[list[int], list[int]]:
        """Return ``(horizontal_ys, vertical_xs)`` for the tile overlay.

        Empty when either tile dimension is 1 or less, matching the overlay
        being hidden for degenerate grids.
        """
        if self.tile_width <= 1 or self.tile_height <= 1:
            return [], []
        ys = list(range(0, self.image_height + 1, self.tile_height))
        xs = list(range(0, self.image_width + 1, self.tile_width))
        return ys, xs
