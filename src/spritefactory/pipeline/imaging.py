"""Tileset image access and frame strip export with Pillow."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from PIL import Image, UnidentifiedImageError

from spritefactory.errors import ImageLoadError, MissingImageError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from spritefactory.models.grid import TileGrid

logger = logging.getLogger(__name__)


def read_image_size(path: Path) -> tuple[int, int]:
    """Return ``(width, height)`` of the image at *path*.

    Raises
    ------
    MissingImageError
        If *path* does not exist.
    ImageLoadError
        If Pillow cannot identify or open the file.
    """
    path = Path(path)
    if not path.exists():
        msg = f"image not found: {path}"
        raise MissingImageError(msg)
    try:
        with Image.open(path) as img:
            return img.size
    except (UnidentifiedImageError, OSError) as exc:
        msg = f"cannot read image {path}: {exc}"
        raise ImageLoadError(msg) from None


def export_cycle_strip(
    image_path: Path,
    grid: TileGrid,
    frames: Sequence[int],
    output: Path,
    *,
    direction: str = "horizontal",
    padding: int = 0,
) -> Path:
    """Cut each frame's tile out of the tileset and lay them out in a strip.

    Parameters
    ----------
    image_path:
        The tileset image the frame indices refer to.
    grid:
        Tile geometry used to locate each frame.
    frames:
        Ordered tile indices; repeats produce repeated tiles.
    output:
        Path where the strip PNG will be saved.
    direction:
        ``"horizontal"`` for a single row (default) or ``"vertical"`` for a
        single column.
    padding:
        Extra transparent pixels between each frame.

    Returns
    -------
    Path
        The *output* path, for chaining convenience.
    """
    if not frames:
        msg = "No frames provided for strip export"
        raise ValueError(msg)

    fw, fh = grid.tile_width, grid.tile_height
    n = len(frames)

    if direction == "horizontal":
        strip_w = fw * n + padding * max(n - 1, 0)
        strip_h = fh
    else:
        strip_w = fw
        strip_h = fh * n + padding * max(n - 1, 0)

    strip = Image.new("RGBA", (strip_w, strip_h), (0, 0, 0, 0))

    with Image.open(image_path) as source:
        sheet = source.convert("RGBA")

    for idx, frame in enumerate(frames):
        tile = sheet.crop(grid.rect_of(frame).as_box())

        if direction == "horizontal":
            x = idx * (fw + padding)
            y = 0
        else:
            x = 0
            y = idx * (fh + padding)

        strip.paste(tile, (x, y))

    output.parent.mkdir(parents=True, exist_ok=True)
    strip.save(output, "PNG")
    logger.info("Exported frame strip: %s (%d frames, %dx%d)", output, n, strip_w, strip_h)
    return output
