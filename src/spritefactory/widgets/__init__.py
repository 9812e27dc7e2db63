"""SpriteFactory TUI custom widgets."""

from spritefactory.widgets.tile_canvas import TileCanvas

__all__ = [
    "TileCanvas",
]
