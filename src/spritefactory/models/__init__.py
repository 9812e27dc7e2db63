"""SpriteFactory data models - pure Pydantic, no I/O."""

from spritefactory.models.animation import AnimationCycle, AnimationSet
from spritefactory.models.document import AnimationEntry, SpriteDocument, TilesetContent
from spritefactory.models.enums import PointerButton, SpriteMode
from spritefactory.models.grid import InvalidGridError, Position, Rect, TileGrid, index_of, rect_of

__all__ = [
    "AnimationCycle",
    "AnimationEntry",
    "AnimationSet",
    "InvalidGridError",
    "PointerButton",
    "Position",
    "Rect",
    "SpriteDocument",
    "SpriteMode",
    "TileGrid",
    "TilesetContent",
    "index_of",
    "rect_of",
]
