"""Persisted sprite document model - pure Pydantic, no I/O."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field

from spritefactory.models.enums import SpriteMode


class TilesetContent(BaseModel):
    """Tile geometry for a tileset document."""

    tile_width: int = Field(default=32, ge=0)
    tile_height: int = Field(default=32, ge=0)


class AnimationEntry(BaseModel):
    """A named frame list as written to disk. Duplicates are preserved."""

    name: str = Field(min_length=1)
    frames: list[Annotated[int, Field(ge=0)]] = Field(default_factory=list)


class SpriteDocument(BaseModel):
    """On-disk form of an authoring session.

    ``texture`` is relative to the directory holding the document so the
    pair can be moved together.
    """

    texture: str | None = None
    mode: SpriteMode = SpriteMode.TILESET
    content: TilesetContent = Field(default_factory=TilesetContent)
    animations: list[AnimationEntry] = Field(default_factory=list)
