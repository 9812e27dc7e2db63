"""Enumerations used throughout SpriteFactory."""

from enum import IntEnum, StrEnum


class SpriteMode(StrEnum):
    TILESET = "tileset"


class PointerButton(IntEnum):
    PRIMARY = 1
    MIDDLE = 2
    SECONDARY = 3
