"""SpriteFactory - tileset keyframe animation authoring."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("spritefactory")
except PackageNotFoundError:
    __version__ = "unknown"
