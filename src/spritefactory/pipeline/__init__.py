"""SpriteFactory pipeline - document persistence and tileset image access."""

from spritefactory.errors import (
    DocumentLoadError,
    ImageLoadError,
    MissingImageError,
    PathResolutionError,
)
from spritefactory.pipeline.codec import (
    load_session,
    open_document,
    read_document,
    save_document,
    store_document,
    write_document,
)
from spritefactory.pipeline.imaging import export_cycle_strip, read_image_size

__all__ = [
    "DocumentLoadError",
    "ImageLoadError",
    "MissingImageError",
    "PathResolutionError",
    "export_cycle_strip",
    "load_session",
    "open_document",
    "read_document",
    "read_image_size",
    "save_document",
    "store_document",
    "write_document",
]
