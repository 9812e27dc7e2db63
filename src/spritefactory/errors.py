"""Errors raised while reading, writing and resolving sprite documents."""


class ImageLoadError(ValueError):
    """Raised when a tileset image cannot be read."""


class MissingImageError(ImageLoadError, FileNotFoundError):
    """Raised when the referenced tileset image does not exist."""


class PathResolutionError(ValueError):
    """Raised when the image cannot be referenced relative to the document."""


class DocumentLoadError(ValueError):
    """Raised when a sprite document file cannot be loaded."""
