"""Editing session and animation preview."""

from spritefactory.editor.preview import PreviewPlayer, preview_rectangle
from spritefactory.editor.session import EditSession, PointerUpdate

__all__ = [
    "EditSession",
    "PointerUpdate",
    "PreviewPlayer",
    "preview_rectangle",
]
