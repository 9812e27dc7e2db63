"""SpriteFactory TUI screens."""

from spritefactory.screens.sprite_editor import SpriteEditorScreen

__all__ = [
    "SpriteEditorScreen",
]
