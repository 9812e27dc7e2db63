"""SpriteFactory — Textual TUI application entry point."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from spritefactory.config import load_config
from spritefactory.editor.session import EditSession
from spritefactory.errors import ImageLoadError
from spritefactory.pipeline.codec import open_document
from spritefactory.pipeline.imaging import read_image_size

if TYPE_CHECKING:
    from pathlib import Path

    from textual.binding import BindingType


class SpriteFactoryApp(App[None]):
    """Terminal front end for authoring tileset animations."""

    TITLE = "SpriteFactory"
    SUB_TITLE = "Tileset Animation Editor"

    CSS = """
    Screen {
        background: $surface;
    }

    Header {
        background: #7c3aed;
        color: #f5f3ff;
        dock: top;
        height: 1;
    }

    Footer {
        background: #1e1b4b;
        color: #c4b5fd;
    }

    Button {
        height: 1;
        min-width: 8;
        margin: 0 1 0 0;
        border: none;
        padding: 0 1;
        background: #312e81;
        color: #c4b5fd;
    }

    Button.primary {
        background: #7c3aed;
        color: #f5f3ff;
    }

    Button.danger {
        background: #7f1d1d;
        color: #fecaca;
    }

    Button.success {
        background: #065f46;
        color: #a7f3d0;
    }

    Label {
        color: #c4b5fd;
        margin: 1 0 0 0;
    }

    .toolbar {
        layout: horizontal;
        height: auto;
        margin: 1 0 0 0;
    }
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        document_path: Path | None = None,
        image_path: Path | None = None,
    ) -> None:
        super().__init__()
        self.app_config = load_config()
        self.document_path = document_path
        self.image_path = image_path

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield Footer()

    def _build_session(self) -> EditSession:
        """Open the requested document, or start a fresh one on the given image."""
        editor = self.app_config.editor
        if self.document_path is not None and self.document_path.exists():
            session = open_document(
                self.document_path, ticks_per_frame=editor.preview_ticks_per_frame,
            )
            if session.image_path is not None and not session.has_image:
                self.notify(f"Image not found: {session.image_path}", severity="warning")
            return session

        session = EditSession(
            tile_width=editor.tile_width,
            tile_height=editor.tile_height,
            ticks_per_frame=editor.preview_ticks_per_frame,
        )
        if self.image_path is not None:
            session.image_path = self.image_path
            try:
                session.load_image(read_image_size)
            except ImageLoadError as exc:
                self.notify(str(exc), severity="error")
        return session

    def on_mount(self) -> None:
        from spritefactory.screens.sprite_editor import SpriteEditorScreen

        self.push_screen(
            SpriteEditorScreen(self._build_session(), self.app_config.editor, self.document_path),
        )

