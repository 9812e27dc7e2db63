"""Sprite editor screen — tile canvas, animation list and preview."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Input, Label, OptionList, Static

from spritefactory.editor.preview import preview_rectangle
from spritefactory.widgets.tile_canvas import TileCanvas

if TYPE_CHECKING:
    from pathlib import Path

    from textual.app import ComposeResult
    from textual.binding import BindingType

    from spritefactory.config import EditorSettings
    from spritefactory.editor.session import EditSession


class SpriteEditorScreen(Screen[None]):
    """Paint animation cycles onto a tileset and watch them play back."""

    DEFAULT_CSS = """
    SpriteEditorScreen .sidebar {
        width: 36;
        padding: 0 1;
        background: #1e1b4b;
    }

    SpriteEditorScreen OptionList {
        height: 1fr;
        background: #0c0a1a;
    }

    SpriteEditorScreen .tile-inputs {
        height: auto;
    }

    SpriteEditorScreen .tile-inputs Input {
        width: 1fr;
    }
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("ctrl+s", "save", "Save", show=True),
        Binding("a", "add_animation", "Add", show=True),
        Binding("delete", "remove_animation", "Remove", show=True),
    ]

    def __init__(
        self,
        session: EditSession,
        settings: EditorSettings,
        document_path: Path | None = None,
    ) -> None:
        super().__init__()
        self.session = session
        self.editor_settings = settings
        self.document_path = document_path

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            yield TileCanvas(self.session, id="canvas")
            with Vertical(classes="sidebar"):
                yield Static("", id="texture")
                with Horizontal(classes="tile-inputs"):
                    yield Input(str(self.session.tile_width), id="tile-width", type="integer")
                    yield Input(str(self.session.tile_height), id="tile-height", type="integer")
                yield Label("Animations")
                yield OptionList(id="animations")
                with Horizontal(classes="toolbar"):
                    yield Button("Add", id="btn-add", classes="primary")
                    yield Button("Remove", id="btn-remove", classes="danger")
                    yield Button("Save", id="btn-save", classes="success")
                yield Static("", id="preview")
                yield Static("", id="status")
        yield Footer()

    def on_mount(self) -> None:
        self._sync_animations()
        self._sync_preview()
        self.set_interval(1 / self.editor_settings.tick_rate, self._tick)

    # ── Syncing ──────────────────────────────────────────────
    def _sync_animations(self) -> None:
        options = self.query_one("#animations", OptionList)
        options.clear_options()
        options.add_options([cycle.name for cycle in self.session.animations])
        options.highlighted = self.session.animations.selected_index
        self.query_one("#texture", Static).update(f"[bold]{self.session.texture_name}[/bold]")
        self.query_one("#canvas", TileCanvas).refresh()

    def _sync_preview(self) -> None:
        frame = self.session.preview_frame
        source = self.session.preview_source_rect
        target = preview_rectangle(
            self.session.tile_width,
            self.session.tile_height,
            self.editor_settings.default_zoom,
            self.size.width,
            self.editor_settings.preview_max_size,
        )
        if frame is None or source is None:
            text = "Preview: -"
        else:
            text = (
                f"Preview: tile {frame} ({source.x},{source.y} {source.width}x{source.height})\n"
                f"Viewport: {target.width}x{target.height} at x={target.x}"
            )
        self.query_one("#preview", Static).update(text)

    def _set_status(self, message: str) -> None:
        self.query_one("#status", Static).update(message)

    def _tick(self) -> None:
        if self.session.tick():
            self._sync_preview()
            self.query_one("#canvas", TileCanvas).refresh()

    # ── Events ───────────────────────────────────────────────
    def on_tile_canvas_changed(self, event: TileCanvas.Changed) -> None:
        self._sync_animations()
        self._sync_preview()

    def on_option_list_option_highlighted(self, event: OptionList.OptionHighlighted) -> None:
        if self.session.select_animation(event.option_index):
            self.query_one("#canvas", TileCanvas).refresh()
            self._sync_preview()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        width_input = self.query_one("#tile-width", Input)
        height_input = self.query_one("#tile-height", Input)
        try:
            changed = self.session.set_tile_size(
                int(width_input.value or 0), int(height_input.value or 0),
            )
        except ValueError as exc:
            self._set_status(f"[red]{exc}[/red]")
            return
        if changed:
            self._sync_animations()
            self._sync_preview()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        match event.button.id:
            case "btn-add":
                self.action_add_animation()
            case "btn-remove":
                self.action_remove_animation()
            case "btn-save":
                self.action_save()

    # ── Actions ──────────────────────────────────────────────
    def action_add_animation(self) -> None:
        self.session.add_animation()
        self._sync_animations()
        self._sync_preview()

    def action_remove_animation(self) -> None:
        if self.session.remove_animation():
            self._sync_animations()
            self._sync_preview()

    def action_save(self) -> None:
        from spritefactory.errors import PathResolutionError
        from spritefactory.pipeline.codec import store_document

        if self.document_path is None:
            self._set_status("[red]No document path; start the editor with one.[/red]")
            return
        try:
            store_document(self.session, self.document_path)
        except (PathResolutionError, OSError) as exc:
            self._set_status(f"[red]Save failed: {exc}[/red]")
            return
        self._set_status(f"Saved {self.document_path.name}")
