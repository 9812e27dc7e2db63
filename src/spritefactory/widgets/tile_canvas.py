"""Tile canvas widget — one terminal cell per tile of the tileset."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text
from textual.message import Message
from textual.widget import Widget

from spritefactory.models.enums import PointerButton

if TYPE_CHECKING:
    from textual import events

    from spritefactory.editor.session import EditSession
    from spritefactory.models.grid import Position


def _button(value: int) -> PointerButton | None:
    try:
        return PointerButton(value)
    except ValueError:
        return None


class TileCanvas(Widget):
    """Draw the tile grid and turn mouse gestures into session edits.

    The camera offset is kept in image pixels. Cell ``(cx, cy)`` maps to the
    centre of the tile it shows.
    """

    DEFAULT_CSS = """
    TileCanvas {
        background: #0c0a1a;
        border: round #4c1d95;
        width: 1fr;
        height: 1fr;
    }
    """

    class Changed(Message):
        """Fired when a gesture edited the animation model."""

    def __init__(
        self,
        session: EditSession,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.session = session
        self.camera: Position = (0.0, 0.0)

    def _cell_size(self) -> tuple[int, int]:
        return max(1, self.session.tile_width), max(1, self.session.tile_height)

    def to_world(self, x: int, y: int) -> Position:
        """Convert a widget cell to an image-space position."""
        tw, th = self._cell_size()
        return ((x + 0.5) * tw + self.camera[0], (y + 0.5) * th + self.camera[1])

    def render(self) -> Text:
        grid = self.session.tile_grid
        if grid is None:
            return Text(f"{self.session.texture_name}\nNo image loaded.", style="dim")
        if not grid.is_configured:
            return Text("Tile size does not fit the image.", style="dim")

        cycle = self.session.animations.selected
        painted = set(cycle.frames) if cycle is not None else set()
        hovered = self.session.hovered_index
        previewed = self.session.preview_frame

        text = Text(no_wrap=True)
        for cy in range(self.content_size.height):
            for cx in range(self.content_size.width):
                index = grid.tile_at(*self.to_world(cx, cy))
                if index is None:
                    text.append(" ")
                elif index == hovered:
                    text.append("▓", style="bold #f5f3ff")
                elif index == previewed:
                    text.append("█", style="#a78bfa")
                elif index in painted:
                    text.append("█", style="#6495ed")
                else:
                    text.append("·", style="#4c1d95")
            text.append("\n")
        return text

    def on_mouse_down(self, event: events.MouseDown) -> None:
        button = _button(event.button)
        if button is None:
            return
        self.capture_mouse()
        changed = self.session.pointer_pressed(self.to_world(event.x, event.y), button)
        if changed:
            self.post_message(self.Changed())
        self.refresh()

    def on_mouse_move(self, event: events.MouseMove) -> None:
        update = self.session.pointer_moved(
            self.to_world(event.x, event.y),
            primary=event.button == PointerButton.PRIMARY,
            secondary=event.button == PointerButton.SECONDARY,
        )
        if update.pan_delta is not None:
            self.camera = (
                self.camera[0] + update.pan_delta[0],
                self.camera[1] + update.pan_delta[1],
            )
        if update.changed:
            self.post_message(self.Changed())
        self.refresh()

    def on_mouse_up(self, event: events.MouseUp) -> None:
        self.release_mouse()
        button = _button(event.button)
        if button is not None:
            self.session.pointer_released(button)
