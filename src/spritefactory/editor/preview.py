"""Animation preview: tick-driven frame stepping and the preview viewport."""

from __future__ import annotations

from dataclasses import dataclass

from spritefactory.models.grid import Rect

TICKS_PER_FRAME = 10
PREVIEW_MAX_SIZE = 256


@dataclass
class PreviewPlayer:
    """Steps through a cycle's frames at a fixed number of ticks per frame.

    The cadence counts ticks, not elapsed time.
    """

    ticks_per_frame: int = TICKS_PER_FRAME
    cursor: int = 0
    counter: int = 0

    def tick(self, frame_count: int) -> bool:
        """Advance one tick; return whether the cursor moved to a new frame."""
        if frame_count <= 0:
            return False

        advanced = False
        self.counter += 1
        if self.counter >= self.ticks_per_frame:
            self.counter = 0
            self.cursor += 1
            advanced = True

        if self.cursor >= frame_count:
            self.cursor = 0
        return advanced

    def current(self, frame_count: int) -> int | None:
        """Position of the frame to show, or ``None`` for an empty cycle."""
        if frame_count <= 0:
            return None
        return self.cursor if self.cursor < frame_count else 0

    def reset(self) -> None:
        self.cursor = 0
        self.counter = 0


def preview_rectangle(
    tile_width: int,
    tile_height: int,
    zoom: int,
    viewport_width: int,
    max_size: int = PREVIEW_MAX_SIZE,
) -> Rect:
    """Place the zoomed preview in the top-right corner of the viewport.

    The zoomed tile is clamped to *max_size* along its longer side with the
    aspect ratio kept.
    """
    if tile_width == 0 or tile_height == 0:
        return Rect.empty()

    width = tile_width * zoom
    height = tile_height * zoom
    ratio = tile_width / tile_height

    if width > max_size or height > max_size:
        if ratio >= 1:
            width = max_size
            height = int(max_size / ratio)
        else:
            height = max_size
            width = int(max_size * ratio)

    return Rect(x=viewport_width - width, y=0, width=width, height=height)
