"""Pointer-driven editing of animation cycles over a tileset.

Each primary press records a new cycle; dragging with the primary button
held paints further tiles into it, skipping tiles the cycle already has.
Pointer positions are image-space coordinates supplied by the view's camera.
Positions that miss the grid are ignored rather than reported.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from spritefactory.editor.preview import TICKS_PER_FRAME, PreviewPlayer
from spritefactory.errors import ImageLoadError
from spritefactory.models.animation import AnimationSet
from spritefactory.models.enums import PointerButton
from spritefactory.models.grid import InvalidGridError, Position, Rect, TileGrid

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

NO_TEXTURE = "(no texture selected)"


@dataclass(frozen=True)
class PointerUpdate:
    """Outcome of a pointer move.

    ``changed`` is true when the animation model was edited; ``pan_delta``
    carries the world-space offset for the camera during a secondary drag.
    """

    changed: bool = False
    pan_delta: Position | None = None


class EditSession:
    """Authoring state for one open document."""

    def __init__(
        self,
        *,
        tile_width: int = 32,
        tile_height: int = 32,
        ticks_per_frame: int = TICKS_PER_FRAME,
        animations: AnimationSet | None = None,
    ) -> None:
        if tile_width < 0 or tile_height < 0:
            msg = f"tile size must be non-negative, got {tile_width}x{tile_height}"
            raise InvalidGridError(msg)
        self.tile_width = tile_width
        self.tile_height = tile_height
        self.animations = animations if animations is not None else AnimationSet()
        self.preview = PreviewPlayer(ticks_per_frame=ticks_per_frame)
        self.image_path: Path | None = None
        self.image_size: tuple[int, int] | None = None
        self.world_position: Position | None = None
        self._previous_position: Position | None = None

    # ── Image and geometry ───────────────────────────────────
    @property
    def has_image(self) -> bool:
        return self.image_size is not None

    @property
    def texture_name(self) -> str:
        return self.image_path.name if self.image_path is not None else NO_TEXTURE

    @property
    def tile_grid(self) -> TileGrid | None:
        if self.image_size is None:
            return None
        width, height = self.image_size
        return TileGrid(
            image_width=width,
            image_height=height,
            tile_width=self.tile_width,
            tile_height=self.tile_height,
        )

    def set_image(self, path: Path | None, size: tuple[int, int] | None) -> None:
        self.image_path = Path(path) if path is not None else None
        self.image_size = size

    def clear_image(self) -> None:
        self.set_image(None, None)

    def load_image(self, provider: Callable[[Path], tuple[int, int]]) -> tuple[int, int] | None:
        """Read the dimensions of ``image_path`` through *provider*.

        On failure the session drops to the no-image state, keeping tile
        size and animations, and the provider's error propagates.
        """
        if self.image_path is None:
            self.image_size = None
            return None
        try:
            self.image_size = provider(self.image_path)
        except ImageLoadError:
            self.image_size = None
            logger.warning("Image could not be loaded: %s", self.image_path)
            raise
        return self.image_size

    def set_tile_size(self, tile_width: int, tile_height: int) -> bool:
        if tile_width < 0 or tile_height < 0:
            msg = f"tile size must be non-negative, got {tile_width}x{tile_height}"
            raise InvalidGridError(msg)
        if (tile_width, tile_height) == (self.tile_width, self.tile_height):
            return False
        self.tile_width = tile_width
        self.tile_height = tile_height
        return True

    def _tile_under(self, position: Position) -> int | None:
        grid = self.tile_grid
        if grid is None:
            return None
        return grid.tile_at(*position)

    def _rect_or_none(self, index: int | None) -> Rect | None:
        grid = self.tile_grid
        if index is None or grid is None or not grid.is_configured:
            return None
        return grid.rect_of(index)

    # ── Animation list ───────────────────────────────────────
    def add_animation(self) -> bool:
        self.animations.add_new()
        self.preview.reset()
        return True

    def remove_animation(self) -> bool:
        changed = self.animations.remove_selected()
        if changed:
            self.preview.reset()
        return changed

    def select_animation(self, index: int) -> bool:
        changed = self.animations.select_index(index)
        if changed:
            self.preview.reset()
        return changed

    # ── Pointer gestures ─────────────────────────────────────
    def pointer_pressed(
        self, position: Position, button: PointerButton = PointerButton.PRIMARY,
    ) -> bool:
        """Handle a button press; return whether the model changed."""
        self.world_position = position
        self._previous_position = position
        if button != PointerButton.PRIMARY:
            return False

        cycle = self.animations.add_new()
        self.preview.reset()
        index = self._tile_under(position)
        if index is not None:
            cycle.append(index)
            logger.debug("Started '%s' at tile %d", cycle.name, index)
        return True

    def pointer_moved(
        self,
        position: Position,
        *,
        primary: bool = False,
        secondary: bool = False,
    ) -> PointerUpdate:
        """Track the pointer, painting or panning depending on held buttons.

        During a secondary drag ``pan_delta`` is ``previous - position``.
        Once the camera shifts by it, the grabbed point is back under the
        pointer, so that point stays the reference for the next move.
        """
        previous = self._previous_position

        pan_delta: Position | None = None
        if secondary and previous is not None:
            pan_delta = (previous[0] - position[0], previous[1] - position[1])
            self.world_position = previous
        else:
            self.world_position = position
            self._previous_position = position

        changed = False
        cycle = self.animations.selected
        if primary and cycle is not None:
            index = self._tile_under(position)
            if index is not None and cycle.append_unique(index):
                logger.debug("Painted tile %d into '%s'", index, cycle.name)
                changed = True

        return PointerUpdate(changed=changed, pan_delta=pan_delta)

    def pointer_released(self, button: PointerButton = PointerButton.PRIMARY) -> bool:
        """End a gesture. Releasing never edits the model."""
        self._previous_position = None
        return False

    # ── Highlighter ──────────────────────────────────────────
    @property
    def hovered_index(self) -> int | None:
        if self.world_position is None:
            return None
        return self._tile_under(self.world_position)

    @property
    def hovered_rect(self) -> Rect | None:
        return self._rect_or_none(self.hovered_index)

    @property
    def selected_rects(self) -> list[Rect]:
        """Source rectangles for every keyframe of the selected cycle."""
        grid = self.tile_grid
        cycle = self.animations.selected
        if grid is None or cycle is None or not grid.is_configured:
            return []
        return [grid.rect_of(frame) for frame in cycle.frames]

    # ── Preview ──────────────────────────────────────────────
    def tick(self) -> bool:
        """Advance the preview by one tick; return whether the frame changed."""
        cycle = self.animations.selected
        frame_count = len(cycle.frames) if cycle is not None else 0
        return self.preview.tick(frame_count)

    @property
    def preview_frame(self) -> int | None:
        cycle = self.animations.selected
        if cycle is None:
            return None
        position = self.preview.current(len(cycle.frames))
        return cycle.frames[position] if position is not None else None

    @property
    def preview_source_rect(self) -> Rect | None:
        return self._rect_or_none(self.preview_frame)
