"""Keyframe animation models: named frame cycles and the set that owns them."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, model_validator

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)


class AnimationCycle(BaseModel):
    """One named animation: an ordered list of tile indices."""

    name: str = Field(min_length=1)
    frames: list[int] = Field(default_factory=list)
    selected_frame: int | None = None

    @classmethod
    def create(cls, name: str) -> AnimationCycle:
        return cls(name=name)

    def __len__(self) -> int:
        return len(self.frames)

    def __str__(self) -> str:
        return self.name

    def append(self, frame: int) -> None:
        """Append *frame* unconditionally; duplicates are allowed."""
        if frame < 0:
            msg = f"frame index must be non-negative, got {frame}"
            raise ValueError(msg)
        self.frames.append(frame)

    def append_unique(self, frame: int) -> bool:
        """Append *frame* unless it already appears anywhere in the cycle."""
        if self.contains(frame):
            return False
        self.append(frame)
        return True

    def contains(self, frame: int) -> bool:
        return frame in self.frames

    def to_index_array(self) -> list[int]:
        return list(self.frames)

    def select_frame(self, position: int | None) -> bool:
        if position is not None and not 0 <= position < len(self.frames):
            msg = f"frame position {position} out of range for '{self.name}' ({len(self.frames)} frames)"
            raise IndexError(msg)
        if position == self.selected_frame:
            return False
        self.selected_frame = position
        return True

    def remove_selected_frame(self) -> bool:
        """Remove the selected keyframe, keeping the selection on its neighbour."""
        if self.selected_frame is None:
            return False
        position = self.selected_frame
        del self.frames[position]
        self.selected_frame = _neighbour(position, len(self.frames))
        return True


def _neighbour(removed: int, remaining: int) -> int | None:
    """Index that takes over after removing *removed*: next, else last, else none."""
    if remaining == 0:
        return None
    return removed if removed < remaining else remaining - 1


class AnimationSet(BaseModel):
    """Ordered collection of cycles with a current selection.

    ``selected_index`` is ``None`` exactly when the set is empty. Mutators
    return whether anything changed so a view can decide when to redraw.
    """

    cycles: list[AnimationCycle] = Field(default_factory=list)
    selected_index: int | None = None

    @model_validator(mode="after")
    def _check_selection(self) -> AnimationSet:
        if not self.cycles:
            self.selected_index = None
        elif self.selected_index is None:
            self.selected_index = 0
        elif not 0 <= self.selected_index < len(self.cycles):
            msg = f"selected_index {self.selected_index} out of range ({len(self.cycles)} cycles)"
            raise ValueError(msg)
        return self

    def __len__(self) -> int:
        return len(self.cycles)

    def __iter__(self) -> Iterator[AnimationCycle]:  # type: ignore[override]
        return iter(self.cycles)

    def __getitem__(self, index: int) -> AnimationCycle:
        return self.cycles[index]

    @property
    def selected(self) -> AnimationCycle | None:
        if self.selected_index is None:
            return None
        return self.cycles[self.selected_index]

    def add_new(self) -> AnimationCycle:
        """Append a cycle named ``animation<N>`` (N = current size) and select it."""
        cycle = AnimationCycle.create(f"animation{len(self.cycles)}")
        self.cycles.append(cycle)
        self.selected_index = len(self.cycles) - 1
        logger.debug("Added cycle '%s'", cycle.name)
        return cycle

    def remove_selected(self) -> bool:
        if self.selected_index is None:
            return False
        removed = self.cycles.pop(self.selected_index)
        self.selected_index = _neighbour(self.selected_index, len(self.cycles))
        logger.debug("Removed cycle '%s'", removed.name)
        return True

    def select(self, cycle: AnimationCycle) -> bool:
        for i, candidate in enumerate(self.cycles):
            if candidate is cycle:
                return self.select_index(i)
        msg = f"cycle '{cycle.name}' is not part of this set"
        raise ValueError(msg)

    def select_index(self, index: int) -> bool:
        if not 0 <= index < len(self.cycles):
            msg = f"cycle index {index} out of range ({len(self.cycles)} cycles)"
            raise IndexError(msg)
        if index == self.selected_index:
            return False
        self.selected_index = index
        return True

    def rename_selected(self, name: str) -> bool:
        cycle = self.selected
        if cycle is None or cycle.name == name:
            return False
        if not name:
            msg = "cycle name must not be empty"
            raise ValueError(msg)
        cycle.name = name
        return True

    def replace(self, cycles: Iterable[AnimationCycle]) -> None:
        """Clear the set, adopt *cycles* in order and select the first one."""
        self.cycles = list(cycles)
        self.selected_index = 0 if self.cycles else None
