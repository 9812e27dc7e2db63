"""Shared fixtures for SpriteFactory tests."""

from pathlib import Path

import pytest
from PIL import Image

from spritefactory.editor.session import EditSession
from spritefactory.models import AnimationCycle, AnimationSet


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep config lookups away from the real home directory."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


@pytest.fixture
def sheet_path(tmp_path: Path) -> Path:
    """A 128x64 tileset: 4 columns x 2 rows of 32px tiles, each a distinct colour."""
    img = Image.new("RGBA", (128, 64), (0, 0, 0, 0))
    for index in range(8):
        cx, cy = index % 4, index // 4
        tile = Image.new("RGBA", (32, 32), (index * 30, 255 - index * 30, 0, 255))
        img.paste(tile, (cx * 32, cy * 32))
    path = tmp_path / "images" / "sheet.png"
    path.parent.mkdir(parents=True)
    img.save(path, "PNG")
    return path


@pytest.fixture
def session(sheet_path: Path) -> EditSession:
    s = EditSession(tile_width=32, tile_height=32)
    s.set_image(sheet_path, (128, 64))
    return s


@pytest.fixture
def three_cycles() -> AnimationSet:
    return AnimationSet(
        cycles=[
            AnimationCycle(name="walk", frames=[0, 1, 2]),
            AnimationCycle(name="idle", frames=[4]),
            AnimationCycle(name="jump", frames=[5, 6, 6, 7]),
        ],
        selected_index=1,
    )
