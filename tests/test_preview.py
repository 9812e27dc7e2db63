"""Tests for preview stepping and the preview viewport."""

import pytest

from spritefactory.editor.preview import PreviewPlayer, preview_rectangle
from spritefactory.models import AnimationCycle, Rect


def test_three_frames_after_thirty_ticks_wrap_to_start():
    player = PreviewPlayer()
    advances = sum(player.tick(3) for _ in range(30))
    assert advances == 3
    assert player.cursor == 0


def test_cursor_steps_every_ten_ticks():
    player = PreviewPlayer()
    for _ in range(9):
        assert not player.tick(3)
    assert player.cursor == 0
    assert player.tick(3)
    assert player.cursor == 1


def test_zero_frames_suspends_stepping():
    player = PreviewPlayer()
    for _ in range(100):
        assert not player.tick(0)
    assert player.cursor == 0
    assert player.counter == 0
    assert player.current(0) is None


def test_custom_cadence():
    player = PreviewPlayer(ticks_per_frame=2)
    for _ in range(4):
        player.tick(5)
    assert player.cursor == 2


def test_cursor_wraps_when_cycle_shrinks():
    player = PreviewPlayer(cursor=4)
    assert player.current(2) == 0
    player.tick(2)
    assert player.cursor == 0


def test_session_preview_frame(session):
    session.animations.replace([AnimationCycle(name="walk", frames=[4, 5, 6])])
    assert session.preview_frame == 4
    for _ in range(10):
        session.tick()
    assert session.preview_frame == 5
    assert session.preview_source_rect == Rect(x=32, y=32, width=32, height=32)


def test_session_preview_with_empty_cycle(session):
    session.add_animation()
    for _ in range(25):
        assert not session.tick()
    assert session.preview_frame is None
    assert session.preview_source_rect is None


def test_session_preview_without_selection(session):
    assert not session.tick()
    assert session.preview_frame is None


def test_selecting_another_cycle_restarts_preview(session):
    session.animations.replace(
        [AnimationCycle(name="a", frames=[0, 1]), AnimationCycle(name="b", frames=[2, 3])],
    )
    for _ in range(10):
        session.tick()
    assert session.preview_frame == 1
    session.select_animation(1)
    assert session.preview_frame == 2


@pytest.mark.parametrize(
    ("tile", "zoom", "expected"),
    [
        ((32, 32), 4, Rect(x=672, y=0, width=128, height=128)),
        ((32, 32), 8, Rect(x=544, y=0, width=256, height=256)),
        ((64, 32), 8, Rect(x=544, y=0, width=256, height=128)),
        ((32, 64), 8, Rect(x=672, y=0, width=128, height=256)),
    ],
)
def test_preview_rectangle(tile, zoom, expected):
    assert preview_rectangle(tile[0], tile[1], zoom, 800) == expected


def test_preview_rectangle_zero_tile():
    assert preview_rectangle(0, 32, 8, 800).is_empty
