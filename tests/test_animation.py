"""Tests for animation cycles and the animation set."""

import pytest
from pydantic import ValidationError

from spritefactory.models import AnimationCycle, AnimationSet


def test_create_cycle_is_empty():
    cycle = AnimationCycle.create("walk")
    assert cycle.name == "walk"
    assert cycle.frames == []
    assert cycle.selected_frame is None


def test_cycle_requires_name():
    with pytest.raises(ValidationError):
        AnimationCycle(name="")


def test_append_allows_duplicates():
    cycle = AnimationCycle.create("walk")
    for frame in (3, 3, 1, 3):
        cycle.append(frame)
    assert cycle.to_index_array() == [3, 3, 1, 3]


def test_append_rejects_negative():
    with pytest.raises(ValueError):
        AnimationCycle.create("walk").append(-1)


def test_append_unique():
    cycle = AnimationCycle.create("walk")
    assert cycle.append_unique(2)
    assert cycle.append_unique(5)
    assert not cycle.append_unique(2)
    assert cycle.frames == [2, 5]


def test_to_index_array_is_a_copy():
    cycle = AnimationCycle(name="walk", frames=[1, 2])
    exported = cycle.to_index_array()
    exported.append(9)
    assert cycle.frames == [1, 2]


def test_remove_selected_frame_moves_to_neighbour():
    cycle = AnimationCycle(name="walk", frames=[1, 2, 3])
    cycle.select_frame(2)
    assert cycle.remove_selected_frame()
    assert cycle.frames == [1, 2]
    assert cycle.selected_frame == 1
    cycle.select_frame(0)
    cycle.remove_selected_frame()
    assert cycle.selected_frame == 0
    cycle.remove_selected_frame()
    assert cycle.frames == []
    assert cycle.selected_frame is None
    assert not cycle.remove_selected_frame()


def test_select_frame_out_of_range():
    with pytest.raises(IndexError):
        AnimationCycle(name="walk", frames=[1]).select_frame(1)


def test_empty_set_has_no_selection():
    anims = AnimationSet()
    assert len(anims) == 0
    assert anims.selected_index is None
    assert anims.selected is None
    assert not anims.remove_selected()


def test_add_new_names_by_count_and_selects():
    anims = AnimationSet()
    first = anims.add_new()
    second = anims.add_new()
    assert first.name == "animation0"
    assert second.name == "animation1"
    assert anims.selected is second
    assert anims.selected_index == 1


def test_default_names_follow_current_count():
    anims = AnimationSet()
    anims.add_new()
    anims.add_new()
    anims.remove_selected()
    assert anims.add_new().name == "animation1"


def test_remove_middle_selects_next(three_cycles):
    assert three_cycles.remove_selected()
    assert [c.name for c in three_cycles] == ["walk", "jump"]
    assert three_cycles.selected_index == 1
    assert three_cycles.selected.name == "jump"


def test_remove_last_selects_new_last(three_cycles):
    three_cycles.select_index(2)
    three_cycles.remove_selected()
    assert three_cycles.selected_index == 1
    assert three_cycles.selected.name == "idle"


def test_remove_sole_cycle_clears_selection():
    anims = AnimationSet()
    anims.add_new()
    anims.remove_selected()
    assert anims.selected_index is None
    assert len(anims) == 0


def test_select_by_cycle_and_index(three_cycles):
    walk = three_cycles[0]
    assert three_cycles.select(walk)
    assert three_cycles.selected_index == 0
    assert not three_cycles.select(walk)
    assert three_cycles.select_index(2)
    assert three_cycles.selected.name == "jump"


def test_select_unknown_cycle_raises(three_cycles):
    with pytest.raises(ValueError):
        three_cycles.select(AnimationCycle(name="walk", frames=[0, 1, 2]))


def test_select_index_out_of_range(three_cycles):
    with pytest.raises(IndexError):
        three_cycles.select_index(3)


def test_rename_selected(three_cycles):
    assert three_cycles.rename_selected("breathe")
    assert three_cycles.selected.name == "breathe"
    assert not three_cycles.rename_selected("breathe")
    with pytest.raises(ValueError):
        three_cycles.rename_selected("")


def test_replace_selects_first(three_cycles):
    three_cycles.replace([AnimationCycle(name="a"), AnimationCycle(name="b")])
    assert [c.name for c in three_cycles] == ["a", "b"]
    assert three_cycles.selected_index == 0
    three_cycles.replace([])
    assert three_cycles.selected_index is None


def test_constructed_set_defaults_selection_to_first():
    anims = AnimationSet(cycles=[AnimationCycle(name="a")])
    assert anims.selected_index == 0


def test_constructed_set_rejects_bad_selection():
    with pytest.raises(ValidationError):
        AnimationSet(cycles=[AnimationCycle(name="a")], selected_index=3)
