# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from clapper.slate.counters import CounterPolicy
from clapper.slate.dualmode import DualModeController
from clapper.slate.scene import SceneController
from clapper.slate.slatetypes import OverflowPolicy


def test_scene_counter_clamps_by_default():
    scene = SceneController()
    assert scene.decrement() == 1
    scene.set_number(999)
    assert scene.increment() == 999


def test_scene_counter_can_wrap():
    scene = SceneController(CounterPolicy(overflow=OverflowPolicy.WRAP, wrap_from=901))
    scene.set_number(901)
    assert scene.increment() == 1


def test_jump_to_next_hundred():
    scene = SceneController()
    assert [scene.jump_to_next_hundred() for _ in range(10)] == [101, 201, 301, 401, 501, 601, 701, 801, 901, 1]


def test_toggle_letter_remembers_last_letter():
    scene = SceneController()
    assert scene.toggle_letter() == ("A", None)
    scene.next_letter()
    scene.next_letter()
    assert scene.letters == ("C", None)
    assert scene.toggle_letter() == (None, None)
    assert scene.toggle_letter() == ("C", None)


def test_toggle_letter_drops_secondary():
    scene = SceneController()
    scene._set_letters("Z", None)
    assert scene.next_letter() == ("A", "a")
    assert scene.toggle_letter() == (None, None)
    assert scene.toggle_letter() == ("A", None)


def test_stepping_back_past_a_clears_letter_but_keeps_memory():
    scene = SceneController()
    scene.next_letter()
    assert scene.previous_letter() == (None, None)
    assert scene.last_used_letter == "A"


def test_reset_letter():
    scene = SceneController()
    scene._set_letters("Q", "r")
    assert scene.reset_letter() == ("A", None)
    assert scene.last_used_letter == "A"


def test_commit_entry():
    scene = SceneController()
    assert scene.commit_entry("42", "b")
    assert scene.number == 42
    assert scene.letters == ("B", None)
    assert scene.commit_entry("43", "")
    assert scene.letters == (None, None)


def test_commit_entry_rejects_without_changing_anything():
    scene = SceneController()
    scene.commit_entry("42", "B")
    assert not scene.commit_entry("0", "C")
    assert not scene.commit_entry("1000", "C")
    assert not scene.commit_entry("abc", "C")
    assert not scene.commit_entry("50", "I")
    assert not scene.commit_entry("50", "CD")
    assert scene.number == 42
    assert scene.letters == ("B", None)


def test_entering_dual_mode_resets_prefix():
    scene = SceneController()
    dual = DualModeController(scene)
    dual.toggle_dual_mode()
    dual.increment_active()
    dual.increment_active()
    dual.toggle_editing_target()
    dual.toggle_dual_mode()
    assert not dual.enabled
    dual.toggle_dual_mode()
    assert dual.enabled
    assert dual.prefix_number == 1
    assert dual.editing_prefix


def test_dual_mode_routes_increments():
    scene = SceneController()
    dual = DualModeController(scene)
    assert dual.increment_active() == 2
    assert scene.number == 2
    dual.toggle_dual_mode()
    assert dual.increment_active() == 2
    assert dual.prefix_number == 2
    assert scene.number == 2
    dual.toggle_editing_target()
    assert dual.increment_active() == 3
    assert scene.number == 3
    assert dual.prefix_number == 2


def test_prefix_bounds():
    dual = DualModeController(SceneController())
    dual.toggle_dual_mode()
    assert dual.decrement_active() == 1
    assert dual.set_prefix(99)
    assert dual.increment_active() == 99
    assert not dual.set_prefix(100)
    assert dual.prefix_number == 99


def test_editing_target_only_toggles_in_dual_mode():
    dual = DualModeController(SceneController())
    assert dual.toggle_editing_target() is False
    assert not dual.editing_prefix


def test_commit_entry_only_takes_ascii_digits():
    scene = SceneController()
    assert not scene.commit_entry("٤٢", None)
    assert not scene.commit_entry("4_2", None)
    assert scene.number == 1
