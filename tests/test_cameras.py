# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import pytest

from clapper.slate.cameras import CameraMultiplexer, camera_letter


def test_defaults():
    cameras = CameraMultiplexer()
    assert cameras.roll_values == [1, 1]
    assert cameras.num_cams == 1
    assert cameras.current_cam_index == 0
    assert not cameras.is_multicam


def test_roll_stays_in_bounds():
    cameras = CameraMultiplexer()
    assert cameras.decrement(0) == 1
    for _ in range(1200):
        cameras.increment(0)
    assert cameras.roll_values[0] == 999
    assert cameras.increment(0) == 999
    for _ in range(1200):
        cameras.decrement(0)
    assert cameras.roll_values[0] == 1


def test_jump_to_next_hundred():
    cameras = CameraMultiplexer(roll_values=[4])
    assert cameras.jump_to_next_hundred() == 101
    cameras.set_roll_value(0, 950)
    assert cameras.jump_to_next_hundred() == 1


def test_change_num_cams_wraps_after_four():
    cameras = CameraMultiplexer()
    counts = []
    for _ in range(4):
        counts.append(cameras.change_num_cams())
    assert counts == [2, 3, 4, 1]
    assert cameras.current_cam_index == 0
    assert cameras.roll_values == [1]


def test_change_num_cams_resets_selection_on_wrap():
    cameras = CameraMultiplexer()
    cameras.change_num_cams()
    cameras.change_num_cams()
    cameras.change_num_cams()
    cameras.cycle_camera()
    cameras.cycle_camera()
    cameras.cycle_camera()
    assert cameras.current_cam_index == 3
    cameras.change_num_cams()
    assert cameras.num_cams == 1
    assert cameras.current_cam_index == 0


def test_growing_pads_and_shrinking_truncates():
    cameras = CameraMultiplexer(roll_values=[5, 6])
    cameras.set_num_cams(4)
    assert cameras.roll_values == [5, 6, 1, 1]
    cameras.set_num_cams(2)
    assert cameras.roll_values == [5, 6]


def test_cycle_camera():
    cameras = CameraMultiplexer()
    assert cameras.cycle_camera() == 0
    cameras.set_num_cams(3)
    assert [cameras.cycle_camera() for _ in range(4)] == [1, 2, 0, 1]


def test_set_num_cams_bounds():
    cameras = CameraMultiplexer()
    assert cameras.set_num_cams(12)
    assert cameras.num_cams == 12
    assert len(cameras.roll_values) == 12
    assert not cameras.set_num_cams(0)
    assert not cameras.set_num_cams(100)
    assert cameras.num_cams == 12


def test_shrinking_below_selection_selects_first_camera():
    cameras = CameraMultiplexer()
    cameras.set_num_cams(4)
    cameras.cycle_camera()
    cameras.cycle_camera()
    cameras.cycle_camera()
    cameras.set_num_cams(2)
    assert cameras.current_cam_index == 0


def test_set_and_reset_roll():
    cameras = CameraMultiplexer()
    assert cameras.set_roll_value(0, 250)
    assert not cameras.set_roll_value(0, 1000)
    assert not cameras.set_roll_value(0, 0)
    assert cameras.roll_values[0] == 250
    assert cameras.reset_roll(0) == 1


def test_camera_letter():
    assert [camera_letter(i) for i in range(4)] == ["A", "B", "C", "D"]


def test_cameras_outside_the_rig_are_not_editable():
    cameras = CameraMultiplexer()
    assert cameras.roll_values == [1, 1]
    with pytest.raises(IndexError):
        cameras.increment(1)
    with pytest.raises(IndexError):
        cameras.decrement(-1)
    with pytest.raises(IndexError):
        cameras.jump_to_next_hundred(1)
    assert not cameras.set_roll_value(1, 50)
    cameras.change_num_cams()
    assert cameras.roll_values == [1, 1]
