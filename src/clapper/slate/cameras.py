# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import logging
import typing

from .counters import CAMERA_COUNT_CEILING, CounterPolicy, next_hundred

logger = logging.getLogger(__name__)

DEFAULT_ROLL_VALUES = (1, 1)
DEFAULT_MAX_RIG_CAMERAS = 4


def camera_letter(index: int) -> str:
    return chr(ord("A") + index)


class CameraMultiplexer:
    """Roll values for each camera on the rig, plus which camera the encoder is editing.

    Only the first num_cams roll values are meaningful. Changing the camera count
    pads new cameras at roll 1 and drops the values of removed cameras.
    """

    roll_values: list[int]
    num_cams: int
    current_cam_index: int

    def __init__(
        self,
        roll_values: typing.Optional[typing.Sequence[int]] = None,
        num_cams: int = 1,
        max_rig_cameras: int = DEFAULT_MAX_RIG_CAMERAS,
    ):
        self.policy = CounterPolicy()
        self.count_policy = CounterPolicy(ceiling=CAMERA_COUNT_CEILING)
        self.roll_values = list(DEFAULT_ROLL_VALUES if roll_values is None else roll_values)
        self.num_cams = num_cams
        self.current_cam_index = 0
        self.max_rig_cameras = max_rig_cameras
        if len(self.roll_values) < num_cams:
            self._resize(num_cams)

    @property
    def is_multicam(self):
        return self.num_cams > 1

    @property
    def current_roll(self):
        return self.roll_values[self.current_cam_index]

    def in_rig(self, index: int) -> bool:
        return 0 <= index < self.num_cams

    def _check_index(self, index: int):
        # cameras past num_cams keep no roll; editing one would leak into a later rig resize
        if not self.in_rig(index):
            raise IndexError(f"Camera {index} is not on a {self.num_cams}-camera rig")

    def increment(self, index: int) -> int:
        self._check_index(index)
        self.roll_values[index] = self.policy.increment(self.roll_values[index])
        return self.roll_values[index]

    def decrement(self, index: int) -> int:
        self._check_index(index)
        self.roll_values[index] = self.policy.decrement(self.roll_values[index])
        return self.roll_values[index]

    def jump_to_next_hundred(self, index: int = 0) -> int:
        self._check_index(index)
        self.roll_values[index] = next_hundred(self.roll_values[index])
        return self.roll_values[index]

    def cycle_camera(self) -> int:
        if self.is_multicam:
            self.current_cam_index = (self.current_cam_index + 1) % self.num_cams
            logger.debug("Switched to camera %s", camera_letter(self.current_cam_index))
        return self.current_cam_index

    def change_num_cams(self, delta: int = 1) -> int:
        # growing past the largest rig goes back to a single camera
        new_num_cams = self.num_cams + delta
        if new_num_cams > self.max_rig_cameras:
            new_num_cams = 1
        elif new_num_cams < 1:
            new_num_cams = self.max_rig_cameras
        self._apply_num_cams(new_num_cams)
        return self.num_cams

    def set_num_cams(self, num_cams: int) -> bool:
        if num_cams not in self.count_policy:
            logger.debug("Rejected camera count %r", num_cams)
            return False
        self._apply_num_cams(num_cams)
        return True

    def set_roll_value(self, index: int, value: int) -> bool:
        if not self.in_rig(index):
            logger.debug("Rejected roll value for camera %d outside the rig", index)
            return False
        if value not in self.policy:
            logger.debug("Rejected roll value %r for camera %s", value, camera_letter(index))
            return False
        self.roll_values[index] = value
        return True

    def reset_roll(self, index: int) -> int:
        self._check_index(index)
        self.roll_values[index] = self.policy.floor
        return self.roll_values[index]

    def _apply_num_cams(self, num_cams: int):
        self.num_cams = num_cams
        if num_cams == 1 or self.current_cam_index >= num_cams:
            self.current_cam_index = 0
        self._resize(num_cams)
        logger.debug("Number of cameras: %d", num_cams)

    def _resize(self, num_cams: int):
        if num_cams < len(self.roll_values):
            del self.roll_values[num_cams:]
        while len(self.roll_values) < num_cams:
            self.roll_values.append(self.policy.floor)
