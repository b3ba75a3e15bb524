# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import typing

from .cameras import DEFAULT_MAX_RIG_CAMERAS, CameraMultiplexer
from .counters import CounterPolicy
from .dualmode import DualModeController
from .scene import SceneController
from .slatetypes import SlateSnapshot
from .takes import TakeModeController

if typing.TYPE_CHECKING:
    from ..settings import Settings


# One session per mounted slate screen. Nothing here is shared between sessions, and
# nothing is persisted; a fresh session always starts at roll 1, scene 1, take 1.
class SlateSession:
    def __init__(
        self,
        *,
        scene_policy: typing.Optional[CounterPolicy] = None,
        max_rig_cameras: int = DEFAULT_MAX_RIG_CAMERAS,
    ):
        self.cameras = CameraMultiplexer(max_rig_cameras=max_rig_cameras)
        self.scene = SceneController(scene_policy)
        self.dual = DualModeController(self.scene)
        self.takes = TakeModeController()
        self.code_visible = False

    @classmethod
    def from_settings(cls, settings: Settings):
        return cls(
            scene_policy=CounterPolicy(overflow=settings.scene_overflow, wrap_from=settings.scene_wrap_from),
            max_rig_cameras=settings.max_rig_cameras,
        )

    def snapshot(self) -> SlateSnapshot:
        return SlateSnapshot(
            roll_values=tuple(self.cameras.roll_values[: self.cameras.num_cams]),
            num_cams=self.cameras.num_cams,
            current_cam_index=self.cameras.current_cam_index,
            scene_number=self.scene.number,
            scene_letter=self.scene.letter,
            scene_secondary_letter=self.scene.secondary_letter,
            dual_mode=self.dual.enabled,
            prefix_number=self.dual.prefix_number,
            editing_prefix=self.dual.editing_prefix,
            take_number=self.takes.number,
            take_mode=self.takes.mode,
            code_visible=self.code_visible,
        )
