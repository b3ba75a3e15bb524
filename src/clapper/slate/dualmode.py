from __future__ import annotations

import logging
import typing

from .counters import PREFIX_CEILING, CounterPolicy

if typing.TYPE_CHECKING:
    from .scene import SceneController

logger = logging.getLogger(__name__)


class DualModeController:
    """Scene dual numbering: a two-digit block prefix shown in front of the scene number (01.001).

    While dual mode is on, the scene encoder edits either the prefix or the scene number,
    and the jump button switches between the two.
    """

    def __init__(self, scene: SceneController):
        self.scene = scene
        self.policy = CounterPolicy(ceiling=PREFIX_CEILING)
        self.enabled = False
        self.prefix_number = self.policy.floor
        self.editing_prefix = False

    @property
    def is_editing_prefix(self):
        return self.enabled and self.editing_prefix

    def toggle_dual_mode(self) -> bool:
        self.enabled = not self.enabled
        if self.enabled:
            self.prefix_number = self.policy.floor
            self.editing_prefix = True
        logger.debug("Dual mode %s", "enabled" if self.enabled else "disabled")
        return self.enabled

    def toggle_editing_target(self) -> bool:
        if not self.enabled:
            return self.editing_prefix
        self.editing_prefix = not self.editing_prefix
        return self.editing_prefix

    def increment_active(self) -> int:
        if self.is_editing_prefix:
            self.prefix_number = self.policy.increment(self.prefix_number)
            return self.prefix_number
        return self.scene.increment()

    def decrement_active(self) -> int:
        if self.is_editing_prefix:
            self.prefix_number = self.policy.decrement(self.prefix_number)
            return self.prefix_number
        return self.scene.decrement()

    def set_prefix(self, prefix: int) -> bool:
        if prefix not in self.policy:
            logger.debug("Rejected scene prefix %r", prefix)
            return False
        self.prefix_number = prefix
        return True
