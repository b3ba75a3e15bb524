from __future__ import annotations

import logging

from .counters import CounterPolicy
from .slatetypes import TakeMode

logger = logging.getLogger(__name__)


class TakeModeController:
    def __init__(self):
        self.policy = CounterPolicy()
        self.number = self.policy.floor
        self.mode = TakeMode.NORMAL

    def increment(self) -> int:
        self.number = self.policy.increment(self.number)
        return self.number

    def decrement(self) -> int:
        self.number = self.policy.decrement(self.number)
        return self.number

    def set_number(self, number: int) -> bool:
        if number not in self.policy:
            logger.debug("Rejected take number %r", number)
            return False
        self.number = number
        return True

    def set_mode(self, mode: TakeMode) -> TakeMode:
        self.mode = mode
        return self.mode

    def cycle(self) -> TakeMode:
        return self.set_mode(self.mode.next)

    def toggle_series(self) -> TakeMode:
        # only ever moves between NORMAL and SERIES; any other mode counts as not-series
        return self.set_mode(TakeMode.NORMAL if self.mode is TakeMode.SERIES else TakeMode.SERIES)

    def reset_take_number(self) -> int:
        self.number = self.policy.floor
        if self.mode is TakeMode.SERIES:
            self.mode = TakeMode.NORMAL
        return self.number
