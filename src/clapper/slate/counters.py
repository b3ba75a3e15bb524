# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import logging
import typing

import msgspec

from .slatetypes import OverflowPolicy

logger = logging.getLogger(__name__)

SLATE_FLOOR = 1
SLATE_CEILING = 999
PREFIX_CEILING = 99
CAMERA_COUNT_CEILING = 99


class CounterPolicy(msgspec.Struct, frozen=True):
    floor: int = SLATE_FLOOR
    ceiling: int = SLATE_CEILING
    overflow: OverflowPolicy = OverflowPolicy.CLAMP
    # with OverflowPolicy.WRAP, incrementing from this value or above returns to the floor
    wrap_from: typing.Optional[int] = None

    @property
    def wrap_boundary(self):
        return self.ceiling if self.wrap_from is None else self.wrap_from

    def __contains__(self, value):
        if not isinstance(value, int):
            return False
        return self.floor <= value <= self.ceiling

    def clamp(self, value: int) -> int:
        return max(self.floor, min(self.ceiling, value))

    def increment(self, value: int) -> int:
        if self.overflow is OverflowPolicy.WRAP and value >= self.wrap_boundary:
            return self.floor
        return self.clamp(value + 1)

    def decrement(self, value: int) -> int:
        return self.clamp(value - 1)

    def parse(self, text: str) -> typing.Optional[int]:
        return parse_entry(text, self.floor, self.ceiling)


def next_hundred(value: int) -> int:
    "Jump to the first number of the next hundred-block: 001, 101, 201, ..., 901, then back to 001."
    current_hundred = value // 100
    if current_hundred >= 9:
        return SLATE_FLOOR
    return (current_hundred + 1) * 100 + 1


def parse_entry(text: typing.Optional[str], low: int, high: int) -> typing.Optional[int]:
    if text is None:
        return None
    stripped = text.strip()
    # int() would also take underscores, signs and non-ASCII digits
    if not (stripped.isascii() and stripped.isdecimal()):
        logger.debug("Rejected non-numeric entry %r", text)
        return None
    value = int(stripped, 10)
    if not low <= value <= high:
        logger.debug("Rejected entry %d outside %d..%d", value, low, high)
        return None
    return value
