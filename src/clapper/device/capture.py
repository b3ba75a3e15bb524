# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import abc
import logging
import math

import msgspec
import trio
import trio_util

logger = logging.getLogger(__name__)

INITIAL_FOCUS_DELAY = 0.1
REFOCUS_INTERVAL = 2.0
OVERLAY_REFOCUS_DELAY = 0.1


class KeyboardHidden(msgspec.Struct, frozen=True):
    pass


class CaptureSurface(abc.ABC):
    """An always-focused, invisible input that hands keypad characters to the slate.

    Subclasses send text on character_send_channel (one or more characters per send) and
    close it when input ends. Surfaces that can lose focus report it through is_focused;
    surfaces that can pop up an on-screen keyboard call notify_keyboard_hidden when it goes away.
    """

    character_send_channel: trio.MemorySendChannel[str]
    character_receive_channel: trio.MemoryReceiveChannel[str]

    def __init__(self):
        self.character_send_channel, self.character_receive_channel = trio.open_memory_channel(0)
        self.notice_send_channel, self.notice_receive_channel = trio.open_memory_channel[KeyboardHidden](math.inf)

    @property
    @abc.abstractmethod
    def is_focused(self) -> bool: ...

    @abc.abstractmethod
    def focus(self): ...

    @abc.abstractmethod
    async def run(self, *, task_status: trio.TaskStatus = trio.TASK_STATUS_IGNORED): ...

    def notify_keyboard_hidden(self):
        try:
            self.notice_send_channel.send_nowait(KeyboardHidden())
        except (trio.BrokenResourceError, trio.ClosedResourceError):
            # nobody is keeping focus any more, so there is nothing to refocus
            logger.debug("Keyboard hidden after the focus keeper stopped")


class FocusKeeper:
    """Keeps the capture surface focused so keypad input keeps arriving after touch interactions."""

    def __init__(
        self,
        surface: CaptureSurface,
        *,
        initial_delay: float = INITIAL_FOCUS_DELAY,
        interval: float = REFOCUS_INTERVAL,
    ):
        self.surface = surface
        self.initial_delay = initial_delay
        self.interval = interval

    async def run(self, *, task_status=trio.TASK_STATUS_IGNORED):
        async with trio.open_nursery() as nursery:
            nursery.start_soon(self.refocus_after, self.initial_delay)
            nursery.start_soon(self.watch_periodically)
            nursery.start_soon(self.watch_keyboard)
            task_status.started()

    async def refocus_after(self, delay: float):
        await trio.sleep(delay)
        self.surface.focus()

    async def watch_periodically(self):
        async for _elapsed, delta in trio_util.periodic(self.interval):
            # the first tick comes immediately; the initial focus has its own delay
            if delta is None:
                continue
            if not self.surface.is_focused:
                logger.debug("Capture surface lost focus; refocusing")
                self.surface.focus()

    async def watch_keyboard(self):
        async with self.surface.notice_receive_channel:
            async for _notice in self.surface.notice_receive_channel:
                self.surface.focus()
