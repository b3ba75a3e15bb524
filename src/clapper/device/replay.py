# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import collections.abc

import trio

from .capture import CaptureSurface


class ReplayCapture(CaptureSurface):
    """Plays back a fixed sequence of keypad characters, then ends the stream."""

    def __init__(self, characters: collections.abc.Iterable[str], delay: float = 0):
        super().__init__()
        self.characters = list(characters)
        self.delay = delay
        self.focused = False
        self.focus_count = 0

    @property
    def is_focused(self):
        return self.focused

    def focus(self):
        self.focused = True
        self.focus_count += 1

    def blur(self):
        self.focused = False

    async def run(self, *, task_status=trio.TASK_STATUS_IGNORED):
        task_status.started()
        async with self.character_send_channel:
            for character in self.characters:
                if self.delay:
                    await trio.sleep(self.delay)
                await self.character_send_channel.send(character)
