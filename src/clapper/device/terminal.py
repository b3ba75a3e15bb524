from __future__ import annotations

import logging
import os
import sys
import termios
import tty
import typing

import tricycle
import trio
import trio.lowlevel

from ..commontypes import CaptureError
from .capture import CaptureSurface

logger = logging.getLogger(__name__)


class TerminalCapture(CaptureSurface):
    """Reads keypad characters from a terminal in cbreak mode, so each keystroke arrives as it is typed.

    The macro keypad enumerates as an ordinary USB keyboard, so pointing it at the terminal
    running clapper is all the capture a headless slate needs. A terminal never loses focus
    the way a hidden text field does; focus() just re-applies cbreak mode.
    """

    def __init__(self, fd: typing.Optional[int] = None):
        super().__init__()
        self.fd = sys.stdin.fileno() if fd is None else fd
        self.active = False

    @property
    def is_focused(self):
        return self.active

    def focus(self):
        if self.active:
            tty.setcbreak(self.fd)

    async def run(self, *, task_status=trio.TASK_STATUS_IGNORED):
        if not os.isatty(self.fd):
            raise CaptureError(f"File descriptor {self.fd} is not a terminal")
        saved_attributes = termios.tcgetattr(self.fd)
        tty.setcbreak(self.fd)
        try:
            # FdStream closes the descriptor it wraps, so give it a copy
            async with (
                tricycle.TextReceiveStream(trio.lowlevel.FdStream(os.dup(self.fd)), encoding="utf-8", errors="replace") as stream,
                self.character_send_channel,
            ):
                self.active = True
                task_status.started()
                while True:
                    text = await stream.receive_some()
                    if not text:
                        logger.debug("Terminal input closed")
                        break
                    await self.character_send_channel.send(text)
        finally:
            self.active = False
            termios.tcsetattr(self.fd, termios.TCSADRAIN, saved_attributes)
