from __future__ import annotations

import argparse
import logging
import math
import pathlib
import sys
import typing

import trio
import trio_util

from .commontypes import ClapperError
from .device.capture import OVERLAY_REFOCUS_DELAY, CaptureSurface, FocusKeeper
from .device.replay import ReplayCapture
from .device.terminal import TerminalCapture
from .input.commands import Command
from .input.dispatcher import InputEventDispatcher
from .input.keystreams import make_eventstream
from .settings import Settings
from .slate.display import status_line
from .slate.session import SlateSession
from .slate.slatetypes import CodeOverlayChanged, SlateEvent, SlateSnapshot

logger = logging.getLogger(__name__)

REPLAY_DELAY = 0.05


class Clapper:
    session: SlateSession
    snapshot: trio_util.AsyncValue[SlateSnapshot]
    event_send_channel: trio.MemorySendChannel[SlateEvent]
    event_receive_channel: trio.MemoryReceiveChannel[SlateEvent]

    def __init__(self, capture: CaptureSurface, settings: Settings):
        self.capture = capture
        self.settings = settings
        self.session = SlateSession.from_settings(settings)
        self.dispatcher = InputEventDispatcher.from_settings(self.session, settings)
        self.focus_keeper = FocusKeeper(
            capture,
            initial_delay=settings.initial_focus_delay,
            interval=settings.refocus_interval,
        )
        self.snapshot = trio_util.AsyncValue(self.session.snapshot())
        self.event_send_channel, self.event_receive_channel = trio.open_memory_channel[SlateEvent](math.inf)
        self._nursery: typing.Optional[trio.Nursery] = None

    async def run(self, *, task_status=trio.TASK_STATUS_IGNORED):
        async with trio.open_nursery() as nursery:
            self._nursery = nursery
            await nursery.start(self.focus_keeper.run)
            async with make_eventstream(self.capture.character_receive_channel, self.dispatcher) as eventstream:
                await nursery.start(self.capture.run)
                task_status.started()
                async for event in eventstream:
                    self.publish(event)
            # the capture surface closed its stream; nothing more can arrive
            nursery.cancel_scope.cancel()
        self._nursery = None
        self.event_send_channel.close()
        logger.debug("goodbye")

    def publish(self, event: SlateEvent):
        self.snapshot.value = self.session.snapshot()
        match event:
            case CodeOverlayChanged(visible=False):
                if self._nursery is not None:
                    self._nursery.start_soon(self.focus_keeper.refocus_after, OVERLAY_REFOCUS_DELAY)
        self.event_send_channel.send_nowait(event)

    def apply(self, command: Command) -> SlateEvent:
        """Run a command that came from somewhere other than the keypad, such as a tap on a field."""
        event = self.dispatcher.execute(command)
        self.publish(event)
        return event

    def refresh(self):
        # direct edits (entry dialogs, long presses) go straight to the controllers
        self.snapshot.value = self.session.snapshot()


async def start_clapper(settings: Settings, capture: CaptureSurface, out: typing.Optional[typing.TextIO] = None):
    if out is None:
        out = sys.stdout
    app = Clapper(capture, settings)
    async with trio.open_nursery() as nursery:
        await nursery.start(app.run)
        print(status_line(app.snapshot.value), file=out, flush=True)
        async with app.event_receive_channel:
            async for _event in app.event_receive_channel:
                print(status_line(app.snapshot.value), file=out, flush=True)
    return app


def _leaves(group: BaseExceptionGroup):
    for exc in group.exceptions:
        if isinstance(exc, BaseExceptionGroup):
            yield from _leaves(exc)
        else:
            yield exc


parser = argparse.ArgumentParser(prog="clapper", description="Drive a production slate from a macro keypad.")
parser.add_argument("--settings", type=pathlib.Path, help="JSON settings file")
parser.add_argument("--replay", help="play back these keypad characters instead of reading the terminal")
parser.add_argument("--write-settings", type=pathlib.Path, help="write the effective settings to this path and exit")
parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])


def main(argv=sys.argv):
    parsed = parser.parse_args(argv[1:])
    logging.basicConfig(level=getattr(logging, parsed.log_level))
    try:
        if parsed.settings is not None:
            settings = Settings.load(parsed.settings)
        else:
            settings = Settings.default()
        if parsed.write_settings is not None:
            settings.save(parsed.write_settings)
            return 0
    except ClapperError as exc:
        logger.error("%s", exc)
        return 1
    if parsed.replay is not None:
        capture = ReplayCapture(parsed.replay, delay=REPLAY_DELAY)
    else:
        capture = TerminalCapture()
    status = 0
    try:
        trio.run(start_clapper, settings, capture)
    except* ClapperError as group:
        for exc in _leaves(group):
            logger.error("%s", exc)
        status = 1
    return status
