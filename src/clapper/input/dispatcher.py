# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import collections.abc
import logging
import typing

from ..slate.cameras import camera_letter
from ..slate.letters import format_letters
from ..slate.slatetypes import (
    CameraCountChanged,
    CameraSelected,
    CodeOverlayChanged,
    DualModeChanged,
    EditTargetChanged,
    PrefixChanged,
    RollChanged,
    SceneLetterChanged,
    SceneNumberChanged,
    SlateEvent,
    TakeChanged,
)
from .commands import DEFAULT_KEYMAP, Command

if typing.TYPE_CHECKING:
    from ..settings import Settings
    from ..slate.session import SlateSession

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_LIMIT = 5


class InputEventDispatcher:
    """Turns the character stream from the capture surface into slate mutations.

    Characters are handled one at a time, in arrival order. Each character is appended
    to a short buffer and looked up in the keymap; a match runs exactly one command and
    clears the buffer. Characters that match nothing pile up until the buffer grows past
    buffer_limit, at which point it is thrown away. The dispatcher remembers nothing else:
    what a command does depends only on the session's current state, so repeated or
    out-of-order commands (a decrement at the floor, a stray focus change) are harmless.
    """

    buffer: str

    def __init__(
        self,
        session: SlateSession,
        keymap: typing.Optional[collections.abc.Mapping[str, Command]] = None,
        buffer_limit: int = DEFAULT_BUFFER_LIMIT,
    ):
        self.session = session
        self.keymap = dict(DEFAULT_KEYMAP if keymap is None else keymap)
        self.buffer_limit = buffer_limit
        self.buffer = ""

    @classmethod
    def from_settings(cls, session: SlateSession, settings: Settings):
        return cls(session, keymap=settings.keymap, buffer_limit=settings.buffer_limit)

    def lookup(self, character: str) -> typing.Optional[Command]:
        return self.keymap.get(character)

    def feed(self, character: str) -> typing.Optional[SlateEvent]:
        if len(character) != 1:
            raise ValueError(f"Expected a single character, got {character!r}")
        self.buffer += character
        command = self.lookup(character)
        if command is None:
            if len(self.buffer) > self.buffer_limit:
                logger.debug("Discarding unrecognized input %r", self.buffer)
                self.buffer = ""
            return None
        self.buffer = ""
        return self.execute(command)

    def feed_text(self, text: str) -> list[SlateEvent]:
        events = []
        for character in text:
            event = self.feed(character)
            if event is not None:
                events.append(event)
        return events

    def execute(self, command: Command) -> SlateEvent:
        session = self.session
        cameras = session.cameras
        scene = session.scene
        dual = session.dual
        takes = session.takes
        match command:
            case Command.SHOW_CODE | Command.HIDE_CODE:
                session.code_visible = command is Command.SHOW_CODE
                event = CodeOverlayChanged(visible=session.code_visible)
            case Command.ROLL_DOWN:
                index = cameras.current_cam_index
                event = RollChanged(cam_index=index, value=cameras.decrement(index))
            case Command.ROLL_UP:
                index = cameras.current_cam_index
                event = RollChanged(cam_index=index, value=cameras.increment(index))
            case Command.ROLL_SELECT:
                if cameras.is_multicam:
                    event = CameraSelected(cam_index=cameras.cycle_camera())
                else:
                    event = RollChanged(cam_index=0, value=cameras.jump_to_next_hundred(0))
            case Command.ADD_CAMERA:
                cameras.change_num_cams(1)
                event = CameraCountChanged(
                    num_cams=cameras.num_cams,
                    cam_index=cameras.current_cam_index,
                    roll_values=tuple(cameras.roll_values[: cameras.num_cams]),
                )
            case Command.SCENE_UP:
                dual.increment_active()
                event = self._scene_number_event()
            case Command.SCENE_DOWN:
                dual.decrement_active()
                event = self._scene_number_event()
            case Command.SCENE_JUMP:
                if dual.enabled:
                    event = EditTargetChanged(editing_prefix=dual.toggle_editing_target())
                else:
                    event = SceneNumberChanged(number=scene.jump_to_next_hundred())
            case Command.DUAL_TOGGLE:
                dual.toggle_dual_mode()
                event = DualModeChanged(enabled=dual.enabled, prefix=dual.prefix_number, editing_prefix=dual.editing_prefix)
            case Command.LETTER_NEXT:
                event = SceneLetterChanged(*scene.next_letter())
            case Command.LETTER_PREVIOUS:
                event = SceneLetterChanged(*scene.previous_letter())
            case Command.LETTER_TOGGLE:
                event = SceneLetterChanged(*scene.toggle_letter())
            case Command.LETTER_RESET:
                event = SceneLetterChanged(*scene.reset_letter())
            case Command.TAKE_UP:
                takes.increment()
                event = TakeChanged(number=takes.number, mode=takes.mode)
            case Command.TAKE_DOWN:
                takes.decrement()
                event = TakeChanged(number=takes.number, mode=takes.mode)
            case Command.SERIES_TOGGLE:
                takes.toggle_series()
                event = TakeChanged(number=takes.number, mode=takes.mode)
            case Command.TAKE_RESET:
                takes.reset_take_number()
                event = TakeChanged(number=takes.number, mode=takes.mode)
            case Command.CYCLE_TAKE_MODE:
                takes.cycle()
                event = TakeChanged(number=takes.number, mode=takes.mode)
            case _:
                raise NotImplementedError(f"Don't know how to handle {command}.")
        logger.debug("%s -> %s", command.name, describe(event))
        return event

    def _scene_number_event(self) -> SlateEvent:
        dual = self.session.dual
        if dual.is_editing_prefix:
            return PrefixChanged(prefix=dual.prefix_number)
        return SceneNumberChanged(number=self.session.scene.number)


def describe(event: SlateEvent) -> str:
    match event:
        case RollChanged(cam_index=cam_index, value=value):
            return f"roll {camera_letter(cam_index)}{value:03}"
        case CameraSelected(cam_index=cam_index):
            return f"camera {camera_letter(cam_index)} selected"
        case CameraCountChanged(num_cams=num_cams):
            return f"{num_cams} camera(s)"
        case SceneNumberChanged(number=number):
            return f"scene {number:03}"
        case PrefixChanged(prefix=prefix):
            return f"prefix {prefix:02}"
        case SceneLetterChanged(letter=letter, secondary=secondary):
            return f"scene letter {format_letters(letter, secondary) or 'none'}"
        case TakeChanged(number=number, mode=mode):
            return f"take {number:02} ({mode.value})"
        case _:
            return repr(event)
