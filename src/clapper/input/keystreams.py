# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import abc
from contextlib import aclosing, asynccontextmanager
from typing import TYPE_CHECKING, Any, AsyncIterable, cast

import trio

if TYPE_CHECKING:
    from ..slate.slatetypes import SlateEvent
    from .dispatcher import InputEventDispatcher


class Section(abc.ABC):
    @abc.abstractmethod
    async def pump(self, source: trio.MemoryReceiveChannel[Any], sink: trio.MemorySendChannel[Any]): ...


# stage 0.5: capture surfaces may deliver several characters at once (a paste, a burst from the keypad)
class SplitCharacters(Section):
    async def pump(self, source: trio.MemoryReceiveChannel[str], sink: trio.MemorySendChannel[str]):
        async with aclosing(source), aclosing(sink):
            async for text in source:
                for character in text:
                    await sink.send(character)


# stages 1 and 2: buffer, look up and run commands; absorbed characters produce nothing
class DispatchCommands(Section):
    def __init__(self, dispatcher: InputEventDispatcher):
        self.dispatcher = dispatcher

    async def pump(self, source: trio.MemoryReceiveChannel[str], sink: trio.MemorySendChannel[SlateEvent]):
        async with aclosing(source), aclosing(sink):
            async for character in source:
                event = self.dispatcher.feed(character)
                if event is not None:
                    await sink.send(event)


@asynccontextmanager
async def pump_all(first_source: AsyncIterable[Any], *sections: Section):
    async with trio.open_nursery() as nursery:
        section_input = first_source
        for section in sections:
            section_send_channel, section_receive_channel = trio.open_memory_channel(0)
            nursery.start_soon(section.pump, section_input, section_send_channel)
            section_input = section_receive_channel
        yield section_input
        nursery.cancel_scope.cancel()


@asynccontextmanager
async def make_eventstream(
    character_channel: trio.MemoryReceiveChannel[str],
    dispatcher: InputEventDispatcher,
):
    sections = [
        SplitCharacters(),
        DispatchCommands(dispatcher),
    ]

    async with pump_all(character_channel, *sections) as eventstream:
        yield cast(trio.MemoryReceiveChannel["SlateEvent"], eventstream)
