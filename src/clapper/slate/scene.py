# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import logging
import typing

from . import letters
from .counters import CounterPolicy, next_hundred

logger = logging.getLogger(__name__)


class SceneController:
    number: int
    letter: typing.Optional[str]
    secondary_letter: typing.Optional[str]
    last_used_letter: str

    def __init__(self, policy: typing.Optional[CounterPolicy] = None):
        self.policy = CounterPolicy() if policy is None else policy
        self.number = self.policy.floor
        self.letter = None
        self.secondary_letter = None
        # restored when the letter is toggled back on
        self.last_used_letter = "A"

    @property
    def letters(self) -> letters.LetterPair:
        return (self.letter, self.secondary_letter)

    def increment(self) -> int:
        self.number = self.policy.increment(self.number)
        return self.number

    def decrement(self) -> int:
        self.number = self.policy.decrement(self.number)
        return self.number

    def jump_to_next_hundred(self) -> int:
        self.number = next_hundred(self.number)
        logger.debug("Jumped to scene %03d", self.number)
        return self.number

    def set_number(self, number: int) -> bool:
        if number not in self.policy:
            logger.debug("Rejected scene number %r", number)
            return False
        self.number = number
        return True

    def next_letter(self) -> letters.LetterPair:
        return self._set_letters(*letters.next_letter(self.letter, self.secondary_letter))

    def previous_letter(self) -> letters.LetterPair:
        return self._set_letters(*letters.previous_letter(self.letter, self.secondary_letter))

    def toggle_letter(self) -> letters.LetterPair:
        if self.letter is None:
            self.letter = self.last_used_letter
        else:
            self.letter = None
        self.secondary_letter = None
        return self.letters

    def reset_letter(self) -> letters.LetterPair:
        return self._set_letters("A", None)

    def commit_entry(self, number_text: str, letter_text: typing.Optional[str] = None) -> bool:
        """Commit the scene entry dialog. Nothing changes unless both fields are valid."""
        number = self.policy.parse(number_text)
        if number is None:
            return False
        letter = (letter_text or "").strip().upper() or None
        if letter is not None and not letters.is_valid_letter(letter):
            logger.debug("Rejected scene letter %r", letter_text)
            return False
        self.number = number
        self._set_letters(letter, None)
        return True

    def _set_letters(self, letter: typing.Optional[str], secondary: typing.Optional[str]) -> letters.LetterPair:
        self.letter = letter
        self.secondary_letter = secondary if letter is not None else None
        if letter is not None:
            self.last_used_letter = letter
        return self.letters
