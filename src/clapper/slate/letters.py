# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
"""Scene letter suffixes.

A scene carries an optional primary letter (A-Z) and, once the primary letters
have been used up, an optional secondary letter (a-z), so the sequence runs
A, B, ..., Z, Aa, Ab, ..., Az, Ba, ... I and L are never used in either
position; on a slate they read too much like 1.
"""
import typing

SKIPPED_LETTERS = frozenset("ILil")

LetterPair = tuple[typing.Optional[str], typing.Optional[str]]


def _step(letter: str, direction: int) -> str:
    stepped = chr(ord(letter) + direction)
    if stepped in SKIPPED_LETTERS:
        stepped = chr(ord(stepped) + direction)
    return stepped


def is_valid_letter(letter: typing.Optional[str]) -> bool:
    return letter is not None and len(letter) == 1 and "A" <= letter <= "Z" and letter not in SKIPPED_LETTERS


def is_valid_secondary(secondary: typing.Optional[str]) -> bool:
    return secondary is not None and len(secondary) == 1 and "a" <= secondary <= "z" and secondary not in SKIPPED_LETTERS


def next_letter(letter: typing.Optional[str], secondary: typing.Optional[str] = None) -> LetterPair:
    if letter is None:
        return ("A", None)
    if secondary is None:
        if letter == "Z":
            return ("A", "a")
        return (_step(letter, 1), None)
    if secondary == "z":
        return ("A" if letter == "Z" else _step(letter, 1), "a")
    return (letter, _step(secondary, 1))


def previous_letter(letter: typing.Optional[str], secondary: typing.Optional[str] = None) -> LetterPair:
    """Inverse of next_letter. Stepping back from a lone A clears the letter entirely."""
    if letter is None:
        return (None, None)
    if secondary is None:
        if letter == "A":
            return (None, None)
        return (_step(letter, -1), None)
    if secondary == "a":
        return ("Z" if letter == "A" else _step(letter, -1), "z")
    return (letter, _step(secondary, -1))


def format_letters(letter: typing.Optional[str], secondary: typing.Optional[str] = None) -> str:
    return (letter or "") + (secondary or "")
