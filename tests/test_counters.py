# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import pytest

from clapper.slate.counters import CounterPolicy, next_hundred, parse_entry
from clapper.slate.slatetypes import OverflowPolicy


def test_clamp_policy():
    policy = CounterPolicy()
    assert policy.increment(1) == 2
    assert policy.increment(998) == 999
    assert policy.increment(999) == 999
    assert policy.decrement(2) == 1
    assert policy.decrement(1) == 1


def test_narrow_policy():
    policy = CounterPolicy(ceiling=99)
    assert policy.increment(99) == 99
    assert 99 in policy
    assert 100 not in policy
    assert 0 not in policy
    assert "5" not in policy


def test_wrap_policy_at_ceiling():
    policy = CounterPolicy(overflow=OverflowPolicy.WRAP)
    assert policy.increment(998) == 999
    assert policy.increment(999) == 1
    assert policy.decrement(1) == 1


def test_wrap_policy_from_901():
    policy = CounterPolicy(overflow=OverflowPolicy.WRAP, wrap_from=901)
    assert policy.increment(900) == 901
    assert policy.increment(901) == 1
    assert policy.increment(950) == 1


@pytest.mark.parametrize(
    "value,expected",
    (
        (1, 101),
        (4, 101),
        (99, 101),
        (100, 201),
        (101, 201),
        (250, 301),
        (801, 901),
        (899, 901),
        (901, 1),
        (999, 1),
    ),
)
def test_next_hundred(value, expected):
    assert next_hundred(value) == expected


def test_next_hundred_full_lap():
    seen = [1]
    for _ in range(10):
        seen.append(next_hundred(seen[-1]))
    assert seen == [1, 101, 201, 301, 401, 501, 601, 701, 801, 901, 1]


@pytest.mark.parametrize(
    "text,expected",
    (
        ("1", 1),
        ("999", 999),
        (" 42 ", 42),
        ("007", 7),
        ("0", None),
        ("1000", None),
        ("-3", None),
        ("", None),
        ("12abc", None),
        ("twelve", None),
        ("1.5", None),
        ("9_9", None),
        ("+5", None),
        ("\u0664\u0662", None),
        (None, None),
    ),
)
def test_parse_entry(text, expected):
    assert parse_entry(text, 1, 999) == expected


def test_policy_parse_uses_its_bounds():
    assert CounterPolicy(ceiling=99).parse("99") == 99
    assert CounterPolicy(ceiling=99).parse("100") is None
