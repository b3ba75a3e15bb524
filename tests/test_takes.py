# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from clapper.slate.slatetypes import TakeMode
from clapper.slate.takes import TakeModeController


def test_cycle_order():
    takes = TakeModeController()
    modes = [takes.cycle() for _ in range(5)]
    assert modes == [TakeMode.SERIES, TakeMode.REHEARSAL, TakeMode.PLATE, TakeMode.ONLY_SERIES, TakeMode.NORMAL]


def test_toggle_series_only_uses_normal_and_series():
    takes = TakeModeController()
    assert takes.toggle_series() is TakeMode.SERIES
    assert takes.toggle_series() is TakeMode.NORMAL
    takes.set_mode(TakeMode.PLATE)
    assert takes.toggle_series() is TakeMode.SERIES


def test_reset_exits_series():
    takes = TakeModeController()
    takes.increment()
    takes.increment()
    takes.toggle_series()
    assert takes.reset_take_number() == 1
    assert takes.mode is TakeMode.NORMAL


def test_reset_keeps_other_modes():
    takes = TakeModeController()
    takes.set_mode(TakeMode.REHEARSAL)
    takes.set_number(12)
    takes.reset_take_number()
    assert takes.number == 1
    assert takes.mode is TakeMode.REHEARSAL


def test_take_bounds():
    takes = TakeModeController()
    assert takes.decrement() == 1
    assert takes.set_number(999)
    assert takes.increment() == 999
    assert not takes.set_number(0)
    assert not takes.set_number(1000)
    assert takes.number == 999
