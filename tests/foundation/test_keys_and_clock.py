from __future__ import annotations

from datetime import datetime

import pytest

from aocutils.foundation.clock import current_datetime, fixed_clock
from aocutils.foundation.exceptions import ConfigurationError
from aocutils.foundation.keys import PuzzleKey, harness_name, unit_name


def test_unit_names_follow_year_day_convention():
    assert unit_name(2020, 1) == "Y2020.D1"
    assert PuzzleKey(2020, 1).unit_name == "Y2020.D1"
    assert PuzzleKey(2020, 1).harness_name == "Y2020.D1.Harness"


def test_naming_is_injective_across_a_calendar():
    keys = [(year, day) for year in range(2015, 2026) for day in range(1, 26)]
    units = {unit_name(*key) for key in keys}
    harnesses = {harness_name(*key) for key in keys}
    assert len(units) == len(keys)
    assert len(harnesses) == len(keys)
    assert units.isdisjoint(harnesses)


def test_puzzle_keys_order_by_year_then_day():
    assert sorted([PuzzleKey(2021, 1), PuzzleKey(2020, 25), PuzzleKey(2020, 3)]) == [
        PuzzleKey(2020, 3),
        PuzzleKey(2020, 25),
        PuzzleKey(2021, 1),
    ]


def test_fixed_clock_ignores_timezone():
    moment = datetime(1991, 8, 8)
    clock = fixed_clock(moment)
    assert clock(None) == moment
    assert clock("America/New_York") == moment


def test_current_datetime_is_naive_without_timezone():
    assert current_datetime().tzinfo is None


def test_current_datetime_uses_zone():
    now = current_datetime("UTC")
    assert now.tzinfo is not None
    assert now.utcoffset().total_seconds() == 0


def test_current_datetime_rejects_unknown_zone():
    with pytest.raises(ConfigurationError, match="Unknown time zone"):
        current_datetime("Not/AZone")
