"""Tests for the day registry."""

from __future__ import annotations

import random
import re
from pathlib import Path

import pytest

from cargo_aoc.core.cargo import BuildTarget
from cargo_aoc.core.day_registry import days_from_targets, list_days, unit_name
from cargo_aoc.core.exceptions import ConfigurationError, RegistryError


def _target(name: str) -> BuildTarget:
    return BuildTarget(name=name, src_path=Path(f"src/bin/{name}.rs"))


@pytest.mark.parametrize("count", [1, 7, 25])
def test_days_are_ascending_whatever_the_target_order(count):
    """Registry iterates 1..N regardless of cargo's target order."""
    names = [unit_name(day) for day in range(1, count + 1)]
    random.Random(count).shuffle(names)

    days = days_from_targets(_target(name) for name in names)

    assert list(days) == list(range(1, count + 1))
    assert days[count] == Path(f"src/bin/day{count}.rs")


def test_non_day_targets_are_ignored():
    """Binaries without the ``day`` prefix are skipped."""
    days = days_from_targets(
        [_target("day2"), _target("utils"), _target("main"), _target("day10")]
    )
    assert list(days) == [2, 10]


def test_day_numbers_sort_numerically_not_lexically():
    """day10 sorts after day9."""
    days = days_from_targets([_target("day10"), _target("day9"), _target("day1")])
    assert list(days) == [1, 9, 10]


def test_leading_zeros_parse_to_the_same_day():
    """``day07`` is day 7."""
    days = days_from_targets([_target("day07")])
    assert list(days) == [7]


@pytest.mark.parametrize("name", ["day", "dayx", "day_3", "day-1", "day3a", "day+3"])
def test_malformed_day_name_is_an_error(name):
    """A ``day`` prefix without a number is rejected."""
    with pytest.raises(RegistryError, match=re.escape(name)):
        days_from_targets([_target("day1"), _target(name)])


def test_registry_error_is_a_configuration_error():
    """RegistryError is a kind of ConfigurationError."""
    assert issubclass(RegistryError, ConfigurationError)


def test_empty_workspace_gives_empty_registry():
    """No targets, no days."""
    assert days_from_targets([]) == {}


def test_list_days_reads_the_build_tool():
    """list_days builds the registry from the build tool's targets."""
    class _Cargo:
        def list_targets(self):
            return [_target("day3"), _target("day1")]

    assert list(list_days(_Cargo())) == [1, 3]
