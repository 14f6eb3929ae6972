"""Tests for day resolution precedence."""

from __future__ import annotations

from pathlib import Path

import pytest

from cargo_aoc.core.day_resolver import CommandKind, resolve
from cargo_aoc.core.exceptions import NoDayError, ResolutionError

REGISTRY = {1: Path("day1.rs"), 4: Path("day4.rs"), 9: Path("day9.rs")}


@pytest.mark.parametrize("command", list(CommandKind))
def test_explicit_day_wins_over_registry(command):
    """An explicit day beats the latest registered day."""
    assert resolve(12, REGISTRY, command) == 12


@pytest.mark.parametrize("command", list(CommandKind))
def test_explicit_day_needs_no_registry(command):
    """An explicit day resolves even with no solutions."""
    assert resolve(3, {}, command) == 3


def test_explicit_day_zero_is_still_explicit():
    """Day 0 is a real value, not "missing"."""
    assert resolve(0, REGISTRY, CommandKind.RUN) == 0


@pytest.mark.parametrize("command", list(CommandKind))
def test_latest_day_is_the_fallback(command):
    """Without a day, the highest registered day is used."""
    assert resolve(None, REGISTRY, command) == 9


@pytest.mark.parametrize("command", [CommandKind.NEW, CommandKind.FETCH])
def test_bootstrap_commands_default_to_day_one(command):
    """new and fetch start at day 1 in an empty workspace."""
    assert resolve(None, {}, command) == 1


@pytest.mark.parametrize(
    "command", [CommandKind.OPEN, CommandKind.EDIT, CommandKind.RUN]
)
def test_other_commands_need_a_day(command):
    """open, edit and run refuse to guess in an empty workspace."""
    with pytest.raises(NoDayError, match=command.value):
        resolve(None, {}, command)


def test_no_day_error_is_a_resolution_error():
    """NoDayError is a kind of ResolutionError."""
    assert issubclass(NoDayError, ResolutionError)
