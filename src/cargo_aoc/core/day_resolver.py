"""Pick the day a command acts on."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from cargo_aoc.core.exceptions import NoDayError


class CommandKind(str, Enum):
    NEW = "new"
    FETCH = "fetch"
    OPEN = "open"
    EDIT = "edit"
    RUN = "run"


# Commands that can bootstrap day 1 from an empty workspace
_DEFAULT_DAY: dict[CommandKind, int] = {
    CommandKind.NEW: 1,
    CommandKind.FETCH: 1,
}


def resolve(
    explicit_day: int | None,
    registry: Mapping[int, Any],
    command: CommandKind,
) -> int:
    """Resolve the target day.

    Precedence: the explicit day (never checked against the registry), then
    the highest registered day, then the command's default. ``open``, ``edit``
    and ``run`` have no default.

    Raises:
        NoDayError: Nothing to fall back on.
    """
    if explicit_day is not None:
        return explicit_day
    if registry:
        return max(registry)
    default = _DEFAULT_DAY.get(command)
    if default is None:
        raise NoDayError(
            f"No day given and no solutions exist yet; pass --day to '{command.value}'"
        )
    return default
