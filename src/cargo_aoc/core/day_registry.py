"""Day registry: which puzzle days already have a solution unit."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path

from cargo_aoc.core.cargo import BuildTarget, Cargo
from cargo_aoc.core.exceptions import RegistryError

logger = logging.getLogger(__name__)

UNIT_PREFIX = "day"

_DIGITS = re.compile(r"[0-9]+")


def unit_name(day: int) -> str:
    return f"{UNIT_PREFIX}{day}"


def days_from_targets(targets: Iterable[BuildTarget]) -> dict[int, Path]:
    """Map day number to source path for every ``day<N>`` target.

    Targets without the ``day`` prefix are ignored. A prefixed name whose
    remainder is not a decimal number raises RegistryError.
    """
    days: dict[int, Path] = {}
    for target in targets:
        if not target.name.startswith(UNIT_PREFIX):
            continue
        suffix = target.name[len(UNIT_PREFIX):]
        if not _DIGITS.fullmatch(suffix):
            raise RegistryError(
                f"Binary target '{target.name}' looks like a day but "
                f"'{suffix}' is not a day number"
            )
        days[int(suffix)] = target.src_path
    return dict(sorted(days.items()))


def list_days(build_tool: Cargo) -> dict[int, Path]:
    """Build a fresh registry from the build tool's current targets."""
    days = days_from_targets(build_tool.list_targets())
    logger.debug("Found %d day(s): %s", len(days), list(days))
    return days
