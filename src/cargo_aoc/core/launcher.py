"""Start external programs (browser, editor)."""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
import sys
from collections.abc import Sequence
from typing import NoReturn

from cargo_aoc.core.exceptions import LaunchError

logger = logging.getLogger(__name__)


def _argv(program: str, args: Sequence[str]) -> list[str]:
    argv = [*shlex.split(program), *args]
    if not argv:
        raise LaunchError("No program configured")
    return argv


class ProcessLauncher:
    """Runs a program either as a waited-on child or in place of this process."""

    def spawn_and_wait(self, program: str, args: Sequence[str]) -> int:
        """Run ``program`` with ``args`` and return its exit status.

        A non-zero status is returned as-is; only a failure to start raises.
        """
        argv = _argv(program, args)
        logger.info("Launching %s", shlex.join(argv))
        try:
            status = subprocess.call(argv)
        except OSError as e:
            raise LaunchError(f"Could not start {argv[0]}: {e}") from e
        if status != 0:
            logger.warning("%s exited with status %d", argv[0], status)
        return status

    def replace_current_process(self, program: str, args: Sequence[str]) -> NoReturn:
        """Hand the terminal to ``program``; never returns on success.

        Windows has no exec that keeps the console attached the same way, so
        there the program runs as a child on our standard streams and this
        process exits with its status.
        """
        argv = _argv(program, args)
        logger.info("Handing over to %s", shlex.join(argv))
        sys.stdout.flush()
        sys.stderr.flush()

        if os.name == "nt":
            sys.exit(self.spawn_and_wait(program, args))

        try:
            os.execvp(argv[0], argv)
        except OSError as e:
            raise LaunchError(f"Could not start {argv[0]}: {e}") from e
