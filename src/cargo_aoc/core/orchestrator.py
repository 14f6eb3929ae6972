"""Command orchestrator: sequences registry, resolver, fetcher, launcher and cargo."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Mapping
from pathlib import Path
from typing import NoReturn

from cargo_aoc.core.cargo import Cargo
from cargo_aoc.core.context import AocContext, NewOptions, Part, RunOptions
from cargo_aoc.core.day_registry import list_days, unit_name
from cargo_aoc.core.day_resolver import CommandKind, resolve
from cargo_aoc.core.exceptions import (
    IoError,
    MissingSourceError,
    SourceExistsError,
    TemplateMissingError,
)
from cargo_aoc.core.input_fetcher import InputFetcher, puzzle_url
from cargo_aoc.core.launcher import ProcessLauncher

logger = logging.getLogger(__name__)


def choose_part(source: str, marker: str) -> Part:
    """Guess which part to run: part 1 while part 2 still carries ``marker``."""
    return Part.ONE if marker in source else Part.TWO


class CommandOrchestrator:
    """Runs exactly one command against one resolved day.

    Every method returns the process exit code for the invocation. Hard
    failures propagate as AocError subclasses; non-zero statuses from the
    browser or ``cargo run`` are returned, not raised.

    Key rules:
    - ``new`` and ``fetch`` default to day 1 in an empty workspace
    - ``open``, ``edit`` and ``run`` need an explicit day or an existing one
    - ``edit`` and ``new`` (unless ``no_edit``) end by exec'ing the editor
    """

    def __init__(
        self,
        context: AocContext,
        build_tool: Cargo,
        fetcher: InputFetcher,
        launcher: ProcessLauncher,
    ) -> None:
        self._ctx = context
        self._build_tool = build_tool
        self._fetcher = fetcher
        self._launcher = launcher

    def registry(self) -> dict[int, Path]:
        return list_days(self._build_tool)

    def _resolve(
        self, command: CommandKind, registry: Mapping[int, Path] | None = None
    ) -> int:
        # An explicit day needs no registry unless the command looks it up
        if registry is None and self._ctx.day is None:
            registry = self.registry()
        day = resolve(self._ctx.day, registry or {}, command)
        logger.debug("Resolved day %d for %s", day, command.value)
        return day

    def _lookup(self, day: int, registry: Mapping[int, Path]) -> Path:
        try:
            return registry[day]
        except KeyError:
            raise MissingSourceError(
                f"Day {day} has no solution yet; create it with 'new --day {day}'"
            ) from None

    def _open_browser(self, day: int) -> int:
        url = puzzle_url(self._ctx.base_url, self._ctx.year, day)
        return self._launcher.spawn_and_wait(self._ctx.browser, [url])

    def new(self, options: NewOptions) -> int:
        """Scaffold a day from the template, then fetch, browse and edit it.

        1. Resolve the day (day 1 if nothing exists yet).
        2. Refuse to clobber an existing solution unless ``force``.
        3. Copy the template into ``units_dir/day<N>.rs``.
        4. Fetch input, open the puzzle page, exec the editor (each skippable).

        Raises:
            TemplateMissingError: No template file at the workspace root.
            SourceExistsError: Target exists and ``force`` is not set.
            IoError: Copying the template failed.
        """
        workspace = self._ctx.workspace
        day = self._resolve(CommandKind.NEW)

        if not workspace.template.is_file():
            raise TemplateMissingError(f"Template {workspace.template} not found")

        target = workspace.source_path(day)
        if target.exists() and not options.force:
            raise SourceExistsError(
                f"{target} already exists; pass --force to overwrite it"
            )

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(workspace.template, target)
        except OSError as e:
            raise IoError(f"Cannot create {target}: {e}") from e
        logger.info("Created %s", target)

        if not options.no_fetch:
            self._fetcher.fetch(
                self._ctx.year, day, workspace.inputs_dir, self._ctx.session
            )

        if not options.no_open:
            self._open_browser(day)

        if not options.no_edit:
            self._launcher.replace_current_process(self._ctx.editor, [str(target)])
        return 0

    def open(self) -> int:
        day = self._resolve(CommandKind.OPEN)
        return self._open_browser(day)

    def edit(self) -> NoReturn:
        registry = self.registry()
        day = self._resolve(CommandKind.EDIT, registry)
        source = self._lookup(day, registry)
        self._launcher.replace_current_process(self._ctx.editor, [str(source)])

    def fetch(self) -> int:
        day = self._resolve(CommandKind.FETCH)
        self._fetcher.fetch(
            self._ctx.year, day, self._ctx.workspace.inputs_dir, self._ctx.session
        )
        return 0

    def run(self, options: RunOptions) -> int:
        """Build and run a day's solution; returns cargo's exit status.

        Without an explicit part, the source is searched for the part-2
        marker: present means part 2 isn't written yet, so part 1 runs.
        """
        registry = self.registry()
        day = self._resolve(CommandKind.RUN, registry)
        source = self._lookup(day, registry)

        part = options.part
        if part is None:
            try:
                text = source.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise IoError(f"Cannot read {source}: {e}") from e
            part = choose_part(text, self._ctx.part2_marker)
            logger.debug("No part given, picked part %d", part)

        # cargo runs from the workspace root; hand it absolute paths
        input_path = (options.input or self._ctx.workspace.input_path(day)).absolute()
        status = self._build_tool.run_target(
            unit_name(day), [str(int(part)), str(input_path)], release=options.release
        )
        if status != 0:
            logger.warning("Day %d part %d exited with status %d", day, part, status)
        return status
