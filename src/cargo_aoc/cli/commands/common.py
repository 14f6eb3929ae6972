"""Shared helpers for CLI commands."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

from cargo_aoc.config import Settings, default_browser, default_editor, settings
from cargo_aoc.core.cargo import Cargo
from cargo_aoc.core.context import AocContext, Workspace, find_workspace_root
from cargo_aoc.core.exceptions import AocError, ConfigurationError
from cargo_aoc.core.input_fetcher import InputFetcher
from cargo_aoc.core.launcher import ProcessLauncher
from cargo_aoc.core.orchestrator import CommandOrchestrator

logger = logging.getLogger(__name__)


def build_context(args: argparse.Namespace, cfg: Settings = settings) -> AocContext:
    """Fold settings and global arguments into one immutable context."""
    year = getattr(args, "year", None) or cfg.year
    if year is None:
        raise ConfigurationError("No puzzle year; set AOC_YEAR or pass --year")

    root = getattr(args, "workspace", None) or cfg.workspace or find_workspace_root()
    workspace = Workspace.at(
        Path(root).absolute(),
        template=cfg.template,
        inputs_dir=cfg.inputs_dir,
        units_dir=cfg.units_dir,
    )
    return AocContext(
        year=year,
        session=getattr(args, "session", None) or cfg.session or None,
        day=getattr(args, "day", None),
        workspace=workspace,
        editor=default_editor(cfg.editor),
        browser=default_browser(cfg.browser),
        base_url=cfg.base_url,
        part2_marker=cfg.part2_marker,
    )


def build_orchestrator(
    args: argparse.Namespace, cfg: Settings = settings
) -> CommandOrchestrator:
    ctx = build_context(args, cfg)
    return CommandOrchestrator(
        ctx,
        build_tool=Cargo(ctx.workspace.root),
        fetcher=InputFetcher(base_url=ctx.base_url, timeout=cfg.http_timeout),
        launcher=ProcessLauncher(),
    )


def run_command(
    args: argparse.Namespace, fn: Callable[[CommandOrchestrator], int | None]
) -> int:
    """Run one orchestrator call, turning AocError into exit code 1."""
    try:
        return int(fn(build_orchestrator(args)) or 0)
    except AocError as e:
        logger.debug("%s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1


def emit(payload: Any, fmt: str = "table") -> None:
    if fmt == "json":
        print(json.dumps(payload, ensure_ascii=False, indent=2, default=str))
        return

    if isinstance(payload, list):
        _print_rows(payload)
        return

    print(payload)


def _print_rows(rows: list[dict[str, Any]]) -> None:
    if not rows:
        print("(empty)")
        return

    keys: list[str] = []
    for row in rows:
        for key in row.keys():
            if key not in keys:
                keys.append(key)

    widths = {key: len(key) for key in keys}
    string_rows: list[dict[str, str]] = []
    for row in rows:
        rendered = {key: str(row.get(key, "")) for key in keys}
        for key, text in rendered.items():
            widths[key] = max(widths[key], len(text))
        string_rows.append(rendered)

    header = " | ".join(key.ljust(widths[key]) for key in keys)
    sep = "-+-".join("-" * widths[key] for key in keys)
    print(header)
    print(sep)
    for row in string_rows:
        print(" | ".join(row[key].ljust(widths[key]) for key in keys))
