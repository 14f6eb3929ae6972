"""Per-day solution commands: new, run, fetch, open, edit, list."""

from __future__ import annotations

import argparse
from pathlib import Path

from cargo_aoc.cli.commands.common import emit, run_command
from cargo_aoc.core.context import NewOptions, Part, RunOptions
from cargo_aoc.core.day_registry import unit_name


def register(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
    parents: list[argparse.ArgumentParser],
) -> None:
    new = subparsers.add_parser(
        "new", parents=parents, help="Scaffold a day from the template"
    )
    new.add_argument(
        "--no-edit",
        "--create-only",
        dest="no_edit",
        action="store_true",
        help="Don't open the editor",
    )
    new.add_argument(
        "--no-open", action="store_true", help="Don't open the puzzle page"
    )
    new.add_argument(
        "--force", action="store_true", help="Overwrite an existing solution"
    )
    new.add_argument("--no-fetch", action="store_true", help="Don't fetch input")
    new.set_defaults(_handler=cmd_new)

    run = subparsers.add_parser(
        "run", parents=parents, help="Build and run a day's solution"
    )
    run.add_argument("--release", action="store_true", help="Build with --release")
    run.add_argument(
        "--part",
        type=int,
        choices=[int(p) for p in Part],
        help="Part to run (default: guessed from the source)",
    )
    run.add_argument(
        "--input", type=Path, help="Input file (default: inputs/day<N>)"
    )
    run.set_defaults(_handler=cmd_run)

    fetch = subparsers.add_parser(
        "fetch", parents=parents, help="Download a day's puzzle input"
    )
    fetch.set_defaults(_handler=cmd_fetch)

    open_cmd = subparsers.add_parser(
        "open", parents=parents, help="Open a day's puzzle page in the browser"
    )
    open_cmd.set_defaults(_handler=cmd_open)

    edit = subparsers.add_parser(
        "edit", parents=parents, help="Open a day's solution in the editor"
    )
    edit.set_defaults(_handler=cmd_edit)

    list_cmd = subparsers.add_parser(
        "list", parents=parents, help="List days that have a solution"
    )
    list_cmd.add_argument("--format", choices=["table", "json"], default="table")
    list_cmd.set_defaults(_handler=cmd_list)


def cmd_new(args: argparse.Namespace) -> int:
    options = NewOptions(
        no_edit=args.no_edit,
        no_open=args.no_open,
        force=args.force,
        no_fetch=args.no_fetch,
    )
    return run_command(args, lambda orch: orch.new(options))


def cmd_run(args: argparse.Namespace) -> int:
    options = RunOptions(
        release=args.release,
        part=Part(args.part) if args.part is not None else None,
        input=args.input,
    )
    return run_command(args, lambda orch: orch.run(options))


def cmd_fetch(args: argparse.Namespace) -> int:
    return run_command(args, lambda orch: orch.fetch())


def cmd_open(args: argparse.Namespace) -> int:
    return run_command(args, lambda orch: orch.open())


def cmd_edit(args: argparse.Namespace) -> int:
    return run_command(args, lambda orch: orch.edit())


def cmd_list(args: argparse.Namespace) -> int:
    def _list(orch) -> int:
        rows = [
            {"day": day, "unit": unit_name(day), "source": str(path)}
            for day, path in orch.registry().items()
        ]
        emit(rows, args.format)
        return 0

    return run_command(args, _list)
