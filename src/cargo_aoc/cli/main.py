"""Argument-based CLI entrypoint for cargo-aoc."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from cargo_aoc.cli.commands import solutions
from cargo_aoc.logging_config import setup_logging

# cargo runs `cargo-aoc aoc <args>` for `cargo aoc <args>`
_CARGO_SUBCOMMAND = "aoc"


def _day(value: str) -> int:
    day = int(value)
    if day < 0:
        raise argparse.ArgumentTypeError(f"day must not be negative: {value}")
    return day


def _global_options() -> argparse.ArgumentParser:
    # SUPPRESS keeps a subcommand's copy from overwriting values given earlier
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--year", type=int, default=argparse.SUPPRESS, help="Puzzle year (AOC_YEAR)"
    )
    common.add_argument(
        "--session",
        default=argparse.SUPPRESS,
        help="Session cookie for input downloads (AOC_SESSION)",
    )
    common.add_argument(
        "-d", "--day", type=_day, default=argparse.SUPPRESS, help="Day to act on"
    )
    common.add_argument(
        "--workspace",
        type=Path,
        default=argparse.SUPPRESS,
        help="Project root (default: nearest directory with Cargo.toml)",
    )
    return common


def _build_parser() -> argparse.ArgumentParser:
    common = _global_options()
    parser = argparse.ArgumentParser(
        prog="cargo aoc",
        description="Scaffold, fetch, open, edit and run Advent of Code days.",
        parents=[common],
    )
    subparsers = parser.add_subparsers(dest="command")

    solutions.register(subparsers, parents=[common])
    return parser


def _strip_cargo_subcommand(argv: Sequence[str]) -> list[str]:
    argv = list(argv)
    if argv and argv[0] == _CARGO_SUBCOMMAND:
        return argv[1:]
    return argv


def main(argv: Sequence[str] | None = None) -> None:
    setup_logging()
    parser = _build_parser()
    args = parser.parse_args(
        _strip_cargo_subcommand(sys.argv[1:] if argv is None else argv)
    )
    if not getattr(args, "command", None):
        parser.print_help()
        raise SystemExit(0)

    handler = getattr(args, "_handler", None)
    if handler is None:
        parser.print_help()
        raise SystemExit(1)

    code = int(handler(args) or 0)
    raise SystemExit(code)


if __name__ == "__main__":
    main()
