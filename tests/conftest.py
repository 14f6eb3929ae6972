"""Pytest fixtures for cargo-aoc tests.

Cargo, the network and external programs are replaced with recording fakes;
the workspace is a real directory under ``tmp_path``.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from cargo_aoc.core.cargo import BuildTarget
from cargo_aoc.core.context import AocContext, Workspace
from cargo_aoc.core.orchestrator import CommandOrchestrator

TEMPLATE = """\
fn part1(input: &str) -> usize {
    todo!()
}

fn part2(input: &str) -> usize {
    todo!()
}
"""


class FakeCargo:
    """Serves a fixed target list and records ``run_target`` calls."""

    def __init__(self, targets: list[BuildTarget], status: int = 0) -> None:
        self.targets = targets
        self.status = status
        self.list_calls = 0
        self.runs: list[tuple[str, list[str], bool]] = []

    def list_targets(self) -> list[BuildTarget]:
        self.list_calls += 1
        return list(self.targets)

    def run_target(self, name, args, release=False) -> int:
        self.runs.append((name, list(args), release))
        return self.status


class FakeFetcher:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls: list[tuple[int, int, Path, str | None]] = []

    def fetch(self, year, day, input_dir, credential) -> Path:
        self.calls.append((year, day, input_dir, credential))
        if self.error is not None:
            raise self.error
        return input_dir / f"day{day}"


class FakeLauncher:
    """Records launches; replacing the process ends it with SystemExit(0)."""

    def __init__(self, status: int = 0, error: Exception | None = None) -> None:
        self.status = status
        self.error = error
        self.spawned: list[tuple[str, list[str]]] = []
        self.replaced: list[tuple[str, list[str]]] = []

    def spawn_and_wait(self, program, args) -> int:
        if self.error is not None:
            raise self.error
        self.spawned.append((program, list(args)))
        return self.status

    def replace_current_process(self, program, args):
        self.replaced.append((program, list(args)))
        raise SystemExit(0)


@pytest.fixture
def workspace(tmp_path: Path) -> Workspace:
    """A solutions project with Cargo.toml and a template, but no days yet."""
    (tmp_path / "Cargo.toml").write_text('[package]\nname = "aoc"\n')
    (tmp_path / "template.rs").write_text(TEMPLATE)
    return Workspace.at(tmp_path)


@pytest.fixture
def add_day(workspace: Workspace):
    """Create ``src/bin/day<N>.rs`` with the given source and return its target."""

    def _add(day: int, source: str = TEMPLATE) -> BuildTarget:
        path = workspace.source_path(day)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source)
        return BuildTarget(name=f"day{day}", src_path=path)

    return _add


@pytest.fixture
def make_context(workspace: Workspace):
    def _make(**overrides) -> AocContext:
        values = {
            "year": 2023,
            "session": "s3cr3t",
            "workspace": workspace,
            "editor": "nvim",
            "browser": "firefox",
        }
        values.update(overrides)
        return AocContext(**values)

    return _make


@pytest.fixture
def make_orchestrator(make_context, add_day):
    """Build an orchestrator over fakes.

    Returns ``(orchestrator, cargo, fetcher, launcher)``. ``days`` maps day
    number to source text; each becomes a file and a ``day<N>`` target.
    """

    def _make(
        days: dict[int, str] | None = None,
        *,
        run_status: int = 0,
        browser_status: int = 0,
        fetch_error: Exception | None = None,
        launch_error: Exception | None = None,
        extra_targets: list[BuildTarget] | None = None,
        **ctx_overrides,
    ):
        targets = [add_day(day, source) for day, source in (days or {}).items()]
        targets += extra_targets or []
        cargo = FakeCargo(targets, status=run_status)
        fetcher = FakeFetcher(error=fetch_error)
        launcher = FakeLauncher(status=browser_status, error=launch_error)
        orch = CommandOrchestrator(
            make_context(**ctx_overrides), cargo, fetcher, launcher
        )
        return orch, cargo, fetcher, launcher

    return _make
