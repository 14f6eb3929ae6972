"""Immutable values resolved once at startup and handed to every component."""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path

from pydantic import BaseModel


class Part(IntEnum):
    ONE = 1
    TWO = 2


class Workspace(BaseModel):
    """On-disk layout of a solutions project.

    ``root`` is the directory holding ``Cargo.toml``. Solutions live in
    ``units_dir/day<N>.rs`` and raw puzzle inputs in ``inputs_dir/day<N>``.
    """

    root: Path
    inputs_dir: Path
    template: Path
    units_dir: Path

    model_config = {"frozen": True}

    @classmethod
    def at(
        cls,
        root: Path,
        template: str = "template.rs",
        inputs_dir: str = "inputs",
        units_dir: str = "src/bin",
    ) -> Workspace:
        return cls(
            root=root,
            inputs_dir=root / inputs_dir,
            template=root / template,
            units_dir=root / units_dir,
        )

    def source_path(self, day: int) -> Path:
        return self.units_dir / f"day{day}.rs"

    def input_path(self, day: int) -> Path:
        return self.inputs_dir / f"day{day}"


class AocContext(BaseModel):
    """Everything a single invocation needs to know about its environment."""

    year: int
    session: str | None = None
    day: int | None = None
    workspace: Workspace
    editor: str = "vi"
    browser: str = "xdg-open"
    base_url: str = "https://adventofcode.com"
    part2_marker: str = "todo!()"

    model_config = {"frozen": True}


class NewOptions(BaseModel):
    no_edit: bool = False
    no_open: bool = False
    force: bool = False
    no_fetch: bool = False

    model_config = {"frozen": True}


class RunOptions(BaseModel):
    release: bool = False
    part: Part | None = None
    input: Path | None = None

    model_config = {"frozen": True}


def find_workspace_root(start: Path | None = None) -> Path:
    """Locate the nearest ancestor of ``start`` containing ``Cargo.toml``."""
    here = (start or Path.cwd()).resolve()
    for ancestor in (here, *here.parents):
        if (ancestor / "Cargo.toml").exists():
            return ancestor
    return here
