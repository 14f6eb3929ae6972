"""Cargo integration: enumerate binary targets and run one of them."""

from __future__ import annotations

import json
import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from cargo_aoc.core.exceptions import BuildError, LaunchError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildTarget:
    name: str
    src_path: Path


class Cargo:
    """Thin wrapper over the ``cargo`` executable for one workspace."""

    def __init__(self, root: Path, program: str = "cargo") -> None:
        self._root = root
        self._program = program

    def list_targets(self) -> list[BuildTarget]:
        """Return every binary target of the workspace's packages.

        Raises:
            LaunchError: cargo is not installed.
            BuildError: ``cargo metadata`` failed or printed something unexpected.
        """
        cmd = [
            self._program,
            "metadata",
            "--format-version",
            "1",
            "--no-deps",
            "--manifest-path",
            str(self._root / "Cargo.toml"),
        ]
        logger.debug("Running %s", " ".join(cmd))
        try:
            proc = subprocess.run(cmd, capture_output=True, text=True, check=False)
        except OSError as e:
            raise LaunchError(f"Could not start {self._program}: {e}") from e

        if proc.returncode != 0:
            raise BuildError(
                f"cargo metadata exited with {proc.returncode}: {proc.stderr.strip()}"
            )
        return parse_metadata(proc.stdout)

    def run_target(
        self, name: str, args: Sequence[str], release: bool = False
    ) -> int:
        """Build and run binary ``name``, passing ``args`` through to it."""
        cmd = [self._program, "run", "--bin", name]
        if release:
            cmd.append("--release")
        cmd += ["--", *args]
        logger.info("Running %s", " ".join(cmd))
        try:
            return subprocess.call(cmd, cwd=str(self._root))
        except OSError as e:
            raise LaunchError(f"Could not start {self._program}: {e}") from e


def parse_metadata(raw: str) -> list[BuildTarget]:
    """Extract binary targets from ``cargo metadata`` JSON output."""
    try:
        metadata = json.loads(raw)
        targets = [
            BuildTarget(name=target["name"], src_path=Path(target["src_path"]))
            for package in metadata["packages"]
            for target in package["targets"]
            if "bin" in target["kind"]
        ]
    except (ValueError, KeyError, TypeError) as e:
        raise BuildError(f"Unexpected cargo metadata output: {e}") from e
    return targets
