"""Application configuration via environment variables."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic_settings import BaseSettings

# Load .env from the directory cargo-aoc is run in (usually the workspace root)
load_dotenv(find_dotenv(usecwd=True))


class Settings(BaseSettings):
    """cargo-aoc configuration."""

    # Puzzle site
    year: int | None = None
    session: str = ""  # Empty = no credential, fetch refuses to run
    base_url: str = "https://adventofcode.com"
    http_timeout: float | None = None  # None = wait as long as the server takes

    # Workspace layout
    workspace: Path | None = None  # None = nearest ancestor with Cargo.toml
    template: str = "template.rs"
    inputs_dir: str = "inputs"
    units_dir: str = "src/bin"

    # External programs
    editor: str = ""  # Empty = $VISUAL, then $EDITOR, then vi
    browser: str = ""  # Empty = platform opener

    # `run` picks part 1 while this text is still in the source
    part2_marker: str = "todo!()"

    # Logging
    log_level: str = "INFO"  # DEBUG | INFO | WARNING | ERROR
    log_format: str = "text"  # "text" | "json"

    model_config = {"env_prefix": "AOC_", "env_file": ".env", "frozen": True}


def default_editor(configured: str = "") -> str:
    return (
        configured
        or os.environ.get("VISUAL")
        or os.environ.get("EDITOR")
        or "vi"
    )


def default_browser(configured: str = "") -> str:
    if configured:
        return configured
    if sys.platform == "darwin":
        return "open"
    if sys.platform.startswith("win"):
        return "explorer"
    return "xdg-open"


settings = Settings()
