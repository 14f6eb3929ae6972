"""Download puzzle inputs."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

import httpx

from cargo_aoc.core.exceptions import IoError, MissingCredentialError, NetworkError

logger = logging.getLogger(__name__)

USER_AGENT = "cargo-aoc"


def puzzle_url(base_url: str, year: int, day: int) -> str:
    return f"{base_url.rstrip('/')}/{year}/day/{day}"


def input_url(base_url: str, year: int, day: int) -> str:
    return f"{puzzle_url(base_url, year, day)}/input"


class InputFetcher:
    """Fetches one day's input per call and stores it as ``input_dir/day<N>``.

    The body is fully buffered and then swapped into place, so a failed
    request or write never leaves a truncated input behind.
    """

    def __init__(
        self,
        base_url: str = "https://adventofcode.com",
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url
        self._timeout = timeout
        self._transport = transport

    def fetch(
        self,
        year: int,
        day: int,
        input_dir: Path,
        credential: str | None,
    ) -> Path:
        """Download and store the input for ``year``/``day``.

        Returns:
            Path of the written input file.

        Raises:
            MissingCredentialError: No session credential.
            IoError: ``input_dir`` can't be created or the file can't be written.
            NetworkError: Request failed or returned a non-success status.
        """
        if not credential:
            raise MissingCredentialError(
                "No session credential; set AOC_SESSION or pass --session"
            )

        try:
            input_dir.mkdir(exist_ok=True)
        except OSError as e:
            raise IoError(f"Cannot create input directory {input_dir}: {e}") from e

        url = input_url(self._base_url, year, day)
        logger.info("Fetching %s", url)
        body = self._download(url, credential)

        target = input_dir / f"day{day}"
        _write_atomic(target, body)
        logger.info("Wrote %d bytes to %s", len(body), target)
        return target

    def _download(self, url: str, credential: str) -> bytes:
        headers = {
            "Cookie": f"session={credential}",
            "User-Agent": USER_AGENT,
        }
        try:
            with httpx.Client(
                timeout=self._timeout,
                transport=self._transport,
                headers=headers,
            ) as client:
                resp = client.get(url)
                resp.raise_for_status()
                return resp.content
        except httpx.HTTPStatusError as e:
            raise NetworkError(
                f"{url} returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise NetworkError(f"Request to {url} failed: {e}") from e


def _umask() -> int:
    # mkstemp creates 0600 files; inputs should follow the umask like open() does
    mask = os.umask(0)
    os.umask(mask)
    return mask


def _write_atomic(target: Path, data: bytes) -> None:
    try:
        fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.")
    except OSError as e:
        raise IoError(f"Cannot write {target}: {e}") from e
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.chmod(tmp_name, 0o666 & ~_umask())
        os.replace(tmp_name, target)
    except OSError as e:
        Path(tmp_name).unlink(missing_ok=True)
        raise IoError(f"Cannot write {target}: {e}") from e
