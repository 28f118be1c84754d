"""Loading the room list from a file or URL."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from functools import partial
from pathlib import Path
from typing import Literal

import requests
from loguru import logger
from pydantic import BaseModel

from .. import bluejeans
from ..bluejeans import Meeting
from ..config import DenimConfig, is_url, resolve_source
from .models import Room, RoomDirectory

MeetingProvider = Callable[[str], Meeting]

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class LoadResult(BaseModel):
    """Outcome of a load, so callers can tell an empty source from a failed one."""

    source: str
    status: Literal["loaded", "no_source", "unreadable"]
    rooms: int = 0
    bad_lines: int = 0
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "loaded"


def read_source(source: str, timeout: float) -> str:
    """Read the raw room list from a URL or local file.

    Raises:
        requests.RequestException: If the URL cannot be fetched.
        OSError: If the file cannot be read.
    """
    if is_url(source):
        response = requests.get(source, timeout=timeout)
        response.raise_for_status()
        return response.text

    with Path(source).open("r", encoding="utf-8") as f:
        return f.read()


def parse_rooms(text: str, provider: MeetingProvider) -> tuple[list[Room], int]:
    """Parse ``<name> <meeting-id> [ignored...]`` lines into rooms.

    Lines end at LF, CRLF or CR only; other Unicode separators such as form
    feed stay inside a line and act as column whitespace. Blank lines are
    skipped. Lines with fewer than two columns are dropped.

    Returns:
        Tuple of (rooms in source order, number of dropped lines).
    """
    rooms: list[Room] = []
    bad_lines = 0

    for lineno, line in enumerate(_LINE_BREAK.split(text), start=1):
        line = line.strip()
        if not line:
            continue

        fields = line.split()
        if len(fields) < 2:
            bad_lines += 1
            logger.debug(f"Skipping malformed line {lineno}: {line!r}")
            continue

        rooms.append(Room(name=fields[0], meeting=provider(fields[1])))

    return rooms, bad_lines


def load(
    directory: RoomDirectory,
    config: DenimConfig | None = None,
    environ: Mapping[str, str] | None = None,
) -> LoadResult:
    """Load rooms from the resolved source into the directory.

    The directory is always replaced. If the source is missing or cannot be
    read it ends up empty and the result status says why.

    Args:
        directory: Directory to populate.
        config: Optional configuration object.
        environ: Mapping to resolve the source from. Defaults to ``os.environ``.

    Returns:
        LoadResult describing what happened.
    """
    config = config or DenimConfig()
    provider = partial(bluejeans.new, base_url=config.meeting.base_url)

    source = resolve_source(environ)
    if not source:
        logger.debug("No room source configured")
        directory.replace([])
        return LoadResult(source=source, status="no_source")

    try:
        text = read_source(source, config.fetch.timeout)
    except (OSError, UnicodeDecodeError, requests.RequestException) as e:
        logger.warning(f"Could not read rooms from {source}: {e}")
        directory.replace([])
        return LoadResult(source=source, status="unreadable", error=str(e))

    rooms, bad_lines = parse_rooms(text, provider)
    directory.replace(rooms)
    logger.debug(f"Loaded {len(rooms)} rooms from {source} ({bad_lines} bad lines)")

    return LoadResult(
        source=source, status="loaded", rooms=len(rooms), bad_lines=bad_lines
    )
