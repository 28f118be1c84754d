"""vCard export of rooms."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import vobject
from loguru import logger
from vobject.base import VObjectError
from vobject.vcard import Name

from .models import Room

PRODID = "-//denim//EN"


class ExportError(Exception):
    """Raised when rooms cannot be written as vCards."""


def room_to_vcard(
    room: Room, prefix: str = "", version: str = "3.0"
) -> vobject.base.Component:
    """Build a vCard for a room, with the prefix applied to the display name."""
    card = vobject.vCard()
    card.add("version").value = version
    card.add("prodid").value = PRODID
    card.add("fn").value = prefix + room.name
    card.add("n").value = Name(given=room.name)
    card.add("url").value = room.meeting.url
    return card


def export_vcards(
    rooms: Iterable[Room],
    destination: Path | str,
    prefix: str = "",
    version: str = "3.0",
) -> Path:
    """Write one vCard per room to destination, in order.

    The file is created or truncated. A failure part-way leaves whatever was
    already written.

    Args:
        rooms: Rooms to export, e.g. a RoomDirectory or a selection from it.
        destination: Path of the .vcf file to write.
        prefix: Prepended to each room name in the FN field.
        version: vCard version to declare.

    Returns:
        Path of the written file.

    Raises:
        ExportError: If the file cannot be written or a card cannot be encoded.
    """
    path = Path(destination)
    count = 0

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="") as f:
            for room in rooms:
                try:
                    card = room_to_vcard(room, prefix, version).serialize()
                except (VObjectError, ValueError, TypeError) as e:
                    raise ExportError(
                        f"Could not encode room '{room.name}' for {path}: {e}"
                    ) from e
                f.write(card)
                count += 1
    except OSError as e:
        raise ExportError(f"Could not write {path}: {e}") from e

    logger.debug(f"Exported {count} rooms to {path}")
    return path


def read_vcards(path: Path | str) -> list[tuple[str | None, str | None]]:
    """Decode a vCard file into ``(formatted name, url)`` pairs.

    Cards without an FN or URL property give None in that position.
    """
    text = Path(path).read_text(encoding="utf-8")
    pairs: list[tuple[str | None, str | None]] = []
    for card in vobject.readComponents(text):
        fn = getattr(card, "fn", None)
        url = getattr(card, "url", None)
        pairs.append(
            (
                fn.value if fn is not None else None,
                url.value if url is not None else None,
            )
        )
    return pairs
