"""Room records and the in-memory room directory."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pydantic import BaseModel

from ..bluejeans import Meeting


class RoomNotFoundError(LookupError):
    """Raised when no room matches a name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Room '{name}' not found")
        self.name = name


class Room(BaseModel):
    """A named meeting room."""

    name: str
    meeting: Meeting


class RoomDirectory:
    """Ordered collection of rooms from the last load.

    Names are not unique; lookups return the first match.
    """

    def __init__(self, rooms: Iterable[Room] | None = None) -> None:
        self._rooms: list[Room] = list(rooms) if rooms is not None else []

    @property
    def rooms(self) -> list[Room]:
        return list(self._rooms)

    def replace(self, rooms: list[Room]) -> None:
        """Swap in a new room list wholesale."""
        self._rooms = rooms

    def find(self, name: str) -> Room:
        """Find the first room whose name matches case-insensitively.

        Raises:
            RoomNotFoundError: If no room matches.
        """
        wanted = name.casefold()
        for room in self._rooms:
            if room.name.casefold() == wanted:
                return room
        raise RoomNotFoundError(name)

    def select(self, names: Iterable[str]) -> list[Room]:
        """Resolve several names, in the order given."""
        return [self.find(name) for name in names]

    def __len__(self) -> int:
        return len(self._rooms)

    def __iter__(self) -> Iterator[Room]:
        return iter(self._rooms)
