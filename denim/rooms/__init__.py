"""Room directory: loading, lookup and vCard export."""

from .export import ExportError, export_vcards, read_vcards, room_to_vcard
from .loader import LoadResult, load, parse_rooms, read_source
from .models import Room, RoomDirectory, RoomNotFoundError

__all__ = [
    "Room",
    "RoomDirectory",
    "RoomNotFoundError",
    "LoadResult",
    "load",
    "parse_rooms",
    "read_source",
    "ExportError",
    "export_vcards",
    "read_vcards",
    "room_to_vcard",
]
