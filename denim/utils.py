"""Console output helpers for denim."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.table import Table

from .rooms import LoadResult, Room

console = Console()


def print_rooms(rooms: Iterable[Room]) -> None:
    """Print rooms as a table of names and meeting URLs."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("Room", style="bold cyan")
    table.add_column("Meeting URL")
    for room in rooms:
        table.add_row(room.name, room.meeting.url)
    console.print(table)


def print_load_result(result: LoadResult) -> None:
    """Print where rooms were loaded from and how it went."""
    source = result.source or "[dim](none)[/]"
    console.print(f"[bold]Source:[/] {source}")
    console.print(
        f"[bold]Status:[/] {result.status}, {result.rooms} rooms, "
        f"{result.bad_lines} skipped lines"
    )
    if result.error:
        console.print(f"[bold red]Error:[/] {result.error}")
