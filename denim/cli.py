"""Command line interface for denim."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import click
from loguru import logger

from . import __version__
from .config import DenimConfig, load_config, load_denim_env, resolve_app_home
from .rooms import (
    ExportError,
    LoadResult,
    RoomDirectory,
    RoomNotFoundError,
    export_vcards,
    load,
)
from .utils import console, print_load_result, print_rooms


def setup_logger(verbose: bool = False) -> Any:
    """Set up logger with appropriate level."""
    logger.remove()
    logger.add(
        sys.stderr,
        format="{level}: {message}",
        level="DEBUG" if verbose else "INFO",
    )

    return logger


def get_config_or_default() -> DenimConfig:
    """Load .env and config.yaml from the denim home, falling back to defaults."""
    app_home = resolve_app_home()
    if load_denim_env(app_home):
        logger.debug(f"Loaded environment from {app_home}/.env")
        # .env may have changed DENIM_HOME
        app_home = resolve_app_home()

    config = load_config(app_home)
    if config is None:
        logger.debug("No config.yaml found, using defaults")
        return DenimConfig()
    return config


def load_rooms(config: DenimConfig) -> tuple[RoomDirectory, LoadResult]:
    """Load the room directory, warning when the source was unusable."""
    directory = RoomDirectory()
    result = load(directory, config)
    if result.status == "no_source":
        logger.warning("No room source found; set DENIM_ROOMS, DENIM_HOME or HOME")
    elif result.status == "unreadable":
        logger.warning(f"Room source {result.source} could not be read")
    return directory, result


@click.group()
@click.version_option(version=__version__, prog_name="denim")
def cli() -> None:
    """Look up BlueJeans meeting rooms by name and export them as contacts.

    Rooms are read from $DENIM_ROOMS (a file path or URL), otherwise from
    $DENIM_HOME/rooms or ~/.denim/rooms. Each line holds a room name and a
    meeting id separated by whitespace.
    """


@cli.command(name="list")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def list_rooms(verbose: bool) -> None:
    """List all known rooms and their meeting URLs."""
    setup_logger(verbose)

    config = get_config_or_default()
    directory, _ = load_rooms(config)
    if len(directory) == 0:
        logger.info("No rooms found")
        return
    print_rooms(directory)


@cli.command()
@click.argument("room")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def show(room: str, verbose: bool) -> None:
    """Print the meeting URL of a room.

    ROOM: Name of the room (case-insensitive)
    """
    setup_logger(verbose)

    config = get_config_or_default()
    directory, _ = load_rooms(config)
    try:
        found = directory.find(room)
    except RoomNotFoundError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e
    console.print(found.meeting.url)


@cli.command(name="open")
@click.argument("room")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def open_room(room: str, verbose: bool) -> None:
    """Open the meeting of a room in the browser.

    ROOM: Name of the room (case-insensitive)
    """
    setup_logger(verbose)

    config = get_config_or_default()
    directory, _ = load_rooms(config)
    try:
        found = directory.find(room)
    except RoomNotFoundError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e

    logger.info(f"Opening {found.name}: {found.meeting.url}")
    click.launch(found.meeting.url)


@cli.command()
@click.argument(
    "destination",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--prefix",
    "-p",
    default=None,
    help="Prefix added to every contact name (default: export.prefix from config.yaml)",
)
@click.option(
    "--room",
    "-r",
    "room_names",
    multiple=True,
    help="Export only this room; may be given several times",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def export(
    destination: Path | None,
    prefix: str | None,
    room_names: tuple[str, ...],
    verbose: bool,
) -> None:
    """Export rooms as vCard contacts.

    DESTINATION: Path of the .vcf file to write (default: export.filename from config.yaml)
    """
    setup_logger(verbose)

    config = get_config_or_default()
    destination = destination or Path(config.export.filename)
    prefix = config.export.prefix if prefix is None else prefix

    directory, _ = load_rooms(config)
    try:
        rooms = directory.select(room_names) if room_names else directory.rooms
        path = export_vcards(
            rooms, destination, prefix=prefix, version=config.export.version
        )
    except RoomNotFoundError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e
    except ExportError as e:
        logger.error(f"Error exporting rooms: {e}")
        raise click.ClickException(str(e)) from e

    logger.info(f"Exported {len(rooms)} rooms to {path}")


@cli.command()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def source(verbose: bool) -> None:
    """Show where rooms are loaded from and whether loading works."""
    setup_logger(verbose)

    config = get_config_or_default()
    _, result = load_rooms(config)
    print_load_result(result)


if __name__ == "__main__":
    cli()
