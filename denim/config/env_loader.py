"""Environment handling: room source resolution and app-home .env files."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import load_dotenv

ROOMS_ENV = "DENIM_ROOMS"
HOME_ENV = "DENIM_HOME"
USER_HOME_ENV = "HOME"

URL_SCHEMES = ("http://", "https://")


def resolve_source(environ: Mapping[str, str] | None = None) -> str:
    """Work out where the room list should be loaded from.

    Precedence, highest first: ``$DENIM_ROOMS`` verbatim, ``$DENIM_HOME/rooms``,
    ``$HOME/.denim/rooms``. Empty variables count as unset.

    Args:
        environ: Mapping to read variables from. Defaults to ``os.environ``.

    Returns:
        A file path or URL, or an empty string when nothing is configured.
    """
    env = os.environ if environ is None else environ

    rooms = env.get(ROOMS_ENV, "")
    if rooms:
        return rooms

    app_home = env.get(HOME_ENV, "")
    if app_home:
        return app_home + "/rooms"

    user_home = env.get(USER_HOME_ENV, "")
    if user_home:
        return user_home + "/.denim/rooms"

    return ""


def is_url(source: str) -> bool:
    """Return True if the source is an http(s) URL rather than a path."""
    return source.startswith(URL_SCHEMES)


def resolve_app_home(environ: Mapping[str, str] | None = None) -> Path | None:
    """Return the denim home directory: ``$DENIM_HOME`` or ``$HOME/.denim``."""
    env = os.environ if environ is None else environ

    app_home = env.get(HOME_ENV, "")
    if app_home:
        return Path(app_home)

    user_home = env.get(USER_HOME_ENV, "")
    if user_home:
        return Path(user_home) / ".denim"

    return None


def load_denim_env(app_home: Path | str | None) -> bool:
    """Load environment variables from ``.env`` in the denim home directory.

    Variables that are already set are left untouched.

    Args:
        app_home: Path to the denim home directory. If None, returns False
            without loading any environment variables.

    Returns:
        True if .env file was found and loaded, False otherwise.
    """
    if app_home is None:
        return False

    env_path = Path(app_home) / ".env"

    if not env_path.exists():
        return False

    load_dotenv(env_path.resolve(), override=False)
    return True
