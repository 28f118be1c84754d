"""Configuration management for denim.

This module resolves where rooms come from and loads settings from the
denim home directory (``$DENIM_HOME`` or ``~/.denim``).
"""

from .env_loader import (
    is_url,
    load_denim_env,
    resolve_app_home,
    resolve_source,
)
from .loader import load_config, save_config
from .schema import DenimConfig, ExportConfig, FetchConfig, MeetingConfig

__all__ = [
    "DenimConfig",
    "MeetingConfig",
    "FetchConfig",
    "ExportConfig",
    "load_config",
    "save_config",
    "load_denim_env",
    "resolve_app_home",
    "resolve_source",
    "is_url",
]
