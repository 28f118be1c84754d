"""Configuration loader for denim."""

from __future__ import annotations

from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from .schema import DenimConfig

CONFIG_FILENAME = "config.yaml"


def load_config(app_home: Path | None) -> DenimConfig | None:
    """Load configuration from config.yaml in the denim home directory.

    Args:
        app_home: Path to the denim home directory.

    Returns:
        DenimConfig object if config.yaml exists and is valid, None otherwise.
    """
    if app_home is None:
        return None

    config_path = app_home / CONFIG_FILENAME
    if not config_path.exists():
        return None

    try:
        with config_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Ignoring unreadable config {config_path}: {e}")
        return None

    if not isinstance(data, dict):
        return None

    try:
        return DenimConfig.from_dict(data)
    except ValidationError as e:
        logger.warning(f"Ignoring invalid config {config_path}: {e}")
        return None


def save_config(config: DenimConfig, app_home: Path) -> Path:
    """Save configuration to config.yaml in the denim home directory.

    Args:
        config: DenimConfig object to save.
        app_home: Path to the denim home directory.

    Returns:
        Path of the written config file.
    """
    config_path = app_home / CONFIG_FILENAME
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(config.to_yaml(), encoding="utf-8")
    return config_path
