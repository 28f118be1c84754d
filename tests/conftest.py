"""Shared fixtures for denim tests."""

from __future__ import annotations

import sys
from collections.abc import Iterator

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger() -> Iterator[None]:
    """Drop sinks bound to CliRunner streams once a test finishes."""
    yield
    logger.remove()
    logger.add(sys.stderr)
