"""Denim package.

A CLI tool to look up BlueJeans meeting rooms by name and export them as vCard contacts.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("denim")
except PackageNotFoundError:
    # source checkout that was never installed
    __version__ = "0.0.0"

__license__ = "MIT"

__all__ = [
    "__version__",
    "__license__",
]
