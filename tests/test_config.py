"""Tests for source resolution and configuration loading."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from denim.config import (
    DenimConfig,
    is_url,
    load_config,
    load_denim_env,
    resolve_app_home,
    resolve_source,
    save_config,
)


class TestResolveSource:
    """Test resolve_source precedence."""

    def test_empty_all_around(self) -> None:
        """Test that nothing configured resolves to an empty string."""
        env = {"DENIM_ROOMS": "", "DENIM_HOME": "", "HOME": ""}
        assert resolve_source(env) == ""

    def test_missing_variables(self) -> None:
        """Test that unset variables behave like empty ones."""
        assert resolve_source({}) == ""

    def test_default_to_home(self, tmp_path: Path) -> None:
        """Test fallback to ~/.denim/rooms."""
        home = str(tmp_path / "user")
        env = {"DENIM_ROOMS": "", "DENIM_HOME": "", "HOME": home}
        assert resolve_source(env) == home + "/.denim/rooms"

    def test_override_with_denim_home(self, tmp_path: Path) -> None:
        """Test that DENIM_HOME beats HOME."""
        home = str(tmp_path / "user")
        app = str(tmp_path / "app")
        env = {"DENIM_ROOMS": "", "DENIM_HOME": app, "HOME": home}
        assert resolve_source(env) == app + "/rooms"

    def test_override_with_rooms_file(self, tmp_path: Path) -> None:
        """Test that DENIM_ROOMS is returned verbatim for a path."""
        app = str(tmp_path / "app")
        env = {
            "DENIM_ROOMS": app + "/rooms",
            "DENIM_HOME": app,
            "HOME": str(tmp_path / "user"),
        }
        assert resolve_source(env) == app + "/rooms"

    def test_override_with_rooms_url(self, tmp_path: Path) -> None:
        """Test that DENIM_ROOMS is returned verbatim for a URL."""
        env = {
            "DENIM_ROOMS": "http://localhost:8080/rooms",
            "DENIM_HOME": str(tmp_path / "app"),
            "HOME": str(tmp_path / "user"),
        }
        assert resolve_source(env) == "http://localhost:8080/rooms"

    def test_reads_process_environment_by_default(self) -> None:
        """Test that os.environ is used when no mapping is given."""
        with patch.dict(os.environ, {"DENIM_ROOMS": "/tmp/rooms"}, clear=True):
            assert resolve_source() == "/tmp/rooms"


class TestIsURL:
    """Test is_url."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("", False),
            ("/foo", False),
            ("relative/rooms", False),
            ("ftp://foo.co/bar", False),
            ("http://foo.co/bar", True),
            ("https://foo.co/bar", True),
        ],
    )
    def test_is_url(self, source: str, expected: bool) -> None:
        """Test that only http(s) prefixes count as URLs."""
        assert is_url(source) is expected


class TestResolveAppHome:
    """Test resolve_app_home."""

    def test_denim_home(self, tmp_path: Path) -> None:
        """Test that DENIM_HOME is used as is."""
        env = {"DENIM_HOME": str(tmp_path), "HOME": "/home/someone"}
        assert resolve_app_home(env) == tmp_path

    def test_user_home(self, tmp_path: Path) -> None:
        """Test fallback to ~/.denim."""
        assert resolve_app_home({"HOME": str(tmp_path)}) == tmp_path / ".denim"

    def test_nothing_set(self) -> None:
        """Test that no home resolves to None."""
        assert resolve_app_home({}) is None


class TestLoadDenimEnv:
    """Test load_denim_env."""

    def test_none_home(self) -> None:
        """Test that a missing home loads nothing."""
        assert load_denim_env(None) is False

    def test_missing_env_file(self, tmp_path: Path) -> None:
        """Test that a home without .env loads nothing."""
        assert load_denim_env(tmp_path) is False

    def test_loads_without_override(self, tmp_path: Path) -> None:
        """Test that .env fills unset variables only."""
        (tmp_path / ".env").write_text(
            "DENIM_ROOMS=https://example.com/rooms\nDENIM_HOME=/elsewhere\n"
        )
        with patch.dict(os.environ, {"DENIM_HOME": str(tmp_path)}, clear=True):
            assert load_denim_env(tmp_path) is True
            assert os.environ["DENIM_ROOMS"] == "https://example.com/rooms"
            assert os.environ["DENIM_HOME"] == str(tmp_path)


class TestLoadConfig:
    """Test config.yaml loading."""

    def test_no_home(self) -> None:
        """Test that no home gives no config."""
        assert load_config(None) is None

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing config.yaml gives no config."""
        assert load_config(tmp_path) is None

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test that an empty config.yaml gives no config."""
        (tmp_path / "config.yaml").write_text("")
        assert load_config(tmp_path) is None

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test that broken YAML gives no config."""
        (tmp_path / "config.yaml").write_text("export: [unclosed\n")
        assert load_config(tmp_path) is None

    def test_invalid_values(self, tmp_path: Path) -> None:
        """Test that values failing validation give no config."""
        (tmp_path / "config.yaml").write_text("fetch:\n  timeout: -1\n")
        assert load_config(tmp_path) is None

    def test_partial_config(self, tmp_path: Path) -> None:
        """Test that missing sections keep their defaults."""
        (tmp_path / "config.yaml").write_text(
            "export:\n  prefix: bj-\nunknown:\n  key: value\n"
        )
        config = load_config(tmp_path)

        assert config is not None
        assert config.export.prefix == "bj-"
        assert config.export.filename == "rooms.vcf"
        assert config.meeting.base_url == "https://bluejeans.com"
        assert config.fetch.timeout == 10.0

    def test_save_and_load(self, tmp_path: Path) -> None:
        """Test that a saved config loads back equal."""
        config = DenimConfig()
        config.export.prefix = "room-"
        config.fetch.timeout = 3.5

        path = save_config(config, tmp_path / "home")

        assert path == tmp_path / "home" / "config.yaml"
        assert load_config(tmp_path / "home") == config
