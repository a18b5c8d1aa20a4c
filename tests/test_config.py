"""Tests for config and logger modules."""

from __future__ import annotations

import io
import logging
import os
from pathlib import Path

import pytest

from json_path_toolkit.config import (
    ENV_DEFAULT_VALUE,
    ENV_FOLDER,
    ENV_VERBOSITY,
    ToolkitSettings,
    load_settings,
)
from json_path_toolkit.logger import get_logger, reset_logger, setup_logger


class TestLoadSettings:
    """Tests for load_settings."""

    @pytest.fixture(autouse=True)
    def clear_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in (ENV_VERBOSITY, ENV_FOLDER, ENV_DEFAULT_VALUE):
            monkeypatch.delenv(name, raising=False)

    def test_defaults(self) -> None:
        """Without environment variables the defaults apply."""
        assert load_settings(load_env_file=False) == ToolkitSettings()

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Environment variables populate the settings."""
        monkeypatch.setenv(ENV_VERBOSITY, " 2 ")
        monkeypatch.setenv(ENV_FOLDER, "/var/app")
        monkeypatch.setenv(ENV_DEFAULT_VALUE, "n/a")

        settings = load_settings(load_env_file=False)

        assert settings == ToolkitSettings(verbosity=2, default_folder="/var/app", default_value="n/a")

    @pytest.mark.parametrize(("raw", "expected"), [("loud", 0), ("-3", 0), ("", 0), ("1", 1)])
    def test_verbosity_parsing(self, raw: str, expected: int, monkeypatch: pytest.MonkeyPatch) -> None:
        """Invalid or negative verbosity falls back to 0."""
        monkeypatch.setenv(ENV_VERBOSITY, raw)
        assert load_settings(load_env_file=False).verbosity == expected

    def test_env_file_loaded(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """A .env file in the working directory is read."""
        (tmp_path / ".env").write_text(f"{ENV_FOLDER}=/from/dotenv\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        try:
            assert load_settings().default_folder == "/from/dotenv"
        finally:
            # load_dotenv writes to os.environ directly
            os.environ.pop(ENV_FOLDER, None)


class TestLogger:
    """Tests for setup_logger and reset_logger."""

    @pytest.mark.parametrize(
        ("verbosity", "level"),
        [(0, logging.ERROR), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
    )
    def test_verbosity_levels(self, verbosity: int, level: int) -> None:
        """Verbosity maps onto logging levels."""
        setup_logger(verbosity, io.StringIO())
        assert get_logger().level == level

    def test_child_loggers_write_to_stream(self) -> None:
        """Module loggers propagate to the configured handler."""
        stream = io.StringIO()
        setup_logger(1, stream)

        get_logger("paths").info("hello %s", "there")

        assert "hello there" in stream.getvalue()

    def test_reconfigure_replaces_handler(self) -> None:
        """Calling setup_logger twice keeps a single handler."""
        setup_logger(1, io.StringIO())
        setup_logger(2, io.StringIO())
        assert len(get_logger().handlers) == 1

    def test_reset(self) -> None:
        """reset_logger removes handlers."""
        setup_logger(2, io.StringIO())
        reset_logger()
        assert get_logger().handlers == []
