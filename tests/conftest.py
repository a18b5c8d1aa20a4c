"""Pytest configuration and fixtures for json_path_toolkit tests."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

from json_path_toolkit.logger import reset_logger


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[..., Path]:
    """Factory that writes a JSON document (or raw text) to a temp file."""

    def _write(data: Any = None, *, raw: str | None = None, name: str = "doc.json") -> Path:
        path = tmp_path / name
        text = raw if raw is not None else json.dumps(data)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def clean_logger() -> Iterator[None]:
    """Leave the package logger unconfigured between tests."""
    yield
    reset_logger()
