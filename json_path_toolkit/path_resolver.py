"""Normalize filesystem paths and prepare file locations.

`normalize_path` is best-effort and never raises: each stage of its pipeline
falls back to the previous stage's result when it fails. `prepare_file`
creates directories and lets OSError from the filesystem propagate.
"""
from __future__ import annotations

import os
import threading
from typing import Optional

from .logger import get_logger

logger = get_logger("paths")

_SEPARATORS = tuple(sep for sep in (os.sep, os.altsep) if sep)


class ResolvedPathState:
    """Holds the last path produced by `prepare_file`.

    Reads and writes go through a lock. Pass a fresh instance to
    `prepare_file` to keep results out of the process-wide default.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value = ''

    @property
    def value(self) -> str:
        with self._lock:
            return self._value

    @value.setter
    def value(self, new_value: str) -> None:
        with self._lock:
            self._value = new_value


_default_state = ResolvedPathState()


def get_last_resolved_path() -> str:
    """Return the last path produced by `prepare_file`, or '' if never called."""
    return _default_state.value


def _as_text(path) -> str:
    if path is None:
        return ''
    try:
        path = os.fspath(path)
    except TypeError:
        return ''
    return path if isinstance(path, str) else ''


def _strip_quotes(text: str) -> str:
    text = text.strip()
    if len(text) >= 2 and text[0] == text[-1] == '"':
        text = text[1:-1]
    return text.strip()


def _expand(text: str) -> str:
    try:
        return os.path.expandvars(text)
    except (TypeError, ValueError) as exc:
        logger.debug("Could not expand variables in %r: %s", text, exc)
        return text


def _unify_separators(text: str) -> str:
    if os.altsep:
        return text.replace(os.altsep, os.sep)
    return text


def _make_absolute(text: str) -> str:
    try:
        return os.path.abspath(text)
    except (OSError, TypeError, ValueError) as exc:
        logger.debug("Could not resolve %r to an absolute path: %s", text, exc)
        return text


def _path_root(text: str) -> str:
    drive, rest = os.path.splitdrive(text)
    stripped = rest.lstrip(''.join(_SEPARATORS))
    return drive + rest[:len(rest) - len(stripped)]


def _trim_trailing_separator(text: str) -> str:
    try:
        root = _path_root(text)
        if os.path.normcase(text) == os.path.normcase(root):
            return text
        trimmed = text.rstrip(''.join(_SEPARATORS))
        return trimmed or text
    except (TypeError, ValueError) as exc:
        logger.debug("Skipping trailing separator trim for %r: %s", text, exc)
        return text


def normalize_path(path) -> str:
    """Normalize a filesystem path.

    - returns '' for None, empty or whitespace-only input
    - trims whitespace and one layer of surrounding double quotes
    - expands environment variables
    - converts alternate separators to the platform separator
    - resolves to an absolute path when possible
    - removes trailing separators unless the path is a root
    """
    normalized = _strip_quotes(_as_text(path))
    if not normalized:
        return ''
    normalized = _expand(normalized)
    normalized = _unify_separators(normalized)
    normalized = _make_absolute(normalized)
    return _trim_trailing_separator(normalized)


def prepare_file(value, configured_folder: Optional[str] = None, state: Optional[ResolvedPathState] = None) -> str:
    """Produce a target file path and make sure its directory exists.

    When `configured_folder` is given (and not blank) it is normalized, created,
    and joined with `value`; an absolute `value` replaces the folder. The result
    is stored as the last resolved path and its parent directory is created.

    Raises OSError (PermissionError, FileExistsError, ...) when a directory
    cannot be created.
    """
    folder = normalize_path(configured_folder)
    if folder:
        os.makedirs(folder, exist_ok=True)
        logger.debug("Ensured configured folder %s", folder)
        target = normalize_path(os.path.join(folder, _as_text(value)))
    else:
        target = normalize_path(value)

    (state if state is not None else _default_state).value = target

    parent = os.path.dirname(target) or '.'
    os.makedirs(parent, exist_ok=True)
    logger.info("Prepared file location %s", target)
    return target
