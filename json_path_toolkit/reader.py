"""Read values out of JSON files by selector.

`lookup_value` is the strict entry point: it raises on a blank path, a missing
file, invalid JSON, a malformed selector or a selector that matches nothing.
`try_get_value` and `get_value` wrap it for tolerant lookups and never raise.
"""
from __future__ import annotations

from typing import Any, Tuple

from .accessors import select_value
from .flattening import flatten_value
from .io_utils import read_json_file
from .logger import get_logger

logger = get_logger("reader")


def read_document(file_path) -> Any:
    """Read and parse a JSON file, returning the document root."""
    return read_json_file(file_path)


def lookup_value(file_path, selector: str | None = None) -> str:
    """Return the flattened value under `selector`, raising on any failure.

    A blank selector selects the whole document.
    """
    document = read_document(file_path)
    return flatten_value(select_value(document, selector))


def try_get_value(file_path, selector: str | None = None, default_value: str = '') -> Tuple[bool, str]:
    """Tolerant lookup: returns (found, value), with `default_value` when not found.

    A matched JSON null counts as found and flattens to ''.
    """
    try:
        return True, lookup_value(file_path, selector)
    except Exception as exc:
        logger.debug("Lookup of %r in %r failed: %s", selector, file_path, exc)
        return False, default_value


def get_value(file_path, selector: str | None = None, default_value: str = '') -> str:
    found, value = try_get_value(file_path, selector, default_value)
    return value if found else default_value
