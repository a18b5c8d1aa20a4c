"""Core logic for the JSON path toolkit.

The Gradio UI lives in `app.py`. This package contains small helpers that:
- normalize filesystem paths and prepare file locations
- parse JSON documents from disk or uploads
- select values with dot/bracket selectors
- flatten any JSON value into a single string
"""
from __future__ import annotations

from .path_resolver import get_last_resolved_path, normalize_path, prepare_file
from .reader import get_value, lookup_value, read_document, try_get_value

__all__ = [
    "get_last_resolved_path",
    "get_value",
    "lookup_value",
    "normalize_path",
    "prepare_file",
    "read_document",
    "try_get_value",
]
