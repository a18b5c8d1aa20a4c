from __future__ import annotations

from typing import Any, List

import gradio as gr

from .accessors import NO_MATCH, get_value_by_path
from .exceptions import SelectorError
from .flattening import flatten_selected_values, flatten_value
from .io_utils import read_json_content
from .logger import get_logger
from .path_resolver import get_last_resolved_path, normalize_path, prepare_file
from .reader import try_get_value
from .schema_utils import list_selectors

logger = get_logger("handlers")


def load_document_handler(file_obj):
    if file_obj is None:
        return None, gr.update(choices=[], value=None), "No file uploaded."

    try:
        data = read_json_content(file_obj)
    except Exception as e:
        return None, gr.update(choices=[], value=None), f"Error parsing JSON: {str(e)}"

    selectors = list_selectors(data)
    return data, gr.update(choices=selectors, value=None), f"Successfully loaded. Found {len(selectors)} selectors."


def lookup_value_handler(data: Any, selector: str, default_value: str):
    """Select and flatten a value from an uploaded document."""
    if data is None:
        return "No data loaded.", default_value or ""

    try:
        val = get_value_by_path(data, selector or '')
    except SelectorError as e:
        return f"Invalid selector: {str(e)}", default_value or ""

    if val is NO_MATCH:
        return "Not found.", default_value or ""
    return "Found.", flatten_value(val)


def parse_selector_lines(text: str) -> List[str]:
    if not text:
        return []
    return [line.strip() for line in text.splitlines() if line.strip()]


def preview_values_handler(data: Any, selectors_text: str):
    selectors = parse_selector_lines(selectors_text)
    if data is None or not selectors:
        return None
    rows = flatten_selected_values(data, selectors)
    return rows if rows else None


def file_lookup_handler(file_path: str, selector: str, default_value: str):
    """Tolerant lookup against a JSON file on disk."""
    found, value = try_get_value(file_path, selector, default_value or "")
    return ("Found." if found else "Not found (missing file, invalid JSON or no match)."), value


def normalize_path_handler(path: str):
    return normalize_path(path)


def prepare_file_handler(value: str, configured_folder: str):
    try:
        target = prepare_file(value, configured_folder)
    except OSError as e:
        logger.error("Could not prepare %r under %r: %s", value, configured_folder, e)
        return "", f"Error creating directory: {str(e)}", get_last_resolved_path()
    return target, f"Directory ready for {target}" if target else "Nothing to prepare.", get_last_resolved_path()
