from __future__ import annotations

import json
from typing import Any, Dict, List

from .accessors import NO_MATCH, get_value_by_path
from .exceptions import SelectorError

ARRAY_SEPARATOR = ';'


def flatten_value(value: Any) -> str:
    """Flatten any JSON value into a single string.

    - null -> ''
    - strings -> the string itself; booleans and numbers -> their JSON text
    - arrays -> elements flattened recursively and joined with ';'
    - objects -> compact JSON, key order preserved
    """
    if value is None:
        return ''
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return ARRAY_SEPARATOR.join(flatten_value(v) for v in value)
    if isinstance(value, dict):
        return json.dumps(value, ensure_ascii=False, separators=(',', ':'))
    # bool, int, float
    return json.dumps(value, ensure_ascii=False)


def flatten_selected_values(data: Any, selectors: List[str]) -> List[Dict[str, Any]]:
    """Flatten the value under each selector into preview rows."""
    rows: List[Dict[str, Any]] = []
    if data is None or not selectors:
        return rows

    for selector in selectors:
        try:
            val = get_value_by_path(data, selector)
        except SelectorError as exc:
            rows.append({'Selector': selector, 'Found': False, 'Value': str(exc)})
            continue

        found = val is not NO_MATCH
        rows.append({
            'Selector': selector,
            'Found': found,
            'Value': flatten_value(val) if found else '',
        })
    return rows
