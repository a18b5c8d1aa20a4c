from __future__ import annotations

from typing import Any

from .exceptions import ValueNotFoundError
from .paths import split_selector


class _NoMatch:
    def __repr__(self) -> str:
        return 'NO_MATCH'

    def __bool__(self) -> bool:
        return False


# JSON null is a valid match, so "nothing selected" needs its own marker.
NO_MATCH: Any = _NoMatch()


def get_value_by_path(data: Any, path: str) -> Any:
    """Retrieve a value from parsed JSON using a dot/bracket selector.

    Returns NO_MATCH when a key is missing, an index is out of range, or a
    segment is applied to the wrong kind of container. Malformed selectors
    raise SelectorError.
    """
    val = data
    for token in split_selector(path):
        if isinstance(token, int):
            if not isinstance(val, list) or token >= len(val):
                return NO_MATCH
            val = val[token]
        else:
            if not isinstance(val, dict) or token not in val:
                return NO_MATCH
            val = val[token]
    return val


def select_value(data: Any, path: str) -> Any:
    """Strict selection: like get_value_by_path, but raises when nothing matches."""
    val = get_value_by_path(data, path)
    if val is NO_MATCH:
        raise ValueNotFoundError(f"No value matches selector {path!r}")
    return val
