from __future__ import annotations

from typing import Any, List, Tuple

from .paths import SelectorToken, join_selector

DEFAULT_SAMPLE_ITEMS = 3


def _walk(data: Any, prefix: Tuple[SelectorToken, ...], out: List[str], sample_items: int) -> None:
    if prefix:
        out.append(join_selector(prefix))

    if isinstance(data, dict):
        for k, v in data.items():
            if k == '':
                continue
            _walk(v, prefix + (k,), out, sample_items)
    elif isinstance(data, list):
        for idx, item in enumerate(data[:sample_items]):
            _walk(item, prefix + (idx,), out, sample_items)


def list_selectors(data: Any, sample_items: int = DEFAULT_SAMPLE_ITEMS) -> List[str]:
    """List selectors reachable in a JSON document, in document order.

    Only the first `sample_items` entries of each array are visited so large
    arrays do not flood the list. The root itself is not included.
    """
    selectors: List[str] = []
    _walk(data, (), selectors, max(0, int(sample_items)))
    return selectors
