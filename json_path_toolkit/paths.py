from __future__ import annotations

from typing import List, Sequence, Union

from .exceptions import SelectorError

SelectorToken = Union[str, int]

_ESCAPED_CHARS = ('\\', '.', '[', ']', '$')


def escape_path_segment(segment: str) -> str:
    """Escape a single key segment for selector representation.

    - Dots are escaped as '\\.' so keys like 'gpt-3.5-turbo' remain one segment.
    - Brackets are escaped so they are not read as array indices, and '$'
      so it is not read as the root marker.
    - Backslashes are escaped as '\\\\' to preserve round-tripping.
    """
    if not isinstance(segment, str):
        segment = str(segment)
    for ch in _ESCAPED_CHARS:
        segment = segment.replace(ch, '\\' + ch)
    return segment


def unescape_path_segment(segment: str) -> str:
    if segment is None:
        return ''
    out: List[str] = []
    i = 0
    while i < len(segment):
        ch = segment[i]
        if ch == '\\' and i + 1 < len(segment):
            out.append(segment[i + 1])
            i += 2
        else:
            out.append(ch)
            i += 1
    return ''.join(out)


def _parse_index(raw: str, selector: str) -> int:
    raw = raw.strip()
    if not raw or not all('0' <= ch <= '9' for ch in raw):
        raise SelectorError(f"Only non-negative numeric indices are supported: {selector!r}")
    return int(raw)


def split_selector(selector: str) -> List[SelectorToken]:
    """Split a selector into property names (str) and array indices (int).

    Accepts 'a.b', 'items[0].id', '[2]' and an optional leading '$' or '$.'.
    A blank selector yields no tokens, meaning the document root.
    """
    if selector is None:
        return []
    if not isinstance(selector, str):
        selector = str(selector)

    text = selector.strip()
    if text.startswith('$'):
        text = text[1:]
        if text.startswith('.'):
            text = text[1:]
            if not text:
                raise SelectorError(f"Selector ends with '.': {selector!r}")

    tokens: List[SelectorToken] = []
    buf: List[str] = []
    after_dot = False
    after_index = False
    i = 0

    while i < len(text):
        ch = text[i]

        if ch == '.':
            if buf:
                tokens.append(unescape_path_segment(''.join(buf)))
                buf = []
            elif not after_index:
                raise SelectorError(f"Empty segment in selector: {selector!r}")
            after_dot = True
            after_index = False
            i += 1
            continue

        if ch == '[':
            if buf:
                tokens.append(unescape_path_segment(''.join(buf)))
                buf = []
            elif after_dot:
                raise SelectorError(f"Expected a property name before '[': {selector!r}")
            end = text.find(']', i)
            if end == -1:
                raise SelectorError(f"Unclosed [ in selector: {selector!r}")
            tokens.append(_parse_index(text[i + 1:end], selector))
            after_dot = False
            after_index = True
            i = end + 1
            continue

        if after_index:
            raise SelectorError(f"Expected '.' or '[' after ']': {selector!r}")

        if ch == '\\' and i + 1 < len(text):
            # Keep the escape pair so unescape_path_segment can process it.
            buf.append(text[i:i + 2])
            i += 2
        else:
            buf.append(ch)
            i += 1
        after_dot = False

    if buf:
        tokens.append(unescape_path_segment(''.join(buf)))
    elif after_dot:
        raise SelectorError(f"Selector ends with '.': {selector!r}")

    return tokens


def join_selector(tokens: Sequence[SelectorToken]) -> str:
    """Build a selector string from tokens, escaping property names."""
    parts: List[str] = []
    for token in tokens:
        if isinstance(token, int):
            parts.append(f"[{token}]")
        elif parts:
            parts.append('.' + escape_path_segment(token))
        else:
            parts.append(escape_path_segment(token))
    return ''.join(parts)
