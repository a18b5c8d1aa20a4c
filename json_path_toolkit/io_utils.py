from __future__ import annotations

import errno
import json
import os

from .exceptions import DocumentNotFoundError, DocumentParseError, InvalidArgumentError


def _parse_json_text(content, source):
    try:
        return json.loads(content)
    except ValueError as exc:
        raise DocumentParseError(f"Invalid JSON in {source}: {exc}") from exc


def read_json_file(file_path):
    """Strictly read and parse a JSON file from disk.

    Raises InvalidArgumentError for a blank path, DocumentNotFoundError when no
    file exists, and DocumentParseError when the content is not valid JSON.
    """
    if file_path is None:
        raise InvalidArgumentError("file_path must not be empty.")
    try:
        path = os.fspath(file_path)
    except TypeError as exc:
        raise InvalidArgumentError(f"file_path must be a str or os.PathLike, not {type(file_path).__name__}.") from exc
    if not isinstance(path, str):
        raise InvalidArgumentError(f"file_path must be a text path, not {type(path).__name__}.")
    if not path.strip():
        raise InvalidArgumentError("file_path must not be empty.")
    if not os.path.isfile(path):
        raise DocumentNotFoundError(errno.ENOENT, "JSON file not found", path)

    # utf-8-sig accepts files saved with a byte order mark.
    try:
        with open(path, 'r', encoding='utf-8-sig') as f:
            content = f.read()
    except UnicodeDecodeError as exc:
        raise DocumentParseError(f"File is not UTF-8 text: {path}") from exc
    return _parse_json_text(content, path)


def read_json_content(file_obj):
    """Read JSON content from an uploaded file or file path."""
    if file_obj is None:
        raise InvalidArgumentError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
        if isinstance(content, bytes):
            try:
                content = content.decode('utf-8-sig')
            except UnicodeDecodeError as exc:
                raise DocumentParseError("Uploaded file is not UTF-8 text.") from exc
        return _parse_json_text(content, getattr(file_obj, 'name', 'upload'))

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    return read_json_file(path)
