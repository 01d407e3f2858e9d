from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, List, Tuple

from .errors import ParseFailure, SourceUnavailable


def _reject_duplicate_keys(pairs: List[Tuple[str, Any]]):
    result = {}
    for key, value in pairs:
        if key in result:
            raise ParseFailure(f"duplicate key {key!r}")
        result[key] = value
    return result


def parse_json_text(text: str) -> Any:
    """Parse JSON text; duplicate object keys are rejected."""
    try:
        return json.loads(text.strip(), object_pairs_hook=_reject_duplicate_keys)
    except json.JSONDecodeError as exc:
        raise ParseFailure(f"Invalid JSON: {exc}") from exc


def _read_path(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except FileNotFoundError as exc:
        raise SourceUnavailable(f"File not found: {path}") from exc
    except OSError as exc:
        raise SourceUnavailable(f"Unable to read file: {path}") from exc


def read_text(file_obj) -> str:
    """Read UTF-8 text from an uploaded file, a file path or raw bytes."""
    if file_obj is None:
        raise SourceUnavailable("No file selected.")

    if isinstance(file_obj, bytes):
        content = file_obj
    elif isinstance(file_obj, (str, os.PathLike)):
        content = _read_path(Path(file_obj))
    elif hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
    else:
        # Upload wrappers expose the temp file path as `.name`.
        content = _read_path(Path(file_obj.name))

    if isinstance(content, bytes):
        try:
            content = content.decode('utf-8')
        except UnicodeDecodeError as exc:
            raise SourceUnavailable(f"File is not valid UTF-8: {exc}") from exc
    return content


def read_json_content(file_obj) -> Any:
    """Read JSON content from an uploaded file or file path."""
    data = parse_json_text(read_text(file_obj))
    if not isinstance(data, dict):
        raise ParseFailure("Expected a JSON object at the top level.")
    return data


def source_name(file_obj, default: str = 'skill.json') -> str:
    """File name of an upload or path, used to name the CSV output."""
    name = getattr(file_obj, 'name', file_obj)
    if isinstance(name, (str, Path)):
        return Path(name).name or default
    return default
