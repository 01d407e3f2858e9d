from __future__ import annotations

from typing import Any, Dict, Sequence

MISSING = object()


def get_field(data: Dict[str, Any], keys: Sequence[str]) -> Any:
    """Return the value stored under the first key present, or MISSING."""
    for key in keys:
        if key in data:
            return data[key]
    return MISSING


def gather_prefixed(data: Dict[str, Any], prefix: str, sep: str = '.') -> Dict[str, Any]:
    """Collect pre-flattened keys such as 'requirements.actions' for `prefix`.

    Keys are returned unchanged so that aliases written in dotted form still
    match them.
    """
    head = f"{prefix}{sep}"
    return {k: v for k, v in data.items() if isinstance(k, str) and k.startswith(head)}


def describe_shape(value: Any) -> str:
    """Name the JSON shape of a decoded value for diagnostics."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, list):
        return "list"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (int, float)):
        return "number"
    return type(value).__name__
