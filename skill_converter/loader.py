"""Decode a nested JSON document into a `Skill` record.

Decoding walks the field tables in `schema` and stops at the first problem;
the raised error names the dotted path of the offending field.
"""
from __future__ import annotations

import logging
import math
from types import MappingProxyType
from typing import Any, Dict, Type, TypeVar

from .accessors import MISSING, describe_shape, gather_prefixed, get_field
from .errors import InvalidNumericValue, MissingRequiredField, TypeMismatch
from .paths import join_path
from .schema import U8_MAX, FieldSpec, Rule, Skill, WireEnum, fields_for, to_f32

logger = logging.getLogger(__name__)

T = TypeVar("T")


def load_skill(data: Any) -> Skill:
    """Build a Skill from an already parsed JSON object."""
    skill = decode_composite(data, Skill, "")
    logger.debug("Decoded skill %r", skill.ability_name)
    return skill


def decode_composite(data: Any, composite: Type[T], path: str) -> T:
    payload = _require_object(data, path or "(root)")
    values: Dict[str, Any] = {}
    for spec in fields_for(composite):
        field_path = join_path(path, spec.key)
        raw = get_field(payload, spec.keys)
        if raw is MISSING and spec.rule is Rule.COMPOSITE:
            flattened = gather_prefixed(payload, spec.key)
            if flattened:
                raw = flattened
        if raw is MISSING or (raw is None and spec.optional):
            if not spec.optional:
                raise MissingRequiredField(field_path)
            values[spec.name] = None
            continue
        values[spec.name] = decode_field(raw, spec, field_path)
    return composite(**values)


def decode_field(raw: Any, spec: FieldSpec, path: str) -> Any:
    rule = spec.rule
    if rule is Rule.TEXT:
        return _require_text(raw, path)
    if rule is Rule.INTEGER:
        return _require_u8(raw, path)
    if rule is Rule.FLOAT:
        return _require_f32(raw, path)
    if rule is Rule.ENUM:
        return _decode_enum(raw, spec.target, path)
    if rule is Rule.COMPOSITE:
        return decode_composite(raw, spec.target, path)
    if rule is Rule.ENUM_MAP:
        key_enum, value_type = spec.target
        return _decode_enum_map(raw, key_enum, value_type, path)
    if rule is Rule.LIST:
        return _decode_list(raw, spec.target, path)
    raise ValueError(f"Unknown decode rule {rule!r} for {path}")


def _decode_enum(raw: Any, enum_cls: Type[WireEnum], path: str) -> WireEnum:
    return enum_cls.from_wire(_require_text(raw, path), path)


def _decode_enum_map(raw: Any, key_enum: Type[WireEnum], value_type: type, path: str):
    payload = _require_object(raw, path)
    result = {}
    for key, value in payload.items():
        member = key_enum.from_wire(key, join_path(path, key))
        result[member] = decode_composite(value, value_type, join_path(path, key))
    return MappingProxyType(result)


def _decode_list(raw: Any, item_type: Any, path: str) -> tuple:
    if not isinstance(raw, list):
        raise TypeMismatch(f"expected a list, got {describe_shape(raw)}", path)
    items = []
    for idx, entry in enumerate(raw):
        item_path = f"{path}[{idx}]"
        if item_type is str:
            items.append(_require_text(entry, item_path))
        else:
            items.append(_decode_enum(entry, item_type, item_path))
    return tuple(items)


def _require_object(value: Any, path: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise TypeMismatch(f"expected an object, got {describe_shape(value)}", path)
    return value


def _require_text(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise TypeMismatch(f"expected a string, got {describe_shape(value)}", path)
    return value


def _require_number(value: Any, path: str):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeMismatch(f"expected a number, got {describe_shape(value)}", path)
    return value


def _require_u8(value: Any, path: str) -> int:
    number = _require_number(value, path)
    if not isinstance(number, int):
        raise InvalidNumericValue(f"{number!r} is not an integer", path)
    if not 0 <= number <= U8_MAX:
        raise InvalidNumericValue(f"{number} is outside 0..{U8_MAX}", path)
    return number


def _require_f32(value: Any, path: str) -> float:
    try:
        number = float(_require_number(value, path))
    except OverflowError as exc:
        raise InvalidNumericValue(f"{value!r} is outside the single-precision range", path) from exc
    rounded = to_f32(number)
    if not math.isfinite(rounded):
        raise InvalidNumericValue(f"{value!r} is outside the single-precision range", path)
    return rounded
