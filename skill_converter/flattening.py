"""Project a Skill onto flat CSV sections.

A Skill is flattened into independent sections, always in this order:
- "scalar": every text/number/enum field, nested composites as dot paths
- one section per list field ("requiredReagents", "aspects"), a single
  '|'-joined column each
- "maps" (only with include_maps): proficiency levels and debuffs

Each section is rendered on its own by `encode_section`; `assembly` stitches
the rendered blocks back into one row.
"""
from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from typing import Any, Iterable, List, Sequence, Tuple, Type

from .paths import escape_segment, join_path, split_escaped
from .schema import SKILL_FIELDS, FieldSpec, Rule, Skill, WireEnum, fields_for, format_f32

DELIMITER = '|'

Column = Tuple[str, str]


@dataclass(frozen=True)
class Section:
    name: str
    columns: Tuple[Column, ...]

    @property
    def headers(self) -> List[str]:
        return [header for header, _ in self.columns]

    @property
    def values(self) -> List[str]:
        return [value for _, value in self.columns]


def join_delimited(values: Iterable[str], delimiter: str = DELIMITER) -> str:
    """Join list items into one cell, escaping the delimiter and backslashes."""
    return delimiter.join(escape_segment(v, delimiter) for v in values)


def split_delimited(text: str, delimiter: str = DELIMITER) -> List[str]:
    """Inverse of `join_delimited`; an empty cell is an empty list."""
    if not text:
        return []
    return split_escaped(text, delimiter)


def parse_list_cell(text: str, item_type: Any, field_path: str = '') -> list:
    """Decode a joined list cell back into items (enum members are looked up by cell form)."""
    parts = split_delimited(text)
    if item_type is str:
        return parts
    return [item_type.from_tabular(p, f"{field_path}[{i}]") for i, p in enumerate(parts)]


def format_cell(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, WireEnum):
        return value.wire
    if isinstance(value, float):
        return format_f32(value)
    return str(value)


def flatten_composite(record: Any, composite: Type[Any], prefix: str = '') -> List[Column]:
    """Emit (dot-path, cell) pairs for scalar and composite fields of `record`."""
    columns: List[Column] = []
    for spec in fields_for(composite):
        if spec.rule in (Rule.ENUM_MAP, Rule.LIST):
            continue
        value = getattr(record, spec.name)
        path = join_path(prefix, spec.key)
        if spec.rule is Rule.COMPOSITE:
            columns.extend(flatten_composite(value, spec.target, path))
        else:
            columns.append((path, format_cell(value)))
    return columns


def scalar_section(skill: Skill) -> Section:
    return Section("scalar", tuple(flatten_composite(skill, Skill)))


def list_section(skill: Skill, spec: FieldSpec) -> Section:
    items = getattr(skill, spec.name)
    cells = [item.tabular if isinstance(item, WireEnum) else item for item in items]
    return Section(spec.key, ((spec.key, join_delimited(cells)),))


def map_section(skill: Skill) -> Section:
    """Columns for the enum-keyed maps, keys in enum declaration order."""
    columns: List[Column] = []
    for spec in SKILL_FIELDS:
        if spec.rule is not Rule.ENUM_MAP:
            continue
        key_enum, value_type = spec.target
        mapping = getattr(skill, spec.name)
        for member in key_enum:
            if member in mapping:
                columns.extend(flatten_composite(mapping[member], value_type, join_path(spec.key, member.wire)))
    return Section("maps", tuple(columns))


def build_sections(skill: Skill, include_maps: bool = False) -> List[Section]:
    sections = [scalar_section(skill)]
    sections.extend(list_section(skill, spec) for spec in SKILL_FIELDS if spec.rule is Rule.LIST)
    if include_maps:
        sections.append(map_section(skill))
    return sections


def encode_section(section: Section) -> str:
    """Serialize one section as a header line followed by a value line."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator='\n')
    writer.writerow(section.headers)
    writer.writerow(section.values)
    return buffer.getvalue()


def encode_sections(sections: Sequence[Section]) -> List[Tuple[str, str]]:
    return [(section.name, encode_section(section)) for section in sections]
