"""Stitch independently encoded CSV sections into one header row and one value row."""
from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Sequence, Tuple, Union

import pandas as pd

from .errors import EncodingFailure

CSV_EXTENSION = '.csv'


@dataclass(frozen=True)
class TabularRow:
    header: Tuple[str, ...]
    values: Tuple[str, ...]

    def to_csv(self) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator='\n')
        writer.writerow(self.header)
        writer.writerow(self.values)
        return buffer.getvalue()

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame([list(self.values)], columns=list(self.header))

    def as_dict(self) -> Dict[str, str]:
        return dict(zip(self.header, self.values))


def split_section(name: str, block: str) -> Tuple[List[str], List[str]]:
    """Parse one encoded section into its header and value records."""
    try:
        records = list(csv.reader(io.StringIO(block)))
    except csv.Error as exc:
        raise EncodingFailure(f"section is not valid CSV: {exc}", name) from exc

    if len(records) != 2:
        raise EncodingFailure(
            f"expected one header line and one value line, got {len(records)} line(s)",
            name,
        )
    header, values = records
    if len(header) != len(values):
        raise EncodingFailure(
            f"header has {len(header)} column(s) but values have {len(values)}",
            name,
        )
    return header, values


def assemble_row(blocks: Sequence[Union[Tuple[str, str], str]]) -> TabularRow:
    """Concatenate section blocks, in the given order, into one aligned row.

    Blocks are either `(section_name, text)` pairs or bare text.
    """
    header: List[str] = []
    values: List[str] = []
    for idx, block in enumerate(blocks):
        if isinstance(block, tuple):
            name, text = block
        else:
            name, text = f"section[{idx}]", block
        section_header, section_values = split_section(name, text)
        header.extend(section_header)
        values.extend(section_values)

    duplicates = sorted({h for h in header if header.count(h) > 1})
    if duplicates:
        raise EncodingFailure(f"duplicate column(s) {duplicates}")
    return TabularRow(tuple(header), tuple(values))


def destination_for(source: Union[str, Path], output_dir: Union[str, Path, None] = None) -> Path:
    """Name the CSV output after the source file, with its extension replaced."""
    path = Path(source).with_suffix(CSV_EXTENSION)
    if output_dir is not None:
        path = Path(output_dir) / path.name
    return path
