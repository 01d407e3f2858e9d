"""Load, flatten and write one Skill document per call."""
from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import Any, Optional, Tuple, Union

from .assembly import TabularRow, assemble_row, destination_for
from .flattening import build_sections, encode_sections
from .io_utils import read_json_content, source_name
from .loader import load_skill
from .sink import write_row

logger = logging.getLogger(__name__)


def convert_document(data: Any, include_maps: bool = False) -> TabularRow:
    """Turn a parsed Skill document into one CSV header/value row."""
    logger.info("Deserializing JSON")
    skill = load_skill(data)
    logger.debug("%r", skill)

    logger.info("Serializing CSV")
    blocks = encode_sections(build_sections(skill, include_maps=include_maps))
    row = assemble_row(blocks)
    logger.debug("Row: %s", row.as_dict())
    return row


def convert_file(
    source,
    output_dir: Optional[Union[str, Path]] = None,
    include_maps: bool = False,
) -> Tuple[Path, TabularRow]:
    """Convert the Skill JSON at `source` and write `<name>.csv`.

    `source` is a path or an uploaded file object. Without `output_dir` the
    CSV is written to the system temp directory.
    """
    data = read_json_content(source)
    logger.debug("Read %s", source_name(source))
    row = convert_document(data, include_maps=include_maps)

    destination = destination_for(source_name(source), output_dir or tempfile.gettempdir())
    path = write_row(row, destination)
    logger.info("Wrote %s to file.", path)
    return path, row
