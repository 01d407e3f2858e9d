from __future__ import annotations

import logging
from pathlib import Path

from .assembly import TabularRow
from .errors import SinkWriteFailure

logger = logging.getLogger(__name__)


def write_row(row: TabularRow, destination: Path) -> Path:
    """Write the header and value line as UTF-8 CSV."""
    destination = Path(destination)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        with open(destination, 'w', newline='', encoding='utf-8') as f:
            f.write(row.to_csv())
    except OSError as exc:
        raise SinkWriteFailure(f"Error writing CSV file: {exc}", str(destination)) from exc
    logger.debug("Wrote %d column(s) to %s", len(row.header), destination)
    return destination
