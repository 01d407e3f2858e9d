from __future__ import annotations

import logging

from .converter import convert_file
from .errors import ConversionError
from .log_panel import EventCollector

logger = logging.getLogger(__name__)


def convert_skill_handler(file_obj, include_maps, output_dir, collector: EventCollector, log_limit=None):
    """Run one conversion for the UI.

    Returns (download path, status message, preview frame, log text).
    """
    try:
        path, row = convert_file(file_obj, output_dir, include_maps=bool(include_maps))
    except ConversionError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        return None, f"{type(exc).__name__}: {exc}", None, collector.render(log_limit)

    return str(path), f"Export successful! Saved to {path}", row.to_frame(), collector.render(log_limit)


def refresh_log_handler(collector: EventCollector, log_limit=None):
    return collector.render(log_limit)


def clear_log_handler(collector: EventCollector):
    collector.clear()
    return ""
