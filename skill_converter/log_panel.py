"""In-memory log buffer shown in the UI's log panel."""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional


@dataclass(frozen=True)
class CollectedEvent:
    created: float
    level: int
    target: str
    message: str

    def format(self) -> str:
        stamp = datetime.fromtimestamp(self.created).strftime('%H:%M:%S')
        return f"{stamp} {logging.getLevelName(self.level):<7} {self.target}: {self.message}"


class EventCollector(logging.Handler):
    """Logging handler that keeps records from one logger tree for display."""

    def __init__(self, level: int = logging.DEBUG, prefix: str = 'skill_converter') -> None:
        super().__init__(level)
        self.prefix = prefix
        self._events: List[CollectedEvent] = []
        self._events_lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        if not record.name.startswith(self.prefix):
            return
        try:
            message = record.getMessage()
        except Exception:
            self.handleError(record)
            return
        event = CollectedEvent(record.created, record.levelno, record.name, message)
        with self._events_lock:
            self._events.append(event)

    def snapshot(self) -> List[CollectedEvent]:
        with self._events_lock:
            return list(self._events)

    def clear(self) -> None:
        with self._events_lock:
            self._events = []

    def render(self, limit: Optional[int] = None) -> str:
        events = self.snapshot()
        if limit is not None:
            events = events[-limit:] if limit > 0 else []
        return '\n'.join(event.format() for event in events)
