"""
Bounded in-memory log of interaction events.

Two event types are recorded: ``action`` (one per applied UI action) and
``view`` (one per rendered restaurant list). The log keeps the newest
``AppConfig.analytics_max_events`` entries.
"""
from __future__ import annotations

import time
from collections import deque
from typing import Any

from ..config import DEFAULT_APP_CONFIG

_events: deque[dict[str, Any]] = deque(maxlen=DEFAULT_APP_CONFIG.analytics_max_events)


def set_max_events(max_events: int) -> None:
    """Resize the log, keeping the newest entries."""
    global _events
    if max_events < 1:
        raise ValueError("max_events must be at least 1")
    _events = deque(_events, maxlen=max_events)


def record_event(event_type: str, data: dict[str, Any]) -> None:
    _events.append({"type": event_type, "timestamp": time.time(), **data})


def get_events(event_type: str | None = None) -> list[dict[str, Any]]:
    return [e for e in _events if event_type is None or e["type"] == event_type]


def clear_events() -> None:
    _events.clear()
