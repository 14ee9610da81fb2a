"""Fake event log sink for testing."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping


@dataclass
class LoggedEvent:
    """Single recorded sink call."""

    event_name: str
    attributes: Dict[str, Any]


class FakeEventLogSink:
    """Records every forwarded event for assertions."""

    def __init__(self) -> None:
        """Initialize with no recorded events."""
        self.entries: list[LoggedEvent] = []

    def log_event_tracked(self, event_name: str, attributes: Mapping[str, Any]) -> None:
        """Record the event."""
        self.entries.append(LoggedEvent(event_name=event_name, attributes=dict(attributes)))
