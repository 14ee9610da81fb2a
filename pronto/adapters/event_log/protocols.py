"""Protocol for local event log sinks."""

from typing import Any, Mapping, Protocol


class EventLogSinkProtocol(Protocol):
    """Best-effort local record of tracked events.

    Implementations must not raise.
    """

    def log_event_tracked(self, event_name: str, attributes: Mapping[str, Any]) -> None:
        """Record that ``event_name`` was submitted with ``attributes``."""
        ...
