"""Fake event bus for testing.

Records published events for assertions without calling real subscribers.
"""

import fnmatch
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pronto.core.protocols.event_bus import DomainEvent, EventHandler


def _type_of(event: "DomainEvent") -> str:
    return getattr(event.event_type, "value", event.event_type)


class FakeEventBus:
    """Test implementation of EventBus.

    Records all published events. With ``call_subscribers=True`` it also
    delivers them, which lets a test drive a publisher and its subscriber
    together.

    Usage:
        fake = FakeEventBus()
        await credentials.save_credentials("app-id-1234", "https://x")

        assert fake.has_event("credentials.updated")
    """

    def __init__(self, call_subscribers: bool = False) -> None:
        """Initialize the fake event bus.

        Args:
            call_subscribers: If True, actually call registered subscribers.
                             Defaults to False (just record events).
        """
        self.events: list["DomainEvent"] = []
        self._subscribers: list[tuple[str, "EventHandler"]] = []
        self._call_subscribers = call_subscribers

    def subscribe(self, event_pattern: str, handler: "EventHandler") -> None:
        """Register a handler (only called if call_subscribers=True)."""
        self._subscribers.append((event_pattern, handler))

    async def publish(self, event: "DomainEvent") -> None:
        """Record the event (and optionally call subscribers)."""
        self.events.append(event)

        if self._call_subscribers:
            for pattern, handler in self._subscribers:
                if fnmatch.fnmatchcase(_type_of(event), pattern):
                    await handler(event)

    # Test helpers

    def has_event(self, event_type: str) -> bool:
        """Check if an event of the given type was published."""
        return any(_type_of(e) == event_type for e in self.events)

    def get_events(self, event_type: str) -> list["DomainEvent"]:
        """Get all events of the given type."""
        return [e for e in self.events if _type_of(e) == event_type]

    def clear(self) -> None:
        """Clear all recorded events."""
        self.events.clear()
