"""EventBus protocol for domain event fan-out.

The event bus decouples the code that changes state from the code that
reacts to it. The credentials manager publishes ``credentials.updated``
instead of calling the configuration manager directly, and the
configuration manager subscribes at startup.

Usage:
    # Domain code publishes
    await event_bus.publish(CredentialsLifecycleEvent.updated())

    # Subscribers react (registered at startup)
    event_bus.subscribe("credentials.updated", configuration_manager.handle)
"""

from datetime import datetime
from typing import Awaitable, Callable, ClassVar, Protocol, runtime_checkable


@runtime_checkable
class DomainEvent(Protocol):
    """Base protocol for all domain events.

    The bus only cares about these fields for routing and metadata.
    Subscribers type-narrow to the concrete event class they expect.
    """

    @property
    def event_type(self) -> str:
        """Dot-separated event identifier (e.g., 'credentials.updated').

        Convention: {domain}.{action}, used for pattern matching.
        """
        ...

    @property
    def timestamp(self) -> datetime:
        """When the event occurred (UTC)."""
        ...


# Type alias for event handlers (async callables that receive a DomainEvent)
EventHandler = Callable[[DomainEvent], Awaitable[None]]


@runtime_checkable
class EventBus(Protocol):
    """Protocol for publishing domain events to multiple subscribers.

    The bus matches events to subscribers by glob pattern on event_type.
    Failures in one subscriber don't affect others.
    """

    async def publish(self, event: DomainEvent) -> None:
        """Publish an event to all matching subscribers."""
        ...

    def subscribe(self, event_pattern: str, handler: EventHandler) -> None:
        """Register a handler for events matching the pattern.

        Args:
            event_pattern: Glob pattern to match (e.g., 'credentials.*').
            handler: Async callable invoked when a matching event is published.
        """
        ...


class EventSubscriber(Protocol):
    """A component that reacts to bus events.

    ``EVENT_PATTERNS`` lists the glob patterns the subscriber is registered
    under; ``handle`` receives every matching event.
    """

    EVENT_PATTERNS: ClassVar[list[str]]

    async def handle(self, event: DomainEvent) -> None:
        """Handle a published event."""
        ...


def subscribe_all(bus: EventBus, subscriber: EventSubscriber) -> None:
    """Register ``subscriber.handle`` under each of its patterns."""
    for pattern in subscriber.EVENT_PATTERNS:
        bus.subscribe(pattern, subscriber.handle)
