"""Event bus that delivers on the app's own asyncio loop.

``publish`` awaits every matching handler before returning, so by the time
``save_credentials`` returns the analytics SDK has already been reconfigured.
There is a single loop and no worker threads; handlers never race the code
that reads the configuration they replace.
"""

import asyncio
import fnmatch
import logging
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from pronto.core.protocols.event_bus import DomainEvent, EventHandler

logger = logging.getLogger(__name__)


class Subscription(NamedTuple):
    """A glob over event type strings and the handler it routes to."""

    pattern: str
    handler: "EventHandler"

    def matches(self, event_type: str) -> bool:
        return fnmatch.fnmatchcase(event_type, self.pattern)


class InMemoryEventBus:
    """Routes domain events to handlers by glob pattern.

    Usage:
        bus = InMemoryEventBus()
        bus.subscribe("credentials.updated", configuration_manager.handle)
        await bus.publish(CredentialsLifecycleEvent.updated())
    """

    def __init__(self) -> None:
        self._subscriptions: list[Subscription] = []

    def subscribe(self, event_pattern: str, handler: "EventHandler") -> None:
        """Route events whose type matches ``event_pattern`` to ``handler``.

        Patterns are shell-style globs such as ``credentials.*``. A handler
        registered twice is called twice.
        """
        self._subscriptions.append(Subscription(event_pattern, handler))
        logger.debug("Handler registered for '%s'", event_pattern)

    def _handlers_for(self, event_type: str) -> list["EventHandler"]:
        return [s.handler for s in self._subscriptions if s.matches(event_type)]

    async def publish(self, event: "DomainEvent") -> None:
        """Deliver ``event`` to every matching handler and wait for all of them.

        Handler exceptions are logged per handler and never reach the
        publisher.
        """
        event_type = getattr(event.event_type, "value", event.event_type)
        handlers = self._handlers_for(event_type)
        if not handlers:
            # credentials.cleared and consent.changed are published with no listener.
            logger.debug("Nobody listens for '%s'", event_type)
            return

        logger.debug("Delivering '%s' to %d handler(s)", event_type, len(handlers))
        outcomes = await asyncio.gather(
            *(handler(event) for handler in handlers), return_exceptions=True
        )

        for handler, outcome in zip(handlers, outcomes):
            if isinstance(outcome, Exception):
                logger.error(
                    "Handler %s raised while handling '%s': %s",
                    getattr(handler, "__qualname__", handler),
                    event_type,
                    outcome,
                    exc_info=outcome,
                )
