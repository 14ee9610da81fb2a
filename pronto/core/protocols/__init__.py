"""Core protocols for dependency injection.

Domain code depends on these protocols, never on concrete adapters.
"""

from pronto.core.protocols.event_bus import (
    DomainEvent,
    EventBus,
    EventHandler,
    EventSubscriber,
    subscribe_all,
)
from pronto.core.protocols.settings_store import SettingsStore

__all__ = [
    "DomainEvent",
    "EventBus",
    "EventHandler",
    "EventSubscriber",
    "SettingsStore",
    "subscribe_all",
]
