"""Domain events for the event bus."""

from pronto.core.events.base import DomainEvent
from pronto.core.events.consent import ConsentChangedEvent
from pronto.core.events.credentials import CredentialsLifecycleEvent
from pronto.core.events.enums import ConsentEventType, CredentialsEventType, EventType

__all__ = [
    "ConsentChangedEvent",
    "ConsentEventType",
    "CredentialsEventType",
    "CredentialsLifecycleEvent",
    "DomainEvent",
    "EventType",
]
