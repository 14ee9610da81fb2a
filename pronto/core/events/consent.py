"""Consent domain events."""

from pronto.core.events.base import DomainEvent
from pronto.core.events.enums import ConsentEventType
from pronto.domains.analytics.types import ConsentState


class ConsentChangedEvent(DomainEvent):
    """Event published whenever the user's consent state changes."""

    event_type: ConsentEventType = ConsentEventType.CHANGED
    state: ConsentState
