"""Event type enums, the vocabulary of the event bus.

Every domain event must use one of these enums for its event_type field.
The union `EventType` constrains DomainEvent.event_type to known values.
"""

from enum import Enum


class CredentialsEventType(str, Enum):
    """Analytics credentials lifecycle event types."""

    UPDATED = "credentials.updated"
    CLEARED = "credentials.cleared"


class ConsentEventType(str, Enum):
    """User consent event types."""

    CHANGED = "consent.changed"


EventType = CredentialsEventType | ConsentEventType
