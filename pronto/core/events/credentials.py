"""Credentials domain events.

Published by the credentials manager when stored analytics credentials
change. The configuration manager listens for UPDATED and reconfigures
the analytics SDK.
"""

from pronto.core.events.base import DomainEvent
from pronto.core.events.enums import CredentialsEventType


class CredentialsLifecycleEvent(DomainEvent):
    """Event published when stored analytics credentials change.

    Carries no credential values; subscribers re-read the store.
    """

    event_type: CredentialsEventType

    @classmethod
    def updated(cls) -> "CredentialsLifecycleEvent":
        """Create an UPDATED event (new credentials saved)."""
        return cls(event_type=CredentialsEventType.UPDATED)

    @classmethod
    def cleared(cls) -> "CredentialsLifecycleEvent":
        """Create a CLEARED event (stored credentials removed)."""
        return cls(event_type=CredentialsEventType.CLEARED)
