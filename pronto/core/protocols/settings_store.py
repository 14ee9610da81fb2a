"""SettingsStore protocol: small persisted key/value settings.

Holds the values a device keeps between launches: stored analytics
credentials, the saved consent choice, the anonymous distinct id.
"""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class SettingsStore(Protocol):
    """String key/value persistence."""

    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...

    def remove(self, key: str) -> None:
        """Delete ``key``. Missing keys are ignored."""
        ...
