"""Credentials domain protocols."""

from typing import Optional, Protocol

from pronto.domains.analytics.types import AnalyticsConfiguration


class CredentialsManagerProtocol(Protocol):
    """Reads and writes the analytics credentials a device has stored."""

    @property
    def app_id(self) -> Optional[str]:
        """Stored app id, if any."""
        ...

    @property
    def endpoint(self) -> Optional[str]:
        """Stored endpoint, if any."""
        ...

    @property
    def has_configured_credentials(self) -> bool:
        """Whether credentials have ever been saved."""
        ...

    def current_configuration(self) -> AnalyticsConfiguration:
        """Build a fresh configuration snapshot from what is stored now."""
        ...

    async def save_credentials(self, app_id: str, endpoint: str) -> None:
        """Persist credentials and announce the change."""
        ...

    async def clear_credentials(self) -> None:
        """Remove stored credentials and announce the change."""
        ...
