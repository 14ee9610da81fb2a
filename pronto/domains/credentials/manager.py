"""Credentials manager.

Stores the analytics app id and endpoint entered on the settings screen,
and turns them into ``AnalyticsConfiguration`` snapshots. Saving publishes
``credentials.updated`` so the configuration manager reconfigures the SDK
without the settings code knowing it exists.
"""

from typing import Optional

from pronto.core.config import Settings
from pronto.core.events.credentials import CredentialsLifecycleEvent
from pronto.core.exceptions import InvalidCredentialsError
from pronto.core.protocols import EventBus, SettingsStore
from pronto.domains.analytics.types import AnalyticsConfiguration

APP_ID_KEY = "pronto.analytics.appId"
ENDPOINT_KEY = "pronto.analytics.endpoint"
HAS_CONFIGURED_KEY = "pronto.analytics.hasConfigured"

MIN_APP_ID_LENGTH = 8
MIN_ENDPOINT_LENGTH = 3


def validate_credentials(app_id: str, endpoint: str) -> None:
    """Check credential format before they are saved.

    Raises:
        InvalidCredentialsError: With a user-facing reason.
    """
    app_id = app_id.strip()
    endpoint = endpoint.strip()

    if not app_id:
        raise InvalidCredentialsError("App ID cannot be empty")
    if len(app_id) < MIN_APP_ID_LENGTH:
        raise InvalidCredentialsError("App ID seems too short")
    if not endpoint:
        raise InvalidCredentialsError("Endpoint cannot be empty")
    if len(endpoint) < MIN_ENDPOINT_LENGTH:
        raise InvalidCredentialsError("Endpoint seems too short")


class CredentialsManager:
    """Settings-store backed implementation of CredentialsManagerProtocol."""

    def __init__(self, store: SettingsStore, event_bus: EventBus, settings: Settings) -> None:
        """Wire the manager to its store, bus and fallback settings."""
        self._store = store
        self._event_bus = event_bus
        self._settings = settings

    @property
    def app_id(self) -> Optional[str]:
        """Stored app id, if any."""
        return self._store.get(APP_ID_KEY)

    @property
    def endpoint(self) -> Optional[str]:
        """Stored endpoint, if any."""
        return self._store.get(ENDPOINT_KEY)

    @property
    def has_configured_credentials(self) -> bool:
        """Whether credentials have ever been saved."""
        return self._store.get(HAS_CONFIGURED_KEY) == "true"

    def current_configuration(self) -> AnalyticsConfiguration:
        """Snapshot from stored credentials, else the settings fallbacks."""
        app_id = self.app_id
        endpoint = self.endpoint
        if app_id is None or endpoint is None:
            app_id = self._settings.ANALYTICS_APP_ID
            endpoint = self._settings.ANALYTICS_ENDPOINT

        return AnalyticsConfiguration(
            app_id=app_id,
            endpoint=endpoint,
            enable_logging=self._settings.diagnostics_enabled,
            track_screens=self._settings.ANALYTICS_TRACK_SCREENS,
            track_lifecycle=self._settings.ANALYTICS_TRACK_LIFECYCLE,
            session_timeout_seconds=self._settings.ANALYTICS_SESSION_TIMEOUT_SECONDS,
        )

    async def save_credentials(self, app_id: str, endpoint: str) -> None:
        """Persist trimmed credentials and publish ``credentials.updated``.

        No format validation here; the settings screen calls
        ``validate_credentials`` first.
        """
        self._store.set(APP_ID_KEY, app_id.strip())
        self._store.set(ENDPOINT_KEY, endpoint.strip())
        self._store.set(HAS_CONFIGURED_KEY, "true")
        await self._event_bus.publish(CredentialsLifecycleEvent.updated())

    async def clear_credentials(self) -> None:
        """Remove stored credentials and publish ``credentials.cleared``."""
        for key in (APP_ID_KEY, ENDPOINT_KEY, HAS_CONFIGURED_KEY):
            self._store.remove(key)
        await self._event_bus.publish(CredentialsLifecycleEvent.cleared())
