"""Configuration manager.

Starts the analytics SDK when valid credentials exist, and starts it again
whenever ``credentials.updated`` is published. It keeps no state of its
own: each run re-reads the current snapshot, and repeated runs with an
unchanged snapshot simply repeat the SDK call.
"""

from typing import TYPE_CHECKING, ClassVar, Optional

from pronto.adapters.analytics.protocols import AnalyticsSdkProtocol
from pronto.core.config import Settings
from pronto.core.events.credentials import CredentialsLifecycleEvent
from pronto.core.logging import ContextualLogger
from pronto.core.protocols.event_bus import EventSubscriber
from pronto.domains.credentials.protocols import CredentialsManagerProtocol

if TYPE_CHECKING:
    from pronto.domains.consent.service import ConsentService

DEFAULT_APP_NAME = "ProntoFoodDeliveryApp"
DEFAULT_APP_VERSION = "1.0.0"


class ConfigurationManager(EventSubscriber):
    """(Re)configures the analytics SDK from stored credentials."""

    EVENT_PATTERNS: ClassVar[list[str]] = ["credentials.updated"]

    def __init__(
        self,
        sdk: AnalyticsSdkProtocol,
        credentials: CredentialsManagerProtocol,
        settings: Settings,
        logger: ContextualLogger,
        consent: Optional["ConsentService"] = None,
    ) -> None:
        """Wire the manager.

        Args:
            sdk: The analytics SDK to configure.
            credentials: Source of configuration snapshots.
            settings: Environment and bundle metadata.
            logger: Diagnostics channel.
            consent: If given, its saved consent is pushed into the SDK
                after every successful configure.
        """
        self._sdk = sdk
        self._credentials = credentials
        self._settings = settings
        self._logger = logger
        self._consent = consent

    @property
    def app_name(self) -> str:
        """Bundle name, or the fallback."""
        return self._settings.APP_NAME or DEFAULT_APP_NAME

    @property
    def app_version(self) -> str:
        """Bundle version, or the fallback."""
        return self._settings.APP_VERSION or DEFAULT_APP_VERSION

    def configure(self) -> bool:
        """Configure the SDK if credentials are present.

        Returns:
            True if the SDK was configured, False if credentials are missing.
        """
        configuration = self._credentials.current_configuration()

        if not configuration.is_configured:
            self._logger.debug(
                "Analytics credentials not configured; configure them in Profile > Settings"
            )
            return False

        self._sdk.configure(configuration)
        if self._consent is not None:
            self._consent.apply_saved_consent()

        self._logger.debug(
            "Analytics SDK configuration started (environment=%s, app_version=%s)",
            self._settings.ENVIRONMENT.value,
            self.app_version,
        )
        if not self._settings.is_production:
            self._logger.debug(
                "Stored credentials: app_id=%s endpoint=%s",
                configuration.app_id,
                configuration.endpoint,
            )
        return True

    def on_credentials_updated(self) -> bool:
        """Reconfigure after the stored credentials changed."""
        self._logger.debug("Credentials updated - reconfiguring analytics SDK")
        return self.configure()

    async def handle(self, event: CredentialsLifecycleEvent) -> None:
        """Event bus entry point for ``credentials.updated``."""
        self.on_credentials_updated()

    def track_app_launch(self) -> None:
        """Submit the app launch event.

        Not consent-gated here, unlike screen views.
        """
        self._sdk.track_app_launch(app_name=self.app_name, app_version=self.app_version)
