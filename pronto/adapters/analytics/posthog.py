"""PostHog analytics SDK adapter."""

import logging
import time
import uuid
from typing import Any, Callable, Dict, Optional

from posthog import Posthog

from pronto.domains.analytics.types import (
    APP_LAUNCH_EVENT_NAME,
    SCREEN_VIEW_EVENT_NAME,
    AnalyticsConfiguration,
    AppLaunchEvent,
    ConsentState,
    TrackableEvent,
)

logger = logging.getLogger(__name__)

ClientFactory = Callable[..., Posthog]

SESSION_ID_PROPERTY = "$session_id"


def _is_enabled(configuration: AnalyticsConfiguration, event_name: str) -> bool:
    if event_name == SCREEN_VIEW_EVENT_NAME:
        return configuration.track_screens
    if event_name == APP_LAUNCH_EVENT_NAME:
        return configuration.track_lifecycle
    return True


class PostHogAnalyticsSdk:
    """Wraps the PostHog client behind AnalyticsSdkProtocol.

    The app id is the PostHog project key and the endpoint is the PostHog
    host. Reconfiguring with a different snapshot shuts the old client down
    and builds a new one; reconfiguring with the same snapshot keeps it.

    Like the vendor SDK it stands in for, the adapter applies its own gate:
    nothing is captured before ``configure`` or while consent is not OPT_IN,
    and ScreenView / AppLaunch are dropped when ``track_screens`` /
    ``track_lifecycle`` are off. Captured events carry a ``$session_id`` that
    rotates after ``session_timeout_seconds`` without activity.
    """

    def __init__(
        self,
        distinct_id: str,
        *,
        client_factory: ClientFactory = Posthog,
        base_properties: Optional[Dict[str, Any]] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Create an unconfigured adapter for the given device identity."""
        self._distinct_id = distinct_id
        self._client_factory = client_factory
        self._base_properties = dict(base_properties or {})
        self._client: Optional[Posthog] = None
        self._configuration: Optional[AnalyticsConfiguration] = None
        self._consent = ConsentState.UNKNOWN
        self._clock = clock
        self._session_id: Optional[str] = None
        self._last_activity: Optional[float] = None

    @property
    def is_configured(self) -> bool:
        """Whether a client has been built."""
        return self._client is not None

    def configure(self, configuration: AnalyticsConfiguration) -> None:
        """Build the PostHog client for ``configuration``."""
        if configuration == self._configuration and self._client is not None:
            logger.debug("PostHog client already configured for this snapshot")
            return

        try:
            client = self._client_factory(
                configuration.app_id,
                host=configuration.endpoint,
                debug=configuration.enable_logging,
            )
        except Exception as e:
            logger.error("Failed to initialize PostHog client: %s", e)
            return

        self._shutdown_client()
        self._client = client
        self._configuration = configuration
        logger.info(
            "PostHog analytics client initialized (track_screens=%s, track_lifecycle=%s)",
            configuration.track_screens,
            configuration.track_lifecycle,
        )

    def _shutdown_client(self) -> None:
        if self._client is None:
            return
        try:
            self._client.shutdown()
        except Exception as e:
            logger.warning("Failed to shut down PostHog client: %s", e)

    def shutdown(self) -> None:
        """Flush queued events and release the client.

        The adapter is unconfigured afterwards; a later ``configure`` builds a
        fresh client.
        """
        if self._client is None:
            return
        self._shutdown_client()
        self._client = None
        self._configuration = None
        logger.info("PostHog analytics client shut down")

    def get_consent(self) -> ConsentState:
        """Return the consent state enforced by this adapter."""
        return self._consent

    def set_consent(self, state: ConsentState) -> None:
        """Record the consent state."""
        self._consent = state
        logger.debug("PostHog consent set to %s", state.value)

    def track(self, event: TrackableEvent) -> None:
        """Capture ``event`` if configured and consented."""
        if self._client is None:
            logger.warning("PostHog not configured, dropping '%s'", event.name)
            return
        if self._consent is not ConsentState.OPT_IN:
            logger.debug("Consent is %s, dropping '%s'", self._consent.value, event.name)
            return
        if not _is_enabled(self._configuration, event.name):
            logger.debug("Tracking of '%s' is disabled, dropping it", event.name)
            return

        try:
            self._client.capture(
                distinct_id=self._distinct_id,
                event=event.name,
                properties={
                    **self._base_properties,
                    **event.attributes,
                    SESSION_ID_PROPERTY: self._touch_session(),
                },
            )
        except Exception as e:
            logger.error("Failed to track analytics event '%s': %s", event.name, e)

    def _touch_session(self) -> str:
        """Return the current session id, starting a new one after a quiet period."""
        now = self._clock()
        timeout = self._configuration.session_timeout_seconds
        expired = self._last_activity is None or now - self._last_activity > timeout
        if self._session_id is None or expired:
            self._session_id = str(uuid.uuid4())
            logger.debug("Started analytics session %s", self._session_id)
        self._last_activity = now
        return self._session_id

    def track_app_launch(self, app_name: str, app_version: str) -> None:
        """Capture the app launch event."""
        self.track(AppLaunchEvent.for_app(app_name, app_version))
