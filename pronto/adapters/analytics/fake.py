"""Fake analytics SDK for testing."""

from typing import Optional

from pronto.domains.analytics.types import AnalyticsConfiguration, ConsentState, TrackableEvent


class FakeAnalyticsSdk:
    """In-memory test double for AnalyticsSdkProtocol.

    Records every call for assertions. Unlike the real adapter it applies
    no gating of its own, so tests see exactly what callers submitted.

    Usage:
        sdk = FakeAnalyticsSdk(consent=ConsentState.OPT_IN)
        emitter = ScreenTrackingEmitter(sdk, sink, logger)
        emitter.track_screen("Home")
        assert sdk.tracked[0].attributes == {"screen_name": "Home"}
    """

    def __init__(self, consent: ConsentState = ConsentState.UNKNOWN) -> None:
        """Initialize with the given consent state and no recorded calls."""
        self.consent = consent
        self.configure_calls: list[AnalyticsConfiguration] = []
        self.consent_calls: list[ConsentState] = []
        self.tracked: list[TrackableEvent] = []
        self.app_launches: list[tuple[str, str]] = []
        self.shutdown_calls = 0

    def configure(self, configuration: AnalyticsConfiguration) -> None:
        """Record the configuration."""
        self.configure_calls.append(configuration)

    def get_consent(self) -> ConsentState:
        """Return the current consent."""
        return self.consent

    def set_consent(self, state: ConsentState) -> None:
        """Record and apply the consent."""
        self.consent_calls.append(state)
        self.consent = state

    def track(self, event: TrackableEvent) -> None:
        """Record the event."""
        self.tracked.append(event)

    def track_app_launch(self, app_name: str, app_version: str) -> None:
        """Record the launch."""
        self.app_launches.append((app_name, app_version))

    def shutdown(self) -> None:
        """Count the shutdown."""
        self.shutdown_calls += 1

    @property
    def last_configuration(self) -> Optional[AnalyticsConfiguration]:
        """The most recent configuration, if any."""
        return self.configure_calls[-1] if self.configure_calls else None

    def clear(self) -> None:
        """Reset recorded calls (consent is kept)."""
        self.configure_calls.clear()
        self.consent_calls.clear()
        self.tracked.clear()
        self.app_launches.clear()
        self.shutdown_calls = 0
