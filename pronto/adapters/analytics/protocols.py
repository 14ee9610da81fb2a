"""Protocol for the analytics SDK boundary."""

from typing import Protocol, runtime_checkable

from pronto.domains.analytics.types import AnalyticsConfiguration, ConsentState, TrackableEvent


@runtime_checkable
class AnalyticsSdkProtocol(Protocol):
    """Narrow view of the vendor analytics SDK.

    Adapter boundary between the app's tracking logic and the analytics
    provider (PostHog today). All calls are fire-and-forget: implementations
    log their own failures and never raise.
    """

    def configure(self, configuration: AnalyticsConfiguration) -> None:
        """(Re)initialize the SDK. Repeating a call with the same snapshot is harmless."""
        ...

    def get_consent(self) -> ConsentState:
        """Return the consent state the SDK currently enforces."""
        ...

    def set_consent(self, state: ConsentState) -> None:
        """Record a new consent state in the SDK."""
        ...

    def track(self, event: TrackableEvent) -> None:
        """Submit a single event. No result is reported."""
        ...

    def track_app_launch(self, app_name: str, app_version: str) -> None:
        """Submit the app launch event."""
        ...

    def shutdown(self) -> None:
        """Flush anything queued and release the SDK's resources."""
        ...
