"""Screen tracking emitter.

Called each time a screen becomes visible. One call makes at most one
submission attempt; there is no retry and no queue.
"""

from pronto.domains.analytics.tracking import ConsentGatedEmitter, TrackingOutcome
from pronto.domains.analytics.types import ScreenViewEvent

__all__ = ["ScreenTrackingEmitter", "TrackingOutcome"]


class ScreenTrackingEmitter(ConsentGatedEmitter):
    """Consent-gated ScreenView submission."""

    def track_screen(self, screen_name: str) -> TrackingOutcome:
        """Track that ``screen_name`` became visible."""
        return self._emit("Screen view", lambda: ScreenViewEvent.for_screen(screen_name))
