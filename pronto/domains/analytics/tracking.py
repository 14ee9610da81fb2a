"""Consent-gated emission shared by the screen and engagement trackers."""

from enum import Enum
from typing import Callable

from pronto.adapters.analytics.protocols import AnalyticsSdkProtocol
from pronto.adapters.event_log.protocols import EventLogSinkProtocol
from pronto.core.exceptions import EventConstructionError
from pronto.core.logging import ContextualLogger
from pronto.domains.analytics.types import ConsentState, TrackableEvent


class TrackingOutcome(str, Enum):
    """What happened to one tracking call."""

    TRACKED = "tracked"
    SUPPRESSED = "suppressed"
    CONSTRUCTION_FAILED = "construction_failed"


class ConsentGatedEmitter:
    """Checks consent, builds the event, submits it, copies it to the sink."""

    def __init__(
        self,
        sdk: AnalyticsSdkProtocol,
        sink: EventLogSinkProtocol,
        logger: ContextualLogger,
    ) -> None:
        """Wire the emitter to the SDK, the local sink and diagnostics."""
        self._sdk = sdk
        self._sink = sink
        self._logger = logger

    def _emit(self, label: str, build: Callable[[], TrackableEvent]) -> TrackingOutcome:
        if self._sdk.get_consent() is not ConsentState.OPT_IN:
            self._logger.debug("%s not tracked - user has not opted in to consent", label)
            return TrackingOutcome.SUPPRESSED

        try:
            event = build()
        except EventConstructionError as e:
            self._logger.debug("Failed to create %s event: %s", label, e)
            return TrackingOutcome.CONSTRUCTION_FAILED

        self._sdk.track(event)
        self._logger.debug("%s tracked: %s", label, event.attributes)

        # Forwarded regardless of what the SDK did with the event.
        self._sink.log_event_tracked(event_name=event.name, attributes=event.attributes)
        return TrackingOutcome.TRACKED
