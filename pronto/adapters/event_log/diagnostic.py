"""Event log sink writing to the diagnostics channel."""

import logging
from typing import Any, Mapping

from pronto.core.logging import ContextualLogger

_RULE = "-" * 50


class DiagnosticEventLogSink:
    """Writes a readable block per tracked event to the diagnostics logger.

    Silent whenever the diagnostics channel is (production builds).
    """

    def __init__(self, logger: ContextualLogger) -> None:
        """Attach to the diagnostics logger."""
        self._logger = logger

    def log_event_tracked(self, event_name: str, attributes: Mapping[str, Any]) -> None:
        """Log the event name and its attributes sorted by key."""
        if not self._logger.isEnabledFor(logging.DEBUG):
            return

        lines = [_RULE, f"Event Tracked: {event_name}", _RULE]
        if attributes:
            lines.append("Attributes:")
            lines.extend(f"  - {key}: {attributes[key]}" for key in sorted(attributes))
        else:
            lines.append("No attributes")
        lines.append(_RULE)

        self._logger.debug(
            "\n".join(lines),
            extra={"event_name": event_name, "attributes": dict(attributes)},
        )
