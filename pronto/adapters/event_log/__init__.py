"""Local event log sinks.

A copy of every tracked event is forwarded here, independently of what
the analytics SDK does with it.
"""

from pronto.adapters.event_log.diagnostic import DiagnosticEventLogSink
from pronto.adapters.event_log.fake import FakeEventLogSink

__all__ = ["DiagnosticEventLogSink", "FakeEventLogSink"]
