"""Logging for the Pronto client.

Two channels:

- the application logger (``pronto``), formatted as JSON outside local
  development and as readable lines locally;
- the diagnostics channel (``pronto.diagnostics``), a development-only
  channel whose verbosity is fixed once at startup by
  ``configure_diagnostics``. Production builds silence it entirely.

Components receive a ``ContextualLogger`` by injection rather than importing
a global, so tests can hand them a logger of their own.
"""

import json
import logging
import sys
from typing import Any, Dict, Optional

from pronto.core.config import settings
from pronto.core.config.enums import Environment

DIAGNOSTICS_LOGGER_NAME = "pronto.diagnostics"

# Above CRITICAL, so nothing on a silenced channel is ever emitted.
SILENT = logging.CRITICAL + 10

_RESERVED_ATTRS = frozenset(vars(logging.makeLogRecord({})).keys()) | {"message"}


class JSONFormatter(logging.Formatter):
    """One JSON object per record, with context dimensions as top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        """Render the record as JSON."""
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter carrying a message prefix and context dimensions.

    Dimensions are attached to every record as ``extra`` fields, so the JSON
    formatter emits them as searchable keys.
    """

    def __init__(
        self,
        logger: logging.Logger,
        prefix: str = "",
        dimensions: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Wrap ``logger`` with a prefix and dimensions."""
        super().__init__(logger, {})
        self.prefix = prefix
        self.dimensions: Dict[str, Any] = dict(dimensions or {})

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        """Merge dimensions into ``extra`` and apply the prefix."""
        extra = dict(kwargs.get("extra") or {})
        extra.update(self.dimensions)
        kwargs["extra"] = extra
        if self.prefix:
            msg = f"{self.prefix}{msg}"
        return msg, kwargs

    def with_prefix(self, prefix: str) -> "ContextualLogger":
        """Return a copy that prefixes every message."""
        return ContextualLogger(self.logger, prefix, self.dimensions)

    def with_context(self, **dimensions: Any) -> "ContextualLogger":
        """Return a copy with extra dimensions merged in."""
        return ContextualLogger(self.logger, self.prefix, {**self.dimensions, **dimensions})


class LoggerConfigurator:
    """Builds ``ContextualLogger`` instances with a shared handler setup."""

    _handler_installed = False

    @classmethod
    def _install_handler(cls) -> None:
        if cls._handler_installed:
            return
        root = logging.getLogger("pronto")
        handler = logging.StreamHandler(sys.stdout)
        if settings.ENVIRONMENT == Environment.LOCAL:
            handler.setFormatter(
                logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s")
            )
        else:
            handler.setFormatter(JSONFormatter())
        root.addHandler(handler)
        root.setLevel(settings.LOG_LEVEL)
        cls._handler_installed = True

    @classmethod
    def configure_logger(
        cls, name: str, dimensions: Optional[Dict[str, Any]] = None
    ) -> ContextualLogger:
        """Return a contextual logger for ``name``."""
        cls._install_handler()
        return ContextualLogger(logging.getLogger(name), dimensions=dimensions)


def configure_diagnostics(
    enabled: bool, name: str = DIAGNOSTICS_LOGGER_NAME
) -> ContextualLogger:
    """Fix the verbosity of the diagnostics channel and return it.

    Called once at startup with ``settings.diagnostics_enabled``.
    """
    channel = LoggerConfigurator.configure_logger(name)
    channel.logger.setLevel(logging.DEBUG if enabled else SILENT)
    return channel


logger = LoggerConfigurator.configure_logger("pronto")
