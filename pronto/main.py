"""App bootstrap.

Mirrors app start: configure analytics once, submit the launch event, then
start listening for credential updates. Screens report their appearance
through ``ProntoApp.track_screen``; other engagement goes through
``container.engagement``. ``stop`` flushes the SDK before exit.

Usage:
    app = create_app()
    app.start()
    app.track_screen("Home")
    app.stop()
"""

from typing import Any, Mapping, Optional

from pronto.core.config import Settings, settings as default_settings
from pronto.core.container import Container, create_container
from pronto.core.logging import logger
from pronto.core.protocols import subscribe_all
from pronto.domains.analytics.tracking import TrackingOutcome


class ProntoApp:
    """Owns the container and the app-level analytics lifecycle."""

    def __init__(self, container: Container) -> None:
        """Wrap an already-built container."""
        self.container = container
        self._started = False

    def start(self) -> None:
        """Run the startup sequence. Calling it again does nothing."""
        if self._started:
            return

        diagnostics = self.container.diagnostics
        diagnostics.debug(
            "Initializing analytics SDK (environment=%s)",
            self.container.settings.ENVIRONMENT.value,
        )

        self.container.configuration_manager.configure()
        self.container.configuration_manager.track_app_launch()
        subscribe_all(self.container.event_bus, self.container.configuration_manager)

        self._started = True
        logger.info("Pronto analytics started")

    def track_screen(self, screen_name: str) -> TrackingOutcome:
        """Report that ``screen_name`` became visible."""
        return self.container.screen_tracking.track_screen(screen_name)

    def track_event(
        self, name: str, attributes: Optional[Mapping[str, Any]] = None
    ) -> TrackingOutcome:
        """Report a custom engagement event."""
        return self.container.engagement.track_event(name, attributes)

    def stop(self) -> None:
        """Flush and release the analytics SDK. ``start`` may be called again."""
        self.container.sdk.shutdown()
        self._started = False
        logger.info("Pronto analytics stopped")


def create_app(settings: Optional[Settings] = None) -> ProntoApp:
    """Build the app from settings (the global ones by default)."""
    return ProntoApp(create_container(settings or default_settings))
