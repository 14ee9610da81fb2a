"""Container Factory.

All construction logic lives here. The factory reads settings and builds
the container with environment-appropriate implementations.
"""

from typing import Optional

from pronto.adapters.analytics.posthog import PostHogAnalyticsSdk
from pronto.adapters.event_bus.in_memory import InMemoryEventBus
from pronto.adapters.event_log.diagnostic import DiagnosticEventLogSink
from pronto.adapters.settings_store import InMemorySettingsStore, JsonFileSettingsStore
from pronto.core.config import Settings
from pronto.core.container.container import Container
from pronto.core.logging import configure_diagnostics, logger
from pronto.core.protocols import SettingsStore
from pronto.domains.analytics.configuration import ConfigurationManager
from pronto.domains.analytics.engagement import EngagementTracker
from pronto.domains.analytics.identity import get_or_create_distinct_id
from pronto.domains.analytics.screen_tracking import ScreenTrackingEmitter
from pronto.domains.consent.service import ConsentService
from pronto.domains.credentials.manager import CredentialsManager


def create_container(
    settings: Settings, settings_store: Optional[SettingsStore] = None
) -> Container:
    """Build the container for ``settings``.

    Args:
        settings: Application settings.
        settings_store: Override for the persisted settings. Defaults to a
            JSON file at ``SETTINGS_STORE_PATH``, or memory if that is unset.
    """
    # Verbosity of the diagnostics channel is decided here, once.
    diagnostics = configure_diagnostics(settings.diagnostics_enabled)

    if settings_store is None:
        settings_store = _create_settings_store(settings)

    event_bus = InMemoryEventBus()

    sdk = PostHogAnalyticsSdk(
        distinct_id=get_or_create_distinct_id(settings_store),
        base_properties={"environment": settings.ENVIRONMENT.value},
    )

    credentials = CredentialsManager(settings_store, event_bus, settings)
    consent = ConsentService(settings_store, sdk, event_bus, diagnostics)

    configuration_manager = ConfigurationManager(
        sdk=sdk,
        credentials=credentials,
        settings=settings,
        logger=diagnostics,
        consent=consent,
    )
    event_log = DiagnosticEventLogSink(diagnostics)
    screen_tracking = ScreenTrackingEmitter(sdk, event_log, diagnostics)
    engagement = EngagementTracker(sdk, event_log, diagnostics)

    logger.info(
        "Analytics container created (env=%s, diagnostics=%s)",
        settings.ENVIRONMENT.value,
        settings.diagnostics_enabled,
    )

    return Container(
        settings=settings,
        diagnostics=diagnostics,
        settings_store=settings_store,
        event_bus=event_bus,
        sdk=sdk,
        event_log=event_log,
        credentials=credentials,
        consent=consent,
        configuration_manager=configuration_manager,
        screen_tracking=screen_tracking,
        engagement=engagement,
    )


def _create_settings_store(settings: Settings) -> SettingsStore:
    if settings.SETTINGS_STORE_PATH is None:
        logger.warning("SETTINGS_STORE_PATH not set; settings will not persist")
        return InMemorySettingsStore()
    return JsonFileSettingsStore(settings.SETTINGS_STORE_PATH)
