"""Dependency Injection Container.

The container is a simple immutable dataclass that holds protocol implementations.
It has no construction logic; that belongs in the factory.

Design principles:
- Container serves, factory builds
- Fail fast: all construction at startup
- Testing: construct directly with fakes
"""

from dataclasses import dataclass

from pronto.adapters.analytics.protocols import AnalyticsSdkProtocol
from pronto.adapters.event_log.protocols import EventLogSinkProtocol
from pronto.core.config import Settings
from pronto.core.logging import ContextualLogger
from pronto.core.protocols import EventBus, SettingsStore
from pronto.domains.analytics.configuration import ConfigurationManager
from pronto.domains.analytics.engagement import EngagementTracker
from pronto.domains.analytics.screen_tracking import ScreenTrackingEmitter
from pronto.domains.consent.service import ConsentService
from pronto.domains.credentials.protocols import CredentialsManagerProtocol


@dataclass(frozen=True)
class Container:
    """Immutable container holding the wired analytics stack.

    Usage:
        # Production
        container = create_container(settings)

        # Testing: construct directly with fakes (see conftest.py)
        test_container = Container(sdk=FakeAnalyticsSdk(), ...)
    """

    settings: Settings
    diagnostics: ContextualLogger
    settings_store: SettingsStore
    event_bus: EventBus
    sdk: AnalyticsSdkProtocol
    event_log: EventLogSinkProtocol
    credentials: CredentialsManagerProtocol
    consent: ConsentService
    configuration_manager: ConfigurationManager
    screen_tracking: ScreenTrackingEmitter
    engagement: EngagementTracker
