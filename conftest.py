"""Root conftest for pytest configuration and shared fixtures.

Loaded before both testpaths (tests/ and pronto/), so its fixtures are
available to centralized tests AND colocated adapter/domain tests.
"""

import logging
import os

import pytest

pytest_plugins = ("pytest_asyncio",)

# ---------------------------------------------------------------------------
# Environment variables, set before any pronto module import.
# Uses setdefault so real env vars (CI) are never overridden.
# ---------------------------------------------------------------------------
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DIAGNOSTICS_ENABLED", "true")


# ---------------------------------------------------------------------------
# Shared fake fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_event_bus():
    """Fake EventBus that records published events."""
    from pronto.adapters.event_bus.fake import FakeEventBus

    return FakeEventBus()


@pytest.fixture
def delivering_event_bus():
    """Fake EventBus that also calls registered subscribers."""
    from pronto.adapters.event_bus.fake import FakeEventBus

    return FakeEventBus(call_subscribers=True)


@pytest.fixture
def fake_sdk():
    """Fake analytics SDK with UNKNOWN consent."""
    from pronto.adapters.analytics.fake import FakeAnalyticsSdk

    return FakeAnalyticsSdk()


@pytest.fixture
def fake_event_log():
    """Fake event log sink."""
    from pronto.adapters.event_log.fake import FakeEventLogSink

    return FakeEventLogSink()


@pytest.fixture
def settings_store():
    """Empty in-memory settings store."""
    from pronto.adapters.settings_store.in_memory import InMemorySettingsStore

    return InMemorySettingsStore()


@pytest.fixture
def test_settings():
    """Settings for a non-production build with no env credentials."""
    from pronto.core.config import Environment, Settings

    return Settings(
        ENVIRONMENT=Environment.TEST,
        DIAGNOSTICS_ENABLED=True,
        ANALYTICS_APP_ID="",
        ANALYTICS_ENDPOINT="",
        APP_NAME=None,
        APP_VERSION=None,
        _env_file=None,
    )


@pytest.fixture
def diagnostics():
    """Diagnostics channel at DEBUG, isolated from the global one."""
    from pronto.core.logging import configure_diagnostics

    channel = configure_diagnostics(True, name="pronto.test.diagnostics")
    yield channel
    channel.logger.setLevel(logging.NOTSET)
