"""Tests for PostHogAnalyticsSdk."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

import pytest

from pronto.adapters.analytics.posthog import SESSION_ID_PROPERTY, PostHogAnalyticsSdk
from pronto.domains.analytics.types import (
    AnalyticsConfiguration,
    ConsentState,
    CustomEvent,
    ScreenViewEvent,
)

CONFIG = AnalyticsConfiguration(app_id="phc_test", endpoint="https://eu.posthog.example")


@dataclass
class FakePostHogClient:
    api_key: str
    kwargs: Dict[str, Any]
    captured: List[Dict[str, Any]] = field(default_factory=list)
    shut_down: bool = False
    fail_capture: bool = False

    def capture(self, **kwargs: Any) -> None:
        if self.fail_capture:
            raise RuntimeError("network down")
        self.captured.append(kwargs)

    def shutdown(self) -> None:
        self.shut_down = True


class ClientFactory:
    def __init__(self) -> None:
        self.clients: List[FakePostHogClient] = []

    def __call__(self, api_key: str, **kwargs: Any) -> FakePostHogClient:
        client = FakePostHogClient(api_key=api_key, kwargs=kwargs)
        self.clients.append(client)
        return client


class ManualClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def factory():
    return ClientFactory()


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def sdk(factory, clock):
    return PostHogAnalyticsSdk(
        "device-1",
        client_factory=factory,
        base_properties={"environment": "test"},
        clock=clock,
    )


def test_configure_builds_client(sdk, factory):
    sdk.configure(CONFIG)

    assert sdk.is_configured
    assert factory.clients[0].api_key == "phc_test"
    assert factory.clients[0].kwargs["host"] == "https://eu.posthog.example"


def test_same_snapshot_keeps_client(sdk, factory):
    sdk.configure(CONFIG)
    sdk.configure(CONFIG.model_copy())

    assert len(factory.clients) == 1


def test_new_snapshot_replaces_client(sdk, factory):
    sdk.configure(CONFIG)
    sdk.configure(CONFIG.model_copy(update={"app_id": "phc_other"}))

    assert len(factory.clients) == 2
    assert factory.clients[0].shut_down
    assert not factory.clients[1].shut_down


def test_factory_failure_is_logged_not_raised(caplog):
    def broken_factory(*args, **kwargs):
        raise ValueError("bad key")

    sdk = PostHogAnalyticsSdk("device-1", client_factory=broken_factory)
    sdk.configure(CONFIG)

    assert not sdk.is_configured
    assert "Failed to initialize PostHog client" in caplog.text


def test_track_before_configure_is_dropped(sdk, factory):
    sdk.set_consent(ConsentState.OPT_IN)
    sdk.track(ScreenViewEvent.for_screen("Home"))
    assert factory.clients == []


@pytest.mark.parametrize("consent", [ConsentState.UNKNOWN, ConsentState.OPT_OUT])
def test_track_without_consent_is_dropped(sdk, factory, consent):
    sdk.configure(CONFIG)
    sdk.set_consent(consent)

    sdk.track(ScreenViewEvent.for_screen("Home"))

    assert factory.clients[0].captured == []


def test_track_captures_with_base_properties(sdk, factory):
    sdk.configure(CONFIG)
    sdk.set_consent(ConsentState.OPT_IN)

    sdk.track(ScreenViewEvent.for_screen("Home"))

    captured = factory.clients[0].captured
    assert captured[0]["properties"].pop(SESSION_ID_PROPERTY)
    assert captured == [
        {
            "distinct_id": "device-1",
            "event": "ScreenView",
            "properties": {"environment": "test", "screen_name": "Home"},
        }
    ]


def test_capture_failure_is_swallowed(sdk, factory, caplog):
    sdk.configure(CONFIG)
    sdk.set_consent(ConsentState.OPT_IN)
    factory.clients[0].fail_capture = True

    sdk.track(ScreenViewEvent.for_screen("Home"))

    assert "Failed to track analytics event 'ScreenView'" in caplog.text


def test_track_app_launch(sdk, factory):
    sdk.configure(CONFIG)
    sdk.set_consent(ConsentState.OPT_IN)

    sdk.track_app_launch("Pronto", "1.0.0")

    captured = factory.clients[0].captured[0]
    assert captured["event"] == "AppLaunch"
    assert captured["properties"]["app_version"] == "1.0.0"


def _configure(sdk, **options):
    sdk.configure(CONFIG.model_copy(update=options))
    sdk.set_consent(ConsentState.OPT_IN)


def test_screen_views_dropped_when_screen_tracking_off(sdk, factory):
    _configure(sdk, track_screens=False)

    sdk.track(ScreenViewEvent.for_screen("Home"))
    sdk.track_app_launch("Pronto", "1.0.0")

    assert [c["event"] for c in factory.clients[0].captured] == ["AppLaunch"]


def test_app_launch_dropped_when_lifecycle_tracking_off(sdk, factory):
    _configure(sdk, track_lifecycle=False)

    sdk.track_app_launch("Pronto", "1.0.0")
    sdk.track(ScreenViewEvent.for_screen("Home"))

    assert [c["event"] for c in factory.clients[0].captured] == ["ScreenView"]


def test_both_options_off_still_sends_engagement_events(sdk, factory):
    _configure(sdk, track_screens=False, track_lifecycle=False)

    sdk.track(ScreenViewEvent.for_screen("Home"))
    sdk.track_app_launch("P", "1")
    sdk.track(CustomEvent.build("promoTapped"))

    assert [c["event"] for c in factory.clients[0].captured] == ["promoTapped"]


def _session_ids(client):
    return [c["properties"][SESSION_ID_PROPERTY] for c in client.captured]


def test_session_kept_within_timeout(sdk, factory, clock):
    _configure(sdk, session_timeout_seconds=60)

    sdk.track(ScreenViewEvent.for_screen("Home"))
    clock.now += 59
    sdk.track(ScreenViewEvent.for_screen("Menu"))
    clock.now += 59
    sdk.track(ScreenViewEvent.for_screen("Cart"))

    assert len(set(_session_ids(factory.clients[0]))) == 1


def test_session_rotates_after_timeout(sdk, factory, clock):
    _configure(sdk, session_timeout_seconds=60)

    sdk.track(ScreenViewEvent.for_screen("Home"))
    clock.now += 61
    sdk.track(ScreenViewEvent.for_screen("Home"))

    first, second = _session_ids(factory.clients[0])
    assert first != second


def test_shutdown_flushes_and_unconfigures(sdk, factory):
    _configure(sdk)

    sdk.shutdown()

    assert factory.clients[0].shut_down
    assert not sdk.is_configured

    sdk.track(ScreenViewEvent.for_screen("Home"))
    assert factory.clients[0].captured == []


def test_shutdown_before_configure_is_noop(sdk, factory):
    sdk.shutdown()
    assert factory.clients == []


def test_configure_after_shutdown_builds_new_client(sdk, factory):
    sdk.configure(CONFIG)
    sdk.shutdown()
    sdk.configure(CONFIG)

    assert len(factory.clients) == 2
