"""Tests for ScreenTrackingEmitter."""

import pytest

from pronto.adapters.analytics.fake import FakeAnalyticsSdk
from pronto.adapters.event_log.fake import FakeEventLogSink
from pronto.domains.analytics.screen_tracking import ScreenTrackingEmitter, TrackingOutcome
from pronto.domains.analytics.types import ConsentState, ScreenViewEvent


def _build(consent: ConsentState, diagnostics):
    sdk = FakeAnalyticsSdk(consent=consent)
    sink = FakeEventLogSink()
    return sdk, sink, ScreenTrackingEmitter(sdk, sink, diagnostics)


@pytest.mark.parametrize("consent", [ConsentState.OPT_OUT, ConsentState.UNKNOWN])
def test_no_track_without_opt_in(consent, diagnostics):
    sdk, sink, emitter = _build(consent, diagnostics)

    assert emitter.track_screen("Home") is TrackingOutcome.SUPPRESSED
    assert sdk.tracked == []
    assert sink.entries == []


def test_opt_in_tracks_home(diagnostics):
    sdk, sink, emitter = _build(ConsentState.OPT_IN, diagnostics)

    assert emitter.track_screen("Home") is TrackingOutcome.TRACKED

    assert len(sdk.tracked) == 1
    event = sdk.tracked[0]
    assert isinstance(event, ScreenViewEvent)
    assert event.name == "ScreenView"
    assert event.attributes == {"screen_name": "Home"}

    assert len(sink.entries) == 1
    assert sink.entries[0].event_name == "ScreenView"
    assert sink.entries[0].attributes == {"screen_name": "Home"}


@pytest.mark.parametrize("bad_name", ["", "   ", None, 42])
def test_malformed_screen_name_is_not_submitted(bad_name, diagnostics):
    sdk, sink, emitter = _build(ConsentState.OPT_IN, diagnostics)

    assert emitter.track_screen(bad_name) is TrackingOutcome.CONSTRUCTION_FAILED
    assert sdk.tracked == []
    assert sink.entries == []


def test_each_appearance_is_tracked_independently(diagnostics):
    sdk, sink, emitter = _build(ConsentState.OPT_IN, diagnostics)

    for name in ["Home", "Search", "Home"]:
        emitter.track_screen(name)

    assert [e.attributes["screen_name"] for e in sdk.tracked] == ["Home", "Search", "Home"]
    assert len(sink.entries) == 3


def test_consent_is_read_on_every_call(diagnostics):
    sdk, sink, emitter = _build(ConsentState.OPT_IN, diagnostics)

    emitter.track_screen("Home")
    sdk.consent = ConsentState.OPT_OUT
    emitter.track_screen("Cart")
    sdk.consent = ConsentState.OPT_IN
    emitter.track_screen("Profile")

    assert [e.attributes["screen_name"] for e in sdk.tracked] == ["Home", "Profile"]


def test_sink_receives_copy_even_if_sdk_drops_event(diagnostics):
    class DroppingSdk(FakeAnalyticsSdk):
        def track(self, event):
            return None

    sdk = DroppingSdk(consent=ConsentState.OPT_IN)
    sink = FakeEventLogSink()

    ScreenTrackingEmitter(sdk, sink, diagnostics).track_screen("Checkout")

    assert sink.entries[0].attributes == {"screen_name": "Checkout"}
