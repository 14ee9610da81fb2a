"""Tests for EngagementTracker."""

import pytest

from pronto.adapters.analytics.fake import FakeAnalyticsSdk
from pronto.adapters.event_log.fake import FakeEventLogSink
from pronto.domains.analytics.engagement import EngagementTracker
from pronto.domains.analytics.tracking import TrackingOutcome
from pronto.domains.analytics.types import CartInteraction, ConsentState


def _build(consent: ConsentState, diagnostics):
    sdk = FakeAnalyticsSdk(consent=consent)
    sink = FakeEventLogSink()
    return sdk, sink, EngagementTracker(sdk, sink, diagnostics)


@pytest.mark.parametrize("consent", [ConsentState.OPT_OUT, ConsentState.UNKNOWN])
def test_nothing_submitted_without_opt_in(consent, diagnostics):
    sdk, sink, tracker = _build(consent, diagnostics)

    outcomes = [
        tracker.track_event("promoTapped", {"banner": "summer"}),
        tracker.track_cart_view(),
        tracker.track_checkout_start(),
        tracker.track_add_to_cart("pizza-1", quantity=2),
        tracker.track_remove_from_cart("pizza-1"),
        tracker.track_item_view("pizza-1"),
        tracker.track_search("sushi", result_count=4),
    ]

    assert set(outcomes) == {TrackingOutcome.SUPPRESSED}
    assert sdk.tracked == []
    assert sink.entries == []


def test_custom_event_forwarded_to_sdk_and_sink(diagnostics):
    sdk, sink, tracker = _build(ConsentState.OPT_IN, diagnostics)

    assert tracker.track_event("promoTapped", {"banner": "summer"}) is TrackingOutcome.TRACKED

    assert sdk.tracked[0].name == "promoTapped"
    assert sdk.tracked[0].attributes == {"banner": "summer"}
    assert sink.entries[0].event_name == "promoTapped"
    assert sink.entries[0].attributes == {"banner": "summer"}


def test_cart_view_and_checkout_start(diagnostics):
    sdk, sink, tracker = _build(ConsentState.OPT_IN, diagnostics)

    tracker.track_cart_view()
    tracker.track_checkout_start()

    assert [e.name for e in sdk.tracked] == ["Cart", "Cart"]
    assert [e.attributes["interactionName"] for e in sdk.tracked] == ["view", "checkoutStart"]
    assert len(sink.entries) == 2


def test_add_to_cart_carries_line_item(diagnostics):
    sdk, _, tracker = _build(ConsentState.OPT_IN, diagnostics)

    tracker.track_add_to_cart("pizza-1", quantity=2, price=12.5)

    assert sdk.tracked[0].attributes == {
        "interactionName": "addToCart",
        "catalogObjectId": "pizza-1",
        "catalogObjectType": "menuItem",
        "quantity": 2,
        "currency": "USD",
        "price": 12.5,
    }


def test_remove_from_cart(diagnostics):
    sdk, _, tracker = _build(ConsentState.OPT_IN, diagnostics)

    tracker.track_remove_from_cart("pizza-1")

    assert sdk.tracked[0].attributes["interactionName"] == "removeFromCart"
    assert sdk.tracked[0].attributes["quantity"] == 0


def test_item_view_is_catalog_event(diagnostics):
    sdk, sink, tracker = _build(ConsentState.OPT_IN, diagnostics)

    tracker.track_item_view("pizza-1", attributes={"name": "Margherita"})

    event = sdk.tracked[0]
    assert event.name == "Catalog"
    assert event.attributes == {
        "name": "Margherita",
        "catalogObjectId": "pizza-1",
        "type": "menuItem",
        "interactionName": "view",
    }
    assert sink.entries[0].event_name == "Catalog"


def test_search_is_custom_event(diagnostics):
    sdk, _, tracker = _build(ConsentState.OPT_IN, diagnostics)

    tracker.track_search("sushi", result_count=4)

    assert sdk.tracked[0].name == "search"
    assert sdk.tracked[0].attributes == {"query": "sushi", "resultCount": 4}


@pytest.mark.parametrize(
    "name,attributes",
    [
        ("", {}),
        ("   ", {}),
        (None, {}),
        ("promoTapped", ["not", "a", "mapping"]),
        ("promoTapped", {1: "int key"}),
    ],
)
def test_malformed_custom_event_not_submitted(name, attributes, diagnostics):
    sdk, sink, tracker = _build(ConsentState.OPT_IN, diagnostics)

    assert tracker.track_event(name, attributes) is TrackingOutcome.CONSTRUCTION_FAILED
    assert sdk.tracked == []
    assert sink.entries == []


@pytest.mark.parametrize(
    "attributes",
    [
        {"quantity": 1},
        {"catalogObjectId": "", "quantity": 1},
        {"catalogObjectId": "pizza-1"},
        {"catalogObjectId": "pizza-1", "quantity": -1},
        {"catalogObjectId": "pizza-1", "quantity": "two"},
    ],
)
def test_malformed_line_item_not_submitted(attributes, diagnostics):
    sdk, sink, tracker = _build(ConsentState.OPT_IN, diagnostics)

    outcome = tracker.track_cart(CartInteraction.ADD_TO_CART, attributes)

    assert outcome is TrackingOutcome.CONSTRUCTION_FAILED
    assert sdk.tracked == []
    assert sink.entries == []


def test_unknown_cart_interaction_not_submitted(diagnostics):
    sdk, _, tracker = _build(ConsentState.OPT_IN, diagnostics)

    assert tracker.track_cart("teleport") is TrackingOutcome.CONSTRUCTION_FAILED
    assert sdk.tracked == []


def test_item_view_requires_product_id(diagnostics):
    sdk, _, tracker = _build(ConsentState.OPT_IN, diagnostics)

    assert tracker.track_item_view("") is TrackingOutcome.CONSTRUCTION_FAILED
    assert sdk.tracked == []
