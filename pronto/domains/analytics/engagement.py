"""Engagement tracking: custom, cart and catalog events.

Shares the screen emitter's pipeline, so nothing reaches the SDK or the
local sink without opt-in and a well-formed payload.

Usage:
    engagement.track_event("promoBannerTapped", {"banner": "summer"})
    engagement.track_add_to_cart("pizza-1", quantity=2, price=12.5)
    engagement.track_search("sushi", result_count=4)
"""

from typing import Any, Mapping, Optional

from pronto.domains.analytics.tracking import ConsentGatedEmitter, TrackingOutcome
from pronto.domains.analytics.types import (
    SEARCH_EVENT_NAME,
    CartEvent,
    CartInteraction,
    CatalogEvent,
    CatalogInteraction,
    CustomEvent,
)

DEFAULT_CURRENCY = "USD"
DEFAULT_CATALOG_OBJECT_TYPE = "menuItem"


class EngagementTracker(ConsentGatedEmitter):
    """Consent-gated engagement events."""

    def track_event(
        self, name: str, attributes: Optional[Mapping[str, Any]] = None
    ) -> TrackingOutcome:
        """Track a custom event called ``name``."""
        return self._emit(f"Custom event '{name}'", lambda: CustomEvent.build(name, attributes))

    def track_cart(
        self, interaction: CartInteraction, attributes: Optional[Mapping[str, Any]] = None
    ) -> TrackingOutcome:
        """Track a cart interaction with raw attributes."""
        return self._emit("Cart event", lambda: CartEvent.for_interaction(interaction, attributes))

    def track_catalog(
        self, interaction: CatalogInteraction, attributes: Optional[Mapping[str, Any]] = None
    ) -> TrackingOutcome:
        """Track a catalog interaction with raw attributes."""
        return self._emit(
            "Catalog event", lambda: CatalogEvent.for_interaction(interaction, attributes)
        )

    def track_cart_view(self) -> TrackingOutcome:
        return self.track_cart(CartInteraction.VIEW)

    def track_checkout_start(self) -> TrackingOutcome:
        return self.track_cart(CartInteraction.CHECKOUT_START)

    def track_add_to_cart(
        self,
        product_id: str,
        quantity: int = 1,
        price: Optional[float] = None,
        currency: str = DEFAULT_CURRENCY,
        product_type: str = DEFAULT_CATALOG_OBJECT_TYPE,
    ) -> TrackingOutcome:
        """Track a line item being added to the cart."""
        attributes: dict[str, Any] = {
            "catalogObjectId": product_id,
            "catalogObjectType": product_type,
            "quantity": quantity,
            "currency": currency,
        }
        if price is not None:
            attributes["price"] = price
        return self.track_cart(CartInteraction.ADD_TO_CART, attributes)

    def track_remove_from_cart(
        self, product_id: str, product_type: str = DEFAULT_CATALOG_OBJECT_TYPE
    ) -> TrackingOutcome:
        """Track a line item being removed from the cart."""
        return self.track_cart(
            CartInteraction.REMOVE_FROM_CART,
            {"catalogObjectId": product_id, "catalogObjectType": product_type, "quantity": 0},
        )

    def track_item_view(
        self,
        product_id: str,
        product_type: str = DEFAULT_CATALOG_OBJECT_TYPE,
        attributes: Optional[Mapping[str, Any]] = None,
    ) -> TrackingOutcome:
        """Track a catalog object (menu item, restaurant, ...) being viewed."""
        payload = {**(attributes or {}), "catalogObjectId": product_id, "type": product_type}
        return self.track_catalog(CatalogInteraction.VIEW, payload)

    def track_search(self, query: str, result_count: int) -> TrackingOutcome:
        """Search is reported as a custom event."""
        return self.track_event(SEARCH_EVENT_NAME, {"query": query, "resultCount": result_count})
