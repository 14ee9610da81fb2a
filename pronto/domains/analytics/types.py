"""Analytics value types: configuration snapshot, consent state, events."""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict, Literal, Optional, Type, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from pronto.core.exceptions import EventConstructionError

# Marker used by unconfigured build defaults ("YOUR_DEV_APP_ID", ...).
PLACEHOLDER_MARKER = "YOUR_"

SCREEN_VIEW_EVENT_NAME = "ScreenView"
APP_LAUNCH_EVENT_NAME = "AppLaunch"
CART_EVENT_NAME = "Cart"
CATALOG_EVENT_NAME = "Catalog"
SEARCH_EVENT_NAME = "search"

E = TypeVar("E", bound="TrackableEvent")


def _is_usable(value: str) -> bool:
    return bool(value.strip()) and PLACEHOLDER_MARKER not in value


class ConsentState(str, Enum):
    """The user's recorded analytics consent."""

    OPT_IN = "optIn"
    OPT_OUT = "optOut"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, raw: str | None) -> "ConsentState":
        """Parse a persisted value; anything unrecognised is UNKNOWN."""
        try:
            return cls(raw)
        except ValueError:
            return cls.UNKNOWN


class AnalyticsConfiguration(BaseModel):
    """Immutable snapshot of what the analytics SDK needs to start.

    Replaced wholesale when credentials change, never edited in place.
    """

    model_config = ConfigDict(frozen=True)

    app_id: str = ""
    endpoint: str = ""
    enable_logging: bool = False
    track_screens: bool = True
    track_lifecycle: bool = True
    session_timeout_seconds: int = Field(default=1800, gt=0)

    @property
    def is_configured(self) -> bool:
        """True iff both the app id and the endpoint are real values."""
        return _is_usable(self.app_id) and _is_usable(self.endpoint)


class TrackableEvent(BaseModel):
    """A named event with flat attributes, as submitted to the SDK."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    attributes: Dict[str, Any] = Field(default_factory=dict)


class ScreenViewEvent(TrackableEvent):
    """Emitted when a screen becomes visible."""

    name: Literal["ScreenView"] = SCREEN_VIEW_EVENT_NAME
    attributes: Dict[str, str]

    @field_validator("attributes")
    @classmethod
    def _require_screen_name(cls, value: Dict[str, str]) -> Dict[str, str]:
        screen_name = value.get("screen_name")
        if not screen_name or not screen_name.strip():
            raise ValueError("screen_name must be a non-empty string")
        return value

    @classmethod
    def for_screen(cls, screen_name: str) -> "ScreenViewEvent":
        """Build the event for ``screen_name``.

        Raises:
            EventConstructionError: If the screen name is empty or not a string.
        """
        try:
            return cls(attributes={"screen_name": screen_name})
        except ValidationError as e:
            raise EventConstructionError(SCREEN_VIEW_EVENT_NAME, str(e)) from e


class AppLaunchEvent(TrackableEvent):
    """Emitted once per process start."""

    name: Literal["AppLaunch"] = APP_LAUNCH_EVENT_NAME

    @classmethod
    def for_app(cls, app_name: str, app_version: str) -> "AppLaunchEvent":
        """Build the launch event for the given bundle metadata."""
        return cls(attributes={"app_name": app_name, "app_version": app_version})


class CartInteraction(str, Enum):
    """Interaction names carried by Cart events."""

    ADD_TO_CART = "addToCart"
    REMOVE_FROM_CART = "removeFromCart"
    UPDATE_QUANTITY = "updateQuantity"
    APPLY_PROMO_CODE = "applyPromoCode"
    VIEW = "view"
    CHECKOUT_START = "checkoutStart"


class CatalogInteraction(str, Enum):
    """Interaction names carried by Catalog events."""

    VIEW = "view"
    COMMENT = "comment"


# Cart interactions that describe a single line item.
LINE_ITEM_INTERACTIONS = frozenset(
    {
        CartInteraction.ADD_TO_CART.value,
        CartInteraction.REMOVE_FROM_CART.value,
        CartInteraction.UPDATE_QUANTITY.value,
    }
)


def _require_text(attributes: Dict[str, Any], key: str) -> None:
    value = attributes.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{key} must be a non-empty string")


def _construct(model: Type[E], event_name: str, attributes: Any, **fields: Any) -> E:
    """Instantiate ``model``, reporting any bad payload as EventConstructionError."""
    if attributes is not None and not isinstance(attributes, Mapping):
        raise EventConstructionError(event_name, "attributes must be a mapping")
    interaction = fields.pop("interaction", None)
    payload = dict(attributes or {})
    if interaction is not None:
        payload["interactionName"] = interaction
    try:
        return model(attributes=payload, **fields)
    except ValidationError as e:
        raise EventConstructionError(event_name, str(e)) from e


class CustomEvent(TrackableEvent):
    """Free-form engagement event with a caller-chosen name."""

    @field_validator("name")
    @classmethod
    def _require_visible_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value

    @classmethod
    def build(cls, name: str, attributes: Optional[Mapping[str, Any]] = None) -> "CustomEvent":
        """Build a custom event.

        Raises:
            EventConstructionError: If the name is blank or not a string, or
                the attributes are not a string-keyed mapping.
        """
        label = name if isinstance(name, str) and name.strip() else "<unnamed>"
        return _construct(cls, label, attributes, name=name)


class CartEvent(TrackableEvent):
    """Cart interaction: view, checkout start, or a line-item change."""

    name: Literal["Cart"] = CART_EVENT_NAME

    @model_validator(mode="after")
    def _check_line_item(self) -> "CartEvent":
        if self.attributes.get("interactionName") in LINE_ITEM_INTERACTIONS:
            _require_text(self.attributes, "catalogObjectId")
            quantity = self.attributes.get("quantity")
            if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 0:
                raise ValueError("quantity must be a non-negative integer")
        return self

    @classmethod
    def for_interaction(
        cls, interaction: CartInteraction, attributes: Optional[Mapping[str, Any]] = None
    ) -> "CartEvent":
        """Build a cart event for ``interaction``.

        Line-item interactions need ``catalogObjectId`` and ``quantity``.
        """
        try:
            interaction = CartInteraction(interaction)
        except ValueError as e:
            raise EventConstructionError(CART_EVENT_NAME, str(e)) from e
        return _construct(cls, CART_EVENT_NAME, attributes, interaction=interaction.value)


class CatalogEvent(TrackableEvent):
    """Interaction with a catalog object such as a menu item."""

    name: Literal["Catalog"] = CATALOG_EVENT_NAME

    @model_validator(mode="after")
    def _check_catalog_object(self) -> "CatalogEvent":
        _require_text(self.attributes, "catalogObjectId")
        _require_text(self.attributes, "type")
        return self

    @classmethod
    def for_interaction(
        cls, interaction: CatalogInteraction, attributes: Optional[Mapping[str, Any]] = None
    ) -> "CatalogEvent":
        """Build a catalog event; ``catalogObjectId`` and ``type`` are required."""
        try:
            interaction = CatalogInteraction(interaction)
        except ValueError as e:
            raise EventConstructionError(CATALOG_EVENT_NAME, str(e)) from e
        return _construct(cls, CATALOG_EVENT_NAME, attributes, interaction=interaction.value)
