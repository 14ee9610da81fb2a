"""Consent service.

Owns the user's opt-in / opt-out choice: persists it, pushes it into the
analytics SDK, and publishes ``consent.changed``. Every tracking path reads
consent from the SDK, so the SDK must hold the saved choice before anything
is tracked; ``apply_saved_consent`` is called right after SDK configuration.
"""

from pronto.adapters.analytics.protocols import AnalyticsSdkProtocol
from pronto.core.events.consent import ConsentChangedEvent
from pronto.core.logging import ContextualLogger
from pronto.core.protocols import EventBus, SettingsStore
from pronto.domains.analytics.types import ConsentState

CONSENT_KEY = "userConsentStatus"


class ConsentService:
    """Persisted consent, mirrored into the analytics SDK."""

    def __init__(
        self,
        store: SettingsStore,
        sdk: AnalyticsSdkProtocol,
        event_bus: EventBus,
        logger: ContextualLogger,
    ) -> None:
        """Load the saved consent from ``store``."""
        self._store = store
        self._sdk = sdk
        self._event_bus = event_bus
        self._logger = logger.with_prefix("ConsentService: ")
        self._state = ConsentState.parse(store.get(CONSENT_KEY))
        self._logger.debug("Loaded saved consent: %s", self._state.value)

    @property
    def state(self) -> ConsentState:
        """The user's saved consent."""
        return self._state

    def is_opted_in(self) -> bool:
        """True only if both the saved choice and the SDK say OPT_IN."""
        return self._state is ConsentState.OPT_IN and self._sdk.get_consent() is ConsentState.OPT_IN

    def is_opted_out(self) -> bool:
        """True if either the saved choice or the SDK says OPT_OUT."""
        return self._state is ConsentState.OPT_OUT or self._sdk.get_consent() is ConsentState.OPT_OUT

    async def set_consent(self, is_opted_in: bool) -> None:
        """Opt in or out."""
        if is_opted_in:
            await self.opt_in()
        else:
            await self.opt_out()

    async def opt_in(self) -> None:
        """Opt in to analytics."""
        await self._change(ConsentState.OPT_IN)

    async def opt_out(self) -> None:
        """Opt out of analytics."""
        await self._change(ConsentState.OPT_OUT)

    async def reset_consent(self) -> None:
        """Forget the saved choice.

        The SDK is left as it is; the next configuration applies UNKNOWN.
        """
        self._state = ConsentState.UNKNOWN
        self._store.remove(CONSENT_KEY)
        self._logger.debug("Consent reset")
        await self._event_bus.publish(ConsentChangedEvent(state=ConsentState.UNKNOWN))

    def apply_saved_consent(self) -> None:
        """Push the saved consent into the SDK."""
        self._sdk.set_consent(self._state)
        self._logger.debug(
            "Applied saved consent %s (SDK reports %s)",
            self._state.value,
            self._sdk.get_consent().value,
        )

    async def _change(self, state: ConsentState) -> None:
        self._state = state
        self._sdk.set_consent(state)
        self._store.set(CONSENT_KEY, state.value)
        self._logger.debug("User consent is now %s", state.value)
        await self._event_bus.publish(ConsentChangedEvent(state=state))
