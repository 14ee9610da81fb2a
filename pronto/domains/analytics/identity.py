"""Anonymous device identity used as the analytics distinct id."""

import uuid

from pronto.core.protocols import SettingsStore

DISTINCT_ID_KEY = "pronto.analytics.distinctId"


def get_or_create_distinct_id(store: SettingsStore) -> str:
    """Return the persisted distinct id, generating it on first launch."""
    distinct_id = store.get(DISTINCT_ID_KEY)
    if not distinct_id:
        distinct_id = str(uuid.uuid4())
        store.set(DISTINCT_ID_KEY, distinct_id)
    return distinct_id
