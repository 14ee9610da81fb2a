"""Settings store adapters.

Implements the SettingsStore protocol in memory (tests, ephemeral runs)
and as a JSON file on disk.
"""

from pronto.adapters.settings_store.in_memory import InMemorySettingsStore
from pronto.adapters.settings_store.json_file import JsonFileSettingsStore

__all__ = ["InMemorySettingsStore", "JsonFileSettingsStore"]
