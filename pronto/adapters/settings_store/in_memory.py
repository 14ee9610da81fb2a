"""In-memory settings store."""

from typing import Dict, Optional


class InMemorySettingsStore:
    """Dict-backed SettingsStore. Nothing survives the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        """Initialize, optionally pre-seeded with ``initial``."""
        self.values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        """Return the stored value or None."""
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        """Store a value."""
        self.values[key] = value

    def remove(self, key: str) -> None:
        """Delete a key if present."""
        self.values.pop(key, None)
