"""JSON file settings store.

The whole file is rewritten on every change. Writes go to a sibling temp
file first and are moved into place, so a crash never leaves a truncated
settings file behind.
"""

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class JsonFileSettingsStore:
    """SettingsStore persisted as a flat JSON object."""

    def __init__(self, path: Path) -> None:
        """Load existing values from ``path`` if the file exists."""
        self._path = Path(path)
        self._values: Dict[str, str] = self._load()

    def _load(self) -> Dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", self._path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring settings file %s: not a JSON object", self._path)
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _flush(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(json.dumps(self._values, indent=2, sort_keys=True), encoding="utf-8")
        os.replace(tmp, self._path)

    def get(self, key: str) -> Optional[str]:
        """Return the stored value or None."""
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        """Store a value and persist the file."""
        self._values[key] = value
        self._flush()

    def remove(self, key: str) -> None:
        """Delete a key if present and persist the file."""
        if self._values.pop(key, None) is not None:
            self._flush()
