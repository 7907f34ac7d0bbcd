"""
Durable client-side storage.

A single JSON file holds one entry per namespace, each shaped as
{"state": {...}, "version": 0}. It stands in for the browser's local storage.
"""

import json
from pathlib import Path
from typing import Any, Optional

from attendance_portal.core.logging import get_logger

logger = get_logger(__name__)

STORAGE_VERSION = 0


class SessionStorage:
    """
    Namespaced key/value storage backed by a JSON file.
    """

    def __init__(self, path: Path):
        self.path = Path(path).expanduser()

    def _read_all(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            content = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable storage file {self.path}: {e}")
            return {}
        if not isinstance(content, dict):
            logger.warning(f"Ignoring malformed storage file {self.path}")
            return {}
        return content

    def _write_all(self, content: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(content, indent=2), encoding="utf-8")
        tmp_path.replace(self.path)

    def get_item(self, key: str) -> Optional[dict[str, Any]]:
        """Return the stored state for a namespace, or None."""
        entry = self._read_all().get(key)
        if not isinstance(entry, dict):
            return None
        state = entry.get("state")
        return state if isinstance(state, dict) else None

    def set_item(self, key: str, state: dict[str, Any]) -> None:
        content = self._read_all()
        content[key] = {"state": state, "version": STORAGE_VERSION}
        self._write_all(content)
        logger.debug(f"Persisted storage namespace '{key}'")

    def remove_item(self, key: str) -> None:
        content = self._read_all()
        if content.pop(key, None) is not None:
            self._write_all(content)
