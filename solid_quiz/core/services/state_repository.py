"""JSON file store for the persisted application state snapshot."""

from __future__ import annotations

from datetime import datetime, timezone
import json
import logging
import os
from pathlib import Path
from typing import Any

from solid_quiz.constants.storage_constants import SNAPSHOT_VERSION

logger = logging.getLogger(__name__)


class AppStateRepository:
    """Loads and saves the application state snapshot on local disk."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any] | None:
        """Return the last saved snapshot, or None when there is no usable one.

        A missing file is the normal first-run case. Unreadable or undecodable files, invalid
        JSON and non-object documents are logged and treated the same way, so
        a corrupted save never blocks startup.
        """
        if not self._path.exists():
            logger.info("No saved state at %s; starting fresh.", self._path)
            return None
        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read saved state at %s: %s", self._path, exc)
            return None
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            logger.warning("Saved state at %s is not valid JSON: %s", self._path, exc)
            return None
        if not isinstance(data, dict):
            logger.warning("Saved state at %s is not a JSON object; ignoring it.", self._path)
            return None
        return data

    def save(self, snapshot: dict[str, Any]) -> None:
        """Persist the snapshot atomically, stamping version and save time."""
        document = dict(snapshot)
        document["version"] = SNAPSHOT_VERSION
        document["saved_at"] = datetime.now(timezone.utc).isoformat()

        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            tmp_path.write_text(json.dumps(document, ensure_ascii=False, indent=2), encoding="utf-8")
            os.replace(tmp_path, self._path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise
        logger.debug("Saved state to %s", self._path)

    def clear(self) -> None:
        if self._path.exists():
            self._path.unlink()
