"""
Local persistence for the user's text and edit history.

``FileStorage`` is a tiny key/value store kept in one JSON file, with an optional size
quota. ``DocumentStore`` saves and restores a ``ClientDocument`` on top of it, and
imports/exports documents as standalone JSON files.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from tone_picker.exceptions import ImportFormatError, StorageFailure
from tone_picker.models.document import MAX_HISTORY_SIZE, ClientDocument, now_ms

logger = logging.getLogger(__name__)

STORAGE_KEY = "tone-picker-data"
EXPORT_VERSION = "1.0.0"
DEFAULT_STORAGE_PATH = Path.home() / ".tone-picker" / "storage.json"


class FileStorage:
    """String key/value store persisted to a single JSON file."""

    def __init__(self, path: str | Path = DEFAULT_STORAGE_PATH, quota_bytes: int | None = None):
        self.path = Path(path)
        self.quota_bytes = quota_bytes

    def _read_all(self) -> dict[str, str]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            raise StorageFailure(f"Cannot read {self.path}: {e}") from e
        return data if isinstance(data, dict) else {}

    def _write_all(self, items: dict[str, str]) -> None:
        payload = json.dumps(items)
        if self.quota_bytes is not None and len(payload.encode("utf-8")) > self.quota_bytes:
            raise StorageFailure(f"Storage quota of {self.quota_bytes} bytes exceeded")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(payload, encoding="utf-8")
        except OSError as e:
            raise StorageFailure(f"Cannot write {self.path}: {e}") from e

    def get_item(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read_all()
        items[key] = value
        self._write_all(items)

    def remove_item(self, key: str) -> None:
        items = self._read_all()
        if items.pop(key, None) is not None:
            self._write_all(items)

    def clear(self) -> None:
        self._write_all({})


def _rebuild(data: dict[str, Any]) -> ClientDocument:
    """Build a document from untrusted data, substituting defaults for anything malformed."""
    text = data.get("text")
    history = data.get("history")
    index = data.get("currentIndex")
    timestamp = data.get("timestamp")

    history = history if isinstance(history, list) else []
    if isinstance(index, bool) or not isinstance(index, int):
        index = -1
    return ClientDocument(
        text=text if isinstance(text, str) else "",
        history=history,
        current_index=max(-1, min(index, len(history) - 1)),
        timestamp=timestamp if isinstance(timestamp, int) and not isinstance(timestamp, bool) else now_ms(),
    )


class DocumentStore:
    def __init__(self, storage: FileStorage, max_history: int = MAX_HISTORY_SIZE, key: str = STORAGE_KEY):
        self.storage = storage
        self.max_history = max_history
        self.key = key

    def save(self, document: ClientDocument) -> None:
        """Persist the document, keeping only the newest ``max_history`` snapshots.

        If the write fails, storage is wiped and the text is saved again without history.
        """
        history = document.history[-self.max_history:] if self.max_history > 0 else []
        data = {
            "text": document.text or "",
            "history": history,
            "currentIndex": max(-1, min(document.current_index, len(history) - 1)),
            "timestamp": now_ms(),
        }
        try:
            self.storage.set_item(self.key, json.dumps(data))
        except StorageFailure as e:
            logger.error("Failed to save document: %s", e)
            try:
                self.storage.clear()
                fallback = {"text": data["text"], "history": [], "currentIndex": -1, "timestamp": now_ms()}
                self.storage.set_item(self.key, json.dumps(fallback))
            except StorageFailure as clear_error:
                logger.error("Failed to save document after clearing storage: %s", clear_error)

    def load(self) -> ClientDocument | None:
        try:
            stored = self.storage.get_item(self.key)
            if not stored:
                return None
            data = json.loads(stored)
        except (StorageFailure, ValueError) as e:
            logger.error("Failed to load document: %s", e)
            return None
        if not isinstance(data, dict):
            return None
        return _rebuild(data)

    def clear(self) -> None:
        try:
            self.storage.remove_item(self.key)
        except StorageFailure as e:
            logger.error("Failed to clear document: %s", e)

    def storage_info(self) -> dict[str, Any]:
        """Size of the stored payload, number of snapshots and when it was last saved."""
        empty = {"size": 0, "historyCount": 0, "lastSaved": None}
        try:
            stored = self.storage.get_item(self.key)
            if not stored:
                return empty
            data = json.loads(stored)
        except (StorageFailure, ValueError) as e:
            logger.error("Failed to get storage info: %s", e)
            return empty
        if not isinstance(data, dict):
            return empty
        timestamp = data.get("timestamp")
        return {
            "size": len(stored),
            "historyCount": len(data["history"]) if isinstance(data.get("history"), list) else 0,
            "lastSaved": (
                datetime.fromtimestamp(timestamp / 1000, tz=timezone.utc)
                if isinstance(timestamp, (int, float)) and not isinstance(timestamp, bool)
                else None
            ),
        }

    def is_available(self) -> bool:
        probe = "__storage_test__"
        try:
            self.storage.set_item(probe, probe)
            self.storage.remove_item(probe)
        except StorageFailure:
            return False
        return True

    def export_to_file(self, document: ClientDocument, directory: str | Path) -> Path:
        """Write the document to ``tone-picker-data-YYYY-MM-DD.json`` in ``directory``."""
        now = datetime.now(timezone.utc)
        data = {
            **document.to_storage(),
            "exportDate": now.isoformat(),
            "version": EXPORT_VERSION,
        }
        path = Path(directory) / f"{STORAGE_KEY}-{now.date().isoformat()}.json"
        try:
            path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError as e:
            logger.error("Failed to export data: %s", e)
            raise StorageFailure("Failed to export data") from e
        return path

    @staticmethod
    def import_from_file(path: str | Path) -> ClientDocument:
        """Read an exported document. Nothing is imported unless the whole file parses."""
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                raise ImportFormatError("Invalid file format")
        except (OSError, ValueError, ImportFormatError) as e:
            logger.error("Failed to import data: %s", e)
            raise ImportFormatError(f"Failed to import data: {e}") from e
        return _rebuild(data)
