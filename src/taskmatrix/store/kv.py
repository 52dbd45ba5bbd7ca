"""Key-value persistence backends for quadrant contents."""

import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Durable key-value medium: ``get`` returns ``None`` for an absent key."""

    def get(self, key: str) -> bytes | None: ...

    def set(self, key: str, value: bytes) -> None: ...


class MemoryKeyValueStore:
    """Process-local key-value store, mostly useful for tests."""

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._data: dict[str, bytes] = {}

    def get(self, key: str) -> bytes | None:
        return self._data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self._data[key] = value

    def keys(self) -> list[str]:
        return list(self._data)


class JsonFileKeyValueStore:
    """Key-value store backed by a single JSON object on disk.

    Values must be UTF-8 text (quadrant payloads are JSON). The whole file
    is rewritten on every ``set``; there is no transaction across keys.
    """

    def __init__(self, storage_path: Path) -> None:
        """Initialize the store, reading any existing file."""
        self._storage_path = Path(storage_path)
        self._data: dict[str, str] = {}
        self._load()

    @property
    def storage_path(self) -> Path:
        return self._storage_path

    def _load(self) -> None:
        """Load entries from disk."""
        if not self._storage_path.exists():
            return
        try:
            with open(self._storage_path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to read {self._storage_path}: {e}")
            return

        if not isinstance(data, dict):
            logger.error(f"Ignoring {self._storage_path}: expected a JSON object")
            return
        self._data = {key: value for key, value in data.items() if isinstance(value, str)}
        logger.info(f"Loaded {len(self._data)} keys from {self._storage_path}")

    def _save(self) -> None:
        """Save entries to disk."""
        try:
            self._storage_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._storage_path, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2, ensure_ascii=False)
            logger.debug(f"Saved {len(self._data)} keys to {self._storage_path}")
        except OSError as e:
            logger.error(f"Failed to write {self._storage_path}: {e}")

    def get(self, key: str) -> bytes | None:
        value = self._data.get(key)
        if value is None:
            return None
        return value.encode("utf-8")

    def set(self, key: str, value: bytes) -> None:
        """Store ``value`` under ``key`` and flush to disk.

        Raises:
            UnicodeDecodeError: If ``value`` is not UTF-8 text
        """
        self._data[key] = value.decode("utf-8")
        self._save()
