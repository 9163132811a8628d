"""Durable key-value storage backing the client session."""

from __future__ import annotations

from dataclasses import dataclass
import json
from pathlib import Path
from typing import Protocol


class StorageError(Exception):
    """The storage file exists but cannot be read as a JSON object."""


class KeyValueStorage(Protocol):
    def get_item(self, key: str) -> str | None:
        """Return the stored value or None when the key is absent."""

    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""

    def remove_item(self, key: str) -> None:
        """Erase key; missing keys are ignored."""


@dataclass
class InMemoryStorage:
    def __post_init__(self) -> None:
        self._items: dict[str, str] = {}

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


@dataclass
class JsonFileStorage:
    path: Path

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (OSError, ValueError) as exc:
            raise StorageError(f"Cannot read storage file {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise StorageError(f"Storage file {self.path} does not hold a JSON object")
        return {str(key): value for key, value in data.items() if isinstance(value, str)}

    def _save(self, items: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(items, indent=2, sort_keys=True) + "\n", encoding="utf-8")

    def get_item(self, key: str) -> str | None:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._load()
        items[key] = value
        self._save(items)

    def remove_item(self, key: str) -> None:
        items = self._load()
        if key not in items:
            return
        del items[key]
        self._save(items)


def create_storage(path: Path | None) -> KeyValueStorage:
    if path is not None:
        return JsonFileStorage(path=Path(path))
    return InMemoryStorage()
