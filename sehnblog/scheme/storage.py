"""Durable key-value storage backends for the preference store.

Backends mirror the browser's localStorage contract: string keys, string
values, ``None`` for a missing key. Failures raise ``StorageError``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Protocol

from ..errors import StorageError


class KeyValueStorage(Protocol):
    """Minimal localStorage-like interface."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryStorage:
    """In-process storage. Counts writes so callers can assert on them."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})
        self.writes = 0

    def get_item(self, key: str) -> str | None:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value
        self.writes += 1

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._data


class JsonFileStorage:
    """Storage backed by a single JSON object on disk.

    Structure: {"<key>": "<value>", ...}
    A missing file reads as empty.
    """

    def __init__(self, path: Path):
        self.path = path

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise StorageError(f"cannot read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"cannot read {self.path}: expected a JSON object")
        return {str(k): v for k, v in data.items()}

    def _dump(self, data: dict[str, str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False) + "\n",
                encoding="utf-8",
            )
        except OSError as e:
            raise StorageError(f"cannot write {self.path}: {e}") from e

    def get_item(self, key: str) -> str | None:
        value = self._load().get(key)
        # Non-string JSON values are not something set_item could have written.
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        try:
            data = self._load()
        except StorageError:
            # Overwrite a corrupt file rather than refusing every write.
            data = {}
        data[key] = value
        self._dump(data)

    def remove_item(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._dump(data)
