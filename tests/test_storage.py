"""Tests for durable storage backends."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from sehnblog.errors import StorageError
from sehnblog.scheme.preference import Preference
from sehnblog.scheme.storage import JsonFileStorage, MemoryStorage
from sehnblog.scheme.store import PreferenceStore


class TestMemoryStorage(unittest.TestCase):
    def test_counts_writes(self) -> None:
        storage = MemoryStorage()
        self.assertIsNone(storage.get_item("k"))
        storage.set_item("k", "v")
        storage.set_item("k", "w")
        self.assertEqual(storage.get_item("k"), "w")
        self.assertEqual(storage.writes, 2)
        storage.remove_item("k")
        self.assertNotIn("k", storage)


class TestJsonFileStorage(unittest.TestCase):
    def test_missing_file_reads_as_empty(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            storage = JsonFileStorage(Path(td) / "prefs.json")
            self.assertIsNone(storage.get_item("color_scheme"))

    def test_set_creates_parent_dirs_and_persists(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "nested" / "prefs.json"
            JsonFileStorage(path).set_item("color_scheme", "dark")
            self.assertEqual(json.loads(path.read_text(encoding="utf-8")), {"color_scheme": "dark"})
            self.assertEqual(JsonFileStorage(path).get_item("color_scheme"), "dark")

    def test_keeps_other_keys(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "prefs.json"
            path.write_text(json.dumps({"other": "x"}), encoding="utf-8")
            storage = JsonFileStorage(path)
            storage.set_item("color_scheme", "light")
            self.assertEqual(storage.get_item("other"), "x")
            storage.remove_item("color_scheme")
            self.assertIsNone(storage.get_item("color_scheme"))

    def test_corrupt_file_raises_on_read_and_is_replaced_on_write(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "prefs.json"
            path.write_text("{not json", encoding="utf-8")
            storage = JsonFileStorage(path)
            with self.assertRaises(StorageError):
                storage.get_item("color_scheme")
            storage.set_item("color_scheme", "dark")
            self.assertEqual(storage.get_item("color_scheme"), "dark")

    def test_non_string_value_reads_as_missing(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "prefs.json"
            path.write_text(json.dumps({"color_scheme": 3}), encoding="utf-8")
            self.assertIsNone(JsonFileStorage(path).get_item("color_scheme"))

    def test_store_on_corrupt_file_defaults_to_system(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "prefs.json"
            path.write_text("[1, 2]", encoding="utf-8")
            store = PreferenceStore(JsonFileStorage(path))
            with self.assertLogs("sehnblog.scheme.store", level="WARNING"):
                self.assertIs(store.get(), Preference.SYSTEM)


if __name__ == "__main__":
    unittest.main()
