"""Tests for color scheme preference values and the preference store."""

from __future__ import annotations

import unittest

from sehnblog.errors import StorageError
from sehnblog.scheme.preference import EffectiveScheme, Preference, parse_preference, resolve_effective
from sehnblog.scheme.storage import MemoryStorage
from sehnblog.scheme.store import PreferenceStore


class BrokenStorage:
    """Storage that fails every operation, like disabled localStorage."""

    def __init__(self) -> None:
        self.write_attempts = 0

    def get_item(self, key: str) -> str | None:
        raise StorageError("storage disabled")

    def set_item(self, key: str, value: str) -> None:
        self.write_attempts += 1
        raise OSError("quota exceeded")

    def remove_item(self, key: str) -> None:
        raise StorageError("storage disabled")


class TestResolveEffective(unittest.TestCase):
    def test_explicit_preference_ignores_os_signal(self) -> None:
        for os_signal in EffectiveScheme:
            self.assertIs(resolve_effective(Preference.LIGHT, os_signal), EffectiveScheme.LIGHT)
            self.assertIs(resolve_effective(Preference.DARK, os_signal), EffectiveScheme.DARK)

    def test_system_follows_os_signal(self) -> None:
        self.assertIs(resolve_effective(Preference.SYSTEM, EffectiveScheme.LIGHT), EffectiveScheme.LIGHT)
        self.assertIs(resolve_effective(Preference.SYSTEM, EffectiveScheme.DARK), EffectiveScheme.DARK)


class TestParsePreference(unittest.TestCase):
    def test_accepts_the_three_values(self) -> None:
        self.assertIs(parse_preference("system"), Preference.SYSTEM)
        self.assertIs(parse_preference("light"), Preference.LIGHT)
        self.assertIs(parse_preference("dark"), Preference.DARK)

    def test_rejects_anything_else(self) -> None:
        for value in ["", "Dark", " dark", "auto", "null", None, 1]:
            self.assertIsNone(parse_preference(value), value)


class TestPreferenceStore(unittest.TestCase):
    def test_get_after_set_returns_value(self) -> None:
        store = PreferenceStore(MemoryStorage())
        for preference in Preference:
            store.set(preference)
            self.assertIs(store.get(), preference)

    def test_set_writes_plain_string_under_key(self) -> None:
        storage = MemoryStorage()
        PreferenceStore(storage, key="color_scheme").set(Preference.DARK)
        self.assertEqual(storage.get_item("color_scheme"), "dark")

    def test_set_overwrites_prior_value(self) -> None:
        storage = MemoryStorage({"color_scheme": "dark"})
        store = PreferenceStore(storage, key="color_scheme")
        store.set(Preference.LIGHT)
        self.assertEqual(storage.get_item("color_scheme"), "light")

    def test_missing_value_is_system(self) -> None:
        self.assertIs(PreferenceStore(MemoryStorage()).get(), Preference.SYSTEM)

    def test_invalid_value_is_system(self) -> None:
        for raw in ["", "DARK", "sepia", "{}"]:
            store = PreferenceStore(MemoryStorage({"color_scheme": raw}), key="color_scheme")
            self.assertIs(store.get(), Preference.SYSTEM, raw)

    def test_failed_read_falls_back_to_system(self) -> None:
        store = PreferenceStore(BrokenStorage())
        with self.assertLogs("sehnblog.scheme.store", level="WARNING"):
            self.assertIs(store.get(), Preference.SYSTEM)

    def test_failed_write_does_not_raise_or_retry(self) -> None:
        storage = BrokenStorage()
        store = PreferenceStore(storage)
        with self.assertLogs("sehnblog.scheme.store", level="WARNING"):
            store.set(Preference.DARK)
        self.assertEqual(storage.write_attempts, 1)

    def test_effective_uses_stored_preference(self) -> None:
        store = PreferenceStore(MemoryStorage())
        self.assertIs(store.effective(EffectiveScheme.DARK), EffectiveScheme.DARK)
        store.set(Preference.LIGHT)
        self.assertIs(store.effective(EffectiveScheme.DARK), EffectiveScheme.LIGHT)


if __name__ == "__main__":
    unittest.main()
