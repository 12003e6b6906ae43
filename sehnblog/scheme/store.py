"""Preference store: the persisted color scheme choice."""

from __future__ import annotations

import logging

from ..config import COLOR_SCHEME_KEY
from .preference import DEFAULT_PREFERENCE, EffectiveScheme, Preference, parse_preference, resolve_effective
from .storage import KeyValueStorage

logger = logging.getLogger(__name__)


class PreferenceStore:
    """Reads and writes the reader's Preference under a fixed key.

    Neither ``get`` nor ``set`` raises: storage problems degrade to the
    default preference on read and to a dropped write.
    """

    def __init__(self, storage: KeyValueStorage, key: str = COLOR_SCHEME_KEY):
        self.storage = storage
        self.key = key

    def get(self) -> Preference:
        try:
            raw = self.storage.get_item(self.key)
        except Exception as e:
            logger.warning("Preference read failed, using %s: %s", DEFAULT_PREFERENCE, e)
            return DEFAULT_PREFERENCE

        if raw is None:
            return DEFAULT_PREFERENCE

        preference = parse_preference(raw)
        if preference is None:
            logger.debug("Ignoring invalid stored preference %r", raw)
            return DEFAULT_PREFERENCE
        return preference

    def set(self, preference: Preference) -> None:
        value = Preference(preference).value
        try:
            self.storage.set_item(self.key, value)
        except Exception as e:
            logger.warning("Preference write failed (%s): %s", value, e)

    def effective(self, os_signal: EffectiveScheme) -> EffectiveScheme:
        """Resolve the stored preference against the current OS scheme."""
        return resolve_effective(self.get(), os_signal)
