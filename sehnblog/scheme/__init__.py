"""Color scheme preference: store, OS signal and switch widget."""

from .host import DocumentScheme, HostEnvironment
from .preference import EffectiveScheme, Preference, parse_preference, resolve_effective
from .signal import SchemeSignal, Subscription, detect_system_scheme
from .storage import JsonFileStorage, KeyValueStorage, MemoryStorage
from .store import PreferenceStore
from .switch import PreferenceSwitch, render_switch

__all__ = [
    "DocumentScheme",
    "HostEnvironment",
    "EffectiveScheme",
    "Preference",
    "parse_preference",
    "resolve_effective",
    "SchemeSignal",
    "Subscription",
    "detect_system_scheme",
    "JsonFileStorage",
    "KeyValueStorage",
    "MemoryStorage",
    "PreferenceStore",
    "PreferenceSwitch",
    "render_switch",
]
