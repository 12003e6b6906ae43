"""The operating system's light/dark signal as an observable event source."""

from __future__ import annotations

import logging
import subprocess
import sys
from collections.abc import Callable
from dataclasses import dataclass, field

from ..config import OS_SCHEME
from .preference import EffectiveScheme

logger = logging.getLogger(__name__)

Listener = Callable[[EffectiveScheme], None]


@dataclass
class Subscription:
    """Handle returned by ``SchemeSignal.subscribe``."""

    _signal: SchemeSignal | None
    _listener: Listener

    @property
    def active(self) -> bool:
        return self._signal is not None

    def unsubscribe(self) -> None:
        """Stop receiving notifications. Safe to call more than once."""
        if self._signal is None:
            return
        self._signal._remove(self._listener)
        self._signal = None


@dataclass
class SchemeSignal:
    """The "prefers dark" media feature.

    Listeners are notified synchronously, once per actual change; setting
    the current value again notifies nobody.
    """

    current: EffectiveScheme = EffectiveScheme.LIGHT
    _listeners: list[Listener] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        self.current = EffectiveScheme(self.current)

    @property
    def matches(self) -> bool:
        """True when the OS prefers dark (``matchMedia(...).matches``)."""
        return self.current is EffectiveScheme.DARK

    def subscribe(self, listener: Listener) -> Subscription:
        self._listeners.append(listener)
        return Subscription(self, listener)

    def set(self, scheme: EffectiveScheme | str) -> bool:
        """Update the OS scheme. Returns True if listeners were notified."""
        scheme = EffectiveScheme(scheme)
        if scheme is self.current:
            return False
        self.current = scheme
        logger.debug("OS scheme changed to %s", scheme)
        # Copy so listeners may unsubscribe while being notified.
        for listener in list(self._listeners):
            listener(scheme)
        return True

    def _remove(self, listener: Listener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    @property
    def listener_count(self) -> int:
        return len(self._listeners)


def detect_system_scheme() -> EffectiveScheme:
    """Best-effort read of the desktop's scheme.

    Order: SEHNBLOG_OS_SCHEME override, macOS AppleInterfaceStyle,
    GNOME color-scheme, then light.
    """
    override = OS_SCHEME.strip().lower()
    if override in ("light", "dark"):
        return EffectiveScheme(override)

    if sys.platform == "darwin":
        out = _run(["defaults", "read", "-g", "AppleInterfaceStyle"])
        if out is not None:
            return EffectiveScheme.DARK if out.strip().lower() == "dark" else EffectiveScheme.LIGHT
    elif sys.platform.startswith("linux"):
        out = _run(["gsettings", "get", "org.gnome.desktop.interface", "color-scheme"])
        if out is not None and "dark" in out.lower():
            return EffectiveScheme.DARK

    return EffectiveScheme.LIGHT


def _run(cmd: list[str]) -> str | None:
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True, timeout=2, check=False)
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("Scheme probe %s failed: %s", cmd[0], e)
        return None
    if proc.returncode != 0:
        return None
    return proc.stdout
