"""The color scheme switch widget."""

from __future__ import annotations

import logging
from html import escape

from .host import HostEnvironment
from .preference import Preference, parse_preference
from .signal import SchemeSignal, Subscription
from .store import PreferenceStore

logger = logging.getLogger(__name__)

SELECT_ID = "color-scheme-select"

# (value, label) in display order
OPTIONS: tuple[tuple[Preference, str], ...] = (
    (Preference.SYSTEM, "Auto"),
    (Preference.LIGHT, "Light"),
    (Preference.DARK, "Dark"),
)

SUN_ICON = "sun"
MOON_ICON = "moon"


class PreferenceSwitch:
    """Icon plus selector for the reader's color scheme.

    State is one of the three ``Preference`` values, loaded from the store on
    ``mount``. Selecting a value persists it and restyles the page once; an
    OS scheme change only re-renders.
    """

    def __init__(self, store: PreferenceStore, signal: SchemeSignal, host: HostEnvironment):
        self.store = store
        self.signal = signal
        self.host = host
        self.preference: Preference | None = None
        self.renders = 0
        self.html = ""
        self._subscription: Subscription | None = None

    @property
    def mounted(self) -> bool:
        return self.preference is not None

    def mount(self) -> str:
        if self.mounted:
            return self.html
        self.preference = self.store.get()
        self._subscription = self.signal.subscribe(self._on_os_change)
        return self.render()

    def unmount(self) -> None:
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None
        self.preference = None

    def select(self, value: Preference | str) -> str:
        """Handle the selector's change event."""
        if not self.mounted:
            raise RuntimeError("switch is not mounted")
        preference = parse_preference(value)
        if preference is None:
            raise ValueError(f"unknown color scheme: {value!r}")

        self.preference = preference
        self.store.set(preference)
        self.host.restyle()
        return self.render()

    @property
    def icon(self) -> str:
        return MOON_ICON if self.host.is_dark() else SUN_ICON

    def render(self) -> str:
        self.renders += 1
        self.html = render_switch(self.preference or Preference.SYSTEM, self.icon)
        return self.html

    def _on_os_change(self, _scheme: object) -> None:
        logger.debug("Re-rendering switch for OS scheme change")
        self.render()


def render_switch(preference: Preference, icon: str) -> str:
    """Markup for the switch, matching what the page script expects."""
    options = []
    for value, label in OPTIONS:
        selected = " selected" if value is preference else ""
        options.append(f'<option value="{value.value}"{selected}>{escape(label)}</option>')
    return (
        '<div class="scheme-switch">'
        f'<label for="{SELECT_ID}">'
        f'<span class="icon icon-{escape(icon, quote=True)}" aria-hidden="true"></span>'
        '<span class="sr-only">Color scheme:</span>'
        "</label>"
        f'<select id="{SELECT_ID}">'
        + "".join(options)
        + "</select>"
        "</div>"
    )
