"""Page-wide scheme application.

The switch never touches the document itself: it is handed a
``HostEnvironment`` with a restyle callback and a dark-mode query.
``DocumentScheme`` is the default host, a model of the ``<html>`` element
the static site's inline script manipulates.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from .preference import EffectiveScheme, resolve_effective
from .signal import SchemeSignal, Subscription
from .store import PreferenceStore

logger = logging.getLogger(__name__)

DARK_CLASS = "dark"
SCHEME_ATTRIBUTE = "data-color-scheme"


@dataclass(frozen=True)
class HostEnvironment:
    """Capabilities the preference switch needs from its page."""

    restyle: Callable[[], None]
    is_dark: Callable[[], bool]


@dataclass
class DocumentScheme:
    """Applies the effective scheme to a document's root element.

    Applying adds or removes the ``dark`` class and sets
    ``data-color-scheme``. The document follows OS changes once ``watch``
    has been called.
    """

    store: PreferenceStore
    signal: SchemeSignal
    classes: set[str] = field(default_factory=set)
    attributes: dict[str, str] = field(default_factory=dict)
    applied: int = 0
    _subscription: Subscription | None = field(default=None, repr=False)

    def effective(self) -> EffectiveScheme:
        return resolve_effective(self.store.get(), self.signal.current)

    def apply(self) -> EffectiveScheme:
        scheme = self.effective()
        if scheme is EffectiveScheme.DARK:
            self.classes.add(DARK_CLASS)
        else:
            self.classes.discard(DARK_CLASS)
        self.attributes[SCHEME_ATTRIBUTE] = scheme.value
        self.applied += 1
        logger.debug("Applied %s scheme", scheme)
        return scheme

    def is_dark(self) -> bool:
        # While watching, OS listeners may run before our re-apply does, so
        # answer from the live scheme rather than the last applied classes.
        if self._subscription is not None and self._subscription.active:
            return self.effective() is EffectiveScheme.DARK
        return DARK_CLASS in self.classes

    def watch(self) -> Subscription:
        """Re-apply on every OS scheme change."""
        if self._subscription is None or not self._subscription.active:
            self._subscription = self.signal.subscribe(lambda _scheme: self.apply())
        return self._subscription

    def host(self) -> HostEnvironment:
        return HostEnvironment(restyle=self.apply, is_dark=self.is_dark)
