"""Color scheme preference values and resolution."""

from __future__ import annotations

from enum import StrEnum


class Preference(StrEnum):
    """The scheme a reader picked; ``SYSTEM`` follows the OS."""

    SYSTEM = "system"
    LIGHT = "light"
    DARK = "dark"


class EffectiveScheme(StrEnum):
    """The scheme actually rendered."""

    LIGHT = "light"
    DARK = "dark"


DEFAULT_PREFERENCE = Preference.SYSTEM


def parse_preference(value: object) -> Preference | None:
    """Return the matching Preference, or None for anything else.

    Matching is exact: stored values are written by ``Preference`` itself,
    so "Dark" or " dark" are treated as corrupt.
    """
    if not isinstance(value, str):
        return None
    try:
        return Preference(value)
    except ValueError:
        return None


def resolve_effective(preference: Preference, os_signal: EffectiveScheme) -> EffectiveScheme:
    """Resolve the rendered scheme for a preference.

    Args:
        preference: The reader's preference
        os_signal: The scheme the operating system currently reports

    Returns:
        ``preference`` itself when it is explicit, otherwise ``os_signal``
    """
    if preference is Preference.LIGHT:
        return EffectiveScheme.LIGHT
    if preference is Preference.DARK:
        return EffectiveScheme.DARK
    return EffectiveScheme(os_signal)
