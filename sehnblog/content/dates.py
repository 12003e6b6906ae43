"""Date formatting for post listings and feeds."""

from __future__ import annotations

from datetime import UTC, date, datetime
from email.utils import format_datetime

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_date(value: date) -> str:
    """Format as US English short month style, e.g. ``Jan 5, 2024``.

    Not locale-dependent, so builds are reproducible.
    """
    return f"{_MONTHS[value.month - 1]} {value.day}, {value.year}"


def datetime_attr(value: date) -> str:
    """ISO date for a ``<time datetime=...>`` attribute."""
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def rfc822(value: date) -> str:
    """RFC 822 timestamp as used by RSS ``pubDate``.

    Naive values and plain dates are taken as UTC midnight.
    """
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day, tzinfo=UTC)
    elif value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return format_datetime(value)
