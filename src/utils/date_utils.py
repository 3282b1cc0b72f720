"""Helpers for date normalization."""

from datetime import date, datetime


def coerce_date(value) -> date:
    """Normalize date-like values to a date.

    Args:
        value: Date, datetime, or ISO string returned by a database driver.

    Returns:
        date: Calendar date of the value.

    Raises:
        ValueError: If the value cannot be read as a date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip()[:10])
    raise ValueError(f"Unsupported date value: {value!r}")


__all__ = ["coerce_date"]
