"""Inclusive date-range iteration."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterator


def date_range(start: date, end: date) -> Iterator[date]:
    """Yield every date in [start, end], ascending.

    Yields nothing when end < start.
    """
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def days_in_range(start: date, end: date) -> int:
    """Number of dates in [start, end] (0 when end < start)."""
    return max(0, (end - start).days + 1)
