"""
Shared date helpers.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterator, Optional


def parse_manifest_date(value) -> Optional[date]:
    """Parse a manifest ``date`` value into a calendar date.

    Channel manifests store the date as a quoted ISO string, but a bare TOML
    date decodes to a ``date`` object directly.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value:
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        return None


def candidate_dates(anchor: date, max_age: int) -> Iterator[date]:
    """Yield the anchor and then each older day, newest first.

    Covers ``anchor`` through ``anchor - (max_age - 1)`` days. The anchor is
    always yielded, even when ``max_age`` is below one.
    """
    yield anchor
    for day in range(1, max_age):
        try:
            yield anchor - timedelta(days=day)
        except OverflowError:
            return
