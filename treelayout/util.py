from __future__ import annotations

from datetime import date
from typing import Any


def _iso_date(value: date | None) -> str | None:
    return value.isoformat() if value is not None else None


def _parse_iso_date(value: Any) -> date | None:
    """Accept a date, a datetime or an ISO string (``YYYY-MM-DD[...]``)."""

    if value is None:
        return None
    if isinstance(value, date):
        # datetime is a date subclass; keep only the calendar day.
        return date(value.year, value.month, value.day)
    s = str(value).strip()
    if not s:
        return None
    return date.fromisoformat(s[:10])

