from __future__ import annotations

from datetime import date, datetime

from ..core.constants import WIRE_DATE_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, WIRE_DATE_FORMAT).date()


def format_iso_date(value: date) -> str:
    return value.strftime(WIRE_DATE_FORMAT)


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 instant; accepts the trailing 'Z' JavaScript emits.

    Values without an offset are read as local time, so every timestamp is aware.
    """
    v = value.strip()
    if v.endswith("Z"):
        v = v[:-1] + "+00:00"
    parsed = datetime.fromisoformat(v)
    if parsed.tzinfo is None:
        parsed = parsed.astimezone()
    return parsed


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch it.
    """
    return datetime.now().astimezone()
