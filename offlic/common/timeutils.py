"""
Clock and timestamp helpers. All license times are UTC.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

from offlic.common.exceptions import DateFormatError, ValidationError

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def parse_expiry_date(value: str, date_format: str = "%Y-%m-%d") -> datetime:
    """Parse a calendar date into the start of that day in UTC."""
    if not isinstance(value, str) or not _DATE_RE.match(value):
        msg = f"Expiry must be a date in YYYY-MM-DD form, got {value!r}"
        raise DateFormatError(msg)
    try:
        parsed = datetime.strptime(value, date_format)
    except ValueError as err:
        msg = f"Invalid expiry date {value!r}: {err}"
        raise DateFormatError(msg) from err
    return parsed.replace(tzinfo=timezone.utc)


def expiry_after(seconds: float, now: datetime | None = None) -> datetime:
    """Expiry `seconds` from now."""
    start = now or utc_now()
    return start + timedelta(seconds=seconds)


def canonical_timestamp(value: datetime) -> str:
    """ISO-8601 UTC text with fixed microsecond precision and a Z suffix."""
    if value.tzinfo is None or value.utcoffset() is None:
        msg = "License timestamps must be timezone-aware"
        raise ValidationError(msg)
    # four-digit year, even below 1000
    text = value.astimezone(timezone.utc).isoformat(timespec="microseconds")
    return text.replace("+00:00", "Z")
