"""Inbound timestamp parsing — the date formats calendar clients send."""

from __future__ import annotations

import re
from datetime import datetime
from zoneinfo import ZoneInfo

from tracker.config import settings
from tracker.domain.errors import DateParseError

_DATE_TIME = r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}"
_FRACTION = r"\.\d{1,6}"
_ISO_OFFSET = r"(?:Z|[+-]\d{2}:\d{2}(?::\d{2})?)"
_RFC822_OFFSET = r"(?:Z|[+-]\d{4})"

# Tried in order; first match wins.
INBOUND_FORMATS: list[tuple[str, re.Pattern[str], str]] = [
    (
        "yyyy-MM-dd'T'HH:mm:ss.SSSXXXXX",
        re.compile(rf"^{_DATE_TIME}{_FRACTION}{_ISO_OFFSET}$"),
        "%Y-%m-%dT%H:%M:%S.%f%z",
    ),
    (
        "yyyy-MM-dd'T'HH:mm:ssXXXXX",
        re.compile(rf"^{_DATE_TIME}{_ISO_OFFSET}$"),
        "%Y-%m-%dT%H:%M:%S%z",
    ),
    (
        "yyyy-MM-dd'T'HH:mm:ss.SSSZ",
        re.compile(rf"^{_DATE_TIME}{_FRACTION}{_RFC822_OFFSET}$"),
        "%Y-%m-%dT%H:%M:%S.%f%z",
    ),
]


def parse_timestamp(raw: str, tz_name: str | None = None) -> datetime:
    """Parse *raw* with the first accepted format and express it in the reference zone.

    Raises:
        DateParseError: if no format matches.
    """
    zone = ZoneInfo(tz_name or settings.reference_timezone)
    value = raw.strip()
    for _, pattern, fmt in INBOUND_FORMATS:
        if not pattern.match(value):
            continue
        try:
            parsed = datetime.strptime(value, fmt)
        except ValueError:
            continue
        return parsed.astimezone(zone)

    raise DateParseError(f"Invalid date: {raw!r}")
