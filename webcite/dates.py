"""Timestamp parsing and French month naming."""

from __future__ import annotations

import datetime as dt
import re
from typing import Optional

FRENCH_MONTHS = {
    "January": "Janvier",
    "February": "Février",
    "March": "Mars",
    "April": "Avril",
    "May": "Mai",
    "June": "Juin",
    "July": "Juillet",
    "August": "Août",
    "September": "Septembre",
    "October": "Octobre",
    "November": "Novembre",
    "December": "Décembre",
}
ENGLISH_MONTHS = tuple(FRENCH_MONTHS)

# date, time, optional fraction, then "Z" or a numeric offset
TIMESTAMP_PATTERN = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"T(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>Z|[+-]\d{2}:\d{2})$"
)


class DateParseError(ValueError):
    """Raised when a timestamp does not follow the date-time-with-offset profile."""

    def __init__(self, value: str) -> None:
        super().__init__(f"cannot parse {value!r} as a timestamp with offset")
        self.value = value


def french_month(month: int) -> str:
    """Return the French name of a month number (1-12)."""
    return FRENCH_MONTHS[ENGLISH_MONTHS[month - 1]]


def _parse_offset(offset: str) -> dt.timezone:
    if offset == "Z":
        return dt.timezone.utc
    sign = -1 if offset[0] == "-" else 1
    hours, minutes = int(offset[1:3]), int(offset[4:6])
    if minutes >= 60:
        raise ValueError("offset minutes out of range")
    return dt.timezone(sign * dt.timedelta(hours=hours, minutes=minutes))


def parse_timestamp(value: str) -> dt.datetime:
    """Parse an RFC 3339 timestamp, keeping the offset it was written in.

    Fractional seconds may carry any number of digits; only microsecond
    precision is kept.
    """
    match = TIMESTAMP_PATTERN.match(value)
    if not match:
        raise DateParseError(value)
    fraction = (match.group("fraction") or "0")[:6].ljust(6, "0")
    try:
        return dt.datetime(
            int(match.group("year")),
            int(match.group("month")),
            int(match.group("day")),
            int(match.group("hour")),
            int(match.group("minute")),
            int(match.group("second")),
            int(fraction),
            tzinfo=_parse_offset(match.group("offset")),
        )
    except ValueError as exc:
        raise DateParseError(value) from exc


def format_today(now: Optional[dt.datetime] = None) -> str:
    """Format a date as ``DD <FrenchMonth> YYYY``."""
    now = now or dt.datetime.now()
    return f"{now.day:02d} {french_month(now.month)} {now.year:04d}"
