"""
RFC1123Z timestamp codec.

Newznab feeds carry timestamps as ``Mon, 02 Jan 2006 15:04:05 -0700``:
English day/month abbreviations, two-digit day, and a numeric UTC offset.
``strptime`` depends on the process locale for ``%a``/``%b``, so both
directions are implemented against explicit name tables instead.
"""

import logging
import re
from datetime import datetime, timedelta, timezone
from typing import Optional

from newznab_client.exceptions import FormatError

logger = logging.getLogger(__name__)

RFC1123Z = "%a, %d %b %Y %H:%M:%S %z"

_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Names match case-insensitively, the hour may be one digit and the seconds
# may carry a fraction, as accepted by newznab servers written in Go.
_PATTERN = re.compile(
    r"^(?P<weekday>" + "|".join(_DAYS) + r"), "
    r"(?P<day>\d{2}) "
    r"(?P<month>" + "|".join(_MONTHS) + r") "
    r"(?P<year>\d{4}) "
    r"(?P<hour>\d{1,2}):(?P<minute>\d{2}):(?P<second>\d{2})(?:\.(?P<fraction>\d+))? "
    r"(?P<sign>[+-])(?P<off_hours>\d{2})(?P<off_minutes>\d{2})$",
    re.IGNORECASE
)


def format_rfc1123z(dt: datetime) -> str:
    """
    Encode a datetime for the wire, keeping its own UTC offset.

    Naive datetimes are assumed to be UTC. Sub-second precision and
    sub-minute offset components are dropped.

    Example:
        >>> format_rfc1123z(datetime(2015, 6, 1, 20, 0, tzinfo=timezone.utc))
        'Mon, 01 Jun 2015 20:00:00 +0000'
        >>> format_rfc1123z(datetime(2015, 6, 1, 20, 0, tzinfo=timezone(timedelta(hours=-4))))
        'Mon, 01 Jun 2015 20:00:00 -0400'
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)

    offset_minutes = int(dt.utcoffset().total_seconds()) // 60
    sign = "-" if offset_minutes < 0 else "+"
    off_hours, off_minutes = divmod(abs(offset_minutes), 60)

    return (
        f"{_DAYS[dt.weekday()]}, {dt.day:02d} {_MONTHS[dt.month - 1]} "
        f"{dt.year:04d} {dt.hour:02d}:{dt.minute:02d}:{dt.second:02d} "
        f"{sign}{off_hours:02d}{off_minutes:02d}"
    )


def parse_rfc1123z(value: str) -> datetime:
    """
    Decode an RFC1123Z string into a timezone-aware datetime.

    The original offset is preserved in ``tzinfo``. The weekday name must be
    well-formed but is not checked against the date. A fractional second is
    kept to microsecond precision.

    Args:
        value: Text such as ``'Tue, 02 Jun 2015 01:00:00 -0400'``

    Returns:
        Aware datetime

    Raises:
        FormatError: If the text does not match the format or names an
                     impossible date/time/offset
    """
    if not isinstance(value, str):
        raise FormatError(repr(value), "not a string")

    match = _PATTERN.match(value)
    if match is None:
        raise FormatError(value)

    off_minutes = int(match.group("off_minutes"))
    if off_minutes > 59:
        raise FormatError(value, f"offset minutes out of range: {off_minutes}")

    offset = timedelta(hours=int(match.group("off_hours")), minutes=off_minutes)
    if match.group("sign") == "-":
        offset = -offset

    fraction = match.group("fraction") or ""
    microsecond = int(fraction[:6].ljust(6, "0"))

    try:
        return datetime(
            int(match.group("year")),
            _MONTHS.index(match.group("month").title()) + 1,
            int(match.group("day")),
            int(match.group("hour")),
            int(match.group("minute")),
            int(match.group("second")),
            microsecond,
            tzinfo=timezone(offset),
        )
    except ValueError as e:
        raise FormatError(value, str(e)) from e


def parse_rfc1123z_lenient(value: str, field: str = "date") -> Optional[datetime]:
    """
    Best-effort variant of :func:`parse_rfc1123z` for optional values.

    Failures are logged and ``None`` is returned instead of raising.
    """
    try:
        return parse_rfc1123z(value)
    except FormatError as e:
        logger.error(f"Failed to parse {field}: {value!r}: {e}")
        return None
