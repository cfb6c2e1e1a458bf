"""
Parsing of the timestamps github puts in its JSON, e.g. `2013-01-15T10:00:00Z`.
"""
import re
from datetime import datetime, timedelta, timezone, tzinfo

from pullhandle.errors import ParseError

TIMESTAMP_RE = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})"
    r"(?:\.(\d{1,6}))?"
    r"(Z|[+-]\d{2}:\d{2})$"
)


def _zone(offset: str) -> tzinfo:
    if offset == "Z":
        return timezone.utc
    sign = -1 if offset[0] == "-" else 1
    delta = timedelta(hours=int(offset[1:3]), minutes=int(offset[4:6]))
    return timezone(sign * delta)


def parse(value: str) -> datetime:
    """
    Returns a timezone-aware datetime in UTC, or raises ParseError.
    """
    if not isinstance(value, str):
        raise ParseError(value)
    match = TIMESTAMP_RE.match(value)
    if match is None:
        raise ParseError(value)
    year, month, day, hour, minute, second, fraction, offset = match.groups()
    try:
        parsed = datetime(
            int(year),
            int(month),
            int(day),
            int(hour),
            int(minute),
            int(second),
            int((fraction or "0").ljust(6, "0")),
            tzinfo=_zone(offset),
        )
    except ValueError as e:
        # out of range fields, e.g. month 13 or an offset of 24 hours
        raise ParseError(value) from e
    return parsed.astimezone(timezone.utc)
