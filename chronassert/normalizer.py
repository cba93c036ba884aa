"""
Date-time normalization for Chronassert.

Parses the single ISO-8601 profile accepted by the string forms of the
date-time assertions and moves aware datetimes between zones while keeping
the instant they designate.

Accepted text:

    YYYY-MM-DDTHH:MM[:SS[.fraction]][offset][[zone-id]]

where offset is ``Z``, ``+HH:MM`` or ``+HH:MM:SS``. Zoned parsing requires an
offset, a zone id, or both; local parsing accepts neither. Fractions longer
than microseconds are truncated.
"""

import logging
import re
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import ContractViolation, DateTimeParseError

logger = logging.getLogger(__name__)

NULL_TEXT_MESSAGE = "The String representing the datetime to compare actual with should not be None"

_ISO_DATE_TIME = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"T(?P<hour>\d{2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:\.(?P<fraction>\d{1,9}))?)?"
    r"(?P<offset>Z|[+-]\d{2}:\d{2}(?::\d{2})?)?"
    r"(?:\[(?P<zone>[^\[\]]+)\])?",
    re.ASCII,
)


def _check_text(text: Optional[str]) -> str:
    if text is None:
        raise ContractViolation(NULL_TEXT_MESSAGE)
    if not isinstance(text, str):
        raise ContractViolation(f"Expected an ISO-8601 string, got {type(text).__name__}")
    return text


def _match(text: str) -> re.Match:
    match = _ISO_DATE_TIME.fullmatch(text)
    if match is None:
        raise DateTimeParseError(f"Text '{text}' could not be parsed as an ISO-8601 date-time")
    return match


def _wall_time(text: str, match: re.Match) -> datetime:
    """Build the naive datetime from the matched calendar fields."""
    fraction = match.group("fraction") or ""
    microsecond = int(fraction[:6].ljust(6, "0"))
    try:
        return datetime(
            int(match.group("year")),
            int(match.group("month")),
            int(match.group("day")),
            int(match.group("hour")),
            int(match.group("minute")),
            int(match.group("second") or 0),
            microsecond,
        )
    except ValueError as e:
        raise DateTimeParseError(f"Text '{text}' could not be parsed: {e}") from e


def _parse_offset(text: str, offset: str) -> timezone:
    if offset == "Z":
        return timezone.utc
    sign = -1 if offset[0] == "-" else 1
    parts = [int(part) for part in offset[1:].split(":")]
    hours, minutes = parts[0], parts[1]
    seconds = parts[2] if len(parts) > 2 else 0
    if minutes > 59 or seconds > 59:
        raise DateTimeParseError(f"Text '{text}' has an invalid offset '{offset}'")
    try:
        return timezone(sign * timedelta(hours=hours, minutes=minutes, seconds=seconds))
    except ValueError as e:
        raise DateTimeParseError(f"Text '{text}' has an invalid offset '{offset}'") from e


def _parse_zone(text: str, key: str) -> ZoneInfo:
    try:
        return ZoneInfo(key)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise DateTimeParseError(f"Text '{text}' has an unknown zone id '{key}'") from e


def parse_iso_datetime(text: Optional[str]) -> datetime:
    """
    Parse ISO-8601 text into a timezone-aware datetime.

    With both an offset and a zone id, the instant designated by the offset is
    expressed in the zone. With only a zone id, the wall time is localized in
    that zone; a wall time skipped by a DST gap moves forward by the gap
    length, and an ambiguous one takes the earlier offset.

    Args:
        text: Date-time text, e.g. "2000-01-01T00:00:00Z"

    Returns:
        Aware datetime

    Raises:
        ContractViolation: If text is None
        DateTimeParseError: If text does not match the accepted profile
    """
    text = _check_text(text)
    match = _match(text)
    wall_time = _wall_time(text, match)
    offset = match.group("offset")
    zone = match.group("zone")

    if offset is None and zone is None:
        raise DateTimeParseError(f"Text '{text}' has neither an offset nor a zone id")

    if offset is not None:
        value = wall_time.replace(tzinfo=_parse_offset(text, offset))
        if zone is not None:
            value = value.astimezone(_parse_zone(text, zone))
    else:
        tz = _parse_zone(text, zone)
        # Round-trip through UTC so a wall time in a DST gap moves forward
        value = wall_time.replace(tzinfo=tz).astimezone(timezone.utc).astimezone(tz)

    logger.debug(f"Parsed '{text}' as {value.isoformat()}")
    return value


def parse_iso_local_datetime(text: Optional[str]) -> datetime:
    """
    Parse ISO-8601 text without offset or zone into a naive datetime.

    Raises:
        ContractViolation: If text is None
        DateTimeParseError: If text does not match, or carries an offset/zone
    """
    text = _check_text(text)
    match = _match(text)
    if match.group("offset") is not None or match.group("zone") is not None:
        raise DateTimeParseError(f"Text '{text}' is not a local date-time, it carries an offset or zone id")
    return _wall_time(text, match)


def move_to_zone(value: datetime, tz: tzinfo) -> datetime:
    """
    Express value in tz, keeping the same instant.

    Args:
        value: Aware datetime
        tz: Target time zone

    Returns:
        Aware datetime whose fields are recomputed for tz

    Raises:
        ContractViolation: If value is naive
    """
    if value.tzinfo is None or value.utcoffset() is None:
        raise ContractViolation(f"Cannot move naive datetime {value.isoformat()} to another zone")
    return value.astimezone(tz)


def parse_in_zone(text: Optional[str], tz: tzinfo) -> datetime:
    """Parse text, then move the result to tz."""
    return move_to_zone(parse_iso_datetime(text), tz)
