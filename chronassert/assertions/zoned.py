"""Assertions on timezone-aware datetimes."""

from datetime import datetime

from ..errors import ContractViolation
from ..normalizer import move_to_zone, parse_in_zone
from .temporal import TemporalAssert


class ZonedDateTimeAssert(TemporalAssert):
    """Assert properties of a timezone-aware datetime.

    The other operand of every check is first moved into actual's zone,
    keeping its instant. Comparisons are therefore relative to actual's
    zone: truncated equality on 2000-01-01T23:30:00+00:00 and
    2000-01-02T00:30:00+01:00 compares fields in actual's zone.

    Example:
        >>> actual = parse_iso_datetime("2000-01-01T00:00:00Z")
        >>> assert_that(actual).is_before("2000-01-02T00:00:00Z")
        >>> assert_that(actual).is_equal_to("2000-01-01T01:00:00+01:00")
        >>> assert_that(actual).is_in("1999-12-31T23:00:00-01:00", "2000-01-01T00:00:00Z")
    """

    def _coerce(self, other: datetime) -> datetime:
        if other.tzinfo is None or other.utcoffset() is None:
            raise ContractViolation(
                f"The datetime to compare actual with should be timezone-aware, got {other.isoformat()}"
            )
        return move_to_zone(other, self.actual.tzinfo)

    def _parse(self, text: str) -> datetime:
        return parse_in_zone(text, self.actual.tzinfo)
