"""Assertions on local (naive) datetimes."""

from datetime import datetime

from ..errors import ContractViolation
from ..normalizer import parse_iso_local_datetime
from .temporal import TemporalAssert


class LocalDateTimeAssert(TemporalAssert):
    """Assert properties of a naive datetime.

    Local values carry no zone, so both operands are compared field by field
    as given. Text must not carry an offset or zone id.

    Example:
        >>> assert_that(datetime(2000, 1, 1, 12, 0)).is_after("2000-01-01T11:59:59")
    """

    def _coerce(self, other: datetime) -> datetime:
        if other.tzinfo is not None:
            raise ContractViolation(
                f"The datetime to compare actual with should be a local (naive) datetime, got {other.isoformat()}"
            )
        return other

    def _parse(self, text: str) -> datetime:
        return parse_iso_local_datetime(text)
