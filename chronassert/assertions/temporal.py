"""Checks shared by the zoned and local date-time assertions."""

import logging
from datetime import datetime
from typing import Any, Callable, ClassVar, Self, Sequence

from .. import comparison
from ..errors import ContractViolation
from ..formatters import format_datetime
from ..models import FailureKind
from ..objects import check_values_not_empty
from .base import BaseAssert, flatten_values

logger = logging.getLogger(__name__)

DateTimeLike = datetime | str


class TemporalAssert(BaseAssert):
    """Ordering and truncated-equality checks on a datetime actual.

    Every check accepts either a datetime or its ISO-8601 text. Subclasses
    decide how text is parsed and how the other value is brought next to
    actual before comparing (see _coerce).
    """

    NULL_DATE_TIME_PARAMETER_MESSAGE: ClassVar[str] = "The datetime to compare actual with should not be None"

    def _coerce(self, other: datetime) -> datetime:
        """Bring a datetime other into actual's frame of reference."""
        raise NotImplementedError("Subclasses must implement _coerce()")

    def _parse(self, text: str) -> datetime:
        """Parse text directly into actual's frame of reference."""
        raise NotImplementedError("Subclasses must implement _parse()")

    def _resolve(self, other: DateTimeLike) -> tuple[datetime, datetime]:
        """Validate actual and other, returning (other as reported, other as compared).

        Text is parsed into actual's frame, so both elements are the parsed
        value. A datetime is reported as given and compared after _coerce.
        """
        self.objects.assert_not_null(self.info, self.actual)
        if other is None:
            raise ContractViolation(self.NULL_DATE_TIME_PARAMETER_MESSAGE)
        if isinstance(other, str):
            parsed = self._parse(other)
            return parsed, parsed
        if isinstance(other, datetime):
            return other, self._coerce(other)
        raise ContractViolation(f"Expected a datetime or an ISO-8601 string, got {type(other).__name__}")

    def _resolve_all(self, values: Sequence[Any]) -> tuple[datetime, ...]:
        self.objects.assert_not_null(self.info, self.actual)
        values = None if values == (None,) else flatten_values(values)
        check_values_not_empty(values, "datetime array")
        return tuple(self._resolve(value)[1] for value in values)

    def _check(
        self,
        other: DateTimeLike,
        holds: Callable[[datetime, datetime], bool],
        kind: FailureKind,
        relation: str,
    ) -> Self:
        reported, compared = self._resolve(other)
        logger.debug(f"Checking {format_datetime(self.actual)} is {relation} {format_datetime(compared)}")
        if not holds(self.actual, compared):
            raise self._fail(kind, self.actual, reported)
        return self

    def is_before(self, other: DateTimeLike) -> Self:
        """Verify actual is strictly before other.

        Example:
            >>> assert_that(parse_iso_datetime("2000-01-01T00:00:00Z")).is_before("2000-01-02T00:00:00Z")
        """
        return self._check(other, comparison.is_before, FailureKind.SHOULD_BE_BEFORE, "before")

    def is_before_or_equal_to(self, other: DateTimeLike) -> Self:
        """Verify actual is before or equal to other (i.e. not after it)."""
        return self._check(
            other, comparison.is_before_or_equal, FailureKind.SHOULD_BE_BEFORE_OR_EQUAL, "before or equal to"
        )

    def is_after(self, other: DateTimeLike) -> Self:
        """Verify actual is strictly after other."""
        return self._check(other, comparison.is_after, FailureKind.SHOULD_BE_AFTER, "after")

    def is_after_or_equal_to(self, other: DateTimeLike) -> Self:
        """Verify actual is after or equal to other (i.e. not before it)."""
        return self._check(
            other, comparison.is_after_or_equal, FailureKind.SHOULD_BE_AFTER_OR_EQUAL, "after or equal to"
        )

    def is_equal_to_ignoring_nanos(self, other: DateTimeLike) -> Self:
        """Verify actual and other share year, month, day, hour, minute and second.

        Example:
            >>> # passes: only the fraction of second differs
            >>> assert_that(datetime(2000, 1, 1, 0, 0, 1)).is_equal_to_ignoring_nanos(
            ...     datetime(2000, 1, 1, 0, 0, 1, 456))
        """
        return self._check(
            other, comparison.are_equal_ignoring_nanos, FailureKind.SHOULD_BE_EQUAL_IGNORING_NANOS,
            "equal ignoring nanos to",
        )

    def is_equal_to_ignoring_seconds(self, other: DateTimeLike) -> Self:
        """Verify actual and other share year, month, day, hour and minute."""
        return self._check(
            other, comparison.are_equal_ignoring_seconds, FailureKind.SHOULD_BE_EQUAL_IGNORING_SECONDS,
            "equal ignoring seconds to",
        )

    def is_equal_to_ignoring_minutes(self, other: DateTimeLike) -> Self:
        """Verify actual and other share year, month, day and hour."""
        return self._check(
            other, comparison.are_equal_ignoring_minutes, FailureKind.SHOULD_BE_EQUAL_IGNORING_MINUTES,
            "equal ignoring minutes to",
        )

    def is_equal_to_ignoring_hours(self, other: DateTimeLike) -> Self:
        """Verify actual and other share year, month and day."""
        return self._check(
            other, comparison.are_equal_ignoring_hours, FailureKind.SHOULD_BE_EQUAL_IGNORING_HOURS,
            "equal ignoring hours to",
        )

    def is_equal_to(self, expected: DateTimeLike) -> Self:
        """Verify actual and expected designate the same instant."""
        _, compared = self._resolve(expected)
        logger.debug(f"Checking {format_datetime(self.actual)} is equal to {format_datetime(compared)}")
        if not comparison.are_same_instant(self.actual, compared):
            raise self._fail(FailureKind.SHOULD_BE_EQUAL, self.actual, compared)
        return self

    def is_not_equal_to(self, other: DateTimeLike) -> Self:
        _, compared = self._resolve(other)
        logger.debug(f"Checking {format_datetime(self.actual)} is not equal to {format_datetime(compared)}")
        if comparison.are_same_instant(self.actual, compared):
            raise self._fail(FailureKind.SHOULD_NOT_BE_EQUAL, self.actual, compared)
        return self

    def is_in(self, *values: DateTimeLike) -> Self:
        candidates = self._resolve_all(values)
        if not any(comparison.are_same_instant(self.actual, value) for value in candidates):
            raise self._fail(FailureKind.SHOULD_BE_IN, self.actual, candidates)
        return self

    def is_not_in(self, *values: DateTimeLike) -> Self:
        candidates = self._resolve_all(values)
        if any(comparison.are_same_instant(self.actual, value) for value in candidates):
            raise self._fail(FailureKind.SHOULD_NOT_BE_IN, self.actual, candidates)
        return self
