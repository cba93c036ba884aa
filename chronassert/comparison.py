"""
Date-time comparisons used by the date-time assertions.

Truncated equality is built as a chain: each granularity requires the next
coarser one plus one more field. Sub-second fractions are never compared, so
values straddling a field boundary (00:00:01.000 and 23:59:59.999 of the day
before) are unequal at every granularity.

Both operands must already be in the same zone (or both be naive). Ordering
and equality compare instants, the truncated checks compare fields.
"""

from datetime import datetime, timezone


def have_same_year(actual: datetime, other: datetime) -> bool:
    return actual.year == other.year


def have_same_year_and_month(actual: datetime, other: datetime) -> bool:
    return have_same_year(actual, other) and actual.month == other.month


def have_same_year_month_and_day(actual: datetime, other: datetime) -> bool:
    return have_same_year_and_month(actual, other) and actual.day == other.day


def are_equal_ignoring_minutes(actual: datetime, other: datetime) -> bool:
    return have_same_year_month_and_day(actual, other) and actual.hour == other.hour


def are_equal_ignoring_seconds(actual: datetime, other: datetime) -> bool:
    return are_equal_ignoring_minutes(actual, other) and actual.minute == other.minute


def are_equal_ignoring_nanos(actual: datetime, other: datetime) -> bool:
    return are_equal_ignoring_seconds(actual, other) and actual.second == other.second


# "Ignoring hours" keeps year, month and day
are_equal_ignoring_hours = have_same_year_month_and_day


def instant(value: datetime) -> datetime:
    """The UTC instant of an aware value; naive values are returned as is.

    Aware datetimes sharing one tzinfo compare by wall fields and ignore
    fold, so repeated wall times across a DST fall-back would compare equal.
    """
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc)


def are_same_instant(actual: datetime, other: datetime) -> bool:
    return instant(actual) == instant(other)


def is_before(actual: datetime, other: datetime) -> bool:
    """Strictly before, at full precision."""
    return instant(actual) < instant(other)


def is_after(actual: datetime, other: datetime) -> bool:
    """Strictly after, at full precision."""
    return instant(actual) > instant(other)


def is_before_or_equal(actual: datetime, other: datetime) -> bool:
    return not is_after(actual, other)


def is_after_or_equal(actual: datetime, other: datetime) -> bool:
    return not is_before(actual, other)
