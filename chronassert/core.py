"""
Chronassert Core - entry points creating the assertion wrappers.

assert_that() picks the wrapper from the type of the value. A None value has
no type to dispatch on and gets a PredicateAssert; use the typed factories
to check a None date-time or Option.
"""

import logging
from datetime import datetime
from functools import singledispatch
from typing import Any, Optional

from .assertions import (
    LocalDateTimeAssert,
    OptionalAssert,
    PredicateAssert,
    ZonedDateTimeAssert,
)
from .errors import ContractViolation
from .models import Option

logger = logging.getLogger(__name__)


def _is_aware(value: datetime) -> bool:
    return value.tzinfo is not None and value.utcoffset() is not None


@singledispatch
def assert_that(actual: Any) -> PredicateAssert:
    """
    Create the assertion matching the type of actual.

    Args:
        actual: The value under test

    Returns:
        ZonedDateTimeAssert for aware datetimes, LocalDateTimeAssert for
        naive ones, OptionalAssert for Option, PredicateAssert otherwise
    """
    return assert_that_object(actual)


@assert_that.register
def _(actual: datetime) -> ZonedDateTimeAssert | LocalDateTimeAssert:
    if _is_aware(actual):
        return assert_that_zoned_datetime(actual)
    return assert_that_local_datetime(actual)


@assert_that.register
def _(actual: Option) -> OptionalAssert:
    return assert_that_optional(actual)


def assert_that_zoned_datetime(actual: Optional[datetime]) -> ZonedDateTimeAssert:
    """Create a ZonedDateTimeAssert; actual must be None or timezone-aware."""
    if actual is not None and not (isinstance(actual, datetime) and _is_aware(actual)):
        raise ContractViolation(f"Expected a timezone-aware datetime, got {actual!r}")
    logger.debug(f"Creating ZonedDateTimeAssert for {actual!r}")
    return ZonedDateTimeAssert(actual=actual)


def assert_that_local_datetime(actual: Optional[datetime]) -> LocalDateTimeAssert:
    """Create a LocalDateTimeAssert; actual must be None or naive."""
    if actual is not None and not (isinstance(actual, datetime) and actual.tzinfo is None):
        raise ContractViolation(f"Expected a naive datetime, got {actual!r}")
    logger.debug(f"Creating LocalDateTimeAssert for {actual!r}")
    return LocalDateTimeAssert(actual=actual)


def assert_that_optional(actual: Optional[Option]) -> OptionalAssert:
    """Create an OptionalAssert; actual must be None or an Option."""
    if actual is not None and not isinstance(actual, Option):
        raise ContractViolation(f"Expected an Option, got {actual!r}")
    logger.debug(f"Creating OptionalAssert for {actual!r}")
    return OptionalAssert(actual=actual)


def assert_that_object(actual: Any) -> PredicateAssert:
    """Create a PredicateAssert for any value, None included."""
    logger.debug(f"Creating PredicateAssert for {actual!r}")
    return PredicateAssert(actual=actual)
