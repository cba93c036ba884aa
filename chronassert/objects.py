"""Generic checks shared by every assertion wrapper."""

import logging
from typing import Any, Sequence

from .errors import ContractViolation
from .failures import Failures, describe, get_failures
from .models import AssertionInfo, FailureKind

logger = logging.getLogger(__name__)


class Objects:
    """Null, equality and membership checks on an arbitrary actual value.

    Each method returns None on success and raises AssertionFailure
    otherwise.
    """

    def __init__(self, failures: Failures | None = None):
        self.failures = failures or get_failures()

    def assert_not_null(self, info: AssertionInfo, actual: Any) -> None:
        if actual is None:
            raise self.failures.failure(info, describe(FailureKind.ACTUAL_IS_NULL))

    def assert_null(self, info: AssertionInfo, actual: Any) -> None:
        if actual is not None:
            raise self.failures.failure(info, describe(FailureKind.SHOULD_BE_NULL, actual))

    def assert_equal(self, info: AssertionInfo, actual: Any, expected: Any) -> None:
        logger.debug(f"Checking {actual!r} is equal to {expected!r}")
        if not actual == expected:
            raise self.failures.failure(info, describe(FailureKind.SHOULD_BE_EQUAL, actual, expected))

    def assert_not_equal(self, info: AssertionInfo, actual: Any, other: Any) -> None:
        logger.debug(f"Checking {actual!r} is not equal to {other!r}")
        if actual == other:
            raise self.failures.failure(info, describe(FailureKind.SHOULD_NOT_BE_EQUAL, actual, other))

    def assert_is_in(self, info: AssertionInfo, actual: Any, values: Sequence[Any]) -> None:
        check_values_not_empty(values)
        logger.debug(f"Checking {actual!r} is in {values!r}")
        if not any(actual == value for value in values):
            raise self.failures.failure(info, describe(FailureKind.SHOULD_BE_IN, actual, tuple(values)))

    def assert_is_not_in(self, info: AssertionInfo, actual: Any, values: Sequence[Any]) -> None:
        check_values_not_empty(values)
        logger.debug(f"Checking {actual!r} is not in {values!r}")
        if any(actual == value for value in values):
            raise self.failures.failure(info, describe(FailureKind.SHOULD_NOT_BE_IN, actual, tuple(values)))


def check_values_not_empty(values: Sequence[Any] | None, name: str = "values") -> None:
    """Reject a None or empty candidate list.

    Raises:
        ContractViolation: If values is None or empty
    """
    if values is None:
        raise ContractViolation(f"The given {name} should not be None")
    if len(values) == 0:
        raise ContractViolation(f"The given {name} should not be empty")
