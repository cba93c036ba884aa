"""Assertions on Option containers."""

import logging
from typing import Any, Self

from ..errors import ContractViolation
from ..models import FailureKind
from .base import BaseAssert

logger = logging.getLogger(__name__)


class OptionalAssert(BaseAssert):
    """Assert presence, absence or content of an Option.

    Example:
        >>> assert_that(Option.of("something")).is_present().contains("something")
        >>> assert_that(Option.empty()).is_empty()
    """

    def is_present(self) -> Self:
        """Verify the Option holds a value.

        Example:
            >>> assert_that(Option.of("something")).is_present()  # passes
            >>> assert_that(Option.empty()).is_present()  # fails
        """
        self.is_not_null()
        if not self.actual.is_present():
            raise self._fail(FailureKind.OPTIONAL_SHOULD_BE_PRESENT)
        return self

    def is_empty(self) -> Self:
        """Verify the Option holds nothing.

        Example:
            >>> assert_that(Option.empty()).is_empty()  # passes
            >>> assert_that(Option.of("something")).is_empty()  # fails
        """
        self.is_not_null()
        if self.actual.is_present():
            raise self._fail(FailureKind.OPTIONAL_SHOULD_BE_EMPTY, self.actual.get())
        return self

    def contains(self, expected_value: Any) -> Self:
        """Verify the Option holds a value equal to expected_value.

        Args:
            expected_value: The value expected inside the Option

        Raises:
            ContractViolation: If expected_value is None

        Example:
            >>> assert_that(Option.of(10)).contains(10)  # passes
            >>> assert_that(Option.of(20)).contains(10)  # fails
        """
        self.is_not_null()
        if expected_value is None:
            raise ContractViolation("The expected contained value should not be None.")
        logger.debug(f"Checking {self.actual!r} contains {expected_value!r}")
        if not self.actual.is_present():
            raise self._fail(FailureKind.OPTIONAL_SHOULD_CONTAIN_EMPTY, expected_value)
        if not self.actual.get() == expected_value:
            raise self._fail(FailureKind.OPTIONAL_SHOULD_CONTAIN, self.actual, expected_value)
        return self
