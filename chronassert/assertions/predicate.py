"""Assertions driven by caller-supplied conditions."""

import logging
from typing import Any, Callable, Self

from ..errors import ContractViolation
from ..models import FailureKind
from .base import BaseAssert

logger = logging.getLogger(__name__)

Condition = Callable[[Any], bool]


class PredicateAssert(BaseAssert):
    """Assert that an arbitrary value does or does not satisfy a condition.

    The condition is called exactly once per check, with actual as its only
    argument.

    Example:
        >>> assert_that("Adam").satisfies(lambda name: len(name) == 4)
        >>> assert_that("Adam").not_satisfies(str.islower)
    """

    def satisfies(self, condition: Condition) -> Self:
        return self._verify_condition(condition, True, FailureKind.PREDICATE_SHOULD_SATISFY)

    def not_satisfies(self, condition: Condition) -> Self:
        return self._verify_condition(condition, False, FailureKind.PREDICATE_SHOULD_NOT_SATISFY)

    def _verify_condition(self, condition: Condition, expected_result: bool, kind: FailureKind) -> Self:
        self.is_not_null()
        if condition is None:
            raise ContractViolation("The condition should not be None.")
        if not callable(condition):
            raise ContractViolation(f"The condition should be callable, got {type(condition).__name__}")
        result = bool(condition(self.actual))
        logger.debug(f"Condition on {self.actual!r} evaluated to {result}")
        if result != expected_result:
            raise self._fail(kind, self.actual)
        return self
