"""Base assertion classes for Chronassert."""

from typing import Any, Optional, Self, Sequence

from pydantic import BaseModel, ConfigDict

from ..errors import AssertionFailure
from ..failures import Failures, describe, get_failures
from ..models import AssertionInfo, FailureKind
from ..objects import Objects


class BaseAssert(BaseModel):
    """Base class for all fluent assertions.

    An assertion wraps one actual value, which may be None. Every check
    either returns the assertion itself, so checks can be chained, or raises
    AssertionFailure. API misuse raises ContractViolation instead.

    Generic null, equality and membership checks are delegated to Objects;
    failures are built by Failures.

    Attributes:
        actual: The value under test
        description: Optional description prefixed to failure messages

    Example:
        >>> class MyAssert(BaseAssert):
        ...     def is_positive(self):
        ...         self.is_not_null()
        ...         ...
        ...         return self
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    actual: Any = None
    description: Optional[str] = None

    @property
    def info(self) -> AssertionInfo:
        return AssertionInfo(description=self.description)

    @property
    def failures(self) -> Failures:
        return get_failures()

    @property
    def objects(self) -> Objects:
        return Objects(self.failures)

    def described_as(self, description: str) -> Self:
        """Return an equivalent assertion whose failures carry description.

        Example:
            >>> assert_that(deadline).described_as("deadline").is_after(start)
        """
        return self.model_copy(update={"description": description})

    def is_null(self) -> Self:
        self.objects.assert_null(self.info, self.actual)
        return self

    def is_not_null(self) -> Self:
        self.objects.assert_not_null(self.info, self.actual)
        return self

    def is_equal_to(self, expected: Any) -> Self:
        self.objects.assert_equal(self.info, self.actual, expected)
        return self

    def is_not_equal_to(self, other: Any) -> Self:
        self.objects.assert_not_equal(self.info, self.actual, other)
        return self

    def is_in(self, *values: Any) -> Self:
        self.objects.assert_is_in(self.info, self.actual, flatten_values(values))
        return self

    def is_not_in(self, *values: Any) -> Self:
        self.objects.assert_is_not_in(self.info, self.actual, flatten_values(values))
        return self

    def _fail(self, kind: FailureKind, *operands: Any) -> AssertionFailure:
        """Build the failure for kind; callers raise it."""
        return self.failures.failure(self.info, describe(kind, *operands))


def flatten_values(values: Sequence[Any]) -> Sequence[Any]:
    # is_in(a, b) and is_in([a, b]) are equivalent
    if len(values) == 1 and isinstance(values[0], (list, tuple)):
        return tuple(values[0])
    return values
