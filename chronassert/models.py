"""
Centralized Pydantic models for Chronassert.

This module contains the data models shared by every assertion wrapper:
- FailureKind / FailureDescriptor handed to the failure reporter
- AssertionInfo carrying the optional description of an assertion chain
- Option, the zero-or-one value container checked by OptionalAssert
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from .errors import ContractViolation


# =============================================================================
# Failure Models
# =============================================================================

class FailureKind(str, Enum):
    """Supported failure kinds, one per message template."""
    ACTUAL_IS_NULL = "actual_is_null"
    SHOULD_BE_NULL = "should_be_null"
    SHOULD_BE_EQUAL = "should_be_equal"
    SHOULD_NOT_BE_EQUAL = "should_not_be_equal"
    SHOULD_BE_IN = "should_be_in"
    SHOULD_NOT_BE_IN = "should_not_be_in"
    SHOULD_BE_BEFORE = "should_be_before"
    SHOULD_BE_BEFORE_OR_EQUAL = "should_be_before_or_equal"
    SHOULD_BE_AFTER = "should_be_after"
    SHOULD_BE_AFTER_OR_EQUAL = "should_be_after_or_equal"
    SHOULD_BE_EQUAL_IGNORING_NANOS = "should_be_equal_ignoring_nanos"
    SHOULD_BE_EQUAL_IGNORING_SECONDS = "should_be_equal_ignoring_seconds"
    SHOULD_BE_EQUAL_IGNORING_MINUTES = "should_be_equal_ignoring_minutes"
    SHOULD_BE_EQUAL_IGNORING_HOURS = "should_be_equal_ignoring_hours"
    OPTIONAL_SHOULD_BE_PRESENT = "optional_should_be_present"
    OPTIONAL_SHOULD_BE_EMPTY = "optional_should_be_empty"
    OPTIONAL_SHOULD_CONTAIN = "optional_should_contain"
    OPTIONAL_SHOULD_CONTAIN_EMPTY = "optional_should_contain_empty"
    PREDICATE_SHOULD_SATISFY = "predicate_should_satisfy"
    PREDICATE_SHOULD_NOT_SATISFY = "predicate_should_not_satisfy"


class FailureDescriptor(BaseModel):
    """An assertion failure's kind plus the operands needed to describe it."""

    model_config = ConfigDict(frozen=True)

    kind: FailureKind
    operands: tuple[Any, ...] = ()


class AssertionInfo(BaseModel):
    """Information shared by all checks of one assertion chain."""

    model_config = ConfigDict(frozen=True)

    description: Optional[str] = None


# =============================================================================
# Option Container
# =============================================================================

class Option(BaseModel):
    """A container holding either exactly one value or nothing.

    Example:
        >>> Option.of("something").get()
        'something'
        >>> Option.empty().is_present()
        False
    """

    model_config = ConfigDict(frozen=True)

    value: Any = None
    present: bool = False

    @model_validator(mode="after")
    def _check_presence(self) -> "Option":
        if self.present and self.value is None:
            raise ValueError("A present Option cannot hold None")
        if not self.present and self.value is not None:
            raise ValueError("An empty Option cannot hold a value")
        return self

    @classmethod
    def of(cls, value: Any) -> "Option":
        """Wrap a non-None value."""
        if value is None:
            raise ContractViolation("Option.of() requires a value, use Option.empty() for absence")
        return cls(value=value, present=True)

    @classmethod
    def empty(cls) -> "Option":
        return cls()

    @classmethod
    def of_nullable(cls, value: Any) -> "Option":
        """Wrap value, treating None as absence."""
        return cls.empty() if value is None else cls.of(value)

    def is_present(self) -> bool:
        return self.present

    def is_empty(self) -> bool:
        return not self.present

    def get(self) -> Any:
        if not self.present:
            raise ContractViolation("No value present")
        return self.value

    def __repr__(self) -> str:
        if self.present:
            return f"Optional[{self.value!r}]"
        return "Optional.empty"

    __str__ = __repr__
