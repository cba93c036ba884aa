"""Chronassert assertion wrappers.

Each wrapper holds one actual value and exposes chainable checks.

Assertion Categories:
    - Date-time: ZonedDateTimeAssert (aware), LocalDateTimeAssert (naive)
    - Option: presence, absence and content
    - Predicate: caller-supplied conditions on any value

Example:
    >>> from chronassert import assert_that
    >>> from chronassert.models import Option
    >>>
    >>> assert_that(Option.of("something")).is_present().contains("something")
    >>> assert_that("Adam").satisfies(lambda name: len(name) == 4)
"""

# Base assertion class
from .base import BaseAssert

# Date-time assertions
from .local import LocalDateTimeAssert
from .temporal import TemporalAssert
from .zoned import ZonedDateTimeAssert

# Option assertions
from .optional import OptionalAssert

# Predicate assertions
from .predicate import PredicateAssert

__all__ = [
    # Base
    "BaseAssert",
    # Date-time
    "LocalDateTimeAssert",
    "TemporalAssert",
    "ZonedDateTimeAssert",
    # Option
    "OptionalAssert",
    # Predicate
    "PredicateAssert",
]
