"""
Chronassert - Fluent assertions for date-times, optionals and predicates.

Wrap a value with assert_that() and chain checks on it. A failing check
raises AssertionFailure (an AssertionError) with a descriptive message;
misusing the API, e.g. passing None where a value is required, raises
ContractViolation (a ValueError).

    >>> from datetime import datetime, timezone
    >>> from chronassert import Option, assert_that
    >>>
    >>> start = datetime(2000, 1, 1, tzinfo=timezone.utc)
    >>> assert_that(start).is_before("2000-01-02T00:00:00Z").is_after_or_equal_to(start)
    >>> assert_that(Option.of("something")).contains("something")
    >>> assert_that("Adam").not_satisfies(lambda name: len(name) != 4)
"""

from .core import (
    assert_that,
    assert_that_local_datetime,
    assert_that_object,
    assert_that_optional,
    assert_that_zoned_datetime,
)
from .errors import AssertionFailure, ChronassertError, ContractViolation, DateTimeParseError
from .models import Option
from .normalizer import parse_iso_datetime, parse_iso_local_datetime
from .settings import ChronassertSettings, configure_logging, get_settings, reload_settings

__version__ = "0.1.0"
__all__ = [
    "AssertionFailure",
    "ChronassertError",
    "ChronassertSettings",
    "ContractViolation",
    "DateTimeParseError",
    "Option",
    "assert_that",
    "assert_that_local_datetime",
    "assert_that_object",
    "assert_that_optional",
    "assert_that_zoned_datetime",
    "configure_logging",
    "get_settings",
    "parse_iso_datetime",
    "parse_iso_local_datetime",
    "reload_settings",
]
