"""
AssertJ-style failure message formatting for Chronassert.

This module turns a FailureDescriptor into the human-readable message carried
by AssertionFailure. Operands are rendered with Rich's pretty printer so that
large values are truncated consistently; date-times are rendered in ISO-8601
with their zone id, matching the textual form the assertions accept.
"""

from datetime import datetime
from typing import Any, Dict, Optional
from zoneinfo import ZoneInfo

from rich.pretty import pretty_repr

from .models import FailureDescriptor, FailureKind, Option
from .settings import get_settings


class MessageFormatter:
    """
    Formatter for assertion failure descriptors.

    Each FailureKind maps to one template whose positional fields are filled
    with the rendered operands of the descriptor, in order.
    """

    templates: Dict[FailureKind, str] = {
        FailureKind.ACTUAL_IS_NULL: "\nExpecting actual not to be None",
        FailureKind.SHOULD_BE_NULL: "\nExpecting:\n  <{0}>\nto be None",
        FailureKind.SHOULD_BE_EQUAL: "\nExpecting:\n  <{0}>\nto be equal to:\n  <{1}>\nbut was not.",
        FailureKind.SHOULD_NOT_BE_EQUAL: "\nExpecting:\n  <{0}>\nnot to be equal to:\n  <{1}>",
        FailureKind.SHOULD_BE_IN: "\nExpecting:\n  <{0}>\nto be in:\n  <{1}>",
        FailureKind.SHOULD_NOT_BE_IN: "\nExpecting:\n  <{0}>\nnot to be in:\n  <{1}>",
        FailureKind.SHOULD_BE_BEFORE: "\nExpecting:\n  <{0}>\nto be strictly before:\n  <{1}>",
        FailureKind.SHOULD_BE_BEFORE_OR_EQUAL: "\nExpecting:\n  <{0}>\nto be before or equals to:\n  <{1}>",
        FailureKind.SHOULD_BE_AFTER: "\nExpecting:\n  <{0}>\nto be strictly after:\n  <{1}>",
        FailureKind.SHOULD_BE_AFTER_OR_EQUAL: "\nExpecting:\n  <{0}>\nto be after or equals to:\n  <{1}>",
        FailureKind.SHOULD_BE_EQUAL_IGNORING_NANOS: (
            "\nExpecting:\n  <{0}>\nto have same year, month, day, hour, minute and second as:\n  <{1}>\nbut had not."
        ),
        FailureKind.SHOULD_BE_EQUAL_IGNORING_SECONDS: (
            "\nExpecting:\n  <{0}>\nto have same year, month, day, hour and minute as:\n  <{1}>\nbut had not."
        ),
        FailureKind.SHOULD_BE_EQUAL_IGNORING_MINUTES: (
            "\nExpecting:\n  <{0}>\nto have same year, month, day and hour as:\n  <{1}>\nbut had not."
        ),
        FailureKind.SHOULD_BE_EQUAL_IGNORING_HOURS: (
            "\nExpecting:\n  <{0}>\nto have same year, month and day as:\n  <{1}>\nbut had not."
        ),
        FailureKind.OPTIONAL_SHOULD_BE_PRESENT: "\nExpecting Optional to contain a value but was empty.",
        FailureKind.OPTIONAL_SHOULD_BE_EMPTY: "\nExpecting an empty Optional but was containing value: <{0}>.",
        FailureKind.OPTIONAL_SHOULD_CONTAIN: "\nExpecting:\n  <{0}>\nto contain:\n  <{1}>\nbut did not.",
        FailureKind.OPTIONAL_SHOULD_CONTAIN_EMPTY: "\nExpecting Optional to contain:\n  <{0}>\nbut was empty.",
        FailureKind.PREDICATE_SHOULD_SATISFY: "\nExpecting:\n  <{0}>\nto satisfy given condition.",
        FailureKind.PREDICATE_SHOULD_NOT_SATISFY: "\nExpecting:\n  <{0}>\nnot to satisfy given condition.",
    }

    def __init__(
        self,
        max_string: Optional[int] = None,
        max_length: Optional[int] = None,
        max_depth: Optional[int] = None,
    ):
        """
        Initialize formatter with truncation limits.

        Args:
            max_string: Longest string rendered (defaults to settings)
            max_length: Most container items rendered (defaults to settings)
            max_depth: Deepest nesting rendered (defaults to settings)
        """
        settings = get_settings()
        self.max_string = max_string if max_string is not None else settings.repr_max_string
        self.max_length = max_length if max_length is not None else settings.repr_max_length
        self.max_depth = max_depth if max_depth is not None else settings.repr_max_depth

    def create(self, descriptor: FailureDescriptor, description: Optional[str] = None) -> str:
        """
        Build the failure message for a descriptor.

        Args:
            descriptor: Failure kind and operands
            description: Optional assertion description, shown as a prefix

        Returns:
            Formatted message string
        """
        template = self.templates[descriptor.kind]
        message = template.format(*(self.represent(operand) for operand in descriptor.operands))
        if description:
            return f"[{description}] {message}"
        return message

    def represent(self, value: Any) -> str:
        """Render a single operand."""
        if isinstance(value, datetime):
            return format_datetime(value)
        if isinstance(value, Option):
            if value.is_present():
                return f"Optional[{self.represent(value.get())}]"
            return repr(value)
        if isinstance(value, (list, tuple)) and any(isinstance(v, datetime) for v in value):
            return "[" + ", ".join(self.represent(v) for v in value) + "]"
        return pretty_repr(
            value,
            max_string=self.max_string,
            max_length=self.max_length,
            max_depth=self.max_depth,
        )


def format_datetime(value: datetime) -> str:
    """Render a datetime as ISO-8601, appending the zone id when it has one.

    Example:
        >>> format_datetime(datetime(2000, 1, 1, tzinfo=ZoneInfo("Europe/Paris")))
        '2000-01-01T00:00:00+01:00[Europe/Paris]'
    """
    text = value.isoformat()
    if isinstance(value.tzinfo, ZoneInfo):
        text += f"[{value.tzinfo.key}]"
    return text
