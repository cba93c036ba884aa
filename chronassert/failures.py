"""Failure reporting: turns descriptors into AssertionFailure exceptions."""

import logging

from .errors import AssertionFailure
from .formatters import MessageFormatter
from .models import AssertionInfo, FailureDescriptor, FailureKind

logger = logging.getLogger(__name__)


class Failures:
    """Builds the exceptions raised by failing checks.

    Checks never format messages themselves; they pick a FailureKind and the
    operands, and hand both to failure().
    """

    def __init__(self, formatter: MessageFormatter | None = None):
        self._formatter = formatter

    @property
    def formatter(self) -> MessageFormatter:
        # Built lazily so settings changes are picked up by the shared instance
        if self._formatter is None:
            return MessageFormatter()
        return self._formatter

    def failure(self, info: AssertionInfo, descriptor: FailureDescriptor) -> AssertionFailure:
        """
        Create the failure for a descriptor.

        Args:
            info: Assertion info of the failing chain
            descriptor: Failure kind and operands

        Returns:
            AssertionFailure ready to be raised
        """
        message = self.formatter.create(descriptor, info.description)
        logger.debug(f"Assertion failed ({descriptor.kind.value}): {message.strip()}")
        return AssertionFailure(message, descriptor=descriptor, description=info.description)


def describe(kind: FailureKind, *operands) -> FailureDescriptor:
    """Shorthand for building a FailureDescriptor."""
    return FailureDescriptor(kind=kind, operands=operands)


_failures = Failures()


def get_failures() -> Failures:
    """Get the shared Failures instance."""
    return _failures
