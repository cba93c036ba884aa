"""
Chronassert errors - assertion failures and caller-contract violations.
"""

from typing import TYPE_CHECKING

from rich.console import Group
from rich.panel import Panel
from rich.text import Text

if TYPE_CHECKING:
    from .models import FailureDescriptor


class ChronassertError(Exception):
    """Base exception for all Chronassert errors."""
    pass


class AssertionFailure(ChronassertError, AssertionError):
    """The checked property does not hold on an otherwise valid input.

    Attributes:
        descriptor: The failure kind and the operands involved
        description: Optional description given with described_as()
    """

    def __init__(
        self,
        message: str,
        descriptor: "FailureDescriptor | None" = None,
        description: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.descriptor = descriptor
        self.description = description

    def __rich__(self) -> Panel:
        """Render the failure as a Rich panel."""
        title = "Assertion failed"
        if self.descriptor is not None:
            title = f"Assertion failed: {self.descriptor.kind.value}"
        body = Text(self.message.strip("\n"))
        if self.description:
            body = Group(Text(self.description, style="bold"), body)
        return Panel(body, title=title, border_style="red")


class ContractViolation(ChronassertError, ValueError):
    """The API was misused, e.g. a required argument was None."""
    pass


class DateTimeParseError(ContractViolation):
    """Text did not match the accepted ISO-8601 date-time profile."""
    pass
