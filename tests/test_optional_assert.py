"""
Tests for OptionalAssert.
"""

import pytest

from chronassert import Option, assert_that, assert_that_optional
from chronassert.errors import AssertionFailure, ContractViolation
from chronassert.models import FailureKind


class TestIsPresent:
    """Test is_present."""

    def test_passes_with_value(self):
        assertion = assert_that(Option.of("something"))
        assert assertion.is_present() is assertion

    def test_fails_when_empty(self, message_for):
        with pytest.raises(AssertionFailure) as excinfo:
            assert_that(Option.empty()).is_present()
        assert str(excinfo.value) == message_for(FailureKind.OPTIONAL_SHOULD_BE_PRESENT)

    def test_fails_when_optional_is_none(self, message_for):
        with pytest.raises(AssertionFailure) as excinfo:
            assert_that_optional(None).is_present()
        assert str(excinfo.value) == message_for(FailureKind.ACTUAL_IS_NULL)


class TestIsEmpty:
    """Test is_empty."""

    def test_passes_when_empty(self):
        assert_that(Option.empty()).is_empty()

    def test_fails_with_value(self, message_for):
        with pytest.raises(AssertionFailure) as excinfo:
            assert_that(Option.of("something")).is_empty()
        assert str(excinfo.value) == message_for(FailureKind.OPTIONAL_SHOULD_BE_EMPTY, "something")

    def test_fails_when_optional_is_none(self, message_for):
        with pytest.raises(AssertionFailure) as excinfo:
            assert_that_optional(None).is_empty()
        assert str(excinfo.value) == message_for(FailureKind.ACTUAL_IS_NULL)


class TestContains:
    """Test contains."""

    def test_fails_when_optional_is_none(self, message_for):
        with pytest.raises(AssertionFailure) as excinfo:
            assert_that_optional(None).contains("something")
        assert str(excinfo.value) == message_for(FailureKind.ACTUAL_IS_NULL)

    def test_fails_if_expected_value_is_none(self):
        with pytest.raises(ContractViolation, match=r"The expected contained value should not be None\."):
            assert_that(Option.of("something")).contains(None)

    def test_expected_none_is_checked_even_when_empty(self):
        with pytest.raises(ContractViolation):
            assert_that(Option.empty()).contains(None)

    @pytest.mark.parametrize("value", ["something", 10, 0, False, ("a", 1), Option.empty()])
    def test_passes_if_optional_contains_expected_value(self, value):
        assert_that(Option.of(value)).contains(value)

    def test_fails_if_optional_does_not_contain_expected_value(self, message_for):
        """Test the message names both the Option and the expected value."""
        actual = Option.of("not-expected")
        with pytest.raises(AssertionFailure) as excinfo:
            assert_that(actual).contains("something")
        message = str(excinfo.value)
        assert message == message_for(FailureKind.OPTIONAL_SHOULD_CONTAIN, actual, "something")
        assert "not-expected" in message
        assert "something" in message

    def test_fails_if_optional_is_empty(self, message_for):
        """Test the message names only the expected value."""
        with pytest.raises(AssertionFailure) as excinfo:
            assert_that(Option.empty()).contains("something")
        message = str(excinfo.value)
        assert message == message_for(FailureKind.OPTIONAL_SHOULD_CONTAIN_EMPTY, "something")
        assert "empty" in message

    def test_uses_value_equality(self):
        assert_that(Option.of([1, 2])).contains([1, 2])
        with pytest.raises(AssertionFailure):
            assert_that(Option.of(1)).contains("1")
