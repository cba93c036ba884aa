"""
Unit tests for ISO-8601 parsing and zone normalization.
"""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from chronassert.errors import AssertionFailure, ContractViolation, DateTimeParseError
from chronassert.normalizer import (
    move_to_zone,
    parse_in_zone,
    parse_iso_datetime,
    parse_iso_local_datetime,
)


class TestParseIsoDateTime:
    """Test parsing of zoned ISO-8601 text."""

    def test_utc_designator(self):
        """Test 'Z' yields a UTC datetime."""
        value = parse_iso_datetime("2000-01-01T00:00:00Z")
        assert value == datetime(2000, 1, 1, tzinfo=timezone.utc)
        assert value.utcoffset() == timedelta(0)

    def test_numeric_offset(self):
        """Test a numeric offset is kept as the datetime's zone."""
        value = parse_iso_datetime("2000-01-01T10:15:30+01:00")
        assert value.hour == 10
        assert value.utcoffset() == timedelta(hours=1)

    def test_negative_offset_with_seconds(self):
        value = parse_iso_datetime("2000-01-01T10:15:30-05:30:15")
        assert value.utcoffset() == -timedelta(hours=5, minutes=30, seconds=15)

    def test_seconds_are_optional(self):
        value = parse_iso_datetime("2000-01-01T10:15Z")
        assert (value.hour, value.minute, value.second) == (10, 15, 0)

    def test_fraction_is_truncated_to_microseconds(self):
        """Test nanosecond fractions keep their first six digits."""
        value = parse_iso_datetime("2000-01-01T00:00:00.999999999Z")
        assert value.second == 0
        assert value.microsecond == 999999

    def test_short_fraction(self):
        value = parse_iso_datetime("2000-01-01T00:00:00.5Z")
        assert value.microsecond == 500000

    def test_zone_id_only_localizes_wall_time(self):
        """Test a bracketed zone id without offset localizes the fields."""
        value = parse_iso_datetime("2000-06-01T12:00:00[Europe/Paris]")
        assert value.tzinfo == ZoneInfo("Europe/Paris")
        assert value.hour == 12
        assert value.utcoffset() == timedelta(hours=2)

    def test_offset_and_zone_id_keep_instant(self):
        """Test the offset fixes the instant and the zone id the fields."""
        value = parse_iso_datetime("2000-01-01T00:00:00Z[Europe/Paris]")
        assert value.tzinfo == ZoneInfo("Europe/Paris")
        assert value.hour == 1
        assert value == datetime(2000, 1, 1, tzinfo=timezone.utc)

    def test_zone_id_only_in_dst_gap_moves_forward(self):
        """Test a wall time skipped by spring-forward shifts by the gap length."""
        value = parse_iso_datetime("2021-03-14T02:30:00[America/New_York]")
        assert (value.hour, value.minute) == (3, 30)
        assert value.utcoffset() == timedelta(hours=-4)
        assert value == datetime(2021, 3, 14, 7, 30, tzinfo=timezone.utc)

    def test_zone_id_only_ambiguous_takes_earlier_offset(self):
        value = parse_iso_datetime("2021-11-07T01:30:00[America/New_York]")
        assert value.utcoffset() == timedelta(hours=-4)

    def test_offset_and_zone_id_in_repeated_hour(self):
        """Test the offset picks which of the repeated wall times is meant."""
        first = parse_iso_datetime("2021-11-07T01:30:00-04:00[America/New_York]")
        second = parse_iso_datetime("2021-11-07T01:30:00-05:00[America/New_York]")
        assert (first.fold, second.fold) == (0, 1)
        assert second.utcoffset() == timedelta(hours=-5)

    def test_none_is_a_contract_violation(self):
        with pytest.raises(ContractViolation, match="should not be None"):
            parse_iso_datetime(None)

    def test_non_string_is_a_contract_violation(self):
        with pytest.raises(ContractViolation, match="Expected an ISO-8601 string"):
            parse_iso_datetime(20000101)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "not a date",
            "2000-01-01",
            "2000-01-01 00:00:00Z",
            "2000-01-01T00:00:00",
            "2000-13-01T00:00:00Z",
            "2000-02-30T00:00:00Z",
            "2000-01-01T24:00:00Z",
            "2000-01-01T00:00:00+25:00",
            "2000-01-01T00:00:00+01:75",
            "2000-01-01T00:00:00.1234567890Z",
            "2000-01-01T00:00:00Z[Mars/Olympus_Mons]",
            "\u0662\u0660\u0660\u0660-01-01T00:00:00Z",
            "2000-01-01T00:00:00Z\n",
        ],
    )
    def test_malformed_text_is_a_parse_error(self, text):
        """Test malformed text raises DateTimeParseError, never an assertion failure."""
        with pytest.raises(DateTimeParseError) as excinfo:
            parse_iso_datetime(text)
        assert isinstance(excinfo.value, ValueError)
        assert not isinstance(excinfo.value, AssertionFailure)


class TestParseIsoLocalDateTime:
    """Test parsing of local ISO-8601 text."""

    def test_naive_result(self):
        value = parse_iso_local_datetime("2000-01-01T00:00:01.000")
        assert value == datetime(2000, 1, 1, 0, 0, 1)
        assert value.tzinfo is None

    @pytest.mark.parametrize("text", ["2000-01-01T00:00:00Z", "2000-01-01T00:00:00+01:00", "2000-01-01T00:00[UTC]"])
    def test_offset_or_zone_is_rejected(self, text):
        with pytest.raises(DateTimeParseError, match="not a local date-time"):
            parse_iso_local_datetime(text)

    def test_none_is_a_contract_violation(self):
        with pytest.raises(ContractViolation, match="should not be None"):
            parse_iso_local_datetime(None)


class TestMoveToZone:
    """Test instant-preserving zone conversion."""

    def test_fields_are_recomputed(self):
        value = datetime(2000, 1, 1, 23, 30, tzinfo=timezone.utc)
        moved = move_to_zone(value, timezone(timedelta(hours=1)))
        assert (moved.day, moved.hour, moved.minute) == (2, 0, 30)
        assert moved == value

    def test_naive_value_is_rejected(self):
        with pytest.raises(ContractViolation, match="naive"):
            move_to_zone(datetime(2000, 1, 1), timezone.utc)

    def test_parse_in_zone(self):
        moved = parse_in_zone("2000-01-01T00:00:00Z", timezone(timedelta(hours=-1)))
        assert (moved.year, moved.month, moved.day, moved.hour) == (1999, 12, 31, 23)
        assert moved.utcoffset() == timedelta(hours=-1)
