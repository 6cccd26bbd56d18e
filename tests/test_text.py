"""Tests for string conversions."""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone

import pytest

from easytime.convert import instant_to_string, string_to_date, string_to_datetime, string_to_instant
from easytime.errors import ParseError, ValidationError
from easytime.format import DAY_PATTERN, MONTH_PATTERN, SECOND_PATTERN
from easytime.units.offset import FIXED_OFFSET


class TestInstantToString:
    """Tests for instant_to_string."""

    def test_second_pattern(self) -> None:
        """Instants are formatted at +08:00."""
        instant = datetime(2024, 1, 15, 12, 30, 45, tzinfo=timezone.utc)
        assert instant_to_string(instant, SECOND_PATTERN) == "2024-01-15 20:30:45"

    def test_day_pattern_crosses_midnight(self) -> None:
        instant = datetime(2024, 1, 15, 17, 0, tzinfo=timezone.utc)
        assert instant_to_string(instant, DAY_PATTERN) == "2024-01-16"

    def test_month_pattern(self) -> None:
        instant = datetime(2024, 1, 31, 16, 0, tzinfo=timezone.utc)
        assert instant_to_string(instant, MONTH_PATTERN) == "2024-02"

    def test_pattern_text(self) -> None:
        """A pattern string works like a compiled pattern."""
        instant = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)
        assert instant_to_string(instant, "yyyy/MM/dd") == "2024/01/15"

    def test_offset_field(self) -> None:
        """The offset field always renders the fixed offset."""
        instant = datetime(2024, 1, 15, 12, 30, 45, tzinfo=timezone.utc)
        assert instant_to_string(instant, "yyyy-MM-dd'T'HH:mm:ssXXX") == "2024-01-15T20:30:45+08:00"

    def test_naive_raises(self) -> None:
        with pytest.raises(ValidationError):
            instant_to_string(datetime(2024, 1, 15), SECOND_PATTERN)

    def test_invalid_pattern_raises(self) -> None:
        with pytest.raises(ValueError):
            instant_to_string(datetime(2024, 1, 15, tzinfo=FIXED_OFFSET), "yyyy-MM-dd hh")


class TestStringToDatetime:
    """Tests for string_to_datetime."""

    def test_second_pattern(self) -> None:
        assert string_to_datetime("2021-05-01 08:30:00", SECOND_PATTERN) == datetime(2021, 5, 1, 8, 30)

    def test_pattern_text(self) -> None:
        assert string_to_datetime("2021-05-01 08:30:00", "yyyy-MM-dd HH:mm:ss") == datetime(2021, 5, 1, 8, 30)

    def test_invalid_month_raises(self) -> None:
        """Month 13 is rejected with ParseError."""
        with pytest.raises(ParseError):
            string_to_datetime("2021-13-01 00:00:00", SECOND_PATTERN)

    def test_parse_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            string_to_datetime("not a date", SECOND_PATTERN)

    def test_mismatch_raises(self) -> None:
        with pytest.raises(ParseError):
            string_to_datetime("2021-05-01T08:30:00", SECOND_PATTERN)

    def test_day_pattern_has_no_time(self) -> None:
        """A pattern without an hour cannot produce a date-time."""
        with pytest.raises(ParseError):
            string_to_datetime("2021-05-01", DAY_PATTERN)

    def test_hour_only(self) -> None:
        assert string_to_datetime("2021-05-01 08", "yyyy-MM-dd HH") == datetime(2021, 5, 1, 8)


class TestStringToDate:
    """Tests for string_to_date."""

    def test_day_pattern(self) -> None:
        assert string_to_date("2021-05-01", DAY_PATTERN) == date(2021, 5, 1)

    def test_month_pattern(self) -> None:
        """A month pattern resolves to the first day of the month."""
        assert string_to_date("2021-05", MONTH_PATTERN) == date(2021, 5, 1)

    def test_time_fields_are_ignored(self) -> None:
        assert string_to_date("2021-05-01 23:59:59", SECOND_PATTERN) == date(2021, 5, 1)

    def test_result_is_plain_date(self) -> None:
        result = string_to_date("2021-05-01 23:59:59", SECOND_PATTERN)
        assert type(result) is date

    def test_pattern_without_date_raises(self) -> None:
        with pytest.raises(ParseError):
            string_to_date("08:30", "HH:mm")

    def test_invalid_day_raises(self) -> None:
        with pytest.raises(ParseError):
            string_to_date("2021-05-32", DAY_PATTERN)


class TestStringToInstant:
    """Tests for string_to_instant and its pattern dispatch."""

    def test_month_pattern(self) -> None:
        """The month pattern takes the date path."""
        result = string_to_instant("2021-05", MONTH_PATTERN)
        assert result == datetime(2021, 5, 1, tzinfo=FIXED_OFFSET)
        assert result.isoformat() == "2021-05-01T00:00:00+08:00"

    def test_day_pattern(self) -> None:
        assert string_to_instant("2021-05-01", DAY_PATTERN) == datetime(2021, 5, 1, tzinfo=FIXED_OFFSET)

    def test_second_pattern(self) -> None:
        """The second pattern takes the date-time path."""
        result = string_to_instant("2021-05-01 08:30:00", SECOND_PATTERN)
        assert result == datetime(2021, 5, 1, 0, 30, tzinfo=timezone.utc)
        assert result.tzinfo is FIXED_OFFSET

    def test_dispatch_by_pattern_text(self) -> None:
        """Pattern strings equal to a predefined pattern dispatch the same way."""
        result = string_to_instant("2021-05-01 08:30:00", "yyyy-MM-dd HH:mm:ss")
        assert result == datetime(2021, 5, 1, 8, 30, tzinfo=FIXED_OFFSET)

    def test_other_pattern_falls_back_to_date(self, caplog) -> None:
        """Unrecognized patterns take the date path and drop the time."""
        caplog.set_level(logging.DEBUG, logger="easytime.convert.text")
        result = string_to_instant("2021/05/01 08:30", "yyyy/MM/dd HH:mm")
        assert result == datetime(2021, 5, 1, tzinfo=FIXED_OFFSET)
        assert "not predefined" in caplog.text

    def test_predefined_patterns_do_not_log(self, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="easytime.convert.text")
        string_to_instant("2021-05-01", DAY_PATTERN)
        assert caplog.text == ""

    def test_mismatch_raises(self) -> None:
        with pytest.raises(ParseError):
            string_to_instant("2021-05-01", MONTH_PATTERN)

    def test_invalid_pattern_type_raises(self) -> None:
        with pytest.raises(TypeError):
            string_to_instant("2021-05-01", 42)


class TestNonAsciiDigits:
    """Strings with non-ASCII digits do not match any pattern."""

    def test_string_to_date(self) -> None:
        with pytest.raises(ParseError):
            string_to_date("٢٠٢١-٠٥-٠١", DAY_PATTERN)

    def test_string_to_datetime(self) -> None:
        with pytest.raises(ParseError):
            string_to_datetime("２０２１-05-01 08:30:00", SECOND_PATTERN)
