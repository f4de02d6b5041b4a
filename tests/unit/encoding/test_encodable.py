"""Unit tests for per-value-kind cell encoding."""
from __future__ import annotations

import uuid
from datetime import UTC, date, datetime, timedelta, timezone
from enum import IntEnum

import pytest

from csvtable.config import (
    DEFAULT_CONFIGURATION,
    BoolEncodingStrategy,
    CustomBool,
    CustomDate,
    DeferredToDate,
    EncoderConfiguration,
    Formatted,
)
from csvtable.encoding import CsvEncodable, encode_value
from csvtable.kernel.errors import UnencodableValueError
from csvtable.kernel.types import Nothing, Some

NEW_YEAR = datetime(2024, 1, 1, tzinfo=UTC)


# ---------------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------------
class Mileage:
    def __init__(self, km: int) -> None:
        self.km = km

    def encode_csv(self, configuration: EncoderConfiguration) -> str:  # noqa: ARG002
        return f"{self.km} km"


class Priority(IntEnum):
    LOW = 1
    HIGH = 3


# ---------------------------------------------------------------------------
# Primitive kinds
# ---------------------------------------------------------------------------
class TestPrimitives:
    def test_text_unchanged(self):
        assert encode_value("Oil change, 5W-30") == "Oil change, 5W-30"

    def test_empty_text(self):
        assert encode_value("") == ""

    def test_uuid_canonical(self):
        value = uuid.UUID("12345678-1234-5678-1234-567812345678")
        assert encode_value(value) == "12345678-1234-5678-1234-567812345678"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0, "0"), (42, "42"), (-7, "-7"), (1234567, "1234567")],
    )
    def test_integers(self, value, expected):
        assert encode_value(value) == expected

    def test_int_enum_renders_number(self):
        assert encode_value(Priority.HIGH) == "3"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(1.5, "1.5"), (-0.25, "-0.25"), (2.0, "2.0"), (0.1 + 0.2, "0.30000000000000004")],
    )
    def test_floats(self, value, expected):
        assert encode_value(value) == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(float("nan"), "nan"), (float("inf"), "inf"), (float("-inf"), "-inf")],
    )
    def test_non_finite_floats(self, value, expected):
        assert encode_value(value) == expected


# ---------------------------------------------------------------------------
# Booleans
# ---------------------------------------------------------------------------
class TestBooleans:
    @pytest.mark.parametrize(
        ("strategy", "true_token", "false_token"),
        [
            (BoolEncodingStrategy.TRUE_FALSE, "true", "false"),
            (BoolEncodingStrategy.TRUE_FALSE_UPPERCASE, "TRUE", "FALSE"),
            (BoolEncodingStrategy.YES_NO, "yes", "no"),
            (BoolEncodingStrategy.YES_NO_UPPERCASE, "YES", "NO"),
            (BoolEncodingStrategy.INTEGER, "1", "0"),
            (CustomBool("done", "pending"), "done", "pending"),
        ],
    )
    def test_strategy_tokens(self, strategy, true_token, false_token):
        config = EncoderConfiguration(bool_strategy=strategy)
        assert encode_value(True, config) == true_token
        assert encode_value(False, config) == false_token

    def test_default_is_lower_true_false(self):
        assert encode_value(True) == "true"
        assert encode_value(False) == "false"

    def test_bool_is_not_treated_as_int(self):
        config = EncoderConfiguration(bool_strategy=BoolEncodingStrategy.YES_NO)
        assert encode_value(True, config) == "yes"


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------
class TestDates:
    def test_iso8601_default(self):
        assert encode_value(NEW_YEAR) == "2024-01-01T00:00:00Z"

    def test_iso8601_converts_to_utc(self):
        plus_one = timezone(timedelta(hours=1))
        assert encode_value(datetime(2024, 1, 1, 1, 0, tzinfo=plus_one)) == "2024-01-01T00:00:00Z"

    def test_iso8601_drops_fractional_seconds(self):
        value = datetime(2024, 1, 1, 0, 0, 0, 500000, tzinfo=UTC)
        assert encode_value(value) == "2024-01-01T00:00:00Z"

    def test_naive_datetime_taken_as_utc(self):
        assert encode_value(datetime(2024, 1, 1, 12, 30, 5)) == "2024-01-01T12:30:05Z"

    def test_plain_date_is_midnight_utc(self):
        assert encode_value(date(2024, 1, 1)) == "2024-01-01T00:00:00Z"

    def test_deferred_seconds_since_reference_epoch(self):
        config = EncoderConfiguration(date_strategy=DeferredToDate())
        assert encode_value(NEW_YEAR, config) == "725760000.0"

    def test_deferred_before_reference_epoch_is_negative(self):
        config = EncoderConfiguration(date_strategy=DeferredToDate())
        value = datetime(2000, 12, 31, 23, 59, 59, tzinfo=UTC)
        assert encode_value(value, config) == "-1.0"

    def test_deferred_keeps_fraction(self):
        config = EncoderConfiguration(date_strategy=DeferredToDate())
        value = datetime(2001, 1, 1, 0, 0, 0, 250000, tzinfo=UTC)
        assert encode_value(value, config) == "0.25"

    def test_formatted_pattern(self):
        config = EncoderConfiguration(date_strategy=Formatted.pattern("%d/%m/%Y"))
        assert encode_value(NEW_YEAR, config) == "01/01/2024"

    def test_formatted_pattern_with_timezone(self):
        config = EncoderConfiguration(
            date_strategy=Formatted.pattern("%H:%M", tz=timezone(timedelta(hours=2)))
        )
        assert encode_value(NEW_YEAR, config) == "02:00"

    def test_formatted_with_formatter_object(self):
        class YearOnly:
            def format(self, value: datetime) -> str:
                return str(value.year)

        config = EncoderConfiguration(date_strategy=Formatted(YearOnly()))
        assert encode_value(NEW_YEAR, config) == "2024"

    def test_custom_function(self):
        config = EncoderConfiguration(date_strategy=CustomDate(lambda d: f"Q{(d.month - 1) // 3 + 1}"))
        assert encode_value(NEW_YEAR, config) == "Q1"


# ---------------------------------------------------------------------------
# Optionals
# ---------------------------------------------------------------------------
class TestOptionals:
    def test_none_is_empty(self):
        assert encode_value(None) == ""

    def test_nothing_is_empty(self):
        assert encode_value(Nothing()) == ""

    def test_some_delegates(self):
        assert encode_value(Some(5)) == "5"

    def test_some_honours_configuration(self):
        config = EncoderConfiguration(bool_strategy=BoolEncodingStrategy.INTEGER)
        assert encode_value(Some(True), config) == "1"

    def test_nested_some(self):
        assert encode_value(Some(Some("x"))) == "x"

    def test_some_of_none_is_empty(self):
        assert encode_value(Some(None)) == ""


# ---------------------------------------------------------------------------
# Custom kinds / failures
# ---------------------------------------------------------------------------
class TestCustomKinds:
    def test_protocol_is_runtime_checkable(self):
        assert isinstance(Mileage(1), CsvEncodable)

    def test_encode_csv_is_used(self):
        assert encode_value(Mileage(120000), DEFAULT_CONFIGURATION) == "120000 km"

    @pytest.mark.parametrize("value", [{"a": 1}, [1, 2], object(), b"bytes"])
    def test_unsupported_value_raises(self, value):
        with pytest.raises(UnencodableValueError):
            encode_value(value)
