"""Unit tests for spreadsheet date coercion."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from src.utils.dates import coerce_datetime, excel_serial_to_datetime, parse_date_text, to_iso_z


# ======================================================================
# excel_serial_to_datetime
# ======================================================================


class TestExcelSerial:
    def test_serial_45000_is_march_15_2023(self) -> None:
        result = excel_serial_to_datetime(45000)
        assert to_iso_z(result) == "2023-03-15T00:00:00.000Z"

    def test_serial_25569_is_unix_epoch(self) -> None:
        assert excel_serial_to_datetime(25569) == datetime(1970, 1, 1, tzinfo=timezone.utc)

    def test_fractional_serial_keeps_time_of_day(self) -> None:
        result = excel_serial_to_datetime(45000.5)
        assert result == datetime(2023, 3, 15, 12, 0, tzinfo=timezone.utc)

    def test_fraction_rounds_to_whole_seconds(self) -> None:
        # 0.1 s past midnight is below the rounding threshold.
        result = excel_serial_to_datetime(45000 + 0.1 / 86400)
        assert result == datetime(2023, 3, 15, tzinfo=timezone.utc)

    def test_serial_before_epoch(self) -> None:
        assert excel_serial_to_datetime(25568) == datetime(1969, 12, 31, tzinfo=timezone.utc)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), 1e20])
    def test_unrepresentable_serial_is_none(self, value: float) -> None:
        assert excel_serial_to_datetime(value) is None


# ======================================================================
# parse_date_text
# ======================================================================


class TestParseDateText:
    def test_iso_date(self) -> None:
        assert parse_date_text("2023-06-01") == datetime(2023, 6, 1, tzinfo=timezone.utc)

    def test_naive_text_is_utc(self) -> None:
        result = parse_date_text("March 15, 2023 10:30")
        assert result == datetime(2023, 3, 15, 10, 30, tzinfo=timezone.utc)

    def test_offset_is_converted_to_utc(self) -> None:
        result = parse_date_text("2023-01-01T02:00:00+02:00")
        assert result == datetime(2023, 1, 1, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("2023", "2023-01-01T00:00:00.000Z"),
            ("March 2023", "2023-03-01T00:00:00.000Z"),
            ("2023-06", "2023-06-01T00:00:00.000Z"),
        ],
    )
    def test_partial_text_fills_from_fixed_default(self, text: str, expected: str) -> None:
        assert to_iso_z(parse_date_text(text)) == expected

    def test_partial_text_does_not_depend_on_today(self) -> None:
        first = parse_date_text("Tuesday")
        assert first is not None
        assert first.year == 1970
        assert parse_date_text("Tuesday") == first

    @pytest.mark.parametrize("text", ["", "   ", "not a date", "TBA"])
    def test_unparseable_is_none(self, text: str) -> None:
        assert parse_date_text(text) is None


# ======================================================================
# coerce_datetime
# ======================================================================


class TestCoerceDatetime:
    def test_naive_datetime_used_as_utc(self) -> None:
        assert coerce_datetime(datetime(2023, 1, 1)) == datetime(2023, 1, 1, tzinfo=timezone.utc)

    def test_aware_datetime_converted(self) -> None:
        tz = timezone(timedelta(hours=-5))
        value = datetime(2022, 12, 31, 19, 0, tzinfo=tz)
        assert coerce_datetime(value) == datetime(2023, 1, 1, tzinfo=timezone.utc)

    def test_plain_date_becomes_midnight(self) -> None:
        assert coerce_datetime(date(2023, 6, 1)) == datetime(2023, 6, 1, tzinfo=timezone.utc)

    def test_int_is_serial(self) -> None:
        assert to_iso_z(coerce_datetime(45000)) == "2023-03-15T00:00:00.000Z"

    def test_float_is_serial(self) -> None:
        assert to_iso_z(coerce_datetime(45000.0)) == "2023-03-15T00:00:00.000Z"

    def test_bool_is_not_a_serial(self) -> None:
        assert coerce_datetime(True) is None

    def test_text_is_parsed(self) -> None:
        assert coerce_datetime("2021-07-01") == datetime(2021, 7, 1, tzinfo=timezone.utc)

    def test_year_only_cell_is_new_year(self) -> None:
        assert coerce_datetime("2023") == datetime(2023, 1, 1, tzinfo=timezone.utc)

    @pytest.mark.parametrize("value", [None, "", "unknown"])
    def test_missing_or_garbage_is_none(self, value: object) -> None:
        assert coerce_datetime(value) is None


class TestToIsoZ:
    def test_millisecond_format(self) -> None:
        value = datetime(2023, 1, 1, 8, 5, 3, 456789, tzinfo=timezone.utc)
        assert to_iso_z(value) == "2023-01-01T08:05:03.456Z"

    def test_none(self) -> None:
        assert to_iso_z(None) is None
