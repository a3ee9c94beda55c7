"""Tests for DD/MM/YYYY parsing and formatting."""

from datetime import date

import pytest

from limitctl.domain.dates import (
    INVALID_DATE_MESSAGE,
    InvalidDateFormat,
    format_date,
    parse_date,
)


class TestParseDate:
    def test_valid(self) -> None:
        assert parse_date("01/10/2022") == date(2022, 10, 1)

    def test_leap_day(self) -> None:
        assert parse_date("29/02/2024") == date(2024, 2, 29)

    def test_surrounding_whitespace(self) -> None:
        assert parse_date("  15/07/2021\n") == date(2021, 7, 15)

    @pytest.mark.parametrize(
        "text",
        [
            "29/02/2023",  # not a leap year
            "31/04/2022",  # April has 30 days
            "00/01/2022",
            "15/13/2022",
            "15/00/2022",
            "01/01/0000",
        ],
    )
    def test_out_of_range_rejected(self, text: str) -> None:
        with pytest.raises(InvalidDateFormat):
            parse_date(text)

    @pytest.mark.parametrize(
        "text",
        ["", "1/10/2022", "01/1/2022", "01/10/22", "2022-10-01", "01-10-2022", "aa/bb/cccc"],
    )
    def test_malformed_rejected(self, text: str) -> None:
        with pytest.raises(InvalidDateFormat):
            parse_date(text)

    def test_error_carries_input_and_message(self) -> None:
        with pytest.raises(InvalidDateFormat) as exc_info:
            parse_date("31/02/2024")
        assert exc_info.value.text == "31/02/2024"
        assert str(exc_info.value) == INVALID_DATE_MESSAGE

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_date("nope")


class TestFormatDate:
    def test_zero_padded(self) -> None:
        assert format_date(date(2024, 1, 5)) == "05/01/2024"

    def test_round_trip_text(self) -> None:
        assert format_date(parse_date("21/03/2024")) == "21/03/2024"
