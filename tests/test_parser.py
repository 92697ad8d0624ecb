"""Tests for override specification parsing."""

from datetime import date

import pytest

from termcal.errors import InvalidDate, MalformedRange, TermCalError
from termcal.parser import parse_day, parse_days


class TestParseDay:
    """Test single day.month tokens."""

    def test_zero_padded(self):
        """DD.MM parses against the given year."""
        assert parse_day(2018, "10.01") == date(2018, 1, 10)

    def test_without_leading_zeros(self):
        """D.M without padding is accepted."""
        assert parse_day(2018, "8.3") == date(2018, 3, 8)

    def test_leap_day_in_leap_year(self):
        """29 February is valid in a leap year."""
        assert parse_day(2020, "29.02") == date(2020, 2, 29)

    def test_leap_day_in_common_year(self):
        """29 February is rejected in a non-leap year."""
        with pytest.raises(InvalidDate, match="29.02"):
            parse_day(2019, "29.02")

    def test_day_out_of_month(self):
        """31 September does not exist."""
        with pytest.raises(InvalidDate):
            parse_day(2018, "31.09")

    def test_month_out_of_range(self):
        """Month 13 is rejected."""
        with pytest.raises(InvalidDate):
            parse_day(2018, "01.13")

    def test_missing_dot(self):
        """A token without a dot is not a date."""
        with pytest.raises(InvalidDate):
            parse_day(2018, "123")

    def test_trailing_garbage(self):
        """Extra components are rejected."""
        with pytest.raises(InvalidDate):
            parse_day(2018, "01.01.2019")

    def test_three_digit_year(self):
        """Years below 1000 are valid years."""
        assert parse_day(999, "01.02") == date(999, 2, 1)

    def test_invalid_day_message(self):
        """The message names the token and year and why it failed."""
        with pytest.raises(InvalidDate, match=r"'31.09' for year 2018: day is out of range"):
            parse_day(2018, "31.09")

    def test_three_digit_day(self):
        """Day and month have at most two digits."""
        with pytest.raises(InvalidDate, match="expected D.M"):
            parse_day(2018, "001.01")


class TestParseDays:
    """Test full override specifications."""

    def test_empty_spec(self):
        """An empty mapping yields no dates."""
        assert parse_days({}) == []

    def test_blank_value(self):
        """A whitespace-only value contributes nothing."""
        assert parse_days({2018: " \t\n "}) == []

    def test_single_date(self):
        """A single token yields one date."""
        assert parse_days({2018: "10.01"}) == [date(2018, 1, 10)]

    def test_multiple_dates(self):
        """Comma-separated tokens yield each date."""
        assert parse_days({2018: "01.01, 23.02, 8.3"}) == [
            date(2018, 1, 1),
            date(2018, 2, 23),
            date(2018, 3, 8),
        ]

    def test_range_with_single_date(self):
        """Ranges expand inclusively and mix with single dates."""
        assert parse_days({2018: "01.01-03.01, 05.01"}) == [
            date(2018, 1, 1),
            date(2018, 1, 2),
            date(2018, 1, 3),
            date(2018, 1, 5),
        ]

    def test_range_is_inclusive_and_contiguous(self):
        """A range covers every day from start to end."""
        result = parse_days({2018: "25.02-05.03"})
        assert result[0] == date(2018, 2, 25)
        assert result[-1] == date(2018, 3, 5)
        assert len(result) == 9
        assert all(
            (b - a).days == 1 for a, b in zip(result, result[1:])
        )

    def test_single_day_range(self):
        """A range with equal endpoints yields one date."""
        assert parse_days({2018: "05.01-05.01"}) == [date(2018, 1, 5)]

    def test_multiple_years(self):
        """Dates from all years are merged."""
        result = parse_days({
            2018: "01.01-05.01, 23.02",
            2019: "01.01-02.01, 8.3",
        })
        assert result == [
            date(2018, 1, 1),
            date(2018, 1, 2),
            date(2018, 1, 3),
            date(2018, 1, 4),
            date(2018, 1, 5),
            date(2018, 2, 23),
            date(2019, 1, 1),
            date(2019, 1, 2),
            date(2019, 3, 8),
        ]

    def test_sorted_regardless_of_input_order(self):
        """Output is ascending even when years and tokens are not."""
        result = parse_days({2019: "02.01, 01.01", 2018: "31.12"})
        assert result == [date(2018, 12, 31), date(2019, 1, 1), date(2019, 1, 2)]

    def test_duplicates_removed(self):
        """Overlapping ranges and repeated dates appear once."""
        result = parse_days({2018: "01.01-03.01, 02.01-04.01, 03.01"})
        assert result == [
            date(2018, 1, 1),
            date(2018, 1, 2),
            date(2018, 1, 3),
            date(2018, 1, 4),
        ]

    def test_whitespace_ignored_everywhere(self):
        """Spaces, tabs and newlines inside tokens are insignificant."""
        result = parse_days({2018: " 0 1 . 01 -\n03.01 ,\t05.01\r\n"})
        assert result == [
            date(2018, 1, 1),
            date(2018, 1, 2),
            date(2018, 1, 3),
            date(2018, 1, 5),
        ]

    def test_trailing_comma_ignored(self):
        """Empty tokens from a trailing comma are skipped."""
        assert parse_days({2018: "01.01,"}) == [date(2018, 1, 1)]

    def test_string_year_key(self):
        """Year keys given as strings are coerced to integers."""
        assert parse_days({"2018": "10.01"}) == [date(2018, 1, 10)]

    def test_invalid_year_key(self):
        """A non-numeric year is rejected."""
        with pytest.raises(InvalidDate, match="year"):
            parse_days({"next": "10.01"})

    def test_small_year_key(self):
        """Override specs for early years parse and expand ranges."""
        assert parse_days({5: "30.12-31.12"}) == [date(5, 12, 30), date(5, 12, 31)]

    @pytest.mark.parametrize("year", [0, 10000, -1])
    def test_year_out_of_range(self, year):
        with pytest.raises(InvalidDate, match="Invalid year"):
            parse_days({year: "01.01"})

    def test_invalid_token(self):
        """An unparseable token fails the whole parse."""
        with pytest.raises(InvalidDate):
            parse_days({2018: "123"})

    def test_invalid_date_among_valid(self):
        """One bad token aborts the parse with no partial result."""
        with pytest.raises(InvalidDate):
            parse_days({2018: "01.01, 30.02, 03.01"})

    def test_range_with_three_endpoints(self):
        """A range must have exactly two endpoints."""
        with pytest.raises(MalformedRange, match="exactly two"):
            parse_days({2018: "01.01-02.01-03.01"})

    def test_range_with_missing_endpoint(self):
        """An open-ended range has an empty endpoint, which is not a date."""
        with pytest.raises(InvalidDate):
            parse_days({2018: "01.01-"})

    def test_reversed_range(self):
        """A range whose start is after its end is rejected."""
        with pytest.raises(MalformedRange, match="starts after"):
            parse_days({2018: "10.01-01.01"})

    def test_range_with_invalid_endpoint(self):
        """Range endpoints are validated as dates."""
        with pytest.raises(InvalidDate):
            parse_days({2019: "28.02-29.02"})

    def test_errors_are_value_errors(self):
        """Parsing errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_days({2018: "x"})
        assert issubclass(MalformedRange, TermCalError)
