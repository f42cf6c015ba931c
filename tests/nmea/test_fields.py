"""Tests for field tokenization and field-level parsing."""

import pytest

from nmeascan import Date, Time
from nmeascan.fields import (
    MAX_FIELD_LENGTH,
    FieldStop,
    field_at,
    is_numeric_lead,
    next_field,
    parse_date,
    parse_decimal_prefix,
    parse_integer_prefix,
    parse_location,
    parse_time,
)


class TestNextField:
    """Tests for next_field function."""

    def test_moves_to_next_separator(self):
        assert next_field(b",12,,A*3C", 0) == (FieldStop.SEPARATOR, 3)

    def test_empty_field(self):
        assert next_field(b",12,,A*3C", 3) == (FieldStop.SEPARATOR, 4)

    def test_stops_at_terminator(self):
        stop, position = next_field(b",12,,A*3C", 4)
        assert stop is FieldStop.TERMINATOR
        assert position == 6
        assert not stop.has_next

    def test_end_of_input_is_terminator(self):
        assert next_field(b",12", 0) == (FieldStop.TERMINATOR, 3)

    def test_longest_field_that_fits(self):
        payload = b"," + b"1" * (MAX_FIELD_LENGTH - 2) + b","
        assert next_field(payload, 0) == (FieldStop.SEPARATOR, MAX_FIELD_LENGTH - 1)

    def test_overflow(self):
        payload = b"," + b"1" * (MAX_FIELD_LENGTH - 1) + b","
        stop, position = next_field(payload, 0)
        assert stop is FieldStop.OVERFLOW
        assert position == MAX_FIELD_LENGTH - 1

    def test_unterminated_garbage_is_bounded(self):
        stop, position = next_field(b"," + b"9" * 1000, 0)
        assert stop is FieldStop.OVERFLOW
        assert position < MAX_FIELD_LENGTH

    def test_cursor_never_moves_backwards(self):
        payload = b",092725.00,4717.11399,N,00833.91590,E,1,08*5B"
        position = 0
        stop = FieldStop.SEPARATOR
        while stop.has_next:
            stop, new_position = next_field(payload, position)
            assert new_position > position
            position = new_position
        assert stop is FieldStop.TERMINATOR


class TestFieldAt:
    """Tests for field_at function."""

    def test_field_content(self):
        assert field_at(b",4717.11399,N*60", 0) == b"4717.11399"

    def test_last_field_before_terminator(self):
        assert field_at(b",4717.11399,N*60", 11) == b"N"

    def test_empty_fields(self):
        assert field_at(b",,", 0) == b""
        assert field_at(b",*5C", 0) == b""
        assert field_at(b",", 0) == b""

    def test_content_is_bounded(self):
        assert len(field_at(b"," + b"9" * 100, 0)) == MAX_FIELD_LENGTH - 1


class TestNumberParsing:
    """Tests for numeric prefix parsing."""

    @pytest.mark.parametrize("content", [b"0", b"12", b"-3", b"+4", b"5.5"])
    def test_numeric_lead(self, content):
        assert is_numeric_lead(content)

    @pytest.mark.parametrize("content", [b"", b"P9", b".5", b"N", b" 1"])
    def test_non_numeric_lead(self, content):
        assert not is_numeric_lead(content)

    def test_integer_prefix(self):
        assert parse_integer_prefix(b"08") == 8
        assert parse_integer_prefix(b"-21") == -21
        assert parse_integer_prefix(b"+7") == 7
        assert parse_integer_prefix(b"092725.00") == 92725
        assert parse_integer_prefix(b"-") == 0

    def test_decimal_prefix(self):
        assert parse_decimal_prefix(b"1.94") == pytest.approx(1.94)
        assert parse_decimal_prefix(b"-21.4") == pytest.approx(-21.4)
        assert parse_decimal_prefix(b"499.6M") == pytest.approx(499.6)
        assert parse_decimal_prefix(b"5.") == pytest.approx(5.0)
        assert parse_decimal_prefix(b"-") == 0.0

    def test_no_leading_number(self):
        assert parse_integer_prefix(b"") == 0
        assert parse_integer_prefix(b"N") == 0
        assert parse_decimal_prefix(b"") == 0.0
        assert parse_decimal_prefix(b".") == 0.0
        assert parse_location(b"") == 0
        assert parse_location(b"-") == 0


class TestTimeAndDate:
    """Tests for parse_time and parse_date functions."""

    def test_time_with_subseconds(self):
        assert parse_time(b"092725.00") == Time(hour=9, minute=27, second=25)

    def test_time_without_subseconds(self):
        assert parse_time(b"235959") == Time(hour=23, minute=59, second=59)

    @pytest.mark.parametrize("content", [b"P9PP2725.00", b"0927", b"0927255", b"09:27:25"])
    def test_invalid_time(self, content):
        assert parse_time(content) is None

    def test_date(self):
        assert parse_date(b"091202") == Date(year=2002, month=12, day=9)

    @pytest.mark.parametrize("content", [b"0912", b"0912021", b"09122A", b"2002"])
    def test_invalid_date(self, content):
        assert parse_date(content) is None


class TestParseLocation:
    """Tests for parse_location function."""

    def test_latitude(self):
        assert parse_location(b"4717.11399") == 472852332

    def test_longitude(self):
        assert parse_location(b"00833.91590") == 85652650

    def test_exact_conversion(self):
        # 48 deg 07.038 min = 48.1173 deg exactly
        assert parse_location(b"4807.038") == 481173000

    @pytest.mark.parametrize(
        "content",
        [
            "4717.11399",
            "00833.91590",
            "4807.03812345",
            "01131.00098765",
            "3356.123",
            "15112.456",
            "8959.99999",
            "17959.9999",
            "0000.00001",
        ],
    )
    def test_matches_float_reference(self, content):
        dot = content.index(".")
        degrees = int(content[: dot - 2])
        minutes = float(content[dot - 2 :])
        reference = (degrees + minutes / 60.0) * 10_000_000
        assert abs(parse_location(content.encode()) - reference) <= 1

    def test_rounds_half_up(self):
        # 0.0000030 min = 0.5 x 10^-7 deg
        assert parse_location(b"0000.0000030") == 1
        assert parse_location(b"0000.0000029") == 0

    def test_without_fraction(self):
        assert parse_location(b"4830") == 485000000

    def test_negative(self):
        assert parse_location(b"-4807.038") == -481173000
