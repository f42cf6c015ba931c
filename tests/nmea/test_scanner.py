"""Tests for the format-driven field scanner."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from nmeascan import (
    Date,
    Directive,
    DirectiveParseError,
    EmptyPayload,
    FieldOverflow,
    NoPayload,
    ScanError,
    Time,
    frame,
    parse_format,
    scan,
)

ALL_DIRECTIVES = "cdfuisqDTL_F"


def _scan(line: str, directives: str):
    return scan(frame(line), parse_format(directives))


class TestParseFormat:
    """Tests for parse_format function."""

    def test_directives(self):
        assert parse_format("TLq_") == (
            Directive.TIME,
            Directive.LOCATION,
            Directive.DIRECTION,
            Directive.IGNORE,
        )

    def test_every_directive_has_a_character(self):
        assert len(parse_format(ALL_DIRECTIVES)) == len(Directive)

    def test_empty_format(self):
        assert parse_format("") == ()

    def test_unknown_directive(self):
        with pytest.raises(ValueError, match="TX"):
            parse_format("TX")


class TestScanValues:
    """Tests for values produced by each directive."""

    def test_all_directives(self):
        result = _scan(
            "$GPTXT,A,-12,3.5,7,300,hello,S,091202,092725.00,4717.11399,skip,-2.25*00",
            ALL_DIRECTIVES,
        )
        assert result.values == (
            "A",
            -12,
            pytest.approx(3.5),
            7,
            44,
            "hello",
            -1,
            Date(year=2002, month=12, day=9),
            Time(hour=9, minute=27, second=25),
            472852332,
            -2.25,
        )
        assert result.complete
        assert result.field_count == len(ALL_DIRECTIVES)

    def test_empty_fields_use_defaults(self):
        result = _scan("$GPTXT" + "," * len(ALL_DIRECTIVES) + "*00", ALL_DIRECTIVES)
        assert result.values == (" ", 0, 0.0, 0, 0, "", 0, Date(-1, -1, -1), Time(-1, -1, -1), -1, 0.0)
        assert result.complete

    def test_defaults_match_directives(self):
        for directive in Directive:
            if directive is Directive.IGNORE:
                continue
            (value,) = _scan("$GPTXT,*00", directive.value).values
            assert value == directive.default

    def test_char_takes_first_byte(self):
        assert _scan("$GPTXT,AB*00", "c").values == ("A",)

    def test_directions(self):
        result = _scan("$GPTXT,N,E,S,W*00", "qqqq")
        assert result.values == (1, 1, -1, -1)

    def test_unsigned_wraps(self):
        assert _scan("$GPTXT,-1,-1,256*00", "uii").values == (2**32 - 1, 255, 0)

    def test_signed_saturates(self):
        assert _scan("$GPTXT,99999999999,-99999999999*00", "dd").values == (2**31 - 1, -(2**31))

    def test_leading_plus(self):
        assert _scan("$GPTXT,+5,+1.5*00", "df").values == (5, 1.5)

    def test_double_parses_like_float(self):
        assert _scan("$GPTXT,1.94,1.94*00", "fF").values == (1.94, 1.94)

    def test_integer_stops_at_decimal_point(self):
        assert _scan("$GPTXT,2002.7*00", "d").values == (2002,)

    def test_ignore_produces_no_value(self):
        assert _scan("$GPTXT,1.0,T,2.0,M*00", "f_f_").values == (1.0, 2.0)

    def test_string(self):
        assert _scan("$GPTXT,01,ANTENNA OK*00", "ds").values == (1, "ANTENNA OK")


class TestScanTermination:
    """Tests for how the scan ends."""

    def test_extra_fields_are_not_inspected(self):
        result = _scan("$GPTXT,1,2,X*00", "d")
        assert result.values == (1,)
        assert result.complete

    def test_sentence_shorter_than_format(self):
        result = _scan("$GPZDA,082710.00,16,09", "Tddddd")
        assert result.values == (Time(8, 27, 10), 16, 9, 0, 0, 0)
        assert result.field_count == 3
        assert not result.complete

    def test_short_sentence_fills_defaults_after_ignore(self):
        result = _scan("$GPTXT,1*00", "d_cT")
        assert result.values == (1, " ", Time())
        assert result.field_count == 1

    def test_missing_checksum_trailer(self):
        result = _scan("$GPTXT,1,2", "dd")
        assert result.values == (1, 2)
        assert result.complete

    def test_empty_payload(self):
        with pytest.raises(EmptyPayload):
            _scan("$GPVTG", "f_f_f_f_c")

    def test_no_payload_alias(self):
        assert NoPayload is EmptyPayload


class TestScanErrors:
    """Tests for scan failures."""

    def test_non_numeric_lead(self):
        with pytest.raises(DirectiveParseError) as exc_info:
            _scan("$GPTXT,A,X1*00", "cd")
        assert exc_info.value.field_index == 1
        assert exc_info.value.partial == ("A",)
        assert exc_info.value.directive == "d"

    @pytest.mark.parametrize("directive", ["d", "f", "F", "u", "i", "L"])
    def test_numeric_directives_reject_letters(self, directive):
        with pytest.raises(DirectiveParseError):
            _scan("$GPTXT,N*00", directive)

    def test_invalid_direction(self):
        with pytest.raises(DirectiveParseError):
            _scan("$GPTXT,Q*00", "q")

    def test_invalid_date(self):
        with pytest.raises(DirectiveParseError):
            _scan("$GPTXT,0912*00", "D")

    def test_corrupted_time(self):
        with pytest.raises(DirectiveParseError) as exc_info:
            _scan("$GNGGA,P9PP2725.00,4717.11399,N*00", "TLq")
        assert exc_info.value.field_index == 0
        assert exc_info.value.partial == ()

    def test_field_overflow(self):
        with pytest.raises(FieldOverflow) as exc_info:
            _scan("$GPTXT,1,1234567890123456789,5*00", "ddd")
        assert exc_info.value.field_index == 1
        assert exc_info.value.partial[0] == 1

    def test_scan_errors_share_base_class(self):
        assert issubclass(DirectiveParseError, ScanError)
        assert issubclass(FieldOverflow, ScanError)


class TestScanReentrancy:
    """Scanning holds no state between calls."""

    LINES = [
        "$GNGGA,092725.00,4717.11399,N,00833.91590,E,1,08,1.01,499.6,M,48.0,M,,*5B",
        "$GPGLL,4717.11364,N,00833.91565,E,092321.00,A,A*60",
        "$GPZDA,082710.00,16,09,2002,00,00*64",
    ]
    FORMATS = ["TLqLqii", "LqLqTcc", "Tddddd"]

    def test_repeated_scan_is_identical(self):
        sentence = frame(self.LINES[0])
        fmt = parse_format(self.FORMATS[0])
        assert scan(sentence, fmt) == scan(sentence, fmt)

    def test_concurrent_scans_match_sequential(self):
        jobs = list(zip(self.LINES, self.FORMATS)) * 50
        expected = [_scan(line, directives) for line, directives in jobs]

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda job: _scan(*job), jobs))

        assert results == expected
