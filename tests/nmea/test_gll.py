"""Tests for GLL sentence decoding."""

import pytest

from nmeascan import DirectiveParseError, Time, decode_gll, frame


class TestDecodeGLL:
    """Tests for decode_gll function."""

    def test_valid_gll(self):
        result = decode_gll(frame("$GPGLL,4717.11364,N,00833.91565,E,092321.00,A,A*60"))
        assert result.latitude == 472852273
        assert result.latitude_direction == 1
        assert result.longitude == 85652608
        assert result.longitude_direction == 1
        assert result.time == Time(hour=9, minute=23, second=21)
        assert result.status == "A"
        assert result.position_mode == "A"
        assert result.valid is True
        assert result.latitude_degrees == pytest.approx(47.2852273)

    def test_void_position(self):
        result = decode_gll(frame("$GPGLL,,,,,092321.00,V,N*00"))
        assert result.latitude_degrees is None
        assert result.longitude_degrees is None
        assert result.valid is False

    def test_truncated_sentence(self):
        with pytest.raises(DirectiveParseError):
            decode_gll(frame("$GPGLL,4717.11364,N,00833.91565,60"))
