"""NMEA field tokenization and field-level parsing utilities.

NMEA fields are comma-separated and may be empty (consecutive commas indicate
missing data). The payload of a framed sentence starts on a separator:

    ,092725.00,4717.11399,N,...*5B
    ^          ^
    |          +-- cursor after one call to next_field()
    +-- initial cursor (position 0)

The cursor is a plain integer owned by the caller, so tokenizing different
sentences never shares state. Each call inspects at most MAX_FIELD_LENGTH
bytes, which bounds the work spent on an unterminated or corrupted sentence.
"""

import re
from enum import Enum

from nmeascan.types import LOCATION_SCALE, Date, Time

MAX_FIELD_LENGTH = 16

_SEPARATOR = ord(",")
_TERMINATOR = ord("*")

_MINUTES_PER_DEGREE = 60
_CENTURY = 2000

_INTEGER_PREFIX = re.compile(rb"[+-]?(\d*)")
_DECIMAL_PREFIX = re.compile(rb"[+-]?(\d*)(?:\.(\d*))?")


class FieldStop(Enum):
    """Why ``next_field`` stopped.

    SEPARATOR: found ',' and another field follows.
    TERMINATOR: found '*' or the end of the input, the sentence ended cleanly.
    OVERFLOW: no delimiter within MAX_FIELD_LENGTH bytes, the sentence is malformed.
    """

    SEPARATOR = "separator"
    TERMINATOR = "terminator"
    OVERFLOW = "overflow"

    @property
    def has_next(self) -> bool:
        return self is FieldStop.SEPARATOR


def next_field(payload: bytes, position: int) -> tuple[FieldStop, int]:
    """Advance a cursor from one separator to the next delimiter.

    Args:
        payload: Payload bytes of a framed sentence.
        position: Current cursor, sitting on a ',' separator.

    Returns:
        Tuple of (stop reason, new cursor). The new cursor points at the ','
        or '*' that was found, at ``len(payload)`` when the input ended, or
        at the last inspected byte on overflow.

    Example:
        >>> next_field(b",12,,A*3C", 0)
        (<FieldStop.SEPARATOR: 'separator'>, 3)
        >>> next_field(b",12,,A*3C", 4)
        (<FieldStop.SEPARATOR: 'separator'>, 4)
    """
    for offset in range(1, MAX_FIELD_LENGTH):
        index = position + offset
        if index >= len(payload):
            return FieldStop.TERMINATOR, len(payload)
        if payload[index] == _SEPARATOR:
            return FieldStop.SEPARATOR, index
        if payload[index] == _TERMINATOR:
            return FieldStop.TERMINATOR, index
    return FieldStop.OVERFLOW, position + MAX_FIELD_LENGTH - 1


def field_at(payload: bytes, position: int) -> bytes:
    """Return the raw content of the field that follows the cursor.

    The content is cut at the next ',' or '*', and never exceeds
    MAX_FIELD_LENGTH - 1 bytes.

    Example:
        >>> field_at(b",4717.11399,N*60", 0)
        b'4717.11399'
    """
    window = payload[position + 1 : position + MAX_FIELD_LENGTH]
    for index, byte in enumerate(window):
        if byte in (_SEPARATOR, _TERMINATOR):
            return window[:index]
    return window


def is_numeric_lead(content: bytes) -> bool:
    """Check that a non-empty field starts with a digit or a sign character."""
    lead = content[:1]
    return lead.isdigit() or lead in (b"-", b"+")


def parse_integer_prefix(content: bytes) -> int:
    """Parse the leading decimal integer of a field, ignoring what follows.

    A sign without digits parses as 0.

    Example:
        >>> parse_integer_prefix(b"092725.00")
        92725
        >>> parse_integer_prefix(b"-21")
        -21
    """
    match = _INTEGER_PREFIX.match(content)
    if match is None or not match.group(1):
        return 0
    return int(match.group(0))


def parse_decimal_prefix(content: bytes) -> float:
    """Parse the leading decimal number of a field, ignoring what follows.

    Example:
        >>> parse_decimal_prefix(b"1.94")
        1.94
        >>> parse_decimal_prefix(b"-21.4")
        -21.4
    """
    match = _DECIMAL_PREFIX.match(content)
    if match is None or not (match.group(1) or match.group(2)):
        return 0.0
    return float(match.group(0))


def parse_time(content: bytes) -> Time | None:
    """Parse HHMMSS(.ss) into a Time; sub-second digits are ignored.

    Returns:
        Parsed Time, or None if the field does not start with exactly six
        digits.
    """
    digits = content[:6]
    if len(digits) != 6 or not digits.isdigit():
        return None
    if content[6:7] and content[6:7] != b".":
        return None
    return Time(hour=int(digits[0:2]), minute=int(digits[2:4]), second=int(digits[4:6]))


def parse_date(content: bytes) -> Date | None:
    """Parse DDMMYY into a Date in the 2000s.

    Returns:
        Parsed Date, or None if the field is not exactly six digits.

    Example:
        >>> parse_date(b"091202")
        Date(year=2002, month=12, day=9)
    """
    if len(content) != 6 or not content.isdigit():
        return None
    return Date(
        year=_CENTURY + int(content[4:6]),
        month=int(content[2:4]),
        day=int(content[0:2]),
    )


def _divide_rounding_half_up(numerator: int, denominator: int) -> int:
    return (2 * numerator + denominator) // (2 * denominator)


def parse_location(content: bytes) -> int:
    """Convert an NMEA coordinate (DDDMM.MMMM) to degrees scaled by 10^7.

    NMEA coordinates use DDDMM.MMMM format where:
    - DDD (or DD for latitude) = degrees
    - MM.MMMM = decimal minutes

    The conversion ``degrees + minutes / 60`` is done with integers only, for
    any number of fractional minute digits, and rounded half-up to the
    nearest 10^-7 degree. The hemisphere is not part of this field; it comes
    from the paired direction field.

    Example:
        >>> parse_location(b"4717.11399")  # 47 deg 17.11399 min
        472852332
        >>> parse_location(b"00833.91590")  # 8 deg 33.91590 min
        85652650
    """
    match = _DECIMAL_PREFIX.match(content)
    if match is None:
        return 0

    whole = int(match.group(1) or b"0")
    fraction = match.group(2) or b""

    degrees, whole_minutes = divmod(whole, 100)
    fraction_scale = 10 ** len(fraction)
    scaled_minutes = whole_minutes * fraction_scale + int(fraction or b"0")

    value = degrees * LOCATION_SCALE + _divide_rounding_half_up(
        scaled_minutes * LOCATION_SCALE,
        _MINUTES_PER_DEGREE * fraction_scale,
    )

    if content[:1] == b"-":
        return -value
    return value

