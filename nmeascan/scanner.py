"""Format-driven field scanner.

A sentence decoder describes its fields with a format string, one directive
character per comma-delimited field:

    c - single character (str)             empty -> ' '
    d - signed decimal, int32 (int)        empty -> 0
    f - signed fractional number (float)   empty -> 0.0
    F - signed fractional number (float)   empty -> 0.0
    u - unsigned decimal, uint32 (int)     empty -> 0
    i - unsigned byte, uint8 (int)         empty -> 0
    s - raw string (str)                   empty -> ''
    q - direction N,E = 1 : S,W = -1 (int) empty -> 0
    D - date DDMMYY (Date)                 empty -> Date(-1, -1, -1)
    T - time HHMMSS(.ss) (Time)            empty -> Time(-1, -1, -1)
    L - location DDDMM.MMMM, degrees x 10^7 (int)  empty -> -1
    _ - ignore this field

For example GGA uses "TLqLqii": time, latitude, N/S, longitude, E/W, fix
quality, satellite count.

``scan`` walks the format in lock-step with the payload. Numeric fields must
start with a digit or a sign; anything else aborts the scan with
``DirectiveParseError``. A field longer than the tokenizer bound aborts with
``FieldOverflow``. When the sentence ends before the format does, the scan
still succeeds and the directives that were never reached get their empty
defaults; ``ScanResult.complete`` tells the two cases apart.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from nmeascan.errors import DirectiveParseError, EmptyPayload, FieldOverflow
from nmeascan.fields import (
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
from nmeascan.sentence import Sentence
from nmeascan.types import Date, Time

logger = logging.getLogger(__name__)

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_UINT32_MODULUS = 2**32
_UINT8_MODULUS = 2**8


class Directive(Enum):
    """One format character and the field type it selects."""

    CHAR = "c"
    INT = "d"
    FLOAT = "f"
    DOUBLE = "F"
    UINT = "u"
    UINT8 = "i"
    STRING = "s"
    DIRECTION = "q"
    DATE = "D"
    TIME = "T"
    LOCATION = "L"
    IGNORE = "_"

    @property
    def default(self) -> Any:
        """Value produced for an empty field."""
        return _DEFAULTS[self]


_DEFAULTS: dict[Directive, Any] = {
    Directive.CHAR: " ",
    Directive.INT: 0,
    Directive.FLOAT: 0.0,
    Directive.DOUBLE: 0.0,
    Directive.UINT: 0,
    Directive.UINT8: 0,
    Directive.STRING: "",
    Directive.DIRECTION: 0,
    Directive.DATE: Date(),
    Directive.TIME: Time(),
    Directive.LOCATION: -1,
    Directive.IGNORE: None,
}

_NUMERIC = frozenset(
    {
        Directive.INT,
        Directive.FLOAT,
        Directive.DOUBLE,
        Directive.UINT,
        Directive.UINT8,
        Directive.LOCATION,
    }
)

_DIRECTIONS: dict[bytes, int] = {b"N": 1, b"E": 1, b"S": -1, b"W": -1}

Format = tuple[Directive, ...]


def parse_format(directives: str) -> Format:
    """Build a Format from a directive string such as ``"TLqLqii"``.

    Raises:
        ValueError: If the string contains an unknown directive character.
    """
    try:
        return tuple(Directive(character) for character in directives)
    except ValueError as e:
        raise ValueError(f"invalid scan format {directives!r}: {e}") from e


@dataclass(frozen=True)
class ScanResult:
    """Outcome of a successful scan.

    Attributes:
        values: One value per directive except IGNORE, in format order.
        field_count: Number of directives that were matched against a field.
        format_length: Number of directives in the format.
    """

    values: tuple[Any, ...]
    field_count: int
    format_length: int

    @property
    def complete(self) -> bool:
        """True when every directive was matched against a field."""
        return self.field_count == self.format_length


class _FieldError(Exception):
    pass


def _to_int32(value: int) -> int:
    return max(_INT32_MIN, min(_INT32_MAX, value))


def _convert(directive: Directive, content: bytes) -> Any:
    """Convert one non-empty field according to its directive.

    Raises:
        _FieldError: If the content does not conform to the directive.
    """
    if directive in _NUMERIC and not is_numeric_lead(content):
        raise _FieldError(f"expected a number, got {content!r}")

    if directive is Directive.CHAR:
        return chr(content[0])
    if directive is Directive.INT:
        return _to_int32(parse_integer_prefix(content))
    if directive in (Directive.FLOAT, Directive.DOUBLE):
        return parse_decimal_prefix(content)
    if directive is Directive.UINT:
        return _to_int32(parse_integer_prefix(content)) % _UINT32_MODULUS
    if directive is Directive.UINT8:
        return _to_int32(parse_integer_prefix(content)) % _UINT8_MODULUS
    if directive is Directive.STRING:
        return content.decode("ascii", errors="replace")
    if directive is Directive.LOCATION:
        return parse_location(content)

    if directive is Directive.DIRECTION:
        direction = _DIRECTIONS.get(content[:1])
        if direction is None:
            raise _FieldError(f"expected N/E/S/W, got {content!r}")
        return direction

    if directive is Directive.DATE:
        date = parse_date(content)
        if date is None:
            raise _FieldError(f"expected DDMMYY, got {content!r}")
        return date

    # Directive.TIME
    time = parse_time(content)
    if time is None:
        raise _FieldError(f"expected HHMMSS, got {content!r}")
    return time


def scan(sentence: Sentence, fmt: Format) -> ScanResult:
    """Scan the payload of a framed sentence according to a format.

    Args:
        sentence: Framed sentence, see ``nmeascan.sentence.frame``.
        fmt: Directives, one per expected field, see ``parse_format``.

    Returns:
        ScanResult with one value per non-IGNORE directive. Directives past
        the end of the sentence hold their empty defaults.

    Raises:
        EmptyPayload: If the sentence has no payload.
        DirectiveParseError: If a field does not conform to its directive.
        FieldOverflow: If a field exceeds the maximum field length.

    Example:
        >>> result = scan(frame("$GPZDA,082710.00,16,09,2002,00,00*64"), parse_format("Tddddd"))
        >>> result.values
        (Time(hour=8, minute=27, second=10), 16, 9, 2002, 0, 0)
    """
    payload = sentence.payload
    if not payload:
        raise EmptyPayload("sentence has no payload")

    values: list[Any] = []
    position = 0
    field_count = len(fmt)

    for index, directive in enumerate(fmt):
        if directive is not Directive.IGNORE:
            content = field_at(payload, position)
            if not content:
                values.append(directive.default)
            else:
                try:
                    values.append(_convert(directive, content))
                except _FieldError as e:
                    logger.debug("Scan of %r stopped at field %d: %s", sentence.raw, index, e)
                    raise DirectiveParseError(
                        f"field {index} ({directive.value}): {e}",
                        field_index=index,
                        partial=tuple(values),
                        directive=directive.value,
                    ) from None

        stop, position = next_field(payload, position)
        if stop is FieldStop.OVERFLOW:
            logger.debug("Scan of %r overflowed at field %d", sentence.raw, index)
            raise FieldOverflow(
                f"field {index} exceeds the maximum field length",
                field_index=index,
                partial=tuple(values),
            )
        if stop is FieldStop.TERMINATOR:
            field_count = index + 1
            break

    for directive in fmt[field_count:]:
        if directive is not Directive.IGNORE:
            values.append(directive.default)

    if field_count < len(fmt):
        logger.debug(
            "Sentence %r ended after %d of %d fields", sentence.raw, field_count, len(fmt)
        )

    return ScanResult(values=tuple(values), field_count=field_count, format_length=len(fmt))
