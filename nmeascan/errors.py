"""Exceptions raised while framing, routing, and scanning NMEA sentences.

All errors derive from ``NMEAError``, which is a ``ValueError`` so callers
that already guard parsing with ``except ValueError`` keep working.

Scan failures (``DirectiveParseError``, ``FieldOverflow``) abort the
remaining directives. The values produced before the failure are attached
as ``partial`` for diagnostics; a record is never built from them.
"""

from typing import Any

from nmeascan.identifiers import PayloadId


class NMEAError(ValueError):
    """Base class for every error raised by nmeascan."""


class FramingError(NMEAError):
    """The raw line does not start with the '$' sentence marker."""


class UnsupportedPayload(NMEAError):
    """The sentence's payload ID does not match the requested decoder."""

    def __init__(self, payload_id: PayloadId, expected: PayloadId | None = None) -> None:
        self.payload_id = payload_id
        self.expected = expected
        if expected is None:
            message = f"no decoder for payload {payload_id.name}"
        else:
            message = f"expected payload {expected.name}, got {payload_id.name}"
        super().__init__(message)


class EmptyPayload(NMEAError):
    """The sentence has no payload to scan."""


NoPayload = EmptyPayload


class ScanError(NMEAError):
    """A scan stopped before the end of its format.

    Attributes:
        field_index: Index of the directive being applied when the scan failed.
        partial: Values produced by the directives before ``field_index``.
    """

    def __init__(self, message: str, field_index: int, partial: tuple[Any, ...]) -> None:
        super().__init__(message)
        self.field_index = field_index
        self.partial = partial


class DirectiveParseError(ScanError):
    """A field's content does not conform to its directive."""

    def __init__(
        self,
        message: str,
        field_index: int,
        partial: tuple[Any, ...],
        directive: str,
    ) -> None:
        super().__init__(message, field_index, partial)
        self.directive = directive


class FieldOverflow(ScanError):
    """A field ran past the maximum field length without a separator."""
