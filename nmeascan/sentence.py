"""Sentence framing.

Framing is purely structural slicing of a raw line:

    $GNGGA,092725.00,4717.11399,N,...*5B
    |||||||
    ||||||+-- payload (everything after the address field)
    |||+++-- payload ID (3 characters)
    |++-- talker ID (2 characters)
    +-- sentence marker

No checksum or field validation happens here; the checksum is computed
separately and fields are only interpreted by the scanner.
"""

from dataclasses import dataclass

from nmeascan.errors import FramingError, UnsupportedPayload
from nmeascan.identifiers import PayloadId, TalkerId

_SENTENCE_MARKER = ord("$")
_TALKER_ID_LENGTH = 2
_PAYLOAD_ID_LENGTH = 3
_ADDRESS_END = 1 + _TALKER_ID_LENGTH + _PAYLOAD_ID_LENGTH


@dataclass(frozen=True)
class Sentence:
    """A framed NMEA sentence.

    Attributes:
        raw: The complete line as received, minus trailing whitespace.
        talker_id: Resolved talker ID, ``TalkerId.UNKNOWN`` if unrecognized.
        payload_id: Resolved payload ID, ``PayloadId.UNKNOWN`` if unrecognized.
        payload: Slice of ``raw`` following the address field. For a
            well-formed sentence it begins with the first ',' separator.
            Empty when the line ends right after the address field.
    """

    raw: bytes
    talker_id: TalkerId
    payload_id: PayloadId
    payload: bytes


def _to_bytes(raw: bytes | str) -> bytes:
    if isinstance(raw, bytes):
        return raw
    try:
        return raw.encode("ascii")
    except UnicodeEncodeError as e:
        raise FramingError("sentence is not ASCII") from e


def frame(raw: bytes | str) -> Sentence:
    """Slice a raw NMEA line into talker ID, payload ID, and payload.

    Trailing line endings are removed. Leading bytes are not touched, so a
    line that does not begin exactly with '$' is rejected.

    Args:
        raw: One NMEA line, e.g. ``"$GNGGA,092725.00,...*5B"``.

    Returns:
        The framed ``Sentence``.

    Raises:
        FramingError: If the line does not start with '$' or is not ASCII.

    Example:
        >>> sentence = frame("$GPZDA,082710.00,16,09,2002,00,00*64")
        >>> sentence.talker_id, sentence.payload_id
        (<TalkerId.GP: 1>, <PayloadId.ZDA: 18>)
        >>> sentence.payload
        b',082710.00,16,09,2002,00,00*64'
    """
    data = _to_bytes(raw).rstrip()

    if not data or data[0] != _SENTENCE_MARKER:
        raise FramingError("sentence does not start with '$'")

    return Sentence(
        raw=data,
        talker_id=TalkerId.from_code(data[1 : 1 + _TALKER_ID_LENGTH]),
        payload_id=PayloadId.from_code(data[1 + _TALKER_ID_LENGTH : _ADDRESS_END]),
        payload=data[_ADDRESS_END:],
    )


def require_payload(sentence: Sentence, expected: PayloadId) -> None:
    """Check that a sentence carries the payload a decoder expects.

    Raises:
        UnsupportedPayload: If ``sentence.payload_id`` is not ``expected``.
    """
    if sentence.payload_id is not expected:
        raise UnsupportedPayload(sentence.payload_id, expected)
