"""NMEA checksum computation.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all characters between '$' and '*' (exclusive),
then represented as a two-digit uppercase hexadecimal number after the '*'.

Example sentence structure:
    $GPZDA,082710.00,16,09,2002,00,00*64
    ^      checksum content          ^^
    start               checksum (0x64 = 100)

The decoding engine only computes the checksum; comparing it against the
trailer is up to the caller. ``validate_checksum`` does that comparison for
callers that want it.
"""

_SENTENCE_MARKER = ord("$")
_CHECKSUM_MARKER = ord("*")


def _to_bytes(sentence: bytes | str) -> bytes:
    if isinstance(sentence, bytes):
        return sentence
    return sentence.encode("ascii")


def compute_checksum(sentence: bytes | str) -> int:
    """Calculate the XOR checksum of an NMEA sentence body.

    The leading '$' is skipped if present. The XOR runs up to the first '*',
    or to the end of the input if there is no '*'.

    Args:
        sentence: A full sentence (``"$GNGGA,...*5B"``) or just its body
            (``"GNGGA,..."``).

    Returns:
        Integer checksum value (0-255)

    Raises:
        UnicodeEncodeError: If a ``str`` sentence is not ASCII.

    Example:
        >>> hex(compute_checksum("$GPVTG,77.52,T,,M,0.004,N,0.008,K,A*06"))
        '0x6'
    """
    data = _to_bytes(sentence)
    if data[:1] == b"$":
        data = data[1:]

    end = data.find(_CHECKSUM_MARKER)
    if end != -1:
        data = data[:end]

    result = 0
    for byte in data:
        result ^= byte
    return result


def _extract_trailer(data: bytes) -> bytes | None:
    """Return the 2-character checksum trailer, or None if the structure is wrong.

    Returns None if:
    - Missing '$' start delimiter
    - Missing '*' checksum delimiter
    - Checksum is not exactly 2 characters (truncated sentence)
    """
    if not data or data[0] != _SENTENCE_MARKER:
        return None

    end = data.find(_CHECKSUM_MARKER)
    if end == -1:
        return None

    provided = data[end + 1 : end + 3]
    if len(provided) != 2:
        return None

    return provided


def validate_checksum(sentence: bytes | str) -> bool:
    """Validate the checksum trailer of an NMEA sentence.

    Args:
        sentence: Complete NMEA sentence including '$', '*', and checksum.
                  May include trailing whitespace/newlines (will be stripped).

    Returns:
        True if the checksum is valid, False if:
        - Sentence is malformed (missing delimiters)
        - Sentence is a ``str`` with non-ASCII characters
        - Checksum is truncated or non-hexadecimal
        - Calculated checksum doesn't match provided checksum

    Example:
        >>> validate_checksum("$GPZDA,082710.00,16,09,2002,00,00*64")
        True
        >>> validate_checksum("$GPZDA,082710.00,16,09,2002,00,00*FF")
        False
    """
    try:
        data = _to_bytes(sentence).strip()
    except UnicodeEncodeError:
        return False

    provided = _extract_trailer(data)
    if provided is None:
        return False

    try:
        return compute_checksum(data) == int(provided, 16)
    except ValueError:
        return False
