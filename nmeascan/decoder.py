"""Route raw NMEA lines to their sentence decoder."""

import logging
from collections.abc import Callable
from typing import Any

from nmeascan.errors import UnsupportedPayload
from nmeascan.identifiers import PayloadId
from nmeascan.sentence import Sentence, frame
from nmeascan.sentences import (
    decode_gbs,
    decode_gga,
    decode_gll,
    decode_gsa,
    decode_gst,
    decode_gsv,
    decode_rmc,
    decode_vtg,
    decode_zda,
)
from nmeascan.types import (
    GBSData,
    GGAData,
    GLLData,
    GSAData,
    GSTData,
    GSVData,
    RMCData,
    VTGData,
    ZDAData,
)

logger = logging.getLogger(__name__)

Record = GBSData | GGAData | GLLData | GSAData | GSTData | GSVData | RMCData | VTGData | ZDAData

_DECODERS: dict[PayloadId, Callable[[Sentence], Any]] = {
    PayloadId.GBS: decode_gbs,
    PayloadId.GGA: decode_gga,
    PayloadId.GLL: decode_gll,
    PayloadId.GSA: decode_gsa,
    PayloadId.GST: decode_gst,
    PayloadId.GSV: decode_gsv,
    PayloadId.RMC: decode_rmc,
    PayloadId.VTG: decode_vtg,
    PayloadId.ZDA: decode_zda,
}

SUPPORTED_PAYLOADS: frozenset[PayloadId] = frozenset(_DECODERS)


def decode_sentence(sentence: Sentence) -> Record:
    """Decode an already framed sentence with the decoder for its payload ID.

    Raises:
        UnsupportedPayload: If no decoder exists for the payload ID.
        EmptyPayload: If the sentence has no fields.
        ScanError: If a field is malformed.
    """
    decoder = _DECODERS.get(sentence.payload_id)
    if decoder is None:
        logger.debug("No decoder for %r", sentence.raw)
        raise UnsupportedPayload(sentence.payload_id)
    record: Record = decoder(sentence)
    return record


def decode(raw: bytes | str) -> Record:
    """Frame a raw NMEA line and decode it.

    This is the main entry point. It performs:
    1. Framing (talker ID, payload ID, payload)
    2. Routing on the payload ID
    3. Field scanning into the matching record type

    The checksum trailer is not verified; use ``validate_checksum`` first if
    the transport does not already guarantee integrity.

    Args:
        raw: One NMEA line, e.g. ``"$GPZDA,082710.00,16,09,2002,00,00*64"``.

    Returns:
        The decoded record (GGAData, RMCData, ...).

    Raises:
        FramingError: If the line does not start with '$'.
        UnsupportedPayload: If the sentence type has no decoder.
        EmptyPayload: If the sentence has no fields.
        ScanError: If a field is malformed.

    Example:
        >>> decode("$GPZDA,082710.00,16,09,2002,00,00*64").year
        2002
    """
    return decode_sentence(frame(raw))
