"""GGA sentence decoder.

GGA (Global Positioning System Fix Data) is one of the most important NMEA
sentences, providing position fix information including coordinates, altitude,
fix quality, and satellite/accuracy metrics.

GGA Sentence Format:
    $GNGGA,092725.00,4717.11399,N,00833.91590,E,1,08,1.01,499.6,M,48.0,M,,*5B
           |         |          | |           | | |  |    |     | |    |
           |         |          | |           | | |  |    |     | |    +-- DGPS info (not decoded)
           |         |          | |           | | |  |    |     | +-- Geoid separation (M=meters)
           |         |          | |           | | |  |    +-----+-- Altitude above MSL
           |         |          | |           | | |  +-- HDOP (horizontal dilution)
           |         |          | |           | | +-- Number of satellites
           |         |          | |           | +-- Fix quality (0-6)
           |         |          | +-----------+-- Longitude + E/W
           |         +----------+-- Latitude + N/S
           +-- UTC time (HHMMSS.ss)
"""

from nmeascan.identifiers import PayloadId
from nmeascan.scanner import parse_format, scan
from nmeascan.sentence import Sentence, require_payload
from nmeascan.types import GGAData

# The altitude unit field is always 'M' and is skipped.
_FORMAT = parse_format("TLqLqiiff_f")


def decode_gga(sentence: Sentence) -> GGAData:
    """Decode a framed GGA sentence.

    Args:
        sentence: Framed sentence, see ``nmeascan.frame``.

    Returns:
        GGAData with every field parsed or set to its empty default.

    Raises:
        UnsupportedPayload: If the sentence is not a GGA sentence.
        EmptyPayload: If the sentence has no fields.
        ScanError: If a field is malformed.

    Example:
        >>> gga = decode_gga(frame("$GNGGA,092725.00,4717.11399,N,00833.91590,E,1,08,1.01,499.6,M,48.0,M,,*5B"))
        >>> gga.time
        Time(hour=9, minute=27, second=25)
        >>> gga.latitude, gga.latitude_direction
        (472852332, 1)
    """
    require_payload(sentence, PayloadId.GGA)
    return GGAData(*scan(sentence, _FORMAT).values)
