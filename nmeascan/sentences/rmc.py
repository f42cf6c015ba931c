"""RMC sentence decoder.

RMC (Recommended Minimum Data) combines time, date, position, speed, and
course in a single sentence.

RMC Sentence Format:
    $GPRMC,083559.00,A,4717.11437,N,00833.91522,E,0.004,77.52,091202,,,A,V*57
           |         | |          | |           | |     |     |      | | | |
           |         | |          | |           | |     |     |      | | | +-- Navigational status (NMEA 4.10+)
           |         | |          | |           | |     |     |      | | +-- Mode indicator
           |         | |          | |           | |     |     |      +-+-- Magnetic variation + E/W
           |         | |          | |           | |     |     +-- Date (DDMMYY)
           |         | |          | |           | |     +-- Course over ground (degrees)
           |         | |          | |           | +-- Speed over ground (knots)
           |         | |          | +-----------+-- Longitude + E/W
           |         | +----------+-- Latitude + N/S
           |         +-- Status (A=valid, V=invalid)
           +-- UTC time (HHMMSS.ss)

The magnetic variation direction is not decoded. Receivers older than
NMEA 4.10 end the sentence after the mode indicator; the navigational status
then decodes as ' '.
"""

from nmeascan.identifiers import PayloadId
from nmeascan.scanner import parse_format, scan
from nmeascan.sentence import Sentence, require_payload
from nmeascan.types import RMCData

_FORMAT = parse_format("TcLqLqffDf_cc")


def decode_rmc(sentence: Sentence) -> RMCData:
    """Decode a framed RMC sentence.

    Raises:
        UnsupportedPayload: If the sentence is not an RMC sentence.
        EmptyPayload: If the sentence has no fields.
        ScanError: If a field is malformed.
    """
    require_payload(sentence, PayloadId.RMC)
    return RMCData(*scan(sentence, _FORMAT).values)
