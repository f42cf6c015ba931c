"""GLL sentence decoder.

GLL Sentence Format:
    $GPGLL,4717.11364,N,00833.91565,E,092321.00,A,A*60
           |          | |           | |         | |
           |          | |           | |         | +-- Mode indicator (A/D/E/N)
           |          | |           | |         +-- Status (A=valid, V=invalid)
           |          | |           | +-- UTC time (HHMMSS.ss)
           |          | +-----------+-- Longitude + E/W
           +----------+-- Latitude + N/S
"""

from nmeascan.identifiers import PayloadId
from nmeascan.scanner import parse_format, scan
from nmeascan.sentence import Sentence, require_payload
from nmeascan.types import GLLData

_FORMAT = parse_format("LqLqTcc")


def decode_gll(sentence: Sentence) -> GLLData:
    """Decode a framed GLL (Latitude and longitude) sentence."""
    require_payload(sentence, PayloadId.GLL)
    return GLLData(*scan(sentence, _FORMAT).values)
