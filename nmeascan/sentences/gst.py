"""GST sentence decoder.

GST Sentence Format:
    $GPGST,082356.00,1.8,,,,1.7,1.3,2.2*7E
           |         |   | | | |   |   |
           |         |   | | | +---+---+-- Std. deviation of lat / lon / alt (meters)
           |         |   | | +-- Orientation of semi-major axis (degrees)
           |         |   +-+-- Std. deviation of semi-major / semi-minor axis
           |         +-- RMS value of pseudorange residuals
           +-- UTC time (HHMMSS.ss)
"""

from nmeascan.identifiers import PayloadId
from nmeascan.scanner import parse_format, scan
from nmeascan.sentence import Sentence, require_payload
from nmeascan.types import GSTData

_FORMAT = parse_format("Tfffffff")


def decode_gst(sentence: Sentence) -> GSTData:
    """Decode a framed GST (pseudorange error statistics) sentence."""
    require_payload(sentence, PayloadId.GST)
    return GSTData(*scan(sentence, _FORMAT).values)
