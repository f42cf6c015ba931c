"""GBS sentence decoder.

GBS (GNSS Satellite Fault Detection) reports the expected position errors and,
when RAIM detects one, the most likely failed satellite.

GBS Sentence Format:
    $GPGBS,235458.00,1.4,1.3,3.1,03,,-21.4,3.8,1,0*5B
           |         |   |   |   |  | |     |   | |
           |         |   |   |   |  | |     |   +-+-- System / signal ID (not decoded)
           |         |   |   |   |  | |     +-- Standard deviation of bias
           |         |   |   |   |  | +-- Estimated bias (meters)
           |         |   |   |   |  +-- Probability of missed detection
           |         |   |   |   +-- ID of most likely failed satellite
           |         +---+---+-- Expected error in lat / lon / alt (meters)
           +-- UTC time (HHMMSS.ss)

Receivers leave the fault fields empty when no satellite is suspected; those
fields decode to 0.
"""

from nmeascan.identifiers import PayloadId
from nmeascan.scanner import parse_format, scan
from nmeascan.sentence import Sentence, require_payload
from nmeascan.types import GBSData

_FORMAT = parse_format("Tfffdfff")


def decode_gbs(sentence: Sentence) -> GBSData:
    """Decode a framed GBS sentence.

    Raises:
        UnsupportedPayload: If the sentence is not a GBS sentence.
        EmptyPayload: If the sentence has no fields.
        ScanError: If a field is malformed.
    """
    require_payload(sentence, PayloadId.GBS)
    return GBSData(*scan(sentence, _FORMAT).values)
