"""VTG sentence decoder.

VTG (Track Made Good and Ground Speed) provides velocity information from GNSS.

VTG Sentence Format:
    $GPVTG,77.52,T,,M,0.004,N,0.008,K,A*06
           |     | | | |     | |     | |
           |     | | | |     | |     | +-- Mode indicator (A/D/E/N)
           |     | | | |     | +-----+-- Speed in km/h
           |     | | | +-----+-- Speed in knots
           |     | +-+-- Course (magnetic north, degrees)
           +-----+-- Course (true north, degrees)

The unit letters (T, M, N, K) are fixed and skipped.

Note: When stationary, the course may be empty (no heading when not moving).
"""

from nmeascan.identifiers import PayloadId
from nmeascan.scanner import parse_format, scan
from nmeascan.sentence import Sentence, require_payload
from nmeascan.types import VTGData

_FORMAT = parse_format("f_f_f_f_c")


def decode_vtg(sentence: Sentence) -> VTGData:
    """Decode a framed VTG sentence.

    Example:
        >>> vtg = decode_vtg(frame("$GPVTG,77.52,T,,M,0.004,N,0.008,K,A*06"))
        >>> vtg.course_true_degrees, vtg.course_magnetic_degrees
        (77.52, 0.0)
        >>> vtg.valid
        True
    """
    require_payload(sentence, PayloadId.VTG)
    return VTGData(*scan(sentence, _FORMAT).values)
