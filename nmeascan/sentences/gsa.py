"""GSA sentence decoder.

GSA (GNSS DOP and Active Satellites) lists the satellites used in the
navigation solution and the resulting dilution of precision.

GSA Sentence Format:
    $GPGSA,A,3,23,29,07,08,09,18,26,28,,,,,1.94,1.18,1.54,1*0D
           | | |                       |   |    |    |    |
           | | |                       |   |    |    |    +-- GNSS system ID (NMEA 4.10+)
           | | |                       |   +----+----+-- PDOP, HDOP, VDOP
           | | +-----------------------+-- 12 satellite ID slots (empty = unused)
           | +-- Navigation mode (1=no fix, 2=2D, 3=3D)
           +-- Operation mode (M=manual, A=automatic)
"""

from nmeascan.identifiers import PayloadId
from nmeascan.scanner import parse_format, scan
from nmeascan.sentence import Sentence, require_payload
from nmeascan.types import GSA_SATELLITE_SLOTS, GSAData

_FORMAT = parse_format("ci" + "i" * GSA_SATELLITE_SLOTS + "fffi")


def decode_gsa(sentence: Sentence) -> GSAData:
    """Decode a framed GSA sentence.

    Raises:
        UnsupportedPayload: If the sentence is not a GSA sentence.
        EmptyPayload: If the sentence has no fields.
        ScanError: If a field is malformed.
    """
    require_payload(sentence, PayloadId.GSA)
    values = scan(sentence, _FORMAT).values
    satellites_end = 2 + GSA_SATELLITE_SLOTS
    pdop, hdop, vdop, system_id = values[satellites_end:]

    return GSAData(
        operation_mode=values[0],
        navigation_mode=values[1],
        satellite_ids=values[2:satellites_end],
        position_dilution_of_precision=pdop,
        horizontal_dilution_of_precision=hdop,
        vertical_dilution_of_precision=vdop,
        system_id=system_id,
    )
