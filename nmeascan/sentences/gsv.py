"""GSV sentence decoder.

GSV (GNSS Satellites in View) describes up to four satellites per sentence.
Receivers split the full list across several sentences; combining them is
left to the caller.

GSV Sentence Format:
    $GPGSV,1,1,03,12,,,42,24,,,47,32,,,37,5*66
           | | |  |  | | |              |
           | | |  |  | | |              +-- Signal ID (not decoded)
           | | |  +--+-+-+-- Satellite: ID, elevation, azimuth, SNR (repeated up to 4x)
           | | +-- Satellites in view
           | +-- Message number
           +-- Number of messages
"""

from nmeascan.identifiers import PayloadId
from nmeascan.scanner import parse_format, scan
from nmeascan.sentence import Sentence, require_payload
from nmeascan.types import GSV_SATELLITE_SLOTS, GSVData, SatelliteInfo

_HEADER_FIELDS = 3
_SATELLITE_FIELDS = 4
_EMPTY_SATELLITE = SatelliteInfo(0, 0, 0, 0)
_FORMAT = parse_format("iid" + "dddd" * GSV_SATELLITE_SLOTS)


def decode_gsv(sentence: Sentence) -> GSVData:
    """Decode a framed GSV sentence.

    Slots the sentence does not fill decode as ``SatelliteInfo(0, 0, 0, 0)``.
    Only complete groups of four fields count as a satellite, so a trailing
    signal ID (NMEA 4.10+) is never mistaken for one.

    Raises:
        UnsupportedPayload: If the sentence is not a GSV sentence.
        EmptyPayload: If the sentence has no fields.
        ScanError: If a field is malformed.
    """
    require_payload(sentence, PayloadId.GSV)
    result = scan(sentence, _FORMAT)
    values = result.values
    message_count, message_number, satellites_in_view = values[:_HEADER_FIELDS]
    satellite_values = values[_HEADER_FIELDS:]

    scanned_fields = result.field_count - _HEADER_FIELDS
    present = max(0, min(GSV_SATELLITE_SLOTS, scanned_fields // _SATELLITE_FIELDS))

    satellites = []
    for slot in range(GSV_SATELLITE_SLOTS):
        if slot >= present:
            satellites.append(_EMPTY_SATELLITE)
            continue
        start = slot * _SATELLITE_FIELDS
        satellites.append(SatelliteInfo(*satellite_values[start : start + _SATELLITE_FIELDS]))

    return GSVData(
        message_count=message_count,
        message_number=message_number,
        satellites_in_view=satellites_in_view,
        satellites=tuple(satellites),
    )
