"""NMEA 0183 sentence decoder for GNSS receivers.

Raw lines are framed, then scanned field by field with a per-sentence
format into fixed-shape records.
"""

from nmeascan.checksum import compute_checksum, validate_checksum
from nmeascan.decoder import SUPPORTED_PAYLOADS, decode, decode_sentence
from nmeascan.errors import (
    DirectiveParseError,
    EmptyPayload,
    FieldOverflow,
    FramingError,
    NMEAError,
    NoPayload,
    ScanError,
    UnsupportedPayload,
)
from nmeascan.identifiers import PayloadId, TalkerId
from nmeascan.scanner import Directive, ScanResult, parse_format, scan
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
    Date,
    GBSData,
    GGAData,
    GLLData,
    GSAData,
    GSTData,
    GSVData,
    RMCData,
    SatelliteInfo,
    Time,
    VTGData,
    ZDAData,
    to_decimal_degrees,
)

__all__ = [
    "SUPPORTED_PAYLOADS",
    "Date",
    "Directive",
    "DirectiveParseError",
    "EmptyPayload",
    "FieldOverflow",
    "FramingError",
    "GBSData",
    "GGAData",
    "GLLData",
    "GSAData",
    "GSTData",
    "GSVData",
    "NMEAError",
    "NoPayload",
    "PayloadId",
    "RMCData",
    "SatelliteInfo",
    "ScanError",
    "ScanResult",
    "Sentence",
    "TalkerId",
    "Time",
    "UnsupportedPayload",
    "VTGData",
    "ZDAData",
    "compute_checksum",
    "decode",
    "decode_gbs",
    "decode_gga",
    "decode_gll",
    "decode_gsa",
    "decode_gst",
    "decode_gsv",
    "decode_rmc",
    "decode_sentence",
    "decode_vtg",
    "decode_zda",
    "frame",
    "parse_format",
    "scan",
    "to_decimal_degrees",
    "validate_checksum",
]
