"""Talker and payload identifier tables.

Every NMEA sentence starts with a 5-character address field right after '$':

    $GNGGA,...
     ^^         talker ID  (2 characters, producing subsystem)
       ^^^      payload ID (3 characters, sentence type)

Talker IDs emitted by u-blox M8 receivers:
    GP = GPS, SBAS, QZSS
    GL = GLONASS
    GA = Galileo
    GB = BeiDou
    GN = Multi-GNSS (combined solution)

Codes that are not in the tables resolve to UNKNOWN (0) instead of failing,
so framing always succeeds structurally for unrecognized sentences.
"""

from enum import IntEnum


def _normalize_code(code: bytes | str) -> str:
    if isinstance(code, bytes):
        return code.decode("ascii", errors="replace")
    return code


class TalkerId(IntEnum):
    """2-letter talker code of the subsystem that produced a sentence."""

    UNKNOWN = 0
    GP = 1
    GL = 2
    GA = 3
    GB = 4
    GN = 5

    @classmethod
    def from_code(cls, code: bytes | str) -> "TalkerId":
        """Resolve a talker code such as ``b"GN"``; unknown codes give ``UNKNOWN``.

        Example:
            >>> TalkerId.from_code("GN")
            <TalkerId.GN: 5>
            >>> TalkerId.from_code("XX")
            <TalkerId.UNKNOWN: 0>
        """
        return _TALKER_CODES.get(_normalize_code(code), cls.UNKNOWN)


class PayloadId(IntEnum):
    """3-letter payload code identifying the semantic type of a sentence."""

    UNKNOWN = 0
    DTM = 1
    GBQ = 2
    GBS = 3
    GGA = 4
    GLL = 5
    GLQ = 6
    GNQ = 7
    GNS = 8
    GPQ = 9
    GRS = 10
    GSA = 11
    GST = 12
    GSV = 13
    RMC = 14
    TXT = 15
    VLW = 16
    VTG = 17
    ZDA = 18

    @classmethod
    def from_code(cls, code: bytes | str) -> "PayloadId":
        """Resolve a payload code such as ``b"GGA"``; unknown codes give ``UNKNOWN``."""
        return _PAYLOAD_CODES.get(_normalize_code(code), cls.UNKNOWN)


_TALKER_CODES: dict[str, TalkerId] = {
    member.name: member for member in TalkerId if member is not TalkerId.UNKNOWN
}

_PAYLOAD_CODES: dict[str, PayloadId] = {
    member.name: member for member in PayloadId if member is not PayloadId.UNKNOWN
}
