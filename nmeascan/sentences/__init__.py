"""Decoders for the nine supported NMEA sentence types."""

from nmeascan.sentences.gbs import decode_gbs
from nmeascan.sentences.gga import decode_gga
from nmeascan.sentences.gll import decode_gll
from nmeascan.sentences.gsa import decode_gsa
from nmeascan.sentences.gst import decode_gst
from nmeascan.sentences.gsv import decode_gsv
from nmeascan.sentences.rmc import decode_rmc
from nmeascan.sentences.vtg import decode_vtg
from nmeascan.sentences.zda import decode_zda

__all__ = [
    "decode_gbs",
    "decode_gga",
    "decode_gll",
    "decode_gsa",
    "decode_gst",
    "decode_gsv",
    "decode_rmc",
    "decode_vtg",
    "decode_zda",
]
