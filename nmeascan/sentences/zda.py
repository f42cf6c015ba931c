"""ZDA sentence decoder.

ZDA Sentence Format:
    $GPZDA,082710.00,16,09,2002,00,00*64
           |         |  |  |    |  |
           |         |  |  |    |  +-- Local zone minutes
           |         |  |  |    +-- Local zone hours
           |         +--+--+-- Day, month, four-digit year
           +-- UTC time (HHMMSS.ss)
"""

from nmeascan.identifiers import PayloadId
from nmeascan.scanner import parse_format, scan
from nmeascan.sentence import Sentence, require_payload
from nmeascan.types import ZDAData

_FORMAT = parse_format("Tddddd")


def decode_zda(sentence: Sentence) -> ZDAData:
    require_payload(sentence, PayloadId.ZDA)
    return ZDAData(*scan(sentence, _FORMAT).values)
