"""Decode NMEA sentences and print the resulting records.

Usage::

    python main.py                      # decode the built-in sample sentences
    python main.py '$GPZDA,082710.00,16,09,2002,00,00*64'
"""

import dataclasses
import logging
import sys

from nmeascan import NMEAError, compute_checksum, decode, validate_checksum

# u-blox M8 sample output, one sentence per supported payload type.
SAMPLE_SENTENCES = [
    "$GNGBS,170556.00,3.0,2.9,8.3,,,,*5C",
    "$GPGBS,235458.00,1.4,1.3,3.1,03,,-21.4,3.8,1,0*5B",
    "$GNGGA,092725.00,4717.11399,N,00833.91590,E,1,08,1.01,499.6,M,48.0,M,,*5B",
    "$GPGLL,4717.11364,N,00833.91565,E,092321.00,A,A*60",
    "$GPGSA,A,3,23,29,07,08,09,18,26,28,,,,,1.94,1.18,1.54,1*0D",
    "$GPGST,082356.00,1.8,,,,1.7,1.3,2.2*7E",
    "$GPGSV,1,1,03,12,,,42,24,,,47,32,,,37,5*66",
    "$GPRMC,083559.00,A,4717.11437,N,00833.91522,E,0.004,77.52,091202,,,A,V*57",
    "$GPVTG,77.52,T,,M,0.004,N,0.008,K,A*06",
    "$GPZDA,082710.00,16,09,2002,00,00*64",
]


def describe(line: str) -> str:
    """Decode one line and format the record as ``NAME : value`` rows."""
    try:
        record = decode(line)
    except NMEAError as e:
        return f"{type(e).__name__}: {e}"

    rows = [f"- PAYLOAD {type(record).__name__.removesuffix('Data')} -"]
    for name, value in dataclasses.asdict(record).items():
        rows.append(f"{name.upper()} : {value}")
    if not validate_checksum(line):
        rows.append(f"CHECKSUM MISMATCH (computed {compute_checksum(line):02X})")
    return "\n".join(rows)


def main(argv: list[str]) -> int:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    for line in argv or SAMPLE_SENTENCES:
        print(f"\nTESTING : {line}")
        print(describe(line))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
