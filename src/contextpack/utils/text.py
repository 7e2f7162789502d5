"""Decoding of raw document bytes."""

import codecs
from typing import Optional

SNIFF_BYTES = 8192


def decode_document(raw: bytes, sniff: bool = False) -> Optional[str]:
    """Decode document bytes as UTF-8, replacing undecodable sequences.

    With ``sniff`` set, content whose leading SNIFF_BYTES hold a null byte or
    do not decode as UTF-8 is treated as binary and None is returned. A
    multi-byte sequence cut off at the sample boundary does not count.
    """
    if sniff:
        sample = raw[:SNIFF_BYTES]
        if b"\x00" in sample:
            return None
        decoder = codecs.getincrementaldecoder("utf-8")()
        try:
            decoder.decode(sample, final=len(raw) <= SNIFF_BYTES)
        except UnicodeDecodeError:
            return None
    return raw.decode("utf-8", errors="replace")
