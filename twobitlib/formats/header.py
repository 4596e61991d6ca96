# twobitlib/formats/header.py
from __future__ import annotations

from dataclasses import dataclass

from twobitlib.errors import InvalidSignatureError, InvalidVersionError
from twobitlib.formats.words import WORD_SIZE, WordCodec, swap32
from twobitlib.io.byte_source import ByteSource

__all__ = ["MAGIC", "HEADER_SIZE", "TwoBitHeader", "read_header"]

# =========================
# File signature
# =========================

MAGIC = 0x1A412743
HEADER_SIZE = 4 * WORD_SIZE


@dataclass(frozen=True, slots=True)
class TwoBitHeader:
    """
    The fixed 16-byte preamble:
      signature      : raw word at offset 0, read little-endian
      swapped        : file byte order is the reverse of little-endian
      version        : always 0 for readable files
      sequence_count : number of index entries that follow
    """
    signature: int
    swapped: bool
    version: int
    sequence_count: int

    @property
    def codec(self) -> WordCodec:
        return WordCodec(self.swapped)


def read_header(src: ByteSource) -> TwoBitHeader:
    """
    Parse the header from offset 0 and leave the cursor at the first index
    entry. Byte order is probed from the signature: as-is means native
    (little-endian), byte-reversed means swapped, anything else is rejected.
    """
    src.seek(0)
    signature = int.from_bytes(src.read(WORD_SIZE, "signature"), "little")
    if signature == MAGIC:
        swapped = False
    elif swap32(signature) == MAGIC:
        swapped = True
    else:
        raise InvalidSignatureError(signature)

    codec = WordCodec(swapped)
    version = codec.read_word(src, "version")
    if version != 0:
        raise InvalidVersionError(version)
    count = codec.read_word(src, "sequence count")
    src.skip(WORD_SIZE)  # reserved

    return TwoBitHeader(signature=signature, swapped=swapped, version=version, sequence_count=count)
