# twobitlib/formats/words.py
from __future__ import annotations

import struct
from typing import Tuple

from twobitlib.io.byte_source import ByteSource

__all__ = ["WORD_SIZE", "WordCodec", "swap32"]

WORD_SIZE = 4


def swap32(value: int) -> int:
    """Reverse the byte order of an unsigned 32-bit value."""
    return int.from_bytes(int(value & 0xFFFFFFFF).to_bytes(4, "little"), "big")


class WordCodec:
    """
    Unsigned 32-bit words in the byte order of one 2bit file.

    Words are taken as little-endian; when `swapped` they are byte-reversed
    afterwards, which is the same as reading them big-endian.
    """
    __slots__ = ("swapped", "_order")

    def __init__(self, swapped: bool = False):
        self.swapped = bool(swapped)
        self._order = ">" if self.swapped else "<"

    def word(self, raw: bytes) -> int:
        (v,) = struct.unpack(self._order + "I", raw)
        return v

    def word_at(self, buf: bytes, offset: int) -> int:
        (v,) = struct.unpack_from(self._order + "I", buf, offset)
        return v

    def words(self, raw: bytes, count: int) -> Tuple[int, ...]:
        if count == 0:
            return ()
        return struct.unpack_from(f"{self._order}{count}I", raw, 0)

    # reads through a ByteSource (advance its cursor)

    def read_word(self, src: ByteSource, what: str = "word") -> int:
        return self.word(src.read(WORD_SIZE, what))

    def read_words(self, src: ByteSource, count: int, what: str = "words") -> Tuple[int, ...]:
        return self.words(src.read(count * WORD_SIZE, what), count)

    def __repr__(self) -> str:
        return f"WordCodec(swapped={self.swapped})"
