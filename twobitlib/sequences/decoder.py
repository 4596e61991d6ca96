# twobitlib/sequences/decoder.py
from __future__ import annotations

from typing import List

from twobitlib.errors import (
    EndBeyondEndError,
    InvertedRangeError,
    NegativeStartError,
    StartBeyondEndError,
)
from twobitlib.models.blocks import relevant_blocks
from twobitlib.models.source import SequenceHandle

__all__ = ["BASES", "BASES_PER_BYTE", "unpack_byte", "check_range", "decode_range"]

# 2-bit code -> base. Fixed by the file format.
BASES = "TCAG"
BASES_PER_BYTE = 4
_SHIFTS = (6, 4, 2, 0)   # high bit-pair first


def unpack_byte(b: int) -> str:
    return "".join(BASES[(b >> shift) & 0b11] for shift in _SHIFTS)


# every byte value -> its four bases
_UNPACKED = tuple(unpack_byte(b) for b in range(256))


def check_range(handle: SequenceHandle, start: int, end: int) -> None:
    args = (start, end, handle.dna_size, handle.name)
    if start >= end:
        raise InvertedRangeError(*args)
    if start < 0:
        raise NegativeStartError(*args)
    if start >= handle.dna_size:
        raise StartBeyondEndError(*args)
    if end > handle.dna_size:
        raise EndBeyondEndError(*args)


def decode_range(handle: SequenceHandle, start: int, end: int) -> str:
    """
    Bases [start, end) of `handle` (0-based, half-open).

    Reads only the packed bytes that cover the range. N-blocks render as
    'N' and take precedence over masking; mask-blocks lowercase the base.
    """
    check_range(handle, start, end)

    first_byte = start // BASES_PER_BYTE
    last_byte = (end - 1) // BASES_PER_BYTE
    src = handle.source.origin
    src.seek(handle.dna_offset + first_byte)
    packed = src.read(last_byte - first_byte + 1, f"packed bases of {handle.name}")

    # sequence position of packed[0]'s first base
    lead = start - first_byte * BASES_PER_BYTE
    out: List[str] = list("".join(_UNPACKED[b] for b in packed)[lead:lead + (end - start)])

    for bs, be in relevant_blocks(start, end, handle.mask_blocks):
        for i in range(max(bs, start) - start, min(be, end) - start):
            out[i] = out[i].lower()

    for bs, be in relevant_blocks(start, end, handle.n_blocks):
        lo, hi = max(bs, start) - start, min(be, end) - start
        out[lo:hi] = "N" * (hi - lo)

    return "".join(out)
