# twobitlib/sequences/base.py
from __future__ import annotations

from typing import Iterable, Protocol, Tuple

__all__ = [
    "SequenceSource",
    "reverse_complement",
    "closed_to_half_open",
]

class SequenceSource(Protocol):
    def has(self, seq_id: str) -> bool: ...
    def length(self, seq_id: str) -> int: ...
    def get(self, seq_id: str, start: int, end: int, strand: str = "+") -> str: ...
    def ids(self) -> Iterable[str]: ...

_rc_table = str.maketrans("ACGTRYSWKMBDHVNacgtryswkmbdhvn",
                          "TGCAYRSWMKVHDBNtgcayrswmkvhdbn")

def reverse_complement(s: str) -> str:
    return s.translate(_rc_table)[::-1]

def closed_to_half_open(start: int, end: int, length: int) -> Tuple[int, int]:
    """
    1-based, fully-closed [start, end] -> 0-based, half-open [lo, hi),
    with `end` clipped to the sequence length. lo == hi means nothing to fetch.
    Raises ValueError for start < 1 or end < start.
    """
    if start < 1 or end < start:
        raise ValueError("invalid range")
    hi = min(end, length)
    lo = min(start - 1, hi)
    return lo, hi
