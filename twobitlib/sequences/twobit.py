# twobitlib/sequences/twobit.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Iterable, List, Union

from twobitlib.api import open_twobit, twobit_file
from twobitlib.errors import UnknownSequenceError
from twobitlib.sequences.base import SequenceSource, closed_to_half_open, reverse_complement
from twobitlib.sequences.decoder import decode_range
from twobitlib.sequences.loader import load_sequence

__all__ = ["TwoBitSequenceSource"]


@dataclass
class TwoBitSequenceSource(SequenceSource):
    """
    SequenceSource over a .2bit file.

    The index is read once at construction; every get() opens the file for
    the duration of the call, so instances hold no file handle and can be
    shared freely. Coordinates: 1-based, fully-closed, like the other sources.
    """
    path: Union[str, os.PathLike]
    mask: bool = True

    def __post_init__(self):
        with open_twobit(self.path, self.mask) as tb:
            self._names: List[str] = list(tb.names())
        self._known = set(self._names)
        self._lengths: Dict[str, int] = {}

    def has(self, seq_id: str) -> bool:
        return seq_id in self._known

    def ids(self) -> Iterable[str]:
        return list(self._names)

    def length(self, seq_id: str) -> int:
        if seq_id not in self._lengths:
            if seq_id not in self._known:
                raise UnknownSequenceError(seq_id)
            with twobit_file(self.path, mask=False) as tb:
                self._lengths[seq_id] = load_sequence(tb, seq_id).dna_size
        return self._lengths[seq_id]

    def get(self, seq_id: str, start: int, end: int, strand: str = "+") -> str:
        if start < 1 or end < start:
            raise ValueError("invalid range")
        if seq_id not in self._known:
            raise UnknownSequenceError(seq_id)
        with twobit_file(self.path, self.mask) as tb:
            handle = load_sequence(tb, seq_id)
            self._lengths[seq_id] = handle.dna_size
            lo, hi = closed_to_half_open(start, end, handle.dna_size)
            if lo == hi:
                return ""
            frag = decode_range(handle, lo, hi)
        return frag if strand != "-" else reverse_complement(frag)
