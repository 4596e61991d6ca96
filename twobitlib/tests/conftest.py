import struct
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple

import pytest

from twobitlib.formats.header import MAGIC

# ---------- test-only 2bit writer ----------
#
# The library only reads; tests build their binary fixtures here
# instead of shipping .2bit files under tests/data. E.g.
#
#   def test_something(make_twobit):
#       path = make_twobit([("chr1", "ACGTnnnnACGT")])
#
#   raw record : (name, dna_size, n_blocks, mask_blocks, packed_bytes)
#   blocks     : [(start, size), ...]
#
_CODE = {"T": 0, "C": 1, "A": 2, "G": 3, "N": 0}

Blocks = Sequence[Tuple[int, int]]
RawRecord = Tuple[str, int, Blocks, Blocks, bytes]


def _pack(dna: str) -> bytes:
    out = bytearray()
    for i in range(0, len(dna), 4):
        chunk = dna[i:i + 4].upper().ljust(4, "T")
        b = 0
        for ch in chunk:
            b = (b << 2) | _CODE[ch]
        out.append(b)
    return bytes(out)


def _runs(dna: str, pred) -> List[Tuple[int, int]]:
    runs: List[Tuple[int, int]] = []
    i = 0
    while i < len(dna):
        if pred(dna[i]):
            j = i
            while j < len(dna) and pred(dna[j]):
                j += 1
            runs.append((i, j - i))
            i = j
        else:
            i += 1
    return runs


def _build_raw(
    records: Iterable[RawRecord],
    *,
    swapped: bool = False,
    version: int = 0,
    signature: int = MAGIC,
) -> bytes:
    o = ">" if swapped else "<"
    records = list(records)

    def blocks(bl: Blocks) -> bytes:
        starts = [s for s, _ in bl]
        sizes = [n for _, n in bl]
        return struct.pack(f"{o}I{len(bl)}I{len(bl)}I", len(bl), *starts, *sizes)

    index_len = sum(1 + len(name.encode("latin-1")) + 4 for name, *_ in records)
    offset = 16 + index_len
    index = bytearray()
    body = bytearray()
    for name, dna_size, n_blocks, mask_blocks, packed in records:
        nm = name.encode("latin-1")
        index += bytes([len(nm)]) + nm + struct.pack(o + "I", offset + len(body))
        body += struct.pack(o + "I", dna_size) + blocks(n_blocks) + blocks(mask_blocks)
        body += struct.pack(o + "I", 0) + packed

    return struct.pack(o + "4I", signature, version, len(records), 0) + bytes(index) + bytes(body)


def _build_twobit(seqs: Iterable[Tuple[str, str]], **kw) -> bytes:
    """(name, dna) pairs; 'N'/'n' become N-blocks, lowercase becomes mask-blocks."""
    raw = [
        (name, len(dna), _runs(dna, lambda c: c in "Nn"), _runs(dna, str.islower), _pack(dna))
        for name, dna in seqs
    ]
    return _build_raw(raw, **kw)


@pytest.fixture
def pack_bases():
    return _pack


@pytest.fixture
def build_raw():
    return _build_raw


@pytest.fixture
def build_twobit():
    return _build_twobit


@pytest.fixture
def make_twobit(tmp_path):
    """Write a built 2bit file under tmp_path and return its path."""
    def _make(seqs, filename: str = "test.2bit", **kw) -> Path:
        path = tmp_path / filename
        path.write_bytes(_build_twobit(seqs, **kw))
        return path
    return _make
