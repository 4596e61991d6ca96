# twobitlib/api.py
"""
Public entry points.

Every function taking `ref` accepts either an already-open TwoBitSource or
anything `ByteSource.resolve` understands (path, bytes, binary stream). A
path is opened for the duration of the call and closed again; an open
source is used as-is and left open.

    with twobit_file("hg38.2bit") as tb:
        chr1 = get_sequence(tb, "chr1")
        print(bases(chr1, 10_000, 10_060))

    fetch("hg38.2bit", "chrM", 0, 100, mask=False)
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional, Union

from twobitlib.formats.header import read_header
from twobitlib.formats.index import INDEX_CHUNK_LIMIT, read_index
from twobitlib.io.byte_source import ByteSource, Ref
from twobitlib.models.source import SequenceHandle, TwoBitSource
from twobitlib.sequences.decoder import decode_range
from twobitlib.sequences.loader import load_sequence

__all__ = [
    "SourceRef",
    "open_twobit",
    "twobit_file",
    "sequence_count",
    "sequence_names",
    "sequence_sizes",
    "get_sequence",
    "dna_size",
    "bases",
    "fetch",
]

SourceRef = Union[TwoBitSource, Ref]


def open_twobit(ref: Ref, mask: bool = True, *, index_chunk_limit: int = INDEX_CHUNK_LIMIT) -> TwoBitSource:
    """
    Parse header and index -> TwoBitSource. The caller closes it (or uses
    it as a context manager). With mask=False soft-mask tables are skipped
    and every base comes back uppercase.
    """
    src = ByteSource.resolve(ref)
    try:
        header = read_header(src)
        index = read_index(src, header.codec, header.sequence_count, chunk_limit=index_chunk_limit)
    except BaseException:
        src.close()
        raise
    return TwoBitSource(origin=src, header=header, index=index, mask=mask)


@contextmanager
def twobit_file(ref: SourceRef, mask: bool = True) -> Iterator[TwoBitSource]:
    """Open (unless already open), yield, and close what we opened."""
    if isinstance(ref, TwoBitSource):
        yield ref
        return
    tb = open_twobit(ref, mask)
    try:
        yield tb
    finally:
        tb.close()


def sequence_count(ref: SourceRef) -> int:
    with twobit_file(ref) as tb:
        return tb.sequence_count


def sequence_names(ref: SourceRef) -> List[str]:
    """Names in the index (file order for well-formed files; not guaranteed)."""
    with twobit_file(ref) as tb:
        return list(tb.names())


def sequence_sizes(ref: SourceRef) -> Dict[str, int]:
    """{name: dna size} for every sequence; loads each record's preamble."""
    with twobit_file(ref, mask=False) as tb:
        return {name: load_sequence(tb, name).dna_size for name in list(tb.names())}


def get_sequence(ref: SourceRef, name: str) -> SequenceHandle:
    """
    Handle for `name`. If `ref` is not an open source, one is opened and
    owned by the handle: close the handle (or use `with`) when done.
    Raises UnknownSequenceError.
    """
    if isinstance(ref, TwoBitSource):
        return load_sequence(ref, name)
    tb = open_twobit(ref)
    try:
        handle = load_sequence(tb, name)
    except BaseException:
        tb.close()
        raise
    handle.owns_source = True
    return handle


def dna_size(handle: SequenceHandle) -> int:
    return handle.dna_size


def bases(handle: SequenceHandle, start: int, end: int) -> str:
    """Bases [start, end), 0-based half-open. Raises SequenceRangeError."""
    return decode_range(handle, start, end)


def fetch(
    ref: SourceRef,
    name: str,
    start: Optional[int] = None,
    end: Optional[int] = None,
    *,
    mask: bool = True,
) -> str:
    """
    Open, look up `name` and decode [start, end) in one call. Missing bounds
    default to the whole sequence; a whole empty sequence yields "".
    `mask` only applies when `ref` is not already an open source.
    """
    with twobit_file(ref, mask) as tb:
        handle = load_sequence(tb, name)
        lo = 0 if start is None else start
        hi = handle.dna_size if end is None else end
        if start is None and end is None and handle.dna_size == 0:
            return ""
        return decode_range(handle, lo, hi)
