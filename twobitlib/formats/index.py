# twobitlib/formats/index.py
from __future__ import annotations

from typing import Dict

from twobitlib.errors import TruncatedDataError
from twobitlib.formats.words import WORD_SIZE, WordCodec
from twobitlib.io.byte_source import ByteSource

__all__ = ["MAX_NAME_LEN", "MAX_ENTRY_SIZE", "INDEX_CHUNK_LIMIT", "read_index"]

MAX_NAME_LEN = 255
MAX_ENTRY_SIZE = 1 + MAX_NAME_LEN + WORD_SIZE   # [len][name][offset]
INDEX_CHUNK_LIMIT = 64 * 1024 * 1024


def read_index(
    src: ByteSource,
    codec: WordCodec,
    count: int,
    *,
    chunk_limit: int = INDEX_CHUNK_LIMIT,
) -> Dict[str, int]:
    """
    Read `count` index entries starting at the cursor -> {name: offset}.

    Entries are variable length ([1-byte L][L name bytes][4-byte offset]), so
    instead of one read per entry we pull the worst case (count * 260 bytes,
    bounded by what is left in the file) in chunks of at most `chunk_limit`
    and parse from memory. The over-read is given back: on return the cursor
    sits right after the last entry.

    Names are decoded as latin-1 (bytes map 1:1 onto code points).
    Duplicate names: last one wins.
    """
    if chunk_limit < MAX_ENTRY_SIZE:
        raise ValueError(f"chunk_limit must be >= {MAX_ENTRY_SIZE}")

    start = src.tell()
    stop = start + min(count * MAX_ENTRY_SIZE, src.remaining())  # file offset where over-read ends

    buf = src.read_upto(min(stop - start, chunk_limit))
    base = start      # file offset of buf[0]
    pos = 0           # parse position within buf

    index: Dict[str, int] = {}
    for _ in range(count):
        # refill when the next entry could straddle the end of the chunk
        if len(buf) - pos < MAX_ENTRY_SIZE and base + len(buf) < stop:
            more = src.read_upto(min(stop - (base + len(buf)), chunk_limit))
            buf = buf[pos:] + more
            base += pos
            pos = 0

        if pos >= len(buf):
            raise TruncatedDataError(base + pos, 1, 0, "index entry length")
        name_len = buf[pos]
        need = 1 + name_len + WORD_SIZE
        if pos + need > len(buf):
            raise TruncatedDataError(base + pos, need, len(buf) - pos, "index entry")

        name = buf[pos + 1:pos + 1 + name_len].decode("latin-1")
        index[name] = codec.word_at(buf, pos + 1 + name_len)
        pos += need

    src.seek(base + pos)
    return index
