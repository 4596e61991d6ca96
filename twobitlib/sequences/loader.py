# twobitlib/sequences/loader.py
from __future__ import annotations

from twobitlib.formats.words import WORD_SIZE, WordCodec
from twobitlib.io.byte_source import ByteSource
from twobitlib.models.blocks import BlockCollection
from twobitlib.models.source import SequenceHandle, TwoBitSource

__all__ = ["read_blocks", "skip_blocks", "load_sequence"]


def read_blocks(src: ByteSource, codec: WordCodec, what: str = "blocks") -> BlockCollection:
    """[count][count x start][count x size] -> BlockCollection."""
    count = codec.read_word(src, f"{what} count")
    if count == 0:
        return BlockCollection()
    starts = codec.read_words(src, count, f"{what} starts")
    sizes = codec.read_words(src, count, f"{what} sizes")
    return BlockCollection(starts, sizes)


def skip_blocks(src: ByteSource, codec: WordCodec, what: str = "blocks") -> BlockCollection:
    """Step over a block table without materializing it; still reads the count."""
    count = codec.read_word(src, f"{what} count")
    src.skip(count * WORD_SIZE * 2)
    return BlockCollection()


def load_sequence(source: TwoBitSource, name: str) -> SequenceHandle:
    """
    Seek to `name`'s record and read its preamble:
      [dnaSize][N-blocks][mask-blocks][reserved][packed bases...]
    N-blocks are always read; mask-blocks only when the source was opened
    with mask=True. Raises UnknownSequenceError for names not in the index.
    """
    offset = source.offset_of(name)
    src, codec = source.origin, source.codec

    src.seek(offset)
    dna_size = codec.read_word(src, "dna size")
    n_blocks = read_blocks(src, codec, "N-block")
    if source.mask:
        mask_blocks = read_blocks(src, codec, "mask-block")
    else:
        mask_blocks = skip_blocks(src, codec, "mask-block")
    src.skip(WORD_SIZE)  # reserved

    return SequenceHandle(
        source=source,
        name=name,
        dna_size=dna_size,
        n_blocks=n_blocks,
        mask_blocks=mask_blocks,
        dna_offset=src.tell(),
    )
