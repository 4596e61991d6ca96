# twobitlib/models/source.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable

from twobitlib.errors import UnknownSequenceError
from twobitlib.formats.header import TwoBitHeader
from twobitlib.formats.words import WordCodec
from twobitlib.io.byte_source import ByteSource
from twobitlib.models.blocks import BlockCollection

__all__ = ["TwoBitSource", "SequenceHandle"]


class TwoBitSource:
    """
    One open 2bit file: parsed header, sequence index and the byte source
    that every later read goes through.

    `mask` is fixed at open time and decides, for every sequence loaded
    from this source, whether soft-mask blocks are read or skipped; it is
    read-only afterwards.
    The byte source cursor is shared by all handles derived from this
    source; serialize access or open one source per thread.
    """

    def __init__(self, origin: ByteSource, header: TwoBitHeader, index: Dict[str, int], mask: bool = True):
        self.origin = origin
        self.header = header
        self.index = index
        self._mask = bool(mask)
        self.codec: WordCodec = header.codec

    def __repr__(self) -> str:
        return (f"TwoBitSource(origin={self.origin!r}, sequences={len(self.index)}, "
                f"swapped={self.swapped}, mask={self._mask})")

    @property
    def mask(self) -> bool:
        return self._mask

    # header passthroughs

    @property
    def signature(self) -> int:
        return self.header.signature

    @property
    def swapped(self) -> bool:
        return self.header.swapped

    @property
    def version(self) -> int:
        return self.header.version

    @property
    def sequence_count(self) -> int:
        return self.header.sequence_count

    # index

    def names(self) -> Iterable[str]:
        return self.index.keys()

    def __contains__(self, name: str) -> bool:
        return name in self.index

    def offset_of(self, name: str) -> int:
        try:
            return self.index[name]
        except KeyError:
            raise UnknownSequenceError(name) from None

    # lifetime

    @property
    def closed(self) -> bool:
        return self.origin.closed

    def close(self) -> None:
        self.origin.close()

    def __enter__(self) -> "TwoBitSource":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


@dataclass(eq=False)
class SequenceHandle:
    """
    Where one sequence lives in its file, not the bases themselves.

      dna_size    : number of bases
      n_blocks    : unknown-base regions (always loaded)
      mask_blocks : soft-masked regions (empty when the source has mask=False)
      dna_offset  : file offset of the packed 2-bit base stream
    """
    source: TwoBitSource
    name: str
    dna_size: int
    n_blocks: BlockCollection
    mask_blocks: BlockCollection
    dna_offset: int
    owns_source: bool = field(default=False, repr=False)

    def close(self) -> None:
        """Close the source if this handle opened it; no-op otherwise."""
        if self.owns_source:
            self.source.close()

    def __enter__(self) -> "SequenceHandle":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
