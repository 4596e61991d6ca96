# twobitlib/models/blocks.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

__all__ = ["BlockCollection", "relevant_blocks"]


@dataclass(frozen=True, slots=True)
class BlockCollection:
    """
    N-blocks or mask-blocks of one sequence, as parallel start/size tuples.

    Coordinates are 0-based, half-open: block i covers
    [starts[i], starts[i] + sizes[i]). Blocks need not be sorted or disjoint.
    An empty collection means "no overlay", which is also how a skipped
    (masking disabled) mask table is represented.
    """
    starts: Tuple[int, ...] = ()
    sizes: Tuple[int, ...] = ()

    def __post_init__(self):
        if len(self.starts) != len(self.sizes):
            raise ValueError("starts and sizes must be the same length")

    @property
    def count(self) -> int:
        return len(self.starts)

    def __len__(self) -> int:
        return len(self.starts)

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        """Yield (start, end) per block."""
        for s, n in zip(self.starts, self.sizes):
            yield s, s + n

    def total(self) -> int:
        return sum(self.sizes)

    def relevant(self, start: int, end: int) -> List[Tuple[int, int]]:
        """Blocks intersecting [start, end), as (block_start, block_end)."""
        return [(s, s + n) for s, n in zip(self.starts, self.sizes) if end > s and s + n > start]


def relevant_blocks(start: int, end: int, blocks: Optional[BlockCollection]) -> List[Tuple[int, int]]:
    if not blocks:
        return []
    return blocks.relevant(start, end)
