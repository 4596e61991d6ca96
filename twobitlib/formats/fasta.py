# twobitlib/formats/fasta.py
from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional, TextIO, Tuple, Union

__all__ = ["wrap", "encode", "parse_region", "region_label"]

Sink = Optional[Union[str, TextIO]]   # path | file-like | None (return string)

_REGION_RE = re.compile(r"^(?P<name>.+?)(?::(?P<start>[\d,]+)-(?P<end>[\d,]+))?$")


def wrap(seq: str, width: int = 60) -> str:
    """Sequence -> newline-terminated lines of `width` (width <= 0: one line)."""
    if width <= 0 or not seq:
        return seq + "\n"
    return "\n".join(seq[i:i + width] for i in range(0, len(seq), width)) + "\n"


def _blocks(records: Iterable[Tuple[str, str]], line_width: int) -> Iterator[str]:
    for name, seq in records:
        yield f">{name}\n"
        yield wrap(seq, line_width)


def encode(records: Iterable[Tuple[str, str]], *, sink: Sink = None, line_width: int = 60) -> str:
    """
    Write (name, sequence) pairs as FASTA to a path or text file-like.
    With sink=None the text is returned instead; otherwise returns "".
    """
    if sink is None:
        return "".join(_blocks(records, line_width))
    if isinstance(sink, str):
        # latin-1 gives index names back their original bytes
        with open(sink, "wt", encoding="latin-1") as out:
            out.writelines(_blocks(records, line_width))
        return ""
    if hasattr(sink, "write"):
        for chunk in _blocks(records, line_width):
            sink.write(chunk)
        return ""
    raise TypeError("sink must be a path string, a file-like with .write, or None")


def parse_region(region: str) -> Tuple[str, Optional[int], Optional[int]]:
    """
    'chr1' -> ('chr1', None, None); 'chr1:100-200' -> ('chr1', 100, 200).
    Bounds are 0-based, half-open (UCSC style); thousands separators allowed.
    """
    s = region.strip()
    m = _REGION_RE.match(s)
    if not s or m is None:
        raise ValueError(f"malformed region {region!r}")
    name = m.group("name")
    if m.group("start") is None:
        return name, None, None
    start = int(m.group("start").replace(",", ""))
    end = int(m.group("end").replace(",", ""))
    if start >= end:
        raise ValueError(f"malformed region {region!r}: start must be < end")
    return name, start, end


def region_label(name: str, start: Optional[int], end: Optional[int]) -> str:
    if start is None and end is None:
        return name
    return f"{name}:{start}-{end}"
