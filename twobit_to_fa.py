#!/usr/bin/env python3
"""
Extract sequences or regions from a .2bit file as FASTA.

Example:
  ./twobit_to_fa.py hg38.2bit chrM chr1:10000-10100 --line-width 50 --output out.fa
  ./twobit_to_fa.py hg38.2bit --seq-list ids.txt --no-mask

Regions are name or name:start-end (0-based, half-open). With no regions and
no --seq-list every sequence in the file is written.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from twobitlib import TwoBitError, TwoBitSource, bases, get_sequence, twobit_file
from twobitlib.formats import fasta

Region = Tuple[str, Optional[int], Optional[int]]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Extract sequences (or name:start-end regions) from a .2bit file as FASTA.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    p.add_argument("twobit", type=Path, help="Input .2bit file.")
    p.add_argument("regions", nargs="*", help="Sequence names or name:start-end regions (0-based, half-open).")
    p.add_argument("--seq-list", type=Path, default=None, help="File with one name or region per line.")
    p.add_argument("--no-mask", action="store_true", help="Ignore soft-masking; output uppercase only.")
    p.add_argument("--line-width", type=int, default=60, help="FASTA line wrap width (<=0 for unwrapped).")
    p.add_argument("--output", type=Path, default=None, help="Output FASTA path. If omitted, writes to stdout.")
    return p.parse_args(argv)


def read_seq_list(path: Path) -> List[str]:
    with open(path, "rt", encoding="utf-8") as fh:
        return [ln.strip() for ln in fh if ln.strip() and not ln.startswith("#")]


def iter_records(tb: TwoBitSource, regions: List[Region]) -> Iterator[Tuple[str, str]]:
    for name, start, end in regions:
        handle = get_sequence(tb, name)
        lo = 0 if start is None else start
        hi = handle.dna_size if end is None else end
        seq = bases(handle, lo, hi) if (start is not None or handle.dna_size) else ""
        yield fasta.region_label(name, start, end), seq


def write_atomic(records: Iterator[Tuple[str, str]], path: Path, line_width: int) -> None:
    """FASTA to <path>.tmp, renamed over `path` only once every record decoded."""
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        fasta.encode(records, sink=str(tmp), line_width=line_width)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise
    tmp.replace(path)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    if not args.twobit.is_file():
        print(f"[error] '{args.twobit}' does not exist.", file=sys.stderr)
        return 2
    if args.seq_list is not None and not args.seq_list.is_file():
        print(f"[error] --seq-list '{args.seq_list}' does not exist.", file=sys.stderr)
        return 2

    wanted = list(args.regions)
    if args.seq_list is not None:
        wanted.extend(read_seq_list(args.seq_list))
    try:
        regions = [fasta.parse_region(s) for s in wanted]
    except ValueError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 2

    try:
        with twobit_file(args.twobit, mask=not args.no_mask) as tb:
            if not regions:
                regions = [(name, None, None) for name in tb.names()]
            records = iter_records(tb, regions)
            if args.output is None:
                fasta.encode(records, sink=sys.stdout, line_width=args.line_width)
            else:
                write_atomic(records, args.output, args.line_width)
    except TwoBitError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
