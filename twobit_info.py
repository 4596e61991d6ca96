#!/usr/bin/env python3
"""
Report the sequences of a .2bit file.

Example:
  ./twobit_info.py hg38.2bit                  # name<TAB>size
  ./twobit_info.py hg38.2bit --sort-by-size
  ./twobit_info.py hg38.2bit --n-bed > gaps.bed
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from twobitlib import TwoBitError, TwoBitSource, get_sequence, twobit_file


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List sequence names and sizes of a .2bit file.")
    p.add_argument("twobit", type=Path, help="Input .2bit file.")
    mx = p.add_mutually_exclusive_group()
    mx.add_argument("--sort-by-size", action="store_true", help="Largest sequences first.")
    mx.add_argument("--n-bed", action="store_true", help="Emit N-blocks as BED (name, start, end) instead of sizes.")
    return p.parse_args(argv)


def write_sizes(tb: TwoBitSource, out: TextIO, sort_by_size: bool = False) -> None:
    rows = [(name, get_sequence(tb, name).dna_size) for name in list(tb.names())]
    if sort_by_size:
        rows.sort(key=lambda r: (-r[1], r[0]))
    for name, size in rows:
        out.write(f"{name}\t{size}\n")


def write_n_bed(tb: TwoBitSource, out: TextIO) -> None:
    for name in list(tb.names()):
        for start, end in sorted(get_sequence(tb, name).n_blocks):
            out.write(f"{name}\t{start}\t{end}\n")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    if not args.twobit.is_file():
        print(f"[error] '{args.twobit}' does not exist.", file=sys.stderr)
        return 2

    try:
        # mask tables are never needed here
        with twobit_file(args.twobit, mask=False) as tb:
            if args.n_bed:
                write_n_bed(tb, sys.stdout)
            else:
                write_sizes(tb, sys.stdout, args.sort_by_size)
    except TwoBitError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
