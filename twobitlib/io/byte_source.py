# twobitlib/io/byte_source.py
from __future__ import annotations

import io
import os
from pathlib import Path
from typing import BinaryIO, Optional, Union

from twobitlib.errors import TruncatedDataError

__all__ = ["ByteSource", "Ref"]

# path | raw bytes | already-open binary stream
Ref = Union[str, os.PathLike, bytes, bytearray, BinaryIO]


class ByteSource:
    """
    Positioned read access to a binary file.

    `cursor` is the authoritative read position: the underlying stream is
    re-seeked to it before every read, so a caller-owned stream may be moved
    by others between our calls without confusing us. Every read/skip/seek
    advances or sets `cursor`.

    Not safe for concurrent use; open one ByteSource per thread.
    """

    def __init__(self, fh: BinaryIO, *, owned: bool = False, name: Optional[str] = None):
        self._fh = fh
        self._owned = owned
        self.name = name or getattr(fh, "name", "<stream>")
        self.cursor = 0
        self._size: Optional[int] = None

    # ---------------------------------------------------------------
    # Construction
    # ---------------------------------------------------------------

    @classmethod
    def open(cls, path: Union[str, os.PathLike]) -> "ByteSource":
        p = Path(path)
        if not p.is_file():
            raise FileNotFoundError(f"2bit file not found: {p}")
        return cls(open(p, "rb"), owned=True, name=str(p))

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray]) -> "ByteSource":
        return cls(io.BytesIO(bytes(data)), owned=True, name="<bytes>")

    @classmethod
    def resolve(cls, ref: Ref) -> "ByteSource":
        """Path -> owned file; bytes -> owned BytesIO; binary stream -> referenced."""
        if isinstance(ref, ByteSource):
            return ref
        if isinstance(ref, (str, os.PathLike)):
            return cls.open(ref)
        if isinstance(ref, (bytes, bytearray)):
            return cls.from_bytes(ref)
        if isinstance(ref, io.TextIOBase):
            raise TypeError("2bit reader expects a binary stream, got text")
        if hasattr(ref, "read") and hasattr(ref, "seek"):
            src = cls(ref, owned=False)
            src.cursor = ref.tell()
            return src
        raise TypeError(f"Unsupported source type for 2bit reader: {type(ref).__name__}")

    # ---------------------------------------------------------------
    # Position
    # ---------------------------------------------------------------

    def tell(self) -> int:
        return self.cursor

    def seek(self, offset: int) -> None:
        if offset < 0:
            raise ValueError(f"negative seek offset {offset}")
        self.cursor = offset

    def skip(self, n: int) -> None:
        self.seek(self.cursor + n)

    @property
    def size(self) -> int:
        if self._size is None:
            self._size = self._fh.seek(0, io.SEEK_END)
        return self._size

    def remaining(self) -> int:
        return max(0, self.size - self.cursor)

    # ---------------------------------------------------------------
    # Reads
    # ---------------------------------------------------------------

    def read_upto(self, n: int) -> bytes:
        """Read at most n bytes from the cursor; short only at end of file."""
        if n <= 0:
            return b""
        self._fh.seek(self.cursor)
        data = self._fh.read(n)
        self.cursor += len(data)
        return data

    def read(self, n: int, what: Optional[str] = None) -> bytes:
        """Read exactly n bytes or raise TruncatedDataError."""
        at = self.cursor
        data = self.read_upto(n)
        if len(data) != n:
            raise TruncatedDataError(at, n, len(data), what)
        return data

    # ---------------------------------------------------------------
    # Lifetime
    # ---------------------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._fh.closed

    def close(self) -> None:
        if self._owned and not self._fh.closed:
            self._fh.close()

    def __enter__(self) -> "ByteSource":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"ByteSource({self.name!r}, cursor={self.cursor})"
