import io

import pytest

from twobitlib.errors import TruncatedDataError
from twobitlib.io.byte_source import ByteSource


def test_read_seek_skip():
    src = ByteSource.from_bytes(b"0123456789")
    assert src.size == 10
    assert src.read(3) == b"012"
    assert src.tell() == 3
    src.skip(2)
    assert src.read(2) == b"56"
    src.seek(1)
    assert src.read_upto(100) == b"123456789"
    assert src.tell() == 10
    assert src.remaining() == 0
    assert src.read_upto(4) == b""


def test_short_read_is_truncation():
    src = ByteSource.from_bytes(b"abc")
    src.seek(1)
    with pytest.raises(TruncatedDataError) as ei:
        src.read(5, "thing")
    assert (ei.value.offset, ei.value.wanted, ei.value.got) == (1, 5, 2)
    assert "thing" in str(ei.value)


def test_negative_seek():
    with pytest.raises(ValueError):
        ByteSource.from_bytes(b"").seek(-1)


def test_cursor_survives_external_moves():
    fh = io.BytesIO(b"abcdef")
    src = ByteSource.resolve(fh)
    assert src.read(2) == b"ab"
    fh.seek(5)
    assert src.read(2) == b"cd"


def test_caller_stream_not_closed():
    fh = io.BytesIO(b"abcdef")
    fh.seek(2)
    with ByteSource.resolve(fh) as src:
        # picks up where the caller left the stream
        assert src.tell() == 2
        assert src.read(1) == b"c"
    assert not fh.closed


def test_owned_file_closed(tmp_path):
    p = tmp_path / "f.bin"
    p.write_bytes(b"xyz")
    with ByteSource.resolve(str(p)) as src:
        assert src.read(3) == b"xyz"
    assert src.closed
    src.close()  # idempotent


def test_resolve_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        ByteSource.resolve(tmp_path / "missing.2bit")
    with pytest.raises(FileNotFoundError):
        ByteSource.resolve(str(tmp_path))  # a directory is not a file
    with pytest.raises(TypeError):
        ByteSource.resolve(io.StringIO("text"))
    with pytest.raises(TypeError):
        ByteSource.resolve(42)
