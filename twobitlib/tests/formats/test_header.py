import pytest

from twobitlib.errors import InvalidSignatureError, InvalidVersionError, TruncatedDataError
from twobitlib.formats.header import MAGIC, HEADER_SIZE, read_header
from twobitlib.formats.words import WordCodec, swap32
from twobitlib.io.byte_source import ByteSource

# ---------- words ----------

def test_swap32():
    assert swap32(MAGIC) == 0x4327411A
    assert swap32(swap32(0xDEADBEEF)) == 0xDEADBEEF
    assert swap32(0x000000FF) == 0xFF000000

@pytest.mark.parametrize("swapped, expect", [
    (False, 1),
    (True, 0x01000000),
])
def test_word_byte_order(swapped, expect):
    assert WordCodec(swapped).word(b"\x01\x00\x00\x00") == expect

def test_words_and_reads():
    raw = b"\x01\x00\x00\x00\x02\x00\x00\x00\x03\x00\x00\x00"
    c = WordCodec(False)
    assert c.words(raw, 3) == (1, 2, 3)
    assert c.words(b"", 0) == ()
    assert c.word_at(raw, 4) == 2

    src = ByteSource.from_bytes(raw)
    assert c.read_word(src) == 1
    assert src.tell() == 4
    assert c.read_words(src, 2) == (2, 3)
    with pytest.raises(TruncatedDataError):
        c.read_word(src)

# ---------- header ----------

def test_native_header(build_twobit):
    data = build_twobit([("a", "ACGT"), ("b", "GG")])
    src = ByteSource.from_bytes(data)
    h = read_header(src)
    assert h.signature == MAGIC
    assert h.swapped is False
    assert h.version == 0
    assert h.sequence_count == 2
    assert src.tell() == HEADER_SIZE

def test_swapped_header(build_twobit):
    data = build_twobit([("a", "ACGT")], swapped=True)
    assert data[:4] == b"\x1a\x41\x27\x43"
    h = read_header(ByteSource.from_bytes(data))
    assert h.swapped is True
    assert h.signature == 0x4327411A
    assert h.sequence_count == 1
    assert h.codec.swapped is True

def test_invalid_signature():
    with pytest.raises(InvalidSignatureError) as ei:
        read_header(ByteSource.from_bytes(b"\x00" * 16))
    assert ei.value.value == 0
    assert isinstance(ei.value, ValueError)

@pytest.mark.parametrize("swapped", [False, True])
def test_invalid_version(build_twobit, swapped):
    data = build_twobit([("a", "ACGT")], version=1, swapped=swapped)
    with pytest.raises(InvalidVersionError) as ei:
        read_header(ByteSource.from_bytes(data))
    assert ei.value.version == 1

def test_truncated_header():
    with pytest.raises(TruncatedDataError) as ei:
        read_header(ByteSource.from_bytes(b"\x43\x27\x41\x1a\x00\x00"))
    assert ei.value.offset == 4
    assert ei.value.wanted == 4
    assert ei.value.got == 2

def test_invalid_signature_carries_raw_value(build_twobit):
    data = build_twobit([("a", "ACGT")], signature=0xDEADBEEF)
    with pytest.raises(InvalidSignatureError) as ei:
        read_header(ByteSource.from_bytes(data))
    assert ei.value.value == 0xDEADBEEF
    assert "0xDEADBEEF" in str(ei.value)
