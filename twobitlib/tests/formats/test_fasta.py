import io

import pytest

from twobitlib.formats import fasta


@pytest.mark.parametrize("seq, width, expect", [
    ("ACGTACGTAC", 4, "ACGT\nACGT\nAC\n"),
    ("ACGT", 4, "ACGT\n"),
    ("ACGT", 0, "ACGT\n"),
    ("ACGT", -1, "ACGT\n"),
    ("", 60, "\n"),
])
def test_wrap(seq, width, expect):
    assert fasta.wrap(seq, width) == expect


def test_encode_string_and_filelike(tmp_path):
    recs = [("chr1", "ACGTAC"), ("chr2:0-2", "GG")]
    expect = ">chr1\nACGT\nAC\n>chr2:0-2\nGG\n"
    assert fasta.encode(recs, line_width=4) == expect

    buf = io.StringIO()
    assert fasta.encode(iter(recs), sink=buf, line_width=4) == ""
    assert buf.getvalue() == expect

    out = tmp_path / "x.fa"
    fasta.encode(recs, sink=str(out), line_width=4)
    assert out.read_text() == expect


def test_encode_bad_sink():
    with pytest.raises(TypeError):
        fasta.encode([("a", "A")], sink=42)


@pytest.mark.parametrize("region, expect", [
    ("chr1", ("chr1", None, None)),
    ("chr1:10-20", ("chr1", 10, 20)),
    ("chrUn_KI270302v1:0-1", ("chrUn_KI270302v1", 0, 1)),
    ("chr1:1,000-2,000", ("chr1", 1000, 2000)),
    ("  chrM  ", ("chrM", None, None)),
    ("HLA-A*01:01:01:01", ("HLA-A*01:01:01:01", None, None)),
])
def test_parse_region(region, expect):
    assert fasta.parse_region(region) == expect


@pytest.mark.parametrize("region", ["", "   ", "chr1:20-10", "chr1:5-5"])
def test_parse_region_malformed(region):
    with pytest.raises(ValueError):
        fasta.parse_region(region)


def test_region_label():
    assert fasta.region_label("chr1", None, None) == "chr1"
    assert fasta.region_label("chr1", 3, 9) == "chr1:3-9"


def test_encode_path_keeps_name_bytes(tmp_path):
    out = tmp_path / "x.fa"
    fasta.encode([("scaf\xff\xe9", "AC")], sink=str(out))
    assert out.read_bytes() == b">scaf\xff\xe9\nAC\n"
