# twobitlib/errors.py
from __future__ import annotations

from typing import Optional

__all__ = [
    "TwoBitError",
    "FormatError",
    "InvalidSignatureError",
    "InvalidVersionError",
    "TruncatedDataError",
    "UnknownSequenceError",
    "SequenceRangeError",
    "InvertedRangeError",
    "NegativeStartError",
    "StartBeyondEndError",
    "EndBeyondEndError",
]


class TwoBitError(Exception):
    """Base class for everything this package raises about a 2bit file."""


# -------------------------------------------------------------------
# Format violations
# -------------------------------------------------------------------

class FormatError(TwoBitError, ValueError):
    pass


class InvalidSignatureError(FormatError):
    def __init__(self, value: int):
        self.value = value
        super().__init__(f"2bit: invalid signature 0x{value:08X} (expected 0x1A412743 in either byte order)")


class InvalidVersionError(FormatError):
    def __init__(self, version: int):
        self.version = version
        super().__init__(f"2bit: unsupported version {version} (only version 0 is readable)")


class TruncatedDataError(FormatError):
    """A read or an index entry ran past the bytes available in the file."""

    def __init__(self, offset: int, wanted: int, got: int, what: Optional[str] = None):
        self.offset = offset
        self.wanted = wanted
        self.got = got
        where = f" while reading {what}" if what else ""
        super().__init__(
            f"2bit: truncated data{where} at offset {offset}: wanted {wanted} bytes, got {got}"
        )


# -------------------------------------------------------------------
# Lookup / range errors
# -------------------------------------------------------------------

class UnknownSequenceError(TwoBitError, KeyError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        # KeyError would repr() the argument
        return f"2bit: sequence {self.name!r} not found in index"


class SequenceRangeError(TwoBitError, ValueError):
    """
    Requested [start, end) is not a valid, non-empty range of the sequence.
    Subclasses tell the four cases apart; all carry the offending bounds.
    """
    reason = "invalid range"

    def __init__(self, start: int, end: int, dna_size: int, name: Optional[str] = None):
        self.start = start
        self.end = end
        self.dna_size = dna_size
        self.name = name
        label = f"{name}:" if name else ""
        super().__init__(f"{self.reason}: {label}{start}-{end} (sequence size {dna_size})")


class InvertedRangeError(SequenceRangeError):
    reason = "start must be < end"


class NegativeStartError(SequenceRangeError):
    reason = "start must be >= 0"


class StartBeyondEndError(SequenceRangeError):
    reason = "start is past the end of the sequence"


class EndBeyondEndError(SequenceRangeError):
    reason = "end is past the end of the sequence"
