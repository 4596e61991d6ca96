# twobitlib/__init__.py
from .errors import (
    TwoBitError, FormatError, InvalidSignatureError, InvalidVersionError,
    TruncatedDataError, UnknownSequenceError, SequenceRangeError,
    InvertedRangeError, NegativeStartError, StartBeyondEndError, EndBeyondEndError,
)
from .models.blocks import BlockCollection, relevant_blocks
from .models.source import TwoBitSource, SequenceHandle

# Convenience re-exports for direct functional use
from .api import (
    open_twobit, twobit_file, sequence_count, sequence_names, sequence_sizes,
    get_sequence, dna_size, bases, fetch,
)
from .sequences.base import SequenceSource
from .sequences.twobit import TwoBitSequenceSource
