"""Core types, errors and precondition checks."""

from intseq.core.errors import (
    IntSeqError,
    PreconditionError,
    LengthMismatchError,
    EmptySequenceError,
    SpanLengthError,
    InsufficientElementsError,
)
from intseq.core.types import IntSequence, IndexedValue, as_sequence, new_sequence

__all__ = [
    "IntSeqError",
    "PreconditionError",
    "LengthMismatchError",
    "EmptySequenceError",
    "SpanLengthError",
    "InsufficientElementsError",
    "IntSequence",
    "IndexedValue",
    "as_sequence",
    "new_sequence",
]
