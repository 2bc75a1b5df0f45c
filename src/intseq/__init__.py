"""Allocation-conscious element-wise operations on integer sequences.

The builtin-shadowing reductions (``sum``, ``min``, ``max``) live in
``intseq.functional.reductions`` and are not re-exported here.
"""

__version__ = "0.1.0"

from intseq.core import (
    IntSeqError,
    PreconditionError,
    LengthMismatchError,
    EmptySequenceError,
    SpanLengthError,
    InsufficientElementsError,
    IntSequence,
    IndexedValue,
    as_sequence,
    new_sequence,
)
from intseq.functional import *  # noqa: F401,F403
from intseq.functional import __all__ as _functional_all

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
] + list(_functional_all)
