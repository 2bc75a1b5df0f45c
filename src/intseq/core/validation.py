"""Precondition checks shared by the functional modules.

Every check runs before an operation writes anything, so a failed call leaves
all buffers as they were.
"""

from typing import Sized

from intseq.core.errors import EmptySequenceError, LengthMismatchError, SpanLengthError
from intseq.logger import logger

__all__ = [
    "have_equal_lengths",
    "check_equal_lengths",
    "check_not_empty",
    "check_span_length",
]


def have_equal_lengths(*sequences: Sized) -> bool:
    """True if every sequence shares one length. Vacuously true for 0 or 1."""
    if not sequences:
        return True
    n = len(sequences[0])
    return all(len(s) == n for s in sequences[1:])


def check_equal_lengths(op: str, *sequences: Sized) -> int:
    """Raise ``LengthMismatchError`` unless all sequences agree in length.

    Returns:
        The common length.
    """
    if not have_equal_lengths(*sequences):
        lengths = [len(s) for s in sequences]
        logger.debug(f"{op}: length mismatch {lengths}")
        raise LengthMismatchError(lengths, f"{op}: sequence lengths do not match: {lengths}")
    return len(sequences[0]) if sequences else 0


def check_not_empty(op: str, s: Sized) -> None:
    if len(s) == 0:
        logger.debug(f"{op}: empty input")
        raise EmptySequenceError(f"{op}: sequence must contain at least one element")


def check_span_length(n: int) -> None:
    if n < 2:
        logger.debug(f"span: destination length {n}")
        raise SpanLengthError(f"span: destination must have length > 1, got {n}")
