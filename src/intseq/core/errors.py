"""Exception types raised by intseq operations.

Two channels exist. ``PreconditionError`` and its subclasses signal a caller
bug (mismatched lengths, empty input where an element is required) and are not
meant to be handled in normal operation. ``InsufficientElementsError`` is the
only recoverable, data-dependent outcome and is returned by ``find`` next to
the partial result.
"""

from typing import List, Sequence

__all__ = [
    "IntSeqError",
    "PreconditionError",
    "LengthMismatchError",
    "EmptySequenceError",
    "SpanLengthError",
    "InsufficientElementsError",
]


class IntSeqError(Exception):
    """Base class for all intseq errors."""


class PreconditionError(IntSeqError, ValueError):
    """Raised when a caller violates an operation's contract."""


class LengthMismatchError(PreconditionError):
    """Raised when sequences that must agree in length do not."""

    def __init__(self, lengths: Sequence[int], message: str | None = None) -> None:
        self.lengths = list(lengths)
        super().__init__(message or f"sequence lengths do not match: {self.lengths}")


class EmptySequenceError(PreconditionError):
    """Raised when an operation needs at least one element."""


class SpanLengthError(PreconditionError):
    """Raised when a span destination holds fewer than two elements."""


class InsufficientElementsError(IntSeqError):
    """Fewer matching elements were found than requested.

    Attributes:
        requested: Number of matches the caller asked for.
        found: Indices of every match that does exist.
    """

    def __init__(self, requested: int, found: List[int]) -> None:
        self.requested = requested
        self.found = found
        super().__init__(
            f"insufficient elements found: requested {requested}, found {len(found)}"
        )
