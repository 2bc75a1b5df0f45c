"""Reductions of integer sequences to a single value.

The names ``sum``, ``min`` and ``max`` mirror NumPy's and shadow the builtins
inside this namespace, so import the module rather than star-importing it::

    from intseq.functional import reductions

    reductions.max(s)   # IndexedValue(value=..., index=...)

Sums, products and dot products accumulate in the dtype of the input. For
``int64`` sequences overflow wraps around silently.
"""

import numpy as np

from intseq.core.types import IndexedValue, IntArrayLike
from intseq.core.validation import check_equal_lengths, check_not_empty

__all__ = ["sum", "product", "dot", "min", "max"]


def sum(s: IntArrayLike) -> int:
    """Sum of the elements of ``s``. Returns 0 for an empty sequence."""
    s = np.asarray(s)
    if s.size == 0:
        return 0
    return int(np.sum(s, dtype=s.dtype))


def product(s: IntArrayLike) -> int:
    """Product of the elements of ``s``. Returns 1 for an empty sequence."""
    s = np.asarray(s)
    if s.size == 0:
        return 1
    return int(np.prod(s, dtype=s.dtype))


def dot(s1: IntArrayLike, s2: IntArrayLike) -> int:
    """Dot product ``sum(s1[i] * s2[i])``.

    Raises:
        LengthMismatchError: If the sequences differ in length.
    """
    check_equal_lengths("dot", s1, s2)
    s1 = np.asarray(s1)
    s2 = np.asarray(s2)
    if s1.size == 0:
        return 0
    return int(np.dot(s1, s2))


def max(s: IntArrayLike) -> IndexedValue:
    """Largest element of ``s`` and the first index holding it.

    Args:
        s: Non-empty sequence.

    Returns:
        ``IndexedValue(value, index)``. With repeated maxima the lowest index
        wins.

    Raises:
        EmptySequenceError: If ``s`` is empty.
    """
    check_not_empty("max", s)
    s = np.asarray(s)
    # argmax returns the first occurrence
    ind = int(np.argmax(s))
    return IndexedValue(int(s[ind]), ind)


def min(s: IntArrayLike) -> IndexedValue:
    """Smallest element of ``s`` and the first index holding it.

    Raises:
        EmptySequenceError: If ``s`` is empty.
    """
    check_not_empty("min", s)
    s = np.asarray(s)
    ind = int(np.argmin(s))
    return IndexedValue(int(s[ind]), ind)
