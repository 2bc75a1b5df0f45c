"""Caller-driven transforms, searches and comparisons.

Most functions here take a plain Python callable and apply it element by
element in index order. Elements are handed to callables as Python ``int``.

Two functions carry real algorithmic content:

    - :func:`argsort` sorts a sequence in place and writes, into a second
      buffer, the position each sorted value came from.
    - :func:`find` collects the indices of the first ``k`` matching elements
      and reports a shortfall next to the partial result instead of dropping
      it.
"""

from typing import List, Optional, Tuple

import numpy as np

from intseq.core.errors import InsufficientElementsError
from intseq.core.types import (
    Generator,
    IntArrayLike,
    IntSequence,
    PairPredicate,
    Predicate,
    Transform,
)
from intseq.core.validation import check_equal_lengths, have_equal_lengths
from intseq.logger import logger

__all__ = [
    "apply",
    "fill",
    "count",
    "find",
    "find_or_raise",
    "argsort",
    "equal",
    "equal_func",
    "equal_lengths",
]


def apply(f: Transform, s: IntSequence) -> None:
    """Replace every element of ``s`` with ``f(element)``, in index order.

    ``f`` must not depend on the order it is called in.
    """
    for i in range(len(s)):
        s[i] = f(int(s[i]))


def fill(f: Generator, s: IntSequence) -> None:
    """Overwrite ``s`` with values produced by ``f``, called once per element."""
    for i in range(len(s)):
        s[i] = f()


def count(f: Predicate, s: IntArrayLike) -> int:
    """Number of elements of ``s`` for which ``f`` is true."""
    n = 0
    for val in s:
        if f(int(val)):
            n += 1
    return n


def find(
    dst_inds: Optional[List[int]], f: Predicate, s: IntArrayLike, k: int
) -> Tuple[List[int], Optional[InsufficientElementsError]]:
    """Indices of the first ``k`` elements of ``s`` for which ``f`` is true.

    ``dst_inds`` is cleared and then appended to, so an existing list can be
    reused across calls. Pass ``None`` to get a new list.

    Args:
        dst_inds: List that receives the indices, or ``None``.
        f: Predicate applied to each element in index order.
        s: Sequence to scan.
        k: How many matches to collect. ``0`` returns immediately, a negative
            value collects every match.

    Returns:
        ``(indices, error)``. ``error`` is ``None`` on success. If ``k > 0``
        and fewer than ``k`` elements match, ``indices`` holds every match and
        ``error`` is an :class:`InsufficientElementsError`.

    Example:
        >>> inds, err = find(None, lambda v: v > 3, [3, 4, 1, 7, 5], 2)
        >>> inds, err
        ([1, 3], None)
    """
    inds = [] if dst_inds is None else dst_inds
    inds.clear()

    if k == 0:
        return inds, None

    for i, val in enumerate(s):
        if f(int(val)):
            inds.append(i)
            if len(inds) == k:
                return inds, None

    if k < 0:
        return inds, None

    logger.debug(f"find: requested {k} elements, found {len(inds)}")
    return inds, InsufficientElementsError(k, inds)


def find_or_raise(
    dst_inds: Optional[List[int]], f: Predicate, s: IntArrayLike, k: int
) -> List[int]:
    """Like :func:`find`, but raise the shortfall instead of returning it.

    Raises:
        InsufficientElementsError: If ``k > 0`` and fewer than ``k`` elements
            match. The partial indices are on the exception's ``found``
            attribute (and in ``dst_inds`` when one was given).
    """
    inds, err = find(dst_inds, f, s, k)
    if err is not None:
        raise err
    return inds


def argsort(s: IntSequence, inds: IntSequence) -> None:
    """Sort ``s`` ascending in place and record where each value came from.

    After the call ``s[i] == s_orig[inds[i]]`` for every ``i``. The permutation
    is computed once from the original values and then used to reorder ``s``,
    so both buffers are permuted consistently. Equal values keep their original
    relative order, although callers should not rely on it.

    Args:
        s: Sequence to sort.
        inds: Buffer for the source positions, same length as ``s``. Its
            contents are overwritten.

    Raises:
        LengthMismatchError: If ``s`` and ``inds`` differ in length.

    Example:
        >>> s = as_sequence([3, 4, 1, 7, 5])
        >>> inds = new_sequence(5)
        >>> argsort(s, inds)
        >>> s, inds
        (array([1, 3, 4, 5, 7]), array([2, 0, 1, 4, 3]))
    """
    check_equal_lengths("argsort", s, inds)
    order = np.argsort(s, kind="stable")
    inds[...] = order
    s[...] = s[order]


def equal(s1: IntArrayLike, s2: IntArrayLike) -> bool:
    """True if both sequences have the same length and identical elements."""
    if len(s1) != len(s2):
        return False
    return bool(np.array_equal(np.asarray(s1), np.asarray(s2)))


def equal_func(s1: IntArrayLike, s2: IntArrayLike, f: PairPredicate) -> bool:
    """True if the lengths match and ``f(s1[i], s2[i])`` holds for every ``i``."""
    if len(s1) != len(s2):
        return False
    for a, b in zip(s1, s2):
        if not f(int(a), int(b)):
            return False
    return True


def equal_lengths(*sequences: IntArrayLike) -> bool:
    """True if all sequences share one length. True for zero or one input."""
    return have_equal_lengths(*sequences)
