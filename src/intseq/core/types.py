"""Reusable type definitions for intseq.

This module provides the type aliases shared across the package together with
the two helpers that allocate sequences.

Type Aliases:
    IntSequence: A one-dimensional NumPy array with a signed integer dtype.
    IntArrayLike: Anything ``numpy.asarray`` turns into an integer sequence.
    Predicate: A unary test applied to one element.
    Transform: A unary element-to-element map.
    Generator: A zero-argument element producer.
    PairPredicate: A binary test applied to two aligned elements.
"""

from typing import Callable, NamedTuple, Sequence, Union

import numpy as np
import numpy.typing as npt

from intseq.config import settings

__all__ = [
    "IntSequence",
    "IntArrayLike",
    "Predicate",
    "Transform",
    "Generator",
    "PairPredicate",
    "IndexedValue",
    "as_sequence",
    "new_sequence",
]

IntSequence = npt.NDArray[np.signedinteger]
IntArrayLike = Union[IntSequence, Sequence[int]]

Predicate = Callable[[int], bool]
Transform = Callable[[int], int]
Generator = Callable[[], int]
PairPredicate = Callable[[int, int], bool]


class IndexedValue(NamedTuple):
    """A value together with the position it was found at."""

    value: int
    index: int


def as_sequence(values: IntArrayLike, dtype: npt.DTypeLike = None) -> IntSequence:
    """Copy integer data into a new one-dimensional sequence.

    Args:
        values: Integer array-like (list, tuple or NumPy array).
        dtype: Target dtype. Defaults to ``settings.DTYPE``.

    Returns:
        A fresh array that owns its data.

    Raises:
        TypeError: If ``values`` does not hold integers.
        ValueError: If ``values`` is not one-dimensional.
    """
    arr = np.asarray(values)
    if arr.size == 0:
        arr = arr.astype(dtype or settings.DTYPE)
    if not np.issubdtype(arr.dtype, np.integer):
        raise TypeError(f"Sequences hold integers, got dtype '{arr.dtype}'.")
    if arr.ndim != 1:
        raise ValueError(f"Sequences are one-dimensional, got shape {arr.shape}.")
    return np.array(arr, dtype=dtype or settings.DTYPE)


def new_sequence(n: int, dtype: npt.DTypeLike = None) -> IntSequence:
    """Allocate a zero-filled sequence of length ``n`` for use as a destination."""
    if n < 0:
        raise ValueError(f"Sequence length must be non-negative, got {n}.")
    return np.zeros(n, dtype=dtype or settings.DTYPE)
