"""Element-wise integer arithmetic on sequences.

This module provides the arithmetic half of the intseq operation set. Each
operation comes in up to two forms:

    - **In-place**: the first sequence argument is overwritten with the result
      (``subtract``, ``multiply``, ``divide``, ``scale``, ``add_constant``,
      ``add_scaled``).
    - **Destination**: the result is written into a caller-supplied buffer
      ``dst`` and ``dst`` is returned (``add``, ``subtract_to``,
      ``multiply_to``, ``divide_to``, ``add_scaled_to``, ``cumulative_sum``,
      ``cumulative_product``, ``span``).

Callers choose the allocation strategy and the aliasing contract by choosing
the function.

Key Properties:
    - All lengths are checked before anything is written. A mismatch raises
      :class:`~intseq.core.errors.LengthMismatchError` and leaves every buffer
      untouched.
    - Arithmetic uses the fixed-width dtype of the arrays involved. For
      ``int64`` this is silent two's-complement wraparound on overflow.
    - Integer division truncates toward zero. A zero divisor raises
      ``ZeroDivisionError``.
    - Destination buffers may alias any input.

Examples:
    >>> from intseq import as_sequence, new_sequence
    >>> from intseq.functional.arithmetic import add, subtract
    >>>
    >>> a = as_sequence([1, 2, 3])
    >>> b = as_sequence([4, 5, 6])
    >>> dst = add(new_sequence(3), a, b)   # [5, 7, 9]
    >>> subtract(dst, b)                   # dst is [1, 2, 3] again
"""

import numpy as np

from intseq.core.types import IntArrayLike, IntSequence
from intseq.core.validation import check_equal_lengths, check_not_empty, check_span_length
from intseq.logger import logger

__all__ = [
    "add",
    "add_constant",
    "add_scaled",
    "add_scaled_to",
    "subtract",
    "subtract_to",
    "multiply",
    "multiply_to",
    "divide",
    "divide_to",
    "scale",
    "cumulative_sum",
    "cumulative_product",
    "span",
]


# =============================================================================
# Addition And Scaling
# =============================================================================


def add(dst: IntSequence, *sequences: IntArrayLike) -> IntSequence:
    """Element-wise sum of all ``sequences``, written into ``dst``.

    ``dst`` is overwritten, its previous contents are ignored. It may be one of
    the inputs.

    Args:
        dst: Destination buffer, same length as every input.
        *sequences: Sequences to sum. With none given ``dst`` is returned
            unchanged.

    Returns:
        ``dst``.

    Raises:
        LengthMismatchError: If ``dst`` or any input differs in length.
    """
    if not sequences:
        logger.debug("add: no input sequences, destination left unchanged")
        return dst
    check_equal_lengths("add", dst, *sequences)

    # Accumulate separately so that aliasing dst with an input is harmless
    total = np.array(sequences[0], dtype=dst.dtype)
    for s in sequences[1:]:
        np.add(total, s, out=total)
    dst[...] = total
    return dst


def add_constant(c: int, s: IntSequence) -> None:
    """Add ``c`` to every element of ``s`` in place."""
    np.add(s, c, out=s)


def add_scaled(dst: IntSequence, alpha: int, s: IntArrayLike) -> None:
    """Compute ``dst = dst + alpha * s`` in place.

    Raises:
        LengthMismatchError: If ``dst`` and ``s`` differ in length.
    """
    check_equal_lengths("add_scaled", dst, s)
    np.add(dst, alpha * np.asarray(s, dtype=dst.dtype), out=dst)


def add_scaled_to(
    dst: IntSequence, y: IntArrayLike, alpha: int, s: IntArrayLike
) -> IntSequence:
    """Compute ``dst = y + alpha * s``.

    ``dst`` may alias ``y`` or ``s``.

    Raises:
        LengthMismatchError: If ``dst``, ``y`` and ``s`` are not all the same
            length.
    """
    check_equal_lengths("add_scaled_to", dst, y, s)
    np.add(y, alpha * np.asarray(s, dtype=dst.dtype), out=dst)
    return dst


def scale(c: int, s: IntSequence) -> None:
    """Multiply every element of ``s`` by ``c`` in place."""
    np.multiply(s, c, out=s)


# =============================================================================
# Subtraction, Multiplication And Division
# =============================================================================


def subtract(s: IntSequence, t: IntArrayLike) -> None:
    """Compute ``s = s - t`` element-wise, in place."""
    check_equal_lengths("subtract", s, t)
    np.subtract(s, t, out=s)


def subtract_to(dst: IntSequence, s: IntArrayLike, t: IntArrayLike) -> IntSequence:
    """Compute ``dst = s - t`` element-wise and return ``dst``."""
    check_equal_lengths("subtract_to", dst, s, t)
    np.subtract(s, t, out=dst)
    return dst


def multiply(s: IntSequence, t: IntArrayLike) -> None:
    """Compute ``s = s * t`` element-wise, in place."""
    check_equal_lengths("multiply", s, t)
    np.multiply(s, t, out=s)


def multiply_to(dst: IntSequence, s: IntArrayLike, t: IntArrayLike) -> IntSequence:
    """Compute ``dst = s * t`` element-wise and return ``dst``."""
    check_equal_lengths("multiply_to", dst, s, t)
    np.multiply(s, t, out=dst)
    return dst


def _truncated_quotient(s: IntArrayLike, t: IntArrayLike) -> IntSequence:
    """Element-wise ``s / t`` rounded toward zero.

    NumPy's ``floor_divide`` rounds toward negative infinity. The two disagree
    exactly when the remainder is non-zero and the operands have opposite
    signs, in which case the floored quotient is one too small.
    """
    s = np.asarray(s)
    t = np.asarray(t)
    if np.any(t == 0):
        raise ZeroDivisionError("integer division by zero")
    # The most negative value divided by -1 wraps like any other overflow
    with np.errstate(over="ignore"):
        quotient = np.floor_divide(s, t)
        inexact = np.remainder(s, t) != 0
    opposite_signs = (s < 0) != (t < 0)
    return quotient + (inexact & opposite_signs)


def divide(s: IntSequence, t: IntArrayLike) -> None:
    """Compute ``s = s / t`` element-wise, in place, truncating toward zero.

    Raises:
        LengthMismatchError: If ``s`` and ``t`` differ in length.
        ZeroDivisionError: If any element of ``t`` is zero. ``s`` is not
            modified in that case.
    """
    check_equal_lengths("divide", s, t)
    s[...] = _truncated_quotient(s, t)


def divide_to(dst: IntSequence, s: IntArrayLike, t: IntArrayLike) -> IntSequence:
    """Compute ``dst = s / t`` element-wise, truncating toward zero.

    Args:
        dst: Destination buffer.
        s: Dividends.
        t: Divisors.

    Returns:
        ``dst``.

    Raises:
        LengthMismatchError: If ``dst``, ``s`` and ``t`` are not all the same
            length.
        ZeroDivisionError: If any element of ``t`` is zero.
    """
    check_equal_lengths("divide_to", dst, s, t)
    dst[...] = _truncated_quotient(s, t)
    return dst


# =============================================================================
# Running Totals And Spacing
# =============================================================================


def cumulative_sum(dst: IntSequence, s: IntArrayLike) -> IntSequence:
    """Running sum of ``s`` written into ``dst``.

    ``dst[0] = s[0]`` and ``dst[i] = dst[i - 1] + s[i]``.

    Raises:
        LengthMismatchError: If ``dst`` and ``s`` differ in length.
        EmptySequenceError: If ``s`` is empty.
    """
    check_equal_lengths("cumulative_sum", dst, s)
    check_not_empty("cumulative_sum", s)
    np.cumsum(s, dtype=dst.dtype, out=dst)
    return dst


def cumulative_product(dst: IntSequence, s: IntArrayLike) -> IntSequence:
    """Running product of ``s`` written into ``dst``.

    ``dst[0] = s[0]`` and ``dst[i] = dst[i - 1] * s[i]``.

    Raises:
        LengthMismatchError: If ``dst`` and ``s`` differ in length.
        EmptySequenceError: If ``s`` is empty.
    """
    check_equal_lengths("cumulative_product", dst, s)
    check_not_empty("cumulative_product", s)
    np.cumprod(s, dtype=dst.dtype, out=dst)
    return dst


def span(dst: IntSequence, lo: int, hi: int) -> IntSequence:
    """Fill ``dst`` with ``len(dst)`` evenly spaced values starting at ``lo``.

    The step is the integer ``(hi - lo) / (len(dst) - 1)`` truncated toward
    zero, and element ``i`` is ``lo + step * i``. The last element therefore
    equals ``hi`` only when the range divides evenly.

    Args:
        dst: Destination buffer with at least two elements.
        lo: First value.
        hi: Upper bound the spacing is derived from.

    Returns:
        ``dst``.

    Raises:
        SpanLengthError: If ``len(dst) < 2``.

    Example:
        >>> span(new_sequence(5), 1, 5)
        array([1, 2, 3, 4, 5])
    """
    n = len(dst)
    check_span_length(n)
    step = int(_truncated_quotient(hi - lo, n - 1))
    dst[...] = lo + step * np.arange(n, dtype=dst.dtype)
    return dst
