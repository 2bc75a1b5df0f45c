"""Functional primitives for intseq.

Stateless operations on one-dimensional integer sequences, grouped into
element-wise arithmetic, reductions, and callable-driven transforms. Nothing
here keeps state between calls, and only the documented target buffers are
written.
"""

from intseq.functional import arithmetic, reductions, transforms
from intseq.functional.arithmetic import (
    add,
    add_constant,
    add_scaled,
    add_scaled_to,
    subtract,
    subtract_to,
    multiply,
    multiply_to,
    divide,
    divide_to,
    scale,
    cumulative_sum,
    cumulative_product,
    span,
)
from intseq.functional.reductions import dot, product
from intseq.functional.transforms import (
    apply,
    fill,
    count,
    find,
    find_or_raise,
    argsort,
    equal,
    equal_func,
    equal_lengths,
)

__all__ = [
    "arithmetic",
    "reductions",
    "transforms",
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
    "dot",
    "product",
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
