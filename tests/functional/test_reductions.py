import numpy as np
import pytest

from intseq import IndexedValue, as_sequence
from intseq.core.errors import EmptySequenceError, LengthMismatchError
from intseq.functional import reductions
from intseq.functional.arithmetic import cumulative_sum


def test_sum():
    assert reductions.sum(as_sequence([])) == 0
    assert reductions.sum(as_sequence([3, 4, 1, 7, 5])) == 20
    assert reductions.sum([-1, 1]) == 0


def test_product():
    assert reductions.product(as_sequence([])) == 1
    assert reductions.product(as_sequence([3, 4, 1, 7, 5])) == 420


def test_reductions_return_python_int():
    assert type(reductions.sum(as_sequence([1, 2]))) is int
    assert type(reductions.product(as_sequence([1, 2]))) is int
    assert type(reductions.dot([1], [2])) is int


def test_dot():
    s1 = as_sequence([1, 2, 3, 4])
    s2 = as_sequence([-3, 4, 5, -6])
    assert reductions.dot(s1, s2) == -4
    assert reductions.dot(as_sequence([]), as_sequence([])) == 0

    with pytest.raises(LengthMismatchError):
        reductions.dot(as_sequence([1, 2]), as_sequence([1, 2, 3]))


def test_sum_wraps_on_overflow():
    s = as_sequence([2**62, 2**62])
    assert reductions.sum(s) == -(2**63)


def test_max():
    value, index = reductions.max(as_sequence([3, 4, 1, 7, 5]))
    assert (value, index) == (7, 3)


def test_min():
    result = reductions.min(as_sequence([3, 4, 1, 7, 5]))
    assert result == IndexedValue(value=1, index=2)
    assert result.value == 1
    assert result.index == 2


def test_extremes_report_first_index():
    s = as_sequence([5, 1, 5, 1])
    assert reductions.max(s) == (5, 0)
    assert reductions.min(s) == (1, 1)


def test_extremes_single_element():
    s = as_sequence([-9])
    assert reductions.max(s) == (-9, 0)
    assert reductions.min(s) == (-9, 0)


@pytest.mark.parametrize("op", [reductions.min, reductions.max])
def test_extremes_empty(op):
    with pytest.raises(EmptySequenceError):
        op(as_sequence([]))


def test_reductions_do_not_mutate():
    s = as_sequence([3, 4, 1, 7, 5])
    reductions.sum(s)
    reductions.product(s)
    reductions.max(s)
    reductions.min(s)
    reductions.dot(s, s)
    assert np.array_equal(s, [3, 4, 1, 7, 5])


def test_narrow_dtype_reductions_wrap_like_cumulative_sum():
    s = as_sequence([2**31 - 1, 1], dtype=np.int32)
    running = np.zeros(2, dtype=np.int32)
    cumulative_sum(running, s)

    assert reductions.sum(s) == int(running[-1]) == -(2**31)
    assert reductions.product(as_sequence([2**16, 2**16], dtype=np.int32)) == 0
