import numpy as np
import pytest

from intseq.core.types import IndexedValue, as_sequence, new_sequence


def test_as_sequence_from_list():
    s = as_sequence([3, 4, 1])
    assert isinstance(s, np.ndarray)
    assert s.dtype == np.int64
    assert s.tolist() == [3, 4, 1]


def test_as_sequence_copies():
    source = np.array([1, 2, 3])
    s = as_sequence(source)
    s[0] = 99
    assert source[0] == 1


def test_as_sequence_empty():
    s = as_sequence([])
    assert s.shape == (0,)
    assert s.dtype == np.int64


def test_as_sequence_custom_dtype():
    assert as_sequence([1, 2], dtype=np.int32).dtype == np.int32


def test_as_sequence_rejects_floats():
    with pytest.raises(TypeError, match="integers"):
        as_sequence([1.5, 2.0])


def test_as_sequence_rejects_matrices():
    with pytest.raises(ValueError, match="one-dimensional"):
        as_sequence([[1, 2], [3, 4]])


def test_new_sequence():
    s = new_sequence(4)
    assert s.tolist() == [0, 0, 0, 0]
    assert s.dtype == np.int64
    assert new_sequence(0).shape == (0,)

    with pytest.raises(ValueError, match="non-negative"):
        new_sequence(-1)


def test_indexed_value_unpacks():
    value, index = IndexedValue(value=5, index=2)
    assert (value, index) == (5, 2)
