import pytest

from intset.utils.array import FixedArray


def test_new_array_is_empty():
    """
    Tests that every slot of a new array holds the sentinel.
    """

    arr = FixedArray(4)
    assert len(arr) == 4
    assert [arr[idx] for idx in range(0, 4)] == [None, None, None, None]


def test_set_and_get():
    arr = FixedArray(3)
    arr[0] = 10
    arr[2] = -5

    assert arr[0] == 10
    assert arr[1] is None
    assert arr[2] == -5

    arr[0] = None
    assert arr[0] is None


@pytest.mark.parametrize("idx", [-1, 3, 100])
def test_out_of_range(idx: int):
    """
    Tests that indexes outside the array are rejected, including negative ones.
    """

    arr = FixedArray(3)

    with pytest.raises(IndexError):
        arr[idx]

    with pytest.raises(IndexError):
        arr[idx] = 1


def test_zero_size():
    arr = FixedArray(0)
    assert len(arr) == 0

    with pytest.raises(IndexError):
        arr[0]


@pytest.mark.parametrize("size", [-1, 2.5, "3", True])
def test_invalid_size(size: object):
    """
    Tests that only non-negative integer sizes are accepted.
    """

    with pytest.raises(ValueError):
        FixedArray(size)  # type: ignore
