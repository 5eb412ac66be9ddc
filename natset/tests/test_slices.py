import pytest

from natset.slices import (
    SLICE_MASK,
    SLICE_SIZE,
    check_natural,
    slice_bit,
    slice_index,
    slice_members,
    slice_offset,
    slice_range,
)


def test_slice_size_is_power_of_two():
    assert SLICE_SIZE == 256
    assert SLICE_SIZE & SLICE_MASK == 0


@pytest.mark.parametrize(
    ("n", "index", "offset"),
    [(0, 0, 0), (1, 0, 1), (255, 0, 255), (256, 1, 0), (257, 1, 1), (1000, 3, 232)],
)
def test_slice_index_and_offset(n, index, offset):
    assert slice_index(n) == index
    assert slice_offset(n) == offset
    assert slice_bit(n) == 1 << offset


def test_slice_range():
    assert slice_range(0) == range(0, 256)
    assert slice_range(2) == range(512, 768)


def test_slice_members():
    word = slice_bit(512) | slice_bit(515) | slice_bit(767)
    assert list(slice_members(2, word)) == [512, 515, 767]


def test_slice_members_empty_word():
    assert list(slice_members(5, 0)) == []


def test_check_natural():
    assert check_natural(0) == 0
    assert check_natural(2 ** 100) == 2 ** 100


def test_check_natural_negative():
    with pytest.raises(ValueError, match="value == -1"):
        check_natural(-1)


@pytest.mark.parametrize("value", [1.0, "1", None])
def test_check_natural_not_an_integer(value):
    with pytest.raises(TypeError):
        check_natural(value)
