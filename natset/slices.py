"""Bit arithmetic on the slices that make up a :class:`~natset.NatSet`.

The natural numbers are partitioned into contiguous blocks of
:data:`SLICE_SIZE` values called *slices*. Slice ``k`` covers the numbers

    ``k * SLICE_SIZE, ..., (k + 1) * SLICE_SIZE - 1``

and is stored as a single integer *word* whose least significant bit
represents the first number in that range.

"""

import operator
from typing import Any, Iterator

SLICE_POW = 8
SLICE_SIZE = 1 << SLICE_POW
SLICE_MASK = SLICE_SIZE - 1


def check_natural(value: Any) -> int:
    """Return `value` as an :class:`int`, requiring it to be non-negative.

    Raises
    ------
    TypeError
        If `value` is not an integer
    ValueError
        If `value` is negative

    """
    n = operator.index(value)
    if n < 0:
        raise ValueError(f"value not greater than or equal to 0, value == {n}")
    return n


def slice_index(n: int) -> int:
    """Return the index of the slice containing `n`."""
    return n >> SLICE_POW


def slice_offset(n: int) -> int:
    """Return the bit position of `n` within its slice."""
    return n & SLICE_MASK


def slice_bit(n: int) -> int:
    """Return the word with only the bit for `n` set."""
    return 1 << slice_offset(n)


def slice_range(index: int) -> range:
    """Return the values covered by slice `index`, in ascending order."""
    first = index << SLICE_POW
    return range(first, first + SLICE_SIZE)


def slice_members(index: int, word: int) -> Iterator[int]:
    """Iterate over the values whose bits are set in `word`.

    Parameters
    ----------
    index
        The slice index `word` is stored under.
    word
        The bits of the slice.

    """
    return (n for n in slice_range(index) if (word >> slice_offset(n)) & 1)
