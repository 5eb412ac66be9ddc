"""Functional interface to natsets.

The functions in this module never modify their arguments: every function that
produces a :class:`~natset.NatSet` returns a new one that shares no storage
with its inputs.

Examples
--------
>>> from natset.api import new, put, to_list, union
>>> s = new([3, 1, 4])
>>> to_list(put(s, 2))
[1, 2, 3, 4]
>>> to_list(s)
[1, 3, 4]
>>> to_list(union(s, new(range(5, 8))))
[1, 3, 4, 5, 6, 7]

"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional

import toolz
from public import public

from .natset import NatSet
from .slices import check_natural


@public  # type: ignore[misc]
def new(
    values: Iterable[Any] = (), transform: Callable[[Any], int] = toolz.identity
) -> NatSet:
    """Construct a natset from `values`, applying `transform` to each value.

    Parameters
    ----------
    values
        Any iterable. Duplicates are collapsed.
    transform
        A function mapping each of `values` to a non-negative integer.

    Raises
    ------
    TypeError
        If a transformed value is not an integer
    ValueError
        If a transformed value is negative

    """
    return NatSet.from_iterable(values, transform)


@public  # type: ignore[misc]
def member(nat_set: NatSet, n: int) -> bool:
    """Check whether `nat_set` contains `n`.

    Raises
    ------
    TypeError
        If `n` is not an integer
    ValueError
        If `n` is negative

    """
    return check_natural(n) in nat_set


@public  # type: ignore[misc]
def put(nat_set: NatSet, n: int) -> NatSet:
    """Return a copy of `nat_set` that contains `n`."""
    n = check_natural(n)
    return nat_set.copy().put(n)


@public  # type: ignore[misc]
def delete(nat_set: NatSet, n: int) -> NatSet:
    """Return a copy of `nat_set` that does not contain `n`."""
    n = check_natural(n)
    return nat_set.copy().delete(n)


@public  # type: ignore[misc]
def size(nat_set: NatSet) -> int:
    """Return the number of elements in `nat_set`."""
    return len(nat_set)


@public  # type: ignore[misc]
def union(nat_set1: NatSet, nat_set2: NatSet) -> NatSet:
    """Return the elements that occur in `nat_set1` or `nat_set2`."""
    return nat_set1.union(nat_set2)


@public  # type: ignore[misc]
def intersection(nat_set1: NatSet, nat_set2: NatSet) -> NatSet:
    """Return the elements that occur in both `nat_set1` and `nat_set2`."""
    return nat_set1.intersection(nat_set2)


@public  # type: ignore[misc]
def difference(nat_set1: NatSet, nat_set2: NatSet) -> NatSet:
    """Return the elements of `nat_set1` that are not in `nat_set2`."""
    return nat_set1.difference(nat_set2)


@public  # type: ignore[misc]
def disjoint(nat_set1: NatSet, nat_set2: NatSet) -> bool:
    """Check whether `nat_set1` and `nat_set2` have no elements in common."""
    return nat_set1.isdisjoint(nat_set2)


@public  # type: ignore[misc]
def subset(nat_set1: NatSet, nat_set2: NatSet) -> bool:
    """Check whether every element of `nat_set1` occurs in `nat_set2`."""
    return nat_set1.issubset(nat_set2)


@public  # type: ignore[misc]
def equal(nat_set1: NatSet, nat_set2: NatSet) -> bool:
    """Check whether `nat_set1` and `nat_set2` have the same elements."""
    return nat_set1 == nat_set2


@public  # type: ignore[misc]
def to_stream(nat_set: NatSet) -> Iterator[int]:
    """Return a lazy iterator over the elements of `nat_set` in ascending order."""
    return iter(nat_set)


@public  # type: ignore[misc]
def to_list(nat_set: NatSet) -> list[int]:
    """Return the elements of `nat_set` as an ascending list."""
    return nat_set.to_list()


@public  # type: ignore[misc]
def into(values: Iterable[int], nat_set: Optional[NatSet] = None) -> NatSet:
    """Collect `values` into a copy of `nat_set`, or into a new natset.

    Examples
    --------
    >>> into(range(3), new([10]))
    NatSet([0, 1, 2, 10])

    """
    collector = (NatSet() if nat_set is None else nat_set.copy()).collector()
    for value in values:
        collector.step(value)
    return collector.finalize()
