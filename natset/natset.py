"""A compactly stored set of natural numbers.

A :class:`NatSet` keeps a mapping from slice index to slice word, see
:mod:`natset.slices`. Slices whose word would be zero are never stored, so two
sets are equal exactly when their mappings are equal, and the memory used is
proportional to the number of occupied slices rather than to the largest
element.

"""

from __future__ import annotations

import collections.abc
import functools
import itertools
import operator
from typing import (
    AbstractSet,
    Any,
    Callable,
    Iterable,
    Iterator,
    Mapping,
    MutableMapping,
    MutableSet,
    Optional,
    Tuple,
)

import toolz

from .slices import check_natural, slice_bit, slice_index, slice_members

_or_words = functools.partial(functools.reduce, operator.or_)


def _by_size(
    slices1: Mapping[int, int], slices2: Mapping[int, int]
) -> Tuple[Mapping[int, int], Mapping[int, int]]:
    """Return `slices1` and `slices2` ordered by number of occupied slices."""
    if len(slices1) > len(slices2):
        return slices2, slices1
    return slices1, slices2


class NatSet(MutableSet[int]):
    """A set of non-negative integers stored as sparse slices of bits.

    Parameters
    ----------
    values
        An iterable of non-negative integers to add to the set.

    Raises
    ------
    TypeError
        If any of `values` is not an integer
    ValueError
        If any of `values` is negative

    Examples
    --------
    >>> NatSet([3, 3, 3, 2, 2, 1])
    NatSet([1, 2, 3])

    """

    __slots__ = ("_slices",)

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._slices: MutableMapping[int, int] = {}

        for value in values:
            self.add(value)

    @classmethod
    def from_iterable(
        cls,
        values: Iterable[Any],
        transform: Callable[[Any], int] = toolz.identity,
    ) -> NatSet:
        """Construct a :class:`NatSet` from `values` via `transform`.

        Parameters
        ----------
        values
            Any iterable.
        transform
            A function mapping each of `values` to a non-negative integer.

        Examples
        --------
        >>> NatSet.from_iterable([1, 2, 1], lambda x: 2 * x)
        NatSet([2, 4])

        """
        return cls(map(transform, values))

    @classmethod
    def _from_iterable(cls, values: Iterable[int]) -> NatSet:
        return cls(values)

    @classmethod
    def _from_slices(cls, slices: MutableMapping[int, int]) -> NatSet:
        """Wrap `slices`, which must not be shared with any other set."""
        nat_set = cls()
        nat_set._slices = slices
        return nat_set

    @property
    def slices(self) -> Mapping[int, int]:
        """Return the mapping from slice index to slice word."""
        return self._slices

    def __contains__(self, value: Any) -> bool:
        """Check whether `value` is in the set.

        Raises
        ------
        ValueError
            If `value` is a negative integer

        """
        try:
            n = check_natural(value)
        except TypeError:
            return False
        return (self._slices.get(slice_index(n), 0) & slice_bit(n)) != 0

    def __iter__(self) -> Iterator[int]:
        """Iterate over the elements of the set in ascending order."""
        return itertools.chain.from_iterable(
            itertools.starmap(slice_members, sorted(self._slices.items()))
        )

    def __len__(self) -> int:
        """Return the number of elements in the set."""
        return toolz.count(iter(self))

    def __bool__(self) -> bool:
        return bool(self._slices)

    def __repr__(self) -> str:
        """Return the string representation of a natset."""
        values = str(self.to_list()) if self else ""
        return f"{self.__class__.__name__}({values})"

    def to_list(self) -> list[int]:
        """Return the elements of the set as an ascending list."""
        return list(self)

    def copy(self) -> NatSet:
        """Return a shallow copy of the set."""
        return self._from_slices(dict(self._slices))

    def collector(self) -> NatSetCollector:
        """Return a collector that adds items to this set."""
        return NatSetCollector(self)

    def add(self, value: int) -> None:
        """Add `value` to the set.

        Raises
        ------
        TypeError
            If `value` is not an integer
        ValueError
            If `value` is negative

        """
        n = check_natural(value)
        index = slice_index(n)
        self._slices[index] = self._slices.get(index, 0) | slice_bit(n)

    def discard(self, value: int) -> None:
        """Remove `value` from the set if it is present.

        Raises
        ------
        TypeError
            If `value` is not an integer
        ValueError
            If `value` is negative

        """
        n = check_natural(value)
        index = slice_index(n)
        word = self._slices.get(index)
        if word is None:
            return

        word &= ~slice_bit(n)
        if word:
            self._slices[index] = word
        else:
            del self._slices[index]

    def put(self, value: int) -> NatSet:
        """Add `value` to the set and return the set."""
        self.add(value)
        return self

    def delete(self, value: int) -> NatSet:
        """Remove `value` from the set if present and return the set."""
        self.discard(value)
        return self

    def clear(self) -> None:
        """Remove every element from the set."""
        self._slices.clear()

    def union(self, other: Iterable[int]) -> NatSet:
        """Return the elements that are in either `self` or `other`."""
        other = self._coerce(other)
        return self._from_slices(
            toolz.merge_with(_or_words, self._slices, other._slices)
        )

    def intersection(self, other: Iterable[int]) -> NatSet:
        """Return the elements that are in both `self` and `other`."""
        smaller, larger = _by_size(self._slices, self._coerce(other)._slices)
        return self._from_slices(
            toolz.valfilter(
                bool,
                {
                    index: word & larger.get(index, 0)
                    for index, word in smaller.items()
                },
            )
        )

    def difference(self, other: Iterable[int]) -> NatSet:
        """Return the elements of `self` that are not in `other`."""
        slices = self._coerce(other)._slices
        return self._from_slices(
            toolz.valfilter(
                bool,
                {
                    index: word & ~slices.get(index, 0)
                    for index, word in self._slices.items()
                },
            )
        )

    def issubset(self, other: Iterable[int]) -> bool:
        """Check whether every element of `self` is in `other`."""
        slices = self._coerce(other)._slices
        return all(
            (word & slices.get(index, 0)) == word
            for index, word in self._slices.items()
        )

    def issuperset(self, other: Iterable[int]) -> bool:
        """Check whether every element of `other` is in `self`."""
        return self._coerce(other).issubset(self)

    def isdisjoint(self, other: Iterable[Any]) -> bool:
        """Check whether `self` and `other` have no elements in common.

        Raises
        ------
        TypeError
            If any element of `other` is not an integer
        ValueError
            If any element of `other` is negative

        """
        smaller, larger = _by_size(self._slices, self._coerce(other)._slices)
        return not any(
            word & larger.get(index, 0) for index, word in smaller.items()
        )

    def _coerce(self, other: Iterable[int]) -> NatSet:
        return other if isinstance(other, NatSet) else type(self)(other)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, NatSet):
            return self._slices == other._slices
        return super().__eq__(other)

    def __le__(self, other: AbstractSet[Any]) -> bool:
        if isinstance(other, NatSet):
            return self.issubset(other)
        return super().__le__(other)

    def __lt__(self, other: AbstractSet[Any]) -> bool:
        if isinstance(other, NatSet):
            return self != other and self.issubset(other)
        return super().__lt__(other)

    def __ge__(self, other: AbstractSet[Any]) -> bool:
        if not isinstance(other, collections.abc.Set):
            return NotImplemented
        return self._coerce(other).issubset(self)

    def __gt__(self, other: AbstractSet[Any]) -> bool:
        if not isinstance(other, collections.abc.Set):
            return NotImplemented
        nat_set = self._coerce(other)
        return self != nat_set and nat_set.issubset(self)

    def __or__(self, other: AbstractSet[Any]) -> Any:
        if isinstance(other, NatSet):
            return self.union(other)
        return super().__or__(other)

    def __and__(self, other: AbstractSet[Any]) -> Any:
        if isinstance(other, NatSet):
            return self.intersection(other)
        return super().__and__(other)

    def __sub__(self, other: AbstractSet[Any]) -> Any:
        if isinstance(other, NatSet):
            return self.difference(other)
        return super().__sub__(other)

    def __rand__(self, other: AbstractSet[Any]) -> Any:
        if not isinstance(other, collections.abc.Set):
            return NotImplemented
        return self._coerce(other).intersection(self)

    def __rsub__(self, other: AbstractSet[Any]) -> Any:
        if not isinstance(other, collections.abc.Set):
            return NotImplemented
        return self._coerce(other).difference(self)

    # every element of `other` is validated before `self` is touched
    def __ior__(self, other: Iterable[Any]) -> Any:
        other = self._coerce(other)
        for index, word in list(other._slices.items()):
            self._slices[index] = self._slices.get(index, 0) | word
        return self

    def __iand__(self, other: Iterable[Any]) -> Any:
        self._slices = self.intersection(other)._slices
        return self

    def __isub__(self, other: Iterable[Any]) -> Any:
        self._slices = self.difference(other)._slices
        return self


class NatSetCollector:
    """Build a :class:`NatSet` one item at a time.

    Every call to :meth:`step` inserts into the underlying set, which is
    therefore complete after each step; :meth:`finalize` simply returns it.

    """

    __slots__ = ("nat_set",)

    def __init__(self, nat_set: Optional[NatSet] = None) -> None:
        self.nat_set = NatSet() if nat_set is None else nat_set

    def step(self, item: int) -> None:
        """Add `item` to the set being built."""
        self.nat_set.add(item)

    def finalize(self) -> NatSet:
        """Return the set built so far."""
        return self.nat_set
