"""Protocol classes for building collections incrementally."""

import abc
from typing import TypeVar

from typing_extensions import Protocol

Item = TypeVar("Item", contravariant=True)
Collection = TypeVar("Collection", covariant=True)


class Collector(Protocol[Item, Collection]):
    """A protocol for objects that accumulate a collection one item at a time.

    A collector is fed with :meth:`step` for every incoming item and produces
    the built collection from :meth:`finalize`.

    """

    @abc.abstractmethod
    def step(self, item: Item) -> None:
        """Add `item` to the collection being built."""

    @abc.abstractmethod
    def finalize(self) -> Collection:
        """Return the collection built so far."""
