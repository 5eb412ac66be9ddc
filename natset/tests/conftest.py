from __future__ import annotations

import pytest

from natset import NatSet
from natset.slices import SLICE_SIZE


@pytest.fixture  # type: ignore[misc]
def empty() -> NatSet:
    return NatSet()


@pytest.fixture  # type: ignore[misc]
def small() -> NatSet:
    return NatSet([1, 3, 4])


@pytest.fixture  # type: ignore[misc]
def straddling() -> NatSet:
    """A set whose elements sit on both sides of the first slice boundary."""
    return NatSet([0, SLICE_SIZE - 1, SLICE_SIZE, SLICE_SIZE + 1])


@pytest.fixture  # type: ignore[misc]
def sparse() -> NatSet:
    return NatSet([7, 10 ** 6, 2 ** 70, 3 * SLICE_SIZE])


@pytest.fixture(  # type: ignore[misc]
    params=[
        [],
        [0],
        [1, 3, 4],
        list(range(5, 16)),
        list(range(10, 26)),
        list(range(0, 1000, 3)),
        list(range(0, 1000, 5)),
        [255, 256, 257, 511, 512],
        [7, 10 ** 6, 2 ** 70],
    ],
    ids=[
        "empty",
        "zero",
        "small",
        "5-15",
        "10-25",
        "multiples-of-3",
        "multiples-of-5",
        "slice-edges",
        "sparse",
    ],
)
def values(request: pytest.FixtureRequest) -> list[int]:
    return request.param
