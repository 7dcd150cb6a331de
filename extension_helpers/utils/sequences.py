"""Sequence helpers: in-place reordering and lazy batching.

``reverse``, ``swap`` and ``shuffle`` mutate the sequence they are given and
return None. They expect exclusive access to it for the duration of the call.
Arguments are validated before the first element is touched.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, MutableSequence
from itertools import islice
from typing import Generic, Protocol, TypeVar

from ..errors import InvalidArgumentError, OutOfRangeError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything that draws integers like :meth:`random.Random.randrange`."""

    def randrange(self, start: int, stop: int) -> int: ...


def reverse(items: MutableSequence[T]) -> None:
    """Reverse ``items`` in place by swapping from both ends toward the middle.

    Performs exactly ``len(items) // 2`` swaps.

    Example:
        >>> values = [1, 2, 3]
        >>> reverse(values)
        >>> values
        [3, 2, 1]
    """
    last = len(items) - 1
    for i in range(len(items) // 2):
        items[i], items[last - i] = items[last - i], items[i]


def swap(items: MutableSequence[T], i: int, j: int) -> None:
    """Exchange the elements at positions ``i`` and ``j``.

    Args:
        items: Sequence to modify.
        i: First position, in ``[0, len(items))``.
        j: Second position, in ``[0, len(items))``.

    Raises:
        OutOfRangeError: If either position is outside the sequence. Negative
            positions are rejected rather than counted from the end.
    """
    size = len(items)
    for index in (i, j):
        if not 0 <= index < size:
            raise OutOfRangeError(f"Index {index} is out of range for length {size}")
    items[i], items[j] = items[j], items[i]


def shuffle(items: MutableSequence[T], rng: RandomSource) -> None:
    """Shuffle ``items`` in place with the Fisher-Yates algorithm.

    Each position ``i`` from the front is swapped with a position drawn
    uniformly from ``[i, len(items))``. The caller owns ``rng``, so seeding it
    makes the permutation reproducible; the global :mod:`random` state is
    never used.

    Args:
        items: Sequence to permute.
        rng: Random source, typically a seeded :class:`random.Random`.

    Raises:
        InvalidArgumentError: If ``rng`` is None.
    """
    if rng is None:
        raise InvalidArgumentError("rng must not be None")
    size = len(items)
    logger.debug("Shuffling %d items", size)
    for i in range(size - 1):
        swap(items, i, rng.randrange(i, size))


class Batches(Generic[T]):
    """Iterable of consecutive fixed-size chunks of a source iterable.

    Every call to ``iter()`` walks the source once from its start, pulling
    only as many elements as the current chunk needs. Iterating twice yields
    the same chunks when the source itself can be iterated twice (lists,
    tuples, ranges); a one-shot iterator is consumed by the first pass.
    """

    def __init__(self, items: Iterable[T], max_items: int) -> None:
        if max_items <= 0:
            raise InvalidArgumentError(f"max_items must be positive, got {max_items}")
        self.items = items
        self.max_items = max_items

    def __iter__(self) -> Iterator[list[T]]:
        iterator = iter(self.items)
        while chunk := list(islice(iterator, self.max_items)):
            yield chunk

    def __repr__(self) -> str:
        return f"Batches({self.items!r}, max_items={self.max_items})"


def batch(items: Iterable[T], max_items: int) -> Batches[T]:
    """Split ``items`` into chunks of ``max_items``, preserving order.

    Every chunk holds ``max_items`` elements except possibly the last, which
    holds the remainder. Nothing is read from ``items`` until the result is
    iterated, so infinite generators are fine.

    Args:
        items: Source elements.
        max_items: Chunk size.

    Returns:
        A lazy, re-iterable :class:`Batches` of lists.

    Raises:
        InvalidArgumentError: If ``max_items`` is not positive. Raised at call
            time, before iteration starts.

    Example:
        >>> list(batch([1, 2, 3, 4, 5], 2))
        [[1, 2], [3, 4], [5]]
    """
    batches = Batches(items, max_items)
    logger.debug("Batching into chunks of %d", max_items)
    return batches
