"""
Track the n-th highest value in a stream of values.

The n-th highest value of a stream is the lowest value among the top n
values of the stream. RankedWindow keeps those top n values in a min-heap,
so the answer is always at the root of the heap.

Values must have a consistent strict total order through `<`. That is
not checked: values like float('nan') give undefined results.
"""

import logging
import operator
from typing import Generic, Iterable, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')


class InvalidArgumentError(ValueError):
    """ The window cannot be built with the requested capacity. """


class NullValueError(TypeError):
    """ None was offered as a stream value. """


class RankedWindow(Generic[T]):
    """
    A fixed-capacity min-heap of the highest values seen so far.

    update() runs in constant time when the new value is discarded, and in
    time logarithmic in the capacity otherwise. query() runs in constant
    time.
    """

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool):
            raise InvalidArgumentError(
                "RankedWindow capacity must be an integer.", capacity)
        try:
            capacity = operator.index(capacity)
        except TypeError:
            raise InvalidArgumentError(
                "RankedWindow capacity must be an integer.",
                capacity) from None
        if capacity < 1:
            raise InvalidArgumentError(
                "RankedWindow capacity must be greater than 0.", capacity)

        self._capacity: int = capacity
        # heap[0] is the smallest of the kept values
        self._heap: List[T] = []
        logger.debug('Created window with capacity %d.', capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._heap) == self._capacity

    def __len__(self) -> int:
        return len(self._heap)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(capacity={self._capacity}, "
            f"values={self.top_values()!r})"
        )

    def query(self) -> Optional[T]:
        """ Return the n-th highest value, or None until n values are seen. """
        if not self.is_full:
            return None
        return self._heap[0]

    def update(self, value: T) -> None:
        """ Offer a new stream value.

        Until the window is full, every value is kept. After that, a value
        replaces the current n-th highest only if it is strictly greater;
        anything else can't be in the top n and is dropped.

        :raises NullValueError: if value is None. The window is unchanged.
        """
        if value is None:
            raise NullValueError("RankedWindow does not accept None values.")

        heap = self._heap
        if not heap:
            heap.append(value)
        elif len(heap) < self._capacity:
            heap.append(value)
            self._sift_up(len(heap) - 1)
        elif heap[0] < value:
            heap[0] = value
            self._sift_down(0)

    def extend(self, values: Iterable[T]) -> None:
        """ Update with each value in order. """
        for value in values:
            self.update(value)

    def top_values(self) -> List[T]:
        """ List the kept values, highest first. """
        return sorted(self._heap, reverse=True)

    def _sift_up(self, child: int) -> None:
        heap = self._heap
        while child > 0:
            parent = (child - 1) // 2
            if not heap[child] < heap[parent]:
                break
            heap[child], heap[parent] = heap[parent], heap[child]
            child = parent

    def _sift_down(self, parent: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            child = 2 * parent + 1
            if child >= size:
                break
            right = child + 1
            if right < size and heap[right] < heap[child]:
                child = right
            if not heap[child] < heap[parent]:
                break
            heap[child], heap[parent] = heap[parent], heap[child]
            parent = child
