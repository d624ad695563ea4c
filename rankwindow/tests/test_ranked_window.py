"""
Unit tests for the RankedWindow data structure.
"""
import random

import pytest
from sortedcontainers import SortedList

from rankwindow.core.ranked_window import (
    InvalidArgumentError,
    NullValueError,
    RankedWindow,
)


def assert_heap_order(window: RankedWindow) -> None:
    heap = window._heap
    for i, value in enumerate(heap):
        for child in (2*i + 1, 2*i + 2):
            if child < len(heap):
                assert value <= heap[child], (i, heap)


@pytest.fixture
def example_window() -> RankedWindow[int]:
    """
    Provides a window of capacity 3 after the stream 2, 1, 7, 8, 4.
    """
    window = RankedWindow[int](capacity=3)
    for value in [2, 1, 7, 8, 4]:
        window.update(value)
    # Top three are 8, 7, 4.
    return window


def test_sequence_larger_than_capacity(example_window):
    assert example_window.query() == 4


def test_sequence_smaller_than_capacity():
    window = RankedWindow[int](2)

    window.update(10)

    assert window.query() is None


def test_capacity_one_tracks_maximum():
    window = RankedWindow[int](1)

    window.extend([5, 9, 2])

    assert window.query() == 9


def test_empty():
    window = RankedWindow[int](4)

    assert window.query() is None
    assert len(window) == 0
    assert not window.is_full
    assert window.top_values() == []


@pytest.mark.parametrize('capacity', [0, -1, -100])
def test_capacity_must_be_positive(capacity):
    with pytest.raises(InvalidArgumentError,
                       match='capacity must be greater than 0'):
        RankedWindow(capacity)


@pytest.mark.parametrize('capacity', [2.0, '3', None, True])
def test_capacity_must_be_integer(capacity):
    with pytest.raises(InvalidArgumentError):
        RankedWindow(capacity)


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        RankedWindow(0)


def test_reject_none():
    window = RankedWindow[int](2)

    with pytest.raises(NullValueError):
        window.update(None)

    assert len(window) == 0


def test_reject_none_leaves_full_window_unchanged(example_window):
    before = example_window.top_values()

    with pytest.raises(NullValueError):
        example_window.update(None)

    assert example_window.query() == 4
    assert example_window.top_values() == before


def test_extend_stops_at_none():
    window = RankedWindow[int](2)

    with pytest.raises(NullValueError):
        window.extend([3, 5, None, 9])

    assert window.query() == 3
    assert window.top_values() == [5, 3]


def test_fills_before_answering():
    window = RankedWindow[int](3)
    results = []

    for value in [4, 6, 5, 1]:
        window.update(value)
        results.append(window.query())

    assert results == [None, None, 4, 4]


def test_first_answer_is_minimum_of_first_values():
    window = RankedWindow[int](4)

    window.extend([9, 3, 12, 7])

    assert window.query() == 3
    assert window.is_full


def test_lower_value_is_discarded(example_window):
    example_window.update(3)
    example_window.update(4)  # ties with the current answer

    assert example_window.query() == 4
    assert example_window.top_values() == [8, 7, 4]


def test_higher_value_replaces_answer(example_window):
    example_window.update(10)

    assert example_window.query() == 7
    assert example_window.top_values() == [10, 8, 7]


def test_duplicates_count_separately():
    window = RankedWindow[int](3)

    window.extend([5, 5, 5, 1, 5])

    assert window.query() == 5
    assert window.top_values() == [5, 5, 5]


def test_repeated_query(example_window):
    assert example_window.query() == example_window.query() == 4


def test_strings():
    window = RankedWindow[str](2)

    window.extend(['pear', 'apple', 'quince', 'fig'])

    assert window.query() == 'pear'


def test_len_and_capacity(example_window):
    assert len(example_window) == 3
    assert example_window.capacity == 3


def test_len_grows_until_full():
    window = RankedWindow[int](3)
    sizes = []

    for value in range(5):
        window.update(value)
        sizes.append(len(window))

    assert sizes == [1, 2, 3, 3, 3]


def test_repr(example_window):
    assert repr(example_window) == 'RankedWindow(capacity=3, values=[8, 7, 4])'


def test_heap_order_after_descending_stream():
    window = RankedWindow[int](7)

    for value in range(20, 0, -1):
        window.update(value)
        assert_heap_order(window)

    assert window.query() == 14


def test_heap_order_after_ascending_stream():
    window = RankedWindow[int](6)

    for value in range(20):
        window.update(value)
        assert_heap_order(window)

    assert window.query() == 14


@pytest.mark.parametrize('seed', range(20))
@pytest.mark.parametrize('capacity', [1, 2, 3, 8, 31])
def test_random_stream(seed, capacity):
    """ Compare against a sorted list that keeps every value. """
    rng = random.Random(seed)
    window = RankedWindow[int](capacity)
    seen = SortedList()

    for _ in range(200):
        value = rng.randint(-50, 50)
        window.update(value)
        seen.add(value)

        expected = seen[-capacity] if len(seen) >= capacity else None
        assert window.query() == expected
        assert_heap_order(window)
    assert window.top_values() == list(reversed(seen[-capacity:]))


@pytest.mark.parametrize('seed', range(10))
def test_answer_never_decreases(seed):
    rng = random.Random(seed)
    window = RankedWindow[float](5)
    window.extend(rng.random() for _ in range(5))
    previous = window.query()

    for _ in range(500):
        window.update(rng.random())
        current = window.query()
        assert current is not None
        assert current >= previous
        previous = current


class IndexLike:
    """ Integer-like capacity, as numpy integers are. """
    def __init__(self, value: int):
        self.value = value

    def __index__(self) -> int:
        return self.value


def test_capacity_accepts_index_like():
    window = RankedWindow[int](IndexLike(2))

    window.extend([4, 9, 1])

    assert window.capacity == 2
    assert type(window.capacity) is int
    assert window.query() == 4


def test_capacity_index_like_must_be_positive():
    with pytest.raises(InvalidArgumentError,
                       match='capacity must be greater than 0'):
        RankedWindow(IndexLike(0))
