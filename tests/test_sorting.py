import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.sorting import (
    bubble_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)


class Keyed:
    """Compares by key only, so equal keys reveal the output order."""

    def __init__(self, key, tag):
        self.key = key
        self.tag = tag

    def __lt__(self, other):
        return self.key < other.key

    def __le__(self, other):
        return self.key <= other.key

    def __gt__(self, other):
        return self.key > other.key

    def __ge__(self, other):
        return self.key >= other.key


@given(values=st.lists(st.integers(-10_000, 10_000), max_size=60))
def test_matches_builtin_sorted(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert insertion_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert selection_sort(values) == expected


@given(values=st.lists(st.integers(), max_size=30))
def test_does_not_mutate_input(values):
    original = list(values)
    bubble_sort(values)
    insertion_sort(values)
    merge_sort(values)
    quick_sort(values)
    selection_sort(values)
    assert values == original


@pytest.mark.parametrize(
    "values",
    [
        [2, 3, 1, 5, -6, 9, 7],
        [9, 5, 1, 4, 3],
        [38, 27, 43, 3, 9, 82, 10],
        [10, 7, 8, 9, 1, 5],
        [64, 25, 12, 22, 11],
    ],
)
def test_source_examples(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert insertion_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert selection_sort(values) == expected


def test_accepts_any_iterable():
    values = [4, 1, 3, 1]
    expected = [1, 1, 3, 4]
    assert bubble_sort(iter(values)) == expected
    assert insertion_sort(iter(values)) == expected
    assert merge_sort(iter(values)) == expected
    assert quick_sort(iter(values)) == expected
    assert selection_sort(iter(values)) == expected


def test_trivial_inputs():
    assert bubble_sort([]) == []
    assert insertion_sort([]) == []
    assert merge_sort([]) == []
    assert quick_sort([]) == []
    assert selection_sort([]) == []
    assert bubble_sort([42]) == [42]
    assert insertion_sort([42]) == [42]
    assert merge_sort([42]) == [42]
    assert quick_sort([42]) == [42]
    assert selection_sort([42]) == [42]


@given(keys=st.lists(st.integers(0, 4), max_size=40))
def test_stable_sorts_keep_equal_keys_in_order(keys):
    items = [Keyed(key, tag) for tag, key in enumerate(keys)]
    expected = sorted(((k, t) for t, k in enumerate(keys)), key=lambda pair: pair[0])
    assert [(item.key, item.tag) for item in bubble_sort(items)] == expected
    assert [(item.key, item.tag) for item in insertion_sort(items)] == expected
    assert [(item.key, item.tag) for item in merge_sort(items)] == expected