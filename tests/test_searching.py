import io

from hypothesis import assume, given
from hypothesis import strategies as st

from dsakit.searching import binary_search_iterative, binary_search_recursive, main

sorted_unique = st.sets(st.integers(-1000, 1000), max_size=50).map(sorted)


@given(items=sorted_unique)
def test_finds_every_element(items):
    iterative = [binary_search_iterative(items, value) for value in items]
    recursive = [binary_search_recursive(items, value) for value in items]
    expected = list(range(len(items)))
    assert iterative == expected
    assert recursive == expected


@given(items=sorted_unique, target=st.integers(-1100, 1100))
def test_absent_target_gives_none(items, target):
    assume(target not in items)
    assert binary_search_iterative(items, target) is None
    assert binary_search_recursive(items, target) is None


def test_empty_sequence():
    assert binary_search_iterative([], 5) is None
    assert binary_search_recursive([], 5) is None


@given(items=st.lists(st.integers(0, 5), min_size=1, max_size=40).map(sorted))
def test_duplicates_point_at_equal_element(items):
    values = sorted(set(items))
    assert [items[binary_search_iterative(items, value)] for value in values] == values
    assert [items[binary_search_recursive(items, value)] for value in values] == values


@given(items=sorted_unique, target=st.integers(-1100, 1100))
def test_iterative_and_recursive_agree(items, target):
    assert binary_search_iterative(items, target) == binary_search_recursive(items, target)


def test_main_reports_found(monkeypatch, capsys):
    items = [1, 3, 5, 7, 9]
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n1 3 5 7 9\n7\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert f"Iterative: Element 7 found at index {items.index(7)}." in out
    assert f"Recursive: Element 7 found at index {items.index(7)}." in out


def test_main_reports_missing(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n2 4 6\n5\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Iterative: Element 5 not found in the array." in out
    assert "Recursive: Element 5 not found in the array." in out


def test_main_rejects_short_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n1 2\n"))
    assert main([]) == 1