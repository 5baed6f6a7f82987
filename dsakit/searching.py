"""Binary search over sorted sequences, iterative and recursive."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Any


def binary_search_iterative(items: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in the sorted ``items``, or None if absent."""
    start, end = 0, len(items) - 1
    while start <= end:
        mid = start + (end - start) // 2
        value = items[mid]
        if value == target:
            return mid
        if value < target:
            start = mid + 1
        else:
            end = mid - 1
    return None


def binary_search_recursive(items: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in the sorted ``items``, or None if absent."""

    def search(start: int, end: int) -> int | None:
        if start > end:
            return None
        mid = start + (end - start) // 2
        value = items[mid]
        if value == target:
            return mid
        if value < target:
            return search(mid + 1, end)
        return search(start, mid - 1)

    return search(0, len(items) - 1)


def _report(label: str, target: int, index: int | None) -> str:
    if index is None:
        return f"{label}: Element {target} not found in the array."
    return f"{label}: Element {target} found at index {index}."


def main(argv: list[str] | None = None) -> int:
    """Read a size, sorted elements and a target from stdin and search for it."""
    parser = argparse.ArgumentParser(
        prog="dsakit-search",
        description="Search a sorted list of integers read from standard input.",
    )
    parser.parse_args(argv)

    tokens = iter(sys.stdin.read().split())

    def next_int() -> int:
        return int(next(tokens))

    try:
        print("Enter the size of the sorted array: ", end="")
        size = next_int()
        if size < 0:
            raise ValueError("negative size")
        print(f"Enter {size} sorted elements:")
        items = [next_int() for _ in range(size)]
        print("Enter the element to search for: ", end="")
        target = next_int()
    except (StopIteration, ValueError):
        print()
        print("error: expected a non-negative size, that many integers and a target",
              file=sys.stderr)
        return 1

    print(_report("Iterative", target, binary_search_iterative(items, target)))
    print(_report("Recursive", target, binary_search_recursive(items, target)))
    return 0