"""Linear and binary search over sequences of comparable values."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from typing import Any

NOT_FOUND = -1


def linear_search(items: Iterable[Any], target: Any) -> int:
    """Return the index of the first element equal to target, or -1. O(n)."""
    for index, value in enumerate(items):
        if value == target:
            return index
    return NOT_FOUND


def binary_search(items: Iterable[Any], target: Any) -> int:
    """Return the index of target within sorted(items), or -1.

    The input is sorted first (O(n log n)); the search itself is O(log n).
    """
    ordered: Sequence[Any] = sorted(items)
    left, right = 0, len(ordered) - 1
    while left <= right:
        mid = (left + right) // 2
        if ordered[mid] == target:
            return mid
        if target > ordered[mid]:
            left = mid + 1
        else:
            right = mid - 1
    return NOT_FOUND


def main(argv: list[str] | None = None) -> int:
    """Search for a target among integers, or run the built-in examples."""
    parser = argparse.ArgumentParser(description="Search a list of integers.")
    parser.add_argument("target", nargs="?", type=int, help="value to look for")
    parser.add_argument("numbers", nargs="*", type=int, help="values to search")
    parser.add_argument(
        "--binary", action="store_true",
        help="use binary search (index refers to the sorted list)",
    )
    args = parser.parse_args(argv)
    if args.target is None:
        print(binary_search([1, 3, 5, 7, 9], 5))
        print(linear_search([10, 2, 30, 5, 3], 5))
        return 0
    search = binary_search if args.binary else linear_search
    print(search(args.numbers, args.target))
    return 0