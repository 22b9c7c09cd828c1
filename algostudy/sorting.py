"""Classic comparison sorts: bubble, insertion, selection, merge and quick sort.

Every function takes an iterable and returns a new sorted list; the input is
never modified.
"""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable
from typing import Any

DEMO_NUMBERS = (89, 45, 68, 90, 29, 34, 17)


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs. O(n^2)."""
    result = list(items)
    n = len(result)
    for passes in range(n - 1):
        for j in range(n - 1 - passes):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix. O(n^2)."""
    result = list(items)
    for i in range(1, len(result)):
        value = result[i]
        j = i - 1
        while j >= 0 and result[j] > value:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = value
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining element to the front. O(n^2)."""
    result = list(items)
    n = len(result)
    for i in range(n - 1):
        smallest = min(range(i, n), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Stable divide-and-conquer sort. O(n log n)."""
    result = list(items)
    if len(result) <= 1:
        return result
    mid = (len(result) - 1) // 2 + 1
    return _merge(merge_sort(result[:mid]), merge_sort(result[mid:]))


def _partition(values: list[Any], left: int, right: int) -> int:
    pivot = values[left]
    i, j = left, right
    while i < j:
        i += 1
        while i <= right and values[i] <= pivot:
            i += 1
        while values[j] > pivot:
            j -= 1
        if i < j:
            values[i], values[j] = values[j], values[i]
    values[left], values[j] = values[j], values[left]
    return j


def _quick_sort(values: list[Any], left: int, right: int) -> None:
    while left < right:
        pivot = _partition(values, left, right)
        # Recurse on the smaller side to bound the stack depth.
        if pivot - left < right - pivot:
            _quick_sort(values, left, pivot - 1)
            left = pivot + 1
        else:
            _quick_sort(values, pivot + 1, right)
            right = pivot - 1


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Partition around the first element, then sort each side. O(n log n) average."""
    result = list(items)
    _quick_sort(result, 0, len(result) - 1)
    return result


ALGORITHMS: dict[str, Callable[[Iterable[Any]], list[Any]]] = {
    "bubble": bubble_sort,
    "insertion": insertion_sort,
    "selection": selection_sort,
    "merge": merge_sort,
    "quick": quick_sort,
}


def main(argv: list[str] | None = None) -> int:
    """Sort integers given on the command line and print them."""
    parser = argparse.ArgumentParser(description="Sort a list of integers.")
    parser.add_argument("numbers", nargs="*", type=int, help="integers to sort")
    parser.add_argument(
        "--algorithm", "-a", choices=sorted(ALGORITHMS), default="merge",
        help="sorting algorithm to use",
    )
    args = parser.parse_args(argv)
    numbers = args.numbers or list(DEMO_NUMBERS)
    print(" ".join(str(n) for n in ALGORITHMS[args.algorithm](numbers)))
    return 0