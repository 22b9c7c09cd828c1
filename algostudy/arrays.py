"""Prime checks, the Sieve of Eratosthenes, and a resizable array."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


def is_prime(n: int) -> bool:
    """Trial division by every integer in 2..n-1.

    Values below 2 have no divisors in that range and so report True.
    """
    return all(n % d != 0 for d in range(2, n))


def primes_up_to(n: int) -> list[int]:
    """Return all primes <= n using the Sieve of Eratosthenes."""
    if n < 2:
        return []
    sieve = bytearray([1]) * (n + 1)
    sieve[0] = sieve[1] = 0
    p = 2
    while p * p <= n:
        if sieve[p]:
            sieve[p * p :: p] = bytes(len(range(p * p, n + 1, p)))
        p += 1
    return [i for i, flag in enumerate(sieve) if flag]


class DynamicArray:
    """A resizable array that doubles its storage when full.

    Indexing and assignment are O(1); appending is amortised O(1);
    removal shifts the following elements left in O(n).
    """

    def __init__(self, capacity: int = 1) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots: list[Any] = [None] * capacity
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def _check(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range for size {self._size}")

    def __getitem__(self, index: int) -> Any:
        self._check(index)
        return self._slots[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._check(index)
        self._slots[index] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[: self._size])

    def __repr__(self) -> str:
        return f"DynamicArray({list(self)!r})"

    def append(self, value: Any) -> None:
        """Add value at the end, doubling capacity if the storage is full."""
        if self._size == len(self._slots):
            grown = len(self._slots) * 2
            self._slots = self._slots[: self._size] + [None] * (grown - self._size)
        self._slots[self._size] = value
        self._size += 1

    def remove_at(self, index: int) -> Any:
        """Remove and return the element at index, shifting later ones left."""
        self._check(index)
        removed = self._slots[index]
        self._slots[index : self._size - 1] = self._slots[index + 1 : self._size]
        self._size -= 1
        self._slots[self._size] = None
        return removed

    @property
    def capacity(self) -> int:
        """Number of slots currently allocated."""
        return len(self._slots)