"""Recursion examples: mutual, tail and non-tail recursion, fast powers,
palindromes and recursive binary search."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from typing import Any

NOT_FOUND = -1


def _odd(n: int, limit: int) -> Iterator[int]:
    if n <= limit:
        yield n + 1
        yield from _even(n + 1, limit)


def _even(n: int, limit: int) -> Iterator[int]:
    if n <= limit:
        yield n - 1
        yield from _odd(n + 1, limit)


def alternating_sequence(limit: int = 10) -> list[int]:
    """Produce values via two mutually recursive steps for counters 1..limit.

    Odd counters emit counter + 1, even counters emit counter - 1.
    """
    return list(_odd(1, limit))


def countdown(n: int) -> list[int]:
    """Return n, n-1, ..., 1 (the values a tail-recursive countdown visits)."""
    if n < 0:
        raise ValueError("countdown requires a non-negative start")
    return list(range(n, 0, -1))


def raise_iterative(base: int, exp: int) -> int:
    """Multiply base into 1 for each step from 1 up to exp - 1.

    This yields base ** (exp - 1) for exp >= 1 and 1 otherwise.
    """
    result = 1
    for _ in range(1, exp):
        result *= base
    return result


def raise_recursive(base: int, exp: int) -> int:
    """Compute base ** exp as base * base ** (exp - 1)."""
    if exp < 0:
        raise ValueError("exponent must be non-negative")
    if exp == 0:
        return 1
    return base * raise_recursive(base, exp - 1)


def _trunc_half(n: int) -> int:
    half = abs(n) // 2
    return half if n >= 0 else -half


def raise_fast(base: int, exp: int) -> int:
    """Compute a power by squaring the half power; depth is O(log exp).

    Halving truncates toward zero, so a negative exponent gives base ** -exp.
    """
    if exp == 0:
        return 1
    half = raise_fast(base, _trunc_half(exp))
    if exp % 2 == 0:
        return half * half
    return base * half * half


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def power(x: int, n: int) -> int:
    """Integer power; negative exponents use truncating integer division."""
    if n == 0:
        return 1
    if n > 0:
        if n % 2 == 0:
            y = power(x, n // 2)
            return y * y
        return x * power(x, n - 1)
    return _trunc_div(1, x * power(x, -n - 1))


def is_palindrome(text: str) -> bool:
    """Check whether text reads the same backwards, peeling off both ends."""
    if len(text) <= 1:
        return True
    return text[0] == text[-1] and is_palindrome(text[1:-1])


def binary_search_range(items: Sequence[Any], start: int, stop: int, key: Any) -> int:
    """Recursively search sorted items[start..stop] (inclusive) for key; -1 if absent."""
    if start > stop:
        return NOT_FOUND
    mid = (start + stop) // 2
    if items[mid] == key:
        return mid
    if items[mid] > key:
        return binary_search_range(items, start, mid - 1, key)
    return binary_search_range(items, mid + 1, stop, key)


def main(argv: list[str] | None = None) -> int:
    """Print the alternating sequence and a countdown."""
    parser = argparse.ArgumentParser(description="Recursion demonstrations.")
    parser.add_argument("--limit", type=int, default=10, help="alternating sequence limit")
    parser.add_argument("--start", type=int, default=3, help="countdown start")
    args = parser.parse_args(argv)
    print(" ".join(str(v) for v in alternating_sequence(args.limit)))
    print(" ".join([*(str(v) for v in countdown(args.start)), "0"]))
    return 0