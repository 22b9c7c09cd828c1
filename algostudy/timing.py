"""Compare filling a grid row by row against column by column."""

from __future__ import annotations

import argparse
import time
from collections.abc import Callable

Grid = list[list[int]]


def fill_row_major(grid: Grid) -> None:
    """Set grid[i][j] = i + j, visiting each row completely before the next."""
    for i, row in enumerate(grid):
        for j in range(len(row)):
            row[j] = i + j


def fill_column_major(grid: Grid) -> None:
    """Set grid[i][j] = i + j, visiting each column completely before the next."""
    width = max((len(row) for row in grid), default=0)
    for j in range(width):
        for i, row in enumerate(grid):
            if j < len(row):
                row[j] = i + j


def time_fill(fill: Callable[[Grid], None], size: int = 1000, repeat: int = 1000) -> float:
    """Run fill on a zeroed size x size grid repeat times; return elapsed milliseconds."""
    if size < 0:
        raise ValueError("size must be non-negative")
    if repeat < 0:
        raise ValueError("repeat must be non-negative")
    grid = [[0] * size for _ in range(size)]
    start = time.perf_counter()
    for _ in range(repeat):
        fill(grid)
    return (time.perf_counter() - start) * 1000.0


def main(argv: list[str] | None = None) -> int:
    """Time row-major then column-major filling and print each in milliseconds."""
    parser = argparse.ArgumentParser(description="Grid access-order timing.")
    parser.add_argument("--size", type=int, default=1000, help="grid side length")
    parser.add_argument("--repeat", type=int, default=1000, help="number of passes")
    args = parser.parse_args(argv)
    try:
        for fill in (fill_row_major, fill_column_major):
            print(f"{time_fill(fill, args.size, args.repeat)} ms")
    except ValueError as exc:
        parser.error(str(exc))
    return 0