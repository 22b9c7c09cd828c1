# algostudy

Small, readable implementations of classic algorithms, meant for study.
The package has no dependencies beyond the standard library.

## Modules

- **Sorting** (`algostudy.sorting`): `bubble_sort`, `insertion_sort`,
  `selection_sort`, `merge_sort` and `quick_sort`. Each one takes an
  iterable and returns a new sorted list. The input is left unchanged.
- **Searching** (`algostudy.searching`):
  - `linear_search(items, target)` returns the index of the first match, or `-1`.
  - `binary_search(items, target)` sorts the items first. It returns the
    index of `target` within the sorted list, or `-1`.
- **Recursion** (`algostudy.recursion`):
  - `alternating_sequence(limit)` is built by two mutually recursive steps.
    For each counter from 1 to `limit`, an odd counter emits `counter + 1`
    and an even counter emits `counter - 1`.
  - `countdown(n)` returns `n, n-1, ..., 1`. It raises `ValueError` for a
    negative `n`.
  - `raise_iterative(base, exp)` multiplies `base` in `exp - 1` times. It
    gives `base ** (exp - 1)` for `exp >= 1` and `1` otherwise.
  - `raise_recursive(base, exp)` gives `base ** exp`. It raises `ValueError`
    for a negative exponent.
  - `raise_fast(base, exp)` computes the power by squaring the half power.
  - `power(x, n)` is an integer power. Negative exponents use truncating
    integer division.
  - `is_palindrome(text)` checks whether the text reads the same backwards.
  - `binary_search_range(items, start, stop, key)` searches the inclusive
    range of a sorted sequence recursively.
- **Arrays** (`algostudy.arrays`):
  - `is_prime(n)` uses trial division by every number from 2 to `n - 1`.
    Values below 2 report `True`.
  - `primes_up_to(n)` uses the Sieve of Eratosthenes.
  - `DynamicArray` is a resizable array that doubles its `capacity` when it
    is full. It supports indexing and assignment (both bounds-checked, with
    `IndexError`), `len`, iteration, `append` and `remove_at`.
- **Timing** (`algostudy.timing`):
  - `fill_row_major` and `fill_column_major` set `grid[i][j] = i + j` in
    different visiting orders.
  - `time_fill(fill, size, repeat)` returns the elapsed milliseconds.

## Installation

```
pip install .
```

## Usage

```python
from algostudy.sorting import merge_sort
from algostudy.searching import binary_search
from algostudy.arrays import DynamicArray, primes_up_to

merge_sort([89, 45, 68, 90, 29, 34, 17])   # [17, 29, 34, 45, 68, 89, 90]
binary_search([1, 3, 5, 7, 9], 5)          # 2
primes_up_to(10)                           # [2, 3, 5, 7]

arr = DynamicArray(1)
arr.append(4)
arr.append(8)
arr[0]                                     # 4
arr.capacity                               # 2
```

## Commands

```
algostudy-sort [-a {bubble,insertion,merge,quick,selection}] [NUMBERS ...]
algostudy-search [--binary] [TARGET [NUMBERS ...]]
algostudy-recursion [--limit N] [--start N]
algostudy-timing [--size N] [--repeat N]
```

- `algostudy-sort` sorts the given integers and prints them. It uses merge
  sort unless `-a` or `--algorithm` names another algorithm. With no numbers,
  it sorts a sample list.
- `algostudy-search` prints the index of `TARGET` among the numbers.
  - It uses linear search by default.
  - With `--binary` it uses binary search, and the index refers to the
    sorted list.
  - With no target, it runs two sample searches.
- `algostudy-recursion` prints the alternating sequence, then a countdown
  ending in 0.
- `algostudy-timing` times a row-major fill and then a column-major fill of
  a square grid and prints each in milliseconds. The defaults (`--size 1000`,
  `--repeat 1000`) take a long time. Pass smaller values for a quick run.

## Running the tests

```
pip install .[test]
pytest
```