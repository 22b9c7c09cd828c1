import random

import pytest

from algostudy.sorting import (
    bubble_sort,
    insertion_sort,
    main,
    merge_sort,
    quick_sort,
    selection_sort,
)


def test_source_demo_list():
    data = [89, 45, 68, 90, 29, 34, 17]
    expected = [17, 29, 34, 45, 68, 89, 90]
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected


def test_quick_sort_demo_list():
    data = [65, 70, 75, 80, 85, 60, 55, 50, 45]
    expected = [45, 50, 55, 60, 65, 70, 75, 80, 85]
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected


@pytest.mark.parametrize("seed", range(8))
def test_random_lists_match_sorted(seed):
    rng = random.Random(seed)
    data = [rng.randint(-50, 50) for _ in range(rng.randint(0, 60))]
    expected = sorted(data)
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected


@pytest.mark.parametrize(
    "data",
    [[], [1], [2, 1], [5, 5, 5, 5], [3, -1, 3, -1, 0], list(range(20, 0, -1)), list(range(20))],
)
def test_edge_cases(data):
    expected = sorted(data)
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected


def test_input_is_not_modified():
    data = [4, 2, 9, 1]
    copy = list(data)
    assert bubble_sort(data) == [1, 2, 4, 9]
    assert insertion_sort(data) == [1, 2, 4, 9]
    assert selection_sort(data) == [1, 2, 4, 9]
    assert merge_sort(data) == [1, 2, 4, 9]
    assert quick_sort(data) == [1, 2, 4, 9]
    assert data == copy


def test_accepts_any_iterable():
    assert bubble_sort(x for x in (3, 1, 2)) == [1, 2, 3]
    assert insertion_sort(x for x in (3, 1, 2)) == [1, 2, 3]
    assert selection_sort(x for x in (3, 1, 2)) == [1, 2, 3]
    assert merge_sort(x for x in (3, 1, 2)) == [1, 2, 3]
    assert quick_sort(x for x in (3, 1, 2)) == [1, 2, 3]


def test_strings():
    words = ["pear", "apple", "fig", "banana"]
    expected = ["apple", "banana", "fig", "pear"]
    assert bubble_sort(words) == expected
    assert insertion_sort(words) == expected
    assert selection_sort(words) == expected
    assert merge_sort(words) == expected
    assert quick_sort(words) == expected


def test_main_sorts_arguments(capsys):
    assert main(["--algorithm", "quick", "3", "1", "2"]) == 0
    assert capsys.readouterr().out == "1 2 3\n"


def test_main_default_demo(capsys):
    main([])
    out = capsys.readouterr().out.split()
    assert [int(v) for v in out] == [17, 29, 34, 45, 68, 89, 90]