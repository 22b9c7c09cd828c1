import pytest

from algostudy.timing import fill_column_major, fill_row_major, main, time_fill


@pytest.mark.parametrize("fill", [fill_row_major, fill_column_major])
@pytest.mark.parametrize("rows,cols", [(3, 4), (5, 5), (1, 7), (0, 0)])
def test_fill_sets_index_sum(fill, rows, cols):
    grid = [[-1] * cols for _ in range(rows)]
    fill(grid)
    for i, row in enumerate(grid):
        for j, value in enumerate(row):
            assert value == i + j


def test_both_orders_produce_same_grid():
    a = [[0] * 6 for _ in range(6)]
    b = [[0] * 6 for _ in range(6)]
    fill_row_major(a)
    fill_column_major(b)
    assert a == b


def test_column_major_handles_ragged_rows():
    grid = [[0] * 2, [0] * 4, [0]]
    fill_column_major(grid)
    assert [len(r) for r in grid] == [2, 4, 1]
    assert grid[1][3] == 1 + 3


@pytest.mark.parametrize("fill", [fill_row_major, fill_column_major])
def test_time_fill_returns_non_negative_ms(fill):
    elapsed = time_fill(fill, 10, 3)
    assert elapsed >= 0.0


def test_time_fill_zero_repeat():
    assert time_fill(fill_row_major, 5, 0) >= 0.0


@pytest.mark.parametrize("size,repeat", [(-1, 1), (3, -2)])
def test_time_fill_rejects_negative(size, repeat):
    with pytest.raises(ValueError):
        time_fill(fill_row_major, size, repeat)


def test_main_prints_two_timings(capsys):
    assert main(["--size", "5", "--repeat", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    for line in lines:
        number, unit = line.split()
        assert unit == "ms"
        assert float(number) >= 0.0


def test_main_rejects_negative_size():
    with pytest.raises(SystemExit):
        main(["--size", "-1", "--repeat", "1"])