import random

import pytest

from pushswap.sorter import main, sort_small, sort_stacks
from pushswap.stacks import Operation, Stacks


def replay(values, ops):
    stacks = Stacks(values)
    for op in ops:
        stacks.apply(op)
    return stacks


@pytest.mark.parametrize(
    "values, expected",
    [
        ([6, 2, 9], [Operation.SA]),
        ([6, 9, 2], [Operation.RRA]),
        ([9, 2, 6], [Operation.RA]),
        ([9, 6, 2], [Operation.RA, Operation.SA]),
        ([2, 9, 6], [Operation.RRA, Operation.SA]),
    ],
)
def test_sort_small_three_values(values, expected):
    stacks = Stacks(values)
    assert sort_small(stacks) == expected
    assert list(stacks.a) == [2, 6, 9]


def test_sort_small_two_values_swaps():
    stacks = Stacks([2, 1])
    assert sort_small(stacks) == [Operation.SA]
    assert list(stacks.a) == [1, 2]


def test_sort_small_sorted_does_nothing():
    stacks = Stacks([1, 2, 3])
    assert sort_small(stacks) == []
    assert stacks.history == []


def test_sort_small_rejects_four_values():
    with pytest.raises(ValueError):
        sort_small(Stacks([4, 3, 2, 1]))


def test_sort_stacks_worked_example():
    assert sort_stacks([4, 3, 2, 1]) == [
        Operation.PB,
        Operation.RA,
        Operation.SA,
        Operation.PA,
        Operation.RA,
    ]


def test_sort_stacks_sorted_input_needs_no_moves():
    assert sort_stacks(range(10)) == []


def test_sort_stacks_empty():
    assert sort_stacks([]) == []


def test_sort_stacks_rejects_duplicates():
    with pytest.raises(ValueError):
        sort_stacks([1, 2, 2, 3])


@pytest.mark.parametrize("size", [2, 3, 4, 5, 6, 10, 25, 100])
@pytest.mark.parametrize("seed", range(8))
def test_sort_stacks_sorts(size, seed):
    rng = random.Random(seed * 1000 + size)
    values = rng.sample(range(-1000, 1000), size)
    stacks = replay(values, sort_stacks(values))
    assert stacks.is_solved()
    assert list(stacks.a) == sorted(values)


def test_sort_stacks_handles_extreme_values():
    values = [2147483647, -2147483648, 0, 5, -5]
    stacks = replay(values, sort_stacks(values))
    assert list(stacks.a) == sorted(values)
    assert len(stacks.b) == 0


def test_main_two_values(capsys):
    assert main(["2 1"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "sa\n"
    assert captured.err == ""


def test_main_output_sorts(capsys):
    values = [5, -3, 12, 0, 7, 1, 9, -8]
    assert main([" ".join(map(str, values[:4])), *map(str, values[4:])]) == 0
    lines = capsys.readouterr().out.splitlines()
    stacks = replay(values, lines)
    assert list(stacks.a) == sorted(values)
    assert len(stacks.b) == 0


@pytest.mark.parametrize(
    "argv", [["1", "a"], ["1", "1"], ["1 2", "--"], ["3", "2147483648"]]
)
def test_main_reports_errors(argv, capsys):
    assert main(argv) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


@pytest.mark.parametrize("argv", [[], [""], ["42"], ["99999999999"]])
def test_main_with_at_most_one_number_prints_nothing(argv, capsys):
    assert main(argv) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""