"""Sorting stack ``a`` with the stack operations, printing the moves."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .cost import MoveCost, find_cheapest
from .parsing import ParseError, parse_arguments, split_arguments
from .quickselect import quickselect_median
from .stacks import Operation, Stacks

_ON_A = (Operation.SA, Operation.RA, Operation.RRA)
_ON_B = (Operation.SB, Operation.RB, Operation.RRB)


def _emit(stacks: Stacks, op: Operation) -> None:
    """Apply ``op`` unless it would leave its single stack unchanged."""
    if op in _ON_A and len(stacks.a) < 2:
        return
    if op in _ON_B and len(stacks.b) < 2:
        return
    if op is Operation.PA and not stacks.b:
        return
    if op is Operation.PB and not stacks.a:
        return
    stacks.apply(op)


def _sort_three(stacks: Stacks) -> None:
    a = stacks.a
    first, second, third = a[0], a[1], a[2]
    if second < first < third:
        _emit(stacks, Operation.SA)
    elif third < first < second:
        _emit(stacks, Operation.RRA)
    elif first > second and first > third:
        _emit(stacks, Operation.RA)
        if a[0] > a[1]:
            _emit(stacks, Operation.SA)
    elif first < second and first < third:
        _emit(stacks, Operation.RRA)
        _emit(stacks, Operation.SA)


def sort_small(stacks: Stacks) -> list[Operation]:
    """Sort a stack ``a`` of at most three values; return the moves made."""
    if len(stacks.a) > 3:
        raise ValueError("sort_small handles at most three values")
    start = len(stacks.history)
    if not stacks.a.is_sorted():
        if len(stacks.a) == 2:
            _emit(stacks, Operation.SA)
        else:
            _sort_three(stacks)
    return stacks.history[start:]


def _split(stacks: Stacks, pivot: int) -> None:
    remaining = len(stacks.a)
    while stacks.a and remaining > 3:
        if stacks.a[0] == pivot:
            _emit(stacks, Operation.RA)
        else:
            _emit(stacks, Operation.PB)
            if stacks.b[0] < pivot:
                _emit(stacks, Operation.RB)
            remaining -= 1


def _insert(stacks: Stacks, move: MoveCost) -> None:
    for _ in range(move.rr):
        _emit(stacks, Operation.RR)
    for _ in range(move.rrr):
        _emit(stacks, Operation.RRR)
    step = Operation.RB if move.from_top else Operation.RRB
    while stacks.b[0] != move.value:
        _emit(stacks, step)
    if move.go_down:
        for _ in range(move.go_down):
            _emit(stacks, Operation.RA)
    else:
        for _ in range(move.go_up):
            _emit(stacks, Operation.RRA)
    _emit(stacks, Operation.PA)


def _rotate_forward(values: Sequence[int]) -> bool:
    """True when the smallest value is reached sooner by rotating."""
    size = len(values)
    ascending_below = 0
    index = 0
    while values[index] < values[(index + 1) % size]:
        ascending_below += 1
        index = (index + 1) % size
    ascending_above = 0
    index = 0
    while values[index] > values[(index - 1) % size]:
        ascending_above += 1
        index = (index - 1) % size
    return ascending_below < ascending_above


def _bring_minimum_up(stacks: Stacks) -> None:
    a = stacks.a
    if _rotate_forward(list(a)):
        while a[0] < a[1]:
            _emit(stacks, Operation.RA)
        if a[0] > a[1]:
            _emit(stacks, Operation.RA)
    else:
        while a[0] > a[-1]:
            _emit(stacks, Operation.RRA)


def _quicksort(stacks: Stacks) -> None:
    if stacks.a.is_sorted():
        return
    pivot = quickselect_median(list(stacks.a))
    _split(stacks, pivot)
    sort_small(stacks)
    while stacks.b:
        _insert(stacks, find_cheapest(list(stacks.b), list(stacks.a), pivot))
    _bring_minimum_up(stacks)


def sort_stacks(values: Iterable[int]) -> list[Operation]:
    """Return the operations that sort ``values`` into ascending order."""
    values = list(values)
    if len(set(values)) != len(values):
        raise ValueError("values must be distinct")
    stacks = Stacks(values)
    if len(values) <= 3:
        sort_small(stacks)
    else:
        _quicksort(stacks)
    return list(stacks.history)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the operations that sort the integers given as arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        tokens = split_arguments(args)
        if len(tokens) <= 1:
            return 0
        values = parse_arguments(tokens)
    except ParseError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{op.value}\n" for op in sort_stacks(values)))
    return 0


if __name__ == "__main__":
    sys.exit(main())