"""The two stacks and the eleven operations that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from enum import Enum


class Operation(str, Enum):
    """An instruction that moves values between or within the stacks."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


class Stack:
    """A stack of integers whose top is its first element."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __getitem__(self, index: int) -> int:
        return self._items[index]

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"

    def swap(self) -> None:
        """Exchange the two top values; does nothing with fewer than two."""
        if len(self._items) < 2:
            return
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(first)
        self._items.appendleft(second)

    def rotate(self) -> None:
        """Move the top value to the bottom."""
        self._items.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom value to the top."""
        self._items.rotate(1)

    def push_to(self, other: Stack) -> None:
        """Move the top value onto the top of ``other``; nothing if empty."""
        if not self._items:
            return
        other._items.appendleft(self._items.popleft())

    def is_sorted(self) -> bool:
        """True when the values ascend from top to bottom."""
        items = self._items
        return all(items[i] <= items[i + 1] for i in range(len(items) - 1))


class Stacks:
    """Stack ``a`` holding the input, an empty stack ``b``, and a move log."""

    def __init__(self, values: Iterable[int]) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self.history: list[Operation] = []

    def apply(self, operation: Operation | str) -> Operation:
        """Perform one operation and record it.

        Raises ValueError when ``operation`` names no known instruction.
        """
        op = Operation(operation)
        a, b = self.a, self.b
        if op is Operation.SA:
            a.swap()
        elif op is Operation.SB:
            b.swap()
        elif op is Operation.SS:
            a.swap()
            b.swap()
        elif op is Operation.PA:
            b.push_to(a)
        elif op is Operation.PB:
            a.push_to(b)
        elif op is Operation.RA:
            a.rotate()
        elif op is Operation.RB:
            b.rotate()
        elif op is Operation.RR:
            a.rotate()
            b.rotate()
        elif op is Operation.RRA:
            a.reverse_rotate()
        elif op is Operation.RRB:
            b.reverse_rotate()
        else:
            a.reverse_rotate()
            b.reverse_rotate()
        self.history.append(op)
        return op

    def is_solved(self) -> bool:
        """True when ``b`` is empty and ``a`` is sorted."""
        return not self.b and self.a.is_sorted()