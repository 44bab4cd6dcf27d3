"""Choosing which value of one stack is cheapest to insert into the other."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class MoveCost:
    """The moves that bring one source value on top and insert it in place.

    ``from_top`` tells whether the source is rotated (True) or
    reverse-rotated (False) to reach the value. ``rr`` and ``rrr`` count
    rotations shared by both stacks, ``go_down`` and ``go_up`` the further
    rotations of the destination alone. ``cost`` is the weighted price used
    to compare candidates.
    """

    value: int
    from_top: bool
    rr: int = 0
    rrr: int = 0
    go_down: int = 0
    go_up: int = 0
    cost: int = 0

    @property
    def total(self) -> int:
        """The price including the shared rotations."""
        return self.cost + self.rr + self.rrr


def insertion_distance_down(value: int, dest: Sequence[int]) -> int:
    """Count rotations of ``dest`` that put ``value``'s place on top.

    Walks down from the top of ``dest``, whose values are expected to be in
    ascending order up to a rotation. Raises ValueError when ``dest`` is
    empty or holds no place for ``value``.
    """
    items = list(dest)
    size = len(items)
    if not size:
        raise ValueError("destination stack is empty")
    steps = 0
    index = 0
    while True:
        current = items[index]
        above = items[index - 1]
        if value > current:
            if value > above and current < above:
                break
        elif not (value < current and value < above and current > above):
            break
        steps += 1
        if steps == size:
            raise ValueError(f"no insertion point for {value}")
        index = (index + 1) % size
    return steps


def insertion_distance_up(value: int, dest: Sequence[int]) -> int:
    """Count reverse rotations of ``dest`` that put ``value``'s place on top.

    Walks up from the bottom of ``dest``. Raises ValueError when ``dest``
    is empty or holds no place for ``value``.
    """
    items = list(dest)
    size = len(items)
    if not size:
        raise ValueError("destination stack is empty")
    steps = 0
    index = size - 1
    while True:
        current = items[index]
        below = items[(index + 1) % size]
        if value < current:
            if value < below and current > below:
                break
        elif not (value > current and value > below and current < below):
            break
        steps += 1
        if steps == size:
            raise ValueError(f"no insertion point for {value}")
        index = (index - 1) % size
    return steps


def _from_top(value: int, dest: Sequence[int], travel: int) -> MoveCost:
    move = MoveCost(value=value, from_top=True)
    down = insertion_distance_down(value, dest)
    if down >= travel:
        move.rr = travel
        down -= travel
        move.go_down = down
    else:
        move.rr = down
        down = 0
    up = insertion_distance_up(value, dest)
    if down < up:
        move.cost = down + travel
    else:
        move.cost = up + travel
        move.go_down = 0
        move.go_up = up
        move.rr = 0
    return move


def _from_bottom(value: int, dest: Sequence[int], travel: int) -> MoveCost:
    move = MoveCost(value=value, from_top=False)
    down = insertion_distance_down(value, dest)
    up = insertion_distance_up(value, dest)
    if up >= travel:
        move.rrr = travel
        up -= travel
        move.go_up = up
    else:
        move.rrr = up
        up = 0
    if up < down:
        move.cost = up + travel
    else:
        move.cost = down + travel
        move.go_up = 0
        move.go_down = down
        move.rrr = 0
    return move


def find_cheapest(source: Sequence[int], dest: Sequence[int], pivot: int) -> MoveCost:
    """Pick the value of ``source`` that is cheapest to insert into ``dest``.

    Candidates are examined alternately from the top and the bottom of
    ``source``; values below ``pivot`` carry an extra weight of a tenth of
    the source size. The search stops early once a candidate is as cheap
    as the distance already walked.
    """
    items = list(source)
    size = len(items)
    if not size:
        raise ValueError("source stack is empty")
    weight = size // 10
    visited: set[int] = set()
    best: MoveCost | None = None
    top = 0
    bottom = 1
    while top <= (size - 1) // 2:
        move = _from_top(items[top], dest, top)
        if move.value < pivot:
            move.cost += weight
        visited.add(top)
        if best is None or move.total < best.total:
            best = move
        if move.total <= top + 1 and move.total <= best.total:
            best = move
            break
        if size == 1:
            break
        top += 1
        if size - bottom in visited:
            return best
        move = _from_bottom(items[size - bottom], dest, bottom)
        if move.value < pivot:
            move.cost += weight
        visited.add(size - bottom)
        if move.total < best.total:
            best = move
        if move.total <= bottom and move.total <= best.total:
            best = move
            break
        bottom += 1
    assert best is not None
    return best