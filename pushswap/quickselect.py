"""Selecting the median value that the sorter uses as its pivot."""

from __future__ import annotations

from collections.abc import Sequence


def median_of_three(values: Sequence[int]) -> int:
    """Return the middle one of the first, central and last values."""
    if not values:
        raise ValueError("median of an empty sequence")
    first = values[0]
    middle = values[(len(values) - 1) // 2]
    last = values[-1]
    return sorted((first, middle, last))[1]


def quickselect_median(values: Sequence[int]) -> int:
    """Return the lower median of distinct ``values``.

    The result is the element that would stand at index ``(n - 1) // 2``
    once the values were sorted.
    """
    current = list(values)
    if not current:
        raise ValueError("median of an empty sequence")
    if len(set(current)) != len(current):
        raise ValueError("values must be distinct")
    target = (len(current) - 1) // 2
    while True:
        if len(current) == 2:
            return min(current)
        pivot = median_of_three(current)
        less = [value for value in current if value <= pivot]
        more = [value for value in current if value > pivot]
        if len(less) - 1 == target:
            return pivot
        if len(less) - 1 > target:
            current = less
        else:
            target -= len(less)
            current = more