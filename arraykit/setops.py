"""Set operations on sorted sequences of integers."""

from __future__ import annotations

import heapq
from collections.abc import Iterable


def sorted_union(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Return the distinct values of two ascending sequences, in ascending order."""
    result: list[int] = []
    for value in heapq.merge(first, second):
        if not result or result[-1] != value:
            result.append(value)
    return result


def sorted_intersection(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Return the distinct values common to two ascending sequences, in ascending order."""
    left = iter(first)
    right = iter(second)
    result: list[int] = []
    sentinel = object()
    a = next(left, sentinel)
    b = next(right, sentinel)
    while a is not sentinel and b is not sentinel:
        if a < b:
            a = next(left, sentinel)
        elif a > b:
            b = next(right, sentinel)
        else:
            if not result or result[-1] != a:
                result.append(a)
            a = next(left, sentinel)
            b = next(right, sentinel)
    return result