"""In-place rearrangements of integer lists."""

from __future__ import annotations


def reverse_in_place(items: list[int]) -> None:
    """Reverse the list in place."""
    items.reverse()


def _is_odd_for_partition(value: int) -> bool:
    # Only positive odd values count as odd when scanning from the right.
    return value > 0 and value % 2 == 1


def segregate_even_odd(items: list[int]) -> None:
    """Move even values to the front and odd values to the back, in place."""
    lo, hi = 0, len(items) - 1
    while lo < hi:
        while lo < hi and items[lo] % 2 == 0:
            lo += 1
        while lo < hi and _is_odd_for_partition(items[hi]):
            hi -= 1
        if lo < hi:
            items[lo], items[hi] = items[hi], items[lo]
            lo += 1
            hi -= 1


def alternate_signs(items: list[int]) -> None:
    """Interleave non-negative and negative values, starting with a non-negative one.

    Relative order within each sign is kept; leftovers go at the end.
    """
    positives = [x for x in items if x >= 0]
    negatives = [x for x in items if x < 0]
    merged: list[int] = []
    for pos, neg in zip(positives, negatives):
        merged.extend((pos, neg))
    shared = min(len(positives), len(negatives))
    merged.extend(positives[shared:])
    merged.extend(negatives[shared:])
    items[:] = merged


def push_zeros_to_end(items: list[int]) -> None:
    """Move zeros to the end, keeping the order of the other values."""
    nonzero = [x for x in items if x != 0]
    items[:] = nonzero + [0] * (len(items) - len(nonzero))


def sort_012(items: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s by counting; any other value counts as 2."""
    zeros = items.count(0)
    ones = items.count(1)
    twos = len(items) - zeros - ones
    items[:] = [0] * zeros + [1] * ones + [2] * twos


def move_zeroes(items: list[int]) -> None:
    """Move zeros to the end by swapping, keeping the order of the other values."""
    last_nonzero = 0
    for current, value in enumerate(items):
        if value != 0:
            items[last_nonzero], items[current] = items[current], items[last_nonzero]
            last_nonzero += 1