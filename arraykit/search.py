"""Searches for counts, duplicates and missing values in integer lists."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def odd_occurrence(items: Sequence[int]) -> int | None:
    """Return the first value that occurs an odd number of times, or None."""
    counts = Counter(items)
    return next((value for value in items if counts[value] % 2), None)


def two_repeated(items: Sequence[int]) -> tuple[int | None, int | None]:
    """Return the first two values found to repeat later in the list.

    Slots that are never filled are None.
    """
    found: list[int] = []
    for index, value in enumerate(items):
        if len(found) == 2:
            break
        if value in items[index + 1:]:
            found.append(value)
    found.extend([None] * (2 - len(found)))
    return found[0], found[1]


def missing_number(items: Sequence[int]) -> int:
    """Return the smallest value in 1..len(items)+1 absent from the list."""
    present = set(items)
    return next(i for i in range(1, len(items) + 2) if i not in present)


def first_missing_positive(items: Sequence[int]) -> int:
    """Return the smallest positive integer absent from the list."""
    present = set(items)
    return next(i for i in range(1, len(items) + 2) if i not in present)


def repeated_and_missing(items: Sequence[int]) -> tuple[int, int]:
    """For 1..n with one value replaced by another, return (repeated, missing)."""
    n = len(items)
    diff = sum(items) - n * (n + 1) // 2
    diff_sq = sum(x * x for x in items) - n * (n + 1) * (2 * n + 1) // 6
    if diff == 0:
        raise ValueError("no repeated value: the list holds each of 1..n once")
    sum_ab = diff_sq // diff
    repeated = (diff + sum_ab) // 2
    return repeated, repeated - diff


def majority_third(items: Sequence[int]) -> int | None:
    """Return a value occurring more than len(items) // 3 times, or None."""
    candidate1 = candidate2 = 0
    count1 = count2 = 0
    for value in items:
        if value == candidate1:
            count1 += 1
        elif value == candidate2:
            count2 += 1
        elif count1 == 0:
            candidate1, count1 = value, 1
        elif count2 == 0:
            candidate2, count2 = value, 1
        else:
            count1 -= 1
            count2 -= 1

    count1 = sum(1 for value in items if value == candidate1)
    count2 = sum(1 for value in items if value != candidate1 and value == candidate2)
    threshold = len(items) // 3
    if count1 > threshold:
        return candidate1
    if count2 > threshold:
        return candidate2
    return None


def single_numbers(items: Sequence[int]) -> list[int]:
    """Return the values occurring exactly once, in ascending order."""
    counts = Counter(items)
    return sorted(value for value, count in counts.items() if count == 1)


def two_odd_occurrences(items: Sequence[int]) -> tuple[int, int]:
    """Return the two values with odd counts, larger first."""
    counts = Counter(items)
    odd = [value for value, count in counts.items() if count % 2]
    if len(odd) != 2:
        raise ValueError(f"expected exactly two values with odd counts, found {len(odd)}")
    return max(odd), min(odd)


def find_min_max(items: Sequence[int]) -> tuple[int, int]:
    """Return (smallest, largest) of a non-empty list."""
    if not items:
        raise ValueError("find_min_max() needs at least one value")
    return min(items), max(items)


def find_duplicate(items: Sequence[int]) -> int:
    """Find the repeated value in a list of n+1 values drawn from 1..n."""
    if not items:
        raise ValueError("find_duplicate() needs at least one value")
    slow = fast = items[0]
    while True:
        slow = items[slow]
        fast = items[items[fast]]
        if slow == fast:
            break
    slow = items[0]
    while slow != fast:
        slow = items[slow]
        fast = items[fast]
    return slow