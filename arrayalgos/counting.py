"""Counting problems: majority elements, inversions, reverse pairs, missing values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from heapq import merge


def majority_elements(values: Iterable[int]) -> list[int]:
    """Return the elements occurring more than ``len(values) // 3`` times.

    Uses the extended Boyer-Moore vote; at most two elements can qualify.
    """
    items = list(values)
    first: int | None = None
    second: int | None = None
    first_count = second_count = 0
    for value in items:
        if first_count == 0 and value != second:
            first, first_count = value, 1
        elif second_count == 0 and value != first:
            second, second_count = value, 1
        elif value == first:
            first_count += 1
        elif value == second:
            second_count += 1
        else:
            first_count -= 1
            second_count -= 1

    threshold = len(items) // 3
    found: list[int] = []
    for candidate in (first, second):
        if candidate is not None and candidate not in found:
            if items.count(candidate) > threshold:
                found.append(candidate)
    return found


def _sort_and_count(
    items: Sequence[int], cross: Callable[[Sequence[int], Sequence[int]], int]
) -> tuple[list[int], int]:
    """Merge-sort ``items``, summing ``cross(left, right)`` over every merge step."""
    if len(items) <= 1:
        return list(items), 0
    middle = len(items) // 2
    left, left_count = _sort_and_count(items[:middle], cross)
    right, right_count = _sort_and_count(items[middle:], cross)
    total = left_count + right_count + cross(left, right)
    return list(merge(left, right)), total


def _cross_inversions(left: Sequence[int], right: Sequence[int]) -> int:
    count = 0
    position = 0
    for value in right:
        while position < len(left) and left[position] <= value:
            position += 1
        count += len(left) - position
    return count


def _cross_reverse_pairs(left: Sequence[int], right: Sequence[int]) -> int:
    count = 0
    position = 0
    for value in left:
        while position < len(right) and value > 2 * right[position]:
            position += 1
        count += position
    return count


def count_inversions(values: Iterable[int]) -> int:
    """Count pairs ``i < j`` with ``values[i] > values[j]``."""
    return _sort_and_count(list(values), _cross_inversions)[1]


def count_reverse_pairs(values: Iterable[int]) -> int:
    """Count pairs ``i < j`` with ``values[i] > 2 * values[j]``."""
    return _sort_and_count(list(values), _cross_reverse_pairs)[1]


def find_missing_and_repeating(values: Iterable[int]) -> tuple[int, int]:
    """Return ``(repeating, missing)`` for a list of 1..n with one value duplicated.

    Raises ValueError when the input has no single repeating/missing pair.
    """
    items = list(values)
    n = len(items)
    expected_sum = n * (n + 1) // 2
    expected_squares = n * (n + 1) * (2 * n + 1) // 6
    difference = sum(items) - expected_sum
    square_difference = sum(v * v for v in items) - expected_squares
    if difference == 0 or square_difference % difference:
        raise ValueError("input is not 1..n with exactly one value replaced")
    total = square_difference // difference
    if (difference + total) % 2:
        raise ValueError("input is not 1..n with exactly one value replaced")
    repeating = (difference + total) // 2
    missing = repeating - difference
    return repeating, missing