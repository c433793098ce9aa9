"""Sum- and product-based searches over integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator, Sequence


def _pairs_with_sum(
    ordered: Sequence[int], start: int, target: int
) -> Iterator[tuple[int, int]]:
    """Yield distinct value pairs from ``ordered[start:]`` that add up to ``target``.

    ``ordered`` must be sorted ascending; pairs come out in ascending order
    of their first value.
    """
    low, high = start, len(ordered) - 1
    while low < high:
        total = ordered[low] + ordered[high]
        if total < target:
            low += 1
        elif total > target:
            high -= 1
        else:
            yield ordered[low], ordered[high]
            low += 1
            high -= 1
            while low < high and ordered[low] == ordered[low - 1]:
                low += 1
            while low < high and ordered[high] == ordered[high + 1]:
                high -= 1


def _first_of_runs(ordered: Sequence[int], start: int = 0) -> Iterator[tuple[int, int]]:
    """Yield ``(index, value)`` for the first element of each run of equal values."""
    for index in range(start, len(ordered)):
        if index == start or ordered[index] != ordered[index - 1]:
            yield index, ordered[index]


def three_sum(values: Iterable[int]) -> list[tuple[int, int, int]]:
    """Return every distinct sorted triplet of elements that sums to zero."""
    ordered = sorted(values)
    return [
        (first, second, third)
        for index, first in _first_of_runs(ordered)
        for second, third in _pairs_with_sum(ordered, index + 1, -first)
    ]


def four_sum(values: Iterable[int], target: int) -> list[tuple[int, int, int, int]]:
    """Return every distinct sorted quadruplet of elements summing to ``target``."""
    ordered = sorted(values)
    return [
        (first, second, third, fourth)
        for i, first in _first_of_runs(ordered)
        for j, second in _first_of_runs(ordered, i + 1)
        for third, fourth in _pairs_with_sum(ordered, j + 1, target - first - second)
    ]


def count_subarrays_with_sum(values: Iterable[int], k: int) -> int:
    """Count the contiguous subarrays whose elements add up to ``k``."""
    seen: Counter[int] = Counter({0: 1})
    prefix = 0
    count = 0
    for value in values:
        prefix += value
        count += seen[prefix - k]
        seen[prefix] += 1
    return count


def max_product_subarray(values: Iterable[int]) -> int:
    """Return the largest product of any non-empty contiguous subarray.

    Raises ValueError for an empty input.
    """
    iterator = iter(values)
    try:
        first = next(iterator)
    except StopIteration:
        raise ValueError("max_product_subarray() requires at least one value") from None
    highest = lowest = best = first
    for value in iterator:
        candidates = (value, highest * value, lowest * value)
        highest, lowest = max(candidates), min(candidates)
        best = max(best, highest)
    return best