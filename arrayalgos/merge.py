"""Merging two sequences without an auxiliary buffer."""

from __future__ import annotations


def merge_sorted_in_place(first: list[int], second: list[int]) -> None:
    """Redistribute the elements of two lists in place.

    Afterwards both lists are sorted, keep their lengths, and every element
    of ``first`` is no greater than any element of ``second``.
    """
    first.sort()
    second.sort()
    left, right = len(first) - 1, 0
    while left >= 0 and right < len(second) and first[left] > second[right]:
        first[left], second[right] = second[right], first[left]
        left -= 1
        right += 1
    first.sort()
    second.sort()