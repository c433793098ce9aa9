"""Reordering of integer sequences: by sign, by parity, permutations and leaders."""

from __future__ import annotations

from collections.abc import Iterable


def _interleave(even_slots: list[int], odd_slots: list[int], what: str) -> list[int]:
    """Place ``even_slots`` at even indices and ``odd_slots`` at odd indices."""
    size = len(even_slots) + len(odd_slots)
    if len(even_slots) != (size + 1) // 2:
        raise ValueError(
            f"cannot alternate {what}: got {len(even_slots)} and {len(odd_slots)} "
            f"elements for a sequence of length {size}"
        )
    result = [0] * size
    result[0::2] = even_slots
    result[1::2] = odd_slots
    return result


def rearrange_by_sign(values: Iterable[int]) -> list[int]:
    """Alternate non-negative and negative values, starting with a non-negative one.

    Relative order within each sign is kept. Raises ValueError when the
    counts of the two kinds do not allow a strict alternation.
    """
    items = list(values)
    non_negative = [v for v in items if v >= 0]
    negative = [v for v in items if v < 0]
    return _interleave(non_negative, negative, "signs")


def sort_by_parity(values: Iterable[int]) -> list[int]:
    """Move even values to the front by swapping, keeping the evens in order."""
    result = list(values)
    boundary = 0
    for index, value in enumerate(result):
        if value % 2 == 0:
            result[boundary], result[index] = result[index], result[boundary]
            boundary += 1
    return result


def sort_by_parity_alternating(values: Iterable[int]) -> list[int]:
    """Put even values at even indices and odd values at odd indices.

    Relative order within each parity is kept. Raises ValueError when the
    counts do not allow that layout.
    """
    items = list(values)
    evens = [v for v in items if v % 2 == 0]
    odds = [v for v in items if v % 2 != 0]
    return _interleave(evens, odds, "parities")


def next_permutation(values: Iterable[int]) -> list[int]:
    """Return the lexicographically next permutation, wrapping to the smallest."""
    result = list(values)
    pivot = next(
        (i for i in range(len(result) - 2, -1, -1) if result[i] < result[i + 1]),
        None,
    )
    if pivot is None:
        result.reverse()
        return result
    successor = next(
        j for j in range(len(result) - 1, pivot, -1) if result[j] > result[pivot]
    )
    result[pivot], result[successor] = result[successor], result[pivot]
    result[pivot + 1:] = reversed(result[pivot + 1:])
    return result


def leaders(values: Iterable[int]) -> list[int]:
    """Return the elements strictly greater than everything to their right."""
    found: list[int] = []
    best: int | None = None
    for value in reversed(list(values)):
        if best is None or value > best:
            found.append(value)
            best = value
    found.reverse()
    return found