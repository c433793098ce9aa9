"""Binary-search variants over sorted and rotated sorted sequences."""

from __future__ import annotations

from collections.abc import Sequence


def binary_search(values: Sequence[int], target: int) -> int | None:
    """Return an index of ``target`` in sorted ``values``, or None if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if target > values[mid]:
            low = mid + 1
        else:
            high = mid - 1
    return None


def ceil_value(values: Sequence[int], target: int) -> int | None:
    """Return the smallest element ``>= target``, or None if there is none."""
    low, high = 0, len(values) - 1
    found: int | None = None
    while low <= high:
        mid = (low + high) // 2
        if values[mid] >= target:
            found = values[mid]
            high = mid - 1
        else:
            low = mid + 1
    return found


def floor_value(values: Sequence[int], target: int) -> int | None:
    """Return the largest element ``<= target``, or None if there is none."""
    low, high = 0, len(values) - 1
    found: int | None = None
    while low <= high:
        mid = (low + high) // 2
        if values[mid] <= target:
            found = values[mid]
            low = mid + 1
        else:
            high = mid - 1
    return found


def last_occurrence(values: Sequence[int], key: int) -> int | None:
    """Return the index of the last ``key`` in sorted ``values``, or None."""
    start, end = 0, len(values) - 1
    found: int | None = None
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] == key:
            found = mid
            start = mid + 1
        elif key < values[mid]:
            end = mid - 1
        else:
            start = mid + 1
    return found


def search_insert(values: Sequence[int], target: int) -> int:
    """Return the first index whose element is ``>= target`` (len if none)."""
    low, high = 0, len(values) - 1
    answer = len(values)
    while low <= high:
        mid = (low + high) // 2
        if values[mid] >= target:
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def search_rotated(values: Sequence[int], target: int) -> int | None:
    """Find ``target`` in a rotated sorted sequence of distinct values."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if values[low] <= values[mid]:
            if values[low] <= target < values[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif values[mid] < target <= values[high]:
            low = mid + 1
        else:
            high = mid - 1
    return None