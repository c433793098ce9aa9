"""Operations on rectangular integer matrices."""

from __future__ import annotations

from collections.abc import Sequence


def _check_rectangular(matrix: Sequence[Sequence[int]]) -> None:
    if matrix and any(len(row) != len(matrix[0]) for row in matrix):
        raise ValueError("matrix rows must all have the same length")


def rotate_clockwise(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the square ``matrix`` rotated a quarter turn clockwise."""
    _check_rectangular(matrix)
    if matrix and len(matrix) != len(matrix[0]):
        raise ValueError("rotation is only possible for square matrices")
    return [list(reversed(column)) for column in zip(*matrix)]


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements read clockwise in a spiral from the top-left corner."""
    _check_rectangular(matrix)
    remaining = [list(row) for row in matrix]
    order: list[int] = []
    while remaining:
        order.extend(remaining.pop(0))
        remaining = [list(row) for row in zip(*remaining)][::-1]
    return order