"""Small algorithms over sequences of numbers."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from functools import reduce
from itertools import combinations


def second_smallest(values: Iterable[int]) -> int:
    """Return the smallest value that is strictly greater than the minimum."""
    items = list(values)
    if not items:
        raise ValueError("second_smallest() of an empty sequence")
    lowest = min(items)
    rest = [v for v in items if v != lowest]
    if not rest:
        raise ValueError("sequence has fewer than two distinct values")
    return min(rest)


def digits_to_number(digits: Iterable[int]) -> int:
    """Join decimal digits, most significant first, into one number."""
    return reduce(lambda acc, digit: acc * 10 + digit, digits, 0)


def duplicate_pairs(values: Sequence[int]) -> list[tuple[int, int]]:
    """Return every index pair (i, j), i < j, whose values are equal.

    Pairs come in the order i ascending, then j ascending.
    """
    return [
        (i, j)
        for (i, left), (j, right) in combinations(enumerate(values), 2)
        if left == right
    ]


def insert_at(values: Sequence[int], value: int, position: int) -> list[int]:
    """Return a copy of ``values`` with ``value`` at 1-based ``position``."""
    if not 1 <= position <= len(values) + 1:
        raise ValueError(
            f"position {position} outside 1..{len(values) + 1}"
        )
    result = list(values)
    result.insert(position - 1, value)
    return result


def insert_sorted(values: Sequence[int], value: int) -> list[int]:
    """Return a copy of ``values`` with ``value`` before the first larger item."""
    index = next((i for i, v in enumerate(values) if value < v), len(values))
    result = list(values)
    result.insert(index, value)
    return result


def max_with_index(values: Sequence[int]) -> tuple[int, int]:
    """Return ``(index, value)`` of the first occurrence of the maximum."""
    if not values:
        raise ValueError("max_with_index() of an empty sequence")
    return max(enumerate(values), key=lambda pair: (pair[1], -pair[0]))


def solve_quadratic(a: float, b: float, c: float) -> tuple[float, ...]:
    """Return the real roots of ``a*x**2 + b*x + c = 0``.

    Two roots come as ``((-b + sqrt(d)) / 2a, (-b - sqrt(d)) / 2a)``, a
    repeated root as a one-item tuple, and no real root as an empty tuple.
    """
    if a == 0:
        raise ValueError("coefficient 'a' must not be zero")
    discriminant = b * b - 4 * a * c
    if discriminant > 0:
        root = math.sqrt(discriminant)
        return ((-b + root) / (2 * a), (-b - root) / (2 * a))
    if discriminant == 0:
        return (-(b / (2 * a)),)
    return ()