"""Elementary comparison sorts. Each returns a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Sort by repeatedly swapping adjacent items that are out of order."""
    items = list(values)
    for end in range(len(items), 1, -1):
        for j in range(1, end):
            if items[j] < items[j - 1]:
                items[j - 1], items[j] = items[j], items[j - 1]
    return items


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Sort by sliding each item left until it meets a smaller one."""
    items = list(values)
    for j in range(1, len(items)):
        i = j
        while i > 0 and items[i] < items[i - 1]:
            items[i], items[i - 1] = items[i - 1], items[i]
            i -= 1
    return items


def selection_sort(values: Iterable[T]) -> list[T]:
    """Sort by moving the smallest remaining item to the front each pass."""
    items = list(values)
    for i in range(len(items)):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items