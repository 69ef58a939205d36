"""Classic comparison sorts over numeric sequences, ascending or descending."""

from __future__ import annotations

import enum
from typing import Sequence


class SortOrder(enum.IntEnum):
    """Direction of a sort."""

    ASCENDING = 1
    DESCENDING = 2


def _before(a: float, b: float, order: SortOrder) -> bool:
    """True if ``a`` must strictly precede ``b`` in the given order."""
    return a < b if order == SortOrder.ASCENDING else a > b


def bubble_sort(values: Sequence[float], order: SortOrder = SortOrder.ASCENDING) -> list[float]:
    """Return a sorted copy using bubble sort with early exit."""
    items = list(values)
    size = len(items)
    for i in range(size):
        swapped = False
        for j in range(size - i - 1):
            if _before(items[j + 1], items[j], order):
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(values: Sequence[float], order: SortOrder = SortOrder.ASCENDING) -> list[float]:
    """Return a sorted copy using insertion sort."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and _before(current, items[j], order):
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def selection_sort(values: Sequence[float], order: SortOrder = SortOrder.ASCENDING) -> list[float]:
    """Return a sorted copy using selection sort."""
    items = list(values)
    size = len(items)
    for i in range(size - 1):
        best = i
        for j in range(i + 1, size):
            if _before(items[j], items[best], order):
                best = j
        items[i], items[best] = items[best], items[i]
    return items


def _merge(left: list[float], right: list[float], order: SortOrder) -> list[float]:
    merged: list[float] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if _before(right[j], left[i], order):
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Sequence[float], order: SortOrder = SortOrder.ASCENDING) -> list[float]:
    """Return a sorted copy using top-down merge sort (stable)."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid], order), merge_sort(items[mid:], order), order)


def _quick(items: list[float], left: int, right: int, order: SortOrder) -> None:
    if left >= right:
        return
    pivot = items[right]
    i, j = left, right
    while i < j:
        while _before(items[i], pivot, order):
            i += 1
        while _before(pivot, items[j], order):
            j -= 1
        if i <= j:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1
    _quick(items, left, j, order)
    _quick(items, i, right, order)


def quick_sort(values: Sequence[float], order: SortOrder = SortOrder.ASCENDING) -> list[float]:
    """Return a sorted copy using quicksort with the last element as pivot."""
    items = list(values)
    _quick(items, 0, len(items) - 1, order)
    return items