"""Sorting and searching routines on integer and character sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")

NOT_FOUND = -1


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Return a new list holding the values in ascending order (bubble sort)."""
    items = list(values)
    size = len(items)
    for done in range(size):
        swapped = False
        for j in range(size - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def binary_search(values: Sequence[T], target: T) -> int:
    """Return an index of ``target`` in the sorted ``values``, or -1."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            start = mid + 1
        else:
            end = mid - 1
    return NOT_FOUND


def binary_search_recursive(
    values: Sequence[T], target: T, start: int = 0, end: int | None = None
) -> int:
    """Recursively search ``values[start:end + 1]`` for ``target``; -1 if absent."""
    if end is None:
        end = len(values) - 1
    if start > end:
        return NOT_FOUND
    mid = start + (end - start) // 2
    if values[mid] == target:
        return mid
    if values[mid] < target:
        return binary_search_recursive(values, target, mid + 1, end)
    return binary_search_recursive(values, target, start, mid - 1)


def linear_search_recursive(values: Sequence[T], target: T, start: int = 0) -> int:
    """Recursively scan from ``start`` for the first ``target``; -1 if absent."""
    if start >= len(values):
        return NOT_FOUND
    if values[start] == target:
        return start
    return linear_search_recursive(values, target, start + 1)


def first_index(values: Sequence[T], target: T) -> int:
    """Return the first index of ``target`` in the sorted ``values``, or -1."""
    start, end = 0, len(values) - 1
    result = NOT_FOUND
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] == target:
            result = mid
            end = mid - 1
        elif target < values[mid]:
            end = mid - 1
        else:
            start = mid + 1
    return result


def last_index(values: Sequence[T], target: T) -> int:
    """Return the last index of ``target`` in the sorted ``values``, or -1."""
    start, end = 0, len(values) - 1
    result = NOT_FOUND
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] == target:
            result = mid
            start = mid + 1
        elif target < values[mid]:
            end = mid - 1
        else:
            start = mid + 1
    return result


def count_occurrences(values: Iterable[T], target: T) -> int:
    """Count how often ``target`` occurs, scanning every value."""
    return sum(1 for value in values if value == target)


def count_frequency(values: Sequence[T], target: T) -> int:
    """Count ``target`` in the sorted ``values`` using two binary searches."""
    first = first_index(values, target)
    if first == NOT_FOUND:
        return 0
    return last_index(values, target) - first + 1


def next_greater_letter(letters: Sequence[str], target: str) -> str | None:
    """Return the smallest letter in the sorted ``letters`` greater than ``target``.

    Returns None when every letter is less than or equal to ``target``.
    """
    start, end = 0, len(letters) - 1
    candidate: str | None = None
    while start <= end:
        mid = start + (end - start) // 2
        if letters[mid] > target:
            candidate = letters[mid]
            end = mid - 1
        else:
            start = mid + 1
    return candidate