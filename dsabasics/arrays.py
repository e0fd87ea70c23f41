"""Basic operations on one-dimensional sequences of integers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def format_values(values: Iterable[object], separator: str = " ") -> str:
    """Render the values as text, joined by ``separator``."""
    return separator.join(str(value) for value in values)


def array_sum(values: Iterable[int]) -> int:
    """Return the total of all values; an empty sequence sums to 0."""
    return sum(values)


def array_max(values: Iterable[int]) -> int:
    """Return the largest value.

    Raises ValueError when there are no values.
    """
    items = list(values)
    if not items:
        raise ValueError("array_max() of an empty sequence")
    return max(items)


def count_even(values: Iterable[int]) -> int:
    """Count the even values."""
    return sum(1 for value in values if value % 2 == 0)


def count_odd(values: Iterable[int]) -> int:
    """Count the odd values."""
    return sum(1 for value in values if value % 2 != 0)


def count_pairs_with_sum(values: Sequence[int], target: int) -> int:
    """Count consecutive, non-overlapping pairs whose sum equals ``target``.

    The values are taken two at a time: (0, 1), (2, 3), ... A trailing
    unpaired value is ignored.
    """
    iterator = iter(values)
    return sum(1 for first, second in zip(iterator, iterator) if first + second == target)


def reverse_in_place(values: list[int]) -> None:
    """Reverse the list in place, using no extra storage."""
    values.reverse()