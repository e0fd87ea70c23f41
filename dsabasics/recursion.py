"""Recursive formulations of simple numeric and sequence problems."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cache


def sum_to(n: int) -> int:
    """Return n + (n - 1) + ... + 1, computed recursively.

    Raises ValueError when ``n`` is below 1.
    """
    if n < 1:
        raise ValueError("sum_to() needs n >= 1")
    if n == 1:
        return 1
    return n + sum_to(n - 1)


def count_down(n: int) -> list[int]:
    """Return the numbers from ``n`` down to 1; empty when ``n`` is below 1."""
    if n < 1:
        return []
    return [n, *count_down(n - 1)]


def count_up(n: int, start: int = 1) -> list[int]:
    """Return the numbers from ``start`` up to ``n``; empty when ``start`` exceeds ``n``."""
    if start > n:
        return []
    return [start, *count_up(n, start + 1)]


def elements(values: Sequence[int], index: int = 0) -> list[int]:
    """Return the values from ``index`` to the end, visited recursively."""
    if index >= len(values):
        return []
    return [values[index], *elements(values, index + 1)]


def elements_reversed(values: Sequence[int]) -> list[int]:
    """Return the values from last to first, visited recursively."""

    def visit(position: int) -> list[int]:
        if position < 0:
            return []
        return [values[position], *visit(position - 1)]

    return visit(len(values) - 1)


def _extreme(values: Sequence[int], better, name: str) -> int:
    if not values:
        raise ValueError(f"{name}() of an empty sequence")

    def visit(index: int, best: int) -> int:
        if index == len(values):
            return best
        return visit(index + 1, values[index] if better(values[index], best) else best)

    return visit(1, values[0])


def recursive_min(values: Sequence[int]) -> int:
    """Return the smallest value. Raises ValueError when there are none."""
    return _extreme(values, lambda candidate, best: candidate < best, "recursive_min")


def recursive_max(values: Sequence[int]) -> int:
    """Return the largest value. Raises ValueError when there are none."""
    return _extreme(values, lambda candidate, best: candidate > best, "recursive_max")


def factorial(n: int) -> int:
    """Return n!, computed with an accumulating recursion.

    Raises ValueError for negative ``n``.
    """
    if n < 0:
        raise ValueError("factorial() needs n >= 0")

    def accumulate(remaining: int, product: int) -> int:
        if remaining == 0:
            return product
        return accumulate(remaining - 1, product * remaining)

    return accumulate(n, 1)


@cache
def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fibonacci(1) == fibonacci(2) == 1.

    Raises ValueError when ``n`` is below 1.
    """
    if n < 1:
        raise ValueError("fibonacci() needs n >= 1")
    if n <= 2:
        return 1
    return fibonacci(n - 1) + fibonacci(n - 2)