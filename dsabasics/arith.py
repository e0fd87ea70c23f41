"""Small arithmetic routines on integers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class EvenOddCount:
    """How many even and odd values a sequence holds."""

    even: int
    odd: int


def add_three(a: int, b: int, c: int) -> int:
    """Return the sum of three integers."""
    return a + b + c


def inclusive_range(low: int, high: int) -> list[int]:
    """Return every integer from ``low`` to ``high``, both included."""
    return list(range(low, high + 1))


def count_even_odd(values: Iterable[int]) -> EvenOddCount:
    """Count the even and the odd values."""
    even = odd = 0
    for value in values:
        if value % 2 == 0:
            even += 1
        else:
            odd += 1
    return EvenOddCount(even=even, odd=odd)


def natural_sum(n: int) -> int:
    """Return 1 + 2 + ... + n; zero when ``n`` is below 1."""
    return n * (n + 1) // 2 if n > 0 else 0


def is_prime(n: int) -> bool:
    """Tell whether ``n`` is a prime number."""
    if n < 2:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0:
        return False
    divisor = 3
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 2
    return True


def count_primes(n: int) -> int:
    """Count the primes from 2 up to ``n`` inclusive."""
    return sum(1 for candidate in range(2, n + 1) if is_prime(candidate))


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of ``n``, carrying its sign."""
    total = sum(int(digit) for digit in str(abs(n)))
    return -total if n < 0 else total