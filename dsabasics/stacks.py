"""Stack- and queue-based exercises on strings, digits and integer sequences."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


def reverse_string(text: str) -> str:
    """Return ``text`` reversed by pushing its characters onto a stack."""
    stack = list(text)
    reversed_chars = []
    while stack:
        reversed_chars.append(stack.pop())
    return "".join(reversed_chars)


def rebuild_number(number: int) -> int:
    """Push the digits of ``number`` onto a stack and rebuild it from them.

    Digits are pushed least significant first and popped back as increasing
    powers of ten, so the result has its digits in reverse order. The sign
    is kept.
    """
    sign = -1 if number < 0 else 1
    remaining = abs(number)
    stack = []
    while remaining:
        remaining, digit = divmod(remaining, 10)
        stack.append(digit)
    result = 0
    place = 1
    while stack:
        result += place * stack.pop()
        place *= 10
    return sign * result


def remove_adjacent_duplicates(text: str) -> str:
    """Repeatedly remove pairs of equal adjacent characters."""
    stack: list[str] = []
    for char in text:
        if stack and stack[-1] == char:
            stack.pop()
        else:
            stack.append(char)
    return "".join(stack)


def drain_queue(values: Iterable[int]) -> list[int]:
    """Put the values into a queue and return them as taken out, FIFO."""
    queue = deque(values)
    drained = []
    while queue:
        drained.append(queue.popleft())
    return drained


def fifo_via_stacks(values: Iterable[int]) -> list[int]:
    """Return the values in FIFO order using two stacks."""
    first = list(values)
    second = []
    while first:
        second.append(first.pop())
    ordered = []
    while second:
        ordered.append(second.pop())
    return ordered


def reverse_queue(queue: deque[int]) -> None:
    """Reverse the queue in place by cycling its items through a stack."""
    stack = []
    while queue:
        stack.append(queue.popleft())
    while stack:
        queue.append(stack.pop())