"""Recursion drills over integers and integer sequences."""

from bisect import bisect_left
from collections.abc import Sequence


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"expected a non-negative number, got {n}")


def count_up(n: int) -> list[int]:
    """Return the numbers 1 to ``n`` in order."""
    _require_non_negative(n)
    return list(range(1, n + 1))


def sum_to(n: int) -> int:
    """Return 1 + 2 + ... + ``n``."""
    _require_non_negative(n)
    return sum(range(n + 1))


def power_of_two(n: int) -> int:
    """Return 2 raised to ``n``."""
    _require_non_negative(n)
    return 2**n


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with fibonacci(0) == 0."""
    _require_non_negative(n)
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous


def factorial(n: int) -> int:
    """Return ``n`` factorial."""
    _require_non_negative(n)
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def linear_search(values: Sequence[int], target: int) -> int:
    """Index of the first element equal to ``target``, or -1."""
    return next((i for i, value in enumerate(values) if value == target), -1)


def is_sorted(values: Sequence[int]) -> bool:
    """Return True if ``values`` never decreases."""
    return all(a <= b for a, b in zip(values, values[1:]))


def maximum(values: Sequence[int]) -> int:
    """Return the largest element."""
    if not values:
        raise ValueError("maximum of an empty sequence")
    return max(values)


def minimum(values: Sequence[int]) -> int:
    """Return the smallest element."""
    if not values:
        raise ValueError("minimum of an empty sequence")
    return min(values)


def every_other(values: Sequence[int], start: int) -> list[int]:
    """Return the elements at ``start``, ``start + 2``, ``start + 4`` and so on."""
    return list(values[start::2])


def digits_reversed(n: int) -> list[int]:
    """Return the decimal digits of ``n``, least significant first; none for n <= 0."""
    digits = []
    while n > 0:
        n, digit = divmod(n, 10)
        digits.append(digit)
    return digits


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of ``n``; 0 for n <= 0."""
    return sum(digits_reversed(n))


def binary_search(values: Sequence[int], target: int) -> int:
    """Index of ``target`` in the ascending ``values``, or -1."""
    index = bisect_left(values, target)
    if index < len(values) and values[index] == target:
        return index
    return -1