"""Fibonacci and house-robber sequences solved four ways each."""

from collections.abc import Sequence


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"expected a non-negative number, got {n}")


def fibonacci_naive(n: int) -> int:
    """``n``-th Fibonacci number by plain recursion."""
    _require_non_negative(n)
    if n < 2:
        return n
    return fibonacci_naive(n - 1) + fibonacci_naive(n - 2)


def fibonacci_memo(n: int) -> int:
    """``n``-th Fibonacci number by recursion with a memo."""
    _require_non_negative(n)
    memo: dict[int, int] = {0: 0, 1: 1}

    def solve(k: int) -> int:
        if k not in memo:
            memo[k] = solve(k - 1) + solve(k - 2)
        return memo[k]

    return solve(n)


def fibonacci_table(n: int) -> int:
    """``n``-th Fibonacci number by filling a table bottom up."""
    _require_non_negative(n)
    table = [0, 1]
    for index in range(2, n + 1):
        table.append(table[index - 1] + table[index - 2])
    return table[n]


def fibonacci(n: int) -> int:
    """``n``-th Fibonacci number keeping only the last two terms."""
    _require_non_negative(n)
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous


def rob_naive(values: Sequence[int]) -> int:
    """Best total of non-adjacent elements, by plain recursion."""

    def solve(index: int) -> int:
        if index >= len(values):
            return 0
        return max(values[index] + solve(index + 2), solve(index + 1))

    return solve(0)


def rob_memo(values: Sequence[int]) -> int:
    """Best total of non-adjacent elements, by recursion with a memo."""
    memo: dict[int, int] = {}

    def solve(index: int) -> int:
        if index >= len(values):
            return 0
        if index not in memo:
            memo[index] = max(values[index] + solve(index + 2), solve(index + 1))
        return memo[index]

    return solve(0)


def rob_table(values: Sequence[int]) -> int:
    """Best total of non-adjacent elements, by filling a table from the end."""
    best = [0] * (len(values) + 2)
    for index in range(len(values) - 1, -1, -1):
        best[index] = max(values[index] + best[index + 2], best[index + 1])
    return best[0]


def rob(values: Sequence[int]) -> int:
    """Best total of non-adjacent elements, keeping only two running answers."""
    after_next, after = 0, 0
    for value in reversed(values):
        after_next, after = after, max(value + after_next, after)
    return after