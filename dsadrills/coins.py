"""Fewest coins adding up to an amount, solved three ways."""

from collections.abc import Sequence

_IMPOSSIBLE = -1


def _validate(coins: Sequence[int], amount: int) -> None:
    if amount < 0:
        raise ValueError(f"amount must not be negative, got {amount}")
    for coin in coins:
        if coin <= 0:
            raise ValueError(f"coin values must be positive, got {coin}")


def coin_change_naive(coins: Sequence[int], amount: int) -> int:
    """Fewest coins making ``amount`` by plain recursion, or -1 if none do."""
    _validate(coins, amount)

    def solve(remaining: int) -> int | None:
        if remaining == 0:
            return 0
        options = (
            solve(remaining - coin) for coin in coins if remaining - coin >= 0
        )
        counts = [count + 1 for count in options if count is not None]
        return min(counts, default=None)

    best = solve(amount)
    return _IMPOSSIBLE if best is None else best


def coin_change_memo(coins: Sequence[int], amount: int) -> int:
    """Fewest coins making ``amount`` by recursion with a memo, or -1 if none do."""
    _validate(coins, amount)
    memo: dict[int, int | None] = {0: 0}

    def solve(remaining: int) -> int | None:
        if remaining not in memo:
            counts = [
                count + 1
                for coin in coins
                if remaining - coin >= 0
                and (count := solve(remaining - coin)) is not None
            ]
            memo[remaining] = min(counts, default=None)
        return memo[remaining]

    best = solve(amount)
    return _IMPOSSIBLE if best is None else best


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Fewest coins making ``amount`` by filling a table bottom up, or -1 if none do."""
    _validate(coins, amount)
    best: list[int | None] = [0] + [None] * amount
    for value in range(1, amount + 1):
        counts = [
            previous + 1
            for coin in coins
            if value - coin >= 0 and (previous := best[value - coin]) is not None
        ]
        best[value] = min(counts, default=None)
    result = best[amount]
    return _IMPOSSIBLE if result is None else result