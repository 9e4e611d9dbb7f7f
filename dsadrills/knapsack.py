"""The 0/1 knapsack problem, solved four ways."""

from collections.abc import Sequence


def _validate(capacity: int, weights: Sequence[int], profits: Sequence[int]) -> None:
    if capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")
    if len(weights) != len(profits):
        raise ValueError("weights and profits must have the same length")
    for weight in weights:
        if weight < 0:
            raise ValueError(f"weights must not be negative, got {weight}")


def knapsack_naive(capacity: int, weights: Sequence[int], profits: Sequence[int]) -> int:
    """Best profit of items fitting in ``capacity``, by plain recursion."""
    _validate(capacity, weights, profits)

    def solve(room: int, index: int) -> int:
        if index >= len(weights):
            return 0
        include = 0
        if weights[index] <= room:
            include = profits[index] + solve(room - weights[index], index + 1)
        exclude = solve(room, index + 1)
        return max(include, exclude)

    return solve(capacity, 0)


def knapsack_memo(capacity: int, weights: Sequence[int], profits: Sequence[int]) -> int:
    """Best profit of items fitting in ``capacity``, by recursion with a memo."""
    _validate(capacity, weights, profits)
    memo: dict[tuple[int, int], int] = {}

    def solve(room: int, index: int) -> int:
        if index >= len(weights):
            return 0
        key = (room, index)
        if key not in memo:
            include = 0
            if weights[index] <= room:
                include = profits[index] + solve(room - weights[index], index + 1)
            memo[key] = max(include, solve(room, index + 1))
        return memo[key]

    return solve(capacity, 0)


def knapsack_table(capacity: int, weights: Sequence[int], profits: Sequence[int]) -> int:
    """Best profit of items fitting in ``capacity``, by filling a full table."""
    _validate(capacity, weights, profits)
    n = len(weights)
    table = [[0] * (n + 1) for _ in range(capacity + 1)]
    for room in range(capacity + 1):
        for index in range(n - 1, -1, -1):
            include = 0
            if weights[index] <= room:
                include = profits[index] + table[room - weights[index]][index + 1]
            table[room][index] = max(include, table[room][index + 1])
    return table[capacity][0]


def knapsack(capacity: int, weights: Sequence[int], profits: Sequence[int]) -> int:
    """Best profit of items fitting in ``capacity``, keeping a single row."""
    _validate(capacity, weights, profits)
    best = [0] * (capacity + 1)
    for weight, profit in zip(reversed(weights), reversed(profits)):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], profit + best[room - weight])
    return best[capacity]