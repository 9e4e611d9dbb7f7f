"""Queue drills: reversals, interleaving, sliding windows and streams."""

from collections import Counter, deque
from collections.abc import Iterable, Sequence


def reverse_queue(queue: Iterable[int]) -> deque[int]:
    """Return a queue holding the items of ``queue`` in reverse order."""
    stack = list(queue)
    return deque(reversed(stack))


def reverse_first_k(queue: Iterable[int], k: int) -> deque[int]:
    """Reverse the first ``k`` items; unchanged when k is 0 or exceeds the length."""
    if k < 0:
        raise ValueError(f"k must not be negative, got {k}")
    items = deque(queue)
    if k == 0 or k > len(items):
        return items
    head = [items.popleft() for _ in range(k)]
    items.extendleft(head)
    return items


def interleave_halves(queue: Iterable[int]) -> deque[int]:
    """Interleave the first half of the queue with the second half."""
    first = deque(queue)
    second = deque(first.popleft() for _ in range(len(first) // 2))
    while second:
        first.append(second.popleft())
        first.append(first.popleft())
    return first


def _check_window(values: Sequence[int], k: int) -> None:
    if not 1 <= k <= len(values):
        raise ValueError(f"window size {k} outside 1..{len(values)}")


def first_negatives(values: Sequence[int], k: int) -> list[int]:
    """First negative number of every window of size ``k``, or 0 if there is none."""
    _check_window(values, k)
    negatives: deque[int] = deque()
    result = []
    for index, value in enumerate(values):
        if value < 0:
            negatives.append(index)
        if negatives and negatives[0] <= index - k:
            negatives.popleft()
        if index >= k - 1:
            result.append(values[negatives[0]] if negatives else 0)
    return result


def first_non_repeating_stream(text: str) -> str:
    """For each prefix, the first character seen once so far, or ``#``."""
    counts: Counter[str] = Counter()
    pending: deque[str] = deque()
    answers = []
    for ch in text:
        counts[ch] += 1
        pending.append(ch)
        while pending and counts[pending[0]] > 1:
            pending.popleft()
        answers.append(pending[0] if pending else "#")
    return "".join(answers)


def can_complete_circuit(gas: Sequence[int], cost: Sequence[int]) -> int:
    """Station from which a full circuit can be driven, or -1."""
    if len(gas) != len(cost):
        raise ValueError("gas and cost must have the same length")
    deficit = balance = start = 0
    for index, (fuel, spend) in enumerate(zip(gas, cost)):
        balance += fuel - spend
        if balance < 0:
            deficit += -balance
            start = index + 1
            balance = 0
    return start if balance - deficit >= 0 else -1


def max_sliding_window(values: Sequence[int], k: int) -> list[int]:
    """Maximum of every window of size ``k``."""
    _check_window(values, k)
    window: deque[int] = deque()
    result = []
    for index, value in enumerate(values):
        while window and value > values[window[-1]]:
            window.pop()
        window.append(index)
        if window[0] <= index - k:
            window.popleft()
        if index >= k - 1:
            result.append(values[window[0]])
    return result