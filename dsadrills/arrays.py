"""Array drills: insertion, deletion, rotation, partitioning and scans."""

from collections import Counter
from collections.abc import Sequence
from functools import reduce
from operator import xor


def insert_at(values: Sequence[int], element: int, position: int) -> list[int]:
    """Return a copy of ``values`` with ``element`` inserted at ``position``."""
    if not 0 <= position <= len(values):
        raise IndexError(f"position {position} outside 0..{len(values)}")
    result = list(values)
    result.insert(position, element)
    return result


def delete_last_occurrence(values: Sequence[int], element: int) -> list[int]:
    """Return a copy of ``values`` without the last element equal to ``element``."""
    index = next(
        (i for i in range(len(values) - 1, -1, -1) if values[i] == element), None
    )
    if index is None:
        raise ValueError(f"no such element: {element}")
    return [*values[:index], *values[index + 1:]]


def largest(values: Sequence[int]) -> int:
    """Return the largest element."""
    if not values:
        raise ValueError("largest of an empty sequence")
    return max(values)


def smallest(values: Sequence[int]) -> int:
    """Return the smallest element."""
    if not values:
        raise ValueError("smallest of an empty sequence")
    return min(values)


def second_largest(values: Sequence[int]) -> int:
    """Return the largest element strictly below the maximum."""
    top = largest(values)
    below = [value for value in values if value != top]
    if not below:
        raise ValueError("no element differs from the largest")
    return max(below)


def second_smallest(values: Sequence[int]) -> int:
    """Return the smallest element strictly above the minimum."""
    bottom = smallest(values)
    above = [value for value in values if value != bottom]
    if not above:
        raise ValueError("no element differs from the smallest")
    return min(above)


def remove_adjacent_duplicates(values: Sequence[int]) -> list[int]:
    """Drop every element equal to the one kept just before it."""
    result: list[int] = []
    for value in values:
        if not result or result[-1] != value:
            result.append(value)
    return result


def move_zeros_to_end(values: Sequence[int]) -> list[int]:
    """Return the non-zero elements in order, followed by the zeros."""
    non_zero = [value for value in values if value != 0]
    return non_zero + [0] * (len(values) - len(non_zero))


def rotate_right_by_one(values: Sequence[int]) -> list[int]:
    """Move the last element to the front."""
    if not values:
        return []
    return [values[-1], *values[:-1]]


def rotate_left(values: Sequence[int], k: int) -> list[int]:
    """Rotate ``values`` left by ``k`` places, 0 <= k <= len(values)."""
    if not 0 <= k <= len(values):
        raise ValueError(f"rotation {k} outside 0..{len(values)}")
    return [*values[k:], *values[:k]]


def single_number(values: Sequence[int]) -> int:
    """Return the element that occurs once when every other occurs twice."""
    return reduce(xor, values, 0)


def missing_number(values: Sequence[int]) -> int:
    """Return the number of 0..n missing from the n distinct ``values``."""
    n = len(values)
    return n * (n + 1) // 2 - sum(values)


def has_pair_with_sum(sorted_values: Sequence[int], target: int) -> bool:
    """Return True if two elements of the ascending sequence add up to ``target``."""
    low, high = 0, len(sorted_values) - 1
    while low < high:
        total = sorted_values[low] + sorted_values[high]
        if total == target:
            return True
        if total > target:
            high -= 1
        else:
            low += 1
    return False


def leaders(values: Sequence[int]) -> list[int]:
    """Return the elements greater than everything to their right, rightmost first."""
    result: list[int] = []
    for value in reversed(values):
        if not result or value > result[-1]:
            result.append(value)
    return result


def max_difference(values: Sequence[int]) -> int:
    """Largest ``values[j] - values[i]`` with i < j and values[i] < values[j]."""
    best: int | None = None
    lowest: int | None = None
    for value in values:
        if lowest is not None and value > lowest:
            gain = value - lowest
            if best is None or gain > best:
                best = gain
        if lowest is None or value < lowest:
            lowest = value
    if best is None:
        raise ValueError("no larger element follows a smaller one")
    return best


def pivot_index(values: Sequence[int]) -> int:
    """Index where the sums to the left and to the right are equal, or -1."""
    total = sum(values)
    left = 0
    for index, value in enumerate(values):
        if left == total - left - value:
            return index
        left += value
    return -1


def sort_colors(values: Sequence[int]) -> list[int]:
    """Sort a sequence of 0s, 1s and 2s with a single three-way partition."""
    result = list(values)
    low, mid, high = 0, 0, len(result) - 1
    while mid <= high:
        colour = result[mid]
        if colour == 0:
            result[low], result[mid] = result[mid], result[low]
            low += 1
            mid += 1
        elif colour == 1:
            mid += 1
        elif colour == 2:
            result[mid], result[high] = result[high], result[mid]
            high -= 1
        else:
            raise ValueError(f"expected 0, 1 or 2, got {colour}")
    return result


def segregate_signs(values: Sequence[int]) -> list[int]:
    """Non-negative elements first, then negative ones, each in original order."""
    return [v for v in values if v >= 0] + [v for v in values if v < 0]


def find_duplicate(values: Sequence[int]) -> int:
    """Return the most frequent value, the smallest on ties, or -1 when empty."""
    if not values:
        return -1
    counts = Counter(values)
    return min(counts, key=lambda value: (-counts[value], value))


def common_elements(
    first: Sequence[int], second: Sequence[int], third: Sequence[int]
) -> list[int]:
    """Return the distinct values present in all three sequences, ascending."""
    return sorted(set(first) & set(second) & set(third))


def wave(values: Sequence[int]) -> list[int]:
    """Swap each adjacent pair (0, 1), (2, 3), ... to form a wave."""
    result = list(values)
    for i in range(1, len(result), 2):
        result[i - 1], result[i] = result[i], result[i - 1]
    return result