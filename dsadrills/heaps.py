"""Heap drills: a bounded max-heap, heap sort and k-way merges."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import count


class HeapOverflow(Exception):
    """Raised when inserting into a full heap."""


def _sift_down(items: list[int], size: int, index: int) -> None:
    """Move ``items[index]`` down until the first ``size`` items form a max-heap."""
    while True:
        left = 2 * index + 1
        right = left + 1
        largest = index
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


class MaxHeap:
    """A max-heap holding at most ``capacity`` integers."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self._capacity = capacity
        self._items: list[int] = []

    def insert(self, value: int) -> None:
        """Add ``value``, raising :class:`HeapOverflow` when full."""
        if len(self._items) == self._capacity:
            raise HeapOverflow("heap overflow")
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[index] <= items[parent]:
                break
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def pop(self) -> int:
        """Remove and return the largest value."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            _sift_down(self._items, len(self._items), 0)
        return top

    def __len__(self) -> int:
        return len(self._items)

    def items(self) -> list[int]:
        """Return the stored values in heap order."""
        return list(self._items)


def build_max_heap(values: Iterable[int]) -> list[int]:
    """Return ``values`` rearranged into a max-heap, root first."""
    heap = list(values)
    for index in range(len(heap) // 2 - 1, -1, -1):
        _sift_down(heap, len(heap), index)
    return heap


def heap_sort(values: Iterable[int]) -> list[int]:
    """Return ``values`` in ascending order, sorted through a max-heap."""
    heap = build_max_heap(values)
    for end in range(len(heap) - 1, 0, -1):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, end, 0)
    return heap


def merge_k_sorted_arrays(arrays: Sequence[Sequence[int]]) -> list[int]:
    """Merge ascending sequences into one ascending list."""
    pending = [(row[0], index, 0) for index, row in enumerate(arrays) if row]
    heapq.heapify(pending)
    merged = []
    while pending:
        value, row, column = heapq.heappop(pending)
        merged.append(value)
        if column + 1 < len(arrays[row]):
            heapq.heappush(pending, (arrays[row][column + 1], row, column + 1))
    return merged


@dataclass(eq=False)
class ListNode:
    """A singly linked list node holding an integer value."""

    val: int
    next: ListNode | None = None


def merge_k_lists(lists: Iterable[ListNode | None]) -> ListNode | None:
    """Merge ascending linked lists by relinking their nodes; return the head."""
    order = count()
    pending = [(head.val, next(order), head) for head in lists if head is not None]
    heapq.heapify(pending)
    head: ListNode | None = None
    tail: ListNode | None = None
    while pending:
        _, _, node = heapq.heappop(pending)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
        if node.next is not None:
            heapq.heappush(pending, (node.next.val, next(order), node.next))
    return head