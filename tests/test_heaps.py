import pytest
from hypothesis import given, strategies as st

from dsadrills.heaps import (
    HeapOverflow,
    ListNode,
    MaxHeap,
    build_max_heap,
    heap_sort,
    merge_k_lists,
    merge_k_sorted_arrays,
)

int_lists = st.lists(st.integers(-1000, 1000), max_size=60)


def _holds_heap_property(items):
    return all(
        items[parent] >= items[child]
        for child in range(1, len(items))
        for parent in [(child - 1) // 2]
    )


def _to_linked(values):
    head = None
    for value in reversed(values):
        head = ListNode(value, head)
    return head


def _from_linked(head):
    values = []
    while head is not None:
        values.append(head.val)
        head = head.next
    return values


def test_insert_keeps_largest_on_top():
    heap = MaxHeap(20)
    for value in [10, 20, 5, 11, 6]:
        heap.insert(value)
    assert heap.items() == [20, 11, 5, 10, 6]
    assert len(heap) == 5


@given(int_lists)
def test_pops_come_out_descending(values):
    heap = MaxHeap(len(values))
    for value in values:
        heap.insert(value)
    assert _holds_heap_property(heap.items())
    popped = [heap.pop() for _ in range(len(values))]
    assert popped == sorted(values, reverse=True)
    assert len(heap) == 0


def test_insert_into_full_heap_raises():
    heap = MaxHeap(2)
    heap.insert(1)
    heap.insert(2)
    with pytest.raises(HeapOverflow):
        heap.insert(3)
    assert sorted(heap.items()) == [1, 2]


def test_pop_from_empty_heap_raises():
    with pytest.raises(IndexError):
        MaxHeap(3).pop()


def test_negative_capacity_raises():
    with pytest.raises(ValueError):
        MaxHeap(-1)


def test_build_max_heap_worked_example():
    assert build_max_heap([5, 10, 15, 20, 25, 12]) == [25, 20, 15, 5, 10, 12]


@given(int_lists)
def test_build_max_heap_property(values):
    heap = build_max_heap(values)
    assert _holds_heap_property(heap)
    assert sorted(heap) == sorted(values)


@given(int_lists)
def test_heap_sort_sorts(values):
    assert heap_sort(values) == sorted(values)


def test_merge_k_sorted_arrays_example():
    arrays = [[1, 4, 8, 11], [2, 3, 6, 10], [5, 7, 12, 14]]
    flat = [value for row in arrays for value in row]
    assert merge_k_sorted_arrays(arrays) == sorted(flat)


@given(st.lists(int_lists, max_size=6))
def test_merge_k_sorted_arrays_any_lengths(rows):
    arrays = [sorted(row) for row in rows]
    flat = [value for row in arrays for value in row]
    assert merge_k_sorted_arrays(arrays) == sorted(flat)


@given(st.lists(int_lists, max_size=6))
def test_merge_k_lists(rows):
    lists = [_to_linked(sorted(row)) for row in rows]
    flat = [value for row in rows for value in row]
    assert _from_linked(merge_k_lists(lists)) == sorted(flat)


def test_merge_k_lists_all_empty():
    assert merge_k_lists([None, None]) is None


def test_merge_k_lists_reuses_nodes():
    first = _to_linked([1, 3])
    second = _to_linked([2])
    head = merge_k_lists([first, second])
    assert head is first
    assert head.next is second
    assert _from_linked(head) == [1, 2, 3]