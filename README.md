# dsadrills

Classic data-structure and algorithm exercises as small, plain Python
functions and classes. Nothing outside the standard library is needed.

Functions that work on sequences take them as arguments and return new
values; the few that relink nodes in place (`bst.to_linked_list`,
`bst.linked_list_to_bst`, `heaps.merge_k_lists`) say so in their docstrings.
Bad input raises `ValueError` or `IndexError`; searches that may find
nothing return `-1`.

## Modules

- `dsadrills.strings`: `valid_palindrome` (at most one deletion),
  `count_palindromic_substrings`, `decode_message` (substitution key),
  `count_sort`, `is_anagram`, `is_isomorphic`, `longest_common_prefix`,
  `decode_string`, `is_palindrome`, `is_subsequence`,
  `leftmost_repeating_index`, `leftmost_non_repeating_index`.
- `dsadrills.recursion`: `count_up`, `sum_to`, `power_of_two`, `fibonacci`,
  `factorial`, `linear_search`, `is_sorted`, `maximum`, `minimum`,
  `every_other`, `digits_reversed`, `digit_sum`, `binary_search`.
- `dsadrills.arrays`: `insert_at`, `delete_last_occurrence`, `largest`,
  `smallest`, `second_largest`, `second_smallest`,
  `remove_adjacent_duplicates`, `move_zeros_to_end`, `rotate_right_by_one`,
  `rotate_left`, `single_number`, `missing_number`, `has_pair_with_sum`,
  `leaders`, `max_difference`, `pivot_index`, `sort_colors` (three-way
  partition), `segregate_signs`, `find_duplicate`, `common_elements`, `wave`.
- `dsadrills.stacks`: stacks are lists with the top at the end.
  `reverse_string`, `middle_element`, `delete_middle`, `insert_at_bottom`,
  `insert_at_position`, `reverse_stack`, `insert_sorted`, `sort_stack`.
  Each returns a new list and leaves its argument untouched.
- `dsadrills.queues`: fixed-capacity `LinearQueue`, `CircularQueue` and
  `CircularDeque`. They raise `QueueOverflow` when full and
  `QueueUnderflow` when empty. `slots()` shows the underlying slot array,
  with `None` in unused slots.
- `dsadrills.queue_problems`: `reverse_queue`, `reverse_first_k`,
  `interleave_halves`, `first_negatives` (per window), 
  `first_non_repeating_stream`, `can_complete_circuit`, `max_sliding_window`.
- `dsadrills.binary_tree`: `TreeNode`, `build_from_preorder` (with `-1` for
  empty subtrees), `preorder`, `inorder`, `postorder`, `level_order`,
  `max_depth`, `height`, `diameter`, `is_balanced`,
  `lowest_common_ancestor`, `has_path_sum`, `path_sums`,
  `build_from_preorder_inorder`, `build_from_postorder_inorder`.
- `dsadrills.bst`: binary search trees of `TreeNode`, with equal values going
  right. `insert`, `build_bst`, `minimum`, `maximum`, `contains`, `delete`,
  `from_sorted`, `to_linked_list`, `linked_list_to_bst`.
- `dsadrills.heaps`: `MaxHeap` with a capacity (raises `HeapOverflow`),
  `build_max_heap`, `heap_sort`, `merge_k_sorted_arrays`, `ListNode` and
  `merge_k_lists`.
- `dsadrills.sequences`: Fibonacci (`fibonacci_naive`, `fibonacci_memo`,
  `fibonacci_table`, `fibonacci`) and house robber (`rob_naive`, `rob_memo`,
  `rob_table`, `rob`).
- `dsadrills.coins`: `coin_change_naive`, `coin_change_memo`, `coin_change`.
- `dsadrills.knapsack`: 0/1 knapsack as `knapsack_naive`, `knapsack_memo`,
  `knapsack_table`, `knapsack`.
- `dsadrills.string_dp`: `edit_distance_naive`, `edit_distance`,
  `longest_common_subsequence_naive`, `longest_common_subsequence`,
  `longest_palindromic_subsequence`.

## Example

```python
from dsadrills.strings import decode_string
from dsadrills.coins import coin_change
from dsadrills.knapsack import knapsack
from dsadrills.string_dp import edit_distance
from dsadrills.queues import CircularQueue

decode_string("3[a]2[bc]")            # "aaabcbc"
coin_change([1, 2, 5], 11)            # 3
knapsack(6, [1, 2, 3], [10, 15, 40])  # 65
edit_distance("horse", "ros")         # 3

queue = CircularQueue(2)
queue.push(1)
queue.push(2)
queue.pop()                           # 1
```

## What it does not do

There is no command-line program and nothing reads from standard input:
every exercise is a function or class you call from Python with your own
values.

## Running the tests

```
pip install -e ".[test]"
pytest
```