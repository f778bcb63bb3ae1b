# dsakit

A small library of classic data structures and the standard problems built on
them. Each structure behaves the way the textbook version does, including its
capacity limits and edge cases, and raises an exception when an operation is
not possible (for example `StackOverflow`, `QueueUnderflow`, `HeapOverflow`,
`IndexError` or `ValueError`).

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.singly_linked` | `ListNode`, `SinglyLinkedList` (`push_front`, `push_back`, `insert_at` and `delete_at` by 1-based position, `reverse`, `middle`, `add_one`, `is_palindrome`), plus `reverse_nodes`, `has_cycle`, `cycle_start`, `remove_cycle` for raw node chains |
| `dsakit.doubly_linked` | `DoublyNode`, `DoublyLinkedList` with `push_front`, `push_back`, `insert_at`, `pop_front`, `pop_back`, `delete_at`, forward and reversed iteration |
| `dsakit.stacks` | `ArrayStack`, `TwoStacks` sharing one array, `StackOverflow`, `StackUnderflow`, list-as-stack helpers (`middle_element`, `insert_at_bottom`, `reverse_stack`, `insert_sorted`, `sort_stack`), `reverse_string`, `has_redundant_brackets`, `next_smaller_elements`, `prev_smaller_elements` |
| `dsakit.queues` | Fixed-capacity `LinearQueue`, `CircularQueue` and `ArrayDeque`, with `QueueOverflow` and `QueueUnderflow`; `slots()` shows the backing array |
| `dsakit.queue_problems` | `reverse_queue`, `reverse_first_k`, `interleave_halves`, `first_negative_in_windows`, `first_non_repeating_stream`, `sliding_window_max`, `sum_of_window_min_max` |
| `dsakit.binary_tree` | `TreeNode`, `build_from_preorder`, `preorder`, `inorder`, `postorder`, `level_order`, `level_lines`, `left_view`, `right_view`, `top_view`, `bottom_view`, `boundary_traversal` |
| `dsakit.tree_construction` | `build_from_inorder_preorder`, `build_from_inorder_postorder` |
| `dsakit.bst` | `insert`, `build_bst`, `search`, `min_value`, `max_value`, `delete`, `from_sorted`, `to_sorted_dll`, `dll_values`, `dll_to_bst` |
| `dsakit.nary_tree` | `NaryNode`, `build_nary`, `level_lines` |
| `dsakit.heaps` | Fixed-capacity `MaxHeap` (`insert`, `pop`, `peek`), `HeapOverflow`, `HeapUnderflow`, and 0-based array routines `heapify`, `build_heap`, `heap_sort` |
| `dsakit.heap_problems` | `kth_smallest`, `kth_largest`, `bst_to_max_heap`, `merge_k_sorted`, `running_medians` |

## Examples

Linked lists use 1-based positions:

```python
from dsakit.singly_linked import SinglyLinkedList

numbers = SinglyLinkedList([9, 9, 9])
numbers.add_one()
print(list(numbers))          # [1, 0, 0, 0]

items = SinglyLinkedList([30, 20, 10, 50])
items.insert_at(15, 5)        # past the end: appended
print(items)                  # 30 -> 20 -> 10 -> 50 -> 15 -> NULL
```

Fixed-capacity containers raise instead of silently dropping data:

```python
from dsakit.stacks import ArrayStack, StackOverflow

stack = ArrayStack(2)
stack.push(1)
stack.push(2)
try:
    stack.push(3)
except StackOverflow:
    print("full")
```

Sliding windows over a sequence:

```python
from dsakit.queue_problems import sliding_window_max

print(sliding_window_max([1, 3, -1, -3, 5, 3, 6, 7], 3))  # [3, 3, 5, 5, 6, 7]
```

Trees are built from a preorder sequence in which `-1` marks a missing child:

```python
from dsakit.binary_tree import build_from_preorder, level_lines, left_view

root = build_from_preorder([10, 20, 40, -1, -1, 50, -1, -1, 30, -1, -1])
print(level_lines(root))      # [[10], [20, 30], [40, 50]]
print(left_view(root))        # [10, 20, 40]
```

Binary search trees are built by inserting values up to the first `-1`:

```python
from dsakit.bst import build_bst, delete, search

root = build_bst([50, 30, 40, 20, 60, 55, 70, 80, 25, -1])
root = delete(root, 30)
print(search(root, 30))       # False
```

Heaps and the problems around them:

```python
from dsakit.heaps import heap_sort
from dsakit.heap_problems import merge_k_sorted, running_medians

values = [5, 10, 15, 20, 25, 12]
heap_sort(values)
print(values)                 # [5, 10, 12, 15, 20, 25]
print(merge_k_sorted([[1, 4, 8, 11], [2, 3, 6, 10], [5, 7, 12, 14]]))
print(running_medians([12, 10, 8, 4, 2, 3, 15]))
```

## What it does not do

This is a library only: it has no command-line program and does not prompt for
input. Trees and lists are built from Python sequences passed to the functions
above, and results are returned as values rather than printed.