# algos

Classic algorithm exercises in plain Python with no third-party
dependencies. The package covers linked lists, binary trees, binary search
trees, arrays, strings, greedy methods, dynamic programming and sorting.
Python 3.10 or later is required.

Where an input makes no sense for a function, such as an empty tree or a
negative amount, the function raises `ValueError`. It does not return a
sentinel value in those cases.

## Node types (`algos.models`)

- `ListNode(val, next)` is a singly linked list node.
- `TreeNode(val, left, right)` is a binary tree node.
- `NaryNode(val, children)` is a tree node with any number of children.
  Children that are `None` are skipped.
- `LinkedTreeNode(val, left, right, next)` is a binary tree node that also
  has a `next` pointer to its right neighbour on the same level.

All node types compare by identity, not by value.

Helpers:

- `list_from_values(values)` builds a linked list. An empty input gives
  `None`.
- `list_to_values(head)` reads a linked list back into a Python list. It
  raises `ValueError` if the list has a cycle.
- `tree_from_level_order(values)` builds a binary tree from a level-order
  listing. `None` marks a missing child.

## Linked lists (`algos.lists`)

`has_cycle`, `remove_nth_from_end`, `merge_two_lists`, `merge_k_lists`,
`delete_duplicates`, `partition`, `middle_node`.

These functions relink the nodes they are given. They do not copy them.
`middle_node` returns the second middle node when the list has an even
length.

## LRU cache (`algos.lru`)

`LRUCache(capacity)` has these members:

- `get(key)` returns the stored value, or `-1` if the key is absent.
- `put(key, value)` stores a value and evicts the least recently used entry
  when the cache is over capacity.
- It also supports `len()` and `in`.

## Strings (`algos.strings`)

- `roman_to_int` raises `ValueError` on symbols it does not know.
- `longest_common_prefix`
- `is_valid_brackets`
- `length_of_last_word`
- `longest_palindrome` returns the first palindrome of the longest length.
- `add_binary`
- `is_palindrome_number`
- `longest_common_substring` grows a string greedily from the characters of
  the shortest input. It keeps each character only while the grown string
  still occurs in every other input.

## Binary trees (`algos.trees`)

- Traversals: `preorder`, `inorder`, `postorder`, `level_order`,
  `level_order_bottom`, `right_side_view`.
- Shape: `max_depth`, `min_depth`, `is_balanced`, `is_symmetric`,
  `count_nodes`.
- Paths: `has_path_sum`, `path_sum`, `max_path_sum`, `sum_root_to_leaf`.
  `max_path_sum` raises `ValueError` for an empty tree.
- `invert_tree` swaps the children of every node in place.

## Tree queries (`algos.tree_queries`)

`lowest_common_ancestor`, `binary_tree_paths` (paths written as `1->2->5`),
`sum_of_left_leaves`, `nary_level_order`, `nary_max_depth`,
`find_bottom_left_value`, `largest_values`, `diameter_of_binary_tree`,
`average_of_levels`, `is_unival_tree`.

## Building trees (`algos.tree_construct`)

- `merge_trees` builds a new tree and leaves both inputs unchanged.
- `construct_maximum_binary_tree`
- `build_tree_from_preorder_inorder`
- `build_tree_from_inorder_postorder`
- `connect` fills in the `next` pointers of `LinkedTreeNode` trees.

## Binary search trees (`algos.bst`)

`kth_smallest`, `delete_node`, `find_mode`, `get_minimum_difference`,
`convert_bst`, `trim_bst`, `search_bst`, `insert_into_bst`, `is_valid_bst`,
`lowest_common_ancestor_bst`.

`is_valid_bst` treats an empty tree as not valid. `insert_into_bst` ignores a
value that is already present.

## Arrays (`algos.arrays`)

`count_negatives`, `two_sum`, `two_sum_sorted` (1-based positions),
`remove_duplicates`, `remove_element`, `move_zeroes`, `search_insert`,
`plus_one`, `merge_sorted`, `permute`.

`remove_duplicates`, `remove_element`, `move_zeroes` and `merge_sorted` work
in place on the list they are given.

## Greedy (`algos.greedy`)

`candy`, `erase_overlap_intervals`, `find_min_arrow_shots`,
`find_content_children`, `can_place_flowers`.

## Dynamic programming (`algos.dynamic`)

- `coin_change(coins, amount)` returns the fewest coins, or `-1` when the
  amount cannot be made.
- `fib(n)` counts from `fib(0) == 0`.
- `fibonacci(n)` counts from 1, so `fibonacci(1) == fibonacci(2) == 1`.

## Sorting (`algos.sorting`)

`quick_sort` and `merge_sort` sort a list in place in ascending order.
`merge_sort` is stable.

## Example

```python
from algos.models import tree_from_level_order, list_from_values, list_to_values
from algos.trees import level_order, max_depth
from algos.lists import merge_two_lists
from algos.strings import roman_to_int

root = tree_from_level_order([3, 9, 20, None, None, 15, 7])
level_order(root)   # [[3], [9, 20], [15, 7]]
max_depth(root)     # 3

merged = merge_two_lists(list_from_values([1, 2, 4]), list_from_values([1, 3, 4]))
list_to_values(merged)  # [1, 1, 2, 3, 4, 4]

roman_to_int("MCMXCIV")  # 1994
```

## Tests

The tests in `tests/` run under pytest. The `test` extra installs it.

## What it does not do

This is a library only. It has no command-line interface and no interactive
runner. You import its functions and call them from your own code.