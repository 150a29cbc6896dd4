# dsakit

Classic algorithms on sequences and binary trees: backtracking,
recursion, tree traversals, tree properties and binary search trees.
Pure Python, no dependencies beyond the standard library.

## Install

```
pip install .
```

## Modules

### `dsakit.backtracking`

- `subset_sums(values)` — the sums of every subset, ascending.
- `letter_combinations(digits)` — every word a phone keypad spells for a
  digit string; an empty string gives `[]`, a non-digit raises
  `ValueError`.
- `combination_sum(candidates, target)` — combinations of reusable
  positive candidates that add up to `target`, in search order.
- `maze_paths(grid)` — every path through a square 0/1 grid from the
  top-left to the bottom-right cell as strings of `D`, `L`, `R`, `U`,
  sorted.

### `dsakit.recursion`

- `reverse_in_place(chars)`, `recursive_sort(values)` (stable),
  `delete_middle(stack)`, `sort_stack(stack)` — stacks are lists,
  bottom first.
- `kth_symbol(n, k)` — the k-th symbol of row n of the 0/1 grammar.
- `subsets(values)`, `permutations(values)`.
- `josephus(n, k)` — the 1-based survivor's position.

### `dsakit.tree`

- `TreeNode(value, left=None, right=None)` — nodes compare by identity.
- `parse_tree(tokens)` — builds a tree from preorder values, a string or
  an iterable, with `-1` for an empty child; raises `ValueError` if the
  input ends too early.
- Generators `breadth_first`, `inorder`, `preorder`, `postorder`.

### `dsakit.traversal`

`level_order`, `preorder_iterative`, `inorder_iterative`,
`postorder_iterative`, `pre_in_post` (returns a `Traversals` named tuple
of `preorder`, `inorder`, `postorder`), `zigzag_level_order`, `boundary`,
`vertical_order`, `top_view`, `bottom_view`, `right_side_view`,
`max_width` and `morris_inorder`.

### `dsakit.properties`

`is_balanced`, `diameter`, `max_path_sum`, `is_same_tree`,
`is_symmetric`, `path_to`, `lowest_common_ancestor` (by node identity),
`lowest_common_ancestor_by_value`, `enforce_children_sum` (changes values
in place), `time_to_burn`, `count_complete_nodes` and
`build_from_inorder_postorder`.

### `dsakit.bst`

`search`, `ceil` and `floor` (return `None` when there is no such
value), `insert`, `delete`, `kth_smallest`, `is_valid_bst`,
`bst_lowest_common_ancestor`, `from_preorder`, `inorder_successor`, and
`BSTIterator`, which yields the values in ascending order and offers
`has_next()`.

## Example

```python
from dsakit.tree import parse_tree, breadth_first
from dsakit.backtracking import letter_combinations

root = parse_tree("1 3 7 -1 -1 11 -1 -1 5 17 -1 -1 -1")
print(list(breadth_first(root)))      # [1, 3, 5, 7, 11, 17]
print(letter_combinations("23"))      # ['ad', 'ae', 'af', 'bd', ...]
```

## Command line

`dsakit-tree` reads a tree as whitespace-separated preorder values from
standard input, with `-1` for an empty child, and prints one traversal
of it on a single line:

```
echo "1 3 7 -1 -1 11 -1 -1 5 17 -1 -1 -1" | dsakit-tree
echo "1 3 7 -1 -1 11 -1 -1 5 17 -1 -1 -1" | dsakit-tree --order inorder
```

`--order` takes `level` (the default), `inorder`, `preorder` or
`postorder`. If the input ends before the tree is complete, the command
prints an error to standard error and exits with status 1.

## Tests

```
pip install .[test]
pytest
```