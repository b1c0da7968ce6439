# puzzlebox

Small, self-contained solvers for classic algorithmic puzzles. Each solver is a
plain function that takes ordinary Python values and returns ordinary Python
values. The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Names | What it does |
| --- | --- | --- |
| `puzzlebox.tree` | `TreeNode`, `build_tree(values)`, `NULL` | Binary tree node (a dataclass with `val`, `left`, `right`) and construction from a level-order list in which `-1` (`NULL`) marks a missing child |
| `puzzlebox.level_order` | `level_order_bottom(root)` | Values of each level, deepest level first |
| `puzzlebox.path_sum` | `path_sum(root, target)` | Number of downward paths, starting at any node, whose values add up to `target` |
| `puzzlebox.tree_string` | `tree_to_string(root)` | Preorder string with each child in parentheses; an empty left child is written `()` only when a right child follows |
| `puzzlebox.house_robber` | `rob(nums)` | Largest sum of non-adjacent elements (0 for an empty list) |
| `puzzlebox.max_difference` | `maximum_difference(nums)` | Largest `nums[j] - nums[i]` with `i < j` and `nums[i] < nums[j]`, or `-1` if there is none |
| `puzzlebox.partition` | `partition_array(nums, k)` | Fewest groups whose largest minus smallest value is at most `k` (0 for no numbers) |
| `puzzlebox.divide_array` | `divide_array(values, k)` | Sorted values split into consecutive triples; `[]` if any triple spreads wider than `k` |
| `puzzlebox.score` | `score_of_string(s)` | Sum of absolute code-point differences of neighbouring characters |
| `puzzlebox.binary_watch` | `read_binary_watch(turned_on)` | Every `HH:MM` time a binary watch (4 hour LEDs, 6+ minute LEDs, hours 0–12, minutes 0–59) shows with `turned_on` LEDs lit |
| `puzzlebox.restore_ip` | `SolvingMethod`, `is_valid_ip_element(s)`, `restore_ip_addresses(s, method)`, `restore_ip_addresses_iterative(s)`, `restore_ip_addresses_recursive(s)` | Every dotted IPv4 address that a digit string can be split into |

## Examples

```python
from puzzlebox.tree import build_tree
from puzzlebox.level_order import level_order_bottom
from puzzlebox.path_sum import path_sum
from puzzlebox.tree_string import tree_to_string
from puzzlebox.house_robber import rob
from puzzlebox.restore_ip import SolvingMethod, restore_ip_addresses

root = build_tree([3, 9, 20, -1, -1, 15, 7])
level_order_bottom(root)                    # [[15, 7], [9, 20], [3]]

tree_to_string(build_tree([1, 2, 3, 4]))    # '1(2(4))(3)'

rob([2, 7, 9, 3, 1])                        # 12

restore_ip_addresses("25525511135", SolvingMethod.ITERATIVELY)
# ['255.255.11.135', '255.255.111.35']
```

Addresses can be found either by trying every placement of the three dots
(`SolvingMethod.ITERATIVELY`) or by backtracking one octet at a time
(`SolvingMethod.RECURSIVELY`). An octet is valid when it has one to three
digits, no leading zero and a value of at most 255.

## Errors

The solvers raise `ValueError` on input they cannot handle:

- `build_tree` when the list holds values that no node is left to take as children;
- `maximum_difference` for an empty list;
- `divide_array` when the number of values is not a multiple of three;
- `is_valid_ip_element` (and so `restore_ip_addresses`) for a part that is
  empty or does not start with a digit;
- `restore_ip_addresses` for a method that is not a `SolvingMethod`.

## Command line

```
puzzlebox [PUZZLE ...]
```

runs a fixed sample input through each named puzzle and prints the answers.
With no names it runs all of them. The names are `level-order`,
`house-robber`, `max-difference`, `partition`, `divide-array`, `score`,
`binary-watch`, `path-sum`, `tree-string` and `restore-ip`. An unknown name is
reported as a usage error.

The command only runs these built-in examples; it does not read puzzle input
from arguments, files or standard input. To solve your own inputs, call the
functions from Python.