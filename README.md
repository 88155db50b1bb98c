# algokit

A compact library of classic algorithms and data structures in plain Python,
with no runtime dependencies.

## Installation

```
pip install .
```

## What is inside

- `algokit.graphs`
  - `undirected_adjacency(node_count, edges)`: adjacency lists for nodes
    `0..node_count`, each edge stored in both directions.
  - `dfs_order(adjacency, source)`: nodes in depth-first visiting order.
  - `DirectedGraph(vertex_count)` with `add_edge(v, w)` and `bfs(source)`,
    which returns the breadth-first order.
  - `articulation_points(node_count, edges)`: articulation points of an
    undirected graph on nodes `1..node_count`, in ascending order.
- `algokit.linked_lists`
  - `ListNode` (iterable over its values), `from_values`, `to_values`.
  - `intersection_node(head_a, head_b)`: the first node two lists share, or `None`.
  - `middle_value(head)`: the middle value (the second middle for even lengths);
    raises `ValueError` on an empty list.
  - `is_palindrome(head)`: leaves the list as it found it.
- `algokit.bplustree`
  - `BPlusTree(order=3)` with `insert`, `search`, `in`, `len()`, iteration in
    ascending key order, and `keys_preorder()`. Duplicate keys are kept.
- `algokit.strings`
  - `smallest_string`, `distinct_subsequences` (modulo 10**9 + 7, counting the
    empty subsequence), `number_search`, `longest_common_subsequence`,
    `reverse_words`.
- `algokit.arrays`
  - `boolean_matrix` (returns a new matrix), `min_size_subarray` (raises
    `ValueError` when no subarray fits), `unique_elements`, `identical_pairs`.
- `algokit.trees`
  - `TreeNode` and `vertical_traversal(root)`.
- `algokit.converter`
  - `binary_to_decimal(digits)`, `decimal_to_binary(number)` and the
    `algokit-convert` command.

## Examples

```python
from algokit.graphs import DirectedGraph, articulation_points
from algokit.bplustree import BPlusTree
from algokit.linked_lists import from_values, is_palindrome
from algokit.strings import number_search, reverse_words
from algokit.trees import TreeNode, vertical_traversal

g = DirectedGraph(4)
for v, w in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
    g.add_edge(v, w)
print(g.bfs(2))                      # [2, 0, 3, 1]

print(articulation_points(5, [(1, 2), (1, 3), (3, 2), (1, 4), (4, 5)]))  # [1, 4]

tree = BPlusTree()
for key in (5, 3, 8, 1, 9):
    tree.insert(key)
print(5 in tree, 7 in tree)          # True False
print(list(tree))                    # [1, 3, 5, 8, 9]
print(tree.keys_preorder())          # [5, 1, 3, 5, 8, 9]

print(is_palindrome(from_values([1, 2, 3, 2, 1])))   # True
print(number_search("Hello6 9World 2, Nic8e D7ay!"))  # 2
print(reverse_words("Let's take"))                    # s'teL ekat

root = TreeNode(3, TreeNode(9), TreeNode(20, TreeNode(15), TreeNode(7)))
print(vertical_traversal(root))      # [[9], [3, 15], [20], [7]]
```

## Command line

```
algokit-convert
```

It asks you to pick 1 (binary to decimal) or 2 (decimal to binary), reads the
number and prints `Answer is ...`. Answers may also be given as arguments, in
the order they are asked for:

```
algokit-convert 1 1010      # Answer is 10
algokit-convert 2 10        # Answer is 1010
```

An unknown choice prints `Enter a valid option!` and exits with status 1;
invalid input is reported on standard error, also with status 1.

## What it does not do

There are no sorting or searching routines in the package; use Python's
built-in `sorted` and the `bisect` module for those.

## Running the tests

```
pip install .[test]
pytest
```