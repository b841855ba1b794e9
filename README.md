# dsakit

Classic data structures and algorithms in plain Python, with no third-party
dependencies.

## Modules

- `dsakit.arrays`: `second_smallest`, `digits_to_number`, `duplicate_pairs`,
  `insert_at` (1-based position), `insert_sorted`, `max_with_index` and
  `solve_quadratic`, which returns a tuple of two, one or no real roots.
- `dsakit.stacks`: `BoundedStack` (fixed capacity) and `LinkedStack`, with
  `push`, `pop`, `peek` and `is_empty`; `BoundedStack` also has `is_full`.
  Pushing onto a full stack raises `StackOverflow`; popping or peeking an
  empty one raises `StackUnderflow`.
- `dsakit.queues`: `CircularQueue` (fixed capacity, ring buffer) and
  `LinkedQueue`, with `enqueue`, `dequeue` and `is_empty`; `CircularQueue`
  also has `is_full`. They raise `QueueOverflow` and `QueueUnderflow`.
- `dsakit.search`: `contains_substring(text, pattern)`.
- `dsakit.sorting`: `bubble_sort`, `insertion_sort` and `selection_sort`, each
  returning a new sorted list.
- `dsakit.expressions`: operator `precedence`, `infix_to_postfix` (raises
  `ExpressionError` on malformed input), `brackets_valid` and
  `bracket_verdict`.
- `dsakit.binary_tree`: the `Node` dataclass, `preorder`, `inorder`,
  `postorder`, and `render`, which draws a tree sideways with the right
  subtree on top.
- `dsakit.graph`: `Graph` (directed or undirected) with `add_edge`,
  `neighbours`, `degree`, `vertices`, `bfs`, `dfs` and `format`; searches
  return a `Traversal` holding the visit order and parents, with `path_to`.
  `parse_edges` builds a graph from whitespace-separated vertex pairs.
- `dsakit.bst`: `BinarySearchTree` with `insert`, `delete` (raises `KeyError`
  for a missing key), `find`, `smallest`, `largest`, `clear`, `inorder` and
  `render`. Equal keys go into the left subtree.
- `dsakit.bst_metrics`: `height`, `mirror`, `count_nodes`, `count_leaves` and
  `count_internal`, taking a `BinarySearchTree` or a `Node`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from dsakit.expressions import infix_to_postfix, bracket_verdict

infix_to_postfix("a+b*(c^d-e)^(f+g*h)-i")   # 'abcd^e-fgh*+^*+i-'

# Brackets must match and nest as [ outside { outside (.
bracket_verdict("[{()}]")   # 'valid'
bracket_verdict("({})")     # 'invalid'
```

```python
from dsakit.bst import BinarySearchTree
from dsakit.bst_metrics import height, count_nodes

tree = BinarySearchTree([45, 39, 78, 54, 79, 55, 80])
tree.inorder()        # [39, 45, 54, 55, 78, 79, 80]
tree.delete(78)
height(tree)
count_nodes(tree)     # 6
```

```python
from dsakit.graph import parse_edges

graph = parse_edges("1 2 1 3 2 4 3 5")
search = graph.bfs(1)
search.order          # [1, 2, 3, 4, 5]
search.path_to(5)     # [1, 3, 5]
```

## Command line

`dsakit-expr` prints `valid` or `invalid` for the brackets of each expression
given as an argument, or of each line of standard input when none are given:

```
dsakit-expr "[{()}]" "({})"
```

With `--postfix` it prints the postfix form of each expression instead; a
malformed expression is reported on standard error and the exit status is 1.

```
dsakit-expr --postfix "A*(B+C)/D"
```

## What it does not do

The data structures live in memory only: nothing is stored to disk, and the
graph and tree tools have no command of their own or interactive prompts.