"""Shape measurements and mirroring for binary trees."""

from __future__ import annotations

from typing import Optional, Union

from dsakit.binary_tree import Node
from dsakit.bst import BinarySearchTree

TreeLike = Union[BinarySearchTree, Node, None]


def _root(tree: TreeLike) -> Optional[Node]:
    if isinstance(tree, BinarySearchTree):
        return tree.root
    return tree


def _nodes(tree: TreeLike):
    stack = [_root(tree)]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        yield node
        stack.append(node.left)
        stack.append(node.right)


def height(tree: TreeLike) -> int:
    """Return the number of nodes on the longest root-to-leaf path; 0 if empty."""
    root = _root(tree)
    best = 0
    stack: list[tuple[Node, int]] = [(root, 1)] if root is not None else []
    while stack:
        node, depth = stack.pop()
        best = max(best, depth)
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, depth + 1))
    return best


def mirror(tree: TreeLike) -> None:
    """Swap the left and right children of every node, in place."""
    for node in _nodes(tree):
        node.left, node.right = node.right, node.left


def count_nodes(tree: TreeLike) -> int:
    """Return the total number of nodes."""
    return sum(1 for _ in _nodes(tree))


def count_leaves(tree: TreeLike) -> int:
    """Return the number of nodes with no children."""
    return sum(
        1 for node in _nodes(tree) if node.left is None and node.right is None
    )


def count_internal(tree: TreeLike) -> int:
    """Return the number of nodes with at least one child."""
    return sum(
        1
        for node in _nodes(tree)
        if node.left is not None or node.right is not None
    )