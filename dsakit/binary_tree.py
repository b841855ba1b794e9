"""Binary tree nodes, depth-first traversals and a sideways text rendering."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

_INDENT = 10


@dataclass
class Node:
    """A binary tree node holding ``data`` and two optional children."""

    data: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def _preorder(root: Optional[Node]) -> Iterator[Any]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node.data
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _inorder(root: Optional[Node]) -> Iterator[Any]:
    stack: list[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.data
        node = node.right


def _postorder(root: Optional[Node]) -> Iterator[Any]:
    stack: list[tuple[Node, bool]] = [(root, False)] if root is not None else []
    while stack:
        node, children_done = stack.pop()
        if children_done:
            yield node.data
            continue
        stack.append((node, True))
        if node.right is not None:
            stack.append((node.right, False))
        if node.left is not None:
            stack.append((node.left, False))


def preorder(root: Optional[Node]) -> list[Any]:
    """Return node values in root, left, right order."""
    return list(_preorder(root))


def inorder(root: Optional[Node]) -> list[Any]:
    """Return node values in left, root, right order."""
    return list(_inorder(root))


def postorder(root: Optional[Node]) -> list[Any]:
    """Return node values in left, right, root order."""
    return list(_postorder(root))


def render(root: Optional[Node], space: int = 0) -> str:
    """Draw the tree sideways, right subtree on top.

    Nodes are visited in reverse in-order; each is written as an empty line
    followed by its value indented by ``space`` plus ten columns per level.
    """
    parts: list[str] = []
    stack: list[tuple[Node, int]] = []
    node, depth = root, 0
    while stack or node is not None:
        while node is not None:
            stack.append((node, depth))
            node, depth = node.right, depth + 1
        current, level = stack.pop()
        parts.append("\n" + " " * (space + _INDENT * level) + f"{current.data}\n")
        node, depth = current.left, level + 1
    return "".join(parts)