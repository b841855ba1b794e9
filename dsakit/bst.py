"""An unbalanced binary search tree of comparable keys."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional

from dsakit.binary_tree import Node, inorder, render

_RENDER_SPACE = 2


class BinarySearchTree:
    """A binary search tree; equal keys go into the left subtree.

    ``root`` is the topmost :class:`~dsakit.binary_tree.Node`, or ``None``
    when the tree is empty.
    """

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self.root: Optional[Node] = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> None:
        """Add ``key``: larger keys go right, all others go left."""
        new = Node(key)
        self._size += 1
        if self.root is None:
            self.root = new
            return
        node = self.root
        while True:
            if key > node.data:
                if node.right is None:
                    node.right = new
                    return
                node = node.right
            else:
                if node.left is None:
                    node.left = new
                    return
                node = node.left

    def delete(self, key: Any) -> None:
        """Remove one node holding ``key``; raise KeyError if there is none.

        A node with two children takes the smallest key of its right
        subtree, and that key is then removed from the right subtree.
        """
        self.root = self._delete(self.root, key)
        self._size -= 1

    @staticmethod
    def _delete(root: Optional[Node], key: Any) -> Optional[Node]:
        parent: Optional[Node] = None
        node = root
        while node is not None and node.data != key:
            parent = node
            node = node.right if key > node.data else node.left
        if node is None:
            raise KeyError(key)
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.data = successor.data
            node.right = BinarySearchTree._delete(node.right, node.data)
            return root
        child = node.right if node.left is None else node.left
        if parent is None:
            return child
        if parent.left is node:
            parent.left = child
        else:
            parent.right = child
        return root

    def find(self, key: Any) -> Optional[Node]:
        """Return the first node holding ``key`` on the search path, or None."""
        node = self.root
        while node is not None:
            if node.data == key:
                return node
            node = node.left if key < node.data else node.right
        return None

    def smallest(self) -> Any:
        """Return the smallest key; raise ValueError when the tree is empty."""
        if self.root is None:
            raise ValueError("smallest() of an empty tree")
        node = self.root
        while node.left is not None:
            node = node.left
        return node.data

    def largest(self) -> Any:
        """Return the largest key; raise ValueError when the tree is empty."""
        if self.root is None:
            raise ValueError("largest() of an empty tree")
        node = self.root
        while node.right is not None:
            node = node.right
        return node.data

    def clear(self) -> None:
        """Remove every key."""
        self.root = None
        self._size = 0

    def inorder(self) -> list[Any]:
        """Return the keys in ascending order."""
        return inorder(self.root)

    def render(self) -> str:
        """Draw the tree sideways, right subtree on top."""
        return render(self.root, _RENDER_SPACE)

    def __contains__(self, key: object) -> bool:
        return self.find(key) is not None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return iter(self.inorder())

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.inorder()!r})"