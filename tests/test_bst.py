import random

import pytest

from dsakit.bst import BinarySearchTree


DELETION_KEYS = [12, 15, 10, 17, 16, 20, 18, 13]
ONLINE_KEYS = [50, 30, 20, 40, 70, 60, 80]
EXTREMES_KEYS = [45, 39, 78, 54, 79, 55, 80, 35, 36, 34]
SEARCH_KEYS = [45, 39, 56, 12, 34, 78, 32, 10, 89, 54, 67, 81]


def _check_order(node, low=None, high=None):
    if node is None:
        return True
    if low is not None and not node.data > low:
        return False
    if high is not None and not node.data <= high:
        return False
    return _check_order(node.left, low, node.data) and _check_order(
        node.right, node.data, high
    )


def test_inorder_is_sorted():
    tree = BinarySearchTree(DELETION_KEYS)
    assert tree.inorder() == sorted(DELETION_KEYS)
    assert len(tree) == len(DELETION_KEYS)


def test_root_is_first_inserted_key():
    tree = BinarySearchTree(DELETION_KEYS)
    assert tree.root.data == 12
    assert tree.root.left.data == 10
    assert tree.root.right.data == 15


def test_duplicates_go_left():
    tree = BinarySearchTree([5, 5])
    assert tree.root.left.data == 5
    assert tree.root.right is None
    assert tree.inorder() == [5, 5]


def test_delete_node_with_two_children_uses_successor():
    tree = BinarySearchTree(DELETION_KEYS)
    tree.delete(15)
    assert tree.root.right.data == 16
    assert tree.inorder() == sorted(k for k in DELETION_KEYS if k != 15)
    assert 15 not in tree


def test_online_deletion_example():
    tree = BinarySearchTree(ONLINE_KEYS)
    tree.delete(20)
    assert tree.inorder() == [30, 40, 50, 60, 70, 80]
    tree.delete(30)
    assert tree.inorder() == [40, 50, 60, 70, 80]
    tree.delete(50)
    assert tree.inorder() == [40, 60, 70, 80]
    assert tree.root.data == 60


def test_delete_root_with_one_child():
    tree = BinarySearchTree([10, 5])
    tree.delete(10)
    assert tree.root.data == 5
    assert tree.inorder() == [5]


def test_delete_missing_key_raises():
    tree = BinarySearchTree(ONLINE_KEYS)
    with pytest.raises(KeyError):
        tree.delete(99)
    assert tree.inorder() == sorted(ONLINE_KEYS)


def test_delete_from_empty_raises():
    with pytest.raises(KeyError):
        BinarySearchTree().delete(1)


def test_smallest_and_largest():
    tree = BinarySearchTree(EXTREMES_KEYS)
    assert tree.smallest() == min(EXTREMES_KEYS)
    assert tree.largest() == max(EXTREMES_KEYS)


def test_smallest_of_empty_raises():
    with pytest.raises(ValueError):
        BinarySearchTree().smallest()
    with pytest.raises(ValueError):
        BinarySearchTree().largest()


def test_find_and_contains():
    tree = BinarySearchTree(SEARCH_KEYS)
    assert 67 in tree
    assert tree.find(67).data == 67
    assert tree.find(68) is None
    assert 68 not in tree


def test_clear_empties_tree():
    tree = BinarySearchTree(EXTREMES_KEYS)
    tree.clear()
    assert tree.root is None
    assert tree.inorder() == []
    assert len(tree) == 0
    assert tree.render() == ""


def test_iteration_matches_inorder():
    tree = BinarySearchTree(SEARCH_KEYS)
    assert list(tree) == sorted(SEARCH_KEYS)


def test_render_single_node():
    assert BinarySearchTree([5]).render() == "\n  5\n"


def test_render_puts_right_subtree_first():
    text = BinarySearchTree([2, 1, 3]).render()
    values = [line.strip() for line in text.splitlines() if line.strip()]
    assert values == ["3", "2", "1"]
    assert "\n" + " " * 12 + "3\n" in text
    assert "\n  2\n" in text
    assert "\n" + " " * 12 + "1\n" in text