import pytest

from dsakit.binary_tree import Node, inorder, postorder, preorder, render


def _numbers_tree():
    root = Node(1)
    root.left = Node(2, Node(4, Node(8), Node(9)), Node(5))
    root.right = Node(3, Node(6, Node(10), Node(11)), Node(7, None, Node(12)))
    return root


def _search_tree():
    # A hand-built search tree: in-order must come out sorted.
    return Node(
        50,
        Node(30, Node(20), Node(40)),
        Node(70, Node(60), Node(80)),
    )


def _collect(root):
    if root is None:
        return []
    return [root] + _collect(root.left) + _collect(root.right)


def test_empty_tree_traversals():
    assert preorder(None) == []
    assert inorder(None) == []
    assert postorder(None) == []
    assert render(None) == ""


def test_single_node_traversals():
    leaf = Node("A")
    assert preorder(leaf) == inorder(leaf) == postorder(leaf) == ["A"]


def test_preorder_of_source_tree():
    assert preorder(_numbers_tree()) == [1, 2, 4, 8, 9, 5, 3, 6, 10, 11, 7, 12]


def test_inorder_of_search_tree_is_sorted():
    values = inorder(_search_tree())
    assert values == sorted(values)


@pytest.mark.parametrize("build", [_numbers_tree, _search_tree])
def test_traversals_visit_every_node_once(build):
    root = build()
    expected = sorted(node.data for node in _collect(root))
    for walk in (preorder, inorder, postorder):
        assert sorted(walk(root)) == expected


@pytest.mark.parametrize("build", [_numbers_tree, _search_tree])
def test_root_position_in_traversals(build):
    root = build()
    assert preorder(root)[0] == root.data
    assert postorder(root)[-1] == root.data


def test_inorder_splits_around_root():
    root = _search_tree()
    values = inorder(root)
    index = values.index(root.data)
    assert values[:index] == inorder(root.left)
    assert values[index + 1:] == inorder(root.right)


def test_postorder_is_mirror_of_preorder_of_mirrored_tree():
    def mirrored(node):
        if node is None:
            return None
        return Node(node.data, mirrored(node.right), mirrored(node.left))

    root = _numbers_tree()
    assert postorder(root) == list(reversed(preorder(mirrored(root))))


def test_render_single_node_without_indent():
    assert render(Node(7)) == "\n7\n"


def test_render_indents_by_depth_and_offset():
    root = Node("A", Node("B"), Node("C"))
    lines = [line for line in render(root, 2).split("\n") if line]
    assert [line.strip() for line in lines] == ["C", "A", "B"]
    indents = [len(line) - len(line.lstrip(" ")) for line in lines]
    assert indents[1] == 2
    assert indents[0] == indents[2] == 2 + 10


def test_render_lists_nodes_in_reverse_inorder():
    root = _search_tree()
    lines = [line.strip() for line in render(root).split("\n") if line]
    assert [int(v) for v in lines] == list(reversed(inorder(root)))