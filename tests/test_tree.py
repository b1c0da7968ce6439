import pytest

from puzzlebox.tree import TreeNode, build_tree


def _preorder(node):
    if node is None:
        return []
    return [node.val, *_preorder(node.left), *_preorder(node.right)]


def test_empty_list_gives_no_tree():
    assert build_tree([]) is None


def test_default_node():
    node = TreeNode()
    assert (node.val, node.left, node.right) == (0, None, None)


def test_complete_tree_children():
    root = build_tree([1, 2, 3])
    assert root.val == 1
    assert root.left.val == 2
    assert root.right.val == 3
    assert root.left.left is None and root.right.right is None


def test_null_marker_skips_child():
    root = build_tree([3, 9, 20, -1, -1, 15, 7])
    assert root.left.left is None and root.left.right is None
    assert root.right.left.val == 15
    assert root.right.right.val == 7


def test_odd_tail_fills_left_only():
    root = build_tree([1, 2, 3, 4])
    assert root.left.left.val == 4
    assert root.left.right is None


def test_root_value_is_kept_even_if_marker():
    root = build_tree([-1])
    assert root.val == -1


def test_all_non_null_values_present():
    values = [10, 5, -3, 3, 2, -1, 11, 3, -2, -1, 1]
    root = build_tree(values)
    assert sorted(_preorder(root)) == sorted(v for v in values if v != -1)


def test_values_without_parent_raise():
    with pytest.raises(ValueError):
        build_tree([1, -1, -1, 2])


def test_accepts_any_iterable():
    root = build_tree(iter([7, 8]))
    assert root.val == 7
    assert root.left.val == 8
    assert root.right is None