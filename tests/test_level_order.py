from puzzlebox.level_order import level_order_bottom
from puzzlebox.tree import TreeNode, build_tree


def test_worked_example():
    root = build_tree([3, 9, 20, -1, -1, 15, 7])
    assert level_order_bottom(root) == [[15, 7], [9, 20], [3]]


def test_empty_tree():
    assert level_order_bottom(None) == []


def test_single_node():
    assert level_order_bottom(TreeNode(42)) == [[42]]


def test_last_level_is_root():
    values = [10, 5, -3, 3, 2, -1, 11, 3, -2, -1, 1]
    result = level_order_bottom(build_tree(values))
    assert result[-1] == [values[0]]


def test_contains_every_value_once():
    values = [10, 5, -3, 3, 2, -1, 11, 3, -2, -1, 1]
    result = level_order_bottom(build_tree(values))
    flat = [v for level in result for v in level]
    assert sorted(flat) == sorted(v for v in values if v != -1)


def test_left_to_right_within_level():
    root = build_tree([1, 2, 3, 4, 5, 6, 7])
    result = level_order_bottom(root)
    assert result[0] == [4, 5, 6, 7]
    assert result[1] == [2, 3]