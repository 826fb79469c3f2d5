import pytest

from dsalgo.binary_tree import BinaryTree, CompleteBinaryTree, make_binary_tree


def test_make_binary_tree_sets_parents():
    left = make_binary_tree(2.0, None, None)
    right = make_binary_tree(3.0, None, None)
    root = make_binary_tree(1.0, left, right)
    assert root.parent is None
    assert root.left is left
    assert root.right is right
    assert left.parent is root
    assert right.parent is root


def test_reassigning_child_updates_parent():
    root = BinaryTree(1)
    child = BinaryTree(2)
    root.right = child
    assert child.parent is root
    assert root.left is None


def test_complete_tree_navigation():
    array = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0]
    bt = CompleteBinaryTree(array)
    assert bt.value == 1.0
    assert bt.left.value == 2.0
    assert bt.right.value == 3.0
    assert bt.left.left.value == 4.0
    assert bt.left.left.parent.value == 2.0
    assert not bt.parent


def test_complete_tree_bounds():
    array = [1, 2, 3, 4, 5, 6, 7, 8]
    bt = CompleteBinaryTree(array)
    assert bool(bt.subtree(7)) is True
    assert bool(bt.subtree(8)) is False
    limited = CompleteBinaryTree(array, 0, 3)
    assert not limited.left.left
    assert limited.right.value == 3


def test_complete_tree_value_writes_storage():
    array = [1, 2, 3]
    bt = CompleteBinaryTree(array)
    bt.left.value = 42
    assert array == [1, 42, 3]


def test_empty_subtree_value_raises():
    bt = CompleteBinaryTree([])
    with pytest.raises(IndexError):
        _ = bt.value
    assert not bt.left