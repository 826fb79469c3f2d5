"""Binary search trees built from linked binary tree nodes."""

from __future__ import annotations

from typing import Any

from .binary_tree import BinaryTree, make_binary_tree


def bst_search(tree: BinaryTree | None, value: Any) -> BinaryTree | None:
    """Find the node with the largest value not exceeding ``value``.

    Returns ``None`` when every value in the tree is larger.
    """
    if tree is None or value == tree.value:
        return tree
    if value < tree.value:
        return bst_search(tree.left, value)
    other = bst_search(tree.right, value)
    return other if other is not None else tree


def bst_insert(tree: BinaryTree | None, value: Any) -> BinaryTree:
    """Insert ``value`` and return the root; equal values go to the left."""
    new_node = make_binary_tree(value, None, None)
    if tree is None:
        return new_node
    node = tree
    while True:
        if value <= node.value:
            if node.left is None:
                node.left = new_node
                return tree
            node = node.left
        else:
            if node.right is None:
                node.right = new_node
                return tree
            node = node.right


def bst_min(tree: BinaryTree | None) -> BinaryTree:
    """The node holding the smallest value."""
    if tree is None:
        raise ValueError("minimum of an empty tree")
    while tree.left is not None:
        tree = tree.left
    return tree


def bst_max(tree: BinaryTree | None) -> BinaryTree:
    """The node holding the largest value."""
    if tree is None:
        raise ValueError("maximum of an empty tree")
    while tree.right is not None:
        tree = tree.right
    return tree