from dsalgo.binary_tree import CompleteBinaryTree, make_binary_tree
from dsalgo.bst import bst_insert
from dsalgo.traversal import breadth_first, depth_first, height


def _driver_tree():
    return make_binary_tree(
        1.0,
        make_binary_tree(
            2.0,
            make_binary_tree(4.0, None, None),
            make_binary_tree(5.0, None, make_binary_tree(8.0, None, None)),
        ),
        make_binary_tree(
            3.0,
            make_binary_tree(6.0, None, None),
            make_binary_tree(7.0, None, None),
        ),
    )


def test_height_of_empty_tree():
    assert height(None) == -1
    assert height(CompleteBinaryTree([])) == -1


def test_height_of_leaf_and_complete_tree():
    assert height(make_binary_tree(1)) == 0
    assert height(CompleteBinaryTree([1, 2, 3, 4, 5, 6, 7, 8])) == 3


def test_depth_first_in_order():
    values = [t.value for t in depth_first(_driver_tree())]
    assert values == [4.0, 2.0, 5.0, 8.0, 1.0, 6.0, 3.0, 7.0]


def test_breadth_first_on_complete_tree_follows_storage():
    array = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0]
    values = [t.value for t in breadth_first(CompleteBinaryTree(array))]
    assert values == array


def test_depth_first_of_bst_is_sorted():
    tree = None
    data = [12, 5, 18, 2, 9, 15, 19, 13, 17]
    for x in data:
        tree = bst_insert(tree, x)
    assert [t.value for t in depth_first(tree)] == sorted(data)


def test_traversals_visit_every_node_once():
    tree = _driver_tree()
    dfs = [t.value for t in depth_first(tree)]
    bfs = [t.value for t in breadth_first(tree)]
    assert sorted(dfs) == sorted(bfs)
    assert len(bfs) == 8
    assert list(breadth_first(None)) == []