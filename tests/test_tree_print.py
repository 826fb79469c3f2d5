from dsalgo.binary_tree import CompleteBinaryTree, make_binary_tree
from dsalgo.traversal import height
from dsalgo.tree_print import format_binary_tree, print_binary_tree


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


def test_empty_tree_renders_empty():
    assert format_binary_tree(None) == ""
    assert format_binary_tree(CompleteBinaryTree([])) == ""


def test_leaf():
    assert format_binary_tree(make_binary_tree(4, None, None)) == "4  "


def test_two_children():
    tree = make_binary_tree(1, make_binary_tree(2), make_binary_tree(3))
    assert format_binary_tree(tree) == "1 -v  \n2  3  "


def test_lines_have_equal_width_and_height():
    tree = _driver_tree()
    lines = format_binary_tree(tree).split("\n")
    assert len({len(line) for line in lines}) == 1
    assert len(lines) == height(tree) + 1
    assert lines[0].startswith("1 ")


def test_complete_tree_matches_linked_tree():
    array = [1.0, 2.0, 3.0]
    linked = make_binary_tree(1.0, make_binary_tree(2.0), make_binary_tree(3.0))
    assert format_binary_tree(CompleteBinaryTree(array)) == format_binary_tree(linked)


def test_print_binary_tree_output(capsys):
    tree = _driver_tree()
    print_binary_tree(tree)
    out = capsys.readouterr().out
    assert out == format_binary_tree(tree) + "\n"