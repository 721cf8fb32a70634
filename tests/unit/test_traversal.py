"""Unit tests for traversals, height and fullness."""

import pytest

from dsa_toolkit import (
    TraversalOrder,
    TreeNode,
    breadth_first,
    collect,
    depth_first,
    depth_first_recursive,
    height,
    height_recursive,
    in_order,
    in_order_recursive,
    is_full,
    is_full_recursive,
    traverse,
)


def keys_of(fn, root):
    visited = []
    fn(root, visited.append)
    return visited


def test_breadth_first_order(letter_tree):
    assert keys_of(breadth_first, letter_tree) == ["A", "B", "C", "D", "E", "F"]


@pytest.mark.parametrize("fn", [depth_first, depth_first_recursive])
def test_depth_first_is_pre_order(fn, letter_tree):
    assert keys_of(fn, letter_tree) == ["A", "B", "C", "D", "F", "E"]


@pytest.mark.parametrize("fn", [in_order, in_order_recursive])
def test_in_order(fn, letter_tree):
    assert keys_of(fn, letter_tree) == ["B", "A", "D", "F", "C", "E"]


@pytest.mark.parametrize(
    "fn",
    [breadth_first, depth_first, depth_first_recursive, in_order, in_order_recursive],
)
def test_empty_tree_visits_nothing(fn):
    assert keys_of(fn, None) == []


@pytest.mark.parametrize(
    "order, recursive, expected",
    [
        (TraversalOrder.BREADTH_FIRST, False, ["A", "B", "C", "D", "E", "F"]),
        (TraversalOrder.DEPTH_FIRST, False, ["A", "B", "C", "D", "F", "E"]),
        (TraversalOrder.DEPTH_FIRST, True, ["A", "B", "C", "D", "F", "E"]),
        (TraversalOrder.IN_ORDER, False, ["B", "A", "D", "F", "C", "E"]),
        (TraversalOrder.IN_ORDER, True, ["B", "A", "D", "F", "C", "E"]),
    ],
)
def test_traverse_dispatch(letter_tree, order, recursive, expected):
    visited = []
    traverse(letter_tree, order, visited.append, recursive=recursive)
    assert visited == expected
    assert collect(letter_tree, order, recursive=recursive) == expected


def test_recursive_breadth_first_is_rejected(letter_tree):
    with pytest.raises(ValueError):
        traverse(letter_tree, TraversalOrder.BREADTH_FIRST, print, recursive=True)


def test_visitor_errors_propagate(letter_tree):
    def visit(key):
        if key == "C":
            raise RuntimeError("stop")

    with pytest.raises(RuntimeError):
        breadth_first(letter_tree, visit)


@pytest.mark.parametrize("fn", [height, height_recursive])
def test_height(fn, letter_tree, full_tree):
    assert fn(None) == 0
    assert fn(TreeNode("A")) == 1
    assert fn(letter_tree) == 4
    assert fn(full_tree) == 3


@pytest.mark.parametrize("fn", [is_full, is_full_recursive])
def test_is_full(fn, full_tree, not_full_tree):
    assert fn(full_tree) is True
    assert fn(not_full_tree) is False


@pytest.mark.parametrize("fn", [is_full, is_full_recursive])
def test_is_full_edge_cases(fn):
    assert fn(None) is False
    assert fn(TreeNode(1)) is True
    assert fn(TreeNode(1, left=TreeNode(0))) is False
    assert fn(TreeNode(1, right=TreeNode(2))) is False


@pytest.mark.parametrize("fn", [is_full, is_full_recursive])
def test_single_child_deep_in_the_tree_fails(fn, full_tree):
    full_tree.right.right.add_left(TreeNode("H"))
    assert fn(full_tree) is False
