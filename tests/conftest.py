"""Shared fixtures: the reference trees used across the traversal tests."""

import pytest

from dsa_toolkit import TreeNode


@pytest.fixture
def letter_tree():
    """
    A
    ├── B
    └── C
        ├── D
        │   └── (right) F
        └── E
    """
    d = TreeNode("D", right=TreeNode("F"))
    c = TreeNode("C", left=d, right=TreeNode("E"))
    return TreeNode("A", left=TreeNode("B"), right=c)


@pytest.fixture
def full_tree():
    """Seven nodes, every internal node has two children."""
    b = TreeNode("B", left=TreeNode("D"), right=TreeNode("E"))
    c = TreeNode("C", left=TreeNode("F"), right=TreeNode("G"))
    return TreeNode("A", left=b, right=c)


@pytest.fixture
def not_full_tree():
    """Six nodes, D has a single child F."""
    d = TreeNode("D", left=TreeNode("F"))
    c = TreeNode("C", left=d, right=TreeNode("E"))
    return TreeNode("A", left=TreeNode("B"), right=c)
