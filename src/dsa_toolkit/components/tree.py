"""Binary tree nodes and tree builders.

Two ways of building a tree are provided:
    - level-order marshalling of a sorted sequence into a complete tree
    - unbalanced binary search tree insertion (the basis of tree sort)
"""

from __future__ import annotations

import logging
from typing import Generic, Iterable, List, Optional, Sequence, Tuple

from ..core.errors import NodeConflictError
from ..core.types import K
from .containers import ArrayQueue, ArrayStack

logger = logging.getLogger(__name__)

ROOT_INDEX = 0


# -----------------------------
# Binary Tree Node
# -----------------------------
class TreeNode(Generic[K]):
    """A node in a binary tree.

    A node owns its children. There is no parent reference, and an absent
    child is None.
    """

    __slots__ = ("key", "left", "right")

    def __init__(
        self,
        key: K,
        left: Optional[TreeNode[K]] = None,
        right: Optional[TreeNode[K]] = None,
    ) -> None:
        self.key = key
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"TreeNode({self.key!r})"

    def add_left(self, other: Optional[TreeNode[K]]) -> None:
        """Attach other as the left child. Attaching None is a no-op."""
        if other is None:
            return
        if self.left is not None:
            raise NodeConflictError(f"{self!r} already has a left child {self.left!r}")
        self.left = other

    def add_right(self, other: Optional[TreeNode[K]]) -> None:
        """Attach other as the right child. Attaching None is a no-op."""
        if other is None:
            return
        if self.right is not None:
            raise NodeConflictError(f"{self!r} already has a right child {self.right!r}")
        self.right = other

    def children(self) -> Tuple[TreeNode[K], ...]:
        """Returns the present children, left first."""
        return tuple(child for child in (self.left, self.right) if child is not None)

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


# -------------------------------
# Level-order construction
# -------------------------------
def build_tree_from_sorted(keys: Sequence[K]) -> Optional[TreeNode[K]]:
    """
    Marshalls a sorted sequence into a complete binary tree.

    Keys are assigned by position, so keys[i] ends up where an array-backed
    heap would store it (children of i at 2i+1 and 2i+2). The result is NOT a
    binary search tree. The input is assumed sorted but never checked.

    Time Complexity: O(n), each key is attached exactly once
    Space Complexity: O(n) for the parent queue
    """
    if not keys:
        return None

    root = TreeNode(keys[ROOT_INDEX])
    parents = ArrayQueue[TreeNode[K]]()
    parents.push(root)

    # Walk the remaining keys two at a time, one pair per parent
    for i in range(ROOT_INDEX + 1, len(keys), 2):
        current = parents.pop()

        left = TreeNode(keys[i])
        current.add_left(left)
        parents.push(left)

        if i + 1 < len(keys):
            right = TreeNode(keys[i + 1])
            current.add_right(right)
            parents.push(right)

    logger.debug(f"Built complete tree from {len(keys)} keys")
    return root


# -------------------------------
# Binary search tree insertion
# -------------------------------
def insert(root: Optional[TreeNode[K]], key: K) -> TreeNode[K]:
    """
    Inserts key into a binary search tree and returns the root.

    Smaller keys go left, everything else (ties included) goes right.
    No rebalancing is done.
    Time Complexity: Avg. O(logn), O(n) worst case for an unbalanced BST
    Space Complexity: O(1)
    """
    new_node = TreeNode(key)
    if root is None:
        return new_node

    node = root
    while True:
        if key < node.key:
            if node.left is None:
                node.left = new_node
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new_node
                return root
            node = node.right


def insert_recursive(root: Optional[TreeNode[K]], key: K) -> TreeNode[K]:
    """
    Recursive form of insert.
    Space Complexity: O(logn) avg./O(n) worst for recursion stack space
    """
    if root is None:
        return TreeNode(key)
    if key < root.key:
        root.left = insert_recursive(root.left, key)
    else:
        root.right = insert_recursive(root.right, key)
    return root


def build_bst(keys: Iterable[K], recursive: bool = False) -> Optional[TreeNode[K]]:
    """
    Builds an unbalanced binary search tree by inserting keys one at a time.

    Time Complexity: Avg. O(nlogn), O(n^2) for sorted input
    """
    _insert = insert_recursive if recursive else insert
    root: Optional[TreeNode[K]] = None
    count = 0
    for key in keys:
        root = _insert(root, key)
        count += 1

    logger.debug(f"Built binary search tree from {count} keys")
    return root


# -------------------------------
# Utility
# -------------------------------
def count_nodes(root: Optional[TreeNode[K]]) -> int:
    """Returns the number of nodes in the tree."""
    if root is None:
        return 0

    count = 0
    stack = ArrayStack[TreeNode[K]]()
    stack.push(root)
    while not stack.is_empty():
        node = stack.pop()
        count += 1
        for child in node.children():
            stack.push(child)
    return count


def render(root: Optional[TreeNode[K]]) -> str:
    """
    Renders the tree as an outline, one line per node in pre-order.

    Children hang off their parent with ├── / └── branches. A lone child is
    tagged (left) or (right) since its side cannot be told from position.
    Uses an explicit stack, so degenerate trees render without recursion.

        A
        ├── B
        └── C
            └── (right) D
    """
    if root is None:
        return "<empty>"

    lines: List[str] = []
    # Each entry: node, text before its key, indent for its children
    stack = ArrayStack[Tuple[TreeNode[K], str, str]]()
    stack.push((root, "", ""))
    while not stack.is_empty():
        node, head, indent = stack.pop()
        lines.append(f"{head}{node.key}")

        if node.left is not None and node.right is not None:
            branches = [(node.left, ""), (node.right, "")]
        elif node.left is not None:
            branches = [(node.left, "(left) ")]
        elif node.right is not None:
            branches = [(node.right, "(right) ")]
        else:
            branches = []

        # Push right to left so the left branch is emitted first
        for i in reversed(range(len(branches))):
            child, tag = branches[i]
            last = i == len(branches) - 1
            stack.push(
                (
                    child,
                    indent + ("└── " if last else "├── ") + tag,
                    indent + ("    " if last else "│   "),
                )
            )

    return "\n".join(lines)
