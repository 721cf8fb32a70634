"""Tree traversals and structural queries.

Breadth-first and iterative depth-first search share one loop and differ only
in the container that holds the frontier:
    - ArrayQueue (FIFO) gives breadth-first order
    - ArrayStack (LIFO) gives depth-first pre-order

The iterative forms are the defaults since a degenerate tree is as deep as it
is large; each has a recursive counterpart for comparison.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from ..core.errors import EmptyError
from ..core.types import K, TraversalOrder
from ..interfaces.container import Container
from .containers import ArrayQueue, ArrayStack
from .tree import TreeNode

logger = logging.getLogger(__name__)

FULL_CHILDREN_COUNT = 2
LEAF_CHILDREN_COUNT = 0


def _search(
    root: Optional[TreeNode[K]],
    frontier: Container[TreeNode[K]],
    visit: Callable[[K], None],
    right_first: bool,
) -> None:
    """Drains the frontier, visiting each node and pushing its children."""
    if root is None:
        return

    frontier.push(root)
    while True:
        try:
            node = frontier.pop()
        except EmptyError:
            break

        visit(node.key)
        children = node.children()
        if right_first:
            children = children[::-1]
        for child in children:
            frontier.push(child)


# -------------------------------
# Breadth-first / depth-first
# -------------------------------
def breadth_first(root: Optional[TreeNode[K]], visit: Callable[[K], None]) -> None:
    """
    Visits nodes level by level, left to right.
    Time Complexity: O(n)
    Space Complexity: O(w) where w is the widest level
    """
    _search(root, ArrayQueue[TreeNode[K]](), visit, right_first=False)


def depth_first(root: Optional[TreeNode[K]], visit: Callable[[K], None]) -> None:
    """
    Visits nodes in pre-order (node, left, right) with an explicit stack.
    The right child is pushed first so the left one is popped first.
    Time Complexity: O(n)
    Space Complexity: O(h) where h is the height
    """
    _search(root, ArrayStack[TreeNode[K]](), visit, right_first=True)


def depth_first_recursive(root: Optional[TreeNode[K]], visit: Callable[[K], None]) -> None:
    if root is None:
        return
    visit(root.key)
    depth_first_recursive(root.left, visit)
    depth_first_recursive(root.right, visit)


# -------------------------------
# In-order
# -------------------------------
def in_order(root: Optional[TreeNode[K]], visit: Callable[[K], None]) -> None:
    """
    Visits the left subtree, then the node, then the right subtree.
    Produces sorted output for a binary search tree.
    Time Complexity: O(n)
    Space Complexity: O(h) for the explicit stack
    """
    stack = ArrayStack[TreeNode[K]]()
    node = root
    while True:
        # Walk as far left as possible, stacking the path
        while node is not None:
            stack.push(node)
            node = node.left
        try:
            node = stack.pop()
        except EmptyError:
            break
        visit(node.key)
        node = node.right


def in_order_recursive(root: Optional[TreeNode[K]], visit: Callable[[K], None]) -> None:
    if root is None:
        return
    in_order_recursive(root.left, visit)
    visit(root.key)
    in_order_recursive(root.right, visit)


# -------------------------------
# Dispatch
# -------------------------------
def traverse(
    root: Optional[TreeNode[K]],
    order: TraversalOrder,
    visit: Callable[[K], None],
    recursive: bool = False,
) -> None:
    """Visits every key of the tree in the requested order."""
    if order is TraversalOrder.BREADTH_FIRST:
        if recursive:
            raise ValueError("breadth-first traversal has no recursive form")
        breadth_first(root, visit)
    elif order is TraversalOrder.DEPTH_FIRST:
        (depth_first_recursive if recursive else depth_first)(root, visit)
    elif order is TraversalOrder.IN_ORDER:
        (in_order_recursive if recursive else in_order)(root, visit)
    else:
        raise ValueError(f"Unsupported traversal order: {order!r}")


def collect(
    root: Optional[TreeNode[K]], order: TraversalOrder, recursive: bool = False
) -> List[K]:
    """Returns the keys of the tree in the requested order."""
    keys: List[K] = []
    traverse(root, order, keys.append, recursive=recursive)
    return keys


# -------------------------------
# Structural queries
# -------------------------------
def height(root: Optional[TreeNode[K]]) -> int:
    """
    Returns the number of levels in the tree; the empty tree has height 0.
    Counts levels breadth-first, draining one level per pass.
    Time Complexity: O(n)
    """
    if root is None:
        return 0

    levels = 0
    queue = ArrayQueue[TreeNode[K]]()
    queue.push(root)
    while not queue.is_empty():
        levels += 1
        for _ in range(queue.size()):
            for child in queue.pop().children():
                queue.push(child)

    logger.debug(f"Measured tree height {levels}")
    return levels


def height_recursive(root: Optional[TreeNode[K]]) -> int:
    """
    Returns 1 + the larger of the two subtree heights.
    Space Complexity: O(logn) avg./O(n) worst for recursion stack space
    """
    if root is None:
        return 0
    return 1 + max(height_recursive(root.left), height_recursive(root.right))


def _is_full_node(node: TreeNode[K]) -> bool:
    return len(node.children()) in (LEAF_CHILDREN_COUNT, FULL_CHILDREN_COUNT)


def is_full(root: Optional[TreeNode[K]]) -> bool:
    """
    Checks breadth-first that every node has either 0 or 2 children.
    Stops at the first node with a single child.
    The empty tree is not considered full.
    """
    if root is None:
        return False

    queue = ArrayQueue[TreeNode[K]]()
    queue.push(root)
    while True:
        try:
            node = queue.pop()
        except EmptyError:
            break
        if not _is_full_node(node):
            logger.debug(f"{node!r} has a single child")
            return False
        for child in node.children():
            queue.push(child)
    return True


def is_full_recursive(root: Optional[TreeNode[K]]) -> bool:
    if root is None:
        return False

    def _assert_full(node: TreeNode[K]) -> bool:
        if not _is_full_node(node):
            return False
        return all(_assert_full(child) for child in node.children())

    return _assert_full(root)
