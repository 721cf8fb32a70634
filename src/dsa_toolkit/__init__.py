"""Data-structure toolkit: containers, binary trees, traversals and linked lists."""

from .core.config import ToolkitConfig
from .core.errors import (
    ToolkitError,
    EmptyError,
    NodeConflictError,
    NoMoreElementsError,
)
from .core.toolkit import Toolkit
from .core.types import Comparable, MidpointBias, TraversalOrder
from .components.containers import ArrayQueue, ArrayStack
from .components.tree import (
    TreeNode,
    build_bst,
    build_tree_from_sorted,
    count_nodes,
    insert,
    insert_recursive,
    render,
)
from .components.traversal import (
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
from .components.linkedlist import LinkedList, ListIterator, ListNode, build_list, find_midpoint
from .components.search import jump_search, linear_search, tree_sort
from .components.inputs import random_keys, sequential_keys, sorted_random_keys

__all__ = [
    "ToolkitConfig",
    "ToolkitError",
    "EmptyError",
    "NodeConflictError",
    "NoMoreElementsError",
    "Toolkit",
    "Comparable",
    "MidpointBias",
    "TraversalOrder",
    "ArrayQueue",
    "ArrayStack",
    "TreeNode",
    "build_bst",
    "build_tree_from_sorted",
    "count_nodes",
    "insert",
    "insert_recursive",
    "render",
    "breadth_first",
    "collect",
    "depth_first",
    "depth_first_recursive",
    "height",
    "height_recursive",
    "in_order",
    "in_order_recursive",
    "is_full",
    "is_full_recursive",
    "traverse",
    "LinkedList",
    "ListIterator",
    "ListNode",
    "build_list",
    "find_midpoint",
    "jump_search",
    "linear_search",
    "tree_sort",
    "random_keys",
    "sequential_keys",
    "sorted_random_keys",
]
