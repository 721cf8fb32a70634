"""Toolkit facade - main public API.

Orchestrates tree building, traversal, linked lists and search with
defaults taken from a ToolkitConfig.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Iterable, List, Optional, Sequence

from .config import ToolkitConfig
from .types import K, MidpointBias, TraversalOrder
from ..components import inputs, linkedlist, search, traversal, tree
from ..components.linkedlist import LinkedList, ListNode
from ..components.tree import TreeNode

logger = logging.getLogger(__name__)


class Toolkit:
    """Entry point bundling the tree and list algorithms.

    Args:
        config: Toolkit configuration (defaults to ToolkitConfig())

    Public API:
        - build_tree_from_sorted(keys): Complete tree by level order
        - build_bst(keys): Unbalanced binary search tree
        - build_list(length, randomize=False): Linked list of ints
        - traverse(root, order, visit): Visit keys in the given order
        - collect(root, order): Keys in the given order as a list
        - height(root) / is_full(root): Structural queries
        - find_midpoint(linked): Middle node of a list
        - tree_sort(arr) / jump_search(seq, target): Sorting and search
        - random_keys(length) / sorted_random_keys(length): Seeded inputs

    Invariants:
        - All randomness comes from the instance's own random.Random
        - Per-call arguments override the config defaults
    """

    def __init__(self, config: Optional[ToolkitConfig] = None):
        self.config = config if config is not None else ToolkitConfig()
        self._rng = random.Random(self.config.seed)
        logger.info(
            f"Initialized Toolkit (recursive={self.config.recursive}, "
            f"midpoint_bias={self.config.midpoint_bias.value}, seed={self.config.seed})"
        )

    def _recursive(self, recursive: Optional[bool]) -> bool:
        return self.config.recursive if recursive is None else recursive

    # -------------------------------
    # Construction
    # -------------------------------
    def build_tree_from_sorted(self, keys: Sequence[K]) -> Optional[TreeNode[K]]:
        return tree.build_tree_from_sorted(keys)

    def build_bst(
        self, keys: Iterable[K], recursive: Optional[bool] = None
    ) -> Optional[TreeNode[K]]:
        return tree.build_bst(keys, recursive=self._recursive(recursive))

    def build_list(self, length: int, randomize: bool = False) -> LinkedList[int]:
        return linkedlist.build_list(length, self._rng if randomize else None)

    def random_keys(self, length: int) -> List[int]:
        return inputs.random_keys(length, self._rng)

    def sorted_random_keys(self, length: int) -> List[int]:
        return inputs.sorted_random_keys(length, self._rng)

    # -------------------------------
    # Queries
    # -------------------------------
    def traverse(
        self,
        root: Optional[TreeNode[K]],
        order: TraversalOrder,
        visit: Callable[[K], None],
        recursive: Optional[bool] = None,
    ) -> None:
        # Breadth-first only exists iteratively, so the config default yields to it
        use_recursion = self._recursive(recursive)
        if order is TraversalOrder.BREADTH_FIRST and recursive is None:
            use_recursion = False
        traversal.traverse(root, order, visit, recursive=use_recursion)

    def collect(
        self,
        root: Optional[TreeNode[K]],
        order: TraversalOrder,
        recursive: Optional[bool] = None,
    ) -> List[K]:
        keys: List[K] = []
        self.traverse(root, order, keys.append, recursive=recursive)
        return keys

    def height(self, root: Optional[TreeNode[K]], recursive: Optional[bool] = None) -> int:
        if self._recursive(recursive):
            return traversal.height_recursive(root)
        return traversal.height(root)

    def is_full(self, root: Optional[TreeNode[K]], recursive: Optional[bool] = None) -> bool:
        if self._recursive(recursive):
            return traversal.is_full_recursive(root)
        return traversal.is_full(root)

    def find_midpoint(
        self, linked: LinkedList[K], bias: Optional[MidpointBias] = None
    ) -> Optional[ListNode[K]]:
        return linkedlist.find_midpoint(
            linked, self.config.midpoint_bias if bias is None else bias
        )

    # -------------------------------
    # Sorting and search
    # -------------------------------
    def tree_sort(self, arr: List[K], recursive: Optional[bool] = None) -> List[K]:
        return search.tree_sort(arr, recursive=self._recursive(recursive))

    def jump_search(self, seq: Sequence[K], target: K) -> Optional[int]:
        return search.jump_search(seq, target)
