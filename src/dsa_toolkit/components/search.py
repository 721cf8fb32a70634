"""
TREE SORT AND BLOCK SEARCH
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence

from ..core.types import K
from .traversal import in_order
from .tree import build_bst

logger = logging.getLogger(__name__)


def tree_sort(arr: List[K], recursive: bool = False) -> List[K]:
    """Tree Sort
    Inserts every key into an unbalanced binary search tree, then reads the
    keys back with an in-order traversal into arr.
    Time Complexity: Avg. O(nlogn), O(n^2) for already-sorted input
    Space Complexity: O(n) for the tree
    """
    if not arr:
        return arr

    root = build_bst(arr, recursive=recursive)

    i = 0

    def _write(key: K) -> None:
        nonlocal i
        arr[i] = key
        i += 1

    in_order(root, _write)
    logger.debug(f"Tree-sorted {len(arr)} keys")
    return arr


def linear_search(seq: Sequence[K], target: K) -> Optional[int]:
    """
    Returns the index of the first element equal to target, otherwise None.
    Time Complexity: O(n)
    """
    for i in range(len(seq)):
        if seq[i] == target:
            return i
    return None


def jump_search(seq: Sequence[K], target: K) -> Optional[int]:
    """
    Performs a jump (block) search on a sorted input sequence.
    Jumps from block end to block end until one is not smaller than target,
    then scans that block linearly.
    Returns the index of the first occurrence of target, otherwise None.
    Time Complexity: O(sqrt(n)) jumps plus an O(sqrt(n)) block scan
    """
    n = len(seq)
    if n == 0:
        return None

    interval = math.isqrt(n)
    start = 0
    while start < n:
        end = min(start + interval, n)
        # Earlier blocks all end below target, so the first match lives here
        if seq[end - 1] >= target:
            found = linear_search(seq[start:end], target)
            return None if found is None else start + found
        start = end

    return None
