"""Integration tests across builders, traversals and search.

Tests cover:
1. Tree sort correctness against a sorted reference
2. Level-order construction size and height
3. Iterative and recursive traversals agreeing on random trees
4. Jump search over tree-sorted input
"""

import math
import random

import pytest
from sortedcontainers import SortedList

from dsa_toolkit import (
    Toolkit,
    ToolkitConfig,
    TraversalOrder,
    build_bst,
    build_tree_from_sorted,
    collect,
    count_nodes,
    height,
    height_recursive,
    is_full,
    is_full_recursive,
    jump_search,
    random_keys,
    tree_sort,
)


@pytest.mark.parametrize("seed", range(10))
def test_tree_sort_matches_sorted_reference(seed):
    rng = random.Random(seed)
    keys = random_keys(rng.randrange(1, 300), rng)

    assert tree_sort(list(keys)) == list(SortedList(keys))


@pytest.mark.parametrize(
    "keys",
    [
        list(range(100)),  # worst case, already sorted
        list(range(100, 0, -1)),  # reverse sorted
        [7] * 50,  # all duplicates
        [2, 1] * 40,
    ],
)
def test_in_order_of_bst_is_non_decreasing(keys):
    ordered = collect(build_bst(keys), TraversalOrder.IN_ORDER)
    assert ordered == list(SortedList(keys))


@pytest.mark.parametrize("n", range(0, 65))
def test_level_order_build_properties(n):
    root = build_tree_from_sorted(list(range(n)))
    assert count_nodes(root) == n
    assert height(root) == (math.ceil(math.log2(n + 1)) if n else 0)
    # A complete tree holding 2^k - 1 nodes is also full
    if n and (n + 1) & n == 0:
        assert is_full(root)


@pytest.mark.parametrize("seed", range(5))
def test_iterative_and_recursive_forms_agree(seed):
    rng = random.Random(seed)
    root = build_bst(random_keys(200, rng))

    for order in (TraversalOrder.IN_ORDER, TraversalOrder.DEPTH_FIRST):
        assert collect(root, order) == collect(root, order, recursive=True)
    assert height(root) == height_recursive(root)
    assert is_full(root) == is_full_recursive(root)


def test_recursive_and_iterative_bst_builds_have_the_same_shape():
    keys = random_keys(150, random.Random(77))
    iterative = build_bst(keys)
    recursive = build_bst(keys, recursive=True)

    assert collect(iterative, TraversalOrder.BREADTH_FIRST) == collect(
        recursive, TraversalOrder.BREADTH_FIRST
    )


def test_jump_search_over_tree_sorted_input():
    kit = Toolkit(ToolkitConfig(seed=2024))
    ordered = kit.tree_sort(kit.random_keys(1000))
    present = set(ordered)

    for target in range(1000):
        index = jump_search(ordered, target)
        if target in present:
            assert index == ordered.index(target)
        else:
            assert index is None


def test_midpoint_over_many_lengths():
    kit = Toolkit()
    for n in range(1, 200):
        assert kit.find_midpoint(kit.build_list(n)).data == (n - 1) // 2
