"""Common type definitions for the toolkit.

Defines the key protocol, type variables and enums shared by all components.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol, TypeVar


# A protocol expressing that a type supports ordering comparisons
class Comparable(Protocol):
    def __lt__(self, other: Any) -> bool: ...
    def __le__(self, other: Any) -> bool: ...
    def __gt__(self, other: Any) -> bool: ...
    def __ge__(self, other: Any) -> bool: ...
    def __eq__(self, other: Any) -> bool: ...


T = TypeVar("T")
K = TypeVar("K", bound=Comparable)


class TraversalOrder(Enum):
    """Order in which a traversal visits the nodes of a tree."""

    IN_ORDER = "in_order"
    BREADTH_FIRST = "breadth_first"
    DEPTH_FIRST = "depth_first"


class MidpointBias(Enum):
    """Which of the two center nodes to report for an even-length list."""

    LOWER = "lower"
    UPPER = "upper"
