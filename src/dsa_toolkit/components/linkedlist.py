"""Singly linked list with a tail reference, a forward iterator and a
midpoint finder.

Time Complexity:
Append: O(1) through the tail reference
Search: O(n)
"""

from __future__ import annotations

import logging
import random
from typing import Generic, Iterator, List, Optional

from ..core.errors import NoMoreElementsError
from ..core.types import MidpointBias, T

logger = logging.getLogger(__name__)


# -----------------------------
# Singly Linked List Node
# -----------------------------
class ListNode(Generic[T]):
    """A node holding data of type T and the node it links to."""

    __slots__ = ("data", "next")

    def __init__(self, data: T, next: Optional[ListNode[T]] = None) -> None:
        self.data: T = data
        self.next: Optional[ListNode[T]] = next

    def __repr__(self) -> str:
        return f"ListNode(data={self.data!r}, next={getattr(self.next, 'data', None)!r})"


# -----------------------------
# Iterator
# -----------------------------
class ListIterator(Generic[T]):
    """
    Forward-only cursor over the nodes of a list.

    Starts before the first node. Reading never mutates the list, so any
    number of iterators may walk the same list.
    """

    def __init__(self, head: Optional[ListNode[T]]) -> None:
        self._head = head
        self._current: Optional[ListNode[T]] = None
        self._started = False

    def next(self) -> ListNode[T]:
        """
        Advances and returns the next node.
        Raises NoMoreElementsError once the list is exhausted.
        """
        if not self._started:
            self._started = True
            self._current = self._head
        elif self._current is not None:
            self._current = self._current.next

        if self._current is None:
            raise NoMoreElementsError("There are no more elements over which to iterate.")
        return self._current

    def __iter__(self) -> ListIterator[T]:
        return self

    def __next__(self) -> ListNode[T]:
        try:
            return self.next()
        except NoMoreElementsError:
            raise StopIteration from None


# -----------------------------
# Singly Linked List
# -----------------------------
class LinkedList(Generic[T]):
    """
    LinkedList owns its head node and keeps a reference to the tail
    for constant-time appends.

    Invariants:
        - Following next from head reaches tail in len(list) - 1 steps
        - tail.next is None
    """

    def __init__(self) -> None:
        self._head: Optional[ListNode[T]] = None
        self._tail: Optional[ListNode[T]] = None
        self._size: int = 0

    @property
    def head(self) -> Optional[ListNode[T]]:
        return self._head

    @property
    def tail(self) -> Optional[ListNode[T]]:
        return self._tail

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        current = self._head
        while current:
            yield current.data
            current = current.next

    def __repr__(self) -> str:
        if self._head is None:
            return "LinkedList([])"
        return "[Head] " + " -> ".join(str(v) for v in self) + " [Tail]"

    def is_empty(self) -> bool:
        return self._size == 0

    def append(self, data: T) -> None:
        """
        Links a new node after the tail.
        O(1) since no scanning is involved.
        """
        new_node = ListNode(data)
        if self._tail is None:
            self._head = new_node
        else:
            self._tail.next = new_node
        self._tail = new_node
        self._size += 1

    def iterate(self) -> ListIterator[T]:
        """Returns a fresh iterator positioned before the first node."""
        return ListIterator(self._head)

    def to_list(self) -> List[T]:
        return list(iter(self))


def build_list(length: int, rng: Optional[random.Random] = None) -> LinkedList[int]:
    """
    Builds a list of the given length.
    Values are 0..length-1, or draws of rng.randrange(length) when a random
    source is passed.
    """
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")

    linked: LinkedList[int] = LinkedList()
    for i in range(length):
        linked.append(i if rng is None else rng.randrange(length))
    return linked


def find_midpoint(
    linked: LinkedList[T], bias: MidpointBias = MidpointBias.LOWER
) -> Optional[ListNode[T]]:
    """
    Finds the middle node in a single forward pass.

    The midpoint trails the iterator and moves one link for every two nodes
    visited, the forward-only equivalent of a slow/fast pointer pair.
    For even lengths, LOWER returns index (n-1)//2 and UPPER returns n//2.
    UPPER is the plain step-on-every-even-count rule (length 4 gives index 2).
    Time Complexity: O(n)
    Space Complexity: O(1)
    """
    # LOWER moves on the 3rd, 5th, ... node; UPPER on the 2nd, 4th, ...
    parity = 1 if bias is MidpointBias.LOWER else 0

    midpoint: Optional[ListNode[T]] = None
    count = 0
    iterator = linked.iterate()
    while True:
        try:
            current = iterator.next()
        except NoMoreElementsError:
            break

        count += 1
        if midpoint is None:
            midpoint = current
        elif count % 2 == parity:
            midpoint = midpoint.next

    logger.debug(f"Found midpoint {midpoint!r} of {count} nodes")
    return midpoint
