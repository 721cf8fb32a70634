"""Array-backed queue and stack.

These drive the iterative tree traversals.
"""

from __future__ import annotations

from typing import Generic, List

from ..core.errors import EmptyError
from ..core.types import T

# The queue compacts its buffer once this many popped slots pile up at the front
COMPACT_THRESHOLD = 32


class ArrayQueue(Generic[T]):
    """FIFO container backed by a list and a head offset.

    Popping advances the head instead of shifting the list, so pop is O(1);
    the consumed prefix is dropped once it outgrows the live elements.

    Invariants:
        - size() == pushes - successful pops
        - Items come out in the order they went in
    """

    def __init__(self) -> None:
        self._array: List[T] = []
        self._head: int = 0

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"ArrayQueue({self._array[self._head:]!r})"

    def size(self) -> int:
        """
        Returns the number of elements in the queue.
        Time Complexity: O(1)
        """
        return len(self._array) - self._head

    def is_empty(self) -> bool:
        return self.size() == 0

    def push(self, item: T) -> None:
        """
        Adds an element to the tail of the queue.
        Time Complexity: O(1) amortized, the list may need to grow
        """
        self._array.append(item)

    def pop(self) -> T:
        """
        Removes and returns the element at the head of the queue.
        Time Complexity: O(1) amortized
        """
        if self.size() == 0:
            raise EmptyError("The queue is empty.")

        item = self._array[self._head]
        self._head += 1

        # Drop the consumed prefix once it dominates the buffer
        if self._head >= COMPACT_THRESHOLD and self._head * 2 >= len(self._array):
            del self._array[: self._head]
            self._head = 0
        return item


class ArrayStack(Generic[T]):
    """LIFO container backed by a list.

    Invariants:
        - size() == pushes - successful pops
        - pop() returns the most recently pushed remaining item
    """

    def __init__(self) -> None:
        self._array: List[T] = []

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"ArrayStack({self._array!r})"

    def size(self) -> int:
        return len(self._array)

    def is_empty(self) -> bool:
        return not self._array

    def push(self, item: T) -> None:
        self._array.append(item)

    def pop(self) -> T:
        """
        Removes and returns the element at the top of the stack.
        Time Complexity: O(1)
        """
        if not self._array:
            raise EmptyError("The stack is empty.")
        return self._array.pop()
