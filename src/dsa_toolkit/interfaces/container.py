"""Protocol definition for sequential containers."""

from __future__ import annotations

from typing import Protocol, TypeVar

T = TypeVar("T")


class Container(Protocol[T]):
    """Minimal sequential buffer with a fixed removal discipline."""

    def push(self, item: T) -> None:
        """Append item. Never fails."""
        ...

    def pop(self) -> T:
        """Remove and return the next item per the container's discipline.

        Raises EmptyError when no elements remain.
        """
        ...

    def size(self) -> int:
        """Return the current element count."""
        ...
