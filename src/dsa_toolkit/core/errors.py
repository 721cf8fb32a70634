"""Exception hierarchy for the data-structure toolkit.

Defines all custom exceptions used throughout the implementation.
"""

from __future__ import annotations


class ToolkitError(Exception):
    """Base exception for all toolkit errors."""
    pass


class EmptyError(ToolkitError, IndexError):
    """Raised when popping from an empty queue or stack.

    Traversal loops treat this as the drain-complete signal.
    """
    pass


class NodeConflictError(ToolkitError):
    """Raised when attaching a child to a slot that is already occupied."""
    pass


class NoMoreElementsError(ToolkitError):
    """Raised when a linked list iterator is exhausted."""
    pass
