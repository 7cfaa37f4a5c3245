"""Error types raised by heapgraph.

Each error subclasses a built-in exception so callers can catch either the
specific type or the generic one.
"""

from __future__ import annotations

from typing import Any

NULL_ITEM_MESSAGE = "Cannot add null or undefined items"


class InvalidElementError(ValueError):
    """Raised when ``None`` is inserted into a priority queue."""

    def __init__(self, message: str = NULL_ITEM_MESSAGE) -> None:
        super().__init__(message)


class ComparatorError(TypeError):
    """Raised when the default comparator cannot order an element."""


class NoPathError(LookupError):
    """Raised when no path exists between two nodes."""

    def __init__(self, source: Any, target: Any) -> None:
        super().__init__(f"No path found from '{source}' to '{target}'.")
        self.source = source
        self.target = target
