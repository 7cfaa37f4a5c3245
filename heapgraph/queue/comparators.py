"""Comparators that define the ordering of a priority queue.

A comparator maps a pair ``(a, b)`` to a negative integer, zero, or a positive
integer when ``a`` sorts before, together with, or after ``b``. The queue keeps
the element that sorts first at its root.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Union

CompareFunc = Callable[[Any, Any], int]
KeyFunc = Callable[[Any], Any]


class Comparator(ABC):
    """Three-way ordering predicate over two values."""

    @abstractmethod
    def compare(self, a: Any, b: Any) -> int:
        """Return negative, zero, or positive as ``a`` sorts before, with, or after ``b``."""

    def __call__(self, a: Any, b: Any) -> int:
        return self.compare(a, b)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def _three_way(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class AscendingRelationalComparator(Comparator):
    """Natural order using ``<`` and ``>``; smallest element first.

    Args:
        key: Optional projection applied to both operands before comparing.
    """

    def __init__(self, key: Optional[KeyFunc] = None) -> None:
        self._key = key

    @property
    def key(self) -> Optional[KeyFunc]:
        return self._key

    def compare(self, a: Any, b: Any) -> int:
        if self._key is not None:
            a, b = self._key(a), self._key(b)
        return _three_way(a, b)

    def __repr__(self) -> str:
        if self._key is None:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}(key={self._key!r})"


class DescendingRelationalComparator(AscendingRelationalComparator):
    """Inverse of :class:`AscendingRelationalComparator`; largest element first."""

    def compare(self, a: Any, b: Any) -> int:
        return -super().compare(a, b)


class NaturalComparator(Comparator):
    """Default comparator that asks the elements to order themselves.

    An element's own ``compare_to(other)`` method takes precedence. Elements
    without one are ordered by their rich comparison operators, provided their
    type defines ``__lt__``.
    """

    @staticmethod
    def supports(item: Any) -> bool:
        """Return True if ``item`` can be ordered by this comparator."""
        if callable(getattr(item, "compare_to", None)):
            return True
        return type(item).__lt__ is not object.__lt__

    def compare(self, a: Any, b: Any) -> int:
        compare_to = getattr(a, "compare_to", None)
        if callable(compare_to):
            return compare_to(b)
        if a < b:
            return -1
        if b < a:
            return 1
        return 0


class _FunctionComparator(Comparator):
    """Adapts a plain ``cmp(a, b)`` function to the Comparator interface."""

    def __init__(self, func: CompareFunc) -> None:
        self._func = func

    def compare(self, a: Any, b: Any) -> int:
        return self._func(a, b)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._func!r})"


def as_comparator(comparator: Union[Comparator, CompareFunc, None]) -> Comparator:
    """Normalize ``comparator`` into a :class:`Comparator` instance.

    Args:
        comparator: A Comparator, a two-argument callable, or None for the
            default :class:`NaturalComparator`.

    Returns:
        Comparator instance.

    Raises:
        TypeError: If ``comparator`` is neither callable nor None.
    """
    if comparator is None:
        return NaturalComparator()
    if isinstance(comparator, Comparator):
        return comparator
    if callable(comparator):
        return _FunctionComparator(comparator)
    raise TypeError(
        f"Comparator must be a Comparator or a callable, got {type(comparator).__name__}."
    )
