"""Binary-heap priority queue ordered by an injected comparator.

The heap lives in a Python list: the children of index ``i`` sit at ``2i + 1``
and ``2i + 2``. For every non-root index ``i`` with parent ``p`` the comparator
satisfies ``compare(heap[p], heap[i]) <= 0``, so the root is always the element
that sorts first. Elements of equal priority come out in no particular order.
"""

from __future__ import annotations

from collections import abc
from contextlib import contextmanager
from typing import Any, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar, Union

from heapgraph.errors import ComparatorError, InvalidElementError
from heapgraph.queue.comparators import (
    Comparator,
    CompareFunc,
    NaturalComparator,
    as_comparator,
)

T = TypeVar("T")

#: Containers whose members ``add_all`` inserts individually.
BULK_TYPES = (abc.Sequence, abc.Set, abc.Iterator)

#: Sequences that ``add_all`` treats as a single element.
SCALAR_TYPES = (str, bytes, bytearray)


class PriorityQueue(Generic[T]):
    """Priority queue backed by an implicit binary heap.

    Args:
        items: Initial elements. They are copied, so later changes to the
            caller's container do not affect the queue. Another
            ``PriorityQueue`` may be passed; its elements are copied and the
            source queue is left intact. A ``Comparator`` given here, with no
            ``comparator`` argument, is taken as the comparator.
        comparator: Ordering of the queue. Defaults to
            :class:`NaturalComparator`, which requires every element to provide
            ``compare_to`` or rich comparison operators.

    Raises:
        InvalidElementError: If ``items`` contains ``None``.
        ComparatorError: If the default comparator cannot order an element.
    """

    def __init__(
        self,
        items: Union[Iterable[T], Comparator, None] = None,
        comparator: Union[Comparator, CompareFunc, None] = None,
    ) -> None:
        if isinstance(items, Comparator) and comparator is None:
            items, comparator = None, items

        self._comparator: Comparator = as_comparator(comparator)

        if items is None:
            initial: List[T] = []
        elif isinstance(items, PriorityQueue):
            initial = list(items._heap)
        else:
            initial = list(items)

        self._validate(initial)
        self._heap: List[T] = initial
        with self._ordering_errors():
            for index in reversed(range(len(self._heap) // 2)):
                self._sift_down(index)

    @property
    def comparator(self) -> Comparator:
        """The comparator ordering this queue."""
        return self._comparator

    def peek(self) -> Optional[T]:
        """Return the root element without removing it, or None if empty."""
        if not self._heap:
            return None
        return self._heap[0]

    def size(self) -> int:
        """Return the number of elements."""
        return len(self._heap)

    def is_empty(self) -> bool:
        """Return True if the queue holds no elements."""
        return not self._heap

    def add(self, item: T) -> None:
        """Insert a single element.

        Raises:
            InvalidElementError: If ``item`` is None.
            ComparatorError: If the default comparator cannot order ``item``.
        """
        self._validate((item,))
        with self._ordering_errors():
            self._push(item)

    def add_all(self, *items: Any) -> None:
        """Insert elements in bulk.

        Each argument may be a bare element, a sequence, set or iterator of
        elements, or another ``PriorityQueue`` whose current elements are
        copied without draining it. Strings and bytes count as bare elements.

        The call is all-or-nothing: if any element is rejected, or the
        comparator raises while inserting, the queue is left unchanged.

        Raises:
            InvalidElementError: If any element is None.
            ComparatorError: If the default comparator cannot order an element.
        """
        pending: List[T] = []
        for arg in items:
            if isinstance(arg, PriorityQueue):
                pending.extend(arg._heap)
            elif isinstance(arg, BULK_TYPES) and not isinstance(arg, SCALAR_TYPES):
                pending.extend(arg)
            else:
                pending.append(arg)

        self._validate(pending)
        saved = list(self._heap)
        try:
            with self._ordering_errors():
                for item in pending:
                    self._push(item)
        except Exception:
            self._heap = saved
            raise

    def poll(self) -> Optional[T]:
        """Remove and return the root element, or None if empty."""
        heap = self._heap
        if not heap:
            return None
        last = heap.pop()
        if not heap:
            return last
        root = heap[0]
        heap[0] = last
        self._sift_down(0)
        return root

    def clear(self) -> None:
        """Remove all elements; the comparator is kept."""
        self._heap.clear()

    def drain(self) -> Iterator[T]:
        """Poll elements in priority order until the queue is empty."""
        while self._heap:
            yield self.poll()  # type: ignore[misc]

    def snapshot(self) -> Tuple[T, ...]:
        """Return a copy of the backing store in heap (not sorted) order."""
        return tuple(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __iter__(self) -> Iterator[T]:
        """Iterate over a snapshot in heap order; the queue is not consumed."""
        return iter(self.snapshot())

    def __repr__(self) -> str:
        return f"PriorityQueue({list(self._heap)!r}, comparator={self._comparator!r})"

    #
    # Heap maintenance
    #
    def _validate(self, items: Iterable[Any]) -> None:
        check_natural = isinstance(self._comparator, NaturalComparator)
        for item in items:
            if item is None:
                raise InvalidElementError()
            if check_natural and not NaturalComparator.supports(item):
                raise ComparatorError(
                    f"Cannot order '{type(item).__name__}' items without a comparator: "
                    "define compare_to() or __lt__(), or pass a comparator."
                )

    @contextmanager
    def _ordering_errors(self) -> Iterator[None]:
        """Report a TypeError from the default comparator as ComparatorError."""
        try:
            yield
        except ComparatorError:
            raise
        except TypeError as exc:
            if not isinstance(self._comparator, NaturalComparator):
                raise
            raise ComparatorError(
                f"Cannot order items without a comparator: {exc}"
            ) from exc

    def _push(self, item: T) -> None:
        """Append ``item`` and sift it up; on error the heap is restored."""
        heap = self._heap
        compare = self._comparator.compare
        heap.append(item)
        index = len(heap) - 1
        shifted: List[int] = []
        try:
            while index > 0:
                parent = (index - 1) >> 1
                if compare(heap[parent], item) <= 0:
                    break
                heap[index] = heap[parent]
                shifted.append(index)
                index = parent
        except Exception:
            # Move displaced ancestors back up, then drop the new slot
            for child in reversed(shifted):
                heap[(child - 1) >> 1] = heap[child]
            heap.pop()
            raise
        heap[index] = item

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        compare = self._comparator.compare
        size = len(heap)
        item = heap[index]
        while True:
            child = 2 * index + 1
            if child >= size:
                break
            right = child + 1
            # Only compare against a right child that exists
            if right < size and compare(heap[right], heap[child]) < 0:
                child = right
            if compare(heap[child], item) >= 0:
                break
            heap[index] = heap[child]
            index = child
        heap[index] = item
