"""
Array-backed binary heap with support for externally held keys.

Unlike :mod:`heapq`, the queue is ordered by an arbitrary comparison
predicate. This lets graph algorithms queue bare vertex identifiers and
order them by a cost array that lives outside the queue. Because the queue
cannot observe changes to such external keys, callers invoke
:meth:`PriorityQueue.update` after modifying them.

Complexity:
    - push / emplace / pop: O(log n)
    - top / size / empty: O(1)
    - update (full or positional): O(n)
    - find_if: O(n)
"""

import operator
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from ..diagnostics import assert_heap, is_debug_enabled

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """
    Binary heap ordered by a caller-supplied comparison predicate.

    ``compare(a, b)`` returns True when ``a`` must leave the queue before
    ``b``. The default ``operator.lt`` yields a min-heap.

    Slots reported by :meth:`find_if` and exposed through iteration are not
    stable across any mutating call.

    Example:
        >>> cost = [5.0, 1.0, 3.0]
        >>> pq = PriorityQueue(lambda a, b: cost[a] < cost[b], [0, 1, 2])
        >>> pq.top()
        1
        >>> cost[0] = 0.0
        >>> pq.update()
        >>> pq.pop()
        0
    """

    def __init__(
        self,
        compare: Callable[[T, T], bool] = operator.lt,
        data: Optional[Iterable[T]] = None,
        element_type: Optional[Callable[..., T]] = None,
    ):
        """
        Initialize the queue, heapifying any initial data.

        Args:
            compare: Ordering predicate.
            data: Initial elements (copied).
            element_type: Constructor used by :meth:`emplace`.
        """
        self._compare = compare
        self._data: List[T] = list(data) if data is not None else []
        self._element_type = element_type
        self._heapify()

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._data))

    def __repr__(self) -> str:
        return f"PriorityQueue(size={len(self._data)})"

    def size(self) -> int:
        """Return the number of queued elements."""
        return len(self._data)

    def empty(self) -> bool:
        """Return True if the queue holds no elements."""
        return not self._data

    def top(self) -> T:
        """
        Return the element that would be popped next.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._data:
            raise IndexError("top from empty priority queue")
        return self._data[0]

    def find_if(self, predicate: Callable[[T], bool]) -> Optional[int]:
        """
        Return the slot index of the first element satisfying ``predicate``.

        Args:
            predicate: Unary predicate applied in slot order.

        Returns:
            Slot index usable with :meth:`update`, or None if no element
            matches.
        """
        for i, value in enumerate(self._data):
            if predicate(value):
                return i
        return None

    def push(self, value: T) -> None:
        """Push ``value`` into the queue."""
        self._data.append(value)
        self._sift_up(len(self._data) - 1)
        self._check()

    def emplace(self, *args: Any, **kwargs: Any) -> None:
        """
        Construct an element with ``element_type`` and push it.

        Raises:
            TypeError: If the queue was created without an element type.
        """
        if self._element_type is None:
            raise TypeError("emplace requires a queue constructed with element_type")
        self.push(self._element_type(*args, **kwargs))

    def pop(self) -> T:
        """
        Remove and return the top element.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._data:
            raise IndexError("pop from empty priority queue")
        top = self._data[0]
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self._sift_down(0)
        self._check()
        return top

    def update(self, position: Optional[int] = None, value: Optional[T] = None) -> None:
        """
        Restore heap order after keys changed.

        Without arguments the whole heap is rebuilt, which is required after
        an externally held key of some queued element was modified. With a
        ``position`` the slot is overwritten with ``value`` first.

        Args:
            position: Slot to overwrite, as returned by :meth:`find_if`.
            value: New element for ``position``.

        Raises:
            TypeError: If ``position`` is given without ``value``.
            IndexError: If ``position`` is outside the backing array.
        """
        if position is not None:
            if value is None:
                raise TypeError("update() with a position requires a value")
            if not 0 <= position < len(self._data):
                raise IndexError(f"position {position} out of range for queue of size {len(self._data)}")
            self._data[position] = value
        self._heapify()

    def _heapify(self) -> None:
        for i in reversed(range(len(self._data) // 2)):
            self._sift_down(i)
        self._check()

    def _sift_up(self, i: int) -> None:
        data = self._data
        item = data[i]
        while i > 0:
            parent = (i - 1) // 2
            if not self._compare(item, data[parent]):
                break
            data[i] = data[parent]
            i = parent
        data[i] = item

    def _sift_down(self, i: int) -> None:
        data = self._data
        n = len(data)
        item = data[i]
        while True:
            child = 2 * i + 1
            if child >= n:
                break
            right = child + 1
            if right < n and self._compare(data[right], data[child]):
                child = right
            if not self._compare(data[child], item):
                break
            data[i] = data[child]
            i = child
        data[i] = item

    def _check(self) -> None:
        if is_debug_enabled():
            assert_heap(self._data, self._compare)
