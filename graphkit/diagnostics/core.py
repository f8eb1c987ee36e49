"""Core invariant checks for graphkit data structures."""

from __future__ import annotations

from typing import Any, Callable, Sequence


def heap_violation(
    data: Sequence[Any],
    compare: Callable[[Any, Any], bool],
) -> int | None:
    """
    Locate the first slot that breaks the binary heap property.

    A slot ``i`` violates the property if its element must leave the
    queue before the element of its parent slot ``(i - 1) // 2``.

    Parameters
    ----------
    data:
        Backing array of a binary heap.
    compare:
        Ordering predicate; ``compare(a, b)`` is true when ``a`` has to be
        popped before ``b``.

    Returns
    -------
    int or None
        Index of the offending child slot, or None if the array is a heap.
    """
    for i in range(1, len(data)):
        if compare(data[i], data[(i - 1) // 2]):
            return i
    return None


def is_heap(data: Sequence[Any], compare: Callable[[Any, Any], bool]) -> bool:
    """Return True if ``data`` satisfies the heap property under ``compare``."""
    return heap_violation(data, compare) is None


def assert_heap(data: Sequence[Any], compare: Callable[[Any, Any], bool]) -> None:
    """
    Assert that ``data`` satisfies the heap property.

    Parameters
    ----------
    data:
        Backing array of a binary heap.
    compare:
        Ordering predicate of the heap.

    Raises
    ------
    ValueError
        If some slot orders before its parent.
    """
    i = heap_violation(data, compare)
    if i is not None:
        parent = (i - 1) // 2
        raise ValueError(
            f"Heap invariant violated: slot {i} ({data[i]!r}) orders before "
            f"its parent slot {parent} ({data[parent]!r})."
        )
