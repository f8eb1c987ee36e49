"""Debug mode switch for graphkit.

The initial state is taken from the ``GRAPHKIT_DEBUG`` environment
variable, parsed next to ``GRAPHKIT_LOG_LEVEL`` in :mod:`graphkit.logging`.
While enabled, :class:`~graphkit.structures.PriorityQueue` checks its heap
order after every mutation and Prim warns about negative weights it skips.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_DEBUG_ENV_VAR = "GRAPHKIT_DEBUG"
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


def _parse_flag(value: str | bool) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_VALUES
    return bool(value)


_debug_enabled: bool = _parse_flag(os.getenv(_DEBUG_ENV_VAR, "0"))


def is_debug_enabled() -> bool:
    """Return whether graphkit debug mode is on."""
    return _debug_enabled


def set_debug_enabled(enabled: bool | str) -> None:
    """
    Switch debug mode on or off for the whole process.

    Parameters
    ----------
    enabled:
        New state. Strings are read like ``GRAPHKIT_DEBUG``.
    """
    global _debug_enabled
    _debug_enabled = _parse_flag(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Set debug mode inside a ``with`` block, restoring it on exit.

    Example
    -------
    >>> with debug_context():
    ...     pq.push(item)  # heap order verified after the push
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = _parse_flag(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev
