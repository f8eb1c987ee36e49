"""Diagnostics and debugging utilities for graphkit."""

from .core import assert_heap, heap_violation, is_heap
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "heap_violation",
    "is_heap",
    "assert_heap",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
