"""
Property maps: external values attached to vertices or edges.

A property map is independent of the graph's storage. It only records the
vertex count of the graph it was created for; later changes to the graph
are not tracked.

Two access modes are deliberately kept apart:

- ``prop(key)`` / ``set_prop(key, value)`` are checked and raise
  :class:`MissingPropertyError` for keys without an entry.
- ``pm[key]`` is unchecked and creates a default entry on first access,
  like :class:`collections.defaultdict`.
"""

from typing import Any, Callable, Dict, Generic, Hashable, Iterator, List, Optional, Tuple, TypeVar

from .core import Edge, EdgeLike, TraversableGraph, Vertex

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")


class MissingPropertyError(KeyError):
    """Raised on checked access to a key that has no property entry."""

    def __init__(self, key: Any):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"No property for {self.key!r}"


class PropertyMap(Generic[K, T]):
    """
    Mapping from graph entities to caller-chosen values.

    Attributes:
        size: Vertex count of the graph the map was created for.
        default_factory: Callable producing values for unchecked access to
            missing keys, or None.

    Example:
        >>> g = DenseGraph(3)
        >>> dist = VertexPropertyMap(g, default_factory=int)
        >>> dist[2] += 5
        >>> dist.prop(2)
        5
        >>> dist.prop(0)
        Traceback (most recent call last):
        ...
        MissingPropertyError: 0
    """

    def __init__(self, graph: TraversableGraph, default_factory: Optional[Callable[[], T]] = None):
        self.size = graph.size()
        self.default_factory = default_factory
        self._properties: Dict[K, T] = {}

    def _key(self, key: Any) -> K:
        return key

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size}, entries={len(self._properties)})"

    def __len__(self) -> int:
        return len(self._properties)

    def __iter__(self) -> Iterator[K]:
        return iter(sorted(self._properties))

    def __contains__(self, key: Any) -> bool:
        return self.exists(key)

    def __getitem__(self, key: Any) -> T:
        k = self._key(key)
        if k not in self._properties:
            if self.default_factory is None:
                raise MissingPropertyError(k)
            self._properties[k] = self.default_factory()
        return self._properties[k]

    def __setitem__(self, key: Any, value: T) -> None:
        self._properties[self._key(key)] = value

    def __delitem__(self, key: Any) -> None:
        k = self._key(key)
        if k not in self._properties:
            raise MissingPropertyError(k)
        del self._properties[k]

    def exists(self, key: Any) -> bool:
        """Return True if ``key`` has an entry."""
        return self._key(key) in self._properties

    def prop(self, key: Any) -> T:
        """
        Checked read access.

        Raises:
            MissingPropertyError: If ``key`` has no entry.
        """
        k = self._key(key)
        try:
            return self._properties[k]
        except KeyError:
            raise MissingPropertyError(k) from None

    def set_prop(self, key: Any, value: T) -> None:
        """
        Checked write access to an existing entry.

        Raises:
            MissingPropertyError: If ``key`` has no entry.
        """
        k = self._key(key)
        if k not in self._properties:
            raise MissingPropertyError(k)
        self._properties[k] = value

    def get(self, key: Any, default: Optional[T] = None) -> Optional[T]:
        """Return the entry for ``key`` or ``default`` without inserting."""
        return self._properties.get(self._key(key), default)

    def items(self) -> List[Tuple[K, T]]:
        """Return ``(key, value)`` pairs in ascending key order."""
        return sorted(self._properties.items())

    def collect_if(self, predicate: Callable[[T], bool]) -> List[K]:
        """Return keys, ascending, whose value satisfies ``predicate``."""
        return [k for k, v in self.items() if predicate(v)]


class VertexPropertyMap(PropertyMap[Vertex, T]):
    """Property map keyed by vertex identifiers."""


class EdgePropertyMap(PropertyMap[Edge, T]):
    """
    Property map keyed by edges.

    Keys may be given as :class:`Edge` or ``(source, target)`` pairs.
    """

    def _key(self, key: EdgeLike) -> Edge:
        return Edge.of(key)
