"""Container shapes, capabilities and the adapter registry.

This module defines the core abstractions for polyducer's shape handling.
Every collection a transducer can read from or write into belongs to exactly
one shape, and each shape is served by an adapter supplying the primitives the
engine needs.

Key concepts:
    - Shape: The closed set of container shapes the engine understands
    - ContainerAdapter: Supplies size, pairs, empty instances, insertion and
      sorting for one shape
    - AdapterRegistry: Resolves the adapter for a collection

The registry is queried in order, returning the first adapter that matches.
Custom containers are supported by placing an adapter for them ahead of the
built-in ones, e.g. ``AdapterRegistry(MyAdapter(), *default_registry)``.
"""

from enum import Enum
from logging import getLogger
from typing import Any, Callable, Protocol, runtime_checkable

from polyducer.exceptions import UnsupportedShapeError
from polyducer.sorting import Comparator

logger = getLogger(__name__)

#: Writes a value into an accumulator and returns the accumulator: ``(acc, value, key) -> acc``
Inserter = Callable[[Any, Any, Any], Any]


class Shape(Enum):
    """The container shapes a collection can have.

    Pair-iterables are split by the insertion they support: keyed ones accept
    ``collection[key] = value`` while valueless ones only accept ``add(value)``.
    """

    ORDERED_SEQUENCE = "ordered-sequence"
    KEYED_PAIRS = "keyed-pairs"
    VALUELESS_PAIRS = "valueless-pairs"
    KEYED_MAPPING = "keyed-mapping"

    @property
    def is_pair_iterable(self) -> bool:
        return self in (Shape.KEYED_PAIRS, Shape.VALUELESS_PAIRS)


@runtime_checkable
class SupportsAppend(Protocol):
    def append(self, value: Any, /) -> None: ...


@runtime_checkable
class SupportsKeyedInsertion(Protocol):
    def __setitem__(self, key: Any, value: Any, /) -> None: ...


@runtime_checkable
class SupportsUniqueInsertion(Protocol):
    def add(self, value: Any, /) -> None: ...


@runtime_checkable
class ContainerAdapter(Protocol):
    """Shape-specific primitives for one kind of container.

    Attributes:
        shape: The shape this adapter serves.
    """

    shape: Shape

    def matches(self, collection: Any) -> bool:
        """Check if this adapter can handle the given collection.

        Args:
            collection: The value to classify.

        Returns:
            True if the collection has this adapter's shape.
        """
        ...

    def size(self, collection: Any) -> int:
        """Count the elements held by the collection."""
        ...

    def pairs(self, collection: Any, values_only: bool = False) -> list[Any]:
        """Materialise the collection as ``(key, value)`` pairs in traversal order.

        Args:
            collection: The collection to read.
            values_only: Return bare values instead of pairs.

        Returns:
            A list of pairs, or of values when ``values_only`` is set.
        """
        ...

    def empty_like(self, collection: Any) -> Any:
        """Create a zero-element container with the same shape as ``collection``."""
        ...

    def inserter(self, destination: Any) -> Inserter:
        """Select the terminal insertion function for writing into ``destination``.

        Raises:
            TypeError: If the destination cannot be written to.
        """
        ...

    def sort(self, collection: Any, comparator: Comparator) -> Any:
        """Sort the collection by value and return the sorted collection.

        Ordered sequences are sorted in place; other shapes return a new
        container of the same type.
        """
        ...


class AdapterRegistry:
    """Registry that resolves container adapters for collections.

    The registry holds a sequence of adapters. When resolving a collection it
    queries each adapter in order and returns the first one that matches, so
    more specific adapters must come before more general ones.

    Attributes:
        _adapters: Ordered sequence of adapters to query.
    """

    def __init__(self, *adapters: ContainerAdapter) -> None:
        for adapter in adapters:
            if not isinstance(adapter, ContainerAdapter):
                raise TypeError(f"{adapter!r} does not implement the ContainerAdapter protocol")
        self._adapters = adapters
        logger.debug(
            "Created adapter registry for shapes %s",
            [adapter.shape.value for adapter in adapters],
        )

    def resolve(self, collection: Any) -> ContainerAdapter:
        """Find the adapter for the given collection.

        Args:
            collection: The collection to classify.

        Returns:
            The first adapter whose ``matches`` accepts the collection.

        Raises:
            UnsupportedShapeError: If no adapter matches.
        """
        adapter = next((it for it in self._adapters if it.matches(collection)), None)
        if adapter is None:
            raise UnsupportedShapeError(collection)
        return adapter

    def classify(self, collection: Any) -> Shape:
        return self.resolve(collection).shape

    def __iter__(self):
        return iter(self._adapters)
