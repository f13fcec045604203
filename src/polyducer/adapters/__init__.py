from typing import Any

from polyducer.adapters.base import (
    AdapterRegistry,
    ContainerAdapter,
    Inserter,
    Shape,
    SupportsAppend,
    SupportsKeyedInsertion,
    SupportsUniqueInsertion,
)
from polyducer.adapters.namespaces import KeyedMappingAdapter
from polyducer.adapters.pairs import KeyedPairsAdapter, ValuelessPairsAdapter
from polyducer.adapters.sequences import SequenceAdapter

default_registry = AdapterRegistry(
    SequenceAdapter(),
    KeyedPairsAdapter(),
    ValuelessPairsAdapter(),
    KeyedMappingAdapter(),
)


def classify_shape(collection: Any, *, registry: AdapterRegistry = default_registry) -> Shape:
    """Determine the shape of a collection.

    Raises:
        UnsupportedShapeError: If the collection has no recognised shape.
    """
    return registry.classify(collection)


def get_pairs(
    collection: Any,
    values_only: bool = False,
    *,
    registry: AdapterRegistry = default_registry,
) -> list[Any]:
    """Materialise a collection as ``(key, value)`` pairs, or bare values.

    Example:
        >>> get_pairs({"a": 1, "b": 2})
        [('a', 1), ('b', 2)]
        >>> get_pairs(["x", "y"], values_only=True)
        ['x', 'y']
    """
    return registry.resolve(collection).pairs(collection, values_only)


def get_size(collection: Any, *, registry: AdapterRegistry = default_registry) -> int:
    return registry.resolve(collection).size(collection)


def empty_like(collection: Any, *, registry: AdapterRegistry = default_registry) -> Any:
    return registry.resolve(collection).empty_like(collection)


def default_inserter(destination: Any, *, registry: AdapterRegistry = default_registry) -> Inserter:
    """Select how values are written into ``destination``.

    The choice depends only on the destination: append for ordered sequences,
    set-by-key for keyed pair-iterables, add for valueless pair-iterables and
    attribute assignment for keyed mappings.
    """
    return registry.resolve(destination).inserter(destination)


__all__ = [
    "AdapterRegistry",
    "ContainerAdapter",
    "Inserter",
    "KeyedMappingAdapter",
    "KeyedPairsAdapter",
    "SequenceAdapter",
    "Shape",
    "SupportsAppend",
    "SupportsKeyedInsertion",
    "SupportsUniqueInsertion",
    "ValuelessPairsAdapter",
    "classify_shape",
    "default_inserter",
    "default_registry",
    "empty_like",
    "get_pairs",
    "get_size",
]
