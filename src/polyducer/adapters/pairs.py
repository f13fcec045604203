"""Adapters for pair-iterable containers (dict, set, frozenset).

Pair-iterables expose a size and native iteration. They are split by the
insertion they support:

    - Keyed (``Mapping``): iterated as ``(key, value)`` items, written to with
      ``collection[key] = value``
    - Valueless (``Set`` and other sized iterables): every value is its own key,
      written to with ``collection.add(value)``

Traversal follows the container's native iteration order. That is insertion
order for ``dict`` but implementation-defined for ``set``, so sorting a set
only orders it as far as the set type itself preserves insertion order.
"""

from collections.abc import Iterable, Mapping, MutableMapping, MutableSet, Set, Sized
from logging import getLogger
from typing import Any

from polyducer.adapters.base import (
    Inserter,
    Shape,
    SupportsKeyedInsertion,
    SupportsUniqueInsertion,
)
from polyducer.sorting import Comparator, sort_pairs_by_value, sort_values
from polyducer.utils.collections import empty_instance, is_text

logger = getLogger(__name__)


def set_item(collection: Any, value: Any, key: Any) -> Any:
    collection[key] = value
    return collection


def add(collection: Any, value: Any, key: Any = None) -> Any:
    collection.add(value)
    return collection


class KeyedPairsAdapter:
    """Adapter for key-value containers such as ``dict`` and ``OrderedDict``."""

    shape = Shape.KEYED_PAIRS

    def matches(self, collection: Any) -> bool:
        return isinstance(collection, Mapping)

    def size(self, collection: Mapping[Any, Any]) -> int:
        return len(collection)

    def pairs(self, collection: Mapping[Any, Any], values_only: bool = False) -> list[Any]:
        return list(collection.values()) if values_only else list(collection.items())

    def empty_like(self, collection: Mapping[Any, Any]) -> Any:
        if isinstance(collection, MutableMapping):
            return empty_instance(collection, dict)
        return {}

    def inserter(self, destination: Any) -> Inserter:
        if not isinstance(destination, SupportsKeyedInsertion):
            raise TypeError(f"Cannot set keys on {type(destination).__name__}")
        return set_item

    def sort(self, collection: Mapping[Any, Any], comparator: Comparator) -> Any:
        ordered = sort_pairs_by_value(self.pairs(collection), comparator)
        rebuilt = self.empty_like(collection)
        for key, value in ordered:
            rebuilt[key] = value
        return rebuilt


class ValuelessPairsAdapter:
    """Adapter for unique-value containers such as ``set``.

    Any sized iterable that is neither a sequence nor a mapping is treated as
    valueless, which is why this adapter must be registered after
    :class:`KeyedPairsAdapter` and the sequence adapter.
    """

    shape = Shape.VALUELESS_PAIRS

    def matches(self, collection: Any) -> bool:
        return (
            collection is not None
            and isinstance(collection, Sized)
            and isinstance(collection, Iterable)
            and not is_text(collection)
        )

    def size(self, collection: Sized) -> int:
        return len(collection)

    def pairs(self, collection: Iterable[Any], values_only: bool = False) -> list[Any]:
        return list(collection) if values_only else [(value, value) for value in collection]

    def empty_like(self, collection: Any) -> Any:
        if isinstance(collection, MutableSet):
            return empty_instance(collection, set)
        if not isinstance(collection, Set):
            logger.warning(
                "No empty instance known for %s; collecting into a set instead",
                type(collection).__name__,
            )
        return set()

    def inserter(self, destination: Any) -> Inserter:
        if not isinstance(destination, SupportsUniqueInsertion):
            raise TypeError(f"Cannot add values to {type(destination).__name__}")
        return add

    def sort(self, collection: Any, comparator: Comparator) -> Any:
        ordered = sort_values(self.pairs(collection, values_only=True), comparator)
        rebuilt = self.empty_like(collection)
        for value in ordered:
            rebuilt.add(value)
        return rebuilt
