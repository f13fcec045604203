"""Adapter for ordered sequences (list, tuple, range, deque).

Ordered sequences are traversed by index and written to by appending.
Strings and bytes are sequences to Python but are not treated as collections.

Immutable sequences such as tuple and range can be read from, but their empty
instance is a list since nothing can be appended to them.
"""

from collections.abc import MutableSequence, Sequence
from typing import Any

from polyducer.adapters.base import Inserter, Shape, SupportsAppend
from polyducer.sorting import Comparator, sort_sequence
from polyducer.utils.collections import empty_instance, is_text


def append(collection: Any, value: Any, key: Any = None) -> Any:
    collection.append(value)
    return collection


class SequenceAdapter:
    """Adapter for integer-indexed, length-queryable sequences."""

    shape = Shape.ORDERED_SEQUENCE

    def matches(self, collection: Any) -> bool:
        return isinstance(collection, Sequence) and not is_text(collection)

    def size(self, collection: Sequence[Any]) -> int:
        return len(collection)

    def pairs(self, collection: Sequence[Any], values_only: bool = False) -> list[Any]:
        return list(collection) if values_only else list(enumerate(collection))

    def empty_like(self, collection: Sequence[Any]) -> Any:
        if isinstance(collection, MutableSequence):
            return empty_instance(collection, list)
        return []

    def inserter(self, destination: Any) -> Inserter:
        if not isinstance(destination, SupportsAppend):
            raise TypeError(f"Cannot append values to {type(destination).__name__}")
        return append

    def sort(self, collection: Any, comparator: Comparator) -> Any:
        return sort_sequence(collection, comparator)
