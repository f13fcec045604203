"""Adapter for keyed mappings: objects whose attributes hold the values.

An attribute namespace (``types.SimpleNamespace`` or any plain object with an
instance ``__dict__``) is a string-keyed container. Its keys are enumerated
from ``vars()`` in insertion order and values are written with ``setattr``,
converting keys to strings. Classes, modules and callables also carry a
``__dict__`` but are never treated as namespaces.
"""

from types import ModuleType
from typing import Any

from polyducer.adapters.base import Inserter, Shape
from polyducer.sorting import Comparator, sort_pairs_by_value


def assign(collection: Any, value: Any, key: Any) -> Any:
    setattr(collection, str(key), value)
    return collection


class KeyedMappingAdapter:
    """Adapter for attribute namespaces."""

    shape = Shape.KEYED_MAPPING

    def matches(self, collection: Any) -> bool:
        return (
            hasattr(collection, "__dict__")
            and not isinstance(collection, (type, ModuleType))
            and not callable(collection)
        )

    def size(self, collection: Any) -> int:
        return len(vars(collection))

    def pairs(self, collection: Any, values_only: bool = False) -> list[Any]:
        attributes = vars(collection)
        return list(attributes.values()) if values_only else list(attributes.items())

    def empty_like(self, collection: Any) -> Any:
        # Bypass __init__ so required constructor arguments don't get in the way
        cls = type(collection)
        return cls.__new__(cls)

    def inserter(self, destination: Any) -> Inserter:
        return assign

    def sort(self, collection: Any, comparator: Comparator) -> Any:
        ordered = sort_pairs_by_value(self.pairs(collection), comparator)
        rebuilt = self.empty_like(collection)
        for key, value in ordered:
            setattr(rebuilt, key, value)
        return rebuilt
