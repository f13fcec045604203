"""Collection utility functions."""

from collections import defaultdict, deque
from typing import Any, Callable

from typing_extensions import TypeIs

#: Types that are sequences to Python but are never treated as collections of values
TEXT_TYPES = (str, bytes, bytearray)


def is_text(value: Any) -> TypeIs[str | bytes | bytearray]:
    return isinstance(value, TEXT_TYPES)


def empty_instance(collection: Any, fallback: Callable[[], Any]) -> Any:
    """Create an empty container of the same concrete type as ``collection``.

    The container is built from its type, never by copying ``collection``, so
    the collection itself is left untouched. Constructor state that the type
    cannot recover on its own (a ``defaultdict`` factory, a ``deque`` maxlen)
    is passed through.

    Args:
        collection: The container to mirror.
        fallback: Builds the container returned when the type cannot be
            constructed without arguments.

    Returns:
        A new, empty container.

    Example:
        >>> empty = empty_instance(defaultdict(list, a=[1]), dict)
        >>> empty, empty.default_factory
        (defaultdict(<class 'list'>, {}), <class 'list'>)
    """
    cls = type(collection)
    if isinstance(collection, defaultdict):
        return cls(collection.default_factory)
    if isinstance(collection, deque):
        return cls(maxlen=collection.maxlen)
    try:
        return cls()
    except TypeError:
        return fallback()
