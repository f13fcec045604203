"""Sort post-processors shared by the container adapters.

Sorting cannot be expressed as a per-element step: the whole accumulator is
re-ordered after each insertion. Ordered sequences are sorted in place, while
unordered and keyed containers are rebuilt from sorted pairs by their adapter,
since in-place reordering has no meaning for them.

All functions take a three-way comparator ``(a, b) -> number`` (negative when
``a`` sorts first, zero when equal, positive otherwise) and convert it with
:func:`functools.cmp_to_key`.
"""

from functools import cmp_to_key
from typing import Any, Callable, Iterable, MutableSequence, TypeVar

#: A three-way comparison function
Comparator = Callable[[Any, Any], float]

_S = TypeVar("_S", bound=MutableSequence[Any])


def default_compare(a: Any, b: Any) -> int:
    """Compare two values lexically by their string representations.

    Example:
        >>> sorted([10, 2, 1], key=cmp_to_key(default_compare))
        [1, 10, 2]
    """
    left, right = str(a), str(b)
    return (left > right) - (left < right)


def sort_sequence(collection: _S, comparator: Comparator) -> _S:
    """Sort an ordered sequence in place and return it.

    Sequences without a ``sort`` method (e.g. ``collections.deque``) are
    cleared and refilled in sorted order.
    """
    key = cmp_to_key(comparator)
    if hasattr(collection, "sort"):
        collection.sort(key=key)  # type: ignore[attr-defined]
    else:
        ordered = sorted(collection, key=key)
        collection.clear()
        collection.extend(ordered)
    return collection


def sort_pairs_by_value(
    pairs: Iterable[tuple[Any, Any]], comparator: Comparator
) -> list[tuple[Any, Any]]:
    """Sort ``(key, value)`` pairs by value, keeping each key with its value."""
    key = cmp_to_key(comparator)
    return sorted(pairs, key=lambda pair: key(pair[1]))


def sort_values(values: Iterable[Any], comparator: Comparator) -> list[Any]:
    return sorted(values, key=cmp_to_key(comparator))
