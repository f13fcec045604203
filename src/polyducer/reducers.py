"""Reduction strategies: one fold per container shape.

Every strategy has the signature
``(source, combine, seed=UNSET, *, reverse=False, registry=default_registry) -> acc``
where ``combine`` is ``(acc, value, key) -> acc``. Without a seed, the first element (the last one
when reversed) becomes the seed and folding starts from the next element.

Folding an empty source without a seed raises :class:`EmptySourceError`
rather than inventing a seed value.
"""

from collections.abc import Sequence
from typing import Any, Callable, Iterable

from polyducer.adapters import AdapterRegistry, default_registry
from polyducer.exceptions import EmptySourceError
from polyducer.utils.sentinels import UNSET

#: Folding function: ``(acc, value, key) -> acc``
Combine = Callable[[Any, Any, Any], Any]


def _fold(pairs: Iterable[tuple[Any, Any]], combine: Combine, seed: Any, source: Any) -> Any:
    iterator = iter(pairs)
    if seed is UNSET:
        try:
            _, acc = next(iterator)
        except StopIteration:
            raise EmptySourceError(source) from None
    else:
        acc = seed
    for key, value in iterator:
        acc = combine(acc, value, key)
    return acc


def _reduce_materialised(
    source: Any, combine: Combine, seed: Any, reverse: bool, registry: AdapterRegistry
) -> Any:
    pairs = registry.resolve(source).pairs(source)
    return _fold(reversed(pairs) if reverse else pairs, combine, seed, source)


def reduce_sequence(
    source: Sequence[Any],
    combine: Combine,
    seed: Any = UNSET,
    *,
    reverse: bool = False,
    registry: AdapterRegistry = default_registry,
) -> Any:
    """Fold an ordered sequence by index.

    Python sequences are walked by index without copying. Custom ordered
    containers served by a registered adapter are folded over their pairs.

    Args:
        source: The sequence to fold.
        combine: Called as ``combine(acc, value, index)`` per element.
        seed: Initial accumulator; defaults to the first (or last) element.
        reverse: Traverse from the last index down to 0.
        registry: Registry resolving adapters for custom ordered containers.

    Returns:
        The final accumulator.

    Raises:
        EmptySourceError: If ``source`` is empty and no seed was given.

    Example:
        >>> reduce_sequence([1, 2, 3], lambda acc, value, index: acc + value)
        6
    """
    if not isinstance(source, Sequence):
        return _reduce_materialised(source, combine, seed, reverse, registry)
    pairs = (
        zip(range(len(source) - 1, -1, -1), reversed(source)) if reverse else enumerate(source)
    )
    return _fold(pairs, combine, seed, source)


def reduce_pairs(
    source: Any,
    combine: Combine,
    seed: Any = UNSET,
    *,
    reverse: bool = False,
    registry: AdapterRegistry = default_registry,
) -> Any:
    """Fold a pair-iterable over its materialised ``(key, value)`` pairs.

    Pairs are taken from the container's native iteration before folding, so
    combine functions may safely write into a container of the same type.
    Sets pass each value as its own key.
    """
    return _reduce_materialised(source, combine, seed, reverse, registry)


def reduce_mapping(
    source: Any,
    combine: Combine,
    seed: Any = UNSET,
    *,
    reverse: bool = False,
    registry: AdapterRegistry = default_registry,
) -> Any:
    """Fold a keyed mapping over its attributes in enumeration order.

    Without a seed, the value of the first attribute (the last one when
    reversed) seeds the fold.
    """
    return _reduce_materialised(source, combine, seed, reverse, registry)
