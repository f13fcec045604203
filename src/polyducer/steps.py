"""Step combinators and pipeline composition.

A step is a typed descriptor (:class:`Map`, :class:`Filter`, :class:`Take`,
:class:`Find`, :class:`Sort` or :class:`Combined`) carrying the user's logic.
Steps hold no traversal state. When a transducer runs, each step is built
into a *reducing* function ``(acc, value, key, source) -> acc`` wrapping the
reducing function of the step after it, with the terminal inserter innermost.

Key concepts:
    - Reducing function: Folds one element into the accumulator
    - TraversalState: Mutable state owned by a single traversal, such as which
      ``find`` steps have already matched
    - compose: Builds a list of steps into one reducing function

Steps are built right-to-left so that they execute left-to-right: for
``[s1, s2, s3]`` each element passes through ``s1`` first and ``s3`` last.

Example:
    >>> from polyducer import transduce
    >>> transduce([map(lambda x: x * x), filter(lambda x: x > 10), take(2)], range(10))
    [16, 25]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import reduce
from typing import Any, Callable, Iterable, Protocol, runtime_checkable

from polyducer.adapters import AdapterRegistry, ContainerAdapter, Inserter
from polyducer.sorting import Comparator, default_compare
from polyducer.utils.callables import trim_arguments

#: Folds one element into the accumulator: ``(acc, value, key, source) -> acc``
Reducing = Callable[[Any, Any, Any, Any], Any]


@dataclass
class TraversalState:
    """State owned by exactly one traversal of a pipeline.

    A fresh instance is created every time a transducer runs, so stateful
    steps never leak state between traversals, even when the same steps are
    reused or run concurrently.

    Attributes:
        registry: Registry used to resolve adapters for accumulators.
        found: Tokens of the ``find`` steps that have already matched.
    """

    registry: AdapterRegistry
    found: set[object] = field(default_factory=set)

    def adapter(self, collection: Any) -> ContainerAdapter:
        """Resolve the adapter for ``collection``.

        Resolution is repeated on every call since an adapter may match on the
        collection's value and not just its type.
        """
        return self.registry.resolve(collection)


@runtime_checkable
class Step(Protocol):
    def build(self, next_: Reducing, state: TraversalState) -> Reducing:
        """Wrap the next stage's reducing function.

        Args:
            next_: The reducing function of the following step, or the terminal inserter.
            state: State for the traversal being built.

        Returns:
            A reducing function applying this step before ``next_``.
        """
        ...


def _require_callable(fn: Any, step: str) -> None:
    if not callable(fn):
        raise TypeError(f"{step} expects a callable, got {type(fn).__name__} (value: {fn!r})")


@dataclass(frozen=True)
class Map(Step):
    """Replace each value with ``fn(value, key, source)``, keeping the key."""

    fn: Callable[..., Any]

    def __post_init__(self) -> None:
        _require_callable(self.fn, "map")

    def build(self, next_: Reducing, state: TraversalState) -> Reducing:
        fn = trim_arguments(self.fn)

        def reducing(acc: Any, value: Any, key: Any, source: Any) -> Any:
            return next_(acc, fn(value, key, source), key, source)

        return reducing


@dataclass(frozen=True)
class Filter(Step):
    """Keep only values for which ``predicate(value, key, source)`` is truthy."""

    predicate: Callable[..., Any]

    def __post_init__(self) -> None:
        _require_callable(self.predicate, "filter")

    def build(self, next_: Reducing, state: TraversalState) -> Reducing:
        predicate = trim_arguments(self.predicate)

        def reducing(acc: Any, value: Any, key: Any, source: Any) -> Any:
            return next_(acc, value, key, source) if predicate(value, key, source) else acc

        return reducing


@dataclass(frozen=True)
class Take(Step):
    """Forward values only while the accumulator holds fewer than ``limit`` elements.

    The size is read from the accumulator rather than counted, so values
    dropped by later steps do not count towards the limit.
    """

    limit: int

    def __post_init__(self) -> None:
        if self.limit < 0:
            raise ValueError(f"take expects a non-negative limit, got {self.limit}")

    def build(self, next_: Reducing, state: TraversalState) -> Reducing:
        limit = self.limit

        def reducing(acc: Any, value: Any, key: Any, source: Any) -> Any:
            if state.adapter(acc).size(acc) < limit:
                return next_(acc, value, key, source)
            return acc

        return reducing


@dataclass(frozen=True)
class Find(Step):
    """Forward only the first value for which ``predicate`` is truthy.

    Once a value has been found the predicate is no longer evaluated for the
    rest of the traversal.
    """

    predicate: Callable[..., Any]

    def __post_init__(self) -> None:
        _require_callable(self.predicate, "find")

    def build(self, next_: Reducing, state: TraversalState) -> Reducing:
        predicate = trim_arguments(self.predicate)
        token = object()

        def reducing(acc: Any, value: Any, key: Any, source: Any) -> Any:
            if token in state.found or not predicate(value, key, source):
                return acc
            state.found.add(token)
            return next_(acc, value, key, source)

        return reducing


@dataclass(frozen=True)
class Sort(Step):
    """Re-sort the whole accumulator by value after every element is forwarded.

    Ordered sequences are sorted in place. Other shapes are rebuilt, so the
    result is a new container rather than the seed that was passed in.
    """

    comparator: Comparator = default_compare

    def __post_init__(self) -> None:
        _require_callable(self.comparator, "sort")

    def build(self, next_: Reducing, state: TraversalState) -> Reducing:
        comparator = self.comparator

        def reducing(acc: Any, value: Any, key: Any, source: Any) -> Any:
            result = next_(acc, value, key, source)
            return state.adapter(result).sort(result, comparator)

        return reducing


@dataclass(frozen=True)
class Combined(Step):
    """Several steps fused into one, for reuse inside other pipelines."""

    steps: tuple[Step, ...]

    def build(self, next_: Reducing, state: TraversalState) -> Reducing:
        return compose(self.steps, next_, state)


def normalize_steps(steps: Step | Iterable[Step]) -> tuple[Step, ...]:
    """Accept a single step or an iterable of steps.

    Raises:
        TypeError: If any element is not a step.
    """
    normalized = (steps,) if isinstance(steps, Step) else tuple(steps)
    invalid = next((it for it in normalized if not isinstance(it, Step)), None)
    if invalid is not None:
        raise TypeError(f"Expected a step, got {type(invalid).__name__} (value: {invalid!r})")
    return normalized


def terminal(inserter: Inserter) -> Reducing:
    """Adapt an inserter ``(acc, value, key) -> acc`` to the reducing signature."""
    return lambda acc, value, key, source: inserter(acc, value, key)


def compose(steps: Iterable[Step], last: Reducing, state: TraversalState) -> Reducing:
    """Build steps into a single reducing function ending in ``last``.

    Composing no steps returns ``last`` unchanged.
    """
    return reduce(lambda next_, step: step.build(next_, state), reversed(tuple(steps)), last)


def map(fn: Callable[..., Any]) -> Map:
    return Map(fn)


def filter(predicate: Callable[..., Any]) -> Filter:
    return Filter(predicate)


def take(limit: int) -> Take:
    return Take(limit)


def find(predicate: Callable[..., Any]) -> Find:
    return Find(predicate)


def sort(comparator: Comparator = default_compare) -> Sort:
    return Sort(comparator)


def combine(steps: Step | Iterable[Step]) -> Combined:
    """Fuse steps into one step.

    Example:
        >>> from polyducer import transduce
        >>> squares = combine([map(lambda x: x * x), filter(lambda x: x % 2 == 0)])
        >>> transduce([squares, take(2)], [1, 2, 3, 4, 5])
        [4, 16]
    """
    return Combined(normalize_steps(steps))
