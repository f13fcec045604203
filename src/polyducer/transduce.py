"""The transducer driver.

Running a transducer over a source collection:

    1. Resolve the source's adapter, which fixes the reduction strategy
    2. Resolve the seed: the caller's seed, or an empty container shaped like the source
    3. Resolve the inserter: the caller's handler, or the default for the seed's shape
    4. Build the steps around the inserter and fold the source once

The seed's shape, not the source's, decides how values are written, so any
source can be converted into any shape by passing an empty seed of that shape:

    >>> from types import SimpleNamespace
    >>> transduce([], SimpleNamespace(one=1, two=2), [])
    [1, 2]
"""

from logging import getLogger
from typing import Any, Callable, Iterable

from polyducer.adapters import AdapterRegistry, Shape, default_registry
from polyducer.options import TransduceOptions
from polyducer.reducers import reduce_mapping, reduce_pairs, reduce_sequence
from polyducer.steps import Step, TraversalState, compose, normalize_steps, terminal
from polyducer.utils.callables import trim_arguments
from polyducer.utils.sentinels import UNSET

logger = getLogger(__name__)

_REDUCERS: dict[Shape, Callable[..., Any]] = {
    Shape.ORDERED_SEQUENCE: reduce_sequence,
    Shape.KEYED_PAIRS: reduce_pairs,
    Shape.VALUELESS_PAIRS: reduce_pairs,
    Shape.KEYED_MAPPING: reduce_mapping,
}


class Transducer:
    """A reusable pipeline of steps that can be run over any collection.

    Instances hold no per-run state and may be called any number of times.

    Attributes:
        steps: The steps applied to each element, in execution order.
    """

    def __init__(
        self,
        steps: Step | Iterable[Step],
        *,
        registry: AdapterRegistry = default_registry,
    ) -> None:
        self.steps = normalize_steps(steps)
        self._registry = registry
        logger.debug("Built transducer with %d steps", len(self.steps))

    def _resolve_options(
        self,
        seed_or_options: Any,
        seed: Any,
        handler: Callable[..., Any] | None,
        reverse: bool | None,
    ) -> TransduceOptions:
        if isinstance(seed_or_options, TransduceOptions):
            options = seed_or_options
        else:
            options = TransduceOptions(seed=seed_or_options)

        overrides: dict[str, Any] = {}
        if seed is not UNSET:
            overrides["seed"] = seed
        if handler is not None:
            overrides["handler"] = handler
        if reverse is not None:
            overrides["reverse"] = reverse
        # Re-validate overrides rather than using model_copy(update=...), which skips validation
        return TransduceOptions(**{**dict(options), **overrides}) if overrides else options

    def __call__(
        self,
        source: Any,
        seed_or_options: Any = UNSET,
        *,
        seed: Any = UNSET,
        handler: Callable[..., Any] | None = None,
        reverse: bool | None = None,
    ) -> Any:
        """Run the steps over ``source``.

        Args:
            source: The collection to transform.
            seed_or_options: Either the seed or a :class:`TransduceOptions`.
            seed: Initial accumulator; overrides the options' seed.
            handler: Terminal inserter ``(acc, value, key) -> acc``; overrides the options.
            reverse: Traverse the source backwards; overrides the options.

        Returns:
            The accumulator after every element has been folded in.

        Raises:
            UnsupportedShapeError: If the source or seed has no recognised shape.
            TypeError: If the seed cannot be written to with its default inserter.
        """
        options = self._resolve_options(seed_or_options, seed, handler, reverse)

        adapter = self._registry.resolve(source)
        initial = options.seed if options.has_seed else adapter.empty_like(source)
        inserter = (
            trim_arguments(options.handler)
            if options.handler is not None
            else self._registry.resolve(initial).inserter(initial)
        )

        pipeline = compose(self.steps, terminal(inserter), TraversalState(self._registry))

        logger.debug(
            "Transducing %s (%s) into %s, reverse=%s",
            type(source).__name__,
            adapter.shape.value,
            type(initial).__name__,
            options.reverse,
        )

        def combine(acc: Any, value: Any, key: Any) -> Any:
            return pipeline(acc, value, key, source)

        reducer = _REDUCERS[adapter.shape]
        return reducer(source, combine, initial, reverse=options.reverse, registry=self._registry)


def transduce(
    steps: Step | Iterable[Step],
    source: Any = UNSET,
    seed_or_options: Any = UNSET,
    *,
    seed: Any = UNSET,
    handler: Callable[..., Any] | None = None,
    reverse: bool | None = None,
    registry: AdapterRegistry = default_registry,
) -> Any:
    """Run steps over a source collection in a single pass.

    Args:
        steps: A step or a sequence of steps, applied in order to each element.
        source: The collection to transform. When omitted a reusable
            :class:`Transducer` is returned instead of a result.
        seed_or_options: Either the seed or a :class:`TransduceOptions`.
        seed: Initial accumulator; overrides the options' seed.
        handler: Terminal inserter ``(acc, value, key) -> acc``.
        reverse: Traverse the source backwards.
        registry: Registry used to resolve container adapters.

    Returns:
        The transformed collection, or a :class:`Transducer` when no source is given.

    Example:
        >>> from polyducer import map, take
        >>> transduce([map(str.upper), take(2)], ["a", "b", "c"])
        ['A', 'B']
        >>> last_two = transduce(take(2))
        >>> last_two([1, 2, 3, 4, 5], reverse=True)
        [5, 4]
    """
    transducer = Transducer(steps, registry=registry)
    if source is UNSET:
        return transducer
    return transducer(source, seed_or_options, seed=seed, handler=handler, reverse=reverse)
