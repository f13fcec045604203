from polyducer._version import __version__
from polyducer.adapters import (
    AdapterRegistry,
    ContainerAdapter,
    Shape,
    classify_shape,
    default_inserter,
    default_registry,
    empty_like,
    get_pairs,
    get_size,
)
from polyducer.exceptions import EmptySourceError, TransducerError, UnsupportedShapeError
from polyducer.options import TransduceOptions
from polyducer.reducers import reduce_mapping, reduce_pairs, reduce_sequence
from polyducer.sorting import default_compare
from polyducer.steps import Step, combine, filter, find, map, sort, take
from polyducer.transduce import Transducer, transduce

__all__ = [
    "AdapterRegistry",
    "ContainerAdapter",
    "EmptySourceError",
    "Shape",
    "Step",
    "TransduceOptions",
    "Transducer",
    "TransducerError",
    "UnsupportedShapeError",
    "classify_shape",
    "combine",
    "default_compare",
    "default_inserter",
    "default_registry",
    "empty_like",
    "filter",
    "find",
    "get_pairs",
    "get_size",
    "map",
    "reduce_mapping",
    "reduce_pairs",
    "reduce_sequence",
    "sort",
    "take",
    "transduce",
    "__version__",
]
