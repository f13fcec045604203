from collections import OrderedDict, defaultdict, deque
from types import MappingProxyType, SimpleNamespace

import pytest

from polyducer.adapters import (
    Shape,
    classify_shape,
    default_inserter,
    empty_like,
    get_pairs,
    get_size,
)
from polyducer.exceptions import TransducerError, UnsupportedShapeError
from tests.conftest import Column, Records, Tags


class Point:
    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y


class Bag:
    """A sized iterable that is neither a sequence, a mapping nor a set."""

    def __init__(self, *values: int) -> None:
        self._values = list(values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self):
        return iter(self._values)


@pytest.mark.parametrize(
    ("collection", "expected"),
    [
        ([1, 2], Shape.ORDERED_SEQUENCE),
        ((1, 2), Shape.ORDERED_SEQUENCE),
        (range(3), Shape.ORDERED_SEQUENCE),
        (deque([1]), Shape.ORDERED_SEQUENCE),
        ({"a": 1}, Shape.KEYED_PAIRS),
        (OrderedDict(a=1), Shape.KEYED_PAIRS),
        (MappingProxyType({"a": 1}), Shape.KEYED_PAIRS),
        ({1, 2}, Shape.VALUELESS_PAIRS),
        (frozenset({1}), Shape.VALUELESS_PAIRS),
        ({"a": 1}.keys(), Shape.VALUELESS_PAIRS),
        (Bag(1, 2), Shape.VALUELESS_PAIRS),
        (SimpleNamespace(a=1), Shape.KEYED_MAPPING),
        (Point(1, 2), Shape.KEYED_MAPPING),
    ],
)
def test_classify_shape(collection, expected):
    assert classify_shape(collection) is expected


@pytest.mark.parametrize("value", [None, 42, 1.5, "text", b"bytes", bytearray(b"x"), len, Point])
def test_classify_shape_rejects_unsupported_values(value):
    with pytest.raises(UnsupportedShapeError) as exc_info:
        classify_shape(value)
    assert exc_info.value.collection is value


def test_unsupported_shape_error_is_a_type_error():
    assert issubclass(UnsupportedShapeError, TypeError)
    assert issubclass(UnsupportedShapeError, TransducerError)


def test_only_keyed_and_valueless_pairs_are_pair_iterable():
    assert Shape.KEYED_PAIRS.is_pair_iterable
    assert Shape.VALUELESS_PAIRS.is_pair_iterable
    assert not Shape.ORDERED_SEQUENCE.is_pair_iterable
    assert not Shape.KEYED_MAPPING.is_pair_iterable


@pytest.mark.parametrize(
    ("collection", "expected_pairs", "expected_values"),
    [
        (["a", "b"], [(0, "a"), (1, "b")], ["a", "b"]),
        ({"x": 1, "y": 2}, [("x", 1), ("y", 2)], [1, 2]),
        ({7}, [(7, 7)], [7]),
        (SimpleNamespace(x=1, y=2), [("x", 1), ("y", 2)], [1, 2]),
    ],
)
def test_get_pairs(collection, expected_pairs, expected_values):
    assert get_pairs(collection) == expected_pairs
    assert get_pairs(collection, values_only=True) == expected_values


@pytest.mark.parametrize(
    ("collection", "expected"),
    [
        ([], 0),
        ([1, 2, 3], 3),
        ({"a": 1, "b": 2}, 2),
        ({1, 2, 3, 3}, 3),
        (SimpleNamespace(), 0),
        (Point(1, 2), 2),
    ],
)
def test_get_size(collection, expected):
    assert get_size(collection) == expected


@pytest.mark.parametrize(
    ("collection", "expected"),
    [
        ([1, 2], []),
        ((1, 2), []),
        (range(5), []),
        (deque([1]), deque()),
        ({"a": 1}, {}),
        (MappingProxyType({"a": 1}), {}),
        ({1}, set()),
        (frozenset({1}), set()),
    ],
)
def test_empty_like(collection, expected):
    empty = empty_like(collection)
    assert empty == expected
    assert type(empty) is type(expected)
    assert empty is not collection


def test_empty_like_keeps_defaultdict_factory():
    empty = empty_like(defaultdict(list, a=[1]))
    assert isinstance(empty, defaultdict)
    assert empty.default_factory is list
    assert len(empty) == 0


@pytest.mark.parametrize(
    ("collection", "contents"),
    [
        (Column([1, 2, 3]), [1, 2, 3]),
        (Records({"a": 1, "b": 2}), [1, 2]),
        (Tags({1, 2}), [1, 2]),
    ],
)
def test_empty_like_leaves_custom_containers_untouched(collection, contents):
    empty = empty_like(collection)
    assert type(empty) is type(collection)
    assert len(empty) == 0
    assert sorted(get_pairs(collection, values_only=True)) == contents


def test_empty_like_keeps_deque_maxlen():
    empty = empty_like(deque([1, 2], maxlen=5))
    assert empty == deque()
    assert empty.maxlen == 5


def test_empty_like_namespace_skips_init():
    empty = empty_like(Point(1, 2))
    assert type(empty) is Point
    assert vars(empty) == {}


def test_empty_like_unknown_sized_iterable_warns_and_falls_back_to_set(caplog):
    with caplog.at_level("WARNING", logger="polyducer.adapters.pairs"):
        empty = empty_like(Bag(1, 2))
    assert empty == set()
    assert "Bag" in caplog.text


@pytest.mark.parametrize(
    ("destination", "value", "key", "expected"),
    [
        ([], "v", 3, ["v"]),
        ({}, "v", "k", {"k": "v"}),
        (set(), "v", "k", {"v"}),
        (SimpleNamespace(), "v", 0, SimpleNamespace(**{"0": "v"})),
    ],
)
def test_default_inserter_writes_by_destination_shape(destination, value, key, expected):
    inserter = default_inserter(destination)
    result = inserter(destination, value, key)
    assert result is destination
    assert result == expected


@pytest.mark.parametrize("destination", [(), range(0), frozenset(), MappingProxyType({})])
def test_default_inserter_rejects_immutable_destinations(destination):
    with pytest.raises(TypeError):
        default_inserter(destination)
