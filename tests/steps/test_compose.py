import pytest

from polyducer.adapters import default_registry
from polyducer.steps import TraversalState, combine, compose, filter, map, take, terminal
from polyducer.transduce import transduce


def append(acc, value, key):
    acc.append(value)
    return acc


@pytest.fixture
def state() -> TraversalState:
    return TraversalState(default_registry)


def test_composing_no_steps_returns_the_last_stage(state):
    last = terminal(append)
    assert compose([], last, state) is last


def test_steps_execute_in_declaration_order(state):
    trace: list[str] = []

    def tracing(name):
        def fn(value):
            trace.append(name)
            return value

        return map(fn)

    steps = [tracing("first"), tracing("second"), tracing("third")]
    pipeline = compose(steps, terminal(append), state)
    assert pipeline([], "value", 0, None) == ["value"]
    assert trace == ["first", "second", "third"]


def test_map_then_filter_differs_from_filter_then_map():
    square = map(lambda x: x * x)
    small = filter(lambda x: x < 5)
    assert transduce([square, small], [1, 2, 3]) == [1, 4]
    assert transduce([small, square], [1, 2, 3]) == [1, 4, 9]


@pytest.mark.parametrize(
    ("s1", "s2", "s3"),
    [
        (map(lambda x: x + 1), filter(lambda x: x % 2 == 0), take(3)),
        (filter(lambda x: x > 2), map(lambda x: x * 10), map(str)),
        (take(5), map(lambda x: -x), filter(lambda x: x < -1)),
    ],
)
def test_combine_is_associative(s1, s2, s3):
    source = list(range(10))
    expected = transduce([s1, s2, s3], source)
    assert transduce([combine([s1, s2]), s3], source) == expected
    assert transduce([s1, combine([s2, s3])], source) == expected
    assert transduce([combine([s1, s2, s3])], source) == expected


def test_combined_steps_nest():
    inner = combine([map(lambda x: x + 1), filter(lambda x: x % 2 == 0)])
    outer = combine([inner, map(lambda x: x * 100)])
    assert transduce(outer, [1, 2, 3, 4]) == [200, 400]
