from collections import OrderedDict
from collections.abc import MutableMapping, MutableSequence, MutableSet
from types import SimpleNamespace
from typing import Any

import pytest


class Records(MutableMapping):
    """A mapping whose entries live in a plain attribute, so copies share storage."""

    def __init__(self, data: dict[Any, Any] | None = None) -> None:
        self._data = {} if data is None else data

    def __getitem__(self, key: Any) -> Any:
        return self._data[key]

    def __setitem__(self, key: Any, value: Any) -> None:
        self._data[key] = value

    def __delitem__(self, key: Any) -> None:
        del self._data[key]

    def __iter__(self):
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)


class Column(MutableSequence):
    """A sequence whose items live in a plain attribute, so copies share storage."""

    def __init__(self, items: list[Any] | None = None) -> None:
        self._items = [] if items is None else items

    def __getitem__(self, index):
        return self._items[index]

    def __setitem__(self, index, value) -> None:
        self._items[index] = value

    def __delitem__(self, index) -> None:
        del self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def insert(self, index: int, value: Any) -> None:
        self._items.insert(index, value)


class Tags(MutableSet):
    """A set whose members live in a plain attribute, so copies share storage."""

    def __init__(self, members: set[Any] | None = None) -> None:
        self._members = set() if members is None else members

    def __contains__(self, value: object) -> bool:
        return value in self._members

    def __iter__(self):
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def add(self, value: Any) -> None:
        self._members.add(value)

    def discard(self, value: Any) -> None:
        self._members.discard(value)


def as_namespace(values: list[Any]) -> SimpleNamespace:
    """Spread values over attributes ``n0``, ``n1``, ... in order."""
    return SimpleNamespace(**{f"n{index}": value for index, value in enumerate(values)})


def as_dict(values: list[Any]) -> dict[str, Any]:
    return {f"n{index}": value for index, value in enumerate(values)}


@pytest.fixture
def numbers() -> list[int]:
    return list(range(100))


@pytest.fixture
def shaped_numbers(numbers: list[int]) -> dict[str, Any]:
    """The same values held by one collection of every shape."""
    return {
        "list": list(numbers),
        "tuple": tuple(numbers),
        "dict": as_dict(numbers),
        "ordered_dict": OrderedDict(as_dict(numbers)),
        "set": set(numbers),
        "frozenset": frozenset(numbers),
        "namespace": as_namespace(numbers),
    }
