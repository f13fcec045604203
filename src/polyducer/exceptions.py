"""Exceptions for the transducer engine.

This module defines exceptions raised while classifying collections and
folding over them. Using specific exception types allows callers to handle
transducer failures differently from errors raised by their own step logic.
"""

from typing import Any


class TransducerError(Exception):
    """Base exception for transducer failures.

    Attributes:
        collection: The collection being transformed when the failure occurred.
        message: Human-readable description of the failure.
    """

    def __init__(self, message: str, *, collection: Any = None) -> None:
        self.collection = collection
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class EmptySourceError(TransducerError):
    """Raised when folding an empty collection without an explicit seed.

    Without a seed the first element of the source becomes the seed, so an
    empty source has nothing to start from.
    """

    def __init__(self, collection: Any, message: str | None = None) -> None:
        if message is None:
            message = (
                f"Cannot reduce an empty {type(collection).__name__} without a seed; "
                "pass an explicit seed when the source may be empty"
            )
        super().__init__(message, collection=collection)


class UnsupportedShapeError(TransducerError, TypeError):
    """Raised when a value matches none of the registered container shapes."""

    def __init__(self, collection: Any, message: str | None = None) -> None:
        if message is None:
            message = (
                f"Unsupported collection: {type(collection).__name__} (value: {collection!r}) "
                "is not a sequence, set, mapping or attribute namespace"
            )
        super().__init__(message, collection=collection)
