"""Call user-supplied step logic with as many arguments as it accepts.

Step logic is always offered ``(value, key, collection)``, but most callables
only care about the value. Rather than forcing every lambda to accept three
arguments, the argument list is trimmed to the callable's positional arity.
"""

import inspect
from typing import Any, Callable


def positional_arity(fn: Callable[..., Any], limit: int) -> int:
    """Count the positional arguments ``fn`` accepts, capped at ``limit``.

    Callables taking ``*args`` accept ``limit`` arguments. Callables whose
    signature cannot be inspected (many builtins) are assumed to take one.

    Example:
        >>> positional_arity(lambda value, key: None, 3)
        2
        >>> positional_arity(lambda *args: None, 3)
        3
    """
    try:
        parameters = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        return 1

    count = 0
    for parameter in parameters:
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return limit
        if parameter.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            count += 1
    return min(count, limit)


def trim_arguments(fn: Callable[..., Any], limit: int = 3) -> Callable[..., Any]:
    """Wrap ``fn`` so that it can always be called with ``limit`` positional arguments.

    Raises:
        TypeError: If ``fn`` is not callable.
    """
    if not callable(fn):
        raise TypeError(f"Expected a callable, got {type(fn).__name__} (value: {fn!r})")

    arity = positional_arity(fn, limit)
    if arity == limit:
        return fn
    return lambda *args: fn(*args[:arity])
