"""Per-call options for running a transducer."""

from typing import Any, Callable

from pydantic import BaseModel, ConfigDict

from polyducer.utils.sentinels import UNSET


class TransduceOptions(BaseModel):
    """Options controlling a single transducer run.

    Example:
        transduce(steps, words, TransduceOptions(seed=set(), reverse=True))
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, extra="forbid")

    seed: Any = UNSET
    """Initial accumulator. Defaults to an empty container shaped like the source.

    Passing an empty container of another shape converts the source into that shape.
    """

    handler: Callable[..., Any] | None = None
    """Terminal inserter ``(acc, value, key) -> acc`` replacing the default for the seed's shape."""

    reverse: bool = False
    """Traverse the source from its last element to its first."""

    @property
    def has_seed(self) -> bool:
        return self.seed is not UNSET
