"""
Flexibly-numbered lists of numbers.

`range` mirrors the three call shapes people expect:

    range(end)              -> start=0, step=1
    range(start, end)       -> step=1
    range(start, end, step)

Ranges are end-exclusive. A range that would have to run backwards to
reach `end` is empty rather than an error; use a negative step to count
down.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from underline.core import identity, reduce
from underline.combinators.sequences import times
from underline.errors import ArityError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RangeSpec:
    """
    Fully describes a generated range.

    Examples:
        range(5)         -> RangeSpec(end=5)
        range(2, 5)      -> RangeSpec(end=5, start=2)
        range(5, 2, -1)  -> RangeSpec(end=2, start=5, step=-1)
    """
    end: int | float
    start: int | float = 0
    step: int | float = 1

    def __post_init__(self):
        if self.step == 0:
            raise ValueError("range step must not be zero")

    @classmethod
    def from_args(cls, *args) -> "RangeSpec":
        """Bind positional `[start], end, [step]` arguments."""
        if len(args) == 1:
            (end,) = args
            start, step = None, None
        elif len(args) == 2:
            start, end = args
            step = None
        elif len(args) == 3:
            start, end, step = args
        else:
            raise ArityError("range", len(args), 1, 3)
        return cls(
            end=end,
            start=0 if start is None else start,
            step=1 if step is None else step,
        )

    @property
    def length(self) -> int:
        """Number of values produced; 0 when `end` lies behind `start`."""
        return max(0, math.ceil((self.end - self.start) / self.step))

    def __len__(self) -> int:
        return self.length


def range_of(spec: RangeSpec) -> list:
    """Materialize a RangeSpec into a list."""
    n = spec.length
    logger.debug(f"range start={spec.start} end={spec.end} step={spec.step} -> {n} values")

    def step(seq, i):
        seq.append(spec.start + i * spec.step)
        return seq

    return reduce(times(n, identity), step, [])


def range(*args) -> list:
    """
    Build a list of numbers from `[start], end, [step]`.

    A single RangeSpec argument is used as is.

    Raises:
        ArityError: With zero or more than three arguments
        ValueError: If step is zero
    """
    if len(args) == 1 and isinstance(args[0], RangeSpec):
        return range_of(args[0])
    return range_of(RangeSpec.from_args(*args))
