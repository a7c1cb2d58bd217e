"""Ranges of integers."""

from dataclasses import dataclass
from typing import ClassVar

from rangealgebra.boundary import BoundaryPolicy
from rangealgebra.domain import INTEGERS, DiscreteDomain
from rangealgebra.interval import DiscreteRange


@dataclass(frozen=True)
class IntegerRange(DiscreteRange[int]):
    """Range of integers, e.g. ``IntegerRange.closed(1, 10)`` is ``[1, 10]``.

    An omitted upper bound becomes ``sys.maxsize``.
    """

    domain: ClassVar[DiscreteDomain[int]] = INTEGERS
    scope: ClassVar[str] = "integer_range"
    message: ClassVar[str] = (
        "the start value must be less than or equal to the end value"
    )
    default_boundary: ClassVar[BoundaryPolicy] = BoundaryPolicy.HALF_OPEN_RIGHT
