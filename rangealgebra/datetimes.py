"""Ranges of local (naive) date-times."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import ClassVar

from rangealgebra.boundary import BoundaryPolicy
from rangealgebra.domain import DATETIMES, OrderedDomain
from rangealgebra.interval import Range
from rangealgebra.util import DAY, HOUR, MINUTE


@dataclass(frozen=True)
class DateTimeRange(Range[datetime]):
    """Range of wall-clock date-times.

    Date-times are continuous, so the range cannot be counted or iterated.
    Durations are measured between the raw endpoints; the boundary policy
    only affects ``contains`` and ``overlaps``.
    """

    domain: ClassVar[OrderedDomain[datetime]] = DATETIMES
    scope: ClassVar[str] = "datetime_range"
    message: ClassVar[str] = (
        "the start date-time must be on or before the end date-time"
    )
    default_boundary: ClassVar[BoundaryPolicy] = BoundaryPolicy.CLOSED

    def duration(self) -> timedelta:
        return self.end - self.start

    def duration_in_seconds(self) -> float:
        return self.duration().total_seconds()

    def duration_in_minutes(self) -> float:
        return self.duration_in_seconds() / MINUTE

    def duration_in_hours(self) -> float:
        return self.duration_in_seconds() / HOUR

    def duration_in_days(self) -> float:
        return self.duration_in_seconds() / DAY

    def to_iso_string(self) -> str:
        return str(self)

    def to_iso_interval(self) -> str:
        """ISO-8601 interval notation, ``start/end``, without brackets."""
        render = self.domain.render
        return f"{render(self.start)}/{render(self.end)}"
