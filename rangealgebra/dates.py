"""Ranges of calendar dates."""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date
from typing import ClassVar

from dateutil.relativedelta import relativedelta
from dateutil.rrule import MONTHLY, rrule

from rangealgebra.boundary import BoundaryPolicy
from rangealgebra.domain import DATES, DiscreteDomain
from rangealgebra.interval import DiscreteRange


@dataclass(frozen=True)
class DateRange(DiscreteRange[date]):
    """Range of calendar dates, counted and iterated day by day.

    Example:
        >>> rng = DateRange.closed(date(2024, 1, 1), date(2024, 1, 31))
        >>> rng.days()
        31
        >>> str(rng)
        '[2024-01-01, 2024-01-31]'
    """

    domain: ClassVar[DiscreteDomain[date]] = DATES
    scope: ClassVar[str] = "date_range"
    message: ClassVar[str] = "the start date must be on or before the end date"
    default_boundary: ClassVar[BoundaryPolicy] = BoundaryPolicy.HALF_OPEN_RIGHT

    def days(self) -> int:
        """Number of days in the range under its boundary policy."""
        return self.count()

    def to_iso_string(self) -> str:
        return str(self)

    def to_iso_interval(self) -> str:
        """ISO-8601 interval notation, ``start/end``, without brackets."""
        return f"{self.start.isoformat()}/{self.end.isoformat()}"


@dataclass(frozen=True)
class HalfOpenRightDateRange(DateRange):
    """Date range that always excludes its end date: ``[start, end)``.

    Suited to whole periods whose exclusive end is the first day of the next
    period, such as calendar months.
    """

    boundary: BoundaryPolicy = BoundaryPolicy.HALF_OPEN_RIGHT

    default_boundary: ClassVar[BoundaryPolicy] = BoundaryPolicy.HALF_OPEN_RIGHT
    fixed_boundary: ClassVar[BoundaryPolicy | None] = BoundaryPolicy.HALF_OPEN_RIGHT

    @classmethod
    def month(cls, year: int, month: int) -> "HalfOpenRightDateRange":
        """Whole calendar month: from its first day up to the next month's."""
        first = date(year, month, 1)
        return cls(first, first + relativedelta(months=1))

    @classmethod
    def months(cls, start: date, end: date) -> Iterator["HalfOpenRightDateRange"]:
        """Yield the calendar months overlapping ``[start, end)``, in order.

        The first and last months are whole months, so the union of the
        yielded ranges covers ``[start, end)`` and may extend past it.
        """
        if start >= end:
            return
        anchor = start.replace(day=1)
        for occurrence in rrule(MONTHLY, dtstart=anchor, until=end):
            first = occurrence.date()
            if first >= end:
                return
            yield cls(first, first + relativedelta(months=1))
