"""Ordered domain adapters.

An adapter bundles what a range needs to know about its endpoint type: a
total order, a maximum sentinel for omitted upper bounds, and how values are
rendered and serialized. Discrete domains additionally know how to step
between neighbouring values and how many steps separate two values.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Generic, TypeVar

from dateutil.parser import isoparse, isoparser

from rangealgebra.util import MAX_DATE, MAX_DATETIME, MAX_INTEGER

T = TypeVar("T")


def natural_compare(left: Any, right: Any) -> int:
    """Three-way comparison using the values' own ordering."""
    return (left > right) - (left < right)


@dataclass(frozen=True, kw_only=True)
class OrderedDomain(Generic[T]):
    """Capabilities shared by every domain: ordering, sentinel and codecs."""

    name: str
    value_type: type
    maximum: T
    compare: Callable[[T, T], int] = natural_compare
    render: Callable[[T], str] = str
    to_json: Callable[[T], Any] = lambda value: value
    from_json: Callable[[Any], T] = lambda raw: raw
    rejects: tuple[type, ...] = ()

    @property
    def is_discrete(self) -> bool:
        return False

    def check(self, value: Any) -> None:
        """Raise TypeError if ``value`` does not belong to this domain."""
        if not isinstance(value, self.value_type) or isinstance(value, self.rejects):
            raise TypeError(
                f"Expected {self.name} value of type {self.value_type.__name__!r}.\n"
                f"Got {type(value).__name__!r}: {value!r}"
            )


@dataclass(frozen=True, kw_only=True)
class DiscreteDomain(OrderedDomain[T]):
    """Domain whose values have a successor and a step distance."""

    successor: Callable[[T], T]
    predecessor: Callable[[T], T]
    distance: Callable[[T, T], int]

    @property
    def is_discrete(self) -> bool:
        return True


def _parse_int(raw: Any) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise TypeError(f"Expected an integer, got {type(raw).__name__!r}: {raw!r}")
    return raw


def _parse_date(raw: Any) -> date:
    if not isinstance(raw, str):
        raise TypeError(f"Expected an ISO date string, got {type(raw).__name__!r}")
    return isoparser().parse_isodate(raw)


def _parse_datetime(raw: Any) -> datetime:
    if not isinstance(raw, str):
        raise TypeError(
            f"Expected an ISO date-time string, got {type(raw).__name__!r}"
        )
    parsed = isoparse(raw)
    if parsed.tzinfo is not None:
        raise ValueError(f"Expected a local date-time without an offset, got {raw!r}")
    return parsed


def format_datetime(value: datetime) -> str:
    """Render a local date-time in its shortest ISO-8601 form.

    Seconds and the fractional part appear only when they are non-zero,
    e.g. ``2024-01-01T10:00`` or ``2024-01-01T10:00:30``.
    """
    if value.microsecond:
        return value.isoformat(timespec="microseconds")
    if value.second:
        return value.isoformat(timespec="seconds")
    return value.isoformat(timespec="minutes")


class _LocalDateTimeDomain(OrderedDomain[datetime]):
    """Continuous domain of naive (local) date-times."""

    def check(self, value: Any) -> None:
        super().check(value)
        if value.tzinfo is not None:
            raise TypeError(
                f"Local date-time ranges require naive datetimes.\n"
                f"Got timezone-aware datetime: {value!r}\n"
                f"Hint: Convert to local wall-clock time first:\n"
                f"  dt.astimezone(zone).replace(tzinfo=None)"
            )


INTEGERS: DiscreteDomain[int] = DiscreteDomain(
    name="integer",
    value_type=int,
    rejects=(bool,),
    maximum=MAX_INTEGER,
    successor=lambda value: value + 1,
    predecessor=lambda value: value - 1,
    distance=lambda start, end: end - start,
    from_json=_parse_int,
)

DATES: DiscreteDomain[date] = DiscreteDomain(
    name="date",
    value_type=date,
    rejects=(datetime,),
    maximum=MAX_DATE,
    successor=lambda value: value + timedelta(days=1),
    predecessor=lambda value: value - timedelta(days=1),
    distance=lambda start, end: (end - start).days,
    render=date.isoformat,
    to_json=date.isoformat,
    from_json=_parse_date,
)

DATETIMES: OrderedDomain[datetime] = _LocalDateTimeDomain(
    name="date-time",
    value_type=datetime,
    maximum=MAX_DATETIME,
    render=format_datetime,
    to_json=format_datetime,
    from_json=_parse_datetime,
)
