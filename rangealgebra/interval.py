"""Generic range core.

A ``Range`` holds two endpoints and a ``BoundaryPolicy``. Concrete ranges
subclass it and bind an ordered domain adapter through the ``domain`` class
attribute; ``DiscreteRange`` is the base for domains that can be counted and
enumerated.
"""

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, replace
from typing import Any, ClassVar, Generic, TypeVar

from typing_extensions import Self, override

from rangealgebra.boundary import BoundaryPolicy
from rangealgebra.domain import DiscreteDomain, OrderedDomain
from rangealgebra.errors import InvalidRangeError, ValueObjectError
from rangealgebra.result import Err, Ok, Result

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Range(Generic[T]):
    """Immutable span between ``start`` and ``end`` under a boundary policy.

    Subclasses configure the range through class attributes:

    - ``domain``: ordered domain adapter for the endpoints
    - ``scope``: error code segment, e.g. ``"integer_range"``
    - ``message``: human-readable text for an inverted range
    - ``default_boundary``: policy used when a factory is not told one
    - ``fixed_boundary``: if set, the only policy the range accepts

    An omitted ``end`` is replaced by the domain maximum. An omitted ``start``
    means "no range" on the nullable factories; the two bounds are
    deliberately not treated alike.
    """

    start: T
    end: T
    boundary: BoundaryPolicy = BoundaryPolicy.CLOSED

    domain: ClassVar[OrderedDomain[Any]]
    scope: ClassVar[str] = "range"
    message: ClassVar[str] = (
        "the start value must be less than or equal to the end value"
    )
    default_boundary: ClassVar[BoundaryPolicy] = BoundaryPolicy.HALF_OPEN_RIGHT
    fixed_boundary: ClassVar[BoundaryPolicy | None] = None

    def __post_init__(self) -> None:
        self._check_boundary(self.boundary)
        if self.fixed_boundary is not None and self.boundary is not self.fixed_boundary:
            raise InvalidRangeError(self.invalid_range_type_error(self.boundary))
        self.domain.check(self.start)
        self.domain.check(self.end)
        if self.domain.compare(self.start, self.end) > 0:
            raise InvalidRangeError(self.invalid_range_error())

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------
    @classmethod
    def _check_boundary(cls, boundary: Any) -> None:
        if not isinstance(boundary, BoundaryPolicy):
            raise TypeError(
                f"Range boundary must be a BoundaryPolicy, "
                f"got {type(boundary).__name__!r}: {boundary!r}"
            )

    @classmethod
    def _resolve_end(cls, end: T | None) -> T:
        return cls.domain.maximum if end is None else end

    @classmethod
    def of(
        cls, start: T, end: T | None = None, boundary: BoundaryPolicy | None = None
    ) -> Self:
        """Build a range from bounds the caller already trusts.

        Raises:
            InvalidRangeError: If ``start`` is after ``end``
        """
        if boundary is None:
            boundary = cls.default_boundary
        return cls(start, cls._resolve_end(end), boundary)

    @classmethod
    def closed(cls, start: T, end: T | None = None) -> Self:
        """``[start, end]``"""
        return cls.of(start, end, BoundaryPolicy.CLOSED)

    @classmethod
    def open(cls, start: T, end: T | None = None) -> Self:
        """``(start, end)``"""
        return cls.of(start, end, BoundaryPolicy.OPEN)

    @classmethod
    def half_open_left(cls, start: T, end: T | None = None) -> Self:
        """``(start, end]``"""
        return cls.of(start, end, BoundaryPolicy.HALF_OPEN_LEFT)

    @classmethod
    def half_open_right(cls, start: T, end: T | None = None) -> Self:
        """``[start, end)``"""
        return cls.of(start, end, BoundaryPolicy.HALF_OPEN_RIGHT)

    @classmethod
    def try_from(
        cls, start: T, end: T | None = None, boundary: BoundaryPolicy | None = None
    ) -> Result[Self, ValueObjectError]:
        """Build a range from untrusted bounds.

        Returns ``Err`` with code ``value_object.<scope>.invalid_range`` when
        ``start`` is after ``end`` (after an omitted ``end`` was replaced by the
        domain maximum). Values outside the domain still raise TypeError.
        """
        if boundary is None:
            boundary = cls.default_boundary
        cls._check_boundary(boundary)
        if cls.fixed_boundary is not None and boundary is not cls.fixed_boundary:
            return Err(cls.invalid_range_type_error(boundary))
        resolved = cls._resolve_end(end)
        cls.domain.check(start)
        cls.domain.check(resolved)
        if cls.domain.compare(start, resolved) > 0:
            logger.debug(
                "Rejected %s: start %r is after end %r", cls.__name__, start, resolved
            )
            return Err(cls.invalid_range_error())
        return Ok(cls.of(start, resolved, boundary))

    @classmethod
    def from_nullable(
        cls,
        start: T | None,
        end: T | None = None,
        boundary: BoundaryPolicy | None = None,
    ) -> Self | None:
        """Like ``of``, but returns None when ``start`` is None."""
        if start is None:
            return None
        return cls.of(start, end, boundary)

    @classmethod
    def try_from_nullable(
        cls,
        start: T | None,
        end: T | None = None,
        boundary: BoundaryPolicy | None = None,
    ) -> Result[Self | None, ValueObjectError]:
        """Like ``try_from``, but yields ``Ok(None)`` when ``start`` is None."""
        if start is None:
            return Ok(None)
        return cls.try_from(start, end, boundary)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Result[Self, ValueObjectError]:
        """Rebuild a range from the shape produced by ``to_json``."""
        try:
            boundary = BoundaryPolicy.from_tag(data["rangeType"])
        except (KeyError, TypeError, ValueError) as exc:
            logger.debug("Rejected %s payload: %s", cls.__name__, exc)
            return Err(
                ValueObjectError(
                    code=f"value_object.{cls.scope}.invalid_range_type",
                    message=str(exc),
                )
            )
        try:
            start = cls.domain.from_json(data["from"])
            end = cls.domain.from_json(data["to"])
        except (KeyError, TypeError, ValueError) as exc:
            logger.debug("Rejected %s payload: %s", cls.__name__, exc)
            return Err(
                ValueObjectError(
                    code=f"value_object.{cls.scope}.invalid_value",
                    message=f"invalid {cls.domain.name} endpoint: {exc}",
                )
            )
        return cls.try_from(start, end, boundary)

    @classmethod
    def invalid_range_error(cls) -> ValueObjectError:
        return ValueObjectError(
            code=f"value_object.{cls.scope}.invalid_range", message=cls.message
        )

    @classmethod
    def invalid_range_type_error(cls, boundary: BoundaryPolicy) -> ValueObjectError:
        return ValueObjectError(
            code=f"value_object.{cls.scope}.invalid_range_type",
            message=(
                f"{cls.__name__} only accepts the {cls.fixed_boundary.tag} "
                f"range type, got {boundary.tag}"
            ),
        )

    # ------------------------------------------------------------------
    # Derived ranges
    # ------------------------------------------------------------------
    def with_start(self, start: T) -> Self:
        return replace(self, start=start)

    def with_end(self, end: T) -> Self:
        return replace(self, end=end)

    def try_with_start(self, start: T) -> Result[Self, ValueObjectError]:
        return type(self).try_from(start, self.end, self.boundary)

    def try_with_end(self, end: T) -> Result[Self, ValueObjectError]:
        return type(self).try_from(self.start, end, self.boundary)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def contains(self, point: T) -> bool:
        """Return True if ``point`` lies in the range under its boundary policy."""
        left = self.domain.compare(point, self.start)
        right = self.domain.compare(point, self.end)
        after_start = left > 0 or (left == 0 and self.boundary.includes_left)
        before_end = right < 0 or (right == 0 and self.boundary.includes_right)
        return after_start and before_end

    def __contains__(self, point: object) -> bool:
        return self.contains(point)  # type: ignore[arg-type]

    def overlaps(self, other: Self) -> bool:
        """Return True if some point is contained by both ranges."""
        self._check_comparable(other)
        compare = self.domain.compare
        max_start = self.start if compare(self.start, other.start) >= 0 else other.start
        min_end = self.end if compare(self.end, other.end) <= 0 else other.end
        order = compare(max_start, min_end)
        if order < 0:
            return True
        if order > 0:
            return False
        # Ranges touch at a single point
        return self.contains(max_start) and other.contains(max_start)

    def _check_comparable(self, other: "Range[Any]") -> None:
        if not isinstance(other, Range) or other.domain is not self.domain:
            raise TypeError(
                f"Cannot compare {type(self).__name__} with {type(other).__name__}.\n"
                f"Hint: Both ranges must share the same {self.domain.name} domain."
            )

    def equals(self, other: object) -> bool:
        return self == other

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    @override
    def __str__(self) -> str:
        render = self.domain.render
        return (
            f"{self.boundary.left_bracket}{render(self.start)}, "
            f"{render(self.end)}{self.boundary.right_bracket}"
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "from": self.domain.to_json(self.start),
            "to": self.domain.to_json(self.end),
            "rangeType": self.boundary.tag,
        }


@dataclass(frozen=True)
class DiscreteRange(Range[T]):
    """Range over a discrete domain, adding counting and enumeration."""

    domain: ClassVar[DiscreteDomain[Any]]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        domain = cls.__dict__.get("domain")
        if domain is not None and not domain.is_discrete:
            raise TypeError(
                f"{cls.__name__} binds the continuous {domain.name} domain.\n"
                f"Counting and iteration need a DiscreteDomain with successor "
                f"and distance; subclass Range instead."
            )

    def count(self) -> int:
        """Number of elements in the range, never negative."""
        span = self.domain.distance(self.start, self.end) + 1
        return max(0, span - self.boundary.excluded_endpoints)

    def is_empty(self) -> bool:
        return self.count() == 0

    def first(self) -> T | None:
        """Smallest element of the range, or None when it is empty."""
        if self.is_empty():
            return None
        if self.boundary.includes_left:
            return self.start
        return self.domain.successor(self.start)

    def last(self) -> T | None:
        """Largest element of the range, or None when it is empty."""
        if self.is_empty():
            return None
        if self.boundary.includes_right:
            return self.end
        return self.domain.predecessor(self.end)

    def iterate(self) -> Iterator[T]:
        """Yield the elements of the range in ascending order.

        Each call starts a fresh generator, so a range can be enumerated any
        number of times.
        """
        first = self.first()
        last = self.last()
        if first is None or last is None:
            return
        current = first
        while True:
            yield current
            if self.domain.compare(current, last) >= 0:
                return
            current = self.domain.successor(current)

    def __iter__(self) -> Iterator[T]:
        return self.iterate()

    @override
    def overlaps(self, other: Self) -> bool:
        """Return True if both ranges share at least one element.

        Ranges are compared by their first and last included elements, so
        ``[1, 2)`` and ``(1, 3]`` do not overlap: no integer lies in both.
        """
        self._check_comparable(other)
        mine = (self.first(), self.last())
        theirs = (other.first(), other.last())
        if None in mine or None in theirs:
            return False
        compare = self.domain.compare
        return compare(mine[0], theirs[1]) <= 0 and compare(theirs[0], mine[1]) <= 0
