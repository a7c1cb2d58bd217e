"""Tests for the generic range core with custom domains."""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import ClassVar

import pytest

from rangealgebra import (
    DATETIMES,
    INTEGERS,
    BoundaryPolicy,
    DateRange,
    DiscreteDomain,
    DiscreteRange,
    IntegerRange,
    OrderedDomain,
    Range,
)

DECIMALS: OrderedDomain[Decimal] = OrderedDomain(
    name="decimal",
    value_type=Decimal,
    maximum=Decimal("1e9"),
    to_json=str,
    from_json=Decimal,
)


@dataclass(frozen=True)
class DecimalRange(Range[Decimal]):
    """Continuous range bound to a custom domain."""

    domain: ClassVar[OrderedDomain[Decimal]] = DECIMALS
    scope: ClassVar[str] = "decimal_range"


INT32: DiscreteDomain[int] = DiscreteDomain(
    name="int32",
    value_type=int,
    rejects=(bool,),
    maximum=2**31 - 1,
    successor=INTEGERS.successor,
    predecessor=INTEGERS.predecessor,
    distance=INTEGERS.distance,
)


@dataclass(frozen=True)
class Int32Range(IntegerRange):
    """Integer range with a narrower maximum sentinel."""

    domain: ClassVar[DiscreteDomain[int]] = INT32
    scope: ClassVar[str] = "int32_range"


def test_custom_continuous_domain() -> None:
    rng = DecimalRange.half_open_right(Decimal("0.5"), Decimal("1.5"))

    assert rng.contains(Decimal("0.5"))
    assert not rng.contains(Decimal("1.5"))
    assert str(rng) == "[0.5, 1.5)"
    assert rng.to_json() == {"from": "0.5", "to": "1.5", "rangeType": "half_open_right"}
    assert DecimalRange.from_json(rng.to_json()).unwrap() == rng
    assert not hasattr(rng, "count")


def test_custom_domain_error_scope() -> None:
    error = DecimalRange.try_from(Decimal(2), Decimal(1)).unwrap_err()

    assert error.code == "value_object.decimal_range.invalid_range"


def test_rebinding_maximum_sentinel() -> None:
    assert Int32Range.closed(0).end == 2**31 - 1
    half_open = Int32Range.from_nullable(5)
    closed = Int32Range.from_nullable(5, None, BoundaryPolicy.CLOSED)

    assert half_open is not None and closed is not None
    assert half_open.count() == 2**31 - 1 - 5
    assert closed.count() == 2**31 - 1 - 5 + 1


def test_discrete_range_refuses_continuous_domain() -> None:
    with pytest.raises(TypeError, match="DiscreteDomain"):

        class BrokenRange(DiscreteRange[object]):
            domain = DATETIMES  # type: ignore[assignment]


def test_ranges_from_different_domains_are_not_comparable() -> None:
    with pytest.raises(TypeError, match="Cannot compare"):
        IntegerRange.closed(1, 5).overlaps(  # type: ignore[arg-type]
            DateRange.closed(date(2024, 1, 1), date(2024, 1, 2))
        )


def test_equality_requires_same_range_class() -> None:
    assert IntegerRange.closed(1, 5) != Int32Range.closed(1, 5)
    assert IntegerRange.closed(1, 5) == IntegerRange(1, 5, BoundaryPolicy.CLOSED)


def test_boundary_must_be_a_policy() -> None:
    with pytest.raises(TypeError, match="BoundaryPolicy"):
        IntegerRange(1, 5, "closed")  # type: ignore[arg-type]


def test_rejections_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="rangealgebra.interval"):
        IntegerRange.try_from(5, 1)

    assert "Rejected IntegerRange" in caplog.text
