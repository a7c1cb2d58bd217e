from .boundary import BoundaryPolicy
from .dates import DateRange, HalfOpenRightDateRange
from .datetimes import DateTimeRange
from .domain import DATES, DATETIMES, INTEGERS, DiscreteDomain, OrderedDomain
from .errors import InvalidRangeError, UnwrapError, ValueObjectError
from .integer import IntegerRange
from .interval import DiscreteRange, Range
from .result import Err, Ok, Result
from .util import MAX_DATE, MAX_DATETIME, MAX_INTEGER

__all__ = [
    "BoundaryPolicy",
    "Range",
    "DiscreteRange",
    "IntegerRange",
    "DateRange",
    "HalfOpenRightDateRange",
    "DateTimeRange",
    "OrderedDomain",
    "DiscreteDomain",
    "INTEGERS",
    "DATES",
    "DATETIMES",
    "ValueObjectError",
    "InvalidRangeError",
    "UnwrapError",
    "Ok",
    "Err",
    "Result",
    "MAX_INTEGER",
    "MAX_DATE",
    "MAX_DATETIME",
]
