"""Boundary policies deciding whether each endpoint belongs to a range."""

from enum import Enum

from typing_extensions import assert_never


class BoundaryPolicy(Enum):
    """Inclusion rule for the two endpoints of a range.

    The value is the stable tag used in serialized ranges.
    """

    CLOSED = "closed"  # [start, end]
    OPEN = "open"  # (start, end)
    HALF_OPEN_LEFT = "half_open_left"  # (start, end]
    HALF_OPEN_RIGHT = "half_open_right"  # [start, end)

    @property
    def includes_left(self) -> bool:
        match self:
            case BoundaryPolicy.CLOSED | BoundaryPolicy.HALF_OPEN_RIGHT:
                return True
            case BoundaryPolicy.OPEN | BoundaryPolicy.HALF_OPEN_LEFT:
                return False
            case _:
                assert_never(self)

    @property
    def includes_right(self) -> bool:
        match self:
            case BoundaryPolicy.CLOSED | BoundaryPolicy.HALF_OPEN_LEFT:
                return True
            case BoundaryPolicy.OPEN | BoundaryPolicy.HALF_OPEN_RIGHT:
                return False
            case _:
                assert_never(self)

    @property
    def tag(self) -> str:
        return self.value

    @property
    def left_bracket(self) -> str:
        return "[" if self.includes_left else "("

    @property
    def right_bracket(self) -> str:
        return "]" if self.includes_right else ")"

    @property
    def excluded_endpoints(self) -> int:
        """Number of endpoints left out of the range (0, 1 or 2)."""
        return (not self.includes_left) + (not self.includes_right)

    @classmethod
    def of(cls, includes_left: bool, includes_right: bool) -> "BoundaryPolicy":
        """Return the policy matching the two inclusion flags."""
        match (includes_left, includes_right):
            case (True, True):
                return cls.CLOSED
            case (False, False):
                return cls.OPEN
            case (False, True):
                return cls.HALF_OPEN_LEFT
            case (True, False):
                return cls.HALF_OPEN_RIGHT
        raise TypeError(
            f"Inclusion flags must be booleans, got "
            f"includes_left={includes_left!r}, includes_right={includes_right!r}"
        )

    @classmethod
    def from_tag(cls, tag: str) -> "BoundaryPolicy":
        """Parse a serialized tag such as ``"half_open_right"``.

        Raises:
            ValueError: If the tag names no known policy
        """
        try:
            return cls(tag)
        except ValueError:
            valid = ", ".join(policy.value for policy in cls)
            raise ValueError(
                f"Invalid range type {tag!r}. Valid range types: {valid}"
            ) from None
