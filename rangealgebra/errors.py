"""Structured errors reported by range factories."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class ValueObjectError:
    """Validation failure with a stable machine code and a readable message.

    Attributes:
        code: Dotted machine-readable code, e.g.
            ``"value_object.integer_range.invalid_range"``
        message: Human-readable explanation
    """

    code: str
    message: str

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


class InvalidRangeError(ValueError):
    """Raised when a trusted factory receives bounds that violate the invariant.

    Untrusted bounds belong on the ``try_*`` factories, which report the same
    condition as an ``Err`` instead.
    """

    def __init__(self, error: ValueObjectError):
        super().__init__(str(error))
        self.error: ValueObjectError = error


class UnwrapError(Exception):
    """Raised when unwrapping the wrong side of a Result."""
