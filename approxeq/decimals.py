from decimal import Decimal, InvalidOperation
from fractions import Fraction
from typing import Any, Final

from beartype import beartype

# Default absolute tolerance for decimal equality checks
DECIMAL_TOLERANCE: Final[Decimal] = Decimal("1e-9")


@beartype
def to_decimal(value: Any) -> Decimal:
    """
    Convert a value to a Decimal with strict error handling.

    Floats are converted via string representation to preserve literal value.
    Fractions are divided exactly in the current decimal context.
    Raises ValueError for invalid strings and TypeError for unsupported types.
    """
    if isinstance(value, Decimal):
        return value

    if isinstance(value, int):
        return Decimal(value)

    if isinstance(value, float):
        return Decimal(str(value))

    if isinstance(value, Fraction):
        return Decimal(value.numerator) / Decimal(value.denominator)

    if isinstance(value, str):
        if not value:
            raise ValueError("Cannot convert empty string to Decimal")
        try:
            return Decimal(value)
        except InvalidOperation as e:
            raise ValueError(f"Invalid decimal string: {value}") from e

    raise TypeError(f"Cannot convert type {type(value).__name__} to Decimal")


@beartype
def is_zero(value: Decimal, tol: Decimal | None = None) -> bool:
    """Check if a Decimal is effectively zero within an absolute tolerance."""
    return is_equal(value, Decimal(0), tol)


@beartype
def is_equal(a: Decimal, b: Decimal, tol: Decimal | None = None) -> bool:
    """Compare two Decimals for equality within an absolute tolerance."""
    from approxeq.compare import approximately_equal

    if tol is None:
        tol = DECIMAL_TOLERANCE
    return approximately_equal(a, b, rel_tol=Decimal(0), abs_tol=tol)
