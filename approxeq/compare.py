from __future__ import annotations

from typing import Final

from beartype import beartype

from approxeq.arithmetic import Numeric, Tolerance, is_infinite, is_nan, tolerance_terms
from approxeq.exceptions import InvalidToleranceError

__all__ = [
    "DEFAULT_ABS_TOL",
    "DEFAULT_REL_TOL",
    "Numeric",
    "Tolerance",
    "approximately_equal",
]

DEFAULT_REL_TOL: Final[float] = 1e-8
DEFAULT_ABS_TOL: Final[float] = 0.0


def _validate_tolerance(name: str, value: Tolerance) -> None:
    if is_nan(value) or value < 0:
        raise InvalidToleranceError(name, value)


@beartype
def approximately_equal(
    actual: Numeric,
    expected: Numeric,
    rel_tol: Tolerance = DEFAULT_REL_TOL,
    abs_tol: Tolerance = DEFAULT_ABS_TOL,
) -> bool:
    """
    Check whether a computed value is close to a known value.

    Returns True iff ``abs(actual - expected) <= max(rel_tol * abs(expected), abs_tol)``.
    The relative tolerance scales against ``expected`` only, so the test is not
    symmetric in its two operands: ``approximately_equal(9.0, 10.0, 0.1)`` holds
    while ``approximately_equal(10.0, 9.0, 0.1)`` does not.

    NaN is never close to anything, itself included. An infinite value is close
    only to an equal infinite value. When either operand is a Decimal, both
    operands and both tolerances are converted to Decimal before comparing, or
    to Fraction when the other operand is a Fraction. Magnitudes beyond float
    range are compared exactly instead of overflowing.

    Args:
        actual: The computed value.
        expected: The reference value the relative tolerance is scaled against.
        rel_tol: Allowed difference as a fraction of ``abs(expected)``.
        abs_tol: Minimum allowed difference, useful when ``expected`` is near zero.

    Returns:
        Whether ``actual`` is within tolerance of ``expected``.

    Raises:
        InvalidToleranceError: If a tolerance is negative or NaN.
        TypeError: If a Decimal operand is paired with a complex operand.
    """
    _validate_tolerance("rel_tol", rel_tol)
    _validate_tolerance("abs_tol", abs_tol)

    if is_nan(actual) or is_nan(expected):
        return False
    if is_infinite(actual) or is_infinite(expected):
        return bool(actual == expected)
    if actual == expected:
        return True

    diff, allowed = tolerance_terms(actual, expected, rel_tol, abs_tol)
    return bool(diff <= allowed)
