"""Difference and allowed-difference arithmetic across the supported numeric types."""

from __future__ import annotations

import cmath
import math
from decimal import Decimal, Overflow, localcontext
from fractions import Fraction
from typing import Union

from approxeq.decimals import to_decimal

Numeric = Union[int, float, complex, Fraction, Decimal]
Tolerance = Union[int, float, Fraction, Decimal]


def is_nan(value: Numeric) -> bool:
    if isinstance(value, (int, Fraction)):
        return False
    if isinstance(value, Decimal):
        return value.is_nan()
    if isinstance(value, complex):
        return cmath.isnan(value)
    return math.isnan(value)


def is_infinite(value: Numeric) -> bool:
    if isinstance(value, (int, Fraction)):
        return False
    if isinstance(value, Decimal):
        return value.is_infinite()
    if isinstance(value, complex):
        return cmath.isinf(value)
    return math.isinf(value)


def _allowance(rel_tol: Tolerance, magnitude: object, abs_tol: Tolerance) -> object:
    # A zero magnitude or zero rel_tol contributes nothing, even against an infinite factor
    if not magnitude or not rel_tol:
        return abs_tol
    relative = rel_tol if is_infinite(rel_tol) else rel_tol * magnitude
    return max(relative, abs_tol)


def _exact(value: Numeric) -> Fraction | float:
    if is_infinite(value):
        return float(value)
    return Fraction(value)


def _exact_terms(
    actual: Numeric, expected: Numeric, rel_tol: Tolerance, abs_tol: Tolerance
) -> tuple[object, object]:
    exact_expected = _exact(expected)
    diff = abs(_exact(actual) - exact_expected)
    return diff, _allowance(_exact(rel_tol), abs(exact_expected), _exact(abs_tol))


def _decimal_terms(
    actual: Numeric, expected: Numeric, rel_tol: Tolerance, abs_tol: Tolerance
) -> tuple[object, object]:
    with localcontext() as ctx:
        ctx.traps[Overflow] = False
        decimal_expected = to_decimal(expected)
        diff = abs(to_decimal(actual) - decimal_expected)
        return diff, _allowance(to_decimal(rel_tol), abs(decimal_expected), to_decimal(abs_tol))


def _decimal_parts(value: Numeric) -> tuple[Decimal, Decimal]:
    if isinstance(value, complex):
        return to_decimal(value.real), to_decimal(value.imag)
    return to_decimal(value), Decimal(0)


def _decimal_hypot(x: Decimal, y: Decimal) -> Decimal:
    return (x * x + y * y).sqrt()


def _complex_terms(
    actual: Numeric, expected: Numeric, rel_tol: Tolerance, abs_tol: Tolerance
) -> tuple[object, object]:
    with localcontext() as ctx:
        ctx.traps[Overflow] = False
        actual_real, actual_imag = _decimal_parts(actual)
        expected_real, expected_imag = _decimal_parts(expected)
        diff = _decimal_hypot(actual_real - expected_real, actual_imag - expected_imag)
        magnitude = _decimal_hypot(expected_real, expected_imag)
        return diff, _allowance(to_decimal(rel_tol), magnitude, to_decimal(abs_tol))


def tolerance_terms(
    actual: Numeric,
    expected: Numeric,
    rel_tol: Tolerance,
    abs_tol: Tolerance,
) -> tuple[object, object]:
    """
    Return ``abs(actual - expected)`` and ``max(rel_tol * abs(expected), abs_tol)``.

    Operands are brought to a common type first:

    - Decimal mixed with a Fraction is compared exactly as Fractions.
    - Decimal mixed with anything else runs in Decimal arithmetic, floats
      converted via their string form. Overflow yields an infinite Decimal.
    - Otherwise Decimal tolerances become floats. Values out of float range
      fall back to exact Fraction arithmetic, or to Decimal arithmetic when
      a complex operand is involved.

    Raises:
        TypeError: If a Decimal operand is paired with a complex operand.
    """
    if isinstance(actual, Decimal) or isinstance(expected, Decimal):
        if isinstance(actual, Fraction) or isinstance(expected, Fraction):
            return _exact_terms(actual, expected, rel_tol, abs_tol)
        return _decimal_terms(actual, expected, rel_tol, abs_tol)

    if isinstance(rel_tol, Decimal):
        rel_tol = float(rel_tol)
    if isinstance(abs_tol, Decimal):
        abs_tol = float(abs_tol)

    try:
        return abs(actual - expected), _allowance(rel_tol, abs(expected), abs_tol)
    except OverflowError:
        if isinstance(actual, complex) or isinstance(expected, complex):
            return _complex_terms(actual, expected, rel_tol, abs_tol)
        return _exact_terms(actual, expected, rel_tol, abs_tol)
