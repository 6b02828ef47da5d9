"""Assertion helpers for test suites comparing computed values to known values."""

from __future__ import annotations

from collections.abc import Sequence

from beartype import beartype

from approxeq.arithmetic import tolerance_terms
from approxeq.compare import (
    DEFAULT_ABS_TOL,
    DEFAULT_REL_TOL,
    Numeric,
    Tolerance,
    approximately_equal,
)


def _describe_mismatch(
    actual: Numeric,
    expected: Numeric,
    rel_tol: Tolerance,
    abs_tol: Tolerance,
) -> str:
    try:
        diff, allowed = tolerance_terms(actual, expected, rel_tol, abs_tol)
    except (TypeError, ValueError, ArithmeticError):
        # Signaling NaN, or infinities next to values beyond float range
        diff = allowed = "n/a"
    return (
        f"actual={actual!r}, expected={expected!r}, diff={diff}, allowed={allowed}, "
        f"rel_tol={rel_tol}, abs_tol={abs_tol}"
    )


@beartype
def assert_approximately_equal(
    actual: Numeric,
    expected: Numeric,
    rel_tol: Tolerance = DEFAULT_REL_TOL,
    abs_tol: Tolerance = DEFAULT_ABS_TOL,
    msg: str = "",
) -> None:
    """
    Assert that ``actual`` is within tolerance of ``expected``.

    Raises:
        AssertionError: If the values are not approximately equal.
        InvalidToleranceError: If a tolerance is negative or NaN.
    """
    if approximately_equal(actual, expected, rel_tol=rel_tol, abs_tol=abs_tol):
        return
    detail = _describe_mismatch(actual, expected, rel_tol, abs_tol)
    raise AssertionError(f"{msg}: {detail}" if msg else f"values not approximately equal: {detail}")


@beartype
def assert_all_approximately_equal(
    actual: Sequence[Numeric],
    expected: Sequence[Numeric],
    rel_tol: Tolerance = DEFAULT_REL_TOL,
    abs_tol: Tolerance = DEFAULT_ABS_TOL,
) -> None:
    """Assert element-wise approximate equality of two sequences of the same length."""
    if len(actual) != len(expected):
        raise AssertionError(f"length mismatch: {len(actual)} != {len(expected)}")

    for index, (actual_item, expected_item) in enumerate(zip(actual, expected, strict=True)):
        assert_approximately_equal(
            actual_item,
            expected_item,
            rel_tol=rel_tol,
            abs_tol=abs_tol,
            msg=f"mismatch at index {index}",
        )
