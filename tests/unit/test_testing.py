from decimal import Decimal
from fractions import Fraction

import pytest

from approxeq.exceptions import InvalidToleranceError
from approxeq.testing import assert_all_approximately_equal, assert_approximately_equal


def test_assert_approximately_equal_passes():
    assert_approximately_equal(9.0, 10.0, rel_tol=0.1)
    assert_approximately_equal(Decimal("1.00"), Decimal("1.005"), rel_tol=0, abs_tol=Decimal("0.01"))


def test_assert_approximately_equal_failure_message():
    with pytest.raises(AssertionError) as excinfo:
        assert_approximately_equal(10.0, 9.0, rel_tol=0.1)

    message = str(excinfo.value)
    assert message.startswith("values not approximately equal")
    assert "actual=10.0" in message
    assert "expected=9.0" in message
    assert "diff=1.0" in message
    assert "rel_tol=0.1" in message


def test_assert_approximately_equal_custom_message():
    with pytest.raises(AssertionError, match="^portfolio value: actual=1.0"):
        assert_approximately_equal(1.0, 2.0, msg="portfolio value")


def test_assert_approximately_equal_nan():
    with pytest.raises(AssertionError, match="actual=nan"):
        assert_approximately_equal(float("nan"), float("nan"))


def test_assert_approximately_equal_mixed_types_message():
    with pytest.raises(AssertionError) as excinfo:
        assert_approximately_equal(Decimal("1.0"), 2.0)

    message = str(excinfo.value)
    assert "diff=1.0," in message
    assert "allowed=2.0E-8," in message


def test_assert_approximately_equal_decimal_and_fraction_message():
    with pytest.raises(AssertionError) as excinfo:
        assert_approximately_equal(Decimal("0.5"), Fraction(1, 4), rel_tol=0, abs_tol=Fraction(1, 8))

    message = str(excinfo.value)
    assert "diff=1/4," in message
    assert "allowed=1/8," in message


def test_assert_approximately_equal_message_beyond_float_range():
    with pytest.raises(AssertionError, match=r"diff=\d{300,}"):
        assert_approximately_equal(10**400, 1.0)


def test_assert_approximately_equal_decimal_with_complex_raises_type_error():
    # Decimal and complex have no common arithmetic
    with pytest.raises(TypeError):
        assert_approximately_equal(Decimal("1.0"), 2 + 0.5j)


def test_assert_approximately_equal_unrepresentable_difference():
    with pytest.raises(AssertionError, match="diff=n/a, allowed=n/a"):
        assert_approximately_equal(Decimal("sNaN"), Decimal("1"))


def test_assert_approximately_equal_invalid_tolerance():
    with pytest.raises(InvalidToleranceError):
        assert_approximately_equal(1.0, 1.0, abs_tol=-1.0)


def test_assert_all_approximately_equal_passes():
    assert_all_approximately_equal([1.0, 2.0, 3.0], [1.0, 2.0 + 1e-12, 3.0])
    assert_all_approximately_equal((), ())


def test_assert_all_approximately_equal_length_mismatch():
    with pytest.raises(AssertionError, match="length mismatch: 2 != 3"):
        assert_all_approximately_equal([1.0, 2.0], [1.0, 2.0, 3.0])


def test_assert_all_approximately_equal_reports_index():
    with pytest.raises(AssertionError, match="mismatch at index 1"):
        assert_all_approximately_equal([1.0, 2.5, 3.0], [1.0, 2.0, 3.5], abs_tol=0.1)
