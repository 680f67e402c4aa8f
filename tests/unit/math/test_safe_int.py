"""Tests for SafeInt bounded arithmetic."""

import pytest

from amm_router.errors import RouterError
from amm_router.safe_int import (
    UINT256_MAX,
    ArithmeticOverflow,
    DivisionByZero,
    S,
    SafeInt,
    SafeIntError,
    Underflow,
)


class TestSafeIntConstruction:
    """Tests for SafeInt construction."""

    def test_from_int(self):
        assert SafeInt(42).value == 42

    def test_from_safeint(self):
        """SafeInt can be constructed from another SafeInt."""
        assert SafeInt(SafeInt(42)).value == 42

    def test_max_value_accepted(self):
        assert SafeInt(UINT256_MAX).value == UINT256_MAX

    def test_above_max_raises(self):
        with pytest.raises(ArithmeticOverflow):
            SafeInt(UINT256_MAX + 1)

    def test_negative_raises(self):
        """Amounts are unsigned."""
        with pytest.raises(ArithmeticOverflow):
            SafeInt(-1)

    def test_from_invalid_type_raises(self):
        with pytest.raises(TypeError):
            SafeInt("42")  # type: ignore
        with pytest.raises(TypeError):
            SafeInt(3.14)  # type: ignore
        with pytest.raises(TypeError):
            SafeInt(True)  # type: ignore

    def test_alias_s(self):
        assert S is SafeInt

    def test_zero_constructor(self):
        assert SafeInt.zero().value == 0


class TestSafeIntArithmetic:
    """Tests for SafeInt arithmetic operations."""

    def test_add(self):
        assert (S(10) + S(5)).value == 15
        assert (S(10) + 5).value == 15
        assert (5 + S(10)).value == 15

    def test_add_overflow_raises(self):
        with pytest.raises(ArithmeticOverflow):
            S(UINT256_MAX) + S(1)

    def test_sub(self):
        assert (S(10) - S(3)).value == 7
        assert (S(5) - 5).value == 0

    def test_sub_underflow_raises(self):
        with pytest.raises(Underflow) as exc_info:
            S(5) - S(10)
        assert "5 - 10" in str(exc_info.value)

    def test_mul(self):
        assert (S(6) * S(7)).value == 42
        assert (6 * S(7)).value == 42

    def test_mul_at_bound(self):
        """2^128 * (2^128 - 1) still fits."""
        assert (S(2**128) * S(2**128 - 1)).value == 2**256 - 2**128

    def test_mul_overflow_raises(self):
        """Products past uint256 raise instead of wrapping."""
        with pytest.raises(ArithmeticOverflow):
            S(2**128) * S(2**128)

    def test_floordiv(self):
        assert (S(17) // S(5)).value == 3
        assert (S(17) // 5).value == 3

    def test_floordiv_by_zero_raises(self):
        with pytest.raises(DivisionByZero):
            S(1) // S(0)


class TestSafeIntComparison:
    """Tests for comparisons and conversions."""

    def test_comparisons(self):
        assert S(1) < S(2)
        assert S(2) <= 2
        assert S(3) > 2
        assert S(3) >= S(3)
        assert S(3) == 3
        assert S(3) != S(4)

    def test_bool(self):
        assert not S(0)
        assert S(1)

    def test_int(self):
        assert int(S(9)) == 9


class TestErrorHierarchy:
    """SafeInt errors are arithmetic errors; overflow is also a router error."""

    def test_hierarchy(self):
        assert issubclass(SafeIntError, ArithmeticError)
        assert issubclass(ArithmeticOverflow, SafeIntError)
        assert issubclass(ArithmeticOverflow, RouterError)
        assert issubclass(Underflow, SafeIntError)
        assert issubclass(DivisionByZero, SafeIntError)
