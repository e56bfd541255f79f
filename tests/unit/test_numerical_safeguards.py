"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Проверку конечности и нормализацию знакового нуля
2. Точные трёхзначные сравнения (sign, compare_floats)
3. Epsilon-сравнения float
4. Округление до шага epsilon
"""

import math

import pytest

from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    compare_floats,
    compare_with_tolerance,
    is_close,
    is_valid_float,
    normalize_signed_zero,
    round_to_epsilon,
    sign,
)

# =============================================================================
# NaN/Inf И ЗНАКОВЫЙ НОЛЬ
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values_valid(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-0.0)
        assert is_valid_float(1e308)
        assert is_valid_float(-5e-324)

    def test_non_finite_values_invalid(self) -> None:
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


class TestNormalizeSignedZero:
    """Тесты для normalize_signed_zero"""

    def test_negative_zero_becomes_positive(self) -> None:
        result = normalize_signed_zero(-0.0)
        assert result == 0.0
        assert math.copysign(1.0, result) == 1.0

    def test_positive_zero_unchanged(self) -> None:
        assert math.copysign(1.0, normalize_signed_zero(0.0)) == 1.0

    def test_non_zero_unchanged(self) -> None:
        assert normalize_signed_zero(-1.5) == -1.5
        assert normalize_signed_zero(5e-324) == 5e-324


# =============================================================================
# ТОЧНЫЕ СРАВНЕНИЯ
# =============================================================================


class TestSign:
    """Тесты для sign"""

    def test_sign_values(self) -> None:
        assert sign(-3.5) == -1
        assert sign(0.0) == 0
        assert sign(-0.0) == 0
        assert sign(2.0) == 1

    def test_no_tolerance(self) -> None:
        """Даже субнормальные значения имеют знак"""
        assert sign(5e-324) == 1
        assert sign(-5e-324) == -1


class TestCompareFloats:
    """Тесты для compare_floats"""

    def test_ordering(self) -> None:
        assert compare_floats(1.0, 2.0) == -1
        assert compare_floats(2.0, 1.0) == 1
        assert compare_floats(1.0, 1.0) == 0

    def test_signed_zeros_equal(self) -> None:
        assert compare_floats(-0.0, 0.0) == 0

    def test_no_tolerance(self) -> None:
        assert compare_floats(1.0, 1.0 + 1e-15) == -1


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


class TestIsClose:
    """Тесты для is_close"""

    def test_defaults(self) -> None:
        assert EPS_FLOAT_COMPARE_REL == 1e-9
        assert EPS_FLOAT_COMPARE_ABS == 1e-12

    def test_close_values(self) -> None:
        assert is_close(1.0, 1.0 + 1e-10)
        assert is_close(0.0, 1e-13)
        assert is_close(1e10, 1e10 + 1.0)

    def test_distant_values(self) -> None:
        assert not is_close(1.0, 1.1)
        assert not is_close(0.0, 1e-6)

    def test_custom_tolerance(self) -> None:
        assert is_close(1.0, 1.05, rel_tol=0.1)
        assert is_close(0.0, 0.5, abs_tol=1.0)


class TestCompareWithTolerance:
    """Тесты для compare_with_tolerance"""

    def test_basic(self) -> None:
        assert compare_with_tolerance(1.0, 2.0) == -1
        assert compare_with_tolerance(2.0, 1.0) == 1
        assert compare_with_tolerance(1.0, 1.0 + 1e-13) == 0

    def test_custom_tolerance(self) -> None:
        assert compare_with_tolerance(1.0, 1.4, tol=0.5) == 0
        assert compare_with_tolerance(1.0, 1.6, tol=0.5) == -1


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


class TestRoundToEpsilon:
    """Тесты для round_to_epsilon"""

    def test_rounds_to_step(self) -> None:
        assert round_to_epsilon(1.23456789, 0.01) == pytest.approx(1.23)
        assert round_to_epsilon(0.9999996, 1e-6) == pytest.approx(1.0)
        assert round_to_epsilon(0.9999994, 1e-6) == pytest.approx(0.999999)

    def test_half_away_from_zero(self) -> None:
        assert round_to_epsilon(125.0, 10.0) == 130.0
        assert round_to_epsilon(-125.0, 10.0) == -130.0

    def test_power_of_two_step_exact(self) -> None:
        eps = 2.0**-20
        assert round_to_epsilon(2.0 + 1e-13, eps) == 2.0

    def test_negative_zero_normalized(self) -> None:
        """Округление малого отрицательного значения даёт +0.0"""
        result = round_to_epsilon(-0.4, 1.0)
        assert result == 0.0
        assert math.copysign(1.0, result) == 1.0

    def test_invalid_eps_raises(self) -> None:
        with pytest.raises(ValueError, match="eps must be positive"):
            round_to_epsilon(1.0, 0.0)

        with pytest.raises(ValueError, match="eps must be positive"):
            round_to_epsilon(1.0, -1e-6)
