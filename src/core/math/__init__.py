"""
Core math modules

Float-примитивы для геометрических предикатов: точные сравнения,
проверка конечности, допусковые сравнения для вызывающего кода.
"""

from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Exact comparisons
    compare_floats,
    sign,
    # NaN/Inf and signed zero
    is_valid_float,
    normalize_signed_zero,
    # Epsilon comparisons
    compare_with_tolerance,
    is_close,
    # Rounding
    round_to_epsilon,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Exact comparisons
    "compare_floats",
    "sign",
    # Numerical Safeguards — NaN/Inf and signed zero
    "is_valid_float",
    "normalize_signed_zero",
    # Numerical Safeguards — Epsilon comparisons
    "compare_with_tolerance",
    "is_close",
    # Numerical Safeguards — Rounding
    "round_to_epsilon",
]
