"""
Numerical Safeguards — Примитивы точной и допусковой арифметики

Модуль собирает float-примитивы, на которых построены геометрические
предикаты:
- Проверка конечности (NaN/Inf) и нормализация знакового нуля
- Точные трёхзначные сравнения (sign, compare_floats) без epsilon
- Допусковые сравнения и округление для вызывающего кода

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ядро (ориентация, порядки) сравнивает float ТОЧНО, без толерантности
2. Толерантность применяется только явно, через is_close / compare_with_tolerance
3. -0.0 и +0.0 после нормализации неразличимы (одинаковый hash и repr)
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close для относительных сравнений
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Используется в is_close и compare_with_tolerance
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf И ЗНАКОВЫЙ НОЛЬ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def normalize_signed_zero(value: float) -> float:
    """
    Замена -0.0 на +0.0.

    Нужна, чтобы точки с математически равными координатами имели
    одинаковое битовое представление, repr и поведение atan2.

    Examples:
        >>> normalize_signed_zero(-0.0)
        0.0
        >>> normalize_signed_zero(-1.5)
        -1.5
    """
    if value == 0.0:
        return 0.0
    return value


# =============================================================================
# ТОЧНЫЕ СРАВНЕНИЯ
# =============================================================================


def sign(value: float) -> int:
    """
    Знак значения без толерантности: -1, 0 или +1.

    Examples:
        >>> sign(-3.5)
        -1
        >>> sign(0.0)
        0
        >>> sign(1e-300)
        1
    """
    if value < 0:
        return -1
    elif value > 0:
        return +1
    else:
        return 0


def compare_floats(a: float, b: float) -> int:
    """
    Точное трёхзначное сравнение двух float.

    Returns:
        -1 если a < b, +1 если a > b, 0 если равны
    """
    if a < b:
        return -1
    if a > b:
        return +1
    return 0


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Реализация Python's math.isclose с настраиваемыми толерантностями.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def compare_with_tolerance(
    a: float,
    b: float,
    tol: float = EPS_FLOAT_COMPARE_ABS,
) -> int:
    """
    Сравнение двух float с учётом толерантности.

    Args:
        a: Первое значение
        b: Второе значение
        tol: Абсолютная толерантность (default: EPS_FLOAT_COMPARE_ABS)

    Returns:
        -1 если a < b (с учётом tol)
         0 если a ≈ b (в пределах tol)
        +1 если a > b (с учётом tol)

    Examples:
        >>> compare_with_tolerance(1.0, 2.0)
        -1
        >>> compare_with_tolerance(1.0, 1.0 + 1e-13)
        0
    """
    diff = a - b

    if abs(diff) <= tol:
        return 0
    elif diff < 0:
        return -1
    else:
        return 1


# =============================================================================
# EPSILON-ОКРУГЛЕНИЕ
# =============================================================================


def round_to_epsilon(value: float, eps: float) -> float:
    """
    Округление значения до ближайшего кратного epsilon.

    Используется для предварительного округления координат перед
    точными предикатами (turn_direction и порядки).
    Округление "half away from zero".

    Args:
        value: Значение для округления
        eps: Шаг квантования

    Returns:
        Округлённое значение (знаковый ноль нормализован)

    Raises:
        ValueError: Если eps <= 0

    Examples:
        >>> round_to_epsilon(1.23456789, 0.01)
        1.23
        >>> round_to_epsilon(125.0, 10.0)
        130.0
    """
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")

    ratio = value / eps

    if ratio >= 0:
        steps = math.floor(ratio + 0.5)
    else:
        steps = math.ceil(ratio - 0.5)

    return normalize_signed_zero(steps * eps)
