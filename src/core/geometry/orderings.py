"""
Orderings — Порядки на множестве точек плоскости

Шесть режимов сравнения двух точек (OrderingKind):
- BY_X              — по x (НЕ полный порядок: равные x дают 0)
- BY_Y              — по y, при равенстве по x (естественный порядок Point2D)
- BY_RADIUS         — по x² + y² (монотонно с полярным радиусом, без sqrt)
- POLAR             — по полярному углу вокруг опорной точки, [0, 2π)
- ATAN2             — по atan2-углу вокруг опорной точки, (-π, π]
- DISTANCE          — по квадрату расстояния до опорной точки

POLAR, ATAN2 и DISTANCE привязаны к опорной точке (reference),
остальные статические. Все компараторы чистые: без состояния,
без побочных эффектов, безопасны для параллельной сортировки.

POLAR не вычисляет угол: верхняя полуплоскость (dy >= 0) идёт раньше
нижней (dy < 0), внутри полуплоскости порядок определяет тест ориентации,
горизонталь через опорную точку разбирается по знаку dx. Точки,
коллинеарные с опорной (в одном направлении), равны: дополнительного
сравнения по расстоянию нет.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from functools import cmp_to_key
from typing import TYPE_CHECKING, Any, Callable, Iterable, Optional

from src.core.geometry.orientation import turn_direction
from src.core.math.numerical_safeguards import compare_floats

if TYPE_CHECKING:
    from src.core.domain.point2d import Point2D


# =============================================================================
# ENUMS
# =============================================================================


class OrderingKind(str, Enum):
    """Режим сравнения точек"""

    BY_X = "by_x"
    BY_Y = "by_y"
    BY_RADIUS = "by_radius"
    POLAR = "polar"
    ATAN2 = "atan2"
    DISTANCE = "distance"

    @property
    def is_relative(self) -> bool:
        """Требует ли режим опорную точку"""
        return self in (OrderingKind.POLAR, OrderingKind.ATAN2, OrderingKind.DISTANCE)


# =============================================================================
# СТАТИЧЕСКИЕ КОМПАРАТОРЫ
# =============================================================================


def compare_by_x(p: Point2D, q: Point2D) -> int:
    """Сравнение только по x-координате"""
    return compare_floats(p.x, q.x)


def compare_by_y_then_x(p: Point2D, q: Point2D) -> int:
    """Сравнение по y, при равенстве y по x"""
    result = compare_floats(p.y, q.y)
    if result != 0:
        return result
    return compare_floats(p.x, q.x)


def compare_by_radius(p: Point2D, q: Point2D) -> int:
    """Сравнение по квадрату полярного радиуса"""
    delta = (p.x * p.x + p.y * p.y) - (q.x * q.x + q.y * q.y)
    return compare_floats(delta, 0.0)


# =============================================================================
# КОМПАРАТОРЫ ОТНОСИТЕЛЬНО ОПОРНОЙ ТОЧКИ
# =============================================================================


def _angle_toward(origin: Point2D, target: Point2D) -> float:
    """Угол направления origin→target в диапазоне (-π, π]"""
    dx = target.x - origin.x
    dy = target.y - origin.y
    return math.atan2(dy, dx)


def _compare_polar(origin: Point2D, q1: Point2D, q2: Point2D) -> int:
    dx1 = q1.x - origin.x
    dy1 = q1.y - origin.y
    dx2 = q2.x - origin.x
    dy2 = q2.y - origin.y

    if dy1 >= 0 and dy2 < 0:  # q1 выше, q2 ниже
        return -1
    elif dy2 >= 0 and dy1 < 0:  # q1 ниже, q2 выше
        return +1
    elif dy1 == 0 and dy2 == 0:  # обе на горизонтали через origin
        if dx1 >= 0 and dx2 < 0:
            return -1
        elif dx2 >= 0 and dx1 < 0:
            return +1
        else:
            return 0
    else:
        # Обе в одной полуплоскости: поворот против часовой = рост угла
        return -int(turn_direction(origin, q1, q2))


def _compare_atan2(origin: Point2D, q1: Point2D, q2: Point2D) -> int:
    return compare_floats(_angle_toward(origin, q1), _angle_toward(origin, q2))


def _compare_distance(origin: Point2D, q1: Point2D, q2: Point2D) -> int:
    return compare_floats(origin.squared_distance_to(q1), origin.squared_distance_to(q2))


_STATIC_COMPARATORS: dict[OrderingKind, Callable[[Any, Any], int]] = {
    OrderingKind.BY_X: compare_by_x,
    OrderingKind.BY_Y: compare_by_y_then_x,
    OrderingKind.BY_RADIUS: compare_by_radius,
}

_RELATIVE_COMPARATORS: dict[OrderingKind, Callable[[Any, Any, Any], int]] = {
    OrderingKind.POLAR: _compare_polar,
    OrderingKind.ATAN2: _compare_atan2,
    OrderingKind.DISTANCE: _compare_distance,
}


# =============================================================================
# ORDERING
# =============================================================================


@dataclass(frozen=True)
class Ordering:
    """
    Порядок на точках: режим + опционально опорная точка.

    Immutable (frozen=True). Относительные режимы (POLAR, ATAN2, DISTANCE)
    требуют reference, статические его запрещают.

    Использование:
        sorted(points, key=ordering.key)
        ordering.sort(points)
        ordering.compare(p, q)  # -1 / 0 / +1
    """

    kind: OrderingKind
    reference: Optional[Point2D] = None

    def __post_init__(self) -> None:
        if self.kind.is_relative and self.reference is None:
            raise ValueError(f"{self.kind.value} ordering requires a reference point")
        if not self.kind.is_relative and self.reference is not None:
            raise ValueError(f"{self.kind.value} ordering does not take a reference point")

    def compare(self, p: Point2D, q: Point2D) -> int:
        """
        Трёхзначное сравнение двух точек.

        Returns:
            -1 если p < q, 0 если равны в этом порядке, +1 если p > q
        """
        if self.kind.is_relative:
            return _RELATIVE_COMPARATORS[self.kind](self.reference, p, q)
        return _STATIC_COMPARATORS[self.kind](p, q)

    __call__ = compare

    @property
    def key(self) -> Callable[[Point2D], Any]:
        """Ключ для sorted()/list.sort()/min()/max()"""
        return cmp_to_key(self.compare)

    def sort(self, points: Iterable[Point2D]) -> list[Point2D]:
        """
        Стабильная сортировка точек в этом порядке.

        Returns:
            Новый список; исходная последовательность не изменяется
        """
        return sorted(points, key=self.key)


# Статические порядки
X_ORDER: Ordering = Ordering(OrderingKind.BY_X)
Y_ORDER: Ordering = Ordering(OrderingKind.BY_Y)
R_ORDER: Ordering = Ordering(OrderingKind.BY_RADIUS)


def polar_order(reference: Point2D) -> Ordering:
    """Порядок по полярному углу [0, 2π) вокруг reference"""
    return Ordering(OrderingKind.POLAR, reference)


def atan2_order(reference: Point2D) -> Ordering:
    """Порядок по atan2-углу (-π, π] вокруг reference"""
    return Ordering(OrderingKind.ATAN2, reference)


def distance_order(reference: Point2D) -> Ordering:
    """Порядок по расстоянию до reference"""
    return Ordering(OrderingKind.DISTANCE, reference)
