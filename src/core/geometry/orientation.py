"""
Orientation — Предикаты ориентации тройки точек

Классический тест ориентации через векторное произведение:

    area2 = (bx - ax) * (cy - ay) - (by - ay) * (cx - ax)

- area2 > 0 → a→b→c против часовой стрелки (COUNTERCLOCKWISE, +1)
- area2 < 0 → по часовой стрелке (CLOCKWISE, -1)
- area2 = 0 → коллинеарны (COLLINEAR, 0)

Сравнение с нулём ТОЧНОЕ, без epsilon. Вызывающий код, которому нужна
устойчивость к ошибкам округления, округляет координаты заранее
(см. round_to_epsilon).
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING

from src.core.math.numerical_safeguards import sign

if TYPE_CHECKING:
    from src.core.domain.point2d import Point2D


class Turn(IntEnum):
    """Направление поворота a→b→c (значения совпадают со знаком area2)"""

    CLOCKWISE = -1
    COLLINEAR = 0
    COUNTERCLOCKWISE = 1


def signed_area2(a: Point2D, b: Point2D, c: Point2D) -> float:
    """
    Удвоенная знаковая площадь треугольника a-b-c.

    Args:
        a: Первая точка
        b: Вторая точка
        c: Третья точка

    Returns:
        Положительное значение для обхода против часовой стрелки,
        отрицательное для обхода по часовой, 0 для коллинеарных точек
    """
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)


def turn_direction(a: Point2D, b: Point2D, c: Point2D) -> Turn:
    """
    Направление поворота a→b→c.

    Тот же знак, что и у signed_area2(a, b, c).

    Returns:
        Turn.CLOCKWISE (-1), Turn.COLLINEAR (0) или Turn.COUNTERCLOCKWISE (+1)

    Examples:
        >>> from src.core.domain.point2d import Point2D
        >>> turn_direction(Point2D(0, 0), Point2D(1, 0), Point2D(1, 1))
        <Turn.COUNTERCLOCKWISE: 1>
    """
    return Turn(sign(signed_area2(a, b, c)))
