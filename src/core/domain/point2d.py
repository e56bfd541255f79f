"""
Point2D — Неизменяемая точка плоскости

Immutable Pydantic модель точки с конечными вещественными координатами.

ИНВАРИАНТЫ:
1. Координаты конечны: NaN/±Inf отклоняются при создании (InvalidCoordinate)
2. -0.0 нормализуется в +0.0 по каждой оси независимо, поэтому
   математически равные точки равны и имеют одинаковый hash
3. После создания точка не изменяется (frozen=True)

Естественный порядок точек: по y, при равенстве по x (Y_ORDER).
"""

import math
from typing import Any, ClassVar, Iterable, Mapping, Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from src.core.contracts.validators import validate_point2d
from src.core.geometry.orderings import (
    R_ORDER,
    X_ORDER,
    Y_ORDER,
    Ordering,
    atan2_order,
    compare_by_y_then_x,
    distance_order,
    polar_order,
)
from src.core.geometry.orientation import Turn, signed_area2, turn_direction
from src.core.math.numerical_safeguards import is_valid_float, normalize_signed_zero
from src.core.rendering.renderer import Renderer


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidCoordinate(Exception):
    """
    Координата точки не является конечным числом (NaN или ±Inf).

    Возникает только при создании точки: созданная точка всегда валидна.
    Ошибка не транзиентная: повтор с теми же данными не поможет.
    """

    pass


# =============================================================================
# POINT2D MODEL
# =============================================================================


class Point2D(BaseModel):
    """
    Точка плоскости (x, y).

    Immutable модель (frozen=True). Создание: Point2D(x, y) или
    Point2D(x=..., y=...), а также Point2D.model_validate(dict).
    """

    x: float = Field(..., strict=True, description="x-координата (конечная, без -0.0)")
    y: float = Field(..., strict=True, description="y-координата (конечная, без -0.0)")

    model_config = {"frozen": True, "extra": "forbid"}  # Immutable

    # Статические порядки
    X_ORDER: ClassVar[Ordering] = X_ORDER
    Y_ORDER: ClassVar[Ordering] = Y_ORDER
    R_ORDER: ClassVar[Ordering] = R_ORDER

    def __init__(self, x: float, y: float, **data: Any) -> None:
        super().__init__(x=x, y=y, **data)

    @field_validator("x", "y")
    @classmethod
    def validate_finite(cls, v: float, info: ValidationInfo) -> float:
        """
        Проверка конечности и нормализация знакового нуля.

        InvalidCoordinate не является ValueError, поэтому pydantic
        пробрасывает его без обёртки в ValidationError.
        """
        if not is_valid_float(v):
            raise InvalidCoordinate(f"Coordinate {info.field_name} must be finite, got {v}")
        return normalize_signed_zero(v)

    def model_copy(self, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False) -> "Point2D":
        """
        Копия точки с заменой координат.

        BaseModel.model_copy не валидирует update, поэтому новая точка
        собирается через конструктор: те же проверки, что и при создании.

        Raises:
            InvalidCoordinate: Если новая координата NaN или ±Inf
            ValidationError: Если update содержит нечисловое или лишнее поле
        """
        if not update:
            return super().model_copy(deep=deep)
        return type(self)(**{**self.model_dump(), **update})

    # -------------------------------------------------------------------------
    # Полярные координаты
    # -------------------------------------------------------------------------

    def radius(self) -> float:
        """
        Полярный радиус: sqrt(x² + y²).

        Returns:
            Расстояние до начала координат (0 только в начале координат)
        """
        return math.sqrt(self.x * self.x + self.y * self.y)

    def angle(self) -> float:
        """
        Полярный угол: atan2(y, x) в диапазоне (-π, π].

        Для начала координат возвращает 0 (соглашение atan2(0, 0)).
        """
        return math.atan2(self.y, self.x)

    # -------------------------------------------------------------------------
    # Расстояния
    # -------------------------------------------------------------------------

    def distance_to(self, other: "Point2D") -> float:
        """Евклидово расстояние до other"""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def squared_distance_to(self, other: "Point2D") -> float:
        """
        Квадрат евклидова расстояния до other.

        Без sqrt: порядок по этой величине совпадает с порядком
        по distance_to.
        """
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    # -------------------------------------------------------------------------
    # Ориентация
    # -------------------------------------------------------------------------

    @staticmethod
    def turn_direction(a: "Point2D", b: "Point2D", c: "Point2D") -> Turn:
        """Направление поворота a→b→c: -1 / 0 / +1"""
        return turn_direction(a, b, c)

    @staticmethod
    def signed_area2(a: "Point2D", b: "Point2D", c: "Point2D") -> float:
        """Удвоенная знаковая площадь треугольника a-b-c"""
        return signed_area2(a, b, c)

    # -------------------------------------------------------------------------
    # Порядки относительно этой точки
    # -------------------------------------------------------------------------

    def polar_order(self) -> Ordering:
        """Порядок других точек по полярному углу [0, 2π) вокруг этой точки"""
        return polar_order(self)

    def atan2_order(self) -> Ordering:
        """Порядок других точек по atan2-углу (-π, π] вокруг этой точки"""
        return atan2_order(self)

    def distance_to_order(self) -> Ordering:
        """Порядок других точек по расстоянию до этой точки"""
        return distance_order(self)

    # -------------------------------------------------------------------------
    # Естественный порядок, равенство, hash
    # -------------------------------------------------------------------------

    def compare_to(self, other: "Point2D") -> int:
        """
        Сравнение по y, при равенстве y по x.

        Returns:
            0 тогда и только тогда, когда точки равны (==)
        """
        return compare_by_y_then_x(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return 31 * hash(self.x) + hash(self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    # -------------------------------------------------------------------------
    # Рисование
    # -------------------------------------------------------------------------

    def draw(self, renderer: Renderer) -> None:
        """Нарисовать точку на переданной поверхности"""
        renderer.point(self.x, self.y)

    def draw_to(self, that: "Point2D", renderer: Renderer) -> None:
        """Нарисовать отрезок от этой точки до that"""
        renderer.line(self.x, self.y, that.x, that.y)

    # -------------------------------------------------------------------------
    # Контракт сериализации
    # -------------------------------------------------------------------------

    def to_contract(self) -> dict[str, float]:
        """Сериализованная форма {"x": ..., "y": ...} (схема point2d)"""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_contract(cls, data: Mapping[str, Any]) -> "Point2D":
        """
        Создание точки из сериализованной формы.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме point2d
            InvalidCoordinate: Если координата NaN или ±Inf
        """
        validate_point2d(dict(data))
        return cls(data["x"], data["y"])


def points_from_pairs(pairs: Iterable[tuple[float, float]]) -> list[Point2D]:
    """Создание списка точек из пар (x, y)"""
    return [Point2D(x, y) for x, y in pairs]
