"""
Renderer — Интерфейс поверхности рисования

Point2D не держит глобального холста: поверхность передаётся явно
в draw()/draw_to(). Любой объект с методами point() и line() подходит
(структурная типизация через Protocol).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, runtime_checkable


@runtime_checkable
class Renderer(Protocol):
    """Поверхность, принимающая команды рисования точки и отрезка"""

    def point(self, x: float, y: float) -> None:
        """Нарисовать точку (x, y)"""
        ...

    def line(self, x0: float, y0: float, x1: float, y1: float) -> None:
        """Нарисовать отрезок (x0, y0)-(x1, y1)"""
        ...


class DrawCommandType(str, Enum):
    """Тип команды рисования"""

    POINT = "point"
    LINE = "line"


@dataclass(frozen=True)
class DrawCommand:
    """Записанная команда рисования"""

    kind: DrawCommandType
    coords: tuple[float, ...]


@dataclass
class RecordingRenderer:
    """
    Renderer, который только запоминает команды.

    Используется для headless-вывода и в тестах.
    """

    commands: list[DrawCommand] = field(default_factory=list)

    def point(self, x: float, y: float) -> None:
        self.commands.append(DrawCommand(DrawCommandType.POINT, (x, y)))

    def line(self, x0: float, y0: float, x1: float, y1: float) -> None:
        self.commands.append(DrawCommand(DrawCommandType.LINE, (x0, y0, x1, y1)))

    def clear(self) -> None:
        self.commands.clear()
