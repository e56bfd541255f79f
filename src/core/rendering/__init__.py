"""
Rendering — внешний коллаборатор для визуализации точек.
"""

from src.core.rendering.renderer import (
    DrawCommand,
    DrawCommandType,
    RecordingRenderer,
    Renderer,
)

__all__ = [
    "Renderer",
    "RecordingRenderer",
    "DrawCommand",
    "DrawCommandType",
]
