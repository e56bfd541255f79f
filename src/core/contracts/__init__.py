"""
Contract Validation Module

Модуль для валидации JSON контрактов (сериализованных точек).
"""

from .validators import (
    ContractValidator,
    Point2DValidator,
    SchemaLoader,
    validate_point2d,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "Point2DValidator",
    # Functions
    "validate_point2d",
]
