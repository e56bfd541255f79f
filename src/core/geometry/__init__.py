"""
Geometry — предикаты ориентации и порядки на точках плоскости.
"""

from src.core.geometry.orderings import (
    R_ORDER,
    X_ORDER,
    Y_ORDER,
    Ordering,
    OrderingKind,
    atan2_order,
    compare_by_radius,
    compare_by_x,
    compare_by_y_then_x,
    distance_order,
    polar_order,
)
from src.core.geometry.orientation import Turn, signed_area2, turn_direction

__all__ = [
    # Orientation
    "Turn",
    "signed_area2",
    "turn_direction",
    # Orderings — Types
    "Ordering",
    "OrderingKind",
    # Orderings — Static orderings
    "X_ORDER",
    "Y_ORDER",
    "R_ORDER",
    "compare_by_x",
    "compare_by_y_then_x",
    "compare_by_radius",
    # Orderings — Relative orderings
    "polar_order",
    "atan2_order",
    "distance_order",
]
