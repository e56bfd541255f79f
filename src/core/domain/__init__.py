"""
Domain models and value objects.

Contains the fundamental planar value type Point2D.
"""

from src.core.domain.point2d import InvalidCoordinate, Point2D, points_from_pairs

__all__ = [
    # Point2D model
    "Point2D",
    "InvalidCoordinate",
    "points_from_pairs",
]
