"""Geometric pair types: Size, Point, Vector."""

from pairmath.geometry.models import Point, Size, Vector

__all__ = [
    "Size",
    "Point",
    "Vector",
]
