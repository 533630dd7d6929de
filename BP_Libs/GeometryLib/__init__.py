"""
GeometryLib - Rectangle geometry

This module provides the axis-aligned rectangle type and the cut,
intersect and merge algebra that block shapes are built from.
"""

from BP_Libs.GeometryLib.rectangle import GeometryError, Point, Rect

__all__ = [
    "GeometryError",
    "Point",
    "Rect",
]
