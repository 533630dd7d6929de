"""
Canvas data models for Block Painter.

This module defines the color and block structures a picture is made of.

Classes:
    Color: RGBA color with a Euclidean RGB distance
    LeafBlock: A rectangle filled with one color
    CompositeBlock: A rectangle made of colored leaf children

Type Aliases:
    RgbaColor: A tuple of 4 integers representing RGBA color values (0-255)
    Block: Either a LeafBlock or a CompositeBlock
"""

import math
from dataclasses import dataclass, replace
from typing import NamedTuple, Tuple, Union

from BP_Libs.CanvasLib.errors import MalformedPictureError
from BP_Libs.GeometryLib.rectangle import Rect

RgbaColor = Tuple[int, int, int, int]


class Color(NamedTuple):
    r: int
    g: int
    b: int
    a: int = 255

    def distance(self, other: RgbaColor) -> float:
        """Euclidean distance over red, green and blue; alpha is ignored."""
        dr = self.r - other[0]
        dg = self.g - other[1]
        db = self.b - other[2]
        return math.sqrt(dr * dr + dg * dg + db * db)

    @classmethod
    def from_sequence(cls, values) -> "Color":
        """
        Build a color from four channel values, validating their range.

        Raises:
            ValueError: If there are not exactly 4 channels or one is outside 0-255
        """
        channels = [int(value) for value in values]
        if len(channels) != 4:
            raise ValueError(f"Color needs 4 channels, got {len(channels)}")
        for channel in channels:
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range 0-255: {channel}")
        return cls(*channels)


WHITE = Color(255, 255, 255, 255)
BLACK = Color(0, 0, 0, 255)


@dataclass(frozen=True)
class LeafBlock:
    shape: Rect
    color: Color

    def with_shape(self, shape: Rect) -> "LeafBlock":
        return replace(self, shape=shape)


@dataclass(frozen=True)
class CompositeBlock:
    """Block whose area is split between leaf children.

    Only one level of nesting is supported: every child must be a LeafBlock.

    Attributes:
        shape: Outer rectangle of the block
        children: Leaf blocks tiling the outer rectangle
    """
    shape: Rect
    children: Tuple[LeafBlock, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))
        for child in self.children:
            if not isinstance(child, LeafBlock):
                raise MalformedPictureError(
                    f"Nested composite blocks are not supported: {child!r}"
                )

    def with_shape(self, shape: Rect) -> "CompositeBlock":
        """Move the block to a same-sized shape, carrying the children along."""
        dx = shape.left - self.shape.left
        dy = shape.bottom - self.shape.bottom
        children = tuple(child.with_shape(child.shape.translate(dx, dy)) for child in self.children)
        return CompositeBlock(shape, children)

    def color_at(self, point: Tuple[int, int]) -> Color:
        for child in self.children:
            if child.shape.contains(point):
                return child.color
        raise MalformedPictureError(f"No child of composite {self.shape} contains {tuple(point)}")


Block = Union[LeafBlock, CompositeBlock]


def round_half_up(value: float) -> int:
    """Round a non-negative value to the nearest integer, halves upwards."""
    return int(math.floor(value + 0.5))
