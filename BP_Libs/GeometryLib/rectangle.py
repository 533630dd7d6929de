"""
Axis-aligned rectangle geometry for Block Painter.

Rectangles are half-open on their upper bounds: a point (x, y) lies inside
iff left <= x < right and bottom <= y < top. The canvas origin is the
bottom-left corner.

Classes:
    Point: Integer canvas coordinate
    Rect: Immutable rectangle with cut, intersect and merge operations
    GeometryError: Raised when a cut does not lie strictly inside a rectangle
"""

from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Tuple


class GeometryError(ValueError):
    """A cut coordinate or point does not lie strictly inside a rectangle."""


class Point(NamedTuple):
    x: int
    y: int


@dataclass(frozen=True)
class Rect:
    """Rectangle with integer bounds and positive width and height.

    Attributes:
        left: Lowest x covered
        bottom: Lowest y covered
        right: First x past the rectangle
        top: First y past the rectangle
    """
    left: int
    bottom: int
    right: int
    top: int

    def __post_init__(self) -> None:
        if self.left >= self.right or self.bottom >= self.top:
            raise GeometryError(f"Degenerate rectangle: {self}")

    @classmethod
    def square(cls, size: int) -> "Rect":
        return cls(0, 0, size, size)

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.top - self.bottom

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def bottom_left(self) -> Point:
        return Point(self.left, self.bottom)

    @property
    def top_right(self) -> Point:
        return Point(self.right, self.top)

    def translate(self, dx: int, dy: int) -> "Rect":
        return Rect(self.left + dx, self.bottom + dy, self.right + dx, self.top + dy)

    def contains(self, point: Tuple[int, int]) -> bool:
        x, y = point
        return self.left <= x < self.right and self.bottom <= y < self.top

    def point_cut(self, point: Tuple[int, int]) -> List["Rect"]:
        """
        Split the rectangle into four quadrants at an interior point.

        Args:
            point: (x, y) strictly inside the rectangle

        Returns:
            Quadrants in order bottom-left, bottom-right, top-right, top-left

        Raises:
            GeometryError: If the point is not strictly interior
        """
        x, y = point
        if not (self.left < x < self.right and self.bottom < y < self.top):
            raise GeometryError(f"Failed to point cut {self}: does not contain ({x}, {y})")
        return [
            Rect(self.left, self.bottom, x, y),
            Rect(x, self.bottom, self.right, y),
            Rect(x, y, self.right, self.top),
            Rect(self.left, y, x, self.top),
        ]

    def vertical_cut(self, x: int) -> List["Rect"]:
        """Split at x into the left then the right part."""
        if not (self.left < x < self.right):
            raise GeometryError(f"Failed to vertical cut {self}: does not contain x={x}")
        return [
            Rect(self.left, self.bottom, x, self.top),
            Rect(x, self.bottom, self.right, self.top),
        ]

    def horizontal_cut(self, y: int) -> List["Rect"]:
        """Split at y into the bottom then the top part."""
        if not (self.bottom < y < self.top):
            raise GeometryError(f"Failed to horizontal cut {self}: does not contain y={y}")
        return [
            Rect(self.left, self.bottom, self.right, y),
            Rect(self.left, y, self.right, self.top),
        ]

    def intersect(self, other: "Rect") -> Optional["Rect"]:
        """Overlapping rectangle, or None when the two only touch or are apart."""
        if (
            self.right <= other.left
            or other.right <= self.left
            or self.top <= other.bottom
            or other.top <= self.bottom
        ):
            return None
        return Rect(
            max(self.left, other.left),
            max(self.bottom, other.bottom),
            min(self.right, other.right),
            min(self.top, other.top),
        )

    def is_same_size(self, other: "Rect") -> bool:
        return self.width == other.width and self.height == other.height

    def merge(self, other: "Rect") -> Optional["Rect"]:
        """
        Union of two rectangles sharing a full edge.

        Args:
            other: Rectangle stacked on or beside this one

        Returns:
            The union rectangle, or None if no full edge is shared
        """
        same_columns = self.left == other.left and self.right == other.right
        same_rows = self.bottom == other.bottom and self.top == other.top

        # self above other
        if same_columns and self.bottom == other.top:
            return Rect(self.left, other.bottom, self.right, self.top)
        # other above self
        if same_columns and other.bottom == self.top:
            return Rect(self.left, self.bottom, self.right, other.top)
        # self left of other
        if same_rows and self.right == other.left:
            return Rect(self.left, self.bottom, other.right, self.top)
        # other left of self
        if same_rows and other.right == self.left:
            return Rect(other.left, self.bottom, self.right, self.top)
        return None
