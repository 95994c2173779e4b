"""
Axis-aligned geometry primitives for word layout.

All coordinates in pixels, origin top-left, X grows right, Y grows down
(image space), so a rectangle's top edge has the smaller Y.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from shapely.geometry import Polygon, box as shapely_box
from shapely.ops import unary_union


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Size:
    width: float
    height: float

    @property
    def is_empty(self) -> bool:
        """True when either dimension is zero or negative."""
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle anchored at its top-left corner."""

    location: Point
    size: Size

    @property
    def left(self) -> float:
        return self.location.x

    @property
    def right(self) -> float:
        return self.location.x + self.size.width

    @property
    def top(self) -> float:
        return self.location.y

    @property
    def bottom(self) -> float:
        return self.location.y + self.size.height

    @property
    def center(self) -> Point:
        return Point(
            self.location.x + self.size.width / 2,
            self.location.y + self.size.height / 2,
        )

    @property
    def box(self) -> Polygon:
        """The equivalent Shapely polygon."""
        return shapely_box(self.left, self.top, self.right, self.bottom)

    def intersects_with(self, other: Rectangle) -> bool:
        """True when the interiors overlap.

        Rectangles that only share an edge or a corner do not intersect.
        """
        return (
            other.left < self.right and self.left < other.right
            and other.top < self.bottom and self.top < other.bottom
        )

    def inflate(self, dx: float, dy: float) -> Rectangle:
        """Grow by *dx* on the left and right and by *dy* on top and bottom."""
        return Rectangle(
            Point(self.location.x - dx, self.location.y - dy),
            Size(self.size.width + 2 * dx, self.size.height + 2 * dy),
        )

    def corners_and_midpoints(self) -> list[Point]:
        """The 4 corners followed by the 4 edge midpoints."""
        x, y = self.location.x, self.location.y
        w, h = self.size.width, self.size.height
        half_w, half_h = w / 2, h / 2
        return [
            Point(x, y),
            Point(x + w, y),
            Point(x, y + h),
            Point(x + w, y + h),
            Point(x + half_w, y),
            Point(x, y + half_h),
            Point(x + w, y + half_h),
            Point(x + half_w, y + h),
        ]


def rectangle_centered_at(center: Point, size: Size) -> Rectangle:
    """Build the rectangle of *size* whose geometric center is *center*."""
    location = Point(center.x - size.width / 2, center.y - size.height / 2)
    return Rectangle(location, size)


def cloud_bounds(rectangles: Iterable[Rectangle]) -> Rectangle | None:
    """Bounding rectangle of all *rectangles*, or None when there are none."""
    boxes = [r.box for r in rectangles]
    if not boxes:
        return None
    min_x, min_y, max_x, max_y = unary_union(boxes).bounds
    return Rectangle(Point(min_x, min_y), Size(max_x - min_x, max_y - min_y))
