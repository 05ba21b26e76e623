from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from point_table.errors import InvalidArgument, require, require_finite


@dataclass(frozen=True, order=True)
class Point:
    x: float
    y: float

    def __post_init__(self):
        # Adding 0.0 turns -0.0 into 0.0, so that equal points hash equally.
        object.__setattr__(self, "x", require_finite(self.x, "x") + 0.0)
        object.__setattr__(self, "y", require_finite(self.y, "y") + 0.0)

    def distance_squared_to(self, other: Point) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def distance_to(self, other: Point) -> float:
        return self.distance_squared_to(other) ** 0.5

    def coord(self, x_axis: bool) -> float:
        """Returns the coordinate on the specified axis.

        Args:
            x_axis: If True, x coordinate. Otherwise, y coordinate.
        """
        return self.x if x_axis else self.y

    def to_array(self) -> npt.NDArray:
        return np.array([self.x, self.y])

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class Rectangle:
    xmin: float
    ymin: float
    xmax: float
    ymax: float

    def __post_init__(self):
        for name in ("xmin", "ymin", "xmax", "ymax"):
            object.__setattr__(self, name, require_finite(getattr(self, name), name))
        if self.xmin > self.xmax:
            raise InvalidArgument(f"xmin {self.xmin} is greater than xmax {self.xmax}")
        if self.ymin > self.ymax:
            raise InvalidArgument(f"ymin {self.ymin} is greater than ymax {self.ymax}")

    @staticmethod
    def unit() -> Rectangle:
        return Rectangle(0.0, 0.0, 1.0, 1.0)

    def contains(self, p: Point) -> bool:
        return self.xmin <= p.x <= self.xmax and self.ymin <= p.y <= self.ymax

    def intersects(self, other: Rectangle) -> bool:
        return (
            self.xmax >= other.xmin
            and self.ymax >= other.ymin
            and other.xmax >= self.xmin
            and other.ymax >= self.ymin
        )

    def distance_squared_to(self, p: Point) -> float:
        """Squared distance from point to the closest point of this rectangle.

        Args:
            p: Point to measure.

        Returns:
            0 if point is inside rectangle. Otherwise, squared distance to the
            nearest edge or corner.
        """
        dx = 0.0
        dy = 0.0
        if p.x < self.xmin:
            dx = p.x - self.xmin
        elif p.x > self.xmax:
            dx = p.x - self.xmax
        if p.y < self.ymin:
            dy = p.y - self.ymin
        elif p.y > self.ymax:
            dy = p.y - self.ymax
        return dx * dx + dy * dy

    def distance_to(self, p: Point) -> float:
        return self.distance_squared_to(p) ** 0.5

    def split(self, at: float, x_axis: bool) -> tuple[Rectangle, Rectangle]:
        """Clip rectangle at specified coordinate.

        Args:
            at: Coordinate of the splitting line.
            x_axis: If True, split with vertical line x = at. Otherwise, with horizontal line y = at.

        Returns:
            Tuple to the rectangle below the line (left/bottom) and the one above (right/top).
        """
        if x_axis:
            return (
                Rectangle(self.xmin, self.ymin, at, self.ymax),
                Rectangle(at, self.ymin, self.xmax, self.ymax),
            )
        return (
            Rectangle(self.xmin, self.ymin, self.xmax, at),
            Rectangle(self.xmin, at, self.xmax, self.ymax),
        )

    def __str__(self) -> str:
        return f"[{self.xmin}, {self.xmax}] x [{self.ymin}, {self.ymax}]"


def require_point(p, name: str = "p") -> Point:
    require(p, name)
    if not isinstance(p, Point):
        raise InvalidArgument(f"{name} is not a Point: {p!r}")
    return p


def require_rect(rect, name: str = "rect") -> Rectangle:
    require(rect, name)
    if not isinstance(rect, Rectangle):
        raise InvalidArgument(f"{name} is not a Rectangle: {rect!r}")
    return rect


def require_k(k) -> int:
    require(k, "k")
    if isinstance(k, bool) or not isinstance(k, (int, np.integer)):
        raise InvalidArgument(f"k is not an integer: {k!r}")
    if k < 0:
        raise InvalidArgument(f"k is negative: {k}")
    return int(k)


def require_radius(radius) -> float:
    radius = require_finite(radius, "radius")
    if radius < 0:
        raise InvalidArgument(f"radius is negative: {radius}")
    return radius
