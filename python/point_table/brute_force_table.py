from __future__ import annotations

from typing import Any, Optional

from point_table.errors import require
from point_table.geometry import Point, Rectangle, require_k, require_point, require_radius, require_rect
from point_table.point_table import NearestQueue, PointTable


class BruteForceTable(PointTable):
    """Point table which answers every spatial query by scanning all points.

    Points are kept in a dict and scanned in point order, i.e. ordered by x
    and then by y, independently of insertion order.
    """

    def __init__(self, domain: Optional[Rectangle] = None):
        super().__init__(domain)
        self._st: dict[Point, Any] = {}

    def size(self) -> int:
        return len(self._st)

    def put(self, p: Point, value: Any):
        require_point(p)
        require(value, "value")
        self._require_in_domain(p)
        self._st[p] = value

    def get(self, p: Point) -> Optional[Any]:
        require_point(p)
        return self._st.get(p)

    def contains(self, p: Point) -> bool:
        require_point(p)
        return p in self._st

    def points(self) -> list[Point]:
        return sorted(self._st)

    def range(self, rect: Rectangle) -> list[Point]:
        require_rect(rect)
        return [p for p in self.points() if rect.contains(p)]

    def nearest(self, p: Point) -> Optional[Point]:
        require_point(p)
        min_dist2 = float("inf")
        nearest_point = None
        for q in self.points():
            dist2 = p.distance_squared_to(q)
            if dist2 < min_dist2 and q != p:
                min_dist2 = dist2
                nearest_point = q
        return nearest_point

    def nearest_k(self, p: Point, k: int) -> list[Point]:
        require_point(p)
        k = require_k(k)
        queue = NearestQueue(p, k)
        for q in self.points():
            if q != p:
                queue.offer(q)
        return queue.points()

    def within(self, p: Point, radius: float) -> list[Point]:
        require_point(p)
        radius = require_radius(radius)
        max_dist2 = radius * radius
        return [q for q in self.points() if p.distance_squared_to(q) <= max_dist2]
