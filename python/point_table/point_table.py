from __future__ import annotations

import heapq
from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional, Sequence

import numpy as np
import numpy.typing as npt

from point_table.errors import InvalidArgument
from point_table.geometry import Point, Rectangle, require_rect
from point_table.logger import logger


class NearestQueue:
    """Max-oriented priority queue which keeps the k points closest to a target.

    The farthest point is on top, so that it is evicted first when the queue
    grows beyond k. Among equally far points, the one offered last is evicted.
    """

    def __init__(self, target: Point, k: int):
        self.target = target
        self.k = k
        self._heap: list[tuple[float, int, Point]] = []
        self._count = 0

    def __len__(self) -> int:
        return len(self._heap)

    def is_full(self) -> bool:
        return len(self._heap) >= self.k

    def max_distance_squared(self) -> float:
        """Squared distance of the k-th best point, or infinity until queue is full."""
        if not self.is_full() or not self._heap:
            return float("inf")
        return -self._heap[0][0]

    def offer(self, p: Point):
        self._count += 1
        heapq.heappush(self._heap, (-p.distance_squared_to(self.target), -self._count, p))
        if len(self._heap) > self.k:
            heapq.heappop(self._heap)

    def points(self) -> list[Point]:
        """Returns queued points from the closest to the farthest."""
        return [item[2] for item in sorted(self._heap, key=lambda item: (-item[0], -item[1]))]


class PointTable(ABC):
    """Symbol table whose keys are points in the plane.

    Every table accepts points inside its domain only, so that the same sequence of
    puts is valid for every implementation.
    """

    def __init__(self, domain: Optional[Rectangle] = None):
        """Create empty table.

        Args:
            domain: Rectangle that every point must be inside. If not specified, unit square is used.
        """
        self.domain = Rectangle.unit() if domain is None else require_rect(domain, "domain")

    def _require_in_domain(self, p: Point):
        if not self.domain.contains(p):
            raise InvalidArgument(f"{p} is outside of domain {self.domain}")

    @classmethod
    def from_array(
        cls, points: npt.ArrayLike, values: Optional[Sequence[Any]] = None, **kwargs
    ) -> PointTable:
        """Create table from array of points.

        Args:
            points: Array like with shape (n, 2).
            values: Values to associate with points. If not specified, row index is used.
            kwargs: Keyword arguments passed to constructor.

        Returns:
            Created table. Later rows overwrite earlier rows at the same point.
        """
        points_array = np.asarray(points, dtype=float)
        if points_array.size == 0:
            points_array = points_array.reshape(0, 2)
        if points_array.ndim != 2 or points_array.shape[1] != 2:
            raise InvalidArgument(f"points must have shape (n, 2), got {points_array.shape}")
        if values is not None and len(values) != len(points_array):
            raise InvalidArgument(
                f"{len(values)} values are given for {len(points_array)} points"
            )

        table = cls(**kwargs)
        for i, (x, y) in enumerate(points_array.tolist()):
            table.put(Point(x, y), i if values is None else values[i])

        logger.debug("Loaded %d points into %s", len(points_array), cls.__name__)
        return table

    def is_empty(self) -> bool:
        return self.size() == 0

    @abstractmethod
    def size(self) -> int:
        """Returns number of points in table."""

    def __len__(self) -> int:
        return self.size()

    @abstractmethod
    def put(self, p: Point, value: Any):
        """Associate value with point. Value at existing point is overwritten."""

    @abstractmethod
    def get(self, p: Point) -> Optional[Any]:
        """Returns value associated with point, or None."""

    def contains(self, p: Point) -> bool:
        return self.get(p) is not None

    def __contains__(self, p: Point) -> bool:
        return self.contains(p)

    @abstractmethod
    def points(self) -> Iterable[Point]:
        """Returns all points in table."""

    def __iter__(self):
        return iter(self.points())

    def to_array(self) -> npt.NDArray:
        return np.array([[p.x, p.y] for p in self.points()], dtype=float).reshape(-1, 2)

    @abstractmethod
    def range(self, rect: Rectangle) -> list[Point]:
        """Returns points inside rectangle, including its boundary."""

    @abstractmethod
    def nearest(self, p: Point) -> Optional[Point]:
        """Returns point different from and closest to p, or None."""

    @abstractmethod
    def nearest_k(self, p: Point, k: int) -> list[Point]:
        """Returns up to k points different from and closest to p."""

    @abstractmethod
    def within(self, p: Point, radius: float) -> list[Point]:
        """Returns points whose distance to p is radius at most."""
