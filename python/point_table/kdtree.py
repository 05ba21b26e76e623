from __future__ import annotations

from collections import deque
from typing import Any, Iterator, Optional

from point_table.errors import require
from point_table.geometry import Point, Rectangle, require_k, require_point, require_radius, require_rect
from point_table.kdtree_node import KdTreeNode
from point_table.logger import logger
from point_table.point_table import NearestQueue, PointTable

# NOTE:
# The x_axis flag specifies how to compare the point p with node.point.
# If True, points are compared by their x coordinates. Otherwise, by their y coordinates.
# The root compares x and the axis flips at every level. If the coordinate of p is less than
# the one of node.point, p belongs to node.left. Otherwise, it belongs to node.right.
#
# NOTE:
# The tree is as high as the number of points for sorted input, so searches walk it with
# an explicit stack instead of recursion.


class KdTree(PointTable):
    """2d-tree whose shape is decided only by insertion order.

    The first point becomes the root. The tree is never rebalanced, so inserting points
    sorted by x makes a chain as high as the number of points.
    """

    def __init__(self, domain: Optional[Rectangle] = None):
        """Create empty tree.

        Args:
            domain: Rectangle that the root bounds. If not specified, unit square is used.
        """
        super().__init__(domain)
        self._root: KdTreeNode | None = None
        self._size = 0

    def size(self) -> int:
        return self._size

    def put(self, p: Point, value: Any):
        require_point(p)
        require(value, "value")
        self._require_in_domain(p)

        if self._root is None:
            self._root = self._new_node(p, value, self.domain)
            return

        node = self._root
        x_axis = True
        while True:
            if node.point == p:
                node.value = value
                return

            at = node.point.coord(x_axis)
            if p.coord(x_axis) < at:
                if node.left is None:
                    node.left = self._new_node(p, value, node.rect.split(at, x_axis)[0])
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = self._new_node(p, value, node.rect.split(at, x_axis)[1])
                    return
                node = node.right
            x_axis = not x_axis

    def _new_node(self, p: Point, value: Any, rect: Rectangle) -> KdTreeNode:
        self._size += 1
        logger.debug("New node %s bounded by %s", p, rect)
        return KdTreeNode(point=p, value=value, rect=rect)

    def get(self, p: Point) -> Optional[Any]:
        require_point(p)
        node = self._root
        x_axis = True
        while node is not None:
            if node.point == p:
                return node.value
            node = node.left if p.coord(x_axis) < node.point.coord(x_axis) else node.right
            x_axis = not x_axis
        return None

    def points(self) -> list[Point]:
        return [point for point, _, _ in self.partitions()]

    def partitions(self) -> Iterator[tuple[Point, Rectangle, bool]]:
        """Traverse tree breadth first.

        Yields:
            Tuple to node point, node rectangle and whether node splits on x.
        """
        if self._root is None:
            return
        queue = deque([(self._root, True)])
        while queue:
            node, x_axis = queue.popleft()
            yield node.point, node.rect, x_axis
            if node.left is not None:
                queue.append((node.left, not x_axis))
            if node.right is not None:
                queue.append((node.right, not x_axis))

    def height(self) -> int:
        """Returns number of nodes on the longest path from root to leaf."""
        height = 0
        level = [self._root] if self._root is not None else []
        while level:
            height += 1
            level = [child for node in level for child in (node.left, node.right) if child is not None]
        return height

    def range(self, rect: Rectangle) -> list[Point]:
        require_rect(rect)
        found: list[Point] = []
        stack = deque([self._root] if self._root is not None else [])
        while stack:
            node = stack.pop()
            # Nothing in the subtree can be inside rect if the node rectangle does not touch rect.
            if not rect.intersects(node.rect):
                continue

            if rect.contains(node.point):
                found.append(node.point)

            for child in (node.right, node.left):
                if child is not None:
                    stack.append(child)
        return found

    def nearest(self, p: Point) -> Optional[Point]:
        require_point(p)
        champion = None
        champion_dist2 = float("inf")

        stack = deque([(self._root, True)] if self._root is not None else [])
        while stack:
            node, x_axis = stack.pop()
            if node.rect.distance_squared_to(p) >= champion_dist2:
                continue

            # p itself is never its own nearest point.
            if node.point != p:
                dist2 = node.point.distance_squared_to(p)
                if dist2 < champion_dist2:
                    champion, champion_dist2 = node.point, dist2

            KdTree._push_children(stack, node, p, x_axis)

        return champion

    def nearest_k(self, p: Point, k: int) -> list[Point]:
        require_point(p)
        k = require_k(k)
        if k == 0:
            return []

        queue = NearestQueue(p, k)
        stack = deque([(self._root, True)] if self._root is not None else [])
        while stack:
            node, x_axis = stack.pop()
            if queue.is_full() and node.rect.distance_squared_to(p) >= queue.max_distance_squared():
                continue

            if node.point != p:
                queue.offer(node.point)

            KdTree._push_children(stack, node, p, x_axis)

        return queue.points()

    @staticmethod
    def _push_children(stack: deque, node: KdTreeNode, p: Point, x_axis: bool):
        """Push existing children, so that the one on the same side of the splitting line as p pops first."""
        if p.coord(x_axis) < node.point.coord(x_axis):
            near, far = node.left, node.right
        else:
            near, far = node.right, node.left
        for child in (far, near):
            if child is not None:
                stack.append((child, not x_axis))

    def within(self, p: Point, radius: float) -> list[Point]:
        require_point(p)
        radius = require_radius(radius)
        max_dist2 = radius * radius

        found: list[Point] = []
        stack = deque([self._root] if self._root is not None else [])
        while stack:
            node = stack.pop()
            if node.rect.distance_squared_to(p) > max_dist2:
                continue

            if node.point.distance_squared_to(p) <= max_dist2:
                found.append(node.point)

            for child in (node.right, node.left):
                if child is not None:
                    stack.append(child)
        return found
