from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from point_table.geometry import Point, Rectangle


@dataclass
class KdTreeNode:
    point: Point
    value: Any
    # Bounds every point in the subtree rooted at this node.
    rect: Rectangle
    left: KdTreeNode | None = None
    right: KdTreeNode | None = None
