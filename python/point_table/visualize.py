from __future__ import annotations

import matplotlib.patches as patches
import matplotlib.pyplot as plt
import numpy as np
import numpy.typing as npt
import rerun as rr

from point_table.geometry import Point, Rectangle
from point_table.kdtree import KdTree
from point_table.point_table import PointTable

SPLIT_X_COLOR = "red"
SPLIT_Y_COLOR = "blue"


def collect_splits(table: PointTable) -> list[tuple[npt.NDArray, bool]]:
    """Collect splitting lines of tree.

    Args:
        table: Point table. Only KdTree has splitting lines.

    Returns:
        List of tuple to line as (2, 2) array and whether line splits on x.
    """
    if not isinstance(table, KdTree):
        return []

    splits = []
    for point, rect, x_axis in table.partitions():
        if x_axis:
            line = np.array([[point.x, rect.ymin], [point.x, rect.ymax]])
        else:
            line = np.array([[rect.xmin, point.y], [rect.xmax, point.y]])
        splits.append((line, x_axis))
    return splits


def rect_outline(rect: Rectangle) -> npt.NDArray:
    return np.array(
        [
            [rect.xmin, rect.ymin],
            [rect.xmax, rect.ymin],
            [rect.xmax, rect.ymax],
            [rect.xmin, rect.ymax],
            [rect.xmin, rect.ymin],
        ]
    )


def points_to_array(points: list[Point]) -> npt.NDArray:
    return np.array([[p.x, p.y] for p in points], dtype=float).reshape(-1, 2)


def plot(table: PointTable, query: Point | None = None, rect: Rectangle | None = None, k: int = 0):
    """Draw points, queries and splitting lines with matplotlib.

    Args:
        table: Point table to draw.
        query: Query point. Its nearest and k nearest points are highlighted.
        rect: Query rectangle. Points inside it are highlighted.
        k: Number of nearest points to highlight.

    Returns:
        Tuple to matplotlib figure and axes.
    """
    fig, ax = plt.subplots()

    for line, x_axis in collect_splits(table):
        ax.plot(line[:, 0], line[:, 1], color=SPLIT_X_COLOR if x_axis else SPLIT_Y_COLOR, linewidth=0.5)

    points = table.to_array()
    ax.scatter(points[:, 0], points[:, 1], color="black", s=10)

    if rect is not None:
        ax.add_patch(
            patches.Rectangle(
                (rect.xmin, rect.ymin),
                rect.xmax - rect.xmin,
                rect.ymax - rect.ymin,
                edgecolor="green",
                facecolor="none",
                linewidth=1,
            )
        )
        in_range = points_to_array(table.range(rect))
        ax.scatter(in_range[:, 0], in_range[:, 1], color="green", s=10)

    if query is not None:
        if k > 0:
            k_nearest = points_to_array(table.nearest_k(query, k))
            ax.scatter(k_nearest[:, 0], k_nearest[:, 1], color="orange", s=30)
        nearest = table.nearest(query)
        if nearest is not None:
            ax.scatter(nearest.x, nearest.y, color="magenta", s=40)
        ax.scatter(query.x, query.y, color="red", marker="x", s=40)

    ax.set_xlim(table.domain.xmin - 0.05, table.domain.xmax + 0.05)
    ax.set_ylim(table.domain.ymin - 0.05, table.domain.ymax + 0.05)
    ax.set_aspect("equal")
    ax.axhline(0, linewidth=2, color="gray")
    ax.axvline(0, linewidth=2, color="gray")
    return fig, ax


def show(table: PointTable, query: Point | None = None, rect: Rectangle | None = None, k: int = 0):
    plot(table, query, rect, k)
    plt.show()


def log_to_rerun(
    table: PointTable, query: Point | None = None, rect: Rectangle | None = None, k: int = 0
):
    """Log points, queries and splitting lines to rerun viewer.

    Args:
        table: Point table to log.
        query: Query point.
        rect: Query rectangle.
        k: Number of nearest points to log.
    """
    rr.init("point_table", spawn=True)

    points = table.to_array()
    colors = np.full((len(points), 3), [0, 0, 0])
    rr.log("points", rr.Points2D(points, colors=colors, radii=0.005))

    splits = collect_splits(table)
    if splits:
        rr.log(
            "splits",
            rr.LineStrips2D(
                [line for line, _ in splits],
                colors=[[255, 0, 0] if x_axis else [0, 0, 255] for _, x_axis in splits],
            ),
        )

    if rect is not None:
        rr.log("rect", rr.LineStrips2D([rect_outline(rect)], colors=[[0, 255, 0]]))

    if query is not None:
        if k > 0:
            k_nearest = points_to_array(table.nearest_k(query, k))
            if len(k_nearest) > 0:
                rr.log("nearest_k", rr.Points2D(k_nearest, colors=[255, 165, 0], radii=0.01))
        nearest = table.nearest(query)
        if nearest is not None:
            rr.log("nearest", rr.Points2D(nearest.to_array().reshape(1, 2), colors=[255, 0, 255], radii=0.015))
        rr.log("query", rr.Points2D(query.to_array().reshape(1, 2), colors=[255, 0, 0], radii=0.01))
