from point_table.brute_force_table import BruteForceTable
from point_table.errors import InvalidArgument
from point_table.geometry import Point, Rectangle
from point_table.kdtree import KdTree
from point_table.point_table import PointTable

__all__ = ["BruteForceTable", "InvalidArgument", "KdTree", "Point", "PointTable", "Rectangle"]
