from __future__ import annotations

import argparse
import sys
from typing import List, Optional, TextIO

import numpy as np
import numpy.typing as npt

from point_table.brute_force_table import BruteForceTable
from point_table.errors import InvalidArgument
from point_table.geometry import Point, Rectangle
from point_table.kdtree import KdTree
from point_table.logger import logger, set_debug
from point_table.point_table import PointTable

IMPLEMENTATIONS = {
    "kdtree": KdTree,
    "brute": BruteForceTable,
}


def read_points(stream: TextIO) -> npt.NDArray:
    """Read whitespace separated coordinate pairs.

    Args:
        stream: Stream to read.

    Returns:
        Points as (n, 2) array.
    """
    tokens = stream.read().split()
    if len(tokens) % 2 != 0:
        raise InvalidArgument(f"Odd number of coordinates: {len(tokens)}")
    try:
        coords = np.array(tokens, dtype=float)
    except ValueError as err:
        raise InvalidArgument(f"Invalid coordinate: {err}") from err
    return coords.reshape(-1, 2)


def report(st: PointTable, query: Point, rect: Rectangle, k: int):
    """Print results of queries to table.

    Args:
        st: Point table to query.
        query: Query point for contains, nearest and k nearest.
        rect: Query rectangle for range.
        k: Number of nearest points.
    """
    print(f"st.empty()? {st.is_empty()}")
    print(f"st.size() = {st.size()}")
    print(f"st.contains({query})? {st.contains(query)}")
    print(f"st.range({rect}):")
    for p in st.range(rect):
        print(f"  {p}")
    print(f"st.nearest({query}) = {st.nearest(query)}")
    print(f"st.nearest({query}, {k}):")
    for p in st.nearest_k(query, k):
        print(f"  {p}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Query point table built from coordinate pairs")
    parser.add_argument("qx", type=float, help="x of query point")
    parser.add_argument("qy", type=float, help="y of query point")
    parser.add_argument("k", type=int, help="Number of nearest points to query")
    parser.add_argument(
        "--impl",
        choices=sorted(IMPLEMENTATIONS.keys()),
        help="Point table implementation",
        default="kdtree",
    )
    parser.add_argument(
        "--rect",
        nargs=4,
        type=float,
        metavar=("XMIN", "YMIN", "XMAX", "YMAX"),
        help="Query rectangle for range",
        default=[-1.0, -1.0, 1.0, 1.0],
    )
    parser.add_argument(
        "-i", "--input", type=str, help="File to read points. If not specified, stdin", default=None
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--plot", action="store_true", help="Draw with matplotlib", default=False)
    group.add_argument("--rerun", action="store_true", help="Log to rerun viewer", default=False)
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug log", default=False)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    # NOTE:
    # e.g.
    # point-table 0.5 0.5 3 --impl brute -i points.txt
    args = build_parser().parse_args(argv)
    set_debug(args.verbose)

    try:
        query = Point(args.qx, args.qy)
        rect = Rectangle(*args.rect)

        if args.input is None:
            points = read_points(sys.stdin)
        else:
            with open(args.input, mode="r") as f:
                points = read_points(f)
        logger.debug("Read %d points", len(points))

        st = IMPLEMENTATIONS[args.impl].from_array(points)
        report(st, query, rect, args.k)
    except (InvalidArgument, OSError) as err:
        print(f"{err}", file=sys.stderr)
        return 1

    if args.plot or args.rerun:
        # Import here, so that plain queries don't need to load plotting backends.
        from point_table import visualize

        if args.plot:
            visualize.show(st, query, rect, args.k)
        else:
            visualize.log_to_rerun(st, query, rect, args.k)

    return 0


if __name__ == "__main__":
    sys.exit(main())
