import numpy as np
import pytest

from point_table import BruteForceTable, KdTree, Point


@pytest.fixture(params=[BruteForceTable, KdTree], ids=["brute", "kdtree"])
def table_cls(request):
    return request.param


@pytest.fixture
def table(table_cls):
    return table_cls()


@pytest.fixture
def random_points():
    rng = np.random.default_rng(19)
    return [Point(x, y) for x, y in rng.random((200, 2)).tolist()]
