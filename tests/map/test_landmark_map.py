import math
import numpy as np
import pytest

from src.types import Landmark, LandmarkType, Pos
from src.map import GridLandmarkMap, SimpleLandmarkMap


@pytest.fixture(params=["simple", "grid"])
def landmark_map(request):
    if request.param == "simple":
        return SimpleLandmarkMap()
    return GridLandmarkMap(cell_size=0.2)


def make_landmarks(n, landmark_type=LandmarkType.OBSTACLE, expire_at=math.inf):
    return [Landmark(100 + i, 0.3 * i, -0.2 * i, landmark_type, expire_at) for i in range(n)]


def ids(landmarks):
    return [lm.landmark_id for lm in landmarks]


def test_radius_query_is_strict(landmark_map):
    center = Pos(1.0, 1.0)
    landmark_map.insert_batch([
        Landmark(1, 1.1, 1.0, LandmarkType.OBSTACLE),
        Landmark(2, 1.0, 1.3, LandmarkType.LEFT_LINE),
        Landmark(3, 0.5, 1.0, LandmarkType.RIGHT_LINE),   # 恰好 0.5，不包含
        Landmark(4, 1.0, 2.0, LandmarkType.ARROW_LEFT),
    ])

    result = landmark_map.query_radius(center, 0.5)
    assert sorted(ids(result)) == [1, 2]


def test_empty_map_query(landmark_map):
    assert landmark_map.query_radius(Pos(0.0, 0.0), 10.0) == []
    assert len(landmark_map) == 0


def test_round_trip_remove_none_then_all(landmark_map):
    batch = make_landmarks(10)
    landmark_map.insert_batch(batch)
    before = ids(landmark_map.query_radius(Pos(0.0, 0.0), 100.0))

    landmark_map.remove_where(lambda lm: False)
    assert ids(landmark_map.query_radius(Pos(0.0, 0.0), 100.0)) == before
    assert landmark_map.drain_removed_ids() == []

    landmark_map.remove_where(lambda lm: True)
    assert len(landmark_map) == 0
    assert landmark_map.query_radius(Pos(0.0, 0.0), 100.0) == []
    assert landmark_map.drain_removed_ids() == ids(batch)
    assert landmark_map.drain_removed_ids() == []


def test_removed_ids_accumulate_until_drained(landmark_map):
    landmark_map.insert_batch(make_landmarks(6))
    landmark_map.remove_where(lambda lm: lm.landmark_id % 2 == 0)
    landmark_map.remove_where(lambda lm: lm.landmark_id == 101)

    assert landmark_map.drain_removed_ids() == [100, 102, 104, 101]
    assert sorted(ids(landmark_map.all_landmarks())) == [103, 105]


def test_insert_keeps_ids_without_dedup(landmark_map):
    lm = Landmark(7, 0.0, 0.0, LandmarkType.OBSTACLE)
    landmark_map.insert_batch([lm])
    landmark_map.insert_batch([lm])

    assert ids(landmark_map.query_radius(Pos(0.0, 0.0), 0.1)) == [7, 7]
    landmark_map.remove_where(lambda p: p.landmark_id == 7)
    assert landmark_map.drain_removed_ids() == [7, 7]


def test_remove_expired_is_caller_driven(landmark_map):
    landmark_map.insert_batch([
        Landmark(1, 0.0, 0.0, LandmarkType.OBSTACLE, expire_at=1.0),
        Landmark(2, 0.1, 0.0, LandmarkType.OBSTACLE, expire_at=2.0),
        Landmark(3, 0.2, 0.0, LandmarkType.OBSTACLE),
    ])

    # 地图本身不过滤过期路标
    assert len(landmark_map.query_radius(Pos(0.0, 0.0), 1.0)) == 3

    landmark_map.remove_expired(now=1.5)
    assert landmark_map.drain_removed_ids() == [1]

    # expire_at 恰好等于 now 时不删除
    landmark_map.remove_expired(now=2.0)
    assert landmark_map.drain_removed_ids() == []


def test_grid_handles_negative_coordinates():
    grid = GridLandmarkMap(cell_size=0.2)
    grid.insert_batch([
        Landmark(1, -0.05, -0.05, LandmarkType.OBSTACLE),
        Landmark(2, 0.05, 0.05, LandmarkType.OBSTACLE),
    ])
    assert grid.world_to_grid(-0.05, -0.05) == (-1, -1)
    assert sorted(ids(grid.query_radius(Pos(0.0, 0.0), 0.1))) == [1, 2]


def test_grid_rejects_bad_cell_size():
    with pytest.raises(ValueError):
        GridLandmarkMap(cell_size=0.0)


@pytest.mark.parametrize("cell_size", [0.05, 0.2, 1.0])
def test_grid_matches_linear_scan(cell_size):
    rng = np.random.default_rng(7)
    points = rng.uniform(-3.0, 3.0, size=(400, 2))
    types = list(LandmarkType)
    batch = [Landmark(i, float(x), float(y), types[i % len(types)]) for i, (x, y) in enumerate(points)]

    simple = SimpleLandmarkMap()
    grid = GridLandmarkMap(cell_size=cell_size)
    simple.insert_batch(batch)
    grid.insert_batch(batch)

    for cx, cy, r in rng.uniform([-3.0, -3.0, 0.05], [3.0, 3.0, 1.5], size=(50, 3)):
        center = Pos(float(cx), float(cy))
        # 结果集合一致，且都按插入顺序
        assert ids(grid.query_radius(center, float(r))) == ids(simple.query_radius(center, float(r)))

    simple.remove_where(lambda lm: lm.x > 0.0)
    grid.remove_where(lambda lm: lm.x > 0.0)
    assert grid.drain_removed_ids() == simple.drain_removed_ids()
    assert ids(grid.query_radius(Pos(0.0, 0.0), 2.0)) == ids(simple.query_radius(Pos(0.0, 0.0), 2.0))


@pytest.mark.parametrize("bad", [
    Landmark(9, math.nan, 0.0, LandmarkType.OBSTACLE),
    Landmark(9, 0.0, math.inf, LandmarkType.LEFT_LINE),
    Landmark(9, -math.inf, 1.0, LandmarkType.ARROW_RIGHT),
])
def test_non_finite_landmarks_are_rejected(landmark_map, bad):
    good = Landmark(1, 0.0, 0.0, LandmarkType.OBSTACLE)
    landmark_map.insert_batch([good])

    with pytest.raises(ValueError):
        landmark_map.insert_batch([Landmark(2, 0.1, 0.0, LandmarkType.OBSTACLE), bad])

    # 整批拒绝，之前的内容不受影响
    assert landmark_map.all_landmarks() == [good]
    assert ids(landmark_map.query_radius(Pos(0.0, 0.0), 1.0)) == [1]


def test_infinite_expiry_is_accepted(landmark_map):
    landmark_map.insert_batch([Landmark(1, 0.0, 0.0, LandmarkType.OBSTACLE, expire_at=math.inf)])
    assert len(landmark_map) == 1


@pytest.mark.parametrize("radius", [200.0, 999.0, 1e6, math.inf])
def test_wide_query_returns_everything(landmark_map, radius):
    # 半径远大于地图范围时网格只遍历已占用格子
    batch = make_landmarks(5) + [Landmark(1, -50.0, 40.0, LandmarkType.LEFT_LINE)]
    landmark_map.insert_batch(batch)

    assert ids(landmark_map.query_radius(Pos(0.0, 0.0), radius)) == ids(batch)


def test_grid_wide_query_matches_linear_scan_off_origin():
    rng = np.random.default_rng(11)
    points = rng.uniform(-20.0, 20.0, size=(200, 2))
    batch = [Landmark(i, float(x), float(y), LandmarkType.OBSTACLE) for i, (x, y) in enumerate(points)]

    simple, grid = SimpleLandmarkMap(), GridLandmarkMap(cell_size=0.2)
    simple.insert_batch(batch)
    grid.insert_batch(batch)

    # 中心偏离原点，半径只覆盖一部分路标
    for center, r in [(Pos(15.0, -15.0), 25.0), (Pos(-30.0, 0.0), 35.0), (Pos(0.0, 0.0), 1e9)]:
        assert ids(grid.query_radius(center, r)) == ids(simple.query_radius(center, r))


def test_grid_query_with_non_finite_center_finds_nothing():
    grid = GridLandmarkMap()
    grid.insert_batch(make_landmarks(3))
    assert grid.query_radius(Pos(math.nan, 0.0), 1.0) == []
