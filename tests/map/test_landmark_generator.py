import math
import pytest

from src.types import DriveState, LandmarkType
from src.map import LandmarkGenerator


def test_straight_corridor_layout():
    generator = LandmarkGenerator(lane_width=1.0, point_spacing=0.5, seed=0)
    landmarks = generator.generate(DriveState(0.0, 0.0, 0.0), length=2.0)

    left = [lm for lm in landmarks if lm.landmark_type == LandmarkType.LEFT_LINE]
    right = [lm for lm in landmarks if lm.landmark_type == LandmarkType.RIGHT_LINE]

    assert len(left) == len(right) == 5
    assert all(lm.y == pytest.approx(0.5) for lm in left)
    assert all(lm.y == pytest.approx(-0.5) for lm in right)
    assert [lm.x for lm in left] == pytest.approx([0.0, 0.5, 1.0, 1.5, 2.0])


def test_ids_are_sequential_and_unique():
    generator = LandmarkGenerator(num_obstacles=3, seed=1)
    first = generator.generate(DriveState(0.0, 0.0, 0.0), length=2.0, start_id=10)
    second = generator.generate(DriveState(0.0, 0.0, 0.0), length=1.0)

    all_ids = [lm.landmark_id for lm in first + second]
    assert all_ids == list(range(10, 10 + len(all_ids)))


def test_obstacles_stay_inside_lane_and_away_from_start():
    generator = LandmarkGenerator(lane_width=1.0, point_spacing=0.2, num_obstacles=5,
                                  clear_distance=0.6, seed=42)
    landmarks = generator.generate(DriveState(0.0, 0.0, 0.0), length=3.0, expire_at=5.0)
    obstacles = [lm for lm in landmarks if lm.landmark_type == LandmarkType.OBSTACLE]

    assert len(obstacles) == 5
    for lm in obstacles:
        assert abs(lm.y) <= 0.25 + 1e-9
        assert lm.x >= 0.6 - 1e-9
        assert lm.expire_at == 5.0


def test_seed_is_reproducible():
    a = LandmarkGenerator(num_obstacles=4, seed=3).generate(DriveState(0.0, 0.0, 0.0), length=3.0)
    b = LandmarkGenerator(num_obstacles=4, seed=3).generate(DriveState(0.0, 0.0, 0.0), length=3.0)
    assert a == b


def test_curved_corridor_follows_arc():
    generator = LandmarkGenerator(lane_width=0.4, point_spacing=0.1, seed=0)
    radius = 2.0
    landmarks = generator.generate(DriveState(0.0, 0.0, 0.0), length=1.0, curvature=1.0 / radius)

    # 左转圆心在 (0, R)，左右边界分别在半径 R-w/2 和 R+w/2 上
    for lm in landmarks:
        r = math.hypot(lm.x, lm.y - radius)
        expected = radius - 0.2 if lm.landmark_type == LandmarkType.LEFT_LINE else radius + 0.2
        assert r == pytest.approx(expected)


def test_obstacle_band_controls_lateral_offset():
    generator = LandmarkGenerator(lane_width=1.0, point_spacing=0.2, num_obstacles=8,
                                  clear_distance=0.4, obstacle_band=(0.6, 1.0), seed=9)
    landmarks = generator.generate(DriveState(0.0, 0.0, 0.0), length=3.0)
    offsets = [lm.y for lm in landmarks if lm.landmark_type == LandmarkType.OBSTACLE]

    assert len(offsets) == 8
    assert all(0.3 - 1e-9 <= abs(y) <= 0.5 + 1e-9 for y in offsets)


@pytest.mark.parametrize("band", [(-0.1, 0.5), (0.6, 0.4), (0.5, 1.2)])
def test_invalid_obstacle_band_is_rejected(band):
    with pytest.raises(ValueError):
        LandmarkGenerator(obstacle_band=band)
