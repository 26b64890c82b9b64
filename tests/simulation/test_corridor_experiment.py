import os
import pytest

from src.map import GridLandmarkMap, LandmarkGenerator, SimpleLandmarkMap
from src.planning.planners import HorizonPlanner
from src.simulation.session import PlanningSession
from src.types import LandmarkType
from experiments.benchmark_config import BenchmarkConfig as cfg
from experiments.run_experiment import build_corridor, run_experiment


@pytest.mark.parametrize("num_obstacles", [2, 4])
@pytest.mark.parametrize("seed", [1000, 1001, 1002, 1003, 1004])
@pytest.mark.parametrize("map_cls", [SimpleLandmarkMap, GridLandmarkMap])
def test_session_plans_through_obstacle_corridor(num_obstacles, seed, map_cls):
    landmarks = build_corridor(num_obstacles, seed)
    obstacles = [lm for lm in landmarks if lm.landmark_type == LandmarkType.OBSTACLE]
    assert len(obstacles) == num_obstacles

    session = PlanningSession(planner=HorizonPlanner(config=cfg.PLANNER_CONFIG), landmark_map=map_cls())
    session.add_landmarks(landmarks)
    path = session.plan(cfg.START_STATE)

    assert len(path) == cfg.PLANNER_CONFIG.plan_steps + 1 == 31
    assert path[0] == cfg.START_STATE.pos
    # 没有一个路径点进入障碍物的接近代价范围
    for lm in obstacles:
        assert min(p.dist(lm.pos) for p in path) >= cfg.PLANNER_CONFIG.proximity_start_dist

    removed = session.expire(now=cfg.LANDMARK_TTL + 1.0)
    assert sorted(removed) == sorted(lm.landmark_id for lm in landmarks)
    assert session.landmarks == []


def test_edge_band_keeps_obstacles_off_the_driving_line():
    generator = LandmarkGenerator(lane_width=cfg.LANE_WIDTH, num_obstacles=10,
                                  clear_distance=cfg.CLEAR_DISTANCE,
                                  obstacle_band=cfg.OBSTACLE_BANDS["edge"], seed=7)
    landmarks = generator.generate(cfg.START_STATE, cfg.CORRIDOR_LENGTH)
    half = cfg.LANE_WIDTH / 2.0

    for lm in landmarks:
        if lm.landmark_type == LandmarkType.OBSTACLE:
            assert 0.7 * half - 1e-9 <= abs(lm.y) <= 0.9 * half + 1e-9


def test_run_experiment_saves_render(tmp_path, capsys):
    result = run_experiment(num_obstacles=2, seed=42, log_dir=str(tmp_path))

    assert result['success']
    assert result['path_len'] == 31
    assert result['removed'] == len(build_corridor(2, 42))
    assert os.path.exists(tmp_path / "horizon_edge_obs2_seed42.png")
    assert "Planning Finished. Success: True" in capsys.readouterr().out


def test_run_experiment_debug_log(tmp_path):
    result = run_experiment(num_obstacles=4, seed=3, store="grid", debug=True, save=False,
                            log_dir=str(tmp_path))

    assert result['success']
    log_files = os.listdir(tmp_path / "planning_debug")
    assert len(log_files) == 1


def test_centre_band_is_bounded_by_budget():
    result = run_experiment(num_obstacles=2, seed=1000, band="centre", save=False)

    assert result['expansions'] <= cfg.MAX_EXPANSIONS
    assert result['path_len'] in (0, 31)
