import os
import sys
import time
import argparse

# --- Path Setup ---
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.map import GridLandmarkMap, LandmarkGenerator, SimpleLandmarkMap
from src.planning.planners import HorizonPlanner
from src.simulation.session import PlanningSession
from src.visualization.observers import DebugObserver, ExperimentObserver
from src.visualization.plotter import draw_map_debug
from experiments.benchmark_config import BenchmarkConfig as cfg

def ensure_log_dir(log_dir):
    os.makedirs(log_dir, exist_ok=True)

def build_corridor(num_obstacles, seed, band=cfg.DEFAULT_BAND):
    generator = LandmarkGenerator(
        lane_width=cfg.LANE_WIDTH,
        point_spacing=cfg.POINT_SPACING,
        num_obstacles=num_obstacles,
        clear_distance=cfg.CLEAR_DISTANCE,
        obstacle_band=cfg.OBSTACLE_BANDS[band],
        seed=seed
    )
    return generator.generate(
        cfg.START_STATE, cfg.CORRIDOR_LENGTH,
        curvature=cfg.CORRIDOR_CURVATURE, expire_at=cfg.LANDMARK_TTL
    )

def run_experiment(num_obstacles=2, seed=42, band=cfg.DEFAULT_BAND, store="simple",
                   debug=False, save=True, log_dir=cfg.LOG_DIR):
    print(f"=== Running Experiment (Obstacles={num_obstacles}, Band={band}, Seed={seed}, Store={store}) ===")

    # 1. Setup Environment
    landmarks = build_corridor(num_obstacles, seed, band)

    if store == "grid":
        landmark_map = GridLandmarkMap()
    elif store == "simple":
        landmark_map = SimpleLandmarkMap()
    else:
        raise ValueError(f"Unknown store: {store}")

    # 2. Setup Planner & Observer
    if debug:
        observer = DebugObserver(log_dir=os.path.join(log_dir, "planning_debug"))
        print(f"Debug Log initialized: {observer.logger.handlers[0].baseFilename}")
    else:
        observer = ExperimentObserver()

    planner = HorizonPlanner(config=cfg.PLANNER_CONFIG)
    session = PlanningSession(planner=planner, landmark_map=landmark_map, debugger=observer)
    session.add_landmarks(landmarks)

    # 3. Plan
    t0 = time.perf_counter()
    path = session.plan(cfg.START_STATE)
    t1 = time.perf_counter()

    duration_ms = (t1 - t0) * 1000
    success = len(path) > 0
    print(f"Planning Finished. Success: {success}, Expansions: {planner.last_expansions}, Time: {duration_ms:.2f} ms")

    # 4. Save Visualization
    if save:
        ensure_log_dir(log_dir)
        save_path = os.path.join(log_dir, f"horizon_{band}_obs{num_obstacles}_seed{seed}.png")
        draw_map_debug(session.landmarks, session.last_path, save_path, observer=observer)
        print(f"Result saved to: {save_path}")

    if debug:
        observer.close()

    # 5. Expire everything and report what downstream consumers would drop
    removed = session.expire(now=cfg.LANDMARK_TTL + 1.0)
    print(f"Expired {len(removed)} landmarks.")

    return {
        'success': success,
        'expansions': planner.last_expansions,
        'time_ms': duration_ms,
        'path_len': len(path),
        'removed': len(removed),
    }

def run_benchmark(bands=None):
    bands = list(cfg.OBSTACLE_BANDS) if bands is None else bands
    results = []
    for band in bands:
        for n in cfg.OBSTACLE_COUNTS:
            for trial in range(cfg.NUM_TRIALS):
                seed = cfg.RANDOM_SEED_BASE + trial
                res = run_experiment(num_obstacles=n, seed=seed, band=band, save=False)
                res.update({'band': band, 'obstacles': n, 'seed': seed})
                results.append(res)

    print("\n=== Summary ===")
    for band in bands:
        for n in cfg.OBSTACLE_COUNTS:
            rows = [r for r in results if r['band'] == band and r['obstacles'] == n]
            ok = sum(r['success'] for r in rows)
            avg_ms = sum(r['time_ms'] for r in rows) / len(rows)
            avg_exp = sum(r['expansions'] for r in rows) / len(rows)
            print(f"Band={band}, Obstacles={n}: success {ok}/{len(rows)}, "
                  f"avg expansions {avg_exp:.0f}, avg time {avg_ms:.1f} ms")
    return results

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run horizon planner experiments on generated corridors")
    parser.add_argument("--obstacles", type=int, default=2, help="Number of obstacles in the corridor")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--band", type=str, default=cfg.DEFAULT_BAND, choices=list(cfg.OBSTACLE_BANDS),
                        help="Lateral obstacle placement")
    parser.add_argument("--store", type=str, default="simple", choices=["simple", "grid"], help="Landmark store")
    parser.add_argument("--debug", action="store_true", help="Write a detailed debug log")
    parser.add_argument("--benchmark", action="store_true", help="Run the full benchmark sweep")
    args = parser.parse_args()

    if args.benchmark:
        run_benchmark()
    else:
        run_experiment(num_obstacles=args.obstacles, seed=args.seed, band=args.band,
                       store=args.store, debug=args.debug)
