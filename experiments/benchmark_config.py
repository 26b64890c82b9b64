import sys
import os

# Ensure src can be imported if this config is used standalone or imported from elsewhere
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.config import PlannerConfig
from src.types import DriveState

class BenchmarkConfig:
    # --- Experiment Settings ---
    OBSTACLE_COUNTS = [0, 2, 4]    # Obstacles per corridor to test
    NUM_TRIALS = 5                 # Number of trials per setting
    RANDOM_SEED_BASE = 1000        # Base seed for reproducibility

    # --- Output Paths ---
    _BASE_DIR = os.path.dirname(os.path.abspath(__file__))
    _PROJECT_DIR = os.path.dirname(_BASE_DIR)
    LOG_DIR = os.path.join(_PROJECT_DIR, "logs", "experiments_horizon")

    # --- Corridor Parameters ---
    LANE_WIDTH = 1.2               # meters, boundaries 0.6m from the centreline
    POINT_SPACING = 0.2            # meters between boundary landmarks
    CORRIDOR_LENGTH = 4.0          # meters
    CORRIDOR_CURVATURE = 0.0       # 1/m, 0 = straight corridor
    CLEAR_DISTANCE = 0.6           # no obstacles this close to the start
    LANDMARK_TTL = 5.0             # seconds until generated landmarks expire

    # Lateral obstacle placement, in units of half the lane width.
    # "edge": 0.42~0.54m off the centreline, outside the 0.4m proximity range,
    #         so the straight line through the corridor stays free.
    # "centre": obstacles on the driving line; the search has to swerve and
    #           usually runs into MAX_EXPANSIONS.
    OBSTACLE_BANDS = {
        "edge": (0.7, 0.9),
        "centre": (0.0, 0.5),
    }
    DEFAULT_BAND = "edge"

    # --- Start ---
    START_STATE = DriveState(0.0, 0.0, 0.0, 0.0, 1.0)

    # --- Planner ---
    MAX_EXPANSIONS = 5000          # per planning call, keeps every run bounded
    PLANNER_CONFIG = PlannerConfig(
        step_size_seconds=0.1,
        plan_length_seconds=3.0,
        turn_sample_count_per_side=3,
        max_curvature=1.0 / 0.3,
        landmark_query_radius=0.5,
        max_expansions=MAX_EXPANSIONS
    )
