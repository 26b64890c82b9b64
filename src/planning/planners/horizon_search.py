import heapq
from typing import List, Optional

from src.config import PlannerConfig
from src.types import DriveState, Path, SearchNode
from src.map.base import LandmarkMapBase
from src.planning.costs.local_cost import LocalCostModel
from src.planning.interfaces import IPlannerObserver
from src.planning.planners.base import PlannerBase
from src.vehicles.base import VehicleBase
from src.vehicles.bicycle import BicycleVehicle
from src.vehicles.config import BicycleConfig
from src.visualization.observers import EfficientObserver


def reconstruct_path(final_node: SearchNode) -> Path:
    """Walk parent links back to the root, then reverse to start -> horizon."""
    points = []
    node: Optional[SearchNode] = final_node
    while node is not None:
        points.append(node.state.pos)
        node = node.parent
    points.reverse()
    return Path(tuple(points))


class HorizonPlanner(PlannerBase):
    """
    Fixed-horizon local planner over a landmark field.

    Expands the lowest accumulated-cost node first (no heuristic term) and
    stops as soon as a popped node has taken `plan_steps` steps. Successors
    come from forward-simulating the vehicle model with sampled curvatures.

    Note: the negative per-step bias lets accumulated cost decrease along a
    branch, so the first node to reach the horizon is not guaranteed to be
    the cheapest full-horizon path. It also means every node cheaper than the
    best path's peak cost gets expanded first, so obstacles straight ahead can
    blow the search up; `max_expansions` bounds that.
    """

    def __init__(self,
                 vehicle_model: Optional[VehicleBase] = None,
                 cost_model: Optional[LocalCostModel] = None,
                 config: Optional[PlannerConfig] = None):
        self.config = config if config is not None else PlannerConfig()

        if vehicle_model is None:
            vehicle_model = BicycleVehicle(BicycleConfig(
                max_curvature=self.config.max_curvature,
                turn_samples_per_side=self.config.turn_sample_count_per_side,
            ))
        self.vehicle = vehicle_model
        self.cost_model = cost_model if cost_model is not None else LocalCostModel.from_config(self.config)

        self.last_path: Path = Path()
        self.last_expansions = 0

    def find_path(self,
                  start: DriveState,
                  landmark_map: LandmarkMapBase,
                  debugger: Optional[IPlannerObserver] = None) -> Path:
        if debugger is None:
            debugger = EfficientObserver()

        if not start.is_finite():
            debugger.log(f"Rejected non-finite start state: {start}", level='ERROR')
            raise ValueError(f"Start state must be finite, got {start}")

        horizon = self.config.plan_steps
        dt = self.config.step_size_seconds
        radius = self.config.landmark_query_radius
        budget = self.config.max_expansions

        debugger.set_map_info(landmark_map.all_landmarks())
        debugger.log("Start planning", level='INFO',
                     payload={'start': start, 'horizon': horizon, 'landmarks': len(landmark_map)})

        # 1. Initialization: a single root node
        open_set: List[SearchNode] = []
        heapq.heappush(open_set, SearchNode(start, 0.0, None, 0))

        expansions = 0
        while open_set:
            current = heapq.heappop(open_set)

            # 2. Termination by step count, not by a goal test
            if current.steps >= horizon:
                self.last_expansions = expansions
                self.last_path = reconstruct_path(current)
                debugger.log("Horizon reached", level='INFO',
                             payload={'expansions': expansions, 'cost': current.cost,
                                      'open_set': len(open_set)})
                return self.last_path

            # Optional expansion budget: give up on this cycle
            if budget is not None and expansions >= budget:
                self.last_expansions = expansions
                self.last_path = Path()
                debugger.log("Expansion budget exhausted, no path found.", level='WARN',
                             payload={'expansions': expansions, 'open_set': len(open_set)})
                return self.last_path

            expansions += 1
            debugger.record_current_expansion(current.state)

            # 3. One landmark query per node, shared by every branch
            nearby = landmark_map.query_radius(current.state.pos, radius)
            debugger.record_landmark_query(current.state, nearby)

            # 4. Kinematic expansion
            for next_state in self.vehicle.expand(current.state, dt):
                cost = current.cost + self.cost_model.local_cost(next_state, nearby)
                next_node = SearchNode(next_state, cost, current, current.steps + 1)
                heapq.heappush(open_set, next_node)

                debugger.record_open_set_node(next_state, cost)
                debugger.record_edge(current.state, next_state)

        # Only reachable if the vehicle model produced no successors
        self.last_expansions = expansions
        self.last_path = Path()
        debugger.log("Open set is empty, no path found.", level='WARN',
                     payload={'expansions': expansions})
        return self.last_path
