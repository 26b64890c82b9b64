from typing import Iterable, List, Optional

from src.types import DriveState, Landmark, Path
from src.map.base import LandmarkMapBase
from src.map.simple_map import SimpleLandmarkMap
from src.planning.interfaces import IPlannerObserver
from src.planning.planners.base import PlannerBase
from src.planning.planners.horizon_search import HorizonPlanner


class PlanningSession:
    """
    One planning session: owns the landmark map and the planner.

    All map mutation goes through this object and happens strictly between
    planning calls, never during one.
    """
    def __init__(self,
                 planner: Optional[PlannerBase] = None,
                 landmark_map: Optional[LandmarkMapBase] = None,
                 debugger: Optional[IPlannerObserver] = None):
        self.planner = planner if planner is not None else HorizonPlanner()
        self.landmark_map = landmark_map if landmark_map is not None else SimpleLandmarkMap()
        self.debugger = debugger

        self.last_path: Path = Path()
        # Statistics
        self.plan_count = 0
        self.failed_count = 0

    @property
    def landmarks(self) -> List[Landmark]:
        """Snapshot of every stored landmark (read access for visualization)."""
        return self.landmark_map.all_landmarks()

    def add_landmarks(self, batch: Iterable[Landmark]):
        self.landmark_map.insert_batch(batch)

    def expire(self, now: float) -> List[int]:
        """Drop landmarks past their expiry and return every id removed since the last drain."""
        self.landmark_map.remove_expired(now)
        return self.landmark_map.drain_removed_ids()

    def plan(self, state: DriveState) -> Path:
        """
        An empty Path means "no plan this cycle"; callers retry on the next
        landmark update.
        """
        self.plan_count += 1
        path = self.planner.find_path(state, self.landmark_map, debugger=self.debugger)
        if not path:
            self.failed_count += 1
        self.last_path = path
        return path
