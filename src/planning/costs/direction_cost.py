# src/planning/costs/direction_cost.py
from typing import Callable, Dict, Optional, Sequence

from src.types import DriveState, Landmark, LandmarkType
from .base import CostFunction

LandmarkScorer = Callable[[DriveState, Landmark], float]


def no_penalty(state: DriveState, landmark: Landmark) -> float:
    return 0.0


class TravelDirectionCost(CostFunction):
    """
    行驶方向代价：绕路标行驶的角方向错误时加代价。
    每种路标类型对应一个打分函数，新增某一类型的规则不影响其他类型。
    目前所有类型都使用 no_penalty (障碍物本来就不应有方向代价)。
    """
    def __init__(self, scorers: Optional[Dict[LandmarkType, LandmarkScorer]] = None):
        self.scorers: Dict[LandmarkType, LandmarkScorer] = {t: no_penalty for t in LandmarkType}
        if scorers:
            self.scorers.update(scorers)

    def calculate(self, state: DriveState, nearby: Sequence[Landmark]) -> float:
        return sum(self.scorers[lm.landmark_type](state, lm) for lm in nearby)
