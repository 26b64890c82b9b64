# src/planning/costs/proximity_cost.py
from typing import Dict, Optional, Sequence

from src.types import DriveState, Landmark, LandmarkType
from .base import CostFunction


class ProximityCost(CostFunction):
    """
    接近代价：离路标越近代价越高。
    距离 0 时为 max_weight，线性下降到 start_dist 处为 0，再远不惩罚。
    """
    def __init__(self,
                 start_dist: float = 0.4,
                 max_weight: float = 5.0,
                 type_weights: Optional[Dict[LandmarkType, float]] = None):
        """
        :param start_dist: 超过这个距离就认为安全了，Cost为0 (米)
        :param max_weight: 贴着路标时的代价
        :param type_weights: 按路标类型的缩放系数，缺省时所有类型为 1.0
        """
        if start_dist <= 0:
            raise ValueError("start_dist must be positive")
        self.start_dist = start_dist
        self.max_weight = max_weight
        self.type_weights = {t: 1.0 for t in LandmarkType}
        if type_weights:
            self.type_weights.update(type_weights)

    def penalty(self, dist: float) -> float:
        weighting = (self.start_dist - dist) / self.start_dist * self.max_weight
        return max(0.0, weighting)

    def calculate(self, state: DriveState, nearby: Sequence[Landmark]) -> float:
        here = state.pos
        return sum(self.type_weights[lm.landmark_type] * self.penalty(here.dist(lm.pos))
                   for lm in nearby)
