# src/planning/costs/local_cost.py
from typing import List, Optional, Sequence

from src.config import PlannerConfig
from src.types import DriveState, Landmark
from .base import CostFunction
from .curvature_cost import CurvatureCost
from .direction_cost import TravelDirectionCost
from .proximity_cost import ProximityCost


class LocalCostModel:
    """
    局部代价 = 固定偏置 + sum(w_i * cost_i)
    偏置为负，表示略微鼓励多走一步；它也会让累计代价在空旷区域单调下降。
    """
    def __init__(self,
                 cost_functions: List[CostFunction],
                 weights: Optional[List[float]] = None,
                 bias: float = -0.1):
        self.cost_fns = cost_functions
        self.weights = weights if weights is not None else [1.0] * len(cost_functions)
        self.bias = bias

        assert len(self.cost_fns) == len(self.weights), "Cost functions and weights mismatch"

    @classmethod
    def from_config(cls, config: PlannerConfig) -> "LocalCostModel":
        return cls(
            cost_functions=[
                ProximityCost(config.proximity_start_dist, config.proximity_max_weight),
                TravelDirectionCost(),
                CurvatureCost(config.curvature_weight),
            ],
            bias=config.step_bias,
        )

    def local_cost(self, state: DriveState, nearby: Sequence[Landmark]) -> float:
        total = self.bias
        for fn, w in zip(self.cost_fns, self.weights):
            total += w * fn.calculate(state, nearby)
        return total
