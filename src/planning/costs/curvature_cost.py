# src/planning/costs/curvature_cost.py
from typing import Sequence

from src.types import DriveState, Landmark
from .base import CostFunction


class CurvatureCost(CostFunction):
    """
    平滑代价：weight * |curvature|^2，每个状态只计算一次。
    二次型使急转弯的代价增长更快，从而偏好平滑路径。
    """
    def __init__(self, weight: float = 0.1):
        self.weight = weight

    def penalty(self, curvature: float) -> float:
        return self.weight * abs(curvature) ** 2

    def calculate(self, state: DriveState, nearby: Sequence[Landmark]) -> float:
        return self.penalty(state.curvature)
