# src/vehicles/bicycle.py
import math
from dataclasses import replace
from typing import List

from .base import VehicleBase
from .config import BicycleConfig
from src.types import DriveState

# 曲率小于该阈值时按直线处理
STRAIGHT_EPSILON = 1e-3


def step_distance(state: DriveState, dist: float) -> DriveState:
    """
    沿恒定曲率圆弧前进 dist 米。
    曲率 -> 0 时圆弧公式收敛到直线公式。
    """
    c = math.cos(state.theta_rad)
    s = math.sin(state.theta_rad)

    if abs(state.curvature) < STRAIGHT_EPSILON:
        return replace(state, x=state.x + dist * c, y=state.y + dist * s)

    # 车体坐标系下的弧长参数化位移
    k = state.curvature
    turned = k * dist
    local_x = math.sin(turned) / k
    local_y = (1.0 - math.cos(turned)) / k

    # 旋转 + 平移到世界坐标系
    return replace(
        state,
        x=state.x + local_x * c - local_y * s,
        y=state.y + local_x * s + local_y * c,
        theta_rad=state.theta_rad + turned,
    )


def step_time(state: DriveState, dt: float) -> DriveState:
    return step_distance(state, dt * state.speed)


class BicycleVehicle(VehicleBase):
    def __init__(self, config: BicycleConfig):
        super().__init__(config)
        self.config: BicycleConfig = config

    def kinematic_propagate(self, start: DriveState, control: float, dt: float) -> DriveState:
        """control 为目标曲率，会被限制在 [-max_curvature, max_curvature]"""
        limit = self.config.max_curvature
        curvature = max(min(control, limit), -limit)
        return step_time(replace(start, curvature=curvature), dt)

    def sample_curvatures(self) -> List[float]:
        return [float(k) for k in self.config.curvature_samples]

    def expand(self, state: DriveState, dt: float) -> List[DriveState]:
        # 位置、朝向、速度保持不变，只替换曲率后推演
        return [self.kinematic_propagate(state, k, dt) for k in self.sample_curvatures()]
