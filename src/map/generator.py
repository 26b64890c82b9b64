# src/map/generator.py
import math
from typing import List, Optional, Tuple

import numpy as np

from src.types import DriveState, Landmark, LandmarkType
from src.vehicles.bicycle import step_distance


class LandmarkGenerator:
    """
    路标场景生成器
    沿一条恒定曲率的中心线布置左右车道边界点，并在车道内随机撒障碍物。
    id 从 start_id 开始顺序分配 (模拟上游感知的 id 分配)。
    """

    def __init__(
        self,
        lane_width: float = 1.0,
        point_spacing: float = 0.2,
        num_obstacles: int = 0,
        clear_distance: float = 0.5,
        obstacle_band: Tuple[float, float] = (0.0, 0.5),
        seed: Optional[int] = None
    ):
        """
        :param obstacle_band: 障碍物离中心线的横向距离范围，以半车道宽为单位。
                              (0.0, 0.5) 表示中心线两侧各半个半车道宽内；
                              (0.7, 0.9) 表示贴近车道边界，中心线保持畅通
        """
        lo, hi = obstacle_band
        if not 0.0 <= lo <= hi <= 1.0:
            raise ValueError("obstacle_band must satisfy 0 <= lo <= hi <= 1")
        self.lane_width = lane_width
        self.point_spacing = point_spacing
        self.num_obstacles = num_obstacles
        self.clear_distance = clear_distance  # 起点附近不放障碍
        self.obstacle_band = obstacle_band
        self.seed = seed
        self.rng = np.random.default_rng(seed)
        self._next_id = 0

    def generate(self,
                 start: DriveState,
                 length: float,
                 curvature: float = 0.0,
                 expire_at: float = math.inf,
                 start_id: Optional[int] = None) -> List[Landmark]:
        if start_id is not None:
            self._next_id = start_id

        # 1. 沿中心线采样
        centerline = self._sample_centerline(start, length, curvature)

        # 2. 车道边界点
        half = self.lane_width / 2.0
        landmarks = []
        for s in centerline:
            nx, ny = -math.sin(s.theta_rad), math.cos(s.theta_rad)
            landmarks.append(self._make(s.x + half * nx, s.y + half * ny, LandmarkType.LEFT_LINE, expire_at))
            landmarks.append(self._make(s.x - half * nx, s.y - half * ny, LandmarkType.RIGHT_LINE, expire_at))

        # 3. 车道内随机障碍
        candidates = [s for i, s in enumerate(centerline) if i * self.point_spacing >= self.clear_distance]
        if candidates and self.num_obstacles > 0:
            picks = self.rng.choice(len(candidates), size=min(self.num_obstacles, len(candidates)), replace=False)
            for idx in sorted(picks):
                s = candidates[idx]
                lo, hi = self.obstacle_band
                side = 1.0 if self.rng.random() < 0.5 else -1.0
                offset = side * half * self.rng.uniform(lo, hi)
                nx, ny = -math.sin(s.theta_rad), math.cos(s.theta_rad)
                landmarks.append(self._make(s.x + offset * nx, s.y + offset * ny, LandmarkType.OBSTACLE, expire_at))

        return landmarks

    def _sample_centerline(self, start: DriveState, length: float, curvature: float) -> List[DriveState]:
        n = int(math.floor(length / self.point_spacing)) + 1
        state = DriveState(start.x, start.y, start.theta_rad, curvature, start.speed)
        states = [state]
        for _ in range(n - 1):
            state = step_distance(state, self.point_spacing)
            states.append(state)
        return states

    def _make(self, x: float, y: float, landmark_type: LandmarkType, expire_at: float) -> Landmark:
        lm = Landmark(self._next_id, float(x), float(y), landmark_type, expire_at)
        self._next_id += 1
        return lm
