# [关键] 全局规划配置定义

# src/config.py
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class PlannerConfig:
    # --- 1. 时间离散 ---
    step_size_seconds: float = 0.1      # [s] 每一步前向推演的时间
    plan_length_seconds: float = 3.0    # [s] 规划视界

    # --- 2. 运动采样 ---
    turn_sample_count_per_side: int = 3     # 每侧曲率采样数 (总分支数 2k+1)
    max_curvature: float = 1.0 / 0.3        # [1/m] 最小转弯半径 0.3m

    # --- 3. 路标查询与代价 ---
    landmark_query_radius: float = 0.5  # [m]
    proximity_start_dist: float = 0.4   # [m] 超过这个距离不再惩罚
    proximity_max_weight: float = 5.0   # 贴着路标时的最大惩罚
    curvature_weight: float = 0.1
    step_bias: float = -0.1             # 每步固定偏置

    # --- 4. 搜索预算 ---
    # None 表示不限制；达到上限时本周期返回空路径
    max_expansions: Optional[int] = None

    # --- 5. 派生属性 (自动计算，外部只读) ---
    plan_steps: int = field(init=False)

    def __post_init__(self):
        if self.step_size_seconds <= 0 or self.plan_length_seconds <= 0:
            raise ValueError("step_size_seconds and plan_length_seconds must be positive")
        if self.turn_sample_count_per_side < 0:
            raise ValueError("turn_sample_count_per_side must be >= 0")
        if self.max_curvature < 0:
            raise ValueError("max_curvature must be >= 0")
        if self.landmark_query_radius <= 0 or self.proximity_start_dist <= 0:
            raise ValueError("landmark_query_radius and proximity_start_dist must be positive")
        if self.max_expansions is not None and self.max_expansions < 1:
            raise ValueError("max_expansions must be >= 1 or None")

        # 3.0 / 0.1 在浮点下不一定恰好是 30，取最近整数
        self.plan_steps = int(round(self.plan_length_seconds / self.step_size_seconds))
        if self.plan_steps < 1:
            raise ValueError("plan_length_seconds must cover at least one step")
