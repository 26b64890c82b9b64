# [配置] 该模块独有的配置数据类
from dataclasses import dataclass, field
import numpy as np


@dataclass
class VehicleConfig:
    """
    所有车辆配置的公共基类 (VehicleBase 只依赖这个类型)
    规划期间速度保持为起点速度，不需要速度上限
    """


@dataclass
class BicycleConfig(VehicleConfig):
    """
    恒定曲率自行车模型配置
    规划时只对曲率做稀疏采样，速度保持不变
    """
    # --- 1. 运动学限制 ---
    max_curvature: float = 1.0 / 0.3     # [1/m] 即最小转弯半径 0.3m
    turn_samples_per_side: int = 3       # 每侧采样数

    # --- 2. 派生属性 (自动计算，外部只读) ---
    curvature_samples: np.ndarray = field(init=False)  # 2k+1 个均匀分布的曲率

    def __post_init__(self):
        if self.turn_samples_per_side < 0:
            raise ValueError("turn_samples_per_side must be >= 0")

        # k=3 -> [-max, -2max/3, -max/3, 0, max/3, 2max/3, max]
        n = 2 * self.turn_samples_per_side + 1
        if self.turn_samples_per_side == 0:
            self.curvature_samples = np.zeros(1)
        else:
            self.curvature_samples = np.linspace(-self.max_curvature, self.max_curvature, n)
