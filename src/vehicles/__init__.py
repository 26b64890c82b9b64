# [入口] 负责暴露类，让外部调用更简洁

# src/vehicles/__init__.py

# 用户可以直接从 vehicles 包导入，而不需要知道具体文件名
from .base import VehicleBase
from .bicycle import BicycleVehicle, step_distance, step_time
from .config import BicycleConfig, VehicleConfig

# 定义对外暴露的列表
__all__ = ["VehicleBase", "BicycleVehicle", "BicycleConfig", "VehicleConfig",
           "step_distance", "step_time"]
