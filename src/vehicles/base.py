# src/vehicles/base.py
from abc import ABC, abstractmethod
from typing import List
from .config import VehicleConfig
from src.types import DriveState


class VehicleBase(ABC):
    """
    车辆接口基类
    """
    def __init__(self, config: VehicleConfig):
        self.config = config

    @abstractmethod
    def kinematic_propagate(self, start: DriveState, control: float, dt: float) -> DriveState:
        """核心物理推演，留给子类实现"""
        pass

    @abstractmethod
    def expand(self, state: DriveState, dt: float) -> List[DriveState]:
        """
        生成搜索用的后继状态。

        Args:
            state: 当前状态
            dt: 每个后继向前推演的时间 [s]

        Returns:
            后继状态列表，顺序与控制量采样顺序一致
        """
        pass
