# src/planning/planners/base.py
from abc import ABC, abstractmethod
from typing import Optional
from src.types import DriveState, Path
from src.map.base import LandmarkMapBase
from src.planning.interfaces import IPlannerObserver

class PlannerBase(ABC):
    """
    所有局部规划器的抽象基类
    """

    @abstractmethod
    def find_path(self,
                  start: DriveState,
                  landmark_map: LandmarkMapBase,
                  debugger: Optional[IPlannerObserver] = None) -> Path:
        """
        执行一次固定视界的局部规划 (同步阻塞，规划期间不得修改 landmark_map)
        :param start: 当前车辆状态
        :param landmark_map: 路标地图
        :param debugger: 观察者钩子 (用于可视化搜索过程)
        :return: 位置序列 (如果失败返回空 Path)
        """
        pass
