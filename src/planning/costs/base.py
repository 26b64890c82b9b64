# src/planning/costs/base.py
from abc import ABC, abstractmethod
from typing import Sequence
from src.types import DriveState, Landmark

class CostFunction(ABC):
    """
    代价函数基类 (Strategy Interface)
    用于计算候选状态在附近路标下的局部代价。
    """
    @abstractmethod
    def calculate(self, state: DriveState, nearby: Sequence[Landmark]) -> float:
        """
        计算单个状态的局部代价
        :param state: 候选状态
        :param nearby: 该状态附近的路标 (由父节点位置查询得到)
        :return: 代价数值 (有限输入必须返回有限值)
        """
        pass
