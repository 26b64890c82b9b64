# src/map/base.py
from abc import ABC, abstractmethod
from typing import Callable, Iterable, List

from src.types import Landmark, Pos


class LandmarkMapBase(ABC):
    """
    路标地图抽象基类
    感知模块与规划模块之间唯一的数据边界。
    约定：被删除路标的 id 会按删除顺序进入缓冲区，直到 drain_removed_ids() 被调用。
    """

    def __init__(self):
        self._removed_ids: List[int] = []

    @abstractmethod
    def query_radius(self, center: Pos, max_distance: float) -> List[Landmark]:
        """返回与 center 欧氏距离严格小于 max_distance 的所有路标 (顺序无语义)"""
        pass

    @abstractmethod
    def insert_batch(self, landmarks: Iterable[Landmark]):
        """批量追加路标，保留调用方分配的 id，不去重；坐标非有限时抛 ValueError"""
        pass

    @abstractmethod
    def _remove_matching(self, predicate: Callable[[Landmark], bool]) -> List[Landmark]:
        """删除满足 predicate 的路标，按存储顺序返回被删除的路标"""
        pass

    @abstractmethod
    def all_landmarks(self) -> List[Landmark]:
        """当前存储的全部路标 (快照，用于可视化)"""
        pass

    @staticmethod
    def _validated(landmarks: Iterable[Landmark]) -> List[Landmark]:
        """整批检查，有非有限坐标时整批拒绝，地图保持不变"""
        batch = list(landmarks)
        for lm in batch:
            if not lm.is_finite():
                raise ValueError(f"Landmark {lm.landmark_id} has non-finite position ({lm.x}, {lm.y})")
        return batch

    def remove_where(self, predicate: Callable[[Landmark], bool]):
        removed = self._remove_matching(predicate)
        self._removed_ids.extend(lm.landmark_id for lm in removed)

    def remove_expired(self, now: float):
        """过期由调用方驱动，地图本身从不主动过滤"""
        self.remove_where(lambda lm: now > lm.expire_at)

    def drain_removed_ids(self) -> List[int]:
        drained, self._removed_ids = self._removed_ids, []
        return drained

    def __len__(self) -> int:
        return len(self.all_landmarks())
