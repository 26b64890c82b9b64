# src/map/simple_map.py
from typing import Callable, Iterable, List

from .base import LandmarkMapBase
from src.types import Landmark, Pos


class SimpleLandmarkMap(LandmarkMapBase):
    """线性扫描实现，所有查询 O(N)"""

    def __init__(self):
        super().__init__()
        self._landmarks: List[Landmark] = []

    def query_radius(self, center: Pos, max_distance: float) -> List[Landmark]:
        return [lm for lm in self._landmarks if lm.pos.dist(center) < max_distance]

    def insert_batch(self, landmarks: Iterable[Landmark]):
        self._landmarks.extend(self._validated(landmarks))

    def _remove_matching(self, predicate: Callable[[Landmark], bool]) -> List[Landmark]:
        kept, removed = [], []
        for lm in self._landmarks:
            (removed if predicate(lm) else kept).append(lm)
        self._landmarks = kept
        return removed

    def all_landmarks(self) -> List[Landmark]:
        return list(self._landmarks)

    def __len__(self) -> int:
        return len(self._landmarks)
