# src/map/grid_map.py
import itertools
import math
from collections import defaultdict
from typing import Callable, Dict, Iterable, Iterator, List, Tuple

from .base import LandmarkMapBase
from src.types import Landmark, Pos


class GridLandmarkMap(LandmarkMapBase):
    """
    均匀网格分桶的路标地图。
    查询只扫描与查询圆相交的格子，结果集合与线性扫描完全一致，
    并按插入顺序返回。
    """

    def __init__(self, cell_size: float = 0.2):
        super().__init__()
        if cell_size <= 0:
            raise ValueError("cell_size must be positive")
        self._cell_size = cell_size
        # 插入序号 -> 路标 (dict 保持插入顺序)
        self._landmarks: Dict[int, Landmark] = {}
        # 格子索引 -> 插入序号列表
        self._cells: Dict[Tuple[int, int], List[int]] = defaultdict(list)
        self._seq = itertools.count()

    @property
    def cell_size(self) -> float:
        return self._cell_size

    def world_to_grid(self, x: float, y: float) -> Tuple[int, int]:
        """
        物理坐标 -> 格子索引
        向下取整：floor(x / cell)，负坐标同样适用
        """
        return math.floor(x / self._cell_size), math.floor(y / self._cell_size)

    def query_radius(self, center: Pos, max_distance: float) -> List[Landmark]:
        if max_distance <= 0 or not self._landmarks:
            return []

        hits = [seq for seq in self._candidates(center, max_distance)
                if self._landmarks[seq].pos.dist(center) < max_distance]
        hits.sort()
        return [self._landmarks[seq] for seq in hits]

    def _candidates(self, center: Pos, max_distance: float) -> Iterator[int]:
        """
        查询圆外接正方形覆盖的格子比已占用格子还多时，直接遍历已占用格子，
        查询耗时只与路标数量相关，不随半径增长。
        """
        span = 2.0 * max_distance / self._cell_size + 1.0
        bounded = math.isfinite(span) and math.isfinite(center.x) and math.isfinite(center.y)
        if not bounded or span * span > len(self._cells):
            for bucket in self._cells.values():
                yield from bucket
            return

        x_min, y_min = self.world_to_grid(center.x - max_distance, center.y - max_distance)
        x_max, y_max = self.world_to_grid(center.x + max_distance, center.y + max_distance)
        for ix in range(x_min, x_max + 1):
            for iy in range(y_min, y_max + 1):
                # 用 get 避免 defaultdict 为空格子创建条目
                yield from self._cells.get((ix, iy), ())

    def insert_batch(self, landmarks: Iterable[Landmark]):
        for lm in self._validated(landmarks):
            seq = next(self._seq)
            self._landmarks[seq] = lm
            self._cells[self.world_to_grid(lm.x, lm.y)].append(seq)

    def _remove_matching(self, predicate: Callable[[Landmark], bool]) -> List[Landmark]:
        removed = []
        for seq, lm in list(self._landmarks.items()):
            if not predicate(lm):
                continue
            del self._landmarks[seq]
            key = self.world_to_grid(lm.x, lm.y)
            bucket = self._cells[key]
            bucket.remove(seq)
            if not bucket:
                del self._cells[key]
            removed.append(lm)
        return removed

    def all_landmarks(self) -> List[Landmark]:
        return list(self._landmarks.values())

    def __len__(self) -> int:
        return len(self._landmarks)
