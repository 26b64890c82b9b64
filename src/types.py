# src/types.py
import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple


@dataclass(frozen=True)
class Pos:
    """平面坐标点 [m]"""
    x: float
    y: float

    def dist(self, other: "Pos") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def lerp(self, other: "Pos", t: float) -> "Pos":
        return Pos(self.x + (other.x - self.x) * t,
                   self.y + (other.y - self.y) * t)

    def dist_along(self, other: "Pos", dist: float) -> "Pos":
        """从 self 朝 other 方向前进 dist 米后的点"""
        return self.lerp(other, dist / self.dist(other))


@dataclass(frozen=True)
class DriveState:
    """
    统一的车辆运动状态定义 (不可变，每次推演都生成新对象)
    """
    x: float             # [m]
    y: float             # [m]
    theta_rad: float     # [rad] 车头朝向
    curvature: float = 0.0   # [1/m] 有符号曲率，0 表示直行
    speed: float = 0.0       # [m/s]

    @property
    def pos(self) -> Pos:
        return Pos(self.x, self.y)

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in
                   (self.x, self.y, self.theta_rad, self.curvature, self.speed))


class LandmarkType(Enum):
    """感知输出的路标类型 (封闭集合)"""
    LEFT_LINE = "left_line"
    RIGHT_LINE = "right_line"
    OBSTACLE = "obstacle"
    ARROW_LEFT = "arrow_left"
    ARROW_RIGHT = "arrow_right"


@dataclass(frozen=True)
class Landmark:
    """
    单个感知路标。
    landmark_id 由上游感知模块分配，地图只存储不分配。
    """
    landmark_id: int
    x: float
    y: float
    landmark_type: LandmarkType
    expire_at: float = math.inf

    @property
    def pos(self) -> Pos:
        return Pos(self.x, self.y)

    def is_finite(self) -> bool:
        """坐标有限即可，expire_at 允许为 inf (永不过期)"""
        return math.isfinite(self.x) and math.isfinite(self.y)


class SearchNode:
    """搜索树节点 (创建后只读，多个子节点共享同一个父节点)"""
    __slots__ = ("state", "cost", "parent", "steps")

    def __init__(self,
                 state: DriveState,
                 cost: float,
                 parent: Optional["SearchNode"] = None,
                 steps: int = 0):
        self.state = state
        self.cost = cost        # 从根节点累计的代价
        self.parent = parent
        self.steps = steps

    def __lt__(self, other):
        return self.cost < other.cost

    def __repr__(self):
        return (f"SearchNode(x={self.state.x:.3f}, y={self.state.y:.3f}, "
                f"cost={self.cost:.3f}, steps={self.steps})")

    # 为了方便访问 x, y
    @property
    def x(self): return self.state.x

    @property
    def y(self): return self.state.y


@dataclass(frozen=True)
class Path:
    """规划结果：从起点到规划视界末端的有序位置序列"""
    points: Tuple[Pos, ...] = ()

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Pos]:
        return iter(self.points)

    def __getitem__(self, index):
        return self.points[index]

    @property
    def is_empty(self) -> bool:
        return len(self.points) == 0
