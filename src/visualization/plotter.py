# 绘图逻辑 (Matplotlib)
# 纯观察者：只读取路标快照和路径，不影响规划结果

from typing import Iterable, Optional, Sequence, Tuple

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from src.types import Landmark, LandmarkType, Path, Pos
from src.visualization.observers import ExperimentObserver

# 路标类型 -> 颜色 (RGB, 0~1)
LANDMARK_COLORS = {
    LandmarkType.LEFT_LINE: (0.0, 0.0, 1.0),      # 蓝
    LandmarkType.RIGHT_LINE: (1.0, 1.0, 0.0),     # 黄
    LandmarkType.OBSTACLE: (1.0, 0.0, 1.0),       # 品红
    LandmarkType.ARROW_LEFT: (0.4, 0.4, 0.4),
    LandmarkType.ARROW_RIGHT: (0.6, 0.6, 0.6),
}


class MapDebugPlotter:
    """
    把路标和路径画到固定大小的栅格图上。
    像素坐标 = center + scale * 世界坐标，y 轴向下 (与图像坐标一致)。
    """
    def __init__(self,
                 size_px: int = 600,
                 scale: float = 800.0,                 # 像素/米
                 center_px: Tuple[float, float] = (300.0, 300.0),
                 dpi: int = 100):
        self.size_px = size_px
        self.scale = scale
        self.center_px = center_px
        self.dpi = dpi

    def map_to_img(self, pos: Pos) -> Tuple[float, float]:
        return (self.center_px[0] + self.scale * pos.x,
                self.center_px[1] + self.scale * pos.y)

    def draw(self,
             landmarks: Iterable[Landmark],
             path: Path,
             observer: Optional[ExperimentObserver] = None) -> Figure:
        fig = Figure(figsize=(self.size_px / self.dpi, self.size_px / self.dpi), dpi=self.dpi)
        FigureCanvasAgg(fig)
        ax = fig.add_axes([0, 0, 1, 1])
        ax.set_facecolor('black')
        ax.set_xlim(0, self.size_px)
        ax.set_ylim(self.size_px, 0)
        ax.set_axis_off()

        # 1. 搜索过程 (可选)
        if observer is not None and observer.expanded_nodes:
            pts = [self.map_to_img(Pos(n.x, n.y)) for n in observer.expanded_nodes]
            ax.scatter([p[0] for p in pts], [p[1] for p in pts], s=1, c='cyan', alpha=0.3)

        # 2. 路标
        for lm in landmarks:
            px, py = self.map_to_img(lm.pos)
            ax.plot(px, py, 'o', markersize=3, color=LANDMARK_COLORS[lm.landmark_type])

        # 3. 路径
        if len(path) > 1:
            pts = [self.map_to_img(p) for p in path]
            ax.plot([p[0] for p in pts], [p[1] for p in pts], '-', color='white', linewidth=1)

        return fig

    def save(self, fig: Figure, save_path: str):
        fig.savefig(save_path, dpi=self.dpi, facecolor='black')


def draw_map_debug(landmarks: Sequence[Landmark], path: Path, save_path: str,
                   observer: Optional[ExperimentObserver] = None) -> Figure:
    """画一张调试图并保存，返回 Figure 便于测试检查"""
    plotter = MapDebugPlotter()
    fig = plotter.draw(landmarks, path, observer)
    plotter.save(fig, save_path)
    return fig
