import logging
import time
import os
from collections import Counter
from typing import Any, List, Tuple, Dict, Optional, Sequence
from src.planning.interfaces import IPlannerObserver


def _type_counts(landmarks: Sequence[Any]) -> Dict[str, int]:
    """按路标类型统计数量，如 {'obstacle': 2, 'left_line': 3}"""
    return dict(Counter(lm.landmark_type.value for lm in landmarks))


class EfficientObserver(IPlannerObserver):
    """
    高效运行模式
    规划器默认使用它：不记录搜索树和路标查询，只把 ERROR 打到控制台。
    """
    def record_open_set_node(self, node: Any, cost: float = 0.0): pass
    def record_current_expansion(self, node: Any): pass
    def record_landmark_query(self, node: Any, landmarks: Sequence[Any]): pass
    def record_edge(self, start_node: Any, end_node: Any): pass
    def set_map_info(self, map_info: Any): pass
    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        if level == 'ERROR':
            print(f"[ERROR] {message}")


class ExperimentObserver(IPlannerObserver):
    """
    实验模式
    记录一次规划的搜索树 (入队状态、扩展状态、父子边) 和每个扩展节点的路标查询，
    用于参数比较和调试图回放。
    """
    def __init__(self):
        # (x, y, 累计代价)
        self.open_set_history: List[Tuple[float, float, float]] = []
        # 按扩展顺序的 DriveState
        self.expanded_nodes: List[Any] = []
        # (父状态, 子状态)
        self.edges: List[Tuple[Any, Any]] = []
        # (x, y, 命中的路标数)
        self.query_history: List[Tuple[float, float, int]] = []
        # 整次规划中各类型路标被查询命中的次数
        self.landmark_hits: Counter = Counter()
        # 规划开始时的路标快照
        self.map_info = None

    def record_open_set_node(self, node: Any, cost: float = 0.0):
        self.open_set_history.append((node.x, node.y, cost))

    def record_current_expansion(self, node: Any):
        self.expanded_nodes.append(node)

    def record_landmark_query(self, node: Any, landmarks: Sequence[Any]):
        self.query_history.append((node.x, node.y, len(landmarks)))
        self.landmark_hits.update(lm.landmark_type for lm in landmarks)

    def record_edge(self, start_node: Any, end_node: Any):
        self.edges.append((start_node, end_node))

    def set_map_info(self, map_info: Any):
        self.map_info = map_info

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        # 实验脚本自己打印结果，这里保持安静
        pass


class DebugObserver(IPlannerObserver):
    """
    Debug 模式
    用于分析一次规划为什么贴着路标走或者迟迟到不了视界：
    每次扩展写下车辆位姿和曲率，以及该位置查询到的路标按类型的分布。
    同时保留 ExperimentObserver 的数据，日志可以和调试图对照。
    """
    def __init__(self, log_dir: str = "logs/planning_debug"):
        self.viz_observer = ExperimentObserver()

        self.log_dir = log_dir
        os.makedirs(self.log_dir, exist_ok=True)

        timestamp = time.strftime("%Y%m%d_%H%M%S")
        log_file = os.path.join(self.log_dir, f"plan_debug_{timestamp}.log")

        # 同一秒内可能有多个会话写到不同目录，logger 名称带上目录
        self.logger = logging.getLogger(f"PlannerDebug_{timestamp}_{os.path.abspath(self.log_dir)}")
        self.logger.setLevel(logging.DEBUG)

        # 避免添加重复 Handler
        if not self.logger.handlers:
            fh = logging.FileHandler(log_file, encoding='utf-8')
            fh.setLevel(logging.DEBUG)
            formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
            fh.setFormatter(formatter)
            self.logger.addHandler(fh)

        self.logger.info("=== Debug Session Started ===")

    def record_open_set_node(self, node: Any, cost: float = 0.0):
        self.viz_observer.record_open_set_node(node, cost)

    def record_current_expansion(self, node: Any):
        self.viz_observer.record_current_expansion(node)
        self.logger.debug(
            f"Expand #{len(self.viz_observer.expanded_nodes)} at "
            f"({node.x:.3f}, {node.y:.3f}) heading={node.theta_rad:.3f} curvature={node.curvature:.3f}"
        )

    def record_landmark_query(self, node: Any, landmarks: Sequence[Any]):
        self.viz_observer.record_landmark_query(node, landmarks)
        if landmarks:
            self.logger.debug(f"Landmark query: {len(landmarks)} hit(s) {_type_counts(landmarks)}")

    def record_edge(self, start_node: Any, end_node: Any):
        self.viz_observer.record_edge(start_node, end_node)

    def set_map_info(self, map_info: Any):
        self.viz_observer.set_map_info(map_info)
        self.logger.info(f"Landmark snapshot: {len(map_info)} landmarks {_type_counts(map_info)}")

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        if payload:
            message = f"{message} | Payload: {payload}"

        if level == 'DEBUG':
            self.logger.debug(message)
        elif level == 'WARN':
            self.logger.warning(message)
        elif level == 'ERROR':
            self.logger.error(message)
        else:
            self.logger.info(message)

    def close(self):
        """释放文件句柄 (测试中清理临时目录前需要调用)"""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

    # 与 ExperimentObserver 相同的只读视图，绘图代码可以直接使用
    @property
    def expanded_nodes(self): return self.viz_observer.expanded_nodes
    @property
    def open_set_history(self): return self.viz_observer.open_set_history
    @property
    def edges(self): return self.viz_observer.edges
    @property
    def query_history(self): return self.viz_observer.query_history
    @property
    def landmark_hits(self): return self.viz_observer.landmark_hits
    @property
    def map_info(self): return self.viz_observer.map_info
