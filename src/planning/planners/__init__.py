# src/planners/__init__.py

from .base import PlannerBase
from .horizon_search import HorizonPlanner, reconstruct_path


__all__ = [
    "PlannerBase",
    "HorizonPlanner",
    "reconstruct_path",
]
