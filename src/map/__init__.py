# src/map/__init__.py

from .base import LandmarkMapBase
from .simple_map import SimpleLandmarkMap
from .grid_map import GridLandmarkMap
from .generator import LandmarkGenerator

__all__ = ["LandmarkMapBase", "SimpleLandmarkMap", "GridLandmarkMap", "LandmarkGenerator"]
