# src/costs/__init__.py

from .base import CostFunction
from .proximity_cost import ProximityCost
from .direction_cost import TravelDirectionCost, no_penalty
from .curvature_cost import CurvatureCost
from .local_cost import LocalCostModel

__all__ = ['CostFunction', 'ProximityCost', 'TravelDirectionCost', 'no_penalty',
           'CurvatureCost', 'LocalCostModel']
