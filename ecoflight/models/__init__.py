"""Domain models package."""

from .emissions import EmissionFactorTable, ComparisonConstants, EmissionsRequest, EmissionsResult, Comparison
from .route import RouteTable, route_key
from .calculation import CalculationInput, CalculationResult
from .eco_route import EcoRouteOption

__all__ = [
    "EmissionFactorTable",
    "ComparisonConstants",
    "EmissionsRequest",
    "EmissionsResult",
    "Comparison",
    "RouteTable",
    "route_key",
    "CalculationInput",
    "CalculationResult",
    "EcoRouteOption",
]
