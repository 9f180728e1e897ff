"""API schemas for request/response models."""

from .calculator_schemas import CalculateRequest, ErrorResponse, OffsetResponse, StatusResponse
from .theme_schemas import ThemeResponse, ThemeUpdateRequest
from .finder_schemas import RouteSearchRequest, RouteSearchResponse
from .analytics_schemas import AnalyticsResponse, ProgressCircle

__all__ = [
    "CalculateRequest",
    "ErrorResponse",
    "OffsetResponse",
    "StatusResponse",
    "ThemeResponse",
    "ThemeUpdateRequest",
    "RouteSearchRequest",
    "RouteSearchResponse",
    "AnalyticsResponse",
    "ProgressCircle",
]
