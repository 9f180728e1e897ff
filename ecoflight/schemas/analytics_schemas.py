"""Schemas for analytics endpoints."""

from typing import List
from pydantic import BaseModel


class ProgressCircle(BaseModel):
    value: float
    offset: float


class AnalyticsResponse(BaseModel):
    """Response model for the analytics dashboard."""
    
    period: str
    chart_url: str
    progress: List[ProgressCircle]
