"""Schemas for eco route finder endpoints."""

from typing import List, Optional
from pydantic import BaseModel, Field

from ..models.eco_route import EcoRouteOption


class RouteSearchRequest(BaseModel):
    """Request model for an eco route search."""
    
    origin: Optional[str] = Field(None, alias="from")
    destination: Optional[str] = Field(None, alias="to")
    date: Optional[str] = Field(None, description="Travel date, YYYY-MM-DD")
    
    model_config = {"populate_by_name": True}


class RouteSearchResponse(BaseModel):
    """Response model for an eco route search."""
    
    heading: str
    date: Optional[str] = None
    options: List[EcoRouteOption]
