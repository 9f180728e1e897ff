"""Schemas for calculator and offset endpoints."""

from typing import Optional, Union
from pydantic import BaseModel, Field


class CalculateRequest(BaseModel):
    """Calculator form values as entered; validation happens in the service."""
    
    departure: Optional[str] = Field(None, description="Departure airport code (IATA)")
    arrival: Optional[str] = Field(None, description="Arrival airport code (IATA)")
    cabin_class: Optional[str] = Field("economy", description="economy, premium, business or first")
    passengers: Union[int, float, str, None] = Field(1, description="Number of passengers")
    
    class Config:
        json_schema_extra = {
            "example": {
                "departure": "lax",
                "arrival": "ORD",
                "cabin_class": "business",
                "passengers": 2,
            }
        }


class ErrorResponse(BaseModel):
    """User-facing error with how long the UI should show it."""
    
    error: str
    field: Optional[str] = None
    dismiss_after_seconds: int = 5


class OffsetResponse(BaseModel):
    """Response model for offset pricing."""
    
    amount_kg: float
    cost: str = Field(..., description="Offset cost in dollars, two decimals")


class StatusResponse(BaseModel):
    """Response model for calculator status."""
    
    loading: bool
    pending_calculations: int
