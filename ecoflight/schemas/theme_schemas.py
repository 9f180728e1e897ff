"""Schemas for theme endpoints."""

from pydantic import BaseModel


class ThemeResponse(BaseModel):
    """Current theme preference."""
    
    dark_mode: bool
    icon: str


class ThemeUpdateRequest(BaseModel):
    dark_mode: bool
