"""Routes package for API endpoints."""

from .calculator_routes import router as calculator_router
from .theme_routes import router as theme_router
from .finder_routes import router as finder_router
from .analytics_routes import router as analytics_router

__all__ = ["calculator_router", "theme_router", "finder_router", "analytics_router"]
