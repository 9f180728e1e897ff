"""Shared service instances."""

from functools import lru_cache

from ..config import Config
from .analytics_service import AnalyticsService
from .calculator_service import CalculatorService
from .finder_service import RouteFinderService
from .theme_service import ThemeStore


@lru_cache
def get_config() -> Config:
    return Config()


@lru_cache
def get_calculator_service() -> CalculatorService:
    """
    Get or create the calculator service.
    
    Returns:
        CalculatorService instance
    """
    return CalculatorService(get_config())


@lru_cache
def get_theme_store() -> ThemeStore:
    """Get the theme store; the preference file is read on first use."""
    return ThemeStore(get_config().THEME_STORE_PATH)


@lru_cache
def get_finder_service() -> RouteFinderService:
    return RouteFinderService(get_config().ROUTE_SEARCH_DELAY_SECONDS)


@lru_cache
def get_analytics_service() -> AnalyticsService:
    return AnalyticsService(get_config().ANALYTICS_DELAY_SECONDS)
