"""Configuration module for emission constants, route data, and settings."""

from typing import Dict, List, Optional
from pydantic_settings import BaseSettings


# Cabin classes
DEFAULT_CABIN_CLASS = "economy"


# Emission factors in kg CO2e per passenger-km
EMISSION_FACTORS: Dict[str, float] = {
    "economy": 0.09,
    "premium": 0.14,
    "business": 0.26,
    "first": 0.40,
}


# $15 per 1000 kg (1 metric ton)
OFFSET_PRICE_PER_KG = 0.015


# Known routes in km, keyed "FROM-TO"
ROUTE_DATABASE: Dict[str, int] = {
    "LHR-JFK": 5550,
    "JFK-LHR": 5550,
    "LAX-ORD": 2800,
    "ORD-LAX": 2800,
    "SFO-DXB": 13000,
    "DXB-SFO": 13000,
    "CDG-BCN": 850,
    "BCN-CDG": 850,
    "SYD-MEL": 705,
    "MEL-SYD": 705,
}

# Average medium-haul flight, used for unknown routes
DEFAULT_DISTANCE_KM = 2500


# Equivalence constants (approximate)
KG_CO2_PER_LITER_GASOLINE = 2.3
AVG_CAR_EMISSION_PER_KM = 0.12  # kg CO2 per km
AVG_CAR_ANNUAL_EMISSION = 2000.0  # kg CO2 per year
TREE_ABSORPTION_PER_YEAR = 21.77  # kg CO2 per tree per year

# Totals at or above this are shown in metric tons
METRIC_TON_THRESHOLD_KG = 1000.0


# Theme preference
THEME_STORAGE_KEY = "darkMode"
THEME_ICON_DARK = "☀️"
THEME_ICON_LIGHT = "🌙"


# Analytics dashboard
CHART_PLACEHOLDER_URL = "https://via.placeholder.com/600x300?text=Chart+Data"
PROGRESS_CIRCLE_RADIUS = 15.9155


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    # Simulated latency (seconds)
    RESOLVER_DELAY_SECONDS: float = 0.8
    ROUTE_SEARCH_DELAY_SECONDS: float = 1.5
    ANALYTICS_DELAY_SECONDS: float = 1.0

    # How long the UI keeps an error message visible
    ERROR_DISMISS_SECONDS: int = 5

    # Extra routes (CSV with departure,arrival,distance_km)
    ROUTES_CSV: Optional[str] = None

    # Remote distance service; the static route table is used when unset
    DISTANCE_SERVICE_URL: Optional[str] = None
    DISTANCE_SERVICE_TIMEOUT: int = 10
    DISTANCE_SERVICE_RETRIES: int = 3

    # Theme preference storage
    THEME_STORE_PATH: str = "theme.json"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "ecoflight.log"

    # Web
    CORS_ORIGINS: List[str] = ["*"]

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }
