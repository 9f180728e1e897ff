"""Calculator input and result models."""

from typing import List
from pydantic import BaseModel

from .emissions import Comparison


class CalculationInput(BaseModel):
    """Validated calculator form values."""
    
    departure: str
    arrival: str
    cabin_class: str
    passengers: int


class CalculationResult(BaseModel):
    """Everything a presentation layer needs to render an estimate."""
    
    departure: str
    arrival: str
    cabin_class: str
    passengers: int
    distance_km: float
    distance_display: str
    total_co2e_kg: float
    per_passenger_co2e_kg: float
    total_display: str
    per_passenger_display: str
    total_label: str
    comparison_heading: str
    comparisons: List[Comparison]
    
    class Config:
        json_schema_extra = {
            "example": {
                "departure": "LAX",
                "arrival": "ORD",
                "cabin_class": "business",
                "passengers": 2,
                "distance_km": 2800,
                "distance_display": "~2800 km",
                "total_co2e_kg": 1456.0,
                "per_passenger_co2e_kg": 728.0,
                "total_display": "1.5 metric tons",
                "per_passenger_display": "728 kg",
                "total_label": "Total for 2 passengers",
                "comparison_heading": "This is equivalent to:",
                "comparisons": [
                    {"icon": "fas fa-gas-pump", "text": "Burning 0.6 thousand liters of gasoline"},
                    {"icon": "fas fa-car", "text": "Driving 12.1 thousand km in an average car"},
                    {"icon": "fas fa-calendar", "text": "9 months of an average car's emissions"},
                    {"icon": "fas fa-tree", "text": "67 trees needed to absorb this CO₂ in one year"},
                ],
            }
        }
